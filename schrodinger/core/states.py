# Required for Sphinx to follow autodoc_type_aliases
from __future__ import annotations

__all__ = ['basis', 'coherent', 'maxmixed']

import numbers

import numpy as np
import scipy.sparse

from .dimensions import Dims
from .errors import ConstructionError
from .operators import displacementop, qeye
from .qobj import Ket, Operator
from ..typing import DimsLike

_COHERENT_METHODS = ('operator', 'analytic')


def basis(N: int, n: int | list[int] = 0, dims: DimsLike = None) -> Ket:
    """Generates the vector representation of a Fock state.

    Parameters
    ----------
    N : int
        Number of basis states in the Hilbert space.

    n : int or list of int, default: 0
        Level of the basis vector, counted from 0.  A list gives one level
        per factor of ``dims``.

    dims : int, sequence of int or :obj:`.Dims`, optional
        Composite dimensions of the space, whose product must be ``N``.

    Returns
    -------
    state : :class:`.Ket`
        Sparse ket with a single 1 at the requested level.

    Examples
    --------
    >>> basis(4, [1, 0], dims=(2, 2)).full(squeeze=True) # doctest: +SKIP
    array([0., 0., 1., 0.])
    """
    if isinstance(N, bool) or not isinstance(N, numbers.Integral) or N < 1:
        raise ValueError("Hilbert space dimension must be a positive integer")
    dims = Dims(N if dims is None else dims)
    if dims.size != N:
        raise ConstructionError(
            f"dimensions {dims} do not describe a {N}-d space"
        )
    if isinstance(n, numbers.Integral):
        if not 0 <= n < N:
            raise ValueError(f"level {n} is outside of a {N}-d space")
        index = int(n)
    else:
        try:
            index = dims.dims2idx(n)
        except IndexError as exc:
            raise ValueError(f"levels {list(n)} are outside of {dims}") \
                from exc
    data = scipy.sparse.csc_matrix(
        ([1.], ([index], [0])), shape=(N, 1), dtype=np.float64
    )
    return Ket(data, dims=dims, copy=False)


def coherent(N: int, alpha: complex, method: str = "analytic") -> Ket:
    """Generates a coherent state with eigenvalue alpha.

    Parameters
    ----------
    N : int
        Number of Fock states in Hilbert space.

    alpha : float/complex
        Eigenvalue of coherent state.

    method : string {'analytic', 'operator'}, default: 'analytic'
        Method for generating coherent state.

    Returns
    -------
    state : :class:`.Ket`
        Dense ket of the coherent state.

    Notes
    -----
    With the 'analytic' method the coherent state is generated using the
    analytical formula for the coherent state coefficients in the Fock basis.
    This method does not guarantee that the state is normalized if truncated
    to a small number of Fock states, but would in that case give more
    accurate coefficients.  With the 'operator' method, the coherent state is
    generated by displacing the vacuum state using the displacement operator
    defined in the truncated Hilbert space of size 'N'. This method
    guarantees that the resulting state is normalized.
    """
    if method == "operator":
        return (displacementop(N, alpha) @ basis(N, 0)).to("dense")

    elif method == "analytic":
        if isinstance(N, bool) or not isinstance(N, numbers.Integral) \
                or N < 1:
            raise ValueError(
                "Hilbert space dimension must be a positive integer"
            )
        dtype = complex if np.iscomplexobj(alpha) else float
        sqrtn = np.sqrt(np.arange(0, N, dtype=dtype))
        sqrtn[0] = 1  # Get rid of divide by zero warning
        data = alpha / sqrtn
        data[0] = np.exp(-abs(alpha)**2 / 2.0)
        np.cumprod(data, out=sqrtn)  # Reuse sqrtn array
        return Ket(sqrtn, copy=False)
    raise ValueError(
        "The method option can only take values in " + repr(_COHERENT_METHODS)
    )


def maxmixed(N: int, dims: DimsLike = None) -> Operator:
    """
    Maximally mixed state ``qeye(N) / N``.

    Parameters
    ----------
    N : int
        Number of basis states in the Hilbert space.

    dims : int, sequence of int or :obj:`.Dims`, optional
        Composite dimensions of the space, whose product must be ``N``.

    Returns
    -------
    dm : :class:`.Operator`
        Sparse density matrix, flagged Hermitian.
    """
    return qeye(N, dims) / N
