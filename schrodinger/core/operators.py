"""
This module contains functions for generating Operator objects for
commonly occurring operators.
"""

__all__ = ['qzero', 'qeye', 'identity', 'destroy', 'create', 'numberop',
           'displacementop', 'squeezeop', 'projectorop', 'sylvesterop',
           'shiftop', 'clockop', 'sigmax', 'sigmay', 'sigmaz']

import numbers

import numpy as np
import scipy.sparse

from . import data as _data
from .qobj import Operator


def _check_size(N):
    if isinstance(N, bool) or not isinstance(N, numbers.Integral) or N < 1:
        raise ValueError("Hilbert space dimension must be a positive integer")
    return int(N)


def _sparse_operator(values, rows, cols, N, dims=None, isherm=False):
    values = np.asarray(values)
    matrix = scipy.sparse.csc_matrix(
        (values, (np.asarray(rows, dtype=int), np.asarray(cols, dtype=int))),
        shape=(N, N),
        dtype=_data.promote_dtype(values.dtype),
    )
    return Operator(matrix, dims=dims, isherm=isherm, copy=False)


def qzero(N, dims=None):
    """
    Zero operator.

    Parameters
    ----------
    N : int
        Number of basis states in the Hilbert space.

    dims : int, sequence of int or :obj:`.Dims`, optional
        Composite dimensions of the space, whose product must be ``N``.

    Returns
    -------
    qzero : :class:`.Operator`
        Sparse zero operator, flagged Hermitian.

    Examples
    --------
    >>> qzero(4, (2, 2)) # doctest: +SKIP
    4×4 Operator(sparse, isherm=True) with space dimensions 2⊗2:
    [[0. 0. 0. 0.]
     [0. 0. 0. 0.]
     [0. 0. 0. 0.]
     [0. 0. 0. 0.]]
    """
    N = _check_size(N)
    return Operator(_data.zeros(N, N), dims=dims, isherm=True, copy=False)


def qeye(N, dims=None):
    """
    Identity operator.

    Parameters
    ----------
    N : int
        Number of basis states in the Hilbert space.

    dims : int, sequence of int or :obj:`.Dims`, optional
        Composite dimensions of the space, whose product must be ``N``.

    Returns
    -------
    oper : :class:`.Operator`
        Sparse identity operator, flagged Hermitian.

    Examples
    --------
    >>> qeye(4, (2, 2)) # doctest: +SKIP
    4×4 Operator(sparse, isherm=True) with space dimensions 2⊗2:
    [[1. 0. 0. 0.]
     [0. 1. 0. 0.]
     [0. 0. 1. 0.]
     [0. 0. 0. 1.]]
    """
    N = _check_size(N)
    return Operator(_data.identity(N), dims=dims, isherm=True, copy=False)


# Name alias.
identity = qeye


def destroy(N):
    """
    Destruction (lowering) operator of a harmonic oscillator truncated to
    ``N`` levels.

    Parameters
    ----------
    N : int
        Number of basis states in the Hilbert space.

    Returns
    -------
    oper : :class:`.Operator`
        Sparse lowering operator.

    Examples
    --------
    >>> destroy(4) # doctest: +SKIP
    4×4 Operator(sparse, isherm=False) with space dimensions 4:
    [[0.         1.         0.         0.        ]
     [0.         0.         1.41421356 0.        ]
     [0.         0.         0.         1.73205081]
     [0.         0.         0.         0.        ]]
    """
    N = _check_size(N)
    levels = np.arange(1, N)
    return _sparse_operator(np.sqrt(levels), levels - 1, levels, N)


def create(N):
    """
    Creation (raising) operator of a harmonic oscillator truncated to ``N``
    levels.

    Parameters
    ----------
    N : int
        Number of basis states in the Hilbert space.

    Returns
    -------
    oper : :class:`.Operator`
        Sparse raising operator.
    """
    N = _check_size(N)
    levels = np.arange(1, N)
    return _sparse_operator(np.sqrt(levels), levels, levels - 1, N)


def numberop(N):
    """
    Number operator ``a^dag a``, diagonal with entries ``0 .. N-1``.

    Parameters
    ----------
    N : int
        Number of basis states in the Hilbert space.

    Returns
    -------
    oper : :class:`.Operator`
        Sparse number operator, flagged Hermitian.
    """
    N = _check_size(N)
    levels = np.arange(N)
    return _sparse_operator(levels.astype(float), levels, levels, N,
                            isherm=True)


def displacementop(N, alpha):
    """
    Displacement operator ``D(alpha) = exp(alpha a^dag - alpha^* a)`` in a
    truncated Hilbert space of size ``N``.

    Parameters
    ----------
    N : int
        Number of basis states in the Hilbert space.

    alpha : float or complex
        Displacement amplitude.

    Returns
    -------
    oper : :class:`.Operator`
        Dense displacement operator.

    Examples
    --------
    >>> displacementop(3, 0.5j).full() # doctest: +SKIP
    array([[ 0.88261978+0.j        ,  0.        +0.43980233j,
            -0.16600051+0.j        ],
           [ 0.        +0.43980233j,  0.64785934+0.j        ,
             0.        +0.62197392j],
           [-0.16600051+0.j        ,  0.        +0.62197392j,
             0.76523953+0.j        ]])
    """
    a = destroy(N).to("dense")
    return (alpha * a.dag() - np.conj(alpha) * a).expm()


def squeezeop(N, z):
    """
    Single-mode squeeze operator
    ``S(z) = exp((z^* a^2 - z a^dag^2) / 2)`` in a truncated Hilbert space of
    size ``N``.

    Parameters
    ----------
    N : int
        Number of basis states in the Hilbert space.

    z : float or complex
        Squeezing parameter.

    Returns
    -------
    oper : :class:`.Operator`
        Dense squeeze operator.
    """
    a = destroy(N).to("dense")
    return (0.5 * (np.conj(z) * a**2 - z * a.dag()**2)).expm()


def projectorop(N, levels):
    """
    Projector ``sum_{i in levels} |i><i|`` on one or several basis levels.

    Parameters
    ----------
    N : int
        Number of basis states in the Hilbert space.

    levels : int or iterable of int
        Levels, counted from 0, spanning the subspace projected on.

    Returns
    -------
    oper : :class:`.Operator`
        Sparse diagonal projector, flagged Hermitian.

    Examples
    --------
    >>> projectorop(5, [1, 3]) # doctest: +SKIP
    5×5 Operator(sparse, isherm=True) with space dimensions 5:
    [[0. 0. 0. 0. 0.]
     [0. 1. 0. 0. 0.]
     [0. 0. 0. 0. 0.]
     [0. 0. 0. 1. 0.]
     [0. 0. 0. 0. 0.]]
    """
    N = _check_size(N)
    if isinstance(levels, numbers.Integral):
        levels = [levels]
    levels = np.unique(np.asarray(list(levels), dtype=int))
    if levels.size and (levels[0] < 0 or levels[-1] >= N):
        raise ValueError(
            f"a {N}-d space cannot be projected on levels {list(levels)}"
        )
    return _sparse_operator(np.ones(levels.size), levels, levels, N,
                            isherm=True)


def sylvesterop(N, k, l):
    """
    Generalized Pauli matrix ``X^k Z^l`` of a ``N``-d space, where ``X`` is
    the shift (:func:`shiftop`) and ``Z`` the clock (:func:`clockop`)
    matrix: ``X^k Z^l |m> = w^(l m) |m + k>`` with ``w = exp(2i pi / N)``.

    Parameters
    ----------
    N : int
        Number of basis states in the Hilbert space.

    k, l : int
        Powers of the shift and clock matrices.

    Returns
    -------
    oper : :class:`.Operator`
        Sparse generalized Pauli matrix.

    Notes
    -----
    See https://en.wikipedia.org/wiki/Generalizations_of_Pauli_matrices
    """
    N = _check_size(N)
    if not (isinstance(k, numbers.Integral)
            and isinstance(l, numbers.Integral)):
        raise ValueError("the powers k and l must be integers")
    cols = np.arange(N)
    if l % N == 0:
        values = np.ones(N)
    else:
        values = np.exp(2j * np.pi * ((l * cols) % N) / N)
    return _sparse_operator(values, (cols + k) % N, cols, N)


def shiftop(N):
    """Shift matrix ``X |m> = |m + 1 mod N>``, see :func:`sylvesterop`."""
    return sylvesterop(N, 1, 0)


def clockop(N):
    """Clock matrix ``Z |m> = w^m |m>``, see :func:`sylvesterop`."""
    return sylvesterop(N, 0, 1)


def sigmax():
    """Pauli spin 1/2 sigma-x operator

    Examples
    --------
    >>> sigmax() # doctest: +SKIP
    2×2 Operator(sparse, isherm=True) with space dimensions 2:
    [[0. 1.]
     [1. 0.]]
    """
    return _sparse_operator([1., 1.], [0, 1], [1, 0], 2, isherm=True)


def sigmay():
    """Pauli spin 1/2 sigma-y operator."""
    return _sparse_operator([1j, -1j], [1, 0], [0, 1], 2, isherm=True)


def sigmaz():
    """Pauli spin 1/2 sigma-z operator."""
    return _sparse_operator([1., -1.], [0, 1], [0, 1], 2, isherm=True)
