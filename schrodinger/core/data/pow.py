import numbers

import numpy as np
import scipy.linalg

from . import csc
from .base import SPARSE, DENSE
from .dispatch import Dispatcher

__all__ = ['pow', 'fractional_pow', 'pow_csc', 'pow_dense']


def _check(matrix, n):
    if matrix.shape[0] != matrix.shape[1]:
        raise ValueError("matrix power only works with square matrices")
    if not isinstance(n, numbers.Integral) or n < 0:
        raise ValueError("matrix power needs a non-negative integer exponent")


def pow_csc(matrix, n):
    _check(matrix, n)
    if n == 0:
        return csc.identity(matrix.shape[0])
    if n == 1:
        return matrix.copy()
    # Exponentiation by squaring.
    out = None
    base = matrix
    while n:
        if n & 1:
            out = base if out is None else csc.finalise(out @ base)
        n >>= 1
        if n:
            base = csc.finalise(base @ base)
    return out


def pow_dense(matrix, n):
    _check(matrix, n)
    if n == 1:
        return matrix.copy()
    return np.linalg.matrix_power(matrix, int(n))


pow = Dispatcher('pow', inputs=1, module=__name__)
pow.__doc__ =\
    """
    Compute the integer matrix power of the square input matrix.  The power
    must be a non-negative integer; ``pow(A, 0)`` is the identity.  The
    storage kind of the input is kept.

    Parameters
    ----------
    matrix : sparse or dense matrix
        Input matrix to take the power of.

    n : non-negative integer
        The power to which to raise the matrix.
    """
pow.add_specialisations([
    (SPARSE, pow_csc),
    (DENSE, pow_dense),
])


def fractional_pow_dense(matrix, p):
    if matrix.shape[0] != matrix.shape[1]:
        raise ValueError("matrix power only works with square matrices")
    return np.asarray(scipy.linalg.fractional_matrix_power(matrix, p))


fractional_pow = Dispatcher('fractional_pow', inputs=1, promote=False,
                            module=__name__)
fractional_pow.__doc__ =\
    """
    Real (possibly negative or fractional) power of a dense square matrix.
    Sparse input raises ``StorageMismatch``; it must be converted explicitly.
    """
fractional_pow.add_specialisations([
    (DENSE, fractional_pow_dense),
])
