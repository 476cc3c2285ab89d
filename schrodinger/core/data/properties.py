import numpy as np

from .base import SPARSE, DENSE
from .dispatch import Dispatcher
from ...settings import settings

__all__ = ['isequal', 'iszero']


def isequal_csc(left, right, atol=None, rtol=None):
    if left.shape != right.shape:
        return False
    atol = settings.core['atol'] if atol is None else atol
    rtol = settings.core['rtol'] if rtol is None else rtol
    diff = abs(left - right) - abs(right) * rtol
    return bool(np.all(diff.data <= atol))


def isequal_dense(left, right, atol=None, rtol=None):
    if left.shape != right.shape:
        return False
    atol = settings.core['atol'] if atol is None else atol
    rtol = settings.core['rtol'] if rtol is None else rtol
    return bool(np.allclose(left, right, rtol=rtol, atol=atol))


isequal = Dispatcher('isequal', inputs=2, module=__name__)
isequal.__doc__ =\
    """
    Test if two matrices are equal up to absolute and relative tolerance:

        abs(left - right) <= atol + rtol * abs(right)

    Element-wise; ``False`` for matrices of different shapes.  NaN is never
    equal to anything.

    Parameters
    ----------
    left, right : sparse or dense matrix
        Matrices to compare.
    atol : real, optional
        Absolute tolerance, ``settings.core["atol"]`` by default.
    rtol : real, optional
        Relative tolerance, ``settings.core["rtol"]`` by default.
    """
isequal.add_specialisations([
    (SPARSE, SPARSE, isequal_csc),
    (DENSE, DENSE, isequal_dense),
])


def iszero_csc(matrix, atol=None):
    atol = settings.core['atol'] if atol is None else atol
    return bool(np.all(np.abs(matrix.data) <= atol))


def iszero_dense(matrix, atol=None):
    atol = settings.core['atol'] if atol is None else atol
    return bool(np.all(np.abs(matrix) <= atol))


iszero = Dispatcher('iszero', inputs=1, module=__name__)
iszero.__doc__ =\
    """
    Test if this matrix is the zero matrix, using ``atol`` as the absolute
    tolerance (``settings.core["atol"]`` by default).
    """
iszero.add_specialisations([
    (SPARSE, iszero_csc),
    (DENSE, iszero_dense),
])
