import numpy as np

from .base import SPARSE, DENSE
from .dispatch import Dispatcher
from ...settings import settings

__all__ = ['tidyup', 'tidyup_csc', 'tidyup_dense']


def _tidy_values(values, tol):
    values = values.copy()
    if np.iscomplexobj(values):
        values.real[np.abs(values.real) < tol] = 0
        values.imag[np.abs(values.imag) < tol] = 0
    else:
        values[np.abs(values) < tol] = 0
    return values


def tidyup_csc(matrix, tol):
    out = matrix.copy()
    out.data = _tidy_values(out.data, tol)
    out.eliminate_zeros()
    return out


def tidyup_dense(matrix, tol):
    return _tidy_values(matrix, tol)


_tidyup = Dispatcher('tidyup', inputs=1, module=__name__)
_tidyup.add_specialisations([
    (SPARSE, tidyup_csc),
    (DENSE, tidyup_dense),
])


def tidyup(matrix, tol=None):
    """
    Copy of ``matrix`` where the real and imaginary parts of every element
    smaller in absolute value than ``tol`` are set to zero.  Sparse results
    drop the zeroed elements from storage.

    Parameters
    ----------
    matrix : sparse or dense matrix
        The matrix to tidy.
    tol : real, optional
        Threshold, ``settings.core["auto_tidyup_atol"]`` by default.
    """
    if tol is None:
        tol = settings.core['auto_tidyup_atol']
    return _tidyup(matrix, tol)
