import numpy as np
import scipy.linalg
import scipy.sparse.linalg

from .base import SPARSE, DENSE
from .dispatch import Dispatcher

__all__ = ['l2', 'max', 'frobenius', 'trace_norm']


def l2_csc(matrix):
    if matrix.nnz == 0:
        return 0.
    return float(scipy.sparse.linalg.norm(matrix))


def l2_dense(matrix):
    return float(np.linalg.norm(matrix))


def max_csc(matrix):
    if matrix.nnz == 0:
        return 0.
    return float(np.max(np.abs(matrix.data)))


def max_dense(matrix):
    if matrix.size == 0:
        return 0.
    return float(np.max(np.abs(matrix)))


def trace_dense(matrix):
    return float(np.sum(scipy.linalg.svdvals(matrix)))


l2 = Dispatcher('l2', inputs=1, module=__name__)
l2.__doc__ =\
    """
    Euclidean norm of the stored elements, ``sqrt(sum_ij |m_ij|^2)``.  This
    is the vector 2-norm of a ket or bra.
    """
l2.add_specialisations([
    (SPARSE, l2_csc),
    (DENSE, l2_dense),
])

max = Dispatcher('max', inputs=1, module=__name__)
max.__doc__ = """Largest absolute value of the elements."""
max.add_specialisations([
    (SPARSE, max_csc),
    (DENSE, max_dense),
])

frobenius = Dispatcher('frobenius', inputs=1, module=__name__)
frobenius.__doc__ = """Frobenius norm of a matrix."""
frobenius.add_specialisations([
    (SPARSE, l2_csc),
    (DENSE, l2_dense),
])

trace_norm = Dispatcher('trace_norm', inputs=1, module=__name__)
trace_norm.__doc__ =\
    """
    Trace norm, the sum of the singular values.  Sparse input is converted to
    dense storage.
    """
trace_norm.add_specialisations([
    (DENSE, trace_dense),
])
