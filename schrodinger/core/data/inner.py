import numpy as np

from .base import SPARSE, DENSE
from .dispatch import Dispatcher
from .matmul import matmul

__all__ = ['inner', 'contract', 'trace']


def _check_shape(left, right):
    if left.shape != right.shape:
        raise ValueError(
            "incompatible matrix shapes " + str(left.shape)
            + " and " + str(right.shape)
        )


def inner_csc(left, right):
    _check_shape(left, right)
    return left.conj().multiply(right).sum()


def inner_dense(left, right):
    _check_shape(left, right)
    return np.vdot(left, right)


inner = Dispatcher('inner', inputs=2, module=__name__)
inner.__doc__ =\
    """
    Conjugate-linear sum of the element-wise product,
        sum_ij conj(left_ij) * right_ij
    which is the Euclidean inner product for vectors and the Hilbert-Schmidt
    product ``Tr(left^dag right)`` for square matrices, computed without
    forming the matrix product.
    """
inner.add_specialisations([
    (SPARSE, SPARSE, inner_csc),
    (DENSE, DENSE, inner_dense),
])


def contract(left, right):
    """
    Unconjugated product of a row ``left`` with a column ``right``, returned
    as a scalar.
    """
    if left.shape[0] != 1 or right.shape[1] != 1:
        raise ValueError("contract needs a row and a column")
    return matmul(left, right)[0, 0]


def trace_csc(matrix):
    return matrix.diagonal().sum()


def trace_dense(matrix):
    return np.trace(matrix)


trace = Dispatcher('trace', inputs=1, module=__name__)
trace.__doc__ = """Compute the trace (sum of diagonal elements) of a square
    matrix."""
trace.add_specialisations([
    (SPARSE, trace_csc),
    (DENSE, trace_dense),
])
