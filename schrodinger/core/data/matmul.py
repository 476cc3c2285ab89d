import numpy as np

from . import csc
from .base import SPARSE, DENSE
from .dispatch import Dispatcher

__all__ = ['matmul', 'matmul_csc', 'matmul_dense',
           'matmul_csc_dense', 'matmul_dense_csc']


def _check_shape(left, right):
    if left.shape[1] != right.shape[0]:
        raise ValueError(
            "incompatible matrix shapes " + str(left.shape)
            + " and " + str(right.shape)
        )


def matmul_csc(left, right):
    _check_shape(left, right)
    return csc.finalise(left @ right)


def matmul_dense(left, right):
    _check_shape(left, right)
    return left @ right


def matmul_csc_dense(left, right):
    _check_shape(left, right)
    return np.asarray(left @ right)


def matmul_dense_csc(left, right):
    _check_shape(left, right)
    # Let the sparse operand drive the product.
    return np.ascontiguousarray((right.transpose() @ left.transpose()).T)


matmul = Dispatcher('matmul', inputs=2, module=__name__)
matmul.__doc__ =\
    """
    Compute the matrix multiplication of two matrices, with the operation
        left @ right
    The result is sparse only when both operands are sparse.
    """
matmul.add_specialisations([
    (SPARSE, SPARSE, matmul_csc),
    (SPARSE, DENSE, matmul_csc_dense),
    (DENSE, SPARSE, matmul_dense_csc),
    (DENSE, DENSE, matmul_dense),
])
