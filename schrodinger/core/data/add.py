import numpy as np

from . import csc
from .base import SPARSE, DENSE
from .convert import to_dense
from .dispatch import Dispatcher

__all__ = ['add', 'sub', 'neg', 'add_scalar',
           'add_csc', 'add_dense', 'sub_csc', 'sub_dense']


def _check_shape(left, right):
    if left.shape != right.shape:
        raise ValueError(
            "incompatible matrix shapes " + str(left.shape)
            + " and " + str(right.shape)
        )


def add_csc(left, right, scale=1):
    _check_shape(left, right)
    if scale == 1:
        return csc.finalise(left + right)
    return csc.finalise(left + right * scale)


def add_dense(left, right, scale=1):
    _check_shape(left, right)
    if scale == 1:
        return left + right
    return left + right * scale


def sub_csc(left, right):
    return add_csc(left, right, -1)


def sub_dense(left, right):
    _check_shape(left, right)
    return left - right


def neg_csc(matrix):
    return csc.apply(matrix, np.negative)


def neg_dense(matrix):
    return -matrix


add = Dispatcher('add', inputs=2, module=__name__)
add.__doc__ =\
    """
    Perform the operation
        left + scale*right
    where `left` and `right` are matrices, and `scale` is an optional complex
    scalar.  Two sparse operands give a sparse result, any dense operand a
    dense one.
    """
add.add_specialisations([
    (SPARSE, SPARSE, add_csc),
    (DENSE, DENSE, add_dense),
])

sub = Dispatcher('sub', inputs=2, module=__name__)
sub.__doc__ =\
    """
    Perform the operation
        left - right
    where `left` and `right` are matrices.
    """
sub.add_specialisations([
    (SPARSE, SPARSE, sub_csc),
    (DENSE, DENSE, sub_dense),
])

neg = Dispatcher('neg', inputs=1, module=__name__)
neg.__doc__ = """Element-wise negation of the matrix."""
neg.add_specialisations([
    (SPARSE, neg_csc),
    (DENSE, neg_dense),
])


def add_scalar(matrix, value):
    """
    Add ``value`` to every element of ``matrix``.  Every structural zero
    becomes ``value``, so the result is always dense.
    """
    return to_dense(matrix) + value
