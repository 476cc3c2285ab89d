import numpy as np

from . import csc
from .base import SPARSE, DENSE
from .dispatch import Dispatcher

__all__ = ['adjoint', 'transpose', 'conj']


def adjoint_csc(matrix):
    return csc.from_sparse(matrix.conj().transpose(), copy=False)


def adjoint_dense(matrix):
    return np.array(matrix.conj().T, order='C')


def transpose_csc(matrix):
    return csc.from_sparse(matrix.transpose(), copy=False)


def transpose_dense(matrix):
    return np.array(matrix.T, order='C')


def conj_csc(matrix):
    return csc.apply(matrix, np.conj)


def conj_dense(matrix):
    return np.conj(matrix)


adjoint = Dispatcher('adjoint', inputs=1, module=__name__)
adjoint.__doc__ = """Hermitian adjoint (matrix conjugate transpose)."""
adjoint.add_specialisations([
    (SPARSE, adjoint_csc),
    (DENSE, adjoint_dense),
])

transpose = Dispatcher('transpose', inputs=1, module=__name__)
transpose.__doc__ = """Transpose of a matrix."""
transpose.add_specialisations([
    (SPARSE, transpose_csc),
    (DENSE, transpose_dense),
])

conj = Dispatcher('conj', inputs=1, module=__name__)
conj.__doc__ = """Element-wise conjugation of a matrix."""
conj.add_specialisations([
    (SPARSE, conj_csc),
    (DENSE, conj_dense),
])
