import numpy as np
import scipy.linalg

from .base import DENSE
from .dispatch import Dispatcher

__all__ = ['expm', 'logm', 'sqrtm', 'eigh_apply']


def _check_square(matrix, name):
    if matrix.shape[0] != matrix.shape[1]:
        raise ValueError(f"can only compute the {name} of a square matrix")


def expm_dense(matrix):
    _check_square(matrix, "exponential")
    return scipy.linalg.expm(matrix)


def logm_dense(matrix):
    _check_square(matrix, "logarithm")
    return np.asarray(scipy.linalg.logm(matrix))


def sqrtm_dense(matrix):
    _check_square(matrix, "square root")
    return np.asarray(scipy.linalg.sqrtm(matrix))


def eigh_apply_dense(matrix, function):
    _check_square(matrix, "spectral function")
    eigvals, eigvecs = scipy.linalg.eigh(matrix)
    values = np.asarray(function(eigvals.astype(np.complex128)))
    isreal = bool(np.all(values.imag == 0))
    if isreal:
        values = values.real
    out = (eigvecs * values) @ eigvecs.conj().T
    return out, isreal


expm = Dispatcher('expm', inputs=1, module=__name__)
expm.__doc__ =\
    """
    Matrix exponential ``e^A`` of a square matrix.  Sparse input is converted
    to dense storage; the result is always dense.
    """
expm.add_specialisations([
    (DENSE, expm_dense),
])

logm = Dispatcher('logm', inputs=1, module=__name__)
logm.__doc__ =\
    """
    Principal matrix logarithm of a square matrix, always dense.
    """
logm.add_specialisations([
    (DENSE, logm_dense),
])

sqrtm = Dispatcher('sqrtm', inputs=1, module=__name__)
sqrtm.__doc__ =\
    """
    Principal matrix square root of a square matrix, always dense.
    """
sqrtm.add_specialisations([
    (DENSE, sqrtm_dense),
])

eigh_apply = Dispatcher('eigh_apply', inputs=1, module=__name__)
eigh_apply.__doc__ =\
    """
    Apply a scalar function to a Hermitian matrix through its spectral
    decomposition, ``V f(w) V^dag``.

    The function receives the eigenvalues as a complex array.  Returns the
    dense result together with a flag telling whether every ``f(w)`` was
    real, in which case the result is Hermitian.
    """
eigh_apply.add_specialisations([
    (DENSE, eigh_apply_dense),
])
