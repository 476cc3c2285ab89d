import numpy as np
import scipy.sparse

from . import csc
from .base import SPARSE, DENSE
from .dispatch import Dispatcher

__all__ = ['kron', 'kron_csc', 'kron_dense']


def kron_csc(left, right):
    return csc.finalise(scipy.sparse.kron(left, right, format='csc'))


def kron_dense(left, right):
    return np.kron(left, right)


kron = Dispatcher('kron', inputs=2, module=__name__)
kron.__doc__ =\
    """
    Compute the Kronecker product of two matrices.  This is used to represent
    quantum tensor products of vector spaces.  The result is sparse as soon
    as one operand is sparse.
    """
kron.add_specialisations([
    (SPARSE, SPARSE, kron_csc),
    (SPARSE, DENSE, kron_csc),
    (DENSE, SPARSE, kron_csc),
    (DENSE, DENSE, kron_dense),
])
