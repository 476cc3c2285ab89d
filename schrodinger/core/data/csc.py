"""
Helpers for compressed-sparse-column storage, held as
``scipy.sparse.csc_matrix``.
"""

import numpy as np
import scipy.sparse

from .base import promote_dtype
from ...settings import settings

__all__ = ['zeros', 'identity', 'from_dense', 'from_sparse', 'apply']


def from_sparse(matrix, copy=True):
    """
    Convert any scipy sparse matrix or array to a ``csc_matrix`` with a
    supported element type.
    """
    dtype = promote_dtype(matrix.dtype)
    if scipy.sparse.isspmatrix_csc(matrix) and matrix.dtype == dtype:
        return matrix.copy() if copy else matrix
    return scipy.sparse.csc_matrix(matrix, dtype=dtype)


def from_dense(matrix):
    return scipy.sparse.csc_matrix(
        matrix, dtype=promote_dtype(matrix.dtype)
    )


def zeros(rows, cols, dtype=np.float64):
    return scipy.sparse.csc_matrix((rows, cols), dtype=promote_dtype(dtype))


def identity(dimension, scale=1):
    dtype = np.complex128 if np.iscomplexobj(scale) else np.float64
    diag = np.full(dimension, scale, dtype=dtype)
    return scipy.sparse.diags(diag, 0, shape=(dimension, dimension),
                              format='csc', dtype=dtype)


def apply(matrix, function):
    """
    New matrix with ``function`` applied to the stored values only.  The
    function must map zero to zero.
    """
    values = np.asarray(function(matrix.data))
    return scipy.sparse.csc_matrix(
        (values, matrix.indices.copy(), matrix.indptr.copy()),
        shape=matrix.shape, dtype=promote_dtype(values.dtype),
    )


def finalise(matrix):
    """
    Bring the result of a scipy operation back to ``csc_matrix``, tidying it
    when ``settings.core['auto_tidyup']`` is set.
    """
    out = from_sparse(matrix, copy=False)
    if settings.core['auto_tidyup']:
        from .tidyup import tidyup_csc
        out = tidyup_csc(out, settings.core['auto_tidyup_atol'])
    return out
