import numpy as np
import scipy.sparse

__all__ = ['SPARSE', 'DENSE', 'kind', 'issparse', 'isdata', 'promote_dtype']

SPARSE = "sparse"
DENSE = "dense"


def isdata(obj):
    """Whether ``obj`` is storage understood by the data layer."""
    return isinstance(obj, np.ndarray) or scipy.sparse.issparse(obj)


def issparse(data):
    return scipy.sparse.issparse(data)


def kind(data):
    """
    Storage kind of ``data``: ``SPARSE`` for scipy sparse matrices and
    ``DENSE`` for numpy arrays.
    """
    if isinstance(data, np.ndarray):
        return DENSE
    if scipy.sparse.issparse(data):
        return SPARSE
    raise TypeError(f"{type(data).__name__} is not a known storage type")


def promote_dtype(dtype):
    """
    Element type used for storage: complex input stays ``complex128``, every
    other numeric input (bool, int, float) becomes ``float64``.
    """
    dtype = np.dtype(dtype)
    if dtype.kind == 'c':
        return np.dtype(np.complex128)
    if dtype.kind in 'biuf':
        return np.dtype(np.float64)
    raise TypeError(f"Unsupported element type {dtype}")
