"""
Helpers for dense storage, held as 2-D ``numpy.ndarray``.
"""

import numpy as np

from .base import promote_dtype

__all__ = ['zeros', 'identity', 'from_csc', 'from_array']


def from_array(array, copy=True):
    array = np.array(array, copy=True) if copy else np.asarray(array)
    return array.astype(promote_dtype(array.dtype), copy=False)


def from_csc(matrix):
    return matrix.toarray()


def zeros(rows, cols, dtype=np.float64):
    return np.zeros((rows, cols), dtype=promote_dtype(dtype))


def identity(dimension, scale=1):
    dtype = np.complex128 if np.iscomplexobj(scale) else np.float64
    out = np.zeros((dimension, dimension), dtype=dtype)
    np.fill_diagonal(out, scale)
    return out
