# This module exists to supply a couple of very standard constant matrices
# which are used in the data layer, and within `QuObject` itself.  Other
# matrices (e.g. `destroy`) should not be here, but should be defined within
# the higher-level components of schrodinger instead.

import numpy as np

from . import csc, dense
from .base import SPARSE, kind
from .convert import parse

__all__ = ['zeros', 'identity', 'zeros_like', 'identity_like']


def zeros(rows, cols, kind=SPARSE, dtype=np.float64):
    """
    Create matrix representation of 0 with the given dimensions.

    Sparse matrices will contain nothing (which is their representation of
    0), dense matrices will still be filled.

    Parameters
    ----------
    rows, cols : int
        The number of rows and columns in the output matrix.
    kind : str
        Storage kind of the output.
    """
    if parse(kind) == SPARSE:
        return csc.zeros(rows, cols, dtype)
    return dense.zeros(rows, cols, dtype)


def identity(dimension, scale=1, kind=SPARSE):
    """
    Create a square identity matrix of the given dimension.  Optionally, the
    `scale` can be given, where all the diagonal elements will be that instead
    of 1.

    Parameters
    ----------
    dimension : int
        The dimension of the square output identity matrix.
    scale : complex, optional
        The element which should be placed on the diagonal.
    kind : str
        Storage kind of the output.
    """
    if parse(kind) == SPARSE:
        return csc.identity(dimension, scale)
    return dense.identity(dimension, scale)


def zeros_like(data):
    """Zero matrix with the shape and storage kind of ``data``."""
    return zeros(*data.shape, kind=kind(data))


def identity_like(data, scale=1):
    """
    Identity with the size and storage kind of the square matrix ``data``.
    """
    if data.shape[0] != data.shape[1]:
        raise ValueError("identity_like needs a square matrix")
    return identity(data.shape[0], scale, kind=kind(data))
