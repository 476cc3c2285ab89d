"""
Creation of storage from arbitrary input and conversion between the
storage kinds.
"""

import numpy as np
import scipy.sparse

from . import csc, dense
from .base import SPARSE, DENSE, kind, isdata

__all__ = ['to', 'create', 'to_dense', 'to_sparse']

_ALIASES = {
    SPARSE: SPARSE, "csc": SPARSE, "CSC": SPARSE, "Sparse": SPARSE,
    DENSE: DENSE, "Dense": DENSE, "full": DENSE,
}


def parse(kind_name):
    """
    Resolve a storage kind given by name (``"sparse"``, ``"csc"``,
    ``"dense"``, ...).
    """
    try:
        return _ALIASES[kind_name]
    except (KeyError, TypeError):
        raise ValueError(f"Unknown storage kind {kind_name!r}") from None


def to_dense(data):
    """Dense copy of ``data`` if it is sparse, ``data`` itself otherwise."""
    if kind(data) == SPARSE:
        return dense.from_csc(data)
    return data


def to_sparse(data):
    """Sparse copy of ``data`` if it is dense, ``data`` itself otherwise."""
    if kind(data) == DENSE:
        return csc.from_dense(data)
    return data


def to(kind_name, data):
    """
    Convert ``data`` to the storage kind named by ``kind_name``.  Data
    already of that kind is returned unchanged, without copying.
    """
    target = parse(kind_name)
    if target == SPARSE:
        return to_sparse(data)
    return to_dense(data)


def create(arg, copy=True):
    """
    Build storage from ``arg``: scipy sparse input gives a ``csc_matrix``,
    anything else goes through ``numpy.array``.  Boolean and integer input is
    promoted to ``float64``.

    The shape is kept as given; reshaping vectors is the job of the caller.
    """
    if scipy.sparse.issparse(arg):
        return csc.from_sparse(arg, copy=copy)
    if isdata(arg):
        return dense.from_array(arg, copy=copy)
    return dense.from_array(np.asarray(arg), copy=False)
