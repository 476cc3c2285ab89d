"""
Module for the creation of composite quantum objects via the tensor product.
"""

__all__ = ['tensor']

from functools import reduce

from . import data as _data
from .errors import VariantMismatch
from .qobj import QuObject


def tensor(*args):
    """Calculates the tensor product of input quantum objects.

    All inputs must be of the same variant: kets, bras or operators.

    Parameters
    ----------
    args : array_like
        ``list`` or ``array`` of quantum objects for tensor product.

    Returns
    -------
    obj : :class:`.QuObject`
        A composite quantum object, whose dimensions are the concatenation of
        the input dimensions, left factors first.

    Examples
    --------
    >>> tensor([sigmax(), sigmax()]).full() # doctest: +SKIP
    array([[ 0.,  0.,  0.,  1.],
           [ 0.,  0.,  1.,  0.],
           [ 0.,  1.,  0.,  0.],
           [ 1.,  0.,  0.,  0.]])
    """
    if not args:
        raise TypeError("Requires at least one input argument")
    if len(args) == 1 and isinstance(args[0], (list, tuple)):
        args = args[0]
    if not args:
        raise TypeError("Requires at least one input argument")
    if not all(isinstance(q, QuObject) for q in args):
        raise TypeError("All arguments must be QuObjects")
    if len({q.type for q in args}) != 1:
        raise VariantMismatch(
            "tensor is only defined between quantum objects of the same"
            " variant, got " + ", ".join(q.type for q in args)
        )
    if len(args) == 1:
        return args[0].copy()

    data = reduce(_data.kron, (q.data for q in args))
    dims = reduce(lambda left, right: left & right, (q.dims for q in args))
    isherm = all(q.isherm for q in args)
    return type(args[0])._new(data, dims, isherm)
