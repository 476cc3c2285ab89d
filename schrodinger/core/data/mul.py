import numpy as np

from . import csc
from .base import SPARSE, DENSE
from .convert import to_dense
from .dispatch import Dispatcher

__all__ = ['mul', 'div', 'mul_csc', 'mul_dense', 'div_csc', 'div_dense']


def mul_csc(matrix, value):
    if not np.isfinite(value):
        # inf*0 is nan for every structural zero
        return mul_dense(to_dense(matrix), value)
    return csc.apply(matrix, lambda data: data * value)


def mul_dense(matrix, value):
    with np.errstate(invalid='ignore', over='ignore'):
        return matrix * value


def div_csc(matrix, value):
    if value == 0:
        # 0/0 is nan for every structural zero
        return div_dense(to_dense(matrix), value)
    return csc.apply(matrix, lambda data: data / value)


def div_dense(matrix, value):
    with np.errstate(divide='ignore', invalid='ignore'):
        return matrix / value


mul = Dispatcher('mul', inputs=1, module=__name__)
mul.__doc__ =\
    """
    Multiply a matrix element-wise by a scalar, following IEEE semantics:
    ``0*inf`` is ``nan``.  Sparse storage multiplied by a non-finite scalar
    gives a dense result.
    """
mul.add_specialisations([
    (SPARSE, mul_csc),
    (DENSE, mul_dense),
])

div = Dispatcher('div', inputs=1, module=__name__)
div.__doc__ =\
    """
    Divide a matrix element-wise by a scalar, following IEEE semantics:
    ``x/0`` is ``inf`` with the sign of ``x`` and ``0/0`` is ``nan``.  Sparse
    storage divided by zero gives a dense result.
    """
div.add_specialisations([
    (SPARSE, div_csc),
    (DENSE, div_dense),
])
