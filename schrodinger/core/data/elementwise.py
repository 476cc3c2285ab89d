"""
Element-wise maps applied to the stored values.  Every map sends zero to
zero, so sparse storage keeps its structure.
"""

import numpy as np

from . import csc
from .base import SPARSE, DENSE
from .dispatch import Dispatcher

__all__ = ['real', 'imag', 'abs', 'abs2']


def _abs2(values):
    return np.real(values * np.conj(values))


def _make(name, function, doc):
    dispatcher = Dispatcher(name, inputs=1, module=__name__)
    dispatcher.__doc__ = doc
    dispatcher.add_specialisations([
        (SPARSE, lambda matrix: csc.apply(matrix, function)),
        (DENSE, lambda matrix: np.array(function(matrix))),
    ])
    return dispatcher


real = _make('real', np.real, """Real part of every element.""")
imag = _make('imag', np.imag, """Imaginary part of every element.""")
abs = _make('abs', np.abs, """Modulus of every element.""")
abs2 = _make('abs2', _abs2, """Squared modulus of every element.""")
