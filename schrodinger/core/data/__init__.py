# Storage kinds and the capability set shared by both of them.

from . import dense, csc
from .base import SPARSE, DENSE, kind, issparse, isdata, promote_dtype
from .dispatch import Dispatcher
from .convert import to, create, to_dense, to_sparse, parse

from .add import add, sub, neg, add_scalar
from .adjoint import adjoint, transpose, conj
from .constant import *
from .expm import *
from .inner import *
from .kron import kron
from .matmul import matmul
from .mul import mul, div
from .pow import pow, fractional_pow
from .properties import *
from .tidyup import tidyup
# For operations with multiple related versions, we just import the module.
from . import norm, elementwise
