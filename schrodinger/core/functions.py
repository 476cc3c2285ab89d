"""
Functional forms of the quantum object operations.
"""

__all__ = [
    'dag', 'conj', 'trans', 'inner', 'dot', 'expm', 'logm', 'sqrtm',
    'norm', 'normalize', 'real', 'imag', 'abs2', 'dense', 'sparse', 'full',
]

from .errors import VariantMismatch
from .qobj import QuObject, Operator


def _require_quobject(obj, name):
    if not isinstance(obj, QuObject):
        raise TypeError(f"{name} expects a QuObject, got {type(obj).__name__}")


def _require_operator(obj, name):
    _require_quobject(obj, name)
    if not isinstance(obj, Operator):
        raise VariantMismatch(f"{name} is only defined for operators")


def dag(obj):
    """Hermitian adjoint: swaps kets and bras, conjugate transpose of
    operators."""
    _require_quobject(obj, "dag")
    return obj.dag()


def conj(obj):
    """Element-wise complex conjugate, variant unchanged."""
    _require_quobject(obj, "conj")
    return obj.conj()


def trans(obj):
    """Transpose of an operator.  Kets and bras change variant only through
    :func:`dag`."""
    _require_quobject(obj, "trans")
    return obj.trans()


def inner(left, right):
    """
    Inner product of two quantum objects of the same variant and dimensions.

    Conjugate-linear in ``left``: ``sum_i conj(left_i) right_i`` for kets and
    bras, ``Tr(left^dag right)`` for operators.
    """
    _require_quobject(left, "inner")
    return left.inner(right)


dot = inner


def expm(obj):
    """Matrix exponential of an operator."""
    _require_operator(obj, "expm")
    return obj.expm()


def logm(obj):
    """Principal matrix logarithm of an operator."""
    _require_operator(obj, "logm")
    return obj.logm()


def sqrtm(obj):
    """Principal matrix square root of an operator."""
    _require_operator(obj, "sqrtm")
    return obj.sqrtm()


def norm(obj, *args, **kwargs):
    _require_quobject(obj, "norm")
    return obj.norm(*args, **kwargs)


def normalize(obj):
    """
    Normalize ``obj`` in place and return it.

    Kets and bras are divided by their Euclidean norm and operators by their
    trace.  Raises :class:`.DomainError` when the norm or trace is zero.
    """
    _require_quobject(obj, "normalize")
    return obj.unit(inplace=True)


def real(obj):
    _require_quobject(obj, "real")
    return obj.real()


def imag(obj):
    _require_quobject(obj, "imag")
    return obj.imag()


def abs2(obj):
    _require_quobject(obj, "abs2")
    return obj.abs2()


def dense(obj):
    """Copy of ``obj`` with dense storage."""
    _require_quobject(obj, "dense")
    return obj.to("dense")


def sparse(obj):
    """Copy of ``obj`` with sparse storage."""
    _require_quobject(obj, "sparse")
    return obj.to("sparse")


def full(obj):
    """Dense ``numpy.ndarray`` of the elements, escaping the wrapper."""
    _require_quobject(obj, "full")
    return obj.full()
