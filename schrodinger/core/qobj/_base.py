from __future__ import annotations

import functools
import numbers

import numpy as np
import scipy.sparse

from ...settings import settings
from .. import data as _data
from ..dimensions import Dims
from ..errors import (
    ConstructionError, DimensionMismatch, DomainError, VariantMismatch,
)
from schrodinger.typing import StorageKind


__all__ = ["QuObject"]


def _isreal(value) -> bool:
    return complex(value).imag == 0


def _to_scalar(value, *datas) -> float | complex:
    """
    Python scalar from a data-layer reduction: ``float`` when every operand
    has real storage, ``complex`` otherwise.
    """
    if any(np.iscomplexobj(data) for data in datas):
        return complex(value)
    return float(np.real(value))


class _QuObjectBuilder(type):
    qobjtype_to_class = {}
    # (left type, right type) -> function(left, right) used by `*` and `@`.
    products = {}

    @staticmethod
    def _initialize_data(arg, copy):
        try:
            return _data.create(arg, copy=copy)
        except (TypeError, ValueError) as exc:
            raise ConstructionError(
                f"Cannot build storage from {type(arg).__name__}: {exc}"
            ) from exc

    @staticmethod
    def _initialize_dims(dims, size):
        dims = Dims(size if dims is None else dims)
        if dims.size != size:
            raise ConstructionError(
                "Provided dimensions do not match the data: "
                f"{dims} has size {dims.size}, data has size {size}"
            )
        return dims

    def __call__(cls, *args, **kwargs):
        if cls.type is None:
            raise TypeError(
                "QuObject is abstract: build a Ket, Bra or Operator instead"
            )
        out = cls.__new__(cls)
        out.__init__(*args, **kwargs)
        return out


def _check_same_space(left, right):
    if left.type != right.type:
        raise VariantMismatch(
            f"incompatible variants {left.type!r} and {right.type!r}"
        )
    if left._dims != right._dims:
        raise DimensionMismatch(
            "incompatible dimensions "
            + repr(left._dims) + " and " + repr(right._dims)
        )


def _require_equal_type(method):
    """
    Decorate a binary QuObject method to ensure both operands are QuObject
    of the same variant and dimensions.  Numeric scalars are passed through
    unchanged, anything else gives ``NotImplemented``.
    """
    @functools.wraps(method)
    def out(self, other):
        if isinstance(other, QuObject):
            _check_same_space(self, other)
            return method(self, other)
        if isinstance(other, numbers.Number):
            return method(self, other)
        return NotImplemented

    return out


class QuObject(metaclass=_QuObjectBuilder):
    """
    A class for representing quantum objects: kets, bras and operators.

    ``QuObject`` itself is abstract; instances are always one of
    :class:`.Ket`, :class:`.Bra` or :class:`.Operator`.  The class implements
    the math operations ``+``, ``-``, ``*`` and ``@`` between quantum
    objects, ``/`` by a number and ``&`` for tensor products, as well as a
    collection of common operator and state operations.

    Adding a number to a quantum object depends on the variant: for kets and
    bras the number is added to every element, while for operators it is
    added as a multiple of the identity.

    Attributes
    ----------
    data : scipy.sparse.csc_matrix or numpy.ndarray
        The storage of the vector / matrix representation, as held.
    dims : Dims
        Composite dimensions keeping track of the tensor structure.
    shape : tuple
        Shape of the underlying ``data`` array.
    type : str
        Type of quantum object: 'ket', 'bra' or 'oper'.
    isket : bool
        Indicates if the quantum object represents a ket.
    isbra : bool
        Indicates if the quantum object represents a bra.
    isoper : bool
        Indicates if the quantum object represents an operator.
    isherm : bool
        Hermitian hint.  Only set by producers and operations known to
        preserve hermiticity; ``False`` does not mean the object is not
        Hermitian.
    storage : str
        'sparse' or 'dense'.
    """
    type = None
    _dual_type = None
    _dims: Dims
    _isherm: bool
    __array_ufunc__ = None
    __hash__ = None

    @classmethod
    def _new(cls, data, dims: Dims, isherm: bool = False) -> QuObject:
        """Wrap storage already known to be valid, without copying."""
        out = cls.__new__(cls)
        out._data = data
        out._dims = dims
        out._isherm = bool(isherm) and cls.type == "oper"
        return out

    @property
    def data(self):
        return self._data

    @property
    def dims(self) -> Dims:
        return self._dims

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def isket(self) -> bool:
        return self.type == "ket"

    @property
    def isbra(self) -> bool:
        return self.type == "bra"

    @property
    def isoper(self) -> bool:
        return self.type == "oper"

    @property
    def isherm(self) -> bool:
        return self._isherm

    @property
    def storage(self) -> str:
        return _data.kind(self._data)

    @property
    def issparse(self) -> bool:
        return _data.issparse(self._data)

    def copy(self) -> QuObject:
        """Create identical copy"""
        return self._new(self._data.copy(), self._dims, self._isherm)

    def to(self, kind: StorageKind) -> QuObject:
        """
        Convert the underlying storage of this object to ``"sparse"``
        (``scipy.sparse.csc_matrix``) or ``"dense"`` (``numpy.ndarray``).

        A new object is always returned, even when the storage is already of
        the requested kind.
        """
        if _data.parse(kind) == self.storage:
            return self.copy()
        return self._new(
            _data.to(kind, self._data), self._dims, self._isherm
        )

    def full(self, squeeze: bool = False) -> np.ndarray:
        """Dense copy of the storage as a 2-D ``numpy.ndarray``.

        Parameters
        ----------
        squeeze : bool, default: False
            Squeeze output array.
        """
        out = _data.to_dense(self._data)
        if out is self._data:
            out = out.copy()
        return np.squeeze(out) if squeeze else out

    def __getitem__(self, ind):
        if isinstance(ind, numbers.Integral) and not self.isoper:
            ind = (ind, 0) if self.isket else (0, ind)
        out = self._data[ind]
        if scipy.sparse.issparse(out):
            return out.toarray()
        return out

    def __pos__(self) -> QuObject:
        return self.copy()

    def __neg__(self) -> QuObject:
        return self._new(_data.neg(self._data), self._dims, self._isherm)

    @_require_equal_type
    def __add__(self, other: QuObject | complex) -> QuObject:
        if not isinstance(other, QuObject):
            if other == 0:
                return self.copy()
            return self._add_scalar(other)
        return self._new(_data.add(self._data, other._data),
                         self._dims,
                         self._isherm and other._isherm)

    def __radd__(self, other: QuObject | complex) -> QuObject:
        return self.__add__(other)

    @_require_equal_type
    def __sub__(self, other: QuObject | complex) -> QuObject:
        if not isinstance(other, QuObject):
            if other == 0:
                return self.copy()
            return self._add_scalar(-other)
        return self._new(_data.sub(self._data, other._data),
                         self._dims,
                         self._isherm and other._isherm)

    def __rsub__(self, other: QuObject | complex) -> QuObject:
        return self.__neg__().__add__(other)

    def _add_scalar(self, value: complex) -> QuObject:
        raise NotImplementedError

    def __mul__(self, other: QuObject | complex) -> QuObject | complex:
        """
        If other is a QuObject, we dispatch to __matmul__.  Numbers scale
        every element.
        """
        if isinstance(other, QuObject):
            return self.__matmul__(other)
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self._new(_data.mul(self._data, other),
                         self._dims,
                         self._isherm and _isreal(other))

    def __rmul__(self, other: complex) -> QuObject:
        # Shouldn't be here unless `other.__mul__` has already been tried, so
        # we _shouldn't_ check that `other` is `QuObject`.
        return self.__mul__(other)

    def __truediv__(self, other: complex) -> QuObject:
        if isinstance(other, QuObject):
            raise VariantMismatch(
                "division between quantum objects is not defined"
            )
        if not isinstance(other, numbers.Number):
            return NotImplemented
        return self._new(_data.div(self._data, other),
                         self._dims,
                         self._isherm and other != 0 and _isreal(other))

    def __rtruediv__(self, other: complex):
        if isinstance(other, numbers.Number):
            raise DomainError(
                f"a number cannot be divided by a {self.type}"
            )
        return NotImplemented

    def __matmul__(self, other: QuObject) -> QuObject | complex:
        if not isinstance(other, QuObject):
            return NotImplemented
        product = _QuObjectBuilder.products.get((self.type, other.type))
        if product is None:
            raise VariantMismatch(
                f"product of {self.type!r} and {other.type!r} is not defined"
            )
        if self._dims != other._dims:
            raise DimensionMismatch(
                "incompatible dimensions "
                + repr(self._dims) + " and " + repr(other._dims)
            )
        return product(self, other)

    def __pow__(self, n, m=None) -> QuObject:
        raise VariantMismatch(f"a {self.type} cannot be raised to a power")

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if (
            not isinstance(other, QuObject)
            or self.type != other.type
            or self._dims != other._dims
        ):
            return False
        # isequal uses both atol and rtol from settings.core
        return _data.isequal(self._data, other._data)

    def __ne__(self, other) -> bool:
        return not self.__eq__(other)

    def __and__(self, other: QuObject) -> QuObject:
        """
        Syntax shortcut for tensor:
        A & B ==> tensor(A, B)
        """
        if not isinstance(other, QuObject):
            return NotImplemented
        from ..tensor import tensor
        return tensor(self, other)

    def __abs__(self) -> QuObject:
        return self.abs()

    def dag(self) -> QuObject:
        """Get the Hermitian adjoint of the quantum object."""
        if self._isherm:
            return self.copy()
        cls = _QuObjectBuilder.qobjtype_to_class[self._dual_type]
        return cls._new(_data.adjoint(self._data), self._dims, self._isherm)

    def conj(self) -> QuObject:
        """Get the element-wise conjugation of the quantum object."""
        return self._new(_data.conj(self._data), self._dims, self._isherm)

    def trans(self) -> QuObject:
        raise VariantMismatch(
            f"the transpose of a {self.type} is not defined, use dag()"
        )

    def inner(self, other: QuObject) -> float | complex:
        """
        Inner product with another quantum object of the same variant and
        dimensions, conjugate-linear in ``self``.

        For kets and bras this is ``sum_i conj(self_i) other_i``; for
        operators it is the Hilbert-Schmidt product ``Tr(self^dag other)``.
        """
        if not isinstance(other, QuObject):
            raise VariantMismatch(
                "the inner product is only defined between quantum objects"
            )
        _check_same_space(self, other)
        return _to_scalar(_data.inner(self._data, other._data),
                          self._data, other._data)

    def norm(self, norm: str = None) -> float:
        raise NotImplementedError

    def unit(self, inplace: bool = False, **kwargs) -> QuObject:
        raise NotImplementedError

    def _elementwise(self, function) -> QuObject:
        return self._new(function(self._data), self._dims, False)

    def real(self) -> QuObject:
        """Real part of every element."""
        return self._elementwise(_data.elementwise.real)

    def imag(self) -> QuObject:
        """Imaginary part of every element."""
        return self._elementwise(_data.elementwise.imag)

    def abs(self) -> QuObject:
        """Modulus of every element."""
        return self._elementwise(_data.elementwise.abs)

    def abs2(self) -> QuObject:
        """Squared modulus of every element."""
        return self._elementwise(_data.elementwise.abs2)

    def tidyup(self, atol: float = None) -> QuObject:
        """
        Removes small elements from the quantum object.

        Parameters
        ----------
        atol : float
            Absolute tolerance used by tidyup. Default is set
            via schrodinger global settings parameters.

        Returns
        -------
        oper : :class:`.QuObject`
            Copy of the quantum object with small elements removed.
        """
        if atol is None:
            atol = settings.core['auto_tidyup_atol']
        return self._new(_data.tidyup(self._data, atol),
                         self._dims, self._isherm)

    def _str_header(self) -> str:
        raise NotImplementedError

    def __str__(self) -> str:
        return "\n".join([self._str_header(), str(self.full())])

    def __repr__(self) -> str:
        # give complete information on QuObject without print statement in
        # command-line we cant realistically serialize a QuObject into a
        # string, so we simply return the informal __str__ representation
        # instead.
        return self.__str__()
