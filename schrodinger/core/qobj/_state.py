from __future__ import annotations

from ._base import QuObject, _QuObjectBuilder, _to_scalar
from .. import data as _data
from ..errors import ConstructionError, DomainError
from typing import Literal
from schrodinger.typing import DimsLike
from numpy.typing import ArrayLike


__all__ = []


class _StateQuObject(QuObject):
    # Axis along which the vector extends: 0 for columns, 1 for rows.
    _axis = None

    def __init__(
        self,
        arg: ArrayLike | QuObject,
        dims: DimsLike = None,
        copy: bool = True,
    ):
        if isinstance(arg, QuObject):
            if arg.type == self._dual_type:
                data = _data.adjoint(arg._data)
            elif arg.type == self.type:
                data = arg._data.copy() if copy else arg._data
            else:
                raise ConstructionError(
                    f"Cannot build a {self.type} from a {arg.type}"
                )
            dims = arg._dims if dims is None else dims
        else:
            data = self._as_vector(
                _QuObjectBuilder._initialize_data(arg, copy)
            )
        self._data = data
        self._dims = _QuObjectBuilder._initialize_dims(
            dims, data.shape[self._axis]
        )
        self._isherm = False

    def _as_vector(self, data):
        if data.ndim == 1:
            data = data.reshape((-1, 1) if self._axis == 0 else (1, -1))
        if data.ndim != 2 or data.shape[1 - self._axis] != 1:
            raise ConstructionError(
                f"A {self.type} needs a "
                + ("column" if self._axis == 0 else "row")
                + f" vector, got an array of shape {data.shape}"
            )
        return data

    def _add_scalar(self, value: complex) -> QuObject:
        # Numbers are broadcast over every element of a state.
        return self._new(_data.add_scalar(self._data, value),
                         self._dims, False)

    def proj(self) -> QuObject:
        """Form the projector from a given ket or bra vector.

        Returns
        -------
        P : :class:`.Operator`
            Projection operator.
        """
        return _QuObjectBuilder.qobjtype_to_class["oper"](self, copy=False)

    def norm(self, norm: Literal["l2", "max"] = "l2") -> float:
        """
        Norm of a state.

        Default norm is L2-norm.  The maximum modulus of the elements may be
        requested with the `norm` parameter.

        Parameters
        ----------
        norm : str, default: "l2"
            Which type of norm to use.  Allowed values are 'l2' and 'max'.

        Returns
        -------
        norm : float
            The requested norm of the state.
        """
        norm = norm or "l2"
        if norm not in ["l2", "max"]:
            raise ValueError(
                "vector norm must be in {'l2', 'max'}"
            )
        return {
            'l2': _data.norm.l2,
            'max': _data.norm.max
        }[norm](self._data)

    def unit(
        self,
        inplace: bool = False,
        norm: Literal["l2", "max"] = "l2",
    ) -> QuObject:
        """
        State normalized to unity.  Uses norm from :meth:`norm`.

        Parameters
        ----------
        inplace : bool, default: False
            Do an in-place normalization
        norm : str, default: "l2"
            Requested norm.

        Returns
        -------
        obj : :class:`.QuObject`
            Normalized state.  Will be the `self` object if in place.
        """
        norm_ = self.norm(norm=norm)
        if norm_ == 0:
            raise DomainError(f"Cannot normalize a {self.type} of norm 0")
        if inplace:
            self._data = _data.div(self._data, norm_)
            return self
        return self / norm_

    def _str_header(self) -> str:
        return (
            f"{self.shape[self._axis]}-element "
            f"{self.__class__.__name__}({self.storage}) "
            f"with space dimensions {self._dims}:"
        )


class Bra(_StateQuObject):
    """
    Row vector representation of a dual quantum state.

    Parameters
    ----------
    arg: array_like, sparse matrix, :obj:`.Ket` or :obj:`.Bra`
        Elements of the row.  One dimensional input is taken as the row's
        elements.  A :obj:`.Ket` gives its adjoint.
    dims: int, sequence of int or :obj:`.Dims`
        Dimensions of object used for tensor products.  ``(N,)`` by default.
    copy: bool
        Flag specifying whether the bra should get a copy of the
        input data, or use the original.
    """
    type = "bra"
    _dual_type = "ket"
    _axis = 1


class Ket(_StateQuObject):
    """
    Column vector representation of a quantum state.

    Parameters
    ----------
    arg: array_like, sparse matrix, :obj:`.Ket` or :obj:`.Bra`
        Elements of the column.  A :obj:`.Bra` gives its adjoint.
    dims: int, sequence of int or :obj:`.Dims`
        Dimensions of object used for tensor products.  ``(N,)`` by default.
    copy: bool
        Flag specifying whether the ket should get a copy of the
        input data, or use the original.

    Examples
    --------
    >>> g = Ket([1, 0]) # doctest: +SKIP
    >>> g + 1 == Ket([2, 1]) # doctest: +SKIP
    True
    """
    type = "ket"
    _dual_type = "bra"
    _axis = 0


def _bra_ket(bra: Bra, ket: Ket) -> float | complex:
    # Unconjugated: a bra already holds the dual elements.
    return _to_scalar(_data.contract(bra._data, ket._data),
                      bra._data, ket._data)


_QuObjectBuilder.qobjtype_to_class["bra"] = Bra
_QuObjectBuilder.qobjtype_to_class["ket"] = Ket
_QuObjectBuilder.products["bra", "ket"] = _bra_ket
