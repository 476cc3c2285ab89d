from __future__ import annotations

import numbers

import numpy as np

from ._base import QuObject, _QuObjectBuilder, _isreal, _to_scalar
from ._state import Bra, Ket
from .. import data as _data
from ..errors import (
    ConstructionError, DomainError, StorageMismatch, VariantMismatch,
)
from typing import Literal
from schrodinger.typing import DimsLike
from numpy.typing import ArrayLike


__all__ = []


class Operator(QuObject):
    """
    A class for representing quantum objects that represent operators: square
    matrices acting on a (possibly composite) Hilbert space.

    Parameters
    ----------
    arg: array_like, sparse matrix or :obj:`.QuObject`
        Square matrix of the operator.  A :obj:`.Ket` ``|k>`` gives the
        projector ``|k><k|`` and a :obj:`.Bra` ``<b|`` gives ``|b><b|``.
    dims: int, sequence of int or :obj:`.Dims`
        Dimensions of object used for tensor products.  ``(N,)`` by default.
    isherm: bool, optional
        Hermitian hint.  Only set it when the matrix is known to be Hermitian.
        Defaults to ``False``, or to the hint of ``arg`` when it is an
        operator.
    copy: bool
        Flag specifying whether the operator should get a copy of the
        input data, or use the original.

    Examples
    --------
    >>> Operator([[0, 1], [1, 0]], isherm=True) # doctest: +SKIP
    2×2 Operator(dense, isherm=True) with space dimensions 2:
    [[0. 1.]
     [1. 0.]]
    """
    type = "oper"
    _dual_type = "oper"

    def __init__(
        self,
        arg: ArrayLike | QuObject,
        dims: DimsLike = None,
        isherm: bool = None,
        copy: bool = True,
    ):
        flag = False
        if isinstance(arg, Ket):
            data = _data.matmul(arg._data, _data.adjoint(arg._data))
            dims = arg._dims if dims is None else dims
            flag = True
        elif isinstance(arg, Bra):
            data = _data.matmul(_data.adjoint(arg._data), arg._data)
            dims = arg._dims if dims is None else dims
            flag = True
        elif isinstance(arg, Operator):
            data = arg._data.copy() if copy else arg._data
            dims = arg._dims if dims is None else dims
            flag = arg._isherm
        else:
            data = _QuObjectBuilder._initialize_data(arg, copy)
            if data.ndim != 2 or data.shape[0] != data.shape[1]:
                raise ConstructionError(
                    "An operator needs a square matrix, got an array of "
                    f"shape {data.shape}"
                )
        self._data = data
        self._dims = _QuObjectBuilder._initialize_dims(dims, data.shape[0])
        self._isherm = bool(flag if isherm is None else isherm)

    def _add_scalar(self, value: complex) -> Operator:
        # Numbers are added as a multiple of the identity.
        return self._new(
            _data.add(self._data, _data.identity_like(self._data, value)),
            self._dims,
            self._isherm and _isreal(value),
        )

    def __pow__(self, p, m=None) -> Operator:
        """
        Matrix power.  Non-negative integer powers keep the storage kind;
        other real powers are only defined for dense storage.
        """
        if m is not None:
            raise VariantMismatch("modular powers are not defined")
        if isinstance(p, QuObject):
            raise VariantMismatch("powers must be numbers")
        if isinstance(p, numbers.Integral) and p >= 0:
            return self._new(_data.pow(self._data, int(p)),
                             self._dims, self._isherm)
        if isinstance(p, numbers.Real):
            if self.issparse:
                raise StorageMismatch(
                    f"A sparse operator cannot be raised to the power {p}:"
                    " convert it to dense storage first"
                )
            if self._isherm:
                return self._spectral(lambda w: w ** p, None)
            return self._new(_data.fractional_pow(self._data, p),
                             self._dims, False)
        if isinstance(p, numbers.Number):
            raise VariantMismatch("complex powers are not defined")
        return NotImplemented

    def trans(self) -> Operator:
        """Get the matrix transpose of the quantum operator.

        Returns
        -------
        oper : :class:`.Operator`
            Transpose of input operator.
        """
        if self._isherm:
            # The transpose of a Hermitian matrix is its conjugate.
            if np.iscomplexobj(self._data):
                return self.conj()
            return self.copy()
        return self._new(_data.transpose(self._data), self._dims, False)

    def _spectral(self, function, kernel) -> Operator:
        """
        Apply a scalar function to the operator.  Hermitian-flagged operators
        go through the eigendecomposition and keep the hint when every
        transformed eigenvalue is real; others use ``kernel``.
        """
        if self._isherm:
            with np.errstate(divide='ignore', invalid='ignore'):
                data, isreal = _data.eigh_apply(self._data, function)
            return self._new(data, self._dims, isreal)
        return self._new(kernel(self._data), self._dims, False)

    def expm(self) -> Operator:
        """Matrix exponential of quantum operator.

        Returns
        -------
        oper : :class:`.Operator`
            Exponentiated quantum operator, with dense storage.
        """
        return self._spectral(np.exp, _data.expm)

    def logm(self) -> Operator:
        """Principal matrix logarithm of quantum operator.

        Returns
        -------
        oper : :class:`.Operator`
            Logarithm of the quantum operator, with dense storage.
        """
        return self._spectral(np.log, _data.logm)

    def sqrtm(self) -> Operator:
        """
        Principal square root of a quantum operator.

        Returns
        -------
        oper : :class:`.Operator`
            Matrix square root of operator, with dense storage.
        """
        return self._spectral(np.sqrt, _data.sqrtm)

    def cosm(self) -> Operator:
        """Cosine of a quantum operator.

        Returns
        -------
        oper : :class:`.Operator`
            Matrix cosine of operator.

        Notes
        -----
        Uses the Q.expm() method unless the operator is Hermitian-flagged.
        """
        if self._isherm:
            return self._spectral(np.cos, None)
        return 0.5 * ((1j * self).expm() + (-1j * self).expm())

    def sinm(self) -> Operator:
        """Sine of a quantum operator.

        Returns
        -------
        oper : :class:`.Operator`
            Matrix sine of operator.

        Notes
        -----
        Uses the Q.expm() method unless the operator is Hermitian-flagged.
        """
        if self._isherm:
            return self._spectral(np.sin, None)
        return -0.5j * ((1j * self).expm() - (-1j * self).expm())

    def tr(self) -> float | complex:
        """Trace of a quantum object.

        Returns
        -------
        trace : float or complex
            Returns the trace of the quantum object, real for
            Hermitian-flagged operators.
        """
        out = _to_scalar(_data.trace(self._data), self._data)
        if self._isherm:
            out = float(np.real(out))
        return out

    def diag(self) -> np.ndarray:
        """Diagonal elements of the operator."""
        out = self._data.diagonal()
        if self._isherm:
            out = np.real(out)
        return out

    def norm(self, norm: Literal["tr", "fro", "max"] = "tr") -> float:
        """
        Norm of an operator.

        Default norm is the trace-norm. Other operator norms may be
        specified using the `norm` parameter.

        Parameters
        ----------
        norm : str, default: "tr"
            Which type of norm to use. Allowed values are 'tr' for the trace
            norm, 'fro' for the Frobenius norm and 'max'.

        Returns
        -------
        norm : float
            The requested norm of the operator.
        """
        norm = norm or "tr"
        if norm not in {'tr', 'fro', 'max'}:
            raise ValueError(
                "matrix norm must be in {'tr', 'fro', 'max'}"
            )
        return {
            'tr': _data.norm.trace_norm,
            'max': _data.norm.max,
            'fro': _data.norm.frobenius,
        }[norm](self._data)

    def unit(self, inplace: bool = False) -> Operator:
        """
        Operator normalized to unit trace, as for a density matrix.

        Parameters
        ----------
        inplace : bool
            Do an in-place normalization

        Returns
        -------
        obj : :class:`.Operator`
            Normalized operator.  Will be the `self` object if in place.
        """
        trace = self.tr()
        if trace == 0:
            raise DomainError("Cannot normalize an operator of trace 0")
        if inplace:
            self._data = _data.div(self._data, trace)
            self._isherm = self._isherm and _isreal(trace)
            return self
        return self / trace

    def _str_header(self) -> str:
        return (
            f"{self.shape[0]}×{self.shape[1]} Operator({self.storage}, "
            f"isherm={self._isherm}) with space dimensions {self._dims}:"
        )


def _ket_bra(ket: Ket, bra: Bra) -> Operator:
    return Operator._new(_data.matmul(ket._data, bra._data), ket._dims)


def _oper_ket(oper: Operator, ket: Ket) -> Ket:
    return Ket._new(_data.matmul(oper._data, ket._data), ket._dims)


def _bra_oper(bra: Bra, oper: Operator) -> Bra:
    return Bra._new(_data.matmul(bra._data, oper._data), bra._dims)


def _oper_oper(left: Operator, right: Operator) -> Operator:
    return Operator._new(_data.matmul(left._data, right._data), left._dims)


_QuObjectBuilder.qobjtype_to_class["oper"] = Operator
_QuObjectBuilder.products["ket", "bra"] = _ket_bra
_QuObjectBuilder.products["oper", "ket"] = _oper_ket
_QuObjectBuilder.products["bra", "oper"] = _bra_oper
_QuObjectBuilder.products["oper", "oper"] = _oper_oper
