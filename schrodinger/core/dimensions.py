"""
Composite dimension descriptors, keeping track of the tensor structure of
quantum objects.
"""
# Required for Sphinx to follow autodoc_type_aliases
from __future__ import annotations

import numbers
import numpy as np

from .errors import ConstructionError


__all__ = ["Dims"]


class MetaDims(type):
    def __call__(cls, *args) -> "Dims":
        """
        Normalise the arguments to a tuple of factors and return the interned
        instance for it.
        """
        if len(args) == 1 and isinstance(args[0], Dims):
            return args[0]
        if len(args) == 1 and isinstance(args[0], (list, tuple, np.ndarray)):
            args = tuple(args[0])
        if len(args) == 0:
            raise ConstructionError("Empty list can't be used as dims.")

        factors = []
        for arg in args:
            if (
                isinstance(arg, (bool, np.bool_))
                or not isinstance(arg, numbers.Integral)
                or arg <= 0
            ):
                raise ConstructionError(
                    f"Dimensions must be integers > 0, got {arg!r}"
                )
            factors.append(int(arg))
        factors = tuple(factors)

        if factors not in cls._stored_dims:
            instance = cls.__new__(cls)
            instance.__init__(factors)
            cls._stored_dims[factors] = instance
        return cls._stored_dims[factors]


class Dims(metaclass=MetaDims):
    """
    Ordered sequence of subspace sizes describing a composite Hilbert space.

    The total dimension ``size`` is the product of the factors.  Two
    descriptors are equal only when their factor sequences are identical:
    ``Dims(4) != Dims(2, 2)`` even though both describe a 4-d space.

    Examples
    --------
    >>> Dims(2, 2) & Dims(3) # doctest: +SKIP
    Dims(2, 2, 3)
    >>> str(Dims(2, 2)) # doctest: +SKIP
    '2⊗2'
    """
    _stored_dims = {}

    def __init__(self, factors):
        self._factors = factors
        self.size = int(np.prod(factors))

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if isinstance(other, Dims):
            return self._factors == other._factors
        if isinstance(other, (tuple, list)):
            return self._factors == tuple(other)
        return NotImplemented

    def __ne__(self, other) -> bool:
        eq = self.__eq__(other)
        if eq is NotImplemented:
            return NotImplemented
        return not eq

    def __hash__(self):
        return hash(self._factors)

    def __len__(self) -> int:
        return len(self._factors)

    def __iter__(self):
        return iter(self._factors)

    def __getitem__(self, key):
        return self._factors[key]

    def __and__(self, other: "Dims") -> "Dims":
        """
        Syntax shortcut for tensor:
        A & B ==> A.tensor(B)
        """
        return self.tensor(other)

    def tensor(self, other: "Dims") -> "Dims":
        """
        Descriptor of the tensor product space, left factors first.
        """
        return Dims(self._factors + Dims(other)._factors)

    def as_tuple(self) -> tuple[int, ...]:
        return self._factors

    def __repr__(self) -> str:
        return "Dims(" + ", ".join(str(d) for d in self._factors) + ")"

    def __str__(self) -> str:
        return "⊗".join(str(d) for d in self._factors)

    def step(self) -> list[int]:
        """
        Stride of each factor in the flat, Kronecker-ordered index.
        """
        step = []
        stride = 1
        for dim in self._factors[::-1]:
            step = [stride] + step
            stride *= dim
        return step

    def dims2idx(self, indices) -> int:
        """
        Transform per-factor indices to the flat array index.
        """
        if isinstance(indices, numbers.Integral):
            indices = [indices]
        indices = list(indices)
        if len(indices) != len(self._factors):
            raise ValueError(
                f"Expected {len(self._factors)} indices, got {len(indices)}"
            )
        for idx, dim in zip(indices, self._factors):
            if not isinstance(idx, numbers.Integral):
                raise TypeError("Dimensions must be integers")
            if not 0 <= idx < dim:
                raise IndexError("Dimensions out of range")
        return int(sum(idx * step for idx, step in zip(indices, self.step())))

    def idx2dims(self, idx: int) -> list[int]:
        """
        Transform a flat array index to per-factor indices.
        """
        if not 0 <= idx < self.size:
            raise IndexError("Index out of range")
        return [int(i) for i in np.unravel_index(idx, self._factors)]
