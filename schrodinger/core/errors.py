"""
Exception classes for the quantum object algebra.

Every class also derives from the builtin exception a caller would expect
(``ValueError`` for bad values, ``TypeError`` for unsupported operand
combinations), so ``except ValueError`` style handling keeps working.
"""

__all__ = ['QuantumObjectError', 'DimensionMismatch', 'VariantMismatch',
           'StorageMismatch', 'DomainError', 'ConstructionError']


class QuantumObjectError(Exception):
    """Base class for all schrodinger exceptions"""


class DimensionMismatch(QuantumObjectError, ValueError):
    """
    The composite dimensions of the operands differ where identical
    dimensions are required, even if the total sizes agree.
    """


class VariantMismatch(QuantumObjectError, TypeError):
    """
    An operation was invoked on an unsupported pairing of variants, e.g.
    ``ket + operator``, ``ket * ket`` or a mixed-variant tensor product.
    """


class StorageMismatch(VariantMismatch):
    """
    The requested kernel is not available for the storage kind of the
    operand, e.g. a fractional power of a sparse operator.
    """


class DomainError(QuantumObjectError, ValueError):
    """
    The operation is mathematically undefined for its arguments, e.g.
    dividing a number by a quantum object or normalising a zero vector.
    """


class ConstructionError(QuantumObjectError, ValueError):
    """
    The storage or dimensions handed to a constructor do not describe a
    valid quantum object.
    """
