from ._base import QuObject
from ._state import Ket, Bra
from ._operator import Operator

__all__ = ["QuObject", "Ket", "Bra", "Operator"]
