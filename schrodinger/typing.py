from typing import Sequence, Union


__all__ = ["DimsLike", "StorageKind"]


DimsLike = Union[int, Sequence[int], "Dims"]


StorageKind = str
