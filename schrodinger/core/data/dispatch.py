"""
Dispatch of data-layer functions on the storage kinds of their inputs.
"""

from .base import SPARSE, DENSE, kind
from ..errors import StorageMismatch
from ...logging_utils import get_logger

__all__ = ['Dispatcher']

logger = get_logger(__name__)


class Dispatcher:
    """
    Callable mapping the storage kinds of the first ``inputs`` arguments to a
    specialised kernel.

    Kernels are registered with :meth:`add_specialisations`.  When no kernel
    exists for a combination of kinds, every dispatched operand is converted
    to dense storage and the all-dense kernel is used, unless the dispatcher
    was created with ``promote=False``, in which case ``StorageMismatch`` is
    raised.

    Parameters
    ----------
    name : str
        Name of the function, used in error messages and logs.
    inputs : int
        Number of leading positional arguments that are storage.
    promote : bool
        Whether missing specialisations fall back to dense storage.
    """
    def __init__(self, name, inputs=1, promote=True, module=None):
        self.__name__ = name
        self.__qualname__ = name
        self.__module__ = module or __name__
        self.inputs = inputs
        self.promote = promote
        self._specialisations = {}

    def add_specialisations(self, specialisations):
        """
        Add kernels from an iterable of tuples ``(kind, ..., function)``
        with one kind per dispatched input.
        """
        for *kinds, function in specialisations:
            if len(kinds) != self.inputs:
                raise ValueError(
                    f"{self.__name__} dispatches on {self.inputs} inputs,"
                    f" got {len(kinds)} kinds"
                )
            self._specialisations[tuple(kinds)] = function

    @property
    def specialisations(self):
        return dict(self._specialisations)

    def __call__(self, *args, **kwargs):
        if len(args) < self.inputs:
            raise TypeError(
                f"{self.__name__} needs {self.inputs} positional inputs"
            )
        kinds = tuple(kind(arg) for arg in args[:self.inputs])
        function = self._specialisations.get(kinds)
        if function is not None:
            return function(*args, **kwargs)

        dense_kinds = (DENSE,) * self.inputs
        if not self.promote or dense_kinds not in self._specialisations:
            raise StorageMismatch(
                f"{self.__name__} is not defined for "
                + ", ".join(kinds) + " storage"
            )
        logger.debug(
            "%s: promoting %s storage to dense", self.__name__, kinds
        )
        args = tuple(
            arg.toarray() if k == SPARSE else arg
            for arg, k in zip(args[:self.inputs], kinds)
        ) + args[self.inputs:]
        return self._specialisations[dense_kinds](*args, **kwargs)

    def __repr__(self):
        return f"<dispatcher: {self.__name__}>"
