# Required for Sphinx to follow autodoc_type_aliases
from __future__ import annotations

from ..settings import settings
from typing import overload, Literal, Any
import types

__all__ = ["CoreOptions"]


class SchrodingerOptions:
    """
    Class for basic functionality for schrodinger's options.

    Define basic method to wrap an ``options`` dict.
    Default options are in a class _options dict.
    """

    _options: dict[str, Any] = {}
    _settings_name = None  # Where the default is in settings

    def __init__(self, **options):
        self.options = self._options.copy()
        for key in set(options) & set(self.options):
            self[key] = options.pop(key)
        if options:
            raise KeyError(f"Options {set(options)} are not supported.")

    def __contains__(self, key: str) -> bool:
        return key in self.options

    def __getitem__(self, key: str) -> Any:
        # Let the dict catch the KeyError
        return self.options[key]

    def __setitem__(self, key: str, value: Any) -> None:
        if key not in self.options:
            raise KeyError(f"Option {key!r} is not supported.")
        self.options[key] = value

    def __repr__(self, full: bool = True) -> str:
        out = [f"<{self.__class__.__name__}("]
        for key, value in self.options.items():
            if full or value != self._options[key]:
                out += [f"    '{key}': {repr(value)},"]
        out += [")>"]
        if len(out) - 2:
            return "\n".join(out)
        else:
            return "".join(out)

    def __enter__(self):
        self._backup = getattr(settings, self._settings_name)
        self._set_as_global_default()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        exc_traceback: types.TracebackType | None,
    ) -> None:
        self._backup._set_as_global_default()

    def _set_as_global_default(self):
        setattr(settings, self._settings_name, self)


class CoreOptions(SchrodingerOptions):
    """
    Options used by the core of schrodinger such as the tolerance of
    :obj:`.QuObject` comparison.

    Values can be changed in ``schrodinger.settings.core`` or by using
    context:

        ``with CoreOptions(atol=1e-6): ...``

    ********
    Options:
    ********

    atol : float {1e-12}
        General absolute tolerance.  Used when comparing quantum objects.

    rtol : float {1e-12}
        General relative tolerance.  Used when comparing quantum objects.

    auto_tidyup : bool {False}
        Whether to remove small elements from the sparse results of
        arithmetic.  Off by default so that results are exactly those of the
        underlying kernels.

    auto_tidyup_atol : float {1e-14}
        The absolute tolerance used in automatic tidyup (see the
        ``auto_tidyup`` parameter above) and the default value of ``atol``
        used in :meth:`QuObject.tidyup`.
    """

    _options = {
        # general absolute tolerance
        "atol": 1e-12,
        # general relative tolerance
        "rtol": 1e-12,
        # use auto tidyup
        "auto_tidyup": False,
        # use auto tidyup absolute tolerance
        "auto_tidyup_atol": 1e-14,
    }
    _settings_name = "core"

    @overload
    def __getitem__(self, key: Literal["auto_tidyup"]) -> bool: ...

    @overload
    def __getitem__(
        self, key: Literal["atol", "rtol", "auto_tidyup_atol"]
    ) -> float: ...

    def __getitem__(self, key: str) -> Any:
        # Let the dict catch the KeyError
        return self.options[key]


# Creating the instance of core options to use everywhere.
CoreOptions()._set_as_global_default()
