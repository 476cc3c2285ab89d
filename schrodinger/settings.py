"""
This module contains settings for schrodinger: debugging, logging policy and
the options used by the core quantum-object algebra.
"""
import os

__all__ = ['settings']


def _get_environment_bool(var, default=False):
    """
    Get a boolean value from the environment variable `var`.  This evalutes to
    `default` if the environment variable is not present.  The false-y values
    are '0', 'false', 'none' and empty string, insensitive to case.  All other
    values are truth-y.
    """
    from_env = os.environ.get(var)
    if from_env is None:
        return default
    return from_env.lower() not in {'0', 'false', 'none', ''}


class Settings:
    """
    Schrodinger's settings and options.
    """
    _log_handlers = ("default", "basic", "stream", "null")

    def __init__(self):
        self.core = None  # set in schrodinger.core.options
        self._debug = _get_environment_bool("SCHRODINGER_DEBUG")
        self._log_handler = "default"

    @property
    def debug(self) -> bool:
        """
        Whether loggers created by ``schrodinger.logging_utils.get_logger``
        report at the ``DEBUG`` level.  Initialised from the
        ``SCHRODINGER_DEBUG`` environment variable.
        """
        return self._debug

    @debug.setter
    def debug(self, value: bool) -> None:
        self._debug = bool(value)

    @property
    def log_handler(self) -> str:
        """
        Handler policy for new loggers: "default", "basic", "stream" or
        "null".  "default" picks "basic" under IPython and "stream" otherwise.
        """
        return self._log_handler

    @log_handler.setter
    def log_handler(self, policy: str) -> None:
        if policy not in self._log_handlers:
            raise ValueError(
                "log_handler must be one of " + repr(self._log_handlers)
            )
        self._log_handler = policy

    @property
    def ipython(self) -> bool:
        """ Whether schrodinger is running in ipython. """
        try:
            __IPYTHON__
            return True
        except NameError:
            return False

    def __str__(self) -> str:
        lines = ["Schrodinger settings:"]
        for attr in self.__dir__():
            if not attr.startswith('_') and attr != "core":
                lines.append(f"    {attr}: {self.__getattribute__(attr)}")
        lines.append(f"    core: {self.core.__repr__(full=False)}")
        return '\n'.join(lines)

    def __repr__(self) -> str:
        return self.__str__()


settings = Settings()
