"""
Loggers for schrodinger internals.  The handlers attached to a logger follow
``settings.log_handler`` and its level follows ``settings.debug``.  The data
layer uses them to report storage promotions at the ``DEBUG`` level.
"""

import inspect
import logging

from schrodinger.settings import settings

__all__ = ['get_logger']

_FORMAT = '[%(asctime)s] %(name)s: %(funcName)s: %(levelname)s: %(message)s'
_DATEFMT = '%Y-%m-%d %H:%M:%S'


def _caller_name(depth=2):
    frame = inspect.currentframe()
    for _ in range(depth):
        if frame is None:
            break
        frame = frame.f_back
    if frame is None:
        return '<unknown>'
    return frame.f_globals.get('__name__', '<unknown>')


def _attach_stream(logger):
    # A single stream handler per logger, however often it is requested.
    if any(getattr(handler, '_schrodinger', False)
           for handler in logger.handlers):
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_FORMAT, _DATEFMT))
    handler._schrodinger = True
    logger.addHandler(handler)
    logger.propagate = False


def _attach_basic(logger):
    logging.basicConfig(level=logging.DEBUG if settings.debug else None)


def _attach_null(logger):
    logger.addHandler(logging.NullHandler())


_POLICIES = {
    'basic': _attach_basic,
    'stream': _attach_stream,
    'null': _attach_null,
}


def get_logger(name=None):
    """
    Return the logger ``name`` configured for the current settings.

    Parameters
    ----------
    name : str, optional
        Name of the logger.  Defaults to the name of the calling module.

    Notes
    -----
    The "default" policy resolves to "basic" inside IPython, so records go
    through the root logger configured by the notebook, and to "stream"
    elsewhere.  "null" leaves handler configuration to the caller.
    """
    if name is None:
        name = _caller_name()
    logger = logging.getLogger(name)
    policy = settings.log_handler
    if policy == 'default':
        policy = 'basic' if settings.ipython else 'stream'
    _POLICIES[policy](logger)
    logger.setLevel(logging.DEBUG if settings.debug else logging.WARN)
    return logger
