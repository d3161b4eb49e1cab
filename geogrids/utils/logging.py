"""
Logging for geogrids. Warnings are written to stderr unless the 'geogrids'
logger is configured by the caller.
"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('geogrids')
LOGGER.setLevel(logging.WARNING)
if not LOGGER.handlers:
    _LOG_HANDLER = logging.StreamHandler()
    _LOG_HANDLER.setFormatter(logging.Formatter('[%(levelname)s] %(name)s: %(message)s'))
    LOGGER.addHandler(_LOG_HANDLER)

_WARNED = set()


def warn_once(msg: str, *args) -> None:
    """Log a warning the first time a message (after formatting) is seen"""
    message = msg % args if args else msg
    if message in _WARNED:
        return

    _WARNED.add(message)
    LOGGER.warning(message)
