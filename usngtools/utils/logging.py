"""
Package logger for usngtools

Conversion diagnostics (e.g. a USNG reference that decodes outside of its
labeled grid zone) are reported here rather than raised. Adjust the level on
usngtools.LOGGER to silence or surface them.
"""

__all__ = ['LOGGER', 'warn_once']

import logging

LOGGER = logging.getLogger('usngtools')
LOGGER.setLevel(logging.WARNING)
_LOG_HANDLER = logging.StreamHandler()
_LOG_FORMATTER = logging.Formatter('[%(levelname)s] %(name)s: %(message)s')
_LOG_HANDLER.setFormatter(_LOG_FORMATTER)
LOGGER.addHandler(_LOG_HANDLER)

_WARNINGS = set()


def warn_once(warning: str):
    """Logs a warning only the first time a given message is seen"""
    if warning not in _WARNINGS:
        LOGGER.warning(warning)
        _WARNINGS.add(warning)
