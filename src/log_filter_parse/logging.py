# ===== MODULE DOCSTRING ===== #
"""
log_filter_parse Logging Configuration

This module configures the logger used by the log_filter_parse package
itself. It is unrelated to the filters the package builds. All records are
DEBUG and come from the directive parser:
- each dropped clause and why (not a level name, empty module path,
  unknown level value)
- a bare 'off' ignored for the global minimum
- the representation chosen for a parsed string (kind, rule count, minimum)
- an unset environment variable in FilterSet.from_env

Lookups never log.

The logger is configured with the following defaults:
- Output: Standard error stream (sys.stderr)
- Format: "%(levelname)s:%(name)s: %(message)s"
- Default Level: WARNING

Usage:
    from log_filter_parse.logging import set_verbosity
    import logging

    # See why directives were dropped
    set_verbosity(logging.DEBUG)
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List
import logging
import sys

# ===== GLOBALS ===== #

## ===== CONSTANTS ===== ##
LOG_FORMAT: Final[str] = '%(levelname)s:%(name)s: %(message)s'

VALID_LEVELS: Final[List[int]] = [
    logging.DEBUG,
    logging.INFO,
    logging.WARNING,
    logging.ERROR,
    logging.CRITICAL
]

## ===== LOGGER SETUP ===== ##
_log: Final[logging.Logger] = logging.getLogger('log_filter_parse')

handler: Final[logging.StreamHandler] = logging.StreamHandler(sys.stderr)
handler.setFormatter(logging.Formatter(LOG_FORMAT))

if not _log.handlers:
    _log.addHandler(handler)
    _log.propagate = True
    _log.setLevel(logging.WARNING)

## ===== PUBLIC API ALIAS ===== ##
logger = _log

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = [
    'logger',
    'set_verbosity',
]

# ===== FUNCTIONS ===== #

def set_verbosity(level: int) -> None:
    """Set how much the directive parser reports.

    Only DEBUG shows anything; the parser emits nothing at INFO or above.

    Args:
        level: A logging level constant from the logging module
              (e.g., logging.DEBUG, logging.INFO, logging.WARNING)

    Raises:
        ValueError: If an invalid logging level is provided

    Example:
        >>> import logging
        >>> from log_filter_parse.logging import set_verbosity
        >>> set_verbosity(logging.DEBUG)
    """
    if level not in VALID_LEVELS:
        names = ", ".join(logging.getLevelName(valid) for valid in VALID_LEVELS)
        raise ValueError(f"Invalid logging level: {level!r} (expected one of {names})")

    _log.setLevel(level)
    if _log.isEnabledFor(logging.DEBUG):
        _log.debug(f"log_filter_parse verbosity set to {logging.getLevelName(level)}")
