# ===== MODULE DOCSTRING ===== #
"""
Ordered severity tiers.

Two enumerations share one ordinal scale so that a requested level can be
compared directly against a threshold:

    OFF(0) < ERROR(1) < WARN(2) < INFO(3) < DEBUG(4) < TRACE(5)

A ``LevelFilter`` is a threshold and names the least severe level still
shown; ``OFF`` shows nothing. A ``Level`` is the severity of a single
request and therefore has no ``OFF`` member. A request is admitted when
``level <= threshold``.
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List, Optional
import enum
import logging

## ===== LOCAL ===== ##
from .config import TRACE_LEVEL

# ===== GLOBALS ===== #

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['Level', 'LevelFilter']

# ===== FUNCTIONS ===== #

def _lookup(members, name: str):
    # ASCII-only upper-casing; 'ınfo'.upper() must not become 'INFO'
    if not name.isascii():
        return None
    return members.get(name.upper())

def _tier_for_logging(levelno: int) -> int:
    if levelno >= logging.ERROR:
        return 1
    if levelno >= logging.WARNING:
        return 2
    if levelno >= logging.INFO:
        return 3
    if levelno >= logging.DEBUG:
        return 4
    return 5

# ===== CLASSES ===== #

class LevelFilter(enum.IntEnum):
    """Threshold for a module: the least severe level that is still logged."""
    OFF = 0
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def parse(cls, name: str) -> Optional['LevelFilter']:
        """Case-insensitive lookup by name. Returns None for unknown names.

        Surrounding whitespace is not stripped: ' info' is not a level.
        """
        return _lookup(cls.__members__, name)

    @classmethod
    def from_logging(cls, levelno: int) -> 'LevelFilter':
        """Threshold admitting everything down to a stdlib ``logging`` level."""
        return cls(_tier_for_logging(levelno))

    def __str__(self) -> str:
        return self.name.lower()


class Level(enum.IntEnum):
    """Severity of a single log request."""
    ERROR = 1
    WARN = 2
    INFO = 3
    DEBUG = 4
    TRACE = 5

    @classmethod
    def parse(cls, name: str) -> Optional['Level']:
        """Case-insensitive lookup by name. 'off' is not a request level."""
        return _lookup(cls.__members__, name)

    @classmethod
    def from_logging(cls, levelno: int) -> 'Level':
        """Map a stdlib ``logging`` level number onto a tier.

        CRITICAL and ERROR both map to ERROR; anything below DEBUG is TRACE.
        """
        return cls(_tier_for_logging(levelno))

    def to_logging(self) -> int:
        """The stdlib ``logging`` level number for this tier."""
        return _TO_LOGGING[self]

    def to_filter(self) -> LevelFilter:
        """The threshold that admits exactly this level and everything more severe."""
        return LevelFilter(int(self))

    def __str__(self) -> str:
        return self.name.lower()


_TO_LOGGING: Final = {
    Level.ERROR: logging.ERROR,
    Level.WARN: logging.WARNING,
    Level.INFO: logging.INFO,
    Level.DEBUG: logging.DEBUG,
    Level.TRACE: TRACE_LEVEL,
}
