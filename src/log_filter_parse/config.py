# ===== MODULE DOCSTRING ===== #
"""Constants shared by the log_filter_parse modules."""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final

# ===== GLOBALS ===== #

## ===== DIRECTIVE SYNTAX ===== ##
DIRECTIVE_SEPARATOR: Final[str] = ','
PAIR_SEPARATOR: Final[str] = '='
PATH_SEPARATOR: Final[str] = '::'
# Separator used by standard-library logger names (e.g. 'a.b.c')
LOGGER_NAME_SEPARATOR: Final[str] = '.'

## ===== REPRESENTATION ===== ##
# Rule count at which a FilterSet switches from a linear list to a mapping.
# Scanning a short tuple beats hashing below this point.
MAP_THRESHOLD: Final[int] = 15

## ===== ENVIRONMENT ===== ##
DEFAULT_ENV_VAR: Final[str] = 'LOG_FILTER'

## ===== LEVELS ===== ##
# Numeric stdlib level used for TRACE (logging has no builtin TRACE)
TRACE_LEVEL: Final[int] = 5
