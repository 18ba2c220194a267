# ===== MODULE DOCSTRING ===== #
"""
Adapter that applies a FilterSet to standard-library ``logging`` records.

Only two record fields are consumed: ``record.name`` (dotted logger names
are read as ``::`` module paths, so ``app.db.pool`` is looked up as
``app::db::pool``) and ``record.levelno``.

Usage:
    import logging
    from log_filter_parse.stdlib import DirectiveFilter

    handler = logging.StreamHandler()
    handler.addFilter(DirectiveFilter("warn,app.db=debug"))
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from typing import Final, List, Union
import logging

## ===== LOCAL ===== ##
from .config import DEFAULT_ENV_VAR, LOGGER_NAME_SEPARATOR, PATH_SEPARATOR
from .filters import FilterSet
from .levels import Level

# ===== GLOBALS ===== #

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['DirectiveFilter', 'module_path_for']

# ===== FUNCTIONS ===== #

def module_path_for(logger_name: str) -> str:
    """Module path for a dotted stdlib logger name."""
    return logger_name.replace(LOGGER_NAME_SEPARATOR, PATH_SEPARATOR)

# ===== CLASSES ===== #

class DirectiveFilter(logging.Filter):
    """``logging.Filter`` that admits a record when its FilterSet does.

    Args:
        source: A parsed FilterSet, or a directive string to parse.

    Raises:
        TypeError: If ``source`` is neither a FilterSet nor a str.
    """

    def __init__(self, source: Union[FilterSet, str]):
        super().__init__()
        if isinstance(source, FilterSet):
            self.filters = source
        elif isinstance(source, str):
            self.filters = FilterSet.from_str(source)
        else:
            raise TypeError(
                f"DirectiveFilter expects a FilterSet or a directive string, "
                f"got {type(source).__name__}"
            )

    @classmethod
    def from_env(cls, var: str = DEFAULT_ENV_VAR) -> 'DirectiveFilter':
        return cls(FilterSet.from_env(var))

    def filter(self, record: logging.LogRecord) -> bool:
        return self.filters.is_enabled(
            module_path_for(record.name),
            Level.from_logging(record.levelno)
        )
