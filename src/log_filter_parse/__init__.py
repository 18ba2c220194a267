"""
log_filter_parse: per-module log level directives.

Parse a directive string such as ``"info,db=warn,net::http=trace"`` once,
then ask whether a given module may log at a given level:

    from log_filter_parse import FilterSet, Level

    filters = FilterSet.from_env("LOG_FILTER")
    if filters.is_enabled("net::http::client", Level.DEBUG):
        ...
"""

from .filters import FilterSet, FiltersKind, Rule
from .levels import Level, LevelFilter
from .logging import logger, set_verbosity
from .stdlib import DirectiveFilter

__all__ = [
    'DirectiveFilter',
    'FilterSet',
    'FiltersKind',
    'Level',
    'LevelFilter',
    'Rule',
    'logger',
    'set_verbosity',
]
