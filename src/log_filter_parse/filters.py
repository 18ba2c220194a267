# ===== MODULE DOCSTRING ===== #
"""
Directive parsing and per-module level lookup.

A directive string is a comma-separated list of clauses. Each clause is
either a bare level name, which contributes to the global minimum, or a
``module=level`` pair, which sets the threshold for one module path:

    "warn,net::http=debug,net::http::pool=off"

Parsing never fails. A clause that cannot be understood is dropped on its
own and the rest of the string still applies; the package logger records
each dropped clause at DEBUG.

Lookup tries the full module path, then each shorter prefix cut at a
``::`` boundary (longest first), then the global minimum:

    >>> filters = FilterSet.from_str("warn,net::http=debug,net::http::pool=off")
    >>> filters.find_module("net::http::pool::conn")
    <LevelFilter.OFF: 0>
    >>> filters.find_module("net::http::client")
    <LevelFilter.DEBUG: 4>
    >>> filters.find_module("db")
    <LevelFilter.WARN: 2>
    >>> filters.is_enabled("db", Level.ERROR)
    True
"""

# ===== IMPORTS ===== #

## ===== STANDARD LIBRARY ===== ##
from types import MappingProxyType
from typing import (
    Optional, Iterable, Mapping,
    Final, Tuple, List
)
import dataclasses
import logging
import enum
import os

## ===== LOCAL ===== ##
from .config import (
    DIRECTIVE_SEPARATOR, PAIR_SEPARATOR, PATH_SEPARATOR,
    MAP_THRESHOLD, DEFAULT_ENV_VAR
)
from .levels import Level, LevelFilter
from .logging import _log

# ===== GLOBALS ===== #

## ===== EXPORTS ===== ##
__all__: Final[List[str]] = ['FilterSet', 'FiltersKind', 'Rule']

# ===== CLASSES ===== #

class FiltersKind(enum.Enum):
    """How a FilterSet stores its rules."""
    # No rules, no minimum: nothing is ever logged
    DEFAULT = 'default'
    # No rules, only a global minimum
    BLANKET = 'blanket'
    # Few rules, scanned in order
    LIST = 'list'
    # Many rules, looked up by module path
    MAP = 'map'


@dataclasses.dataclass(frozen=True)
class Rule:
    """Threshold for one module path, as written in a directive."""
    module: str
    level: LevelFilter


@dataclasses.dataclass(frozen=True)
class FilterSet:
    """Parsed directives, queried once per log call.

    Build one with ``from_str``, ``from_env`` or ``from_rules``; the
    instance is frozen and safe to share between threads.

    Attributes:
        kind (FiltersKind): Storage strategy. DEFAULT and BLANKET hold no
            rules; LIST and MAP differ only in lookup speed.
        minimum (Optional[LevelFilter]): Fallback threshold for modules no
            rule matches. Never ``LevelFilter.OFF`` when built by the parser.
        rules (Tuple[Rule, ...]): Rules in directive order, duplicates kept.
            When a module path appears more than once the first rule wins,
            in both LIST and MAP form.
    """
    kind: FiltersKind = FiltersKind.DEFAULT
    minimum: Optional[LevelFilter] = None
    rules: Tuple[Rule, ...] = ()
    _index: Mapping[str, LevelFilter] = dataclasses.field(
        init=False, repr=False, compare=False, hash=False,
        default_factory=lambda: MappingProxyType({})
    )

    def __post_init__(self) -> None:
        has_rules = bool(self.rules)
        if self.kind is FiltersKind.DEFAULT and (has_rules or self.minimum is not None):
            raise ValueError("A DEFAULT FilterSet holds neither rules nor a minimum")
        if self.kind is FiltersKind.BLANKET and (has_rules or self.minimum is None):
            raise ValueError("A BLANKET FilterSet holds a minimum and no rules")
        if self.kind in (FiltersKind.LIST, FiltersKind.MAP) and not has_rules:
            raise ValueError(f"A {self.kind.name} FilterSet needs at least one rule")
        # Plain lists would let callers mutate a shared instance
        object.__setattr__(self, 'rules', tuple(self.rules))
        if self.kind is FiltersKind.MAP:
            index = {}
            for rule in self.rules:
                index.setdefault(rule.module, rule.level)
            object.__setattr__(self, '_index', MappingProxyType(index))

    def __reduce__(self):
        # The read-only index cannot be pickled; __post_init__ rebuilds it
        return (self.__class__, (self.kind, self.minimum, self.rules))

    ## ===== CONSTRUCTION ===== ##
    @classmethod
    def default(cls) -> 'FilterSet':
        """A FilterSet that disables all logging."""
        return cls()

    @classmethod
    def from_rules(cls, rules: Iterable[Rule], minimum: Optional[LevelFilter] = None) -> 'FilterSet':
        """Pick the representation for already-parsed rules."""
        rules = tuple(rules)
        if not rules:
            kind = FiltersKind.DEFAULT if minimum is None else FiltersKind.BLANKET
        elif len(rules) < MAP_THRESHOLD:
            kind = FiltersKind.LIST
        else:
            kind = FiltersKind.MAP
        return cls(kind=kind, minimum=minimum, rules=rules)

    @classmethod
    def from_str(cls, directives: str) -> 'FilterSet':
        """Parse a directive string such as ``"info,db=warn,net::http=trace"``.

        Clauses are split on ',' and used verbatim; whitespace is not
        trimmed, so ``"a, b=info"`` configures the module ``" b"``.

        Bare level names set the minimum. The most verbose one wins and
        ``off`` is ignored, so ``"debug,off"`` still logs at DEBUG.

        Never raises. Unusable clauses are dropped.
        """
        rules: List[Rule] = []
        bare_levels: List[LevelFilter] = []

        for directive in directives.split(DIRECTIVE_SEPARATOR):
            if PAIR_SEPARATOR in directive:
                rule = _parse_rule(directive)
                if rule is not None:
                    rules.append(rule)
                continue

            level = LevelFilter.parse(directive)
            if level is None:
                if _log.isEnabledFor(logging.DEBUG):
                    _log.debug(f"Dropping directive {directive!r}: not a level name")
            elif level is LevelFilter.OFF:
                if _log.isEnabledFor(logging.DEBUG):
                    _log.debug("Ignoring bare 'off' directive for the global minimum")
            else:
                bare_levels.append(level)

        minimum = max(bare_levels) if bare_levels else None
        filters = cls.from_rules(rules, minimum)
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(
                f"Parsed {directives!r} into {filters.kind.name} with "
                f"{len(filters.rules)} rule(s), minimum={filters.minimum!s}"
            )
        return filters

    @classmethod
    def from_env(cls, var: str = DEFAULT_ENV_VAR) -> 'FilterSet':
        """Parse the directive string held in environment variable ``var``.

        An unset variable behaves like an empty string (DEFAULT kind).
        """
        value = os.environ.get(var)
        if value is None:
            if _log.isEnabledFor(logging.DEBUG):
                _log.debug(f"Environment variable {var!r} is not set; logging disabled")
            return cls.default()
        return cls.from_str(value)

    ## ===== QUERIES ===== ##
    def is_enabled(self, module: str, level: Level) -> bool:
        """True if a request at ``level`` from ``module`` should be logged.

        Anything less severe than ERROR as a request (``LevelFilter.OFF``, 0)
        is never admitted.
        """
        if level < Level.ERROR:
            return False
        threshold = self.find_module(module)
        if threshold is None:
            return False
        return level <= threshold

    def find_module(self, module: str) -> Optional[LevelFilter]:
        """Threshold for ``module``, or None if nothing applies.

        An exact rule wins, then the longest ``::`` prefix with a rule,
        then the global minimum. ``a::b::c`` tries ``a::b::c``, ``a::b``
        and ``a`` in that order.
        """
        if self.kind is FiltersKind.DEFAULT:
            return None
        if self.kind is FiltersKind.BLANKET:
            return self.minimum

        level = self._find_exact(module)
        if level is not None:
            return level

        end = len(module)
        while True:
            end = module.rfind(PATH_SEPARATOR, 0, end)
            if end < 0:
                break
            level = self._find_exact(module[:end])
            if level is not None:
                return level

        return self.minimum

    def _find_exact(self, module: str) -> Optional[LevelFilter]:
        if self.kind is FiltersKind.MAP:
            return self._index.get(module)
        for rule in self.rules:
            if rule.module == module:
                return rule.level
        return None

    @property
    def max_level(self) -> Optional[LevelFilter]:
        """Most verbose threshold any module can resolve to.

        A request more verbose than this is rejected for every module, so
        callers can skip the lookup. None for a DEFAULT FilterSet.
        """
        levels = [rule.level for rule in self.rules]
        if self.minimum is not None:
            levels.append(self.minimum)
        return max(levels) if levels else None

# ===== FUNCTIONS ===== #

def _parse_rule(directive: str) -> Optional[Rule]:
    """Parse one ``module=level`` clause; None if either side is unusable."""
    module, _, value = directive.partition(PAIR_SEPARATOR)
    if not module:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"Dropping directive {directive!r}: empty module path")
        return None
    level = LevelFilter.parse(value)
    if level is None:
        if _log.isEnabledFor(logging.DEBUG):
            _log.debug(f"Dropping directive {directive!r}: {value!r} is not a level name")
        return None
    return Rule(module, level)
