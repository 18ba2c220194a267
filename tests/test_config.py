import logging
from log_filter_parse import config

def test_separators_are_strings():
    """Verify separator constants exist and are non-empty strings."""
    for value in (config.DIRECTIVE_SEPARATOR, config.PAIR_SEPARATOR,
                  config.PATH_SEPARATOR, config.LOGGER_NAME_SEPARATOR):
        assert isinstance(value, str)
        assert value

def test_directive_syntax_values():
    assert config.DIRECTIVE_SEPARATOR == ','
    assert config.PAIR_SEPARATOR == '='
    assert config.PATH_SEPARATOR == '::'

def test_map_threshold():
    """Fifteen rules is where the mapping representation takes over."""
    assert config.MAP_THRESHOLD == 15

def test_default_env_var():
    assert isinstance(config.DEFAULT_ENV_VAR, str)
    assert config.DEFAULT_ENV_VAR == 'LOG_FILTER'

def test_trace_level_is_below_debug():
    assert config.TRACE_LEVEL < logging.DEBUG
