import pytest

from typeahead.config import TypeaheadConfig, load_config
from typeahead.errors import ConfigError

ENV_VARS = (
    "TYPEAHEAD_DEBOUNCE_MS",
    "TYPEAHEAD_MIN_QUERY_LENGTH",
    "TYPEAHEAD_TRIM_INPUT",
    "TYPEAHEAD_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    config = load_config()

    assert config == TypeaheadConfig()
    assert config.debounce_delay == 0.5


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("TYPEAHEAD_DEBOUNCE_MS", "250")
    monkeypatch.setenv("TYPEAHEAD_MIN_QUERY_LENGTH", "2")
    monkeypatch.setenv("TYPEAHEAD_TRIM_INPUT", "no")
    monkeypatch.setenv("TYPEAHEAD_LOG_LEVEL", "debug")

    config = load_config()

    assert config.debounce_delay == 0.25
    assert config.min_query_length == 2
    assert config.trim_input is False
    assert config.log_level == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("TYPEAHEAD_DEBOUNCE_MS", "soon"),
        ("TYPEAHEAD_DEBOUNCE_MS", "-5"),
        ("TYPEAHEAD_MIN_QUERY_LENGTH", "0"),
        ("TYPEAHEAD_TRIM_INPUT", "maybe"),
    ],
)
def test_invalid_values_raise_config_error(monkeypatch, name, value):
    monkeypatch.setenv(name, value)

    with pytest.raises(ConfigError):
        load_config()
