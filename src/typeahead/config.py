"""Configuration for the typeahead controller."""

import os
from dataclasses import dataclass

from typeahead.errors import ConfigError
from typeahead.utils import parse_bool


@dataclass
class TypeaheadConfig:
    """Configuration for the suggestion controller."""

    # Quiet period before a typed value is considered stable (seconds)
    debounce_delay: float = 0.5

    # Stable values shorter than this behave like the empty query
    min_query_length: int = 1

    # Strip surrounding whitespace from typed values
    trim_input: bool = True

    # Logging
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.debounce_delay < 0:
            raise ConfigError(f"debounce_delay must be >= 0, got {self.debounce_delay}")
        if self.min_query_length < 1:
            raise ConfigError(f"min_query_length must be >= 1, got {self.min_query_length}")


def load_config() -> TypeaheadConfig:
    """Load controller configuration from environment variables.

    Call ``dotenv.load_dotenv()`` first to pick up a ``.env`` file.

    Raises:
        ConfigError: If a variable holds an unparseable value
    """
    try:
        debounce_ms = int(os.getenv("TYPEAHEAD_DEBOUNCE_MS", "500"))
        min_length = int(os.getenv("TYPEAHEAD_MIN_QUERY_LENGTH", "1"))
        trim_input = parse_bool(os.getenv("TYPEAHEAD_TRIM_INPUT", "true"))
    except ValueError as e:
        raise ConfigError(f"Invalid typeahead configuration: {e}") from e

    return TypeaheadConfig(
        debounce_delay=debounce_ms / 1000.0,
        min_query_length=min_length,
        trim_input=trim_input,
        log_level=os.getenv("TYPEAHEAD_LOG_LEVEL", "INFO").upper(),
    )
