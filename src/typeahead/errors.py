"""Exception hierarchy for the typeahead controller."""


class TypeaheadError(Exception):
    """Base class for all typeahead errors."""


class ConfigError(TypeaheadError):
    """Raised when configuration values cannot be parsed."""


class LookupFailure(TypeaheadError):
    """The caller's lookup function raised or its awaitable failed.

    Attributes:
        query: Query the failed lookup was issued for
        generation: Generation of the failed lookup
    """

    def __init__(self, query: str, generation: int, cause: BaseException | None = None):
        self.query = query
        self.generation = generation
        self.cause = cause
        detail = f": {cause!r}" if cause is not None else ""
        super().__init__(f"Lookup #{generation} for {query!r} failed{detail}")


class InvalidHighlightIndex(TypeaheadError):
    """Highlight index escaped ``[-1, len(candidates) - 1]``.

    Always a programming defect in a transition, never a user error.
    """

    def __init__(self, index: int, size: int):
        self.index = index
        self.size = size
        super().__init__(f"Highlight index {index} out of range for {size} candidate(s)")
