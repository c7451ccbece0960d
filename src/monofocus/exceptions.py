"""Custom exceptions for Monofocus."""


class MonofocusError(Exception):
    """Base class for all Monofocus errors."""


class InvalidArgumentError(MonofocusError, TypeError):
    """Raised when a text function receives a non-string argument."""

    def __init__(self, name: str, value: object):
        """Initialize the error."""
        self.name = name
        self.value = value
        super().__init__(
            f"Argument '{name}' must be str, got {type(value).__name__}"
        )


class JournalNotInitializedError(MonofocusError):
    """Raised when the journal data directory has not been initialized."""

    def __init__(self, data_dir: str):
        """Initialize the error."""
        self.data_dir = data_dir
        super().__init__(
            f"No journal found at {data_dir}. Run 'monofocus init' first."
        )
