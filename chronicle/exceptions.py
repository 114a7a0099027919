"""Exception hierarchy for Chronicle.

All library exceptions inherit from ChronicleError. Reads of unknown
keys or absent fields are never errors; only setup mistakes and
backend I/O failures raise.
"""


class ChronicleError(Exception):
    """Base exception for all Chronicle errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ConfigurationError(ChronicleError):
    """Raised when a component is constructed with an invalid setup.

    Raised at construction time, never at first use.
    """


class StorageError(ChronicleError):
    """Raised when a persistent store backend cannot read or write."""
