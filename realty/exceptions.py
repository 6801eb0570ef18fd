"""Custom exception hierarchy for realty."""


class RealtyError(Exception):
    """Base exception for all realty errors."""


class InvalidArgumentError(RealtyError, ValueError):
    """Raised when a model is constructed from missing or malformed values."""


class EntityNotFoundError(RealtyError, KeyError):
    """Raised when a referenced listing does not exist."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep plain messages.
        return str(self.args[0]) if self.args else ""


class DuplicateEntityError(RealtyError):
    """Raised when a listing id is registered twice."""


class ConfigurationError(RealtyError):
    """Raised when configuration is invalid or missing."""


class SinkError(RealtyError):
    """Raised when a sink operation fails."""
