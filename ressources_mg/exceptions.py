# RessourcesMG - Exceptions
# =========================
"""Domain exceptions raised by the services and translated by the API."""


class RessourcesError(Exception):
    """Base class for all domain errors."""

    code = "ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(RessourcesError):
    """Requested record does not exist."""

    code = "NOT_FOUND"


class ValidationError(RessourcesError):
    """Input failed a business rule (missing field, bad value)."""

    code = "VALIDATION_ERROR"


class ConflictError(RessourcesError):
    """Record already exists or the operation is not allowed in the current state."""

    code = "CONFLICT"


class ConfigurationError(RessourcesError):
    """Required configuration is missing."""

    code = "NOT_CONFIGURED"


class SuggestionServiceError(RessourcesError):
    """Hosted suggestion service failed or returned an unusable payload."""

    code = "SUGGESTION_SERVICE_ERROR"
