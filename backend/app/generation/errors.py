"""Error kinds surfaced by the generate endpoint."""


class GenerationError(Exception):
    """Base exception; carries the HTTP status and the message sent to the caller."""

    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BadRequest(GenerationError):
    """Prompt missing or empty."""

    status_code = 400


class ServiceUnavailable(GenerationError):
    """Completion client was not configured at startup."""

    status_code = 503


class UpstreamFailure(GenerationError):
    """Completion API error, unusable completion, or unexpected orchestration error."""

    status_code = 500


class ConfigurationError(Exception):
    """Raised at startup when a required setting is missing."""
