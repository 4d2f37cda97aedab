# file: backend/errors.py


class AuraError(Exception):
    """Base class for errors raised by the Aura backend and dashboard."""


class MissingParameter(AuraError):
    """Client input is incomplete or cannot be parsed."""


class UpstreamError(AuraError):
    """An outbound call failed or returned something unusable."""


class NotFound(AuraError):
    """A lookup (e.g. forward geocoding) returned no results."""


class InvalidInput(AuraError, ValueError):
    """A value is outside the domain an operation accepts."""
