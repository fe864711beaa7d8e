from __future__ import annotations


class PlatePalError(Exception):
    """Base class for every error PlatePal surfaces to a caller or a user."""


class ConfigurationError(PlatePalError):
    """A required setting (the Gemini credential) is missing."""


class UpstreamError(PlatePalError):
    """Gemini answered with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Gemini request failed: {status_code} - {body}")


class RequestFailedError(PlatePalError):
    """The proxy answered the client with a non-success status."""

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Request failed: {status_code}")


class ParseError(PlatePalError):
    """Model output did not contain a usable JSON array of restaurants."""


class SearchValidationError(PlatePalError):
    """The form is missing a preference or a location signal."""
