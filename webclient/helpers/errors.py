"""Exceptions raised by the authenticated HTTP helpers."""


class WebClientError(Exception):
    """Base class for web client failures."""


class TokenAcquisitionError(WebClientError):
    """Raised when the identity provider refuses to issue an access token."""

    def __init__(
        self,
        message: str,
        error: str | None = None,
        error_description: str | None = None,
    ):
        super().__init__(message)
        self.error = error
        self.error_description = error_description


class AuthenticationError(WebClientError):
    """Raised when an endpoint answers outside the success contract.

    Transport failures carry ``status_code=None``.
    """

    def __init__(self, message: str, url: str, status_code: int | None = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code
