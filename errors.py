"""
Exceptions raised by the Pocket API client.

Network failures are not wrapped: anything raised by ``requests`` reaches
the caller as-is.
"""

from typing import Optional


class PocketError(Exception):
    """Base class for errors raised by this library."""


class MissingAccessTokenError(PocketError):
    """An item operation was called before an access token was set."""

    def __init__(self, message: str = "missing access token"):
        super().__init__(message)


class PocketAPIError(PocketError):
    """Non-success HTTP status, described by the X-Error-Code / X-Error headers."""

    def __init__(
        self,
        status_code: int,
        error_code: int = 0,
        error_msg: str = "",
        body: Optional[bytes] = None,
    ):
        self.status_code = status_code
        self.error_code = error_code
        self.error_msg = error_msg
        self.body = body
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"{self.error_code}: {self.error_msg}"

    def __repr__(self) -> str:
        return (
            f"PocketAPIError(status_code={self.status_code}, "
            f"error_code={self.error_code}, error_msg={self.error_msg!r})"
        )


class PocketParseError(PocketError):
    """Response body is not valid JSON object / query string."""

    def __init__(self, message: str, body: Optional[bytes] = None):
        self.body = body
        super().__init__(f"Error parsing http response: {message}")
