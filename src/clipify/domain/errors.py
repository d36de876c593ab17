"""Domain-specific exceptions."""

from __future__ import annotations

from typing import Optional

import httpx


class ClipifyError(Exception):
    """Base class for errors raised by the clip-ify client."""


class MissingArgumentError(ClipifyError, ValueError):
    """Raised when a required argument is missing, before any request is made."""


class ClipifyHTTPError(ClipifyError):
    """Raised when the API answers with a non-2xx status.

    ``str(error)`` is the server-supplied ``error`` message when the body
    carried one, otherwise ``"Request failed with status <code>"``.
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        response: Optional[httpx.Response] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response = response
