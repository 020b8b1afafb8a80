"""HTTP errors raised at the request boundary.

Store and Slack API failures are returned as result models
(PersistenceError, TransportError) and never reach this layer.
"""

from fastapi import HTTPException


class Unauthorized(HTTPException):
    """Missing or mismatched verification token (401)."""

    def __init__(self, detail: str = "Invalid credentials") -> None:
        super().__init__(status_code=401, detail=detail)


class MethodNotAllowed(HTTPException):
    """Wrong HTTP verb or wrong submission type (405)."""

    def __init__(self, detail: str = "Only POST requests are accepted") -> None:
        super().__init__(status_code=405, detail=detail)
