"""
Error types for the Booli MCP server.

Every failure is tagged with an ErrorKind where it is detected, so callers
branch on the kind instead of inspecting message text.
"""

from enum import Enum


class ErrorKind(Enum):
    """Classification of tool failures."""
    VALIDATION = "validation"
    UNSUPPORTED = "unsupported"
    UPSTREAM = "upstream"
    NOT_FOUND = "not_found"


class BooliError(Exception):
    """Failure raised by the client layer, tagged with its kind.

    Attributes:
        kind: Where the failure belongs in the error taxonomy
        message: Message text surfaced to the caller verbatim
    """

    def __init__(self, kind: ErrorKind, message: str):
        super().__init__(message)
        self.kind = kind
        self.message = message


class GraphQLRequestError(Exception):
    """Raw transport or GraphQL failure reported by the endpoint.

    Attributes:
        status: HTTP status code, or None if no response was received
    """

    def __init__(self, message: str, status: int = None):
        super().__init__(message)
        self.status = status
