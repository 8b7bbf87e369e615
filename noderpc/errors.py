"""Errors raised by the node RPC client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Type


class NodeRPCError(Exception):
    """Base class for every failure surfaced by the client."""


@dataclass
class TransportError(NodeRPCError):
    """The HTTP exchange itself failed (connection, TLS or timeout)."""

    cause: Exception

    def __str__(self) -> str:  # noqa: D401
        return f"Transport failure: {self.cause}"


@dataclass
class HTTPStatusError(NodeRPCError):
    """The node answered with a status outside 0-399."""

    status_code: int
    body: str = ""

    def __str__(self) -> str:  # noqa: D401
        return f"HTTP {self.status_code} ({type(self).__name__})"


class BadRequestError(HTTPStatusError):
    """HTTP 400 Bad Request."""


class UnauthorizedError(HTTPStatusError):
    """HTTP 401 Unauthorized, usually wrong RPC credentials."""


class ForbiddenError(HTTPStatusError):
    """HTTP 403 Forbidden."""


class NotFoundError(HTTPStatusError):
    """HTTP 404 Not Found."""


class MethodNotAllowedError(HTTPStatusError):
    """HTTP 405 Method Not Allowed."""


class TooManyRequestsError(HTTPStatusError):
    """HTTP 429 Too Many Requests."""


class UnhandledClientError(HTTPStatusError):
    """Any other 4xx status."""


class InternalServerError(HTTPStatusError):
    """HTTP 500 Internal Server Error."""


class NotImplementedServerError(HTTPStatusError):
    """HTTP 501 Not Implemented."""


class BadGatewayError(HTTPStatusError):
    """HTTP 502 Bad Gateway."""


class ServiceUnavailableError(HTTPStatusError):
    """HTTP 503 Service Unavailable."""


class GatewayTimeoutError(HTTPStatusError):
    """HTTP 504 Gateway Timeout."""


class UnhandledServerError(HTTPStatusError):
    """Any other 5xx or unrecognised status."""


@dataclass
class DeserializeError(NodeRPCError):
    """The response body did not parse into the expected envelope."""

    message: str

    def __str__(self) -> str:  # noqa: D401
        return f"Failed to deserialize response: {self.message}"


class BadResultError(NodeRPCError):
    """The envelope parsed but carried no ``result``."""

    def __str__(self) -> str:  # noqa: D401
        return "Response carried no result"


STATUS_ERRORS: Dict[int, Type[HTTPStatusError]] = {
    400: BadRequestError,
    401: UnauthorizedError,
    403: ForbiddenError,
    404: NotFoundError,
    405: MethodNotAllowedError,
    429: TooManyRequestsError,
    500: InternalServerError,
    501: NotImplementedServerError,
    502: BadGatewayError,
    503: ServiceUnavailableError,
    504: GatewayTimeoutError,
}


def error_for_status(status_code: int, body: str = "") -> Optional[HTTPStatusError]:
    """Map an HTTP status to its error, or ``None`` when the call succeeded."""

    if 0 <= status_code <= 399:
        return None
    error_cls = STATUS_ERRORS.get(status_code)
    if error_cls is None:
        error_cls = UnhandledClientError if 400 <= status_code <= 499 else UnhandledServerError
    return error_cls(status_code=status_code, body=body)
