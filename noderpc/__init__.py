"""Typed client for a Bitcoin Core node's JSON-RPC interface."""

from .client import NodeRPC
from .enrichment import resolve_prevouts
from .errors import (
    BadResultError,
    DeserializeError,
    HTTPStatusError,
    NodeRPCError,
    TransportError,
)

__all__ = [
    "BadResultError",
    "DeserializeError",
    "HTTPStatusError",
    "NodeRPC",
    "NodeRPCError",
    "TransportError",
    "resolve_prevouts",
]
