"""JSON-RPC request encoding and response envelope decoding."""

from __future__ import annotations

import json
from typing import Any, Dict, Generic, List, Optional, Sequence, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .errors import BadResultError, DeserializeError

T = TypeVar("T")
JSONValue = Union[str, int, float, bool, None, Dict[str, Any], List[Any]]


class Envelope(BaseModel, Generic[T]):
    """Response wrapper; the node's ``error`` and ``id`` members are ignored."""

    result: Optional[T] = None


def encode_request(method: str, params: Sequence[JSONValue] = ()) -> str:
    payload = {"jsonrpc": "2.0", "method": method, "params": list(params)}
    return json.dumps(payload)


def decode(raw: str, shape: Any) -> Any:
    """Unwrap ``result`` from ``raw`` as an instance of ``shape``.

    ``shape`` is any type pydantic can validate: a record model, ``int``,
    ``str``, ``float`` or a parametrised ``list``. Validation is strict, so a
    JSON string is never coerced into a number; integers still satisfy
    ``float``.
    """

    try:
        envelope = Envelope[shape].model_validate_json(raw, strict=True)
    except ValidationError as exc:
        raise DeserializeError(str(exc)) from exc
    if envelope.result is None:
        raise BadResultError()
    return envelope.result
