"""HTTP transport for JSON-RPC calls."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

import requests
from requests.auth import HTTPBasicAuth

from .envelope import JSONValue, encode_request
from .errors import TransportError, error_for_status

LOGGER = logging.getLogger(__name__)


class Transport:
    """Issue one authenticated POST per call and classify the response."""

    def __init__(
        self,
        url: str,
        auth: Optional[HTTPBasicAuth] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.url = url
        self.auth = auth
        self.timeout = timeout

    def send(
        self,
        method: str,
        params: Sequence[JSONValue] = (),
        timeout: Optional[float] = None,
    ) -> str:
        effective_timeout = timeout if timeout is not None else self.timeout
        LOGGER.debug("Calling %s (timeout=%s)", method, effective_timeout)
        try:
            response = requests.post(
                self.url,
                data=encode_request(method, params),
                headers={"Content-Type": "application/json"},
                auth=self.auth,
                timeout=effective_timeout,
            )
            body = response.text
        except requests.RequestException as exc:
            raise TransportError(exc) from exc

        error = error_for_status(response.status_code, body)
        if error is not None:
            LOGGER.warning("%s returned HTTP %s", method, response.status_code)
            raise error
        return body
