"""Shared HTTP transport for the request executor.

This module provides a thin wrapper around ``requests.Session`` so every call
shares one timeout policy and header construction.

Dependencies:
    - ``requests`` for network I/O.
    - ``pixsearch.adapters.api_errors.TransportError`` for typed transport
      failures.

Call context:
    - Constructed by the composition root and injected into
      ``pixsearch/adapters/request_executor.py``.
    - Transport-only: callers decide how status codes map to outcomes. No
      retries are performed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
from requests import exceptions as req_exc

from pixsearch.adapters.api_errors import TransportError


@dataclass
class HttpConfig:
    """Timeout configuration for transport calls.

    Attributes:
        request_timeout_s: Timeout in seconds applied to every request.
    """
    request_timeout_s: float = 10.0


class HttpSession:
    """Shared requests wrapper with JSON headers.

    ``requests.Session`` is safe to share between worker threads for the
    plain request/response use made here.
    """

    def __init__(self, cfg: Optional[HttpConfig] = None) -> None:
        """Create a transport session.

        Args:
            cfg: Timeout settings; defaults to ``HttpConfig()``.

        Side Effects:
            Creates a persistent ``requests.Session`` object.
        """
        self.session = requests.Session()
        self.cfg = cfg or HttpConfig()

    @staticmethod
    def _headers(
        accept: str = "application/json", json_body: bool = False
    ) -> Dict[str, str]:
        """Build request headers.

        Args:
            accept: ``Accept`` header value expected by the caller.
            json_body: Whether to add ``Content-Type: application/json``.

        Returns:
            Dictionary of request headers.
        """
        headers = {"Accept": accept}
        if json_body:
            headers["Content-Type"] = "application/json"
        return headers

    def send(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[bytes] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        """Send one request and return the raw response.

        Args:
            method: HTTP verb placed on the request line.
            url: Absolute endpoint URL.
            params: Optional query parameter mapping.
            data: Optional pre-encoded JSON body. When given, a JSON
                ``Content-Type`` header is added.
            timeout: Optional timeout override in seconds.

        Returns:
            ``requests.Response`` for any status code.

        Raises:
            TransportError: If no response was received.
        """
        context = f"{method} {url}"
        try:
            return self.session.request(
                method,
                url,
                params=params,
                data=data,
                headers=self._headers(json_body=data is not None),
                timeout=timeout or self.cfg.request_timeout_s,
            )
        except req_exc.RequestException as exc:
            raise TransportError(f"No response from {url}: {exc}", context=context) from exc

    def close(self) -> None:
        self.session.close()


__all__ = ["HttpConfig", "HttpSession"]
