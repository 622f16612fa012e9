"""Connectivity check implementations.

``SocketConnectivityCheck`` opens a short TCP connection to a well-known host
to decide reachability. ``StaticConnectivity`` returns a fixed answer and is
used for tests and offline development.
"""

from __future__ import annotations

import logging
import socket

from pixsearch.domain.ports import ConnectivityPort

DEFAULT_CHECK_HOST = "1.1.1.1"
DEFAULT_CHECK_PORT = 53


class SocketConnectivityCheck(ConnectivityPort):
    """Report reachability by probing a TCP endpoint."""

    def __init__(
        self,
        host: str = DEFAULT_CHECK_HOST,
        port: int = DEFAULT_CHECK_PORT,
        timeout_s: float = 1.5,
    ) -> None:
        self.host = host
        self.port = port
        self.timeout_s = timeout_s
        self._log = logging.getLogger(__name__)

    def is_connected(self) -> bool:
        try:
            with socket.create_connection((self.host, self.port), timeout=self.timeout_s):
                return True
        except OSError as exc:
            self._log.debug("Connectivity check %s:%s failed: %s", self.host, self.port, exc)
            return False


class StaticConnectivity(ConnectivityPort):
    """Fixed connectivity answer."""

    def __init__(self, connected: bool = True) -> None:
        self.connected = connected

    def is_connected(self) -> bool:
        return self.connected


__all__ = ["SocketConnectivityCheck", "StaticConnectivity"]
