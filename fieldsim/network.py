"""UDP sender and receiver for vision packets."""

from __future__ import annotations

import logging
import socket
import threading
from typing import Callable, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_VISION_PORT = 10002
VISION_ADDRESS = "224.5.23.2"
VISION_ADDRESS_LOCALHOST = "127.0.0.1"
SIMULATED_VISION_PORT = 10020

_MAX_DATAGRAM = 65536


class VisionServer:
    """Sends datagrams to a (usually multicast) address with TTL 1."""

    def __init__(self, port: int = DEFAULT_VISION_PORT, address: str = VISION_ADDRESS) -> None:
        self.port = port
        self.address = address
        self._lock = threading.Lock()
        self._socket: Optional[socket.socket] = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        self._socket.setsockopt(socket.IPPROTO_IP, socket.IP_MULTICAST_TTL, 1)

    def send(self, datagram: bytes) -> bool:
        """Send one datagram; False (and a log line) if it did not go out whole."""
        with self._lock:
            if self._socket is None:
                raise ValueError("server is closed")
            try:
                sent = self._socket.sendto(datagram, (self.address, self.port))
            except OSError:
                sent = -1
        if sent != len(datagram):
            logger.warning(
                "Sending UDP datagram failed (maybe too large?). Size was: %d byte(s).",
                len(datagram),
            )
            return False
        return True

    def change_port(self, port: int) -> None:
        self.port = port

    def change_address(self, address: str) -> None:
        self.address = address

    def close(self) -> None:
        """Release the socket."""
        with self._lock:
            if self._socket is not None:
                self._socket.close()
                self._socket = None

    def __enter__(self) -> VisionServer:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class VisionReceiver:
    """Listens for vision datagrams and hands each payload to ``on_state``."""

    def __init__(
        self,
        address: str = VISION_ADDRESS_LOCALHOST,
        port: int = SIMULATED_VISION_PORT,
        on_state: Optional[Callable[[bytes], None]] = None,
    ) -> None:
        self.address = address
        self.port = port
        self.on_state = on_state
        sock = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        try:
            sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
            if hasattr(socket, "SO_REUSEPORT"):
                try:
                    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEPORT, 1)
                except OSError:
                    pass
            sock.bind((address, port))
            sock.setblocking(False)
        except OSError:
            sock.close()
            raise
        self._socket: Optional[socket.socket] = sock
        self.bound_port: int = sock.getsockname()[1]

    def set_port_and_address(self, port: int, address: str) -> None:
        """Record a new port and address to listen on."""
        self.port = port
        self.address = address

    def fileno(self) -> int:
        if self._socket is None:
            raise ValueError("receiver is closed")
        return self._socket.fileno()

    def handle_datagrams(self) -> List[bytes]:
        """Read every pending datagram, report each, and return their payloads."""
        if self._socket is None:
            raise ValueError("receiver is closed")
        received = []
        while True:
            try:
                data, _ = self._socket.recvfrom(_MAX_DATAGRAM)
            except (BlockingIOError, InterruptedError):
                break
            received.append(data)
            if self.on_state is not None:
                self.on_state(data)
        return received

    def close(self) -> None:
        """Release the socket."""
        if self._socket is not None:
            self._socket.close()
            self._socket = None

    def __enter__(self) -> VisionReceiver:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()