"""
Line Transport for the Chat Client

This module owns the TCP connection to the chat server. It exposes a
line-oriented send channel and a line-oriented receive stream on top of
asyncio streams.

Architecture:
    - One connection, opened once at startup; no reconnect
    - Writes are serialized with an asyncio.Lock so that the tokens of one
      command never interleave with another
    - Supports dependency injection for the connection factory
      (for testability)
"""

import asyncio
import logging
from typing import AsyncIterator, Callable, Optional

logger = logging.getLogger(__name__)

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7777

# Whole documents travel on a single line
STREAM_LIMIT = 4 * 1024 * 1024

ENCODING = "utf-8"


class ConnectFailure(ConnectionError):
    """The server could not be reached at startup."""


class TransportClosed(ConnectionError):
    """The connection is not open, or was closed by the peer."""


class LineTransport:
    """
    Newline-framed text transport over a single TCP connection.

    Attributes:
        host: Server host name or address
        port: Server TCP port
    """

    def __init__(
        self,
        host: str = DEFAULT_HOST,
        port: int = DEFAULT_PORT,
        connection_factory: Optional[Callable] = None,
    ):
        """
        Initialize the transport.

        Args:
            host: Server host name or address
            port: Server TCP port
            connection_factory: Optional coroutine function with the
                signature of asyncio.open_connection (for dependency
                injection/testing)
        """
        self.host = host
        self.port = port
        self._connection_factory = (
            connection_factory or asyncio.open_connection
        )
        self._reader: Optional[asyncio.StreamReader] = None
        self._writer: Optional[asyncio.StreamWriter] = None
        self._write_lock = asyncio.Lock()
        self._connected = False

    @property
    def address(self) -> str:
        """Server address as host:port."""
        return f"{self.host}:{self.port}"

    @property
    def is_connected(self) -> bool:
        """Check if the connection is currently open."""
        return self._connected and self._writer is not None

    async def connect(self) -> None:
        """
        Open the TCP connection to the server.

        Raises:
            ConnectFailure: If the server cannot be reached
        """
        logger.info("Connecting to %s...", self.address)
        try:
            self._reader, self._writer = await self._connection_factory(
                self.host, self.port, limit=STREAM_LIMIT
            )
        except OSError as e:
            logger.error("Failed to connect to %s: %s", self.address, e)
            raise ConnectFailure(
                f"Could not connect to {self.address}: {e}"
            ) from e

        self._connected = True
        logger.info("Connected to %s", self.address)

    async def send(self, line: str) -> None:
        """
        Write one line to the server.

        A newline is appended. Concurrent callers are serialized.

        Args:
            line: Line to send, without terminator

        Raises:
            TransportClosed: If the connection is closed or the write fails
        """
        if not self.is_connected:
            raise TransportClosed("Not connected to the server")

        data = (line + "\n").encode(ENCODING)
        async with self._write_lock:
            try:
                self._writer.write(data)
                await self._writer.drain()
            except (ConnectionError, OSError) as e:
                self._connected = False
                raise TransportClosed(f"Write failed: {e}") from e

        logger.debug("Sent line: %r", line)

    async def lines(self) -> AsyncIterator[str]:
        """
        Yield complete inbound lines until the peer closes.

        Line terminators are stripped. Socket errors end the stream and
        are logged.

        Raises:
            TransportClosed: If called before connect()
        """
        if self._reader is None:
            raise TransportClosed("Not connected to the server")

        while True:
            try:
                raw = await self._reader.readline()
            except (ConnectionError, OSError) as e:
                logger.warning("Connection error while reading: %s", e)
                break
            except ValueError as e:
                logger.error("Inbound line exceeds stream limit: %s", e)
                break

            if not raw:
                logger.info("Connection closed by server")
                break

            yield raw.decode(ENCODING, errors="replace").rstrip("\r\n")

        self._connected = False

    async def close(self) -> None:
        """Close the connection if it is open."""
        writer = self._writer
        self._connected = False
        self._writer = None
        if writer is None:
            return

        writer.close()
        try:
            await writer.wait_closed()
        except (ConnectionError, OSError) as e:
            logger.debug("Error while closing connection: %s", e)
        logger.info("Disconnected from %s", self.address)
