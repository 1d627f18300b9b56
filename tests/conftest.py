"""
Shared test doubles for the chat client tests.

RecordingTransport stands in for LineTransport and records outbound
lines; RecordingUI implements the UI adapter and records what the
controller and dispatcher asked it to show. FakeChatServer is a scripted
TCP peer for tests that run a real LineTransport.
"""

import asyncio
from typing import List, Optional

import pytest
import pytest_asyncio

from docchat.transport import TransportClosed
from docchat.ui.adapter import UIAdapter

TIMEOUT = 2.0


class FakeChatServer:
    """Scripted single-connection chat server."""

    def __init__(self):
        self.received: asyncio.Queue = asyncio.Queue()
        self.writer = None
        self.connected = asyncio.Event()
        self.server = None
        self.port = None

    async def start(self) -> None:
        self.server = await asyncio.start_server(
            self._handle, "127.0.0.1", 0
        )
        self.port = self.server.sockets[0].getsockname()[1]

    async def _handle(self, reader, writer):
        self.writer = writer
        self.connected.set()
        while True:
            line = await reader.readline()
            if not line:
                break
            await self.received.put(line.decode("utf-8").rstrip("\n"))

    async def expect(self, *lines):
        """Assert the next lines received from the client."""
        got = []
        for _ in lines:
            got.append(
                await asyncio.wait_for(self.received.get(), timeout=TIMEOUT)
            )
        assert got == list(lines)

    async def push(self, line: str) -> None:
        """Send one event line to the client."""
        await asyncio.wait_for(self.connected.wait(), timeout=TIMEOUT)
        self.writer.write((line + "\n").encode("utf-8"))
        await self.writer.drain()

    async def disconnect(self) -> None:
        """Close the client connection from the server side."""
        if self.writer:
            self.writer.close()

    async def stop(self) -> None:
        await self.disconnect()
        self.server.close()
        await self.server.wait_closed()


class RecordingTransport:
    """Mock transport for testing."""

    def __init__(self, incoming: Optional[List[str]] = None):
        self.sent: List[str] = []
        self.incoming = list(incoming or [])
        self.fail = False
        self.closed = False

    @property
    def is_connected(self) -> bool:
        return not self.closed

    async def send(self, line: str) -> None:
        if self.fail:
            raise TransportClosed("Write failed: connection reset")
        self.sent.append(line)

    async def lines(self):
        for line in self.incoming:
            yield line

    async def close(self) -> None:
        self.closed = True


class RecordingUI(UIAdapter):
    """UI adapter that records rendering calls."""

    def __init__(self):
        self.calls: List[str] = []
        self.screen: Optional[str] = None
        self.rendered_rooms: Optional[List[str]] = None
        self.rendered_username: Optional[str] = None
        self.room_header: Optional[str] = None
        self.document = ""
        self.editor_field = ""
        self.editable: Optional[bool] = None
        self.infos: List[str] = []
        self.errors: List[str] = []
        self.prompt_answer: Optional[str] = None

    def render_login(self) -> None:
        self.calls.append("render_login")
        self.screen = "login"

    def render_room_list(self, rooms, username) -> None:
        self.calls.append("render_room_list")
        self.screen = "room-list"
        self.rendered_rooms = list(rooms)
        self.rendered_username = username

    def render_room(self, room_name, username) -> None:
        self.calls.append("render_room")
        self.screen = "room"
        self.room_header = f"{room_name}: {username}"

    def set_document(self, text) -> None:
        self.calls.append("set_document")
        self.document = text

    def get_document(self) -> str:
        return self.document

    def set_editor_field(self, text) -> None:
        self.calls.append("set_editor_field")
        self.editor_field = text

    def set_document_editable(self, editable) -> None:
        self.calls.append("set_document_editable")
        self.editable = editable

    async def prompt_room_name(self):
        self.calls.append("prompt_room_name")
        return self.prompt_answer

    def show_info(self, text) -> None:
        self.infos.append(text)

    def show_error(self, text) -> None:
        self.errors.append(text)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def ui():
    return RecordingUI()


async def wait_until(predicate, timeout=TIMEOUT):
    """Poll until predicate() is true."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met before timeout")
        await asyncio.sleep(0.01)


@pytest_asyncio.fixture
async def server():
    fake = FakeChatServer()
    await fake.start()
    yield fake
    await fake.stop()
