"""
Chat Application UI

Main application class for the shared-document chat client terminal UI.
Built using the Textual framework.
"""

import asyncio
import logging
from typing import List, Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import (
    Container,
    Horizontal,
    Vertical,
    VerticalScroll,
)
from textual.content import Content
from textual.css.query import NoMatches
from textual.screen import ModalScreen
from textual.widgets import (
    Button,
    Footer,
    Header,
    Input,
    Label,
    Static,
    TextArea,
)

from ..config import ClientConfig
from ..controller import ViewController
from ..dispatcher import ReceiveDispatcher
from ..session import ViewState
from ..transport import ConnectFailure, LineTransport
from .adapter import UIAdapter

logger = logging.getLogger(__name__)


class LoginScreen(Container):
    """Screen for claiming a username."""

    def compose(self) -> ComposeResult:
        """Compose the login screen."""
        yield Static(
            "[bold blue]Shared Document Chat[/]",
            id="title",
            classes="screen-title",
        )
        with Vertical(id="login-form"):
            yield Label("Enter Username:")
            yield Input(
                placeholder="Enter your username...", id="username-input"
            )
            yield Button("Login", id="login-btn", variant="primary")


class RoomListScreen(Container):
    """Screen for browsing and creating rooms."""

    def compose(self) -> ComposeResult:
        """Compose the room list screen."""
        with Horizontal(id="room-actions"):
            yield Button("Logout", id="logout-btn", variant="warning")
            yield Static("", id="logged-in-label")
            yield Button("Refresh", id="refresh-btn", variant="default")
        yield VerticalScroll(id="room-buttons")
        yield Button(
            "Create New Room", id="create-room-btn", variant="primary"
        )


class RoomScreen(Container):
    """Screen for viewing and editing the document of a room."""

    def compose(self) -> ComposeResult:
        """Compose the room screen."""
        with Horizontal(id="room-top"):
            yield Button("Leave Room", id="leave-room-btn", variant="warning")
            yield Static("", id="room-header", classes="room-header")
            yield Button(
                "Show Participants", id="participants-btn", variant="default"
            )
        yield TextArea(id="document-area", read_only=True)
        with Horizontal(id="room-input-row"):
            yield Button("Save", id="save-btn", variant="default")
            yield Static("", id="editor-field")
            yield Button("Send", id="send-btn", variant="primary")


class CreateRoomDialog(ModalScreen[Optional[str]]):
    """Dialog asking for the name of a new room."""

    def compose(self) -> ComposeResult:
        """Compose the create room dialog."""
        with Vertical(id="create-room-form"):
            yield Label("Enter new room name:")
            yield Input(placeholder="Room name...", id="room-name-input")
            with Horizontal(classes="button-row"):
                yield Button(
                    "Create", id="confirm-create-btn", variant="primary"
                )
                yield Button(
                    "Cancel", id="cancel-create-btn", variant="default"
                )

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Close the dialog with the entered name or None."""
        event.stop()
        if event.button.id == "confirm-create-btn":
            self.dismiss(self.query_one("#room-name-input", Input).value)
        else:
            self.dismiss(None)

    def on_input_submitted(self, event: Input.Submitted) -> None:
        """Close the dialog when Enter is pressed."""
        event.stop()
        self.dismiss(event.value)


class ChatApp(App, UIAdapter):
    """Main chat application."""

    CSS = """
    Screen {
        layout: vertical;
    }

    .screen-title {
        text-align: center;
        padding: 1 0;
        text-style: bold;
    }

    LoginScreen {
        align: center middle;
    }

    #login-form {
        align: center middle;
        padding: 2;
        width: 60;
        height: auto;
    }

    #login-form Input {
        margin: 0 0 1 0;
    }

    #login-form Button {
        width: 100%;
    }

    RoomListScreen {
        padding: 1;
    }

    #room-actions {
        height: 3;
    }

    #logged-in-label {
        width: 1fr;
        content-align: right middle;
        padding: 1 1 0 0;
    }

    #room-buttons {
        height: 1fr;
        padding: 1 0;
    }

    .room-button {
        width: 100%;
    }

    #create-room-btn {
        width: 100%;
    }

    RoomScreen {
        height: 100%;
    }

    #room-top {
        height: 3;
    }

    .room-header {
        width: 1fr;
        padding: 1;
        background: $surface;
        text-align: center;
    }

    #document-area {
        height: 1fr;
    }

    #room-input-row {
        height: 3;
    }

    #editor-field {
        width: 1fr;
        padding: 1;
        text-align: center;
    }

    CreateRoomDialog {
        align: center middle;
    }

    #create-room-form {
        width: 50;
        height: auto;
        padding: 1;
        border: solid green;
        background: $surface;
    }

    #create-room-form Input {
        margin: 0 0 1 0;
    }

    .button-row {
        height: 3;
    }

    .button-row Button {
        margin: 0 1 0 0;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", show=True),
        Binding("ctrl+r", "refresh_rooms", "Refresh", show=True),
    ]

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        transport: Optional[LineTransport] = None,
    ) -> None:
        """Initialize the chat application."""
        super().__init__()
        self.client_config = config or ClientConfig()
        self.transport = transport or LineTransport(
            self.client_config.host, self.client_config.port
        )
        self.controller = ViewController(self.transport, self)
        self.dispatcher = ReceiveDispatcher(
            self.controller.session,
            self,
            schedule=self.call_later,
            on_closed=self.controller.connection_lost,
        )
        self._current_screen = "login"
        self._receive_task: Optional[asyncio.Task] = None

    def compose(self) -> ComposeResult:
        """Compose the main application layout."""
        yield Header()
        yield LoginScreen(id="login-screen")
        yield RoomListScreen(id="room-list-screen")
        yield RoomScreen(id="room-screen")
        yield Footer()

    async def on_mount(self) -> None:
        """Connect to the server and show the login view."""
        self.title = "Shared Document Chat"
        self._show_screen("login")

        try:
            await self.transport.connect()
        except ConnectFailure as e:
            logger.error("Startup connection failed: %s", e)
            self.exit(
                return_code=1,
                message=f"Error connecting to server: {e}",
            )
            return

        self._start_receiver()
        await self.controller.start()

    async def on_unmount(self) -> None:
        """Stop the receive loop and close the connection."""
        if self._receive_task:
            self._receive_task.cancel()
            try:
                await self._receive_task
            except asyncio.CancelledError:
                pass
            self._receive_task = None
        await self.transport.close()

    def _start_receiver(self) -> None:
        """Start the background task for receiving server events."""
        if self._receive_task:
            self._receive_task.cancel()

        async def receive_loop():
            try:
                await self.dispatcher.run(self.transport)
            except asyncio.CancelledError:
                pass
            except Exception as err:
                logger.error("Receive loop error: %s", err)

        self._receive_task = asyncio.create_task(receive_loop())

    def _show_screen(self, screen_name: str) -> None:
        """Show a specific screen and hide others."""
        screens = {
            "login": "login-screen",
            "room-list": "room-list-screen",
            "room": "room-screen",
        }

        for name, screen_id in screens.items():
            try:
                screen = self.query_one(f"#{screen_id}")
                screen.display = name == screen_name
            except NoMatches:
                pass

        self._current_screen = screen_name

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press events."""
        button_id = event.button.id

        if button_id == "login-btn":
            await self._handle_login()
        elif button_id == "logout-btn":
            await self.controller.logout()
        elif button_id == "refresh-btn":
            await self.controller.refresh()
        elif button_id == "create-room-btn":
            # The name prompt waits on a modal screen, which needs a worker
            self.run_worker(
                self.controller.create_room(),
                group="create-room",
                exclusive=True,
            )
        elif button_id == "send-btn":
            await self.controller.send()
        elif button_id == "save-btn":
            await self.controller.save()
        elif button_id == "leave-room-btn":
            await self.controller.leave()
        elif button_id == "participants-btn":
            await self.controller.show_participants()
        elif event.button.has_class("room-button") and event.button.name:
            await self.controller.join(event.button.name)

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle input submit events (Enter key)."""
        if event.input.id == "username-input":
            await self._handle_login()

    async def _handle_login(self) -> None:
        """Handle the login button."""
        try:
            username_input = self.query_one("#username-input", Input)
        except NoMatches:
            return
        await self.controller.login(username_input.value)

    # UIAdapter implementation

    def render_login(self) -> None:
        """Show the login view."""
        try:
            self.query_one("#username-input", Input).value = ""
        except NoMatches:
            pass
        self._show_screen("login")

    def render_room_list(self, rooms: List[str], username: str) -> None:
        """Show the room list with one button per room."""
        try:
            label = self.query_one("#logged-in-label", Static)
            label.update(Content(f"Logged in as: {username}"))

            container = self.query_one("#room-buttons", VerticalScroll)
            container.remove_children()
            container.mount_all(
                Button(Content(room), name=room, classes="room-button")
                for room in rooms
            )
        except NoMatches:
            pass
        self._show_screen("room-list")

    def render_room(self, room_name: str, username: str) -> None:
        """Show the room view."""
        try:
            header = self.query_one("#room-header", Static)
            header.update(
                Content(room_name).stylize("bold")
                + Content(f": {username}")
            )
        except NoMatches:
            pass
        self._show_screen("room")

    def set_document(self, text: str) -> None:
        """Replace the document text."""
        try:
            self.query_one("#document-area", TextArea).load_text(text)
        except NoMatches:
            pass

    def get_document(self) -> str:
        """Return the document text."""
        try:
            return self.query_one("#document-area", TextArea).text
        except NoMatches:
            return ""

    def set_editor_field(self, text: str) -> None:
        """Display the editor holder."""
        try:
            field = self.query_one("#editor-field", Static)
            field.update(Content(f"Editor: {text}" if text else ""))
        except NoMatches:
            pass

    def set_document_editable(self, editable: bool) -> None:
        """Toggle the read-only state of the document area."""
        try:
            self.query_one("#document-area", TextArea).read_only = (
                not editable
            )
        except NoMatches:
            pass

    async def prompt_room_name(self) -> Optional[str]:
        """Ask for a room name in a modal dialog."""
        return await self.push_screen_wait(CreateRoomDialog())

    def show_info(self, text: str) -> None:
        """Show an informational notification."""
        self.notify(text, markup=False)

    def show_error(self, text: str) -> None:
        """Show an error notification."""
        self.notify(text, severity="error", markup=False)

    def action_refresh_rooms(self) -> None:
        """Handle refresh rooms action."""
        if self.controller.view == ViewState.ROOM_LIST:
            asyncio.create_task(self.controller.refresh())
