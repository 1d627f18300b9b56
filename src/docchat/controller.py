"""
View Controller for the Chat Client

This module drives the three-view state machine of the client and turns
user intents into protocol commands.

State machine:
    LOGIN_VIEW --login-->             ROOM_LIST
    ROOM_LIST  --logout-->            LOGIN_VIEW
    ROOM_LIST  --create/refresh-->    ROOM_LIST
    ROOM_LIST  --join-->              ROOM
    ROOM       --leave-->             ROOM_LIST
    ROOM       --send/save/show-participants--> ROOM

All methods run on the UI event loop. Transport failures during an intent
are logged and otherwise ignored; the server pushes the authoritative
state back through the receive dispatcher.
"""

import logging
from typing import TYPE_CHECKING, Optional

from .schemas import (
    AttendancesCommand,
    BaseCommand,
    CreateRoomCommand,
    EditorCommand,
    FetchFileCommand,
    JoinRoomCommand,
    LeaveRoomCommand,
    ListRoomsCommand,
    LoginCommand,
    LogoutCommand,
    MessageCommand,
    SaveCommand,
)
from .protocol import encode_command
from .session import Session, ViewState
from .utils.validation import normalize_room_name, validate_username

if TYPE_CHECKING:
    from .transport import LineTransport
    from .ui.adapter import UIAdapter

logger = logging.getLogger(__name__)


class ViewController:
    """
    Orchestrates view transitions and outbound commands.

    Attributes:
        session: Session state shared with the receive dispatcher
        ui: UI adapter used for rendering and user input
    """

    def __init__(
        self,
        transport: "LineTransport",
        ui: "UIAdapter",
        session: Optional[Session] = None,
    ):
        """
        Initialize the controller.

        Args:
            transport: Transport used for outbound commands
            ui: UI adapter to render views and read user input
            session: Optional existing session (a new one is created
                     otherwise)
        """
        self.transport = transport
        self.ui = ui
        self.session = session or Session()

    @property
    def view(self) -> ViewState:
        """Current view state."""
        return self.session.view

    @property
    def is_document_editable(self) -> bool:
        """Whether the UI must allow edits of the document."""
        return self.session.editable

    async def start(self) -> None:
        """Show the initial login view."""
        self.session.view = ViewState.LOGIN_VIEW
        self.ui.render_login()

    async def login(self, username: str) -> bool:
        """
        Claim a username and move to the room list.

        Args:
            username: Username typed by the user

        Returns:
            True if the login was accepted locally
        """
        if not self._require_view(ViewState.LOGIN_VIEW, "login"):
            return False

        username = username.strip()
        is_valid, error = validate_username(username)
        if not is_valid:
            logger.info("Rejected username %r: %s", username, error)
            self.ui.show_error(error)
            return False

        await self._send(LoginCommand(username))
        self.session.login(username)
        self._render_room_list()
        await self._send(ListRoomsCommand())
        return True

    async def logout(self) -> None:
        """Release the username and return to the login view."""
        if not self._require_view(ViewState.ROOM_LIST, "logout"):
            return

        await self._send(LogoutCommand(self.session.username))
        self.session.logout()
        self.ui.render_login()

    async def refresh(self) -> None:
        """Request the current room list."""
        if not self._require_view(ViewState.ROOM_LIST, "refresh"):
            return

        await self._send(ListRoomsCommand())

    async def create_room(self, room_name: Optional[str] = None) -> bool:
        """
        Create a room and refresh the room list.

        The room is inserted into the local list right away; the refresh
        answer from the server replaces the list.

        Args:
            room_name: Name of the room, or None to prompt the user

        Returns:
            True if a create command was issued
        """
        if not self._require_view(ViewState.ROOM_LIST, "create"):
            return False

        if room_name is None:
            room_name = await self.ui.prompt_room_name()

        room_name = normalize_room_name(room_name)
        if room_name is None:
            return False

        if any(char.isspace() for char in room_name):
            logger.warning("Room name contains whitespace: %r", room_name)

        # The view may have changed while the prompt was open
        if not self._require_view(ViewState.ROOM_LIST, "create"):
            return False

        await self._send(CreateRoomCommand(room_name))
        self.session.add_room(room_name)
        self._render_room_list()
        await self._send(ListRoomsCommand())
        return True

    async def join(self, room_name: str) -> None:
        """
        Enter a room.

        Sends join, editor and fetch_file in that order. The document is
        read-only until the first participant list names this user as
        the editor holder.
        """
        if not self._require_view(ViewState.ROOM_LIST, "join"):
            return

        self.session.enter_room(room_name)
        self.ui.render_room(room_name, self.session.username)
        self.ui.set_document("")
        self.ui.set_editor_field("")
        self.ui.set_document_editable(False)

        await self._send(JoinRoomCommand(room_name, self.session.username))
        await self._send(EditorCommand(room_name))
        await self._send(FetchFileCommand(room_name))

    async def leave(self) -> None:
        """Exit the current room and refresh the room list."""
        if not self._require_view(ViewState.ROOM, "leave"):
            return

        room_name = self.session.current_room
        await self._send(LeaveRoomCommand(room_name, self.session.username))
        self.session.exit_room()
        self._render_room_list()
        await self._send(ListRoomsCommand())

    async def send(self) -> bool:
        """
        Submit the document as currently shown.

        Trailing whitespace is trimmed and empty documents are not sent.
        There is no local echo; the server answers with a message event.

        Returns:
            True if a message command was issued
        """
        if not self._require_view(ViewState.ROOM, "send"):
            return False

        content = self.ui.get_document().rstrip()
        if not content:
            return False

        return await self._send(
            MessageCommand(
                self.session.current_room, self.session.username, content
            )
        )

    async def save(self) -> None:
        """Ask the server to persist the document of the current room."""
        if not self._require_view(ViewState.ROOM, "save"):
            return

        await self._send(SaveCommand(self.session.current_room))

    async def show_participants(self) -> None:
        """
        Request a fresh participant list and show the cached one.

        The fresh list arrives later through the receive dispatcher.
        """
        if not self._require_view(ViewState.ROOM, "show_participants"):
            return

        await self._send(AttendancesCommand(self.session.current_room))
        self.ui.show_info(
            "Participants: " + ", ".join(self.session.participants)
        )

    def connection_lost(self) -> None:
        """Handle the end of the inbound stream."""
        logger.warning(
            "Lost connection to server while in view %s",
            self.session.view.value,
        )

    def _render_room_list(self) -> None:
        view = self.session.snapshot()
        self.ui.render_room_list(view.rooms, view.username)

    def _require_view(self, view: ViewState, intent: str) -> bool:
        if self.session.view != view:
            logger.debug(
                "Ignoring %s intent in view %s",
                intent,
                self.session.view.value,
            )
            return False
        return True

    async def _send(self, command: BaseCommand) -> bool:
        """
        Send a command, logging and swallowing transport failures.

        Returns:
            True if the line was written
        """
        try:
            await self.transport.send(encode_command(command))
        except (ConnectionError, OSError) as e:
            logger.warning("Failed to send %s command: %s", command.verb, e)
            return False
        return True
