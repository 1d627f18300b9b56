"""
Session State

The single mutable record shared by the controller and the receive
dispatcher. All mutations happen on the UI event loop.
"""

import logging
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)


class ViewState(Enum):
    """The three views of the client."""

    LOGIN_VIEW = "login"
    ROOM_LIST = "room_list"
    ROOM = "room"


@dataclass
class Session:
    """
    Client session state.

    Attributes:
        username: Logged-in username, None until login
        view: Current view state
        current_room: Name of the joined room, set only in ROOM
        rooms: Known room names in server order
        participants: Usernames in the current room, first is the
            editor holder
        editor_holder: Username allowed to edit the document
        document: Last document text received for the current room
    """

    username: Optional[str] = None
    view: ViewState = ViewState.LOGIN_VIEW
    current_room: Optional[str] = None
    rooms: List[str] = field(default_factory=list)
    participants: List[str] = field(default_factory=list)
    editor_holder: Optional[str] = None
    document: str = ""

    @property
    def editable(self) -> bool:
        """True if the local user holds the editor."""
        return (
            self.editor_holder is not None
            and self.editor_holder == self.username
        )

    def login(self, username: str) -> None:
        """Set the username and move to the room list."""
        self.username = username
        self.view = ViewState.ROOM_LIST
        logger.info("Logged in as: %s", username)

    def logout(self) -> None:
        """Forget the username and return to the login view."""
        logger.info("Logged out: %s", self.username)
        self.username = None
        self.rooms = []
        self._clear_room()
        self.view = ViewState.LOGIN_VIEW

    def enter_room(self, room_name: str) -> None:
        """
        Enter a room.

        The participant list is cleared; the editor holder stays unknown
        until the first participant list arrives.
        """
        self._clear_room()
        self.current_room = room_name
        self.view = ViewState.ROOM
        logger.info("Entered room: %s", room_name)

    def exit_room(self) -> None:
        """Leave the current room and return to the room list."""
        logger.info("Left room: %s", self.current_room)
        self._clear_room()
        self.view = ViewState.ROOM_LIST

    def apply_rooms(self, rooms: List[str]) -> None:
        """Replace the room list wholesale."""
        self.rooms = list(rooms)

    def add_room(self, room_name: str) -> bool:
        """
        Insert a room locally ahead of the authoritative refresh.

        Returns:
            True if the room was added, False if already known
        """
        if room_name in self.rooms:
            return False
        self.rooms.append(room_name)
        return True

    def apply_participants(self, participants: List[str]) -> None:
        """Replace the participant list and derive the editor holder."""
        self.participants = list(participants)
        self.editor_holder = (
            self.participants[0] if self.participants else None
        )

    def apply_document(self, text: str) -> None:
        """Record the latest document text."""
        self.document = text

    def snapshot(self) -> "Session":
        """Return an independent copy for rendering."""
        return replace(
            self,
            rooms=list(self.rooms),
            participants=list(self.participants),
        )

    def _clear_room(self) -> None:
        self.current_room = None
        self.participants = []
        self.editor_holder = None
        self.document = ""
