"""
Member Schema Definitions

This module defines the frames for identity and room membership
operations, including the participant list pushed by the server.
"""

from dataclasses import dataclass, field
from typing import List

from .base import BaseCommand, BaseEvent


@dataclass
class LoginCommand(BaseCommand):
    """
    Claim a username.

    Attributes:
        username: Username being claimed
    """

    username: str

    @property
    def verb(self) -> str:
        """Return the verb for login."""
        return "login"


@dataclass
class LogoutCommand(BaseCommand):
    """
    Release a previously claimed username.

    Attributes:
        username: Username being released
    """

    username: str

    @property
    def verb(self) -> str:
        """Return the verb for logout."""
        return "logout"


@dataclass
class JoinRoomCommand(BaseCommand):
    """
    Request to enter a room.

    Attributes:
        room_name: Name of the room to join
        username: Username of the joining user
    """

    room_name: str
    username: str

    @property
    def verb(self) -> str:
        """Return the verb for joining a room."""
        return "join"


@dataclass
class LeaveRoomCommand(BaseCommand):
    """
    Request to exit a room.

    Attributes:
        room_name: Name of the room to leave
        username: Username of the leaving user
    """

    room_name: str
    username: str

    @property
    def verb(self) -> str:
        """Return the verb for leaving a room."""
        return "leave"


@dataclass
class AttendancesCommand(BaseCommand):
    """
    Request the participant list of a room.

    Attributes:
        room_name: Name of the room
    """

    room_name: str

    @property
    def verb(self) -> str:
        """Return the verb for participant requests."""
        return "attendances"


@dataclass
class AttendancesEvent(BaseEvent):
    """
    Event carrying the participants of the current room.

    The first participant is the editor holder, the only user allowed to
    modify the shared document.

    Attributes:
        participants: Usernames in server order
    """

    verb = "attendances"

    participants: List[str] = field(default_factory=list)

    @classmethod
    def _from_tokens(cls, tokens: List[str]) -> "AttendancesEvent":
        """Create from payload tokens."""
        return cls(participants=list(tokens))
