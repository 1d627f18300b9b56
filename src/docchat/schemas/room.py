"""
Room Schema Definitions

This module defines the frames for room-related operations including
room creation and listing.
"""

from dataclasses import dataclass, field
from typing import List

from .base import BaseCommand, BaseEvent


@dataclass
class ListRoomsCommand(BaseCommand):
    """
    Request the current set of rooms.

    This is a simple command with no additional parameters.
    """

    @property
    def verb(self) -> str:
        """Return the verb for room listing."""
        return "list_rooms"


@dataclass
class CreateRoomCommand(BaseCommand):
    """
    Request to create a new room.

    Attributes:
        room_name: Name of the room to create
    """

    room_name: str

    @property
    def verb(self) -> str:
        """Return the verb for room creation."""
        return "create"


@dataclass
class RoomsListEvent(BaseEvent):
    """
    Event carrying the authoritative, server-ordered room list.

    Attributes:
        rooms: Room names in server order
    """

    verb = "list_rooms"

    rooms: List[str] = field(default_factory=list)

    @classmethod
    def _from_tokens(cls, tokens: List[str]) -> "RoomsListEvent":
        """Create from payload tokens."""
        return cls(rooms=list(tokens))
