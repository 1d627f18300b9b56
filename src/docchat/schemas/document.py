"""
Document Schema Definitions

This module defines the frames for the shared per-room document:
requesting editor rights, fetching, saving and submitting edits.
"""

from dataclasses import dataclass
from typing import List

from ..utils.encoding import decode_body, encode_body
from .base import BaseCommand, BaseEvent


@dataclass
class EditorCommand(BaseCommand):
    """
    Declare interest in editing the document of a room.

    Attributes:
        room_name: Name of the room
    """

    room_name: str

    @property
    def verb(self) -> str:
        """Return the verb for editor requests."""
        return "editor"


@dataclass
class FetchFileCommand(BaseCommand):
    """
    Request the current document of a room.

    Attributes:
        room_name: Name of the room
    """

    room_name: str

    @property
    def verb(self) -> str:
        """Return the verb for document fetches."""
        return "fetch_file"


@dataclass
class SaveCommand(BaseCommand):
    """
    Ask the server to persist the document of a room.

    Attributes:
        room_name: Name of the room
    """

    room_name: str

    @property
    def verb(self) -> str:
        """Return the verb for saving."""
        return "save"


@dataclass
class MessageCommand(BaseCommand):
    """
    Submit the edited document of a room.

    The content is the entire document, not a delta. Newlines are encoded
    when the command is serialized.

    Attributes:
        room_name: Name of the room
        username: Username of the sender
        content: Document text
    """

    room_name: str
    username: str
    content: str

    @property
    def verb(self) -> str:
        """Return the verb for document submissions."""
        return "message"

    def to_tokens(self) -> List[str]:
        """Convert to wire tokens with the content encoded."""
        return [
            self.verb,
            self.room_name,
            self.username,
            encode_body(self.content),
        ]


@dataclass
class DocumentEvent(BaseEvent):
    """
    Event carrying the full document of the current room.

    Attributes:
        body: Raw body as received, newlines still encoded
    """

    verb = "message"

    body: str = ""

    @property
    def text(self) -> str:
        """Decoded document text."""
        return decode_body(self.body)

    @classmethod
    def from_payload(cls, payload: str) -> "DocumentEvent":
        """Create from the payload, keeping it verbatim."""
        return cls(body=payload)
