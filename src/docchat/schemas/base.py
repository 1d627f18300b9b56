"""
Base Schema Classes

This module provides base classes for outbound commands and inbound
events with common serialization and parsing methods to avoid code
duplication.

Every frame is a single line of space-separated tokens whose first token
is the verb.
"""

from dataclasses import fields
from typing import ClassVar, List, Type, TypeVar

T = TypeVar("T", bound="BaseEvent")


class BaseCommand:
    """
    Base class for command schemas sent to the server.

    Provides common serialization methods for converting command objects
    to tokens and wire lines. Dataclass fields are emitted in declaration
    order after the verb.
    """

    def to_tokens(self) -> List[str]:
        """
        Convert to the list of wire tokens.

        Returns:
            List with the verb first, followed by one token per field.
        """
        tokens = [self.verb]
        if hasattr(self, "__dataclass_fields__"):
            tokens.extend(str(getattr(self, f.name)) for f in fields(self))
        return tokens

    def to_line(self) -> str:
        """
        Convert to a wire line (without the trailing newline).

        Returns:
            Tokens joined by single spaces.
        """
        return " ".join(self.to_tokens())

    @property
    def verb(self) -> str:
        """
        Verb identifier for the command.

        Should be overridden by subclasses to provide the specific verb.
        """
        raise NotImplementedError("Subclasses must define verb")


class BaseEvent:
    """
    Base class for event schemas pushed by the server.

    Provides common parsing methods for creating event objects from the
    payload that follows the verb on an inbound line.
    """

    verb: ClassVar[str] = ""

    @classmethod
    def from_payload(cls: Type[T], payload: str) -> T:
        """
        Create instance from the text following the verb.

        Args:
            payload: Everything after the first space of the line.

        Returns:
            Instance of the event class.
        """
        return cls._from_tokens(payload.split())

    @classmethod
    def _from_tokens(cls: Type[T], tokens: List[str]) -> T:
        """
        Create instance from whitespace-separated payload tokens.

        Should be overridden by subclasses for custom parsing.
        """
        raise NotImplementedError("Subclasses must define _from_tokens")
