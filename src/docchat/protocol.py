"""
Protocol Codec for Client-Server Communication

This module turns command schemas into wire lines and classifies inbound
lines into typed server events.

Line Format:
    All frames are single UTF-8 text lines terminated by a newline, with
    tokens separated by single spaces:

        <verb> <arg1> <arg2> ...

    Inbound verbs understood by the client:
        list_rooms r1 r2 ...     room list (server order)
        attendances u1 u2 ...    participants, u1 holds the editor
        message <body>           full document, newlines as ';;;'
"""

import logging
from typing import Dict, Optional, Tuple, Type, Union

from .schemas import (
    AttendancesEvent,
    BaseCommand,
    BaseEvent,
    DocumentEvent,
    RoomsListEvent,
)
from .utils.encoding import NEWLINE_SURROGATE, decode_body, encode_body

logger = logging.getLogger(__name__)

ServerEvent = Union[RoomsListEvent, AttendancesEvent, DocumentEvent]

EVENT_TYPES: Dict[str, Type[BaseEvent]] = {
    RoomsListEvent.verb: RoomsListEvent,
    AttendancesEvent.verb: AttendancesEvent,
    DocumentEvent.verb: DocumentEvent,
}

__all__ = [
    "NEWLINE_SURROGATE",
    "EVENT_TYPES",
    "ServerEvent",
    "encode_body",
    "decode_body",
    "encode_command",
    "split_verb",
    "parse_event",
]


def encode_command(command: BaseCommand) -> str:
    """Render a command as a wire line without the trailing newline."""
    return command.to_line()


def split_verb(line: str) -> Tuple[str, str]:
    """
    Split a line into its verb and the remaining payload.

    Args:
        line: Raw inbound line, with or without its line terminator

    Returns:
        tuple: (verb, payload), payload is empty when the line has
        no arguments
    """
    verb, _, payload = line.rstrip("\r\n").partition(" ")
    return verb, payload


def parse_event(line: str) -> Optional[ServerEvent]:
    """
    Classify an inbound line into a server event.

    Args:
        line: Raw inbound line

    Returns:
        The parsed event, or None for empty lines and unknown verbs
    """
    verb, payload = split_verb(line)
    event_type = EVENT_TYPES.get(verb)

    if event_type is None:
        logger.debug("Dropping line with unknown verb: %r", line)
        return None

    return event_type.from_payload(payload)
