"""
Schemas Package

This package contains the protocol frame schemas for client-server
communication. Schemas are organized by category: room, member and
document operations.

The package provides base classes (BaseCommand, BaseEvent) that eliminate
code duplication for serialization and parsing.
"""

from .base import BaseCommand, BaseEvent
from .room import CreateRoomCommand, ListRoomsCommand, RoomsListEvent
from .member import (
    AttendancesCommand,
    AttendancesEvent,
    JoinRoomCommand,
    LeaveRoomCommand,
    LoginCommand,
    LogoutCommand,
)
from .document import (
    DocumentEvent,
    EditorCommand,
    FetchFileCommand,
    MessageCommand,
    SaveCommand,
)

__all__ = [
    # Base classes
    "BaseCommand",
    "BaseEvent",
    # Room schemas
    "ListRoomsCommand",
    "CreateRoomCommand",
    "RoomsListEvent",
    # Member schemas
    "LoginCommand",
    "LogoutCommand",
    "JoinRoomCommand",
    "LeaveRoomCommand",
    "AttendancesCommand",
    "AttendancesEvent",
    # Document schemas
    "EditorCommand",
    "FetchFileCommand",
    "SaveCommand",
    "MessageCommand",
    "DocumentEvent",
]
