"""
Chat Client Package

This package provides the client-side session engine for the shared
document chat service: the line transport, the protocol codec, the
session state, the receive dispatcher and the view controller. The
terminal user interface lives in the `ui` subpackage.

Schemas are organized in the `schemas` subpackage by category:
    - room: Room creation and listing
    - member: Identity and room membership
    - document: Shared document operations
"""

from .config import ClientConfig
from .controller import ViewController
from .dispatcher import ReceiveDispatcher
from .protocol import decode_body, encode_body, parse_event
from .session import Session, ViewState
from .transport import ConnectFailure, LineTransport, TransportClosed
from .schemas import (
    # Base classes
    BaseCommand,
    BaseEvent,
    # Room schemas
    ListRoomsCommand,
    CreateRoomCommand,
    RoomsListEvent,
    # Member schemas
    LoginCommand,
    LogoutCommand,
    JoinRoomCommand,
    LeaveRoomCommand,
    AttendancesCommand,
    AttendancesEvent,
    # Document schemas
    EditorCommand,
    FetchFileCommand,
    SaveCommand,
    MessageCommand,
    DocumentEvent,
)

__all__ = [
    # Core classes
    "ClientConfig",
    "ViewController",
    "ReceiveDispatcher",
    "Session",
    "ViewState",
    "LineTransport",
    "ConnectFailure",
    "TransportClosed",
    # Codec
    "encode_body",
    "decode_body",
    "parse_event",
    # Base schema classes
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
