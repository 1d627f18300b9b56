"""
Receive Dispatcher for Server Events

This module consumes the inbound line stream, classifies each line and
applies the resulting update to the session and the UI.

Architecture:
    - The receive loop never touches state directly; every update is
      handed to a scheduler that runs it on the UI event loop
    - An update is applied only if it is relevant to the view that is
      current when it runs:
          list_rooms   -> ROOM_LIST
          attendances  -> ROOM
          message      -> ROOM
    - Each event kind replaces its state wholesale

Usage:
    dispatcher = ReceiveDispatcher(session, ui, schedule=app.call_later)
    await dispatcher.run(transport)
"""

import logging
from functools import partial
from typing import TYPE_CHECKING, Callable, Optional

from .protocol import ServerEvent, parse_event
from .schemas import AttendancesEvent, DocumentEvent, RoomsListEvent
from .session import Session, ViewState

if TYPE_CHECKING:
    from .transport import LineTransport
    from .ui.adapter import UIAdapter

logger = logging.getLogger(__name__)


def _call_now(callback: Callable[[], None]) -> None:
    callback()


class ReceiveDispatcher:
    """
    Maps server events to session mutations and UI notifications.

    Attributes:
        session: Session state mutated by applied events
        ui: UI adapter notified of changes
    """

    def __init__(
        self,
        session: Session,
        ui: "UIAdapter",
        schedule: Optional[Callable[[Callable[[], None]], object]] = None,
        on_closed: Optional[Callable[[], None]] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            session: Session state to update
            ui: UI adapter to notify
            schedule: Function that runs a callback on the UI event loop.
                Defaults to calling it immediately.
            on_closed: Optional callback scheduled when the inbound
                stream ends
        """
        self.session = session
        self.ui = ui
        self._schedule = schedule or _call_now
        self._on_closed = on_closed

    async def run(self, transport: "LineTransport") -> None:
        """
        Consume inbound lines until the connection closes.

        Args:
            transport: Connected transport to read from
        """
        logger.info("Starting receive loop")

        async for line in transport.lines():
            logger.debug("Received line: %r", line)
            self.feed(line)

        logger.warning("Receive loop ended: connection closed")
        if self._on_closed:
            self._schedule(self._on_closed)

    def feed(self, line: str) -> bool:
        """
        Parse one line and schedule its application.

        Args:
            line: Raw inbound line

        Returns:
            True if the line was a known event, False if it was dropped
        """
        event = parse_event(line)
        if event is None:
            return False

        self._schedule(partial(self.apply, event))
        return True

    def apply(self, event: ServerEvent) -> bool:
        """
        Apply an event if it is relevant to the current view.

        Must run on the UI event loop.

        Returns:
            True if the event was applied, False if it was dropped
        """
        if isinstance(event, RoomsListEvent):
            return self._handle_rooms_list(event)
        if isinstance(event, AttendancesEvent):
            return self._handle_attendances(event)
        if isinstance(event, DocumentEvent):
            return self._handle_document(event)

        logger.debug("Unhandled event type: %s", type(event).__name__)
        return False

    def _is_relevant(self, event: ServerEvent, view: ViewState) -> bool:
        if self.session.view != view:
            logger.debug(
                "Ignoring %s event in view %s",
                event.verb,
                self.session.view.value,
            )
            return False
        return True

    def _handle_rooms_list(self, event: RoomsListEvent) -> bool:
        """
        Handle a room list update.

        Replaces the room list and re-renders the room list view.
        """
        if not self._is_relevant(event, ViewState.ROOM_LIST):
            return False

        self.session.apply_rooms(event.rooms)
        view = self.session.snapshot()
        self.ui.render_room_list(view.rooms, view.username or "")
        logger.info("Room list updated: %d room(s)", len(event.rooms))
        return True

    def _handle_attendances(self, event: AttendancesEvent) -> bool:
        """
        Handle a participant list update.

        Replaces the participant list, derives the editor holder from the
        first participant and recomputes editability.
        """
        if not self._is_relevant(event, ViewState.ROOM):
            return False

        self.session.apply_participants(event.participants)
        self.ui.set_editor_field(self.session.editor_holder or "")
        self.ui.set_document_editable(self.session.editable)
        logger.info(
            "Participants in %s: %s (editor: %s)",
            self.session.current_room,
            ", ".join(self.session.participants),
            self.session.editor_holder,
        )
        return True

    def _handle_document(self, event: DocumentEvent) -> bool:
        """
        Handle a document update.

        The body is the whole document; an empty body clears it.
        """
        if not self._is_relevant(event, ViewState.ROOM):
            return False

        text = event.text
        self.session.apply_document(text)
        self.ui.set_document(text)
        logger.debug("Document replaced (%d chars)", len(text))
        return True
