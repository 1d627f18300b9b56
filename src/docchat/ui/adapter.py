"""
UI Adapter Interface

The operations the controller and the receive dispatcher need from the
visual layer. Concrete rendering lives in the Textual application.
"""

from typing import List, Optional


class UIAdapter:
    """
    Base class for user interfaces driven by the view controller.

    All methods are called on the UI event loop.
    """

    def render_login(self) -> None:
        """Show the login view."""
        raise NotImplementedError("Subclasses must implement render_login")

    def render_room_list(self, rooms: List[str], username: str) -> None:
        """Show the room list view with one entry per room."""
        raise NotImplementedError(
            "Subclasses must implement render_room_list"
        )

    def render_room(self, room_name: str, username: str) -> None:
        """Show the room view for the given room."""
        raise NotImplementedError("Subclasses must implement render_room")

    def set_document(self, text: str) -> None:
        """Replace the contents of the document area."""
        raise NotImplementedError("Subclasses must implement set_document")

    def get_document(self) -> str:
        """Return the current contents of the document area."""
        raise NotImplementedError("Subclasses must implement get_document")

    def set_editor_field(self, text: str) -> None:
        """Display the editor holder name."""
        raise NotImplementedError(
            "Subclasses must implement set_editor_field"
        )

    def set_document_editable(self, editable: bool) -> None:
        """Allow or forbid editing of the document area."""
        raise NotImplementedError(
            "Subclasses must implement set_document_editable"
        )

    async def prompt_room_name(self) -> Optional[str]:
        """
        Ask the user for a new room name.

        Returns:
            The entered text, or None if the user cancelled
        """
        raise NotImplementedError(
            "Subclasses must implement prompt_room_name"
        )

    def show_info(self, text: str) -> None:
        """Show an informational message."""
        raise NotImplementedError("Subclasses must implement show_info")

    def show_error(self, text: str) -> None:
        """Show an error message."""
        raise NotImplementedError("Subclasses must implement show_error")
