"""
Validation Utilities

Contains utility functions for validating usernames and room names
before they are put on the wire.
"""

from typing import Optional, Tuple


def validate_username(username: str) -> Tuple[bool, Optional[str]]:
    """
    Validate a username claimed at login.

    Args:
        username: The username to validate, already stripped

    Returns:
        tuple: (is_valid, error_message)
            - is_valid: True if the username is valid, False otherwise
            - error_message: Error message if invalid, None if valid
    """
    if not username:
        return False, "Please enter a valid username."

    if any(char.isspace() for char in username):
        return False, "Username cannot contain spaces."

    return True, None


def normalize_room_name(room_name: Optional[str]) -> Optional[str]:
    """
    Clean up a room name entered by the user.

    Newlines are removed and surrounding whitespace is stripped.

    Returns:
        The cleaned room name, or None if nothing usable remains
    """
    if room_name is None:
        return None

    cleaned = room_name.replace("\r", "").replace("\n", "").strip()
    return cleaned or None
