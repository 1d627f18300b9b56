"""
Utilities for the Chat Client

This module contains helpers for the wire encoding of document text
and for validating user-supplied identifiers.
"""

from .encoding import NEWLINE_SURROGATE, encode_body, decode_body
from .validation import validate_username, normalize_room_name

__all__ = [
    "NEWLINE_SURROGATE",
    "encode_body",
    "decode_body",
    "validate_username",
    "normalize_room_name",
]
