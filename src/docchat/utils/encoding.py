"""
Document Body Encoding

The protocol is newline-delimited, so newlines inside a document body
travel as a three-character surrogate.
"""

NEWLINE_SURROGATE = ";;;"


def encode_body(text: str) -> str:
    """
    Encode document text for transmission.

    Carriage returns are left in place, so a CRLF pair travels as
    ``\\r;;;`` and decodes back to CRLF.

    Args:
        text: Document text, possibly containing newlines

    Returns:
        Single-line body with every newline replaced by the surrogate
    """
    return text.replace("\n", NEWLINE_SURROGATE)


def decode_body(body: str) -> str:
    """Decode a received body back into document text."""
    return body.replace(NEWLINE_SURROGATE, "\n")
