"""
Length of a null-terminated sequence.

Scans a copy of the given view until it sits on the terminator and
returns how far it moved. The caller's view is left where it was.
"""

from strlit.literal import StringLiteral


def strlen(view: StringLiteral) -> int:
    """
    Count the characters before the first terminator.

    Args:
        view: A valid StringLiteral (non-null by construction)

    Returns:
        Number of characters preceding the terminator (0 if the view
        already sits on one)

    Never reads past the first terminator. An unterminated sequence is
    ended by the end of its storage.
    """
    cur = view.copy()
    while cur:
        cur.advance()
    return cur - view


__all__ = ["strlen"]
