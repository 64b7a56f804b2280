"""
String Literal View

A borrowed cursor over a null-terminated character sequence.

The view holds a reference to some storage (``bytes``, ``bytearray``,
``memoryview`` or ``str``) and an integer offset into it. The offset
stands in for a raw pointer: two views over the same storage can be
subtracted to get a distance.

ARCHITECTURAL RULE:
    The storage reference is never None.
    This is checked exactly once, at construction.
    Nothing downstream re-checks it.

ALIASING:
    The view never copies the storage. If the storage is mutable
    (bytearray, writable memoryview), changes made through any other
    reference are visible through every view over it. Keeping the
    storage unchanged during a scan is the caller's job.
"""

from dataclasses import dataclass
from typing import Sequence, Union

from strlit.require import NullReference, require


NUL_BYTE = 0
NUL_CHAR = "\0"
NUL_ITEM = b"\0"

Character = Union[int, str, bytes]


@dataclass(eq=False)
class StringLiteral:
    """
    Non-owning, non-null view of a null-terminated character sequence.

    Properties:
        storage:
            The referenced sequence. Elements of byte-like storage are
            ints and the terminator is 0; elements of a str are
            one-character strings and the terminator is "\\0". A
            memoryview in format "c" yields one-byte bytes, so its
            terminator is b"\\0".

        ptr:
            Offset of the current character inside storage, between
            0 and len(storage) inclusive at construction.

    The end of storage counts as a terminator, the way a source string
    literal always carries one. So ``StringLiteral("")`` is a valid,
    zero-length sequence.

    Example:
        view = StringLiteral(b"a\\0b")
        view.deref()      # 97
        view.advance()
        view.deref()      # 0

    Copies are independent cursors over the same storage.
    """

    storage: Sequence[Character]
    ptr: int = 0

    def __post_init__(self) -> None:
        require(self.storage is not None, "string literal from null reference", NullReference)
        require(
            0 <= self.ptr <= len(self.storage),
            f"string literal offset {self.ptr} outside storage of length {len(self.storage)}",
        )

    @property
    def terminator(self) -> Character:
        """Terminator value for this view's storage kind."""
        if isinstance(self.storage, str):
            return NUL_CHAR
        # Format "c" memoryviews yield one-byte bytes, not ints
        if isinstance(self.storage, memoryview) and self.storage.format == "c":
            return NUL_ITEM
        return NUL_BYTE

    def deref(self) -> Character:
        """
        Return the character at the current position.

        Reading past the end of storage is out of contract and surfaces
        as the IndexError of the underlying sequence.
        """
        if self.ptr == len(self.storage):
            return self.terminator
        return self.storage[self.ptr]

    def advance(self) -> "StringLiteral":
        """Move to the next character. No bounds check."""
        self.ptr += 1
        return self

    def at_terminator(self) -> bool:
        return self.deref() == self.terminator

    def copy(self) -> "StringLiteral":
        return StringLiteral(self.storage, self.ptr)

    def __copy__(self) -> "StringLiteral":
        return self.copy()

    def __bool__(self) -> bool:
        # Truth of the current character, as a loop condition
        return not self.at_terminator()

    def __iadd__(self, steps: int) -> "StringLiteral":
        require(steps >= 0, f"cannot move a string literal backwards: {steps}")
        for _ in range(steps):
            self.advance()
        return self

    def __sub__(self, other: "StringLiteral") -> int:
        if not isinstance(other, StringLiteral):
            return NotImplemented
        if other.storage is not self.storage:
            raise ValueError("cannot take distance between views over different storage")
        return self.ptr - other.ptr

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StringLiteral):
            return NotImplemented
        return self.storage is other.storage and self.ptr == other.ptr


__all__ = ["StringLiteral", "NUL_BYTE", "NUL_CHAR", "NUL_ITEM"]
