"""
Example length cases.

The four literal scenarios every strlen must get right: a null
reference, an empty sequence, a plain sequence, and a sequence whose
storage continues past an embedded terminator.
"""
from typing import List

from strlit.cases import LengthCase


def build_example_cases() -> List[LengthCase]:
    return [
        LengthCase(name="null reference", text=None),
        LengthCase(name="empty", text="", expected=0),
        LengthCase(name="simple", text="abc", expected=3),
        # Three stored characters; the scan stops at the first
        LengthCase(name="embedded terminator", text="a\0b", expected=1),
    ]
