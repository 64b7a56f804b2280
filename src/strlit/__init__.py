"""
String Literal Package

A non-null view over a null-terminated character sequence, and the
length routine that scans it.

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Encodings
    - String building, comparison or mutation
    - Storage ownership

A view is checked once, at construction.
Everything downstream trusts that check.
"""

__version__ = "0.1.0"
