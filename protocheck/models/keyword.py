from __future__ import annotations

from enum import Enum


class Keyword(str, Enum):
    """Semantic check selectors usable in place of a prototype.

    DIR     string names an existing directory
    FILE_E  file (or directory) exists
    FILE_W  file exists and is writable
    UUID    string is a valid UUID (versions 1-5, never the NIL UUID)
    """

    DIR = "DIR"
    FILE_E = "FILE_E"
    FILE_W = "FILE_W"
    UUID = "UUID"
