"""Validation report -- the ordered list of diagnostics returned by ``validate``.

A :class:`Report` behaves as a read-only sequence of message strings so it can
be printed, logged or tested for emptiness directly::

    report = validate(limits, like=[1.0, 1.0], check_size=True, name="limits")
    if report:
        append_to_log(report)
        raise ValueError(str(report))

The structured :class:`Diagnostic` records stay available through
``report.diagnostics`` for callers that need the error codes.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

import pandas as pd


MESSAGE_PREFIX = "validate>"


class ErrorCode(Enum):
    MODE_MISMATCH = "mode_mismatch"
    TYPE_MISMATCH = "type_mismatch"
    DIMENSION_MISMATCH = "dimension_mismatch"
    LENGTH_MISMATCH = "length_mismatch"
    CLASS_MISMATCH = "class_mismatch"
    GRAPH_SIZE_MISMATCH = "graph_size_mismatch"
    GRAPH_ATTRIBUTE_COUNT_MISMATCH = "graph_attribute_count_mismatch"
    GRAPH_ATTRIBUTE_NAME_MISMATCH = "graph_attribute_name_mismatch"
    GRAPH_VERSION_MISMATCH = "graph_version_mismatch"
    DIRECTORY_NOT_FOUND = "directory_not_found"
    FILE_NOT_FOUND = "file_not_found"
    FILE_NOT_WRITABLE = "file_not_writable"
    INVALID_IDENTIFIER = "invalid_identifier"


@dataclass(frozen=True)
class Diagnostic:
    """One failed check, attributable to a parameter name."""

    code: ErrorCode
    name: str
    message: str

    @classmethod
    def make(cls, code: ErrorCode, name: str, detail: str) -> Diagnostic:
        """Build a diagnostic whose message is prefixed with the parameter name."""
        return cls(code=code, name=name, message=f'{MESSAGE_PREFIX} "{name}" {detail}')

    def __str__(self) -> str:
        return self.message


@dataclass(frozen=True)
class Report(Sequence):
    """Ordered, immutable collection of diagnostics.

    Sequence protocol (``len``, indexing, iteration, ``in``) works on the
    message strings.  An empty report means the value conforms.
    """

    diagnostics: Tuple[Diagnostic, ...] = ()

    def __len__(self) -> int:
        return len(self.diagnostics)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return [d.message for d in self.diagnostics[index]]
        return self.diagnostics[index].message

    def __bool__(self) -> bool:
        return bool(self.diagnostics)

    def __add__(self, other: Report) -> Report:
        if not isinstance(other, Report):
            return NotImplemented
        return Report(self.diagnostics + other.diagnostics)

    def __str__(self) -> str:
        return "\n".join(d.message for d in self.diagnostics)

    @property
    def ok(self) -> bool:
        return not self.diagnostics

    @property
    def codes(self) -> Tuple[ErrorCode, ...]:
        return tuple(d.code for d in self.diagnostics)

    def filter(self, code: ErrorCode) -> Tuple[Diagnostic, ...]:
        return tuple(d for d in self.diagnostics if d.code is code)

    def to_frame(self) -> pd.DataFrame:
        """Return the diagnostics as a DataFrame (columns: name, code, message)."""
        rows = [
            {"name": d.name, "code": d.code.value, "message": d.message}
            for d in self.diagnostics
        ]
        return pd.DataFrame(rows, columns=["name", "code", "message"])
