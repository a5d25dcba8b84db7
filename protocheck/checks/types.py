from __future__ import annotations

from typing import List

from protocheck.models.descriptor import ValueDescriptor
from protocheck.models.report import Diagnostic, ErrorCode


def check_mode_type(x: ValueDescriptor, like: ValueDescriptor, name: str) -> List[Diagnostic]:
    """Compare mode and storage type; the two checks are independent."""
    out: List[Diagnostic] = []
    if x.mode != like.mode:
        out.append(Diagnostic.make(
            ErrorCode.MODE_MISMATCH, name,
            f'mode error: argument has mode "{x.mode}" but function expects mode "{like.mode}".',
        ))
    if x.type != like.type:
        out.append(Diagnostic.make(
            ErrorCode.TYPE_MISMATCH, name,
            f'type error: argument has type "{x.type}" but function expects type "{like.type}".',
        ))
    return out
