"""Keyword-triggered semantic checks.

When the prototype is a :class:`~protocheck.models.keyword.Keyword`, each
element of a textual value is checked independently against the filesystem
or the UUID syntax.  Probes are read-only; a probe that raises is reported as
a failed check.
"""

from __future__ import annotations

import os
import re
from typing import Any, Callable, List

import numpy as np
import pandas as pd

from protocheck.models.descriptor import ValueDescriptor
from protocheck.models.keyword import Keyword
from protocheck.models.report import Diagnostic, ErrorCode


# Braces and hyphens optional; version nibble 1-5 and variant nibble 8/9/a/b.
# The NIL UUID is syntactically valid per RFC 4122 but fails the version
# nibble, so it is rejected here.
UUID_PATTERN = re.compile(
    r"\{?[0-9a-f]{8}-?"
    r"[0-9a-f]{4}-?"
    r"[1-5][0-9a-f]{3}-?"
    r"[89ab][0-9a-f]{3}-?"
    r"[0-9a-f]{12}\}?",
    flags=re.IGNORECASE,
)


def is_valid_uuid(text: str) -> bool:
    return UUID_PATTERN.fullmatch(text) is not None


def _probe(test: Callable[[str], bool], path: str) -> bool:
    try:
        return bool(test(path))
    except (OSError, ValueError):
        return False


def _is_writable(path: str) -> bool:
    return os.path.exists(path) and os.access(path, os.W_OK)


def text_elements(value: Any) -> List[Any]:
    """Flatten a textual value (str, path, list, array, Series) into elements."""
    if isinstance(value, (str, os.PathLike)):
        return [value]
    if isinstance(value, np.ndarray):
        return value.ravel().tolist()
    if isinstance(value, pd.Series):
        return value.tolist()
    return list(value)


def check_keyword(value: Any, x: ValueDescriptor, like: Any, name: str) -> List[Diagnostic]:
    """Apply the keyword check named by ``like`` to every element of ``value``.

    Returns an empty list when ``like`` is not a keyword or ``value`` is not a
    non-empty textual value.
    """
    if not isinstance(like, Keyword) or not x.is_textual:
        return []

    out: List[Diagnostic] = []
    for el in text_elements(value):
        path = os.fspath(el) if isinstance(el, os.PathLike) else str(el)

        if like is Keyword.DIR and not _probe(os.path.isdir, path):
            out.append(Diagnostic.make(
                ErrorCode.DIRECTORY_NOT_FOUND, name,
                f"error: directory {path} does not exist.",
            ))
        elif like is Keyword.FILE_E and not _probe(os.path.exists, path):
            out.append(Diagnostic.make(
                ErrorCode.FILE_NOT_FOUND, name,
                f"error: file {path} does not exist.",
            ))
        elif like is Keyword.FILE_W and not _probe(_is_writable, path):
            out.append(Diagnostic.make(
                ErrorCode.FILE_NOT_WRITABLE, name,
                f'error: "{path}" is not a writable file.',
            ))
        elif like is Keyword.UUID and not is_valid_uuid(path):
            out.append(Diagnostic.make(
                ErrorCode.INVALID_IDENTIFIER, name,
                f'error: "{path}" is not a valid identifier.',
            ))
    return out
