"""Append validation messages to a log destination.

The destination is either passed explicitly (``sink``: a path or a writable
text stream) or taken from the process-wide settings bound with
:func:`protocheck.models.settings.configure`.

Path sinks receive the configured line ending; text streams receive ``\n``
and apply their own newline translation.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path
from typing import Any, List, Optional, Union, TextIO

from protocheck.models.settings import ValidationSettings, get_settings


Sink = Union[str, os.PathLike, TextIO]


def _message_lines(message: Any) -> List[str]:
    if isinstance(message, str):
        return [message]
    if isinstance(message, (bytes, bytearray)):
        raise TypeError("Log message must be text, got bytes.")
    if isinstance(message, Sequence) and all(isinstance(m, str) for m in message):
        return list(message)
    raise TypeError(
        f"Log message must be a string or a sequence of strings, got {type(message).__name__}."
    )


def format_log_text(message: Any, line_ending: str = "\n") -> str:
    """Join ``message`` into one block terminated by ``line_ending``.

    Internal newlines (``\\n`` or ``\\r\\n``) are normalized to ``line_ending``.
    """
    text = "\n".join(_message_lines(message)) + "\n"
    text = text.replace("\r\n", "\n")
    if line_ending != "\n":
        text = text.replace("\n", line_ending)
    return text


def append_to_log(
    message: Any,
    *,
    sink: Optional[Sink] = None,
    settings: Optional[ValidationSettings] = None,
) -> None:
    """Append ``message`` plus a line terminator to the log.

    Raises
    ------
    TypeError
        If ``message`` is neither a string nor a sequence of strings.
    RuntimeError
        If no sink is given and no log file is configured.
    """
    settings = settings if settings is not None else get_settings()
    # validates the message before any destination is touched
    text = format_log_text(message)

    if sink is None:
        if settings.log_file is None:
            raise RuntimeError("No log file configured; call configure(log_file=...) or pass sink=.")
        sink = settings.log_file

    if isinstance(sink, (str, os.PathLike)):
        # newline="" keeps the normalized line endings untouched
        with Path(sink).open("a", encoding=settings.encoding, newline="") as fh:
            fh.write(text.replace("\n", settings.line_ending))
        return

    # text streams translate "\n" themselves
    sink.write(text)
