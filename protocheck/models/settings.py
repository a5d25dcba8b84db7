"""Process-wide settings for the validation helpers.

ValidationSettings is a frozen dataclass.  One instance is held at module
level and consulted by :func:`protocheck.reporting.log_file.append_to_log`
when no explicit sink is given.  It can be:

- Bound once at start-up via :func:`configure` (e.g. ``configure(log_file=...)``)
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict for JSON provenance

The validation engine itself never reads these settings.
"""

from __future__ import annotations

import os
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Any, Dict, Optional


_NEWLINES = ("\n", "\r\n")


@dataclass(frozen=True)
class ValidationSettings:
    """Frozen configuration for logging validation output.

    Fields
    ------
    log_file : Path or None
        Log destination appended to by ``append_to_log``.  None means "not
        configured"; appending without an explicit sink then fails.
    newline : str or None
        Line ending written to the log.  None selects the platform default
        (``os.linesep``), so logs written on Windows use ``\\r\\n``.
    encoding : str
        Text encoding of the log file.
    """

    log_file: Optional[Path] = None
    newline: Optional[str] = None
    encoding: str = "utf-8"

    def __post_init__(self) -> None:
        if self.log_file is not None and not isinstance(self.log_file, Path):
            # frozen: bypass __setattr__ to normalize str paths
            object.__setattr__(self, "log_file", Path(self.log_file))
        if self.newline is not None and self.newline not in _NEWLINES:
            raise ValueError(f"newline must be one of {_NEWLINES!r} or None, got {self.newline!r}")

    @property
    def line_ending(self) -> str:
        return self.newline if self.newline is not None else os.linesep

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict (paths become strings)."""
        d = asdict(self)
        if d["log_file"] is not None:
            d["log_file"] = str(d["log_file"])
        return d

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> ValidationSettings:
        """Reconstruct from a dict (e.g. loaded from JSON)."""
        d = dict(d)
        if d.get("log_file") is not None:
            d["log_file"] = Path(d["log_file"])
        return cls(**d)


_settings = ValidationSettings()


def get_settings() -> ValidationSettings:
    return _settings


def configure(**overrides: Any) -> ValidationSettings:
    """Replace fields of the process-wide settings and return the new instance."""
    global _settings
    _settings = replace(_settings, **overrides)
    return _settings


def reset_settings() -> ValidationSettings:
    global _settings
    _settings = ValidationSettings()
    return _settings
