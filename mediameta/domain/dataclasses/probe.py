# mediameta/domain/dataclasses/probe.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class RawFormat:
    """ffprobe's `format` object after acquisition-time cleanup."""
    format_name: Optional[str] = None
    duration_ms: float = 0.0      # converted from the seconds string
    size: int = 0                 # fresh os.stat() value, not ffprobe's
    tags: Dict[str, Any] = field(default_factory=dict)

    @property
    def duration_sec(self) -> float:
        return self.duration_ms / 1000


@dataclass(frozen=True)
class RawProbe:
    """
    Validated ffprobe output for one file. `streams` are the untouched stream dicts;
    `raw` is the whole decoded document (with size/duration rewritten) for error dumps.
    """
    path: str
    streams: List[Dict[str, Any]] = field(default_factory=list)
    format: RawFormat = field(default_factory=RawFormat)
    raw: Dict[str, Any] = field(default_factory=dict)
