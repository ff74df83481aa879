# mediameta/domain/exceptions.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional


@dataclass(eq=False)
class ProbeError(RuntimeError):
    """Base class for every failure raised while probing a file."""
    message: str

    def __post_init__(self) -> None:
        RuntimeError.__init__(self, self.message)

    def __str__(self) -> str:
        return self.message


@dataclass(eq=False)
class UnsupportedFormatError(ProbeError):
    """
    The file could not be probed: missing/unreadable file, ffprobe failed to launch,
    exited non-zero, wrote to stderr, or printed something that is not a probe record.
    """
    stderr: Optional[str] = None
    returncode: Optional[int] = None


@dataclass(eq=False)
class StreamExtractionError(UnsupportedFormatError):
    """A stream lacks a field its codec_type requires (channels, framerate, width, height)."""
    field_name: str = ""
    stream: Dict[str, Any] = field(default_factory=dict)


@dataclass(eq=False)
class ClassificationError(ProbeError):
    """Streams were parsed but the file is not a usable image, audio or video."""
    raw: Dict[str, Any] = field(default_factory=dict)
