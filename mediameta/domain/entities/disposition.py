# mediameta/domain/entities/disposition.py
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional


@dataclass(frozen=True)
class Disposition:
    """
    Role flags ffprobe attaches to every stream. ffprobe reports them as 0/1;
    flags outside this set (newer ffprobe builds add more) are ignored.
    """
    default: bool = False
    dub: bool = False
    original: bool = False
    comment: bool = False
    lyrics: bool = False
    karaoke: bool = False
    forced: bool = False
    hearing_impaired: bool = False
    visual_impaired: bool = False
    clean_effects: bool = False
    attached_pic: bool = False
    timed_thumbnails: bool = False

    @classmethod
    def from_raw(cls, raw: Optional[Mapping[str, Any]]) -> "Disposition":
        if not isinstance(raw, Mapping):
            return cls()
        names = {f.name for f in fields(cls)}
        return cls(**{k: bool(v) for k, v in raw.items() if k in names})

    @property
    def is_picture(self) -> bool:
        """Cover art or thumbnail track rather than real footage."""
        return self.attached_pic or self.timed_thumbnails

    def as_dict(self) -> Dict[str, int]:
        return {f.name: int(getattr(self, f.name)) for f in fields(self)}
