# mediameta/common/strings/tags.py
from __future__ import annotations

from typing import Any, Dict, Mapping, Optional


def normalize_tags(tags: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Lower-case tag keys and drop null values.
    Non-mapping input (ffprobe omits "tags" for many streams) yields {}.
    """
    if not isinstance(tags, Mapping):
        return {}
    return {str(k).lower(): v for k, v in tags.items() if v is not None}


def merge_tags(*sources: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """
    Merge mappings left to right: pass the lowest-priority source first,
    later sources win on key collision. None sources are skipped.
    """
    out: Dict[str, Any] = {}
    for src in sources:
        if src:
            out.update(src)
    return out
