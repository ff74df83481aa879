from __future__ import annotations
from enum import StrEnum

class StreamKind(StrEnum):
    image = "image"
    video = "video"
    audio = "audio"
    subtitles = "subtitles"


class RawCodecType(StrEnum):
    """ffprobe `codec_type` values we know how to normalize."""
    video = "video"
    audio = "audio"
    subtitle = "subtitle"
