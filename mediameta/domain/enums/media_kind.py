from __future__ import annotations
from enum import StrEnum

class MediaKind(StrEnum):
    image = "image"
    audio = "audio"
    video = "video"
