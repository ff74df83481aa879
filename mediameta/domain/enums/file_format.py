# mediameta/domain/enums/file_format.py
from __future__ import annotations

from enum import StrEnum
from pathlib import Path


class ImageFormats(StrEnum):
    JPG = "jpg"
    PNG = "png"
    WEBP = "webp"
    GIF = "gif"
    BMP = "bmp"
    TIFF = "tiff"
    AVIF = "avif"


# Extensions that name the same container as another, canonical one.
EXTENSION_TO_FORMAT = {
    "jpeg": ImageFormats.JPG.value,
    "pjpeg": ImageFormats.JPG.value,
}


def format_from_extension(path: str | Path) -> str:
    """`photo.JPEG` -> "jpg"; unknown extensions come back lower-cased as-is."""
    ext = Path(str(path)).suffix.lstrip(".").lower()
    return EXTENSION_TO_FORMAT.get(ext, ext)
