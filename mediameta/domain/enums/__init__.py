from mediameta.domain.enums.file_format import ImageFormats, format_from_extension
from mediameta.domain.enums.media_kind import MediaKind
from mediameta.domain.enums.stream_kind import StreamKind, RawCodecType
__all__ = [
    "ImageFormats",
    "format_from_extension",
    "MediaKind",
    "StreamKind",
    "RawCodecType",
]
