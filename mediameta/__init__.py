from mediameta.domain.entities.disposition import Disposition
from mediameta.domain.entities.metadata import AudioMeta, ImageMeta, Meta, VideoMeta
from mediameta.domain.entities.streams import (
    AudioStream,
    CoverImage,
    ImageStream,
    Stream,
    SubtitlesStream,
    VideoStream,
)
from mediameta.domain.enums import MediaKind, StreamKind
from mediameta.domain.exceptions import (
    ClassificationError,
    ProbeError,
    StreamExtractionError,
    UnsupportedFormatError,
)
from mediameta.services.probe.service import ffprobe

__all__ = [
    "ffprobe",
    "Disposition",
    "AudioMeta",
    "ImageMeta",
    "Meta",
    "VideoMeta",
    "AudioStream",
    "CoverImage",
    "ImageStream",
    "Stream",
    "SubtitlesStream",
    "VideoStream",
    "MediaKind",
    "StreamKind",
    "ClassificationError",
    "ProbeError",
    "StreamExtractionError",
    "UnsupportedFormatError",
]
