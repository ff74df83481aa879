# mediameta/domain/entities/metadata.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Tuple, Union

from mediameta.common.strings.tags import merge_tags
from mediameta.domain.entities.streams import (
    AudioStream,
    CoverImage,
    Stream,
    SubtitlesStream,
    VideoStream,
)
from mediameta.domain.enums.media_kind import MediaKind


class _MetaMixin:
    """
    Flat view of a record. Free-form `tags` (stream tags overlaid by container tags)
    go in first; structural fields are written last so they always win.
    """
    kind: ClassVar[MediaKind]
    tags: Dict[str, Any]

    def _fields(self) -> Dict[str, Any]:
        raise NotImplementedError

    def as_dict(self) -> Dict[str, Any]:
        fields = self._fields()
        structural: Dict[str, Any] = {"type": self.kind.value}
        structural.update({k: v for k, v in fields.items() if v is not None})
        # a tag named like a structural field never shows through, even when the field is unset
        tags = {k: v for k, v in self.tags.items() if k != "type" and k not in fields}
        return merge_tags(tags, structural)

    def get(self, key: str, default: Any = None) -> Any:
        return self.as_dict().get(key, default)


@dataclass(frozen=True)
class ImageMeta(_MetaMixin):
    path: str
    size: int
    codec: str
    container: str
    width: int
    height: int
    sar: float = 1.0
    dar: float = 1.0
    pixel_format: Optional[str] = None
    tags: Dict[str, Any] = field(default_factory=dict)

    kind: ClassVar[MediaKind] = MediaKind.image

    @property
    def display_width(self) -> int:
        return round(self.width * self.sar)

    @property
    def display_height(self) -> int:
        return self.height

    def _fields(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "size": self.size,
            "codec": self.codec,
            "container": self.container,
            "width": self.width,
            "height": self.height,
            "sar": self.sar,
            "dar": self.dar,
            "display_width": self.display_width,
            "display_height": self.display_height,
            "pixel_format": self.pixel_format,
        }


@dataclass(frozen=True)
class AudioMeta(_MetaMixin):
    path: str
    size: int
    codec: str
    container: str
    channels: int
    duration: float               # milliseconds
    cover: Optional[CoverImage] = None
    language: Optional[str] = None
    title: Optional[str] = None
    artist: Optional[str] = None
    album: Optional[str] = None
    album_artist: Optional[str] = None
    genre: Optional[str] = None
    track: Optional[str] = None
    tags: Dict[str, Any] = field(default_factory=dict)

    kind: ClassVar[MediaKind] = MediaKind.audio

    def _fields(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "size": self.size,
            "codec": self.codec,
            "container": self.container,
            "channels": self.channels,
            "duration": self.duration,
            "cover": self.cover.as_dict() if self.cover else None,
            "language": self.language,
            "title": self.title,
            "artist": self.artist,
            "album": self.album,
            "album_artist": self.album_artist,
            "genre": self.genre,
            "track": self.track,
        }


@dataclass(frozen=True)
class VideoMeta(_MetaMixin):
    path: str
    size: int
    codec: str
    container: str
    duration: float               # milliseconds
    framerate: float
    width: int
    height: int
    sar: float = 1.0
    dar: float = 1.0
    pixel_format: Optional[str] = None
    title: Optional[str] = None
    streams: Tuple[Stream, ...] = ()
    tags: Dict[str, Any] = field(default_factory=dict)

    kind: ClassVar[MediaKind] = MediaKind.video

    @property
    def display_width(self) -> int:
        return round(self.width * self.sar)

    @property
    def display_height(self) -> int:
        return self.height

    @property
    def video_streams(self) -> Tuple[VideoStream, ...]:
        return tuple(s for s in self.streams if isinstance(s, VideoStream))

    @property
    def audio_streams(self) -> Tuple[AudioStream, ...]:
        return tuple(s for s in self.streams if isinstance(s, AudioStream))

    @property
    def subtitles_streams(self) -> Tuple[SubtitlesStream, ...]:
        return tuple(s for s in self.streams if isinstance(s, SubtitlesStream))

    def _fields(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "size": self.size,
            "codec": self.codec,
            "container": self.container,
            "duration": self.duration,
            "framerate": self.framerate,
            "width": self.width,
            "height": self.height,
            "sar": self.sar,
            "dar": self.dar,
            "display_width": self.display_width,
            "display_height": self.display_height,
            "pixel_format": self.pixel_format,
            "title": self.title,
            "streams": [s.as_dict() for s in self.streams],
            "video_streams": [s.as_dict() for s in self.video_streams],
            "audio_streams": [s.as_dict() for s in self.audio_streams],
            "subtitles_streams": [s.as_dict() for s in self.subtitles_streams],
        }


Meta = Union[ImageMeta, AudioMeta, VideoMeta]
