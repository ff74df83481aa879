# mediameta/domain/entities/streams.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Optional, Union

from mediameta.domain.entities.disposition import Disposition
from mediameta.domain.enums.stream_kind import StreamKind


class _StreamMixin:
    """Shared read-only accessors for normalized streams."""
    kind: ClassVar[StreamKind]
    tags: Dict[str, Any]

    @property
    def title(self) -> Optional[str]:
        return self.tags.get("title")

    @property
    def language(self) -> Optional[str]:
        return self.tags.get("language")

    def _fields(self) -> Dict[str, Any]:
        raise NotImplementedError

    def as_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.kind.value}
        out.update(self._fields())
        out["title"] = self.title
        out["language"] = self.language
        disposition = getattr(self, "disposition", None)
        if disposition is not None:
            out["disposition"] = disposition.as_dict()
        out["tags"] = dict(self.tags)
        return out


class _PictureMixin:
    codec: str
    width: int
    height: int
    sar: float
    dar: float
    pixel_format: Optional[str]

    def _fields(self) -> Dict[str, Any]:
        return {
            "codec": self.codec,
            "width": self.width,
            "height": self.height,
            "sar": self.sar,
            "dar": self.dar,
            "display_width": self.display_width,
            "display_height": self.display_height,
            "pixel_format": self.pixel_format,
        }

    @property
    def display_width(self) -> int:
        return round(self.width * self.sar)

    @property
    def display_height(self) -> int:
        return self.height


@dataclass(frozen=True)
class CoverImage(_PictureMixin, _StreamMixin):
    """Embedded artwork of an audio file: an image stream without its disposition."""
    codec: str
    width: int
    height: int
    sar: float = 1.0
    dar: float = 1.0
    pixel_format: Optional[str] = None
    tags: Dict[str, Any] = field(default_factory=dict)

    kind: ClassVar[StreamKind] = StreamKind.image


@dataclass(frozen=True)
class ImageStream(_PictureMixin, _StreamMixin):
    """A video-typed stream holding a single picture (still image, cover art, thumbnail)."""
    codec: str
    width: int
    height: int
    sar: float = 1.0
    dar: float = 1.0
    pixel_format: Optional[str] = None
    disposition: Disposition = field(default_factory=Disposition)
    tags: Dict[str, Any] = field(default_factory=dict)

    kind: ClassVar[StreamKind] = StreamKind.image

    def as_cover(self) -> CoverImage:
        return CoverImage(
            codec=self.codec,
            width=self.width,
            height=self.height,
            sar=self.sar,
            dar=self.dar,
            pixel_format=self.pixel_format,
            tags=dict(self.tags),
        )


@dataclass(frozen=True)
class VideoStream(_PictureMixin, _StreamMixin):
    codec: str
    width: int
    height: int
    framerate: float
    sar: float = 1.0
    dar: float = 1.0
    pixel_format: Optional[str] = None
    disposition: Disposition = field(default_factory=Disposition)
    tags: Dict[str, Any] = field(default_factory=dict)

    kind: ClassVar[StreamKind] = StreamKind.video

    def _fields(self) -> Dict[str, Any]:
        out = super()._fields()
        out["framerate"] = self.framerate
        return out


@dataclass(frozen=True)
class AudioStream(_StreamMixin):
    codec: str
    channels: int
    disposition: Disposition = field(default_factory=Disposition)
    tags: Dict[str, Any] = field(default_factory=dict)

    kind: ClassVar[StreamKind] = StreamKind.audio

    def _fields(self) -> Dict[str, Any]:
        return {"codec": self.codec, "channels": self.channels}


@dataclass(frozen=True)
class SubtitlesStream(_StreamMixin):
    codec: str
    disposition: Disposition = field(default_factory=Disposition)
    tags: Dict[str, Any] = field(default_factory=dict)

    kind: ClassVar[StreamKind] = StreamKind.subtitles

    def _fields(self) -> Dict[str, Any]:
        return {"codec": self.codec}


Stream = Union[ImageStream, VideoStream, AudioStream, SubtitlesStream]
