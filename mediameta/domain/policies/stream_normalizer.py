# mediameta/domain/policies/stream_normalizer.py
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping, Optional

from mediameta.common.probe.ffprobe_helpers import dump_json, parse_aspect_ratio, parse_rate
from mediameta.common.strings.tags import normalize_tags
from mediameta.domain.entities.disposition import Disposition
from mediameta.domain.entities.streams import (
    AudioStream,
    ImageStream,
    Stream,
    SubtitlesStream,
    VideoStream,
)
from mediameta.domain.enums.stream_kind import RawCodecType
from mediameta.domain.exceptions import StreamExtractionError

CODEC_NAME_SUBSTITUTES = {
    "mjpeg": "jpeg",
}

# Seconds of slack when comparing container duration to a single frame.
SINGLE_FRAME_TOLERANCE_SEC = 0.02

# ffprobe omits codec_name when it has no decoder for the stream
UNKNOWN_CODEC = "unknown"


def normalize_codec_name(codec_name: Optional[str]) -> str:
    if not codec_name:
        return UNKNOWN_CODEC
    return CODEC_NAME_SUBSTITUTES.get(codec_name, codec_name)


def normalize_stream_tags(raw_tags: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    tags = normalize_tags(raw_tags)
    # Some muxers (vorbis, id3) write "comments"
    if tags.get("comments") and not tags.get("comment"):
        tags["comment"] = tags["comments"]
    return tags


def _is_positive_int(v: Any) -> bool:
    return isinstance(v, int) and not isinstance(v, bool) and v >= 1


def is_single_frame(duration_sec: float, framerate: float) -> bool:
    """True when the container holds roughly one frame's worth of time (or none)."""
    if not duration_sec:
        return True
    return abs(duration_sec - 1 / framerate) < SINGLE_FRAME_TOLERANCE_SEC


class StreamNormalizer:
    """
    Turns ffprobe's raw stream dicts into typed streams.

    Video-typed streams become ImageStream when they effectively hold one picture:
    the container has no duration, the duration spans a single frame, or the
    disposition marks cover art / thumbnails. Streams of other codec types
    (data, attachment) are dropped.
    """

    def __init__(self, duration_sec: float) -> None:
        self.duration_sec = duration_sec

    def normalize(self, raw_streams: Iterable[Mapping[str, Any]]) -> List[Stream]:
        out: List[Stream] = []
        for raw in raw_streams:
            stream = self.normalize_one(raw)
            if stream is not None:
                out.append(stream)
        return out

    def normalize_one(self, raw: Mapping[str, Any]) -> Optional[Stream]:
        codec_type = raw.get("codec_type")
        codec = normalize_codec_name(raw.get("codec_name"))
        tags = normalize_stream_tags(raw.get("tags"))
        disposition = Disposition.from_raw(raw.get("disposition"))

        if codec_type == RawCodecType.subtitle:
            return SubtitlesStream(codec=codec, disposition=disposition, tags=tags)

        if codec_type == RawCodecType.audio:
            channels = raw.get("channels")
            if channels is None:
                raise self._extract_error("channels", raw)
            return AudioStream(codec=codec, channels=channels, disposition=disposition, tags=tags)

        if codec_type == RawCodecType.video:
            return self._normalize_visual(raw, codec, disposition, tags)

        return None

    def _normalize_visual(
        self,
        raw: Mapping[str, Any],
        codec: str,
        disposition: Disposition,
        tags: Dict[str, Any],
    ) -> Stream:
        framerate = parse_rate(raw.get("r_frame_rate"))
        if framerate is None:
            raise self._extract_error("framerate", raw)

        width = raw.get("width")
        height = raw.get("height")
        if not _is_positive_int(width):
            raise self._extract_error("width", raw)
        if not _is_positive_int(height):
            raise self._extract_error("height", raw)

        # zero ("0:1" means unknown) and unparseable values both fall back
        sar = parse_aspect_ratio(raw.get("sample_aspect_ratio")) or 1
        dar = parse_aspect_ratio(raw.get("display_aspect_ratio")) or width / height
        pixel_format = raw.get("pix_fmt")

        if is_single_frame(self.duration_sec, framerate) or disposition.is_picture:
            return ImageStream(
                codec=codec,
                width=width,
                height=height,
                sar=sar,
                dar=dar,
                pixel_format=pixel_format,
                disposition=disposition,
                tags=tags,
            )

        return VideoStream(
            codec=codec,
            width=width,
            height=height,
            framerate=framerate,
            sar=sar,
            dar=dar,
            pixel_format=pixel_format,
            disposition=disposition,
            tags=tags,
        )

    @staticmethod
    def _extract_error(what: str, raw: Mapping[str, Any]) -> StreamExtractionError:
        return StreamExtractionError(
            f"Couldn't extract {what} out of {raw.get('codec_type')} stream: {dump_json(raw)}",
            field_name=what,
            stream=dict(raw),
        )


def normalize_streams(raw_streams: Iterable[Mapping[str, Any]], duration_sec: float) -> List[Stream]:
    return StreamNormalizer(duration_sec).normalize(raw_streams)
