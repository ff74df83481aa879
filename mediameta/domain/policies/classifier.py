# mediameta/domain/policies/classifier.py
from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from mediameta.common.probe.ffprobe_helpers import dump_json
from mediameta.common.strings.tags import merge_tags, normalize_tags
from mediameta.domain.dataclasses.probe import RawProbe
from mediameta.domain.entities.metadata import AudioMeta, ImageMeta, Meta, VideoMeta
from mediameta.domain.entities.streams import (
    AudioStream,
    ImageStream,
    Stream,
    SubtitlesStream,
    VideoStream,
)
from mediameta.domain.enums.file_format import format_from_extension
from mediameta.domain.exceptions import ClassificationError


class FirstStreams:
    """First stream of each kind, in stream order."""

    def __init__(self, streams: Sequence[Stream]) -> None:
        self.video: Optional[VideoStream] = None
        self.audio: Optional[AudioStream] = None
        self.image: Optional[ImageStream] = None
        self.subtitles: Optional[SubtitlesStream] = None

        for s in streams:
            if isinstance(s, VideoStream) and self.video is None:
                self.video = s
            elif isinstance(s, AudioStream) and self.audio is None:
                self.audio = s
            elif isinstance(s, ImageStream) and self.image is None:
                self.image = s
            elif isinstance(s, SubtitlesStream) and self.subtitles is None:
                self.subtitles = s


class FileClassifier:
    """
    Decides what a probed file is and assembles its record.

    Precedence: any video stream makes it a video; otherwise an audio stream makes
    it audio (the first image stream becomes its cover); otherwise the first image
    stream makes it an image.
    """

    def __init__(self, probe: RawProbe, streams: Sequence[Stream]) -> None:
        self.probe = probe
        self.streams = list(streams)
        self.first = FirstStreams(self.streams)
        self.format_tags = normalize_tags(probe.format.tags)

    def classify(self) -> Meta:
        if self.first.video is not None:
            return self._video(self.first.video)
        if self.first.audio is not None:
            return self._audio(self.first.audio)
        if self.first.image is not None:
            return self._image(self.first.image)
        raise ClassificationError(
            f"Unknown file, unable to categorize probe data: {dump_json(self.probe.raw)}",
            raw=self.probe.raw,
        )

    # ---- per-kind assembly ----------------------------------------------------
    def _tags_for(self, stream: Stream) -> Dict[str, Any]:
        # container tags win over the stream's own
        return merge_tags(stream.tags, self.format_tags)

    def _checked_duration(self) -> float:
        duration = self.probe.format.duration_ms
        if not duration or duration <= 0:
            raise ClassificationError(
                f"Unsupported format. Invalid format duration: {dump_json(self.probe.raw)}",
                raw=self.probe.raw,
            )
        return duration

    def _video(self, stream: VideoStream) -> VideoMeta:
        duration = self._checked_duration()
        tags = self._tags_for(stream)
        return VideoMeta(
            path=self.probe.path,
            size=self.probe.format.size,
            codec=stream.codec,
            container=self.probe.format.format_name,
            duration=duration,
            framerate=stream.framerate,
            width=stream.width,
            height=stream.height,
            sar=stream.sar,
            dar=stream.dar,
            pixel_format=stream.pixel_format,
            title=tags.get("title"),
            streams=tuple(self.streams),
            tags=tags,
        )

    def _audio(self, stream: AudioStream) -> AudioMeta:
        duration = self._checked_duration()
        tags = self._tags_for(stream)
        cover = self.first.image.as_cover() if self.first.image is not None else None
        return AudioMeta(
            path=self.probe.path,
            size=self.probe.format.size,
            codec=stream.codec,
            container=self.probe.format.format_name,
            channels=stream.channels,
            duration=duration,
            cover=cover,
            language=stream.language or tags.get("language"),
            title=tags.get("title"),
            artist=tags.get("artist"),
            album=tags.get("album"),
            album_artist=tags.get("album_artist"),
            genre=tags.get("genre"),
            track=tags.get("track"),
            tags=tags,
        )

    def _image(self, stream: ImageStream) -> ImageMeta:
        return ImageMeta(
            path=self.probe.path,
            size=self.probe.format.size,
            codec=stream.codec,
            # ffprobe names single images "image2" or similar; the extension is more useful
            container=format_from_extension(self.probe.path),
            width=stream.width,
            height=stream.height,
            sar=stream.sar,
            dar=stream.dar,
            pixel_format=stream.pixel_format,
            tags=self._tags_for(stream),
        )


def classify(probe: RawProbe, streams: Sequence[Stream]) -> Meta:
    return FileClassifier(probe, streams).classify()
