# tests/domain/policies/test_stream_normalizer.py
from __future__ import annotations

import pytest

from mediameta.domain.entities.streams import (
    AudioStream,
    ImageStream,
    SubtitlesStream,
    VideoStream,
)
from mediameta.domain.exceptions import StreamExtractionError
from mediameta.domain.policies.stream_normalizer import (
    StreamNormalizer,
    normalize_codec_name,
    normalize_streams,
)


def _video(**overrides):
    raw = {
        "codec_type": "video",
        "codec_name": "h264",
        "width": 1920,
        "height": 1080,
        "r_frame_rate": "25/1",
        "sample_aspect_ratio": "1:1",
        "display_aspect_ratio": "16:9",
        "disposition": {"default": 1},
    }
    raw.update(overrides)
    return raw


# -------------------------
# codecs & tags
# -------------------------

def test_codec_substitution():
    assert normalize_codec_name("mjpeg") == "jpeg"
    assert normalize_codec_name("h264") == "h264"
    assert normalize_codec_name(None) == "unknown"


def test_tags_lowercased_and_comments_aliased():
    raw = {"codec_type": "audio", "codec_name": "vorbis", "channels": 2,
           "tags": {"COMMENTS": "hello", "Title": "x", "ARTIST": None}}
    (s,) = normalize_streams([raw], duration_sec=10)
    assert s.tags == {"comments": "hello", "comment": "hello", "title": "x"}


def test_existing_comment_not_overwritten():
    raw = {"codec_type": "subtitle", "codec_name": "srt",
           "tags": {"comment": "keep", "comments": "other"}}
    (s,) = normalize_streams([raw], duration_sec=10)
    assert s.tags["comment"] == "keep"


# -------------------------
# dispatch by codec_type
# -------------------------

def test_dispatch_and_order_preserved():
    raws = [
        {"codec_type": "data", "codec_name": "bin_data"},
        {"codec_type": "subtitle", "codec_name": "subrip", "disposition": {"forced": 1}},
        {"codec_type": "audio", "codec_name": "aac", "channels": 6},
        _video(),
        {"codec_type": "attachment", "codec_name": "ttf"},
    ]
    streams = normalize_streams(raws, duration_sec=60)
    assert [type(s) for s in streams] == [SubtitlesStream, AudioStream, VideoStream]
    assert streams[0].disposition.forced is True
    assert streams[1].channels == 6


def test_audio_without_channels_fails():
    raw = {"codec_type": "audio", "codec_name": "aac"}
    with pytest.raises(StreamExtractionError, match="Couldn't extract channels out of audio stream") as ei:
        normalize_streams([raw], duration_sec=10)
    assert ei.value.field_name == "channels"
    assert ei.value.stream == raw


def test_audio_with_zero_channels_is_kept():
    (s,) = normalize_streams([{"codec_type": "audio", "codec_name": "pcm", "channels": 0}], 1)
    assert s.channels == 0


# -------------------------
# video / image streams
# -------------------------

def test_video_stream_fields():
    (s,) = normalize_streams([_video(pix_fmt="yuv420p")], duration_sec=60)
    assert isinstance(s, VideoStream)
    assert s.framerate == 25
    assert s.width == 1920 and s.height == 1080
    assert s.sar == 1
    assert s.dar == 16 / 9
    assert s.pixel_format == "yuv420p"


@pytest.mark.parametrize("rate", [None, "", "0/0", "25", "x/y"])
def test_bad_framerate_fails(rate):
    with pytest.raises(StreamExtractionError) as ei:
        normalize_streams([_video(r_frame_rate=rate)], duration_sec=60)
    assert ei.value.field_name == "framerate"


@pytest.mark.parametrize("width", [None, 0, -5, 12.5, "640", True])
def test_bad_width_fails(width):
    with pytest.raises(StreamExtractionError) as ei:
        normalize_streams([_video(width=width)], duration_sec=60)
    assert ei.value.field_name == "width"


def test_width_checked_before_height():
    with pytest.raises(StreamExtractionError) as ei:
        normalize_streams([_video(width=0, height=0)], duration_sec=60)
    assert ei.value.field_name == "width"


def test_bad_height_fails():
    with pytest.raises(StreamExtractionError, match="Couldn't extract height") as ei:
        normalize_streams([_video(height=None)], duration_sec=60)
    assert ei.value.field_name == "height"


def test_aspect_ratio_defaults():
    raw = _video(width=800, height=450, sample_aspect_ratio="N/A", display_aspect_ratio=None)
    (s,) = normalize_streams([raw], duration_sec=60)
    assert s.sar == 1
    assert s.dar == 800 / 450


def test_unknown_sar_zero_uses_default():
    (s,) = normalize_streams([_video(sample_aspect_ratio="0:1", display_aspect_ratio="0:1")], 60)
    assert s.sar == 1
    assert s.dar == 1920 / 1080


def test_display_aspect_ratio_uses_denominator():
    (s,) = normalize_streams([_video(display_aspect_ratio="60:71")], 60)
    assert s.dar == 60 / 71


def test_single_frame_duration_is_image():
    # one frame at 25 fps lasts 0.04s
    (s,) = normalize_streams([_video(codec_name="mjpeg")], duration_sec=0.04)
    assert isinstance(s, ImageStream)
    assert s.codec == "jpeg"


def test_near_single_frame_within_tolerance_is_image():
    (s,) = normalize_streams([_video()], duration_sec=0.055)
    assert isinstance(s, ImageStream)


def test_zero_duration_is_image():
    (s,) = normalize_streams([_video()], duration_sec=0)
    assert isinstance(s, ImageStream)


def test_two_frames_is_video():
    (s,) = normalize_streams([_video()], duration_sec=0.08)
    assert isinstance(s, VideoStream)


@pytest.mark.parametrize("flag", ["attached_pic", "timed_thumbnails"])
def test_picture_disposition_is_image(flag):
    (s,) = normalize_streams([_video(disposition={flag: 1})], duration_sec=300)
    assert isinstance(s, ImageStream)
    assert getattr(s.disposition, flag) is True


def test_normalizer_is_reusable():
    n = StreamNormalizer(duration_sec=60)
    assert n.normalize_one({"codec_type": "data"}) is None
    assert isinstance(n.normalize_one(_video()), VideoStream)
