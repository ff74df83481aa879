# mediameta/services/probe/service.py
from __future__ import annotations

from pathlib import Path
from typing import Optional

from mediameta.common.logging import get_logger
from mediameta.domain.entities.metadata import Meta
from mediameta.domain.exceptions import ProbeError, UnsupportedFormatError
from mediameta.domain.policies.classifier import classify
from mediameta.domain.policies.stream_normalizer import normalize_streams
from mediameta.domain.ports.probe import MediaProbePort
from mediameta.services.probe.ffprobe_adapter import FFprobeAdapter

logger = get_logger(__name__)


def ffprobe(
    path: str | Path,
    *,
    ffprobe_path: Optional[str] = None,
    probe: Optional[MediaProbePort] = None,
) -> Meta:
    """
    Probe one file and return its ImageMeta, AudioMeta or VideoMeta.

    `ffprobe_path` overrides FFPROBE_PATH; `probe` replaces the ffprobe adapter entirely.
    Raises a ProbeError subclass on any failure; nothing partial is returned.
    """
    if path is None or (isinstance(path, str) and not path.strip()):
        e = UnsupportedFormatError("Unsupported format. No path provided.")
        logger.warning("probe failed: %s", e.message)
        raise e
    file_path = Path(path).resolve()
    adapter = probe if probe is not None else FFprobeAdapter(ffprobe_bin=ffprobe_path)

    try:
        raw = adapter.probe(file_path)
        streams = normalize_streams(raw.streams, raw.format.duration_sec)
        meta = classify(raw, streams)
    except ProbeError as e:
        logger.warning("probe failed for %s: %s", file_path, (e.message.splitlines() or [""])[0])
        raise

    logger.debug("probed %s as %s (%d streams)", file_path, meta.kind, len(streams))
    return meta
