# mediameta/services/probe/ffprobe_adapter.py
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

from mediameta.common.logging import get_logger
from mediameta.common.probe.ffprobe_helpers import build_ffprobe_cmd, parse_duration_ms, run_ffprobe
from mediameta.common.settings import get_settings
from mediameta.domain.dataclasses.probe import RawFormat, RawProbe
from mediameta.domain.exceptions import UnsupportedFormatError
from mediameta.domain.ports.probe import MediaProbePort

logger = get_logger(__name__)


class FFprobeAdapter(MediaProbePort):
    """
    Infrastructure adapter implementing MediaProbePort using `ffprobe`.
    One subprocess per call, no retries, no timeout (bound the process yourself if needed).
    """

    def __init__(self, ffprobe_bin: Optional[str] = None, log_level: Optional[str] = None):
        cfg = get_settings().ffprobe
        # explicit override > FFPROBE_PATH > "ffprobe" on PATH
        self.ffprobe_bin = ffprobe_bin or cfg.bin
        self.log_level = log_level or cfg.log_level

    # ---- Port API -------------------------------------------------------------
    def probe(self, path: Path) -> RawProbe:
        path = Path(path).resolve()

        try:
            size = path.stat().st_size
        except OSError as e:
            raise UnsupportedFormatError(f"Unsupported format. Cannot stat {path}: {e}") from e
        if not path.is_file():
            raise UnsupportedFormatError(f"Unsupported format. Not a file: {path}")

        cmd = build_ffprobe_cmd(self.ffprobe_bin, path, log_level=self.log_level)
        try:
            proc = run_ffprobe(cmd)
        except OSError as e:
            raise UnsupportedFormatError(
                f"Unsupported format. Failed to execute {self.ffprobe_bin}: {e}",
                stderr=str(e),
            ) from e

        if proc.stderr and proc.stderr.strip():
            raise UnsupportedFormatError(
                f"Unsupported format. ffprobe reported: {proc.stderr.strip()}",
                stderr=proc.stderr,
                returncode=proc.returncode,
            )
        if proc.returncode != 0:
            raise UnsupportedFormatError(
                f"Unsupported format. ffprobe exited with code {proc.returncode}",
                stderr=proc.stderr,
                returncode=proc.returncode,
            )

        try:
            data = json.loads(proc.stdout or "")
        except json.JSONDecodeError as e:
            raise UnsupportedFormatError(
                f"Unsupported format. ffprobe produced invalid JSON: {e}\n\n{proc.stdout}",
                returncode=proc.returncode,
            ) from e

        return self._to_raw_probe(str(path), size, data, proc.stdout)

    # ---- Parsing helpers ------------------------------------------------------
    @staticmethod
    def _to_raw_probe(path: str, size: int, data: Any, stdout: str = "") -> RawProbe:
        # Loose validity check
        if (
            not isinstance(data, dict)
            or not isinstance(data.get("streams"), list)
            or not isinstance(data.get("format"), dict)
            or not all(isinstance(s, dict) for s in data["streams"])
        ):
            raise UnsupportedFormatError(f"Unsupported format. \n\nInvalid probe output: {stdout}")

        fmt: Dict[str, Any] = dict(data["format"])
        duration_ms = parse_duration_ms(fmt.get("duration"))
        # size from ffprobe can lag behind the file; trust the stat
        fmt["size"] = size
        fmt["duration"] = duration_ms
        raw = {**data, "format": fmt}

        return RawProbe(
            path=path,
            streams=list(data["streams"]),
            format=RawFormat(
                format_name=fmt.get("format_name"),
                duration_ms=duration_ms,
                size=size,
                tags=fmt.get("tags") if isinstance(fmt.get("tags"), dict) else {},
            ),
            raw=raw,
        )
