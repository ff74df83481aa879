# mediameta/common/probe/ffprobe_helpers.py
from __future__ import annotations

import json
import math
import re
import shlex
import subprocess
from pathlib import Path
from typing import Any, List, Optional

from mediameta.common.logging import get_logger

logger = get_logger(__name__)

# <numerator>[(":"|"/")<denominator>], each a non-negative decimal
_ASPECT_RATIO_RE = re.compile(r"^(?P<numerator>\d+(?:\.\d+)?)(?:[:/](?P<denominator>\d+(?:\.\d+)?))?$")


def build_ffprobe_cmd(ffprobe_bin: str, input_path: str | Path, log_level: str = "error") -> List[str]:
    """
    Build the ffprobe argument list that emits the JSON we parse.
    Passed to subprocess as a list, never through a shell.
    """
    return [
        str(ffprobe_bin),
        "-hide_banner",
        "-v", log_level,
        "-show_streams",
        "-show_format",
        "-print_format", "json",
        "--",  # Stop option parsing in case of weird filenames
        str(input_path),
    ]


def run_ffprobe(cmd: List[str]) -> subprocess.CompletedProcess:
    """
    Execute ffprobe and return the completed process; the caller decides what counts as failure.
    Raises OSError if the executable cannot be launched.
    """
    logger.debug("ffprobe cmd: %s", " ".join(shlex.quote(p) for p in cmd))
    return subprocess.run(cmd, capture_output=True, text=True, errors="replace", check=False)


def dump_json(data: Any) -> str:
    """Pretty JSON used inside error messages."""
    return json.dumps(data, indent=2, default=str)


def parse_duration_ms(value: Any) -> float:
    """
    ffprobe reports format duration as a seconds string ("9.06449").
    Returns milliseconds; anything unparseable counts as 0.
    """
    try:
        seconds = float(value or 0)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(seconds):
        return 0.0
    return seconds * 1000


def parse_rate(rate: Optional[str]) -> Optional[float]:
    """
    "num/den" frame-rate string -> float. None when it is not a usable positive rate.
    """
    if not rate or "/" not in str(rate):
        return None
    try:
        n, d = str(rate).split("/", 1)
        n, d = float(n), float(d)
    except ValueError:
        return None
    if not n or not d:
        return None
    fps = n / d
    if not math.isfinite(fps) or fps <= 0:
        return None
    return fps


def parse_aspect_ratio(value: Any) -> Optional[float]:
    """
    "2:1" -> 2.0
    "2/1" -> 2.0
    "2"   -> 2.0
    Returns None for anything outside that grammar or a non-finite result.
    """
    if value is None:
        return None
    m = _ASPECT_RATIO_RE.match(str(value).strip())
    if not m:
        return None
    numerator = float(m.group("numerator"))
    if not math.isfinite(numerator):
        return None
    denominator = m.group("denominator")
    if denominator is None:
        return numerator
    d = float(denominator)
    if d == 0:
        return None
    ratio = numerator / d
    return ratio if math.isfinite(ratio) else None
