from __future__ import annotations
from pathlib import Path
from typing import Protocol
from mediameta.domain.dataclasses.probe import RawProbe

class MediaProbePort(Protocol):
    def probe(self, path: Path) -> RawProbe: ...
