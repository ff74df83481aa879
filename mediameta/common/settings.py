# mediameta/common/settings.py
from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Accepted values for ffprobe's -v option.
FFPROBE_LOG_LEVELS = {
    "quiet", "panic", "fatal", "error", "warning", "info", "verbose", "debug", "trace",
}


class FFProbeConfig(BaseModel):
    # Executable location; a bare name is looked up on PATH by the OS.
    bin: str = "ffprobe"
    # "error" keeps real failures on stderr, which the adapter treats as fatal.
    log_level: str = "error"

    @field_validator("bin", mode="before")
    @classmethod
    def _strip_bin(cls, v):
        if v is None or not str(v).strip():
            return "ffprobe"
        return str(v).strip()

    @field_validator("log_level", mode="before")
    @classmethod
    def _check_level(cls, v):
        s = str(v or "error").strip().lower()
        if s not in FFPROBE_LOG_LEVELS:
            raise ValueError(f"unknown ffprobe log level: {v!r}")
        return s


class Settings(BaseSettings):
    # -------- App --------
    app_name: str = "mediameta"
    log_level: str = "INFO"

    # FFPROBE_PATH is read at the top level so the plain env var works without
    # the nested "FFPROBE__BIN" form.
    ffprobe_path: str | None = Field(default=None, alias="FFPROBE_PATH")
    ffprobe_log_level: str | None = Field(default=None, alias="FFPROBE_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def ffprobe(self) -> FFProbeConfig:
        data = {}
        if self.ffprobe_path:
            data["bin"] = self.ffprobe_path
        if self.ffprobe_log_level:
            data["log_level"] = self.ffprobe_log_level
        return FFProbeConfig(**data)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """
    Global settings accessor (cached). Use this everywhere you need config:
        from mediameta.common.settings import get_settings
        cfg = get_settings()
    """
    return Settings()  # pydantic_settings will read from .env automatically
