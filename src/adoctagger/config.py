"""
Configuration – loads all settings from environment / .env file.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ── Paths ──────────────────────────────────────────────────────────────
    working_root: Path | None = Field(
        None,
        description="Base directory for relative paths (defaults to the install dir)",
    )
    global_index: str = Field("_tag_index.adoc", description="Global tag index, relative to the root")
    tags_folder: str = Field("Tags", description="Per-tag index folder, next to the note")

    # ── File naming ────────────────────────────────────────────────────────
    note_extension: str = Field(".adoc", description="Extension every tagged note must carry")
    tags_extension: str = Field(".tags", description="Extension of a note's companion tags file")

    # ── Rendering ──────────────────────────────────────────────────────────
    default_template: str = Field("sidebar", description="Template wrapped around a note's tags")

    # ── Logging / CLI ──────────────────────────────────────────────────────
    log_level: str = Field("INFO", description="Python logging level")

    @field_validator("working_root", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path | None) -> Path | None:
        if v in (None, ""):
            return None
        return Path(v).expanduser().resolve()


# Singleton – import this everywhere
settings = Settings()
