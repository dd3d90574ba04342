"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "FILEINSPECT_"


class Settings(BaseModel):
    include_hidden:  bool = Field(default=True, description="Walk dot-prefixed files and directories")
    ignore_files:    list[str] = Field(default=[".gitignore", ".ignore"], description="Ignore-file names honored by walk")
    sniff_bytes:     int  = Field(default=8000,  ge=1, description="Bytes read when classifying unknown extensions")
    hash_chunk_size: int  = Field(default=65536, ge=1, description="Read size when hashing files")
    mime_types:      dict[str, str] = Field(default={}, description="Extra extension -> media type entries")
    log_level:       str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def _env_value(name: str, raw: str) -> Any:
    """Comma-split list fields; pydantic coerces the rest."""
    if Settings.model_fields[name].annotation == list[str]:
        return [v.strip() for v in raw.split(",") if v.strip()]
    return raw


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then FILEINSPECT_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = _env_value(name, val)

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
