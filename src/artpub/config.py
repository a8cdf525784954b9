"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    title:            str  = Field(default="Vector vs SIMD Intructions", description="Page <title>")
    image_base_url:   str  = Field(default="https://miro.medium.com/v2/format:webp/", description="Prefix for IMG src")
    image_ref_prefix: str  = Field(default="ImageMetadata:", description="Stripped from metadata image refs")
    archive_prefix:   str  = Field(default="https://web.archive.org/web/", description="Archive wrapper stripped from hrefs")
    strict_nesting:   bool = Field(default=False, description="Reject crossing markup ranges")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then ARTPUB_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"ARTPUB_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return Settings(**data)
    except ValidationError as e:
        raise ValueError(f"Invalid settings: {e}") from e
