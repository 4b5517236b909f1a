"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "POSTMATTER_"


class Settings(BaseModel):
    extensions:    list[str] = Field(default=[".md", ".markdown", ".mdx"], description="Content file suffixes")
    on_error:      str = Field(default="abort", pattern="^(skip|abort)$", description="Policy for malformed documents")
    output_dir:    str = Field(default="dist",       description="Directory for exported sidecar JSON")
    parser_config: str = Field(default="gfm-like",   description="MarkdownIt preset used to locate directives")
    log_level:     str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")

    @field_validator("extensions", mode="before")
    @classmethod
    def _split_extensions(cls, v: Any) -> Any:
        """Accept a comma-separated string (env var form) and normalize to '.ext'."""
        if isinstance(v, str):
            v = [e for e in v.split(",") if e.strip()]
        if isinstance(v, list):
            v = [e.strip() if e.strip().startswith(".") else f".{e.strip()}" for e in v]
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_level(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then POSTMATTER_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"{ENV_PREFIX}{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
