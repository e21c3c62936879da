"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:          str  = "mdprep"
    log_level:         str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$", description="stderr log level")
    json_indent:       int  = Field(default=2, ge=0, description="Indent for JSON output; 0 = compact")
    strip_liquid_tags: bool = Field(default=True,  description="Convert liquid tags when preparing a cross-post")
    fail_on_warning:   bool = Field(default=False, description="Exit non-zero when validation reports warnings")


def load_config(overrides: Optional[dict[str, Any]] = None) -> Settings:
    """Load Settings from config.yaml, then MDPREP_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"MDPREP_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
