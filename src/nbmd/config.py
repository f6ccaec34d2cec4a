"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from nbmd.core.models import ParseOptions


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:         str  = "nbmd"
    sanitize:         bool = Field(default=True,    description="Clean rendered HTML against the allow-list")
    links_in_new_tab: bool = Field(default=True,    description="Open rendered links in a new tab")
    class_prefix:     str  = Field(default="nb-md", pattern=r"^[A-Za-z][A-Za-z0-9-]*$",
                                   description="CSS class prefix for generated elements")
    gfm:              bool = Field(default=True,    description="Enable pipe tables")
    math:             bool = Field(default=False,   description="Accepted, no math rendering")
    unique_ids:       bool = Field(default=False,   description="Disambiguate repeated heading ids")
    output_dir:       str  = Field(default="dist",  description="Directory for rendered HTML + JSON files")
    log_level:        str  = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$",
                                   description="Logging level for the CLI")

    def parse_options(self) -> ParseOptions:
        """Build the per-call parser options from these settings."""
        return ParseOptions(**self.model_dump(include=set(ParseOptions.model_fields)))


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then NBMD_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"NBMD_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
