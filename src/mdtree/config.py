"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str  = "mdtree"
    parser_config: str  = Field(default="gfm-like", description="MarkdownIt preset name")
    breaks:        bool = Field(default=True, description="Treat soft line breaks as hard breaks")
    output_dir:    str  = Field(default="dist", description="Directory for converted JSON/HTML files")
    output_format: str  = Field(default="json", pattern="^(json|html)$", description="json or html")
    indent:        int  = Field(default=2, ge=0, description="JSON indentation for tree output")
    log_level:     str  = Field(default="WARNING", description="Log level for CLI commands")


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then MDTREE_<FIELD> env vars, then non-None CLI overrides.

    Env values arrive as strings and are coerced by pydantic, so
    ``MDTREE_BREAKS=false`` turns soft breaks back into plain newlines and
    ``MDTREE_INDENT=0`` prints tree JSON on one line. ``parser_config`` names
    the markdown-it preset shared by tree and HTML output.
    """
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"MDTREE_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
