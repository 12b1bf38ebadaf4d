"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
DEFAULT_AUTHOR = "Alexander Foxleigh"


class Settings(BaseModel):
    app_name:       str = "blogpub"
    content_dir:    str = Field(default="content/blog", description="Root directory of markdown content")
    community_dir:  str = Field(default="community", description="Subdirectory (under content_dir) of synced community posts")
    environment:    str = Field(default="production", pattern="^(production|development|test)$",
                                description="Drafts are listed and served outside production")
    site_author:    str = Field(default=DEFAULT_AUTHOR, min_length=1, description="Author used when frontmatter omits one")
    parser_config:  str = Field(default="gfm-like", description="MarkdownIt parser preset name")
    excerpt_length: int = Field(default=160, ge=1, description="Max excerpt length in characters")
    output_dir:     str = Field(default="dist", description="Directory for exported HTML + JSON files")
    log_level:      str = Field(default="INFO", description="Logging level name")

    @property
    def include_drafts(self) -> bool:
        return self.environment != "production"


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then BLOGPUB_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e

    for name in Settings.model_fields:
        if val := os.getenv(f"BLOGPUB_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
