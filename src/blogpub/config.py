"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"


class Settings(BaseModel):
    app_name:      str = "blogpub"
    blog_dir:      str = Field(default="blog", description="Directory containing source documents")
    output_dir:    Optional[str] = Field(default=None, description="Directory for generated pages; defaults to blog_dir")
    extension:     str = Field(default=".md", pattern=r"^\.\w+$", description="Source document file extension")
    excerpt_limit: int = Field(default=220, ge=1, description="Max excerpt length in characters")
    template_dir:  Optional[str] = Field(default=None, description="Directory overriding the bundled page templates")

    @property
    def target_dir(self) -> Path:
        """Resolved output directory (blog_dir when output_dir is unset)."""
        return Path(self.output_dir or self.blog_dir)


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then BLOGPUB_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if val := os.getenv(f"BLOGPUB_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
