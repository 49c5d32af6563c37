"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


CONFIG_FILE = "config.yaml"
CONFIG_ENV = "DOCNAV_CONFIG"
PATH_FIELDS = ("store_path", "html_dir", "output_dir")


class Settings(BaseModel):
    app_name:   str = "docnav"
    store_path: str = Field(default="build/metas.json", description="Metadata store dump (JSON or YAML)")
    html_dir:   str = Field(default="build/html",       description="Directory of rendered <id>.html pages")
    output_dir: str = Field(default="build/json",       description="Directory for per-document records")
    output_ext: str = Field(default="fjson", pattern="^[a-z]+$", description="Record file extension")
    root_doc:   str = Field(default="index",            description="Id of the root index document")
    log_level:  str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR)$")


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read a config file; relative paths in it are taken relative to the file's directory."""
    try:
        data = yaml.safe_load(path.read_text()) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid {path.name}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"Invalid {path.name}: expected a mapping, got {type(data).__name__}")

    for name in PATH_FIELDS:
        if data.get(name) is not None and not Path(str(data[name])).is_absolute():
            data[name] = str(path.parent / str(data[name]))
    return data


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from the config file, then DOCNAV_<FIELD> env vars, then non-None CLI overrides.

    The config file is DOCNAV_CONFIG when set (it must exist), else config.yaml
    in the working directory when present.
    """
    data: dict[str, Any] = {}
    config_path = os.getenv(CONFIG_ENV)
    if config_path:
        if not Path(config_path).is_file():
            raise ValueError(f"Config file {config_path} (from {CONFIG_ENV}) does not exist")
        data = _read_config_file(Path(config_path))
    elif Path(CONFIG_FILE).exists():
        data = _read_config_file(Path(CONFIG_FILE))

    for name in Settings.model_fields:
        if val := os.getenv(f"DOCNAV_{name.upper()}"):
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
