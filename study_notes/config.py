from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field


ROOT_DIR = Path(__file__).resolve().parents[1]


class InferenceSettings(BaseModel):
    url: str = "http://localhost:11434/api/chat"
    model: str = "llama3:latest"


class ServerSettings(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])


class ClientSettings(BaseModel):
    gateway_url: str = "http://127.0.0.1:8000/api/summarize"


class LoggingSettings(BaseModel):
    level: str = "INFO"
    log_dir: Optional[str] = None


class Settings(BaseModel):
    inference: InferenceSettings = Field(default_factory=InferenceSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)
    client: ClientSettings = Field(default_factory=ClientSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


# (env var, section, key)
_ENV_OVERRIDES = (
    ("STUDY_NOTES_INFERENCE_URL", "inference", "url"),
    ("STUDY_NOTES_MODEL", "inference", "model"),
    ("STUDY_NOTES_GATEWAY_URL", "client", "gateway_url"),
    ("STUDY_NOTES_LOG_LEVEL", "logging", "level"),
)


def _apply_env_overrides(raw: dict[str, Any]) -> dict[str, Any]:
    for env, section, key in _ENV_OVERRIDES:
        value = os.environ.get(env)
        if value:
            raw.setdefault(section, {})[key] = value

    origins = os.environ.get("CORS_ORIGINS")
    if origins:
        raw.setdefault("server", {})["cors_origins"] = [o.strip() for o in origins.split(",") if o.strip()]
    return raw


def load_settings(config_path: Optional[str | Path] = None) -> Settings:
    """Load settings from YAML, then let the environment override them.

    The file is looked up from ``config_path``, then ``STUDY_NOTES_CONFIG``,
    then ``config.yaml`` at the repository root. A missing file yields defaults.
    """
    load_dotenv(ROOT_DIR / ".env")

    config_path = config_path or os.environ.get("STUDY_NOTES_CONFIG")
    path = Path(config_path) if config_path else ROOT_DIR / "config.yaml"

    raw: Any = {}
    if path.exists():
        raw = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return Settings.model_validate(_apply_env_overrides(dict(raw)))
