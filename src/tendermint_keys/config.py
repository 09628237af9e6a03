"""Configuration loading utilities."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from .logging import configure_logging
from .paths import runtime_config_dir
from .private_key import PrivateKey
from .serializers import PrivateKeyDocument

CONFIG_ENV = "TM_KEYS_CONFIG"

_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}

log = structlog.get_logger(__name__)


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")
    json_output: bool = Field(default=True, alias="json", description="Emit JSON lines")

    model_config = {"populate_by_name": True}

    @field_validator("level")
    @classmethod
    def _validate_level(cls, value: str) -> str:
        level = value.upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level '{value}'")
        return level

    def apply(self) -> None:
        configure_logging(self.level, json=self.json_output)


class SigningConfig(BaseModel):
    private_key: Optional[PrivateKeyDocument] = Field(
        default=None, description="Tagged private key document"
    )

    def load_private_key(self) -> PrivateKey:
        if self.private_key is None:
            raise ValueError("No private key configured under 'signing.private_key'")
        return PrivateKey.from_dict(self.private_key)


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    signing: SigningConfig = Field(default_factory=SigningConfig)


DEFAULT_CONFIG = AppConfig()


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit:
        yield explicit
    env_path = os.getenv(CONFIG_ENV)
    if env_path:
        yield Path(env_path).expanduser()
    yield Path.cwd() / ".tendermint_keys" / "config.yaml"
    yield runtime_config_dir() / "config.yaml"


def load_config(path: Optional[Path] = None) -> AppConfig:
    for candidate in config_search_paths(path):
        if candidate.is_file():
            with candidate.open("r", encoding="utf-8") as handle:
                data = yaml.safe_load(handle) or {}
            try:
                config = AppConfig.model_validate(data)
            except ValidationError as exc:
                fields = sorted({".".join(str(p) for p in err["loc"]) for err in exc.errors()})
                raise ValueError(
                    f"Invalid configuration in {candidate}: {', '.join(fields)}"
                ) from None
            log.info("configuration loaded", path=str(candidate))
            return config
    return DEFAULT_CONFIG.model_copy(deep=True)


__all__ = [
    "AppConfig",
    "CONFIG_ENV",
    "DEFAULT_CONFIG",
    "LoggingConfig",
    "SigningConfig",
    "config_search_paths",
    "load_config",
]
