"""
Configuration loader for the headless client.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from tebex_headless.clients.http import BASE_URL

logger = logging.getLogger(__name__)

ENV_WEBSTORE_IDENTIFIER = "TEBEX_WEBSTORE_IDENTIFIER"
ENV_PRIVATE_KEY = "TEBEX_PRIVATE_KEY"
ENV_BASE_URL = "TEBEX_BASE_URL"
ENV_TIMEOUT_SECONDS = "TEBEX_TIMEOUT_SECONDS"


class HeadlessConfig(BaseModel):
    """Webstore credentials and transport settings"""

    webstore_identifier: Optional[str] = None
    private_key: Optional[str] = None
    base_url: str = BASE_URL
    timeout_seconds: float = Field(default=20.0, gt=0)

    @property
    def authenticated(self) -> bool:
        return bool(self.webstore_identifier and self.private_key)


def load_headless_config(config_path: Optional[Path] = None) -> HeadlessConfig:
    """
    Load and validate headless client configuration from a YAML file

    Args:
        config_path: Path to config file. Defaults to config/headless_config.yml

    Returns:
        Validated HeadlessConfig object

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = Path.cwd() / "config" / "headless_config.yml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Headless config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = HeadlessConfig(**data)
        logger.info("Successfully loaded headless config from %s", config_path)
        return cfg
    except ValidationError as e:
        logger.error("Headless config validation failed: %s", e)
        raise


def headless_config_from_env(environ: Optional[Mapping[str, str]] = None) -> HeadlessConfig:
    """Build a config from TEBEX_* environment variables; unset ones keep their defaults."""
    env = os.environ if environ is None else environ
    data = {
        "webstore_identifier": env.get(ENV_WEBSTORE_IDENTIFIER) or None,
        "private_key": env.get(ENV_PRIVATE_KEY) or None,
    }
    if env.get(ENV_BASE_URL):
        data["base_url"] = env[ENV_BASE_URL]
    if env.get(ENV_TIMEOUT_SECONDS):
        data["timeout_seconds"] = env[ENV_TIMEOUT_SECONDS]
    return HeadlessConfig(**data)
