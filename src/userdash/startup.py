"""Application startup: configuration, logging and context creation."""

import logging
import os
import secrets
from pathlib import Path
from typing import Optional

import yaml

from .context import AppContext
from .models.app_config import AppConfig

logger = logging.getLogger(__name__)

# Configuration paths
PROJECT_ROOT = Path(__file__).parent.parent.parent
CONFIG_PATH = PROJECT_ROOT / "config" / "userdash.yaml"
SESSKEY_PATH = PROJECT_ROOT / ".sesskey"

# Environment variable -> AppConfig field
_ENV_OVERRIDES = {
    "USERDASH_HOST": "host",
    "USERDASH_PORT": "port",
    "USERDASH_LOG_LEVEL": "log_level",
    "USERDASH_MAX_SESSIONS": "max_sessions",
}


def resolve_session_secret(sesskey_path: Path = SESSKEY_PATH) -> str:
    """Resolve session secret from environment or file.

    Priority: USERDASH_SESSION_SECRET env var > .sesskey file > auto-generate.
    """
    secret = os.environ.get("USERDASH_SESSION_SECRET")
    if secret:
        return secret
    if sesskey_path.exists():
        return sesskey_path.read_text().strip()
    secret = secrets.token_hex(32)
    sesskey_path.write_text(secret)
    return secret


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """Load application configuration.

    Priority: USERDASH_* env vars > YAML config file > defaults.
    The file path can be set with USERDASH_CONFIG.
    """
    if config_path is None:
        config_path = Path(os.environ.get("USERDASH_CONFIG", CONFIG_PATH))

    data = {}
    if config_path.exists():
        with open(config_path) as f:
            data = (yaml.safe_load(f) or {}).get("userdash", {})
        logger.debug("Loaded configuration from %s", config_path)

    for env_var, key in _ENV_OVERRIDES.items():
        value = os.environ.get(env_var)
        if value:
            data[key] = value

    return AppConfig.from_dict(data)


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Attach a console handler to the package logger (once)."""
    app_logger = logging.getLogger("userdash")
    app_logger.setLevel(level)
    if not app_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        app_logger.addHandler(handler)
    return app_logger


def get_app_context(config: Optional[AppConfig] = None) -> AppContext:
    """Create an AppContext with a fresh session registry."""
    return AppContext(config=config or load_config())
