#!/usr/bin/env python3
# ======================================================================
#  Bloglist settings
#  - Layered: defaults < YAML files < caller overrides < BLOGLIST_* env
#  - Composed once, then served from memory until reload()
# ======================================================================

from __future__ import annotations

import logging
import os
import secrets
from typing import Any

import yaml

from bloglist.__version__ import __version__

ENV_PREFIX = "BLOGLIST_"
CONFIG_PATH_ENV = f"{ENV_PREFIX}CONFIG_PATH"
SYSTEM_CONFIG_PATH = "/etc/bloglist/config.yaml"
LOCAL_CONFIG_PATH = os.path.join("config", "config.yaml")

logger = logging.getLogger(__name__)


class ConfigService:
    """
    Settings for the database connection, token signing and the HTTP server.

    Registered in the Application container as "config".
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """
        Args:
            overrides: Settings that win over YAML files but lose to environment variables
        """
        self._overrides = overrides or {}
        self._settings: dict[str, Any] | None = None

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """Return the composed settings, composing them on first use."""
        if force_reload or self._settings is None:
            self._settings = self._compose()
        return self._settings

    def get(self, key_path: str, default: Any = None) -> Any:
        """
        Look up one setting; nested keys are separated by dots.

        Example:
            >>> ConfigService().get("port")
            3003
            >>> ConfigService().get("logging.level", "INFO")
            'INFO'
        """
        value: Any = self.get_config()
        for key in key_path.split("."):
            if not isinstance(value, dict) or key not in value:
                return default
            value = value[key]
        return value

    def reload(self) -> dict[str, Any]:
        """Discard the cached settings and compose them again."""
        logger.info("[ConfigService] Reloading settings")
        return self.get_config(force_reload=True)

    # ----------------------------------------------------------------------
    # Composition
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        settings = self._defaults()

        yaml_paths = [SYSTEM_CONFIG_PATH, os.path.join(os.getcwd(), LOCAL_CONFIG_PATH)]
        if os.getenv(CONFIG_PATH_ENV):
            yaml_paths.append(os.environ[CONFIG_PATH_ENV])
        for path in yaml_paths:
            self._merge_into(settings, self._read_yaml(path))

        self._merge_into(settings, self._overrides)
        self._merge_into(settings, self._from_environment())

        if not settings.get("secret"):
            settings["secret"] = secrets.token_urlsafe(32)
            logger.warning(
                "[ConfigService] BLOGLIST_SECRET is not set; signing tokens with a random secret. "
                "Tokens will stop working after a restart."
            )

        logger.debug(f"[ConfigService] Composed settings: {sorted(settings)}")
        return settings

    @staticmethod
    def _defaults() -> dict[str, Any]:
        return {
            # ArangoDB
            "arango_hosts": "http://localhost:8529",
            "arango_username": "root",
            "arango_password": "",
            "arango_db": "bloglist",
            # Tokens and passwords
            "secret": None,
            "token_ttl_seconds": 3600,
            "bcrypt_rounds": 12,
            # HTTP server
            "host": "0.0.0.0",
            "port": 3003,
            "log_level": "INFO",
            "version": __version__,
        }

    def _merge_into(self, target: dict[str, Any], source: dict[str, Any]) -> None:
        """Merge source into target in place; nested dicts merge key by key."""
        for key, value in source.items():
            if isinstance(value, dict) and isinstance(target.get(key), dict):
                self._merge_into(target[key], value)
            elif isinstance(value, dict):
                target[key] = dict(value)
            else:
                target[key] = value

    @staticmethod
    def _read_yaml(path: str) -> dict[str, Any]:
        """Settings from one YAML file; a missing or unusable file contributes nothing."""
        if not os.path.isfile(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"[ConfigService] Skipping {path}: {e}")
            return {}
        if data is None:
            return {}
        if not isinstance(data, dict):
            logger.warning(f"[ConfigService] Skipping {path}: expected a mapping at the top level")
            return {}
        return data

    @staticmethod
    def _from_environment() -> dict[str, Any]:
        """
        BLOGLIST_<KEY>=value pairs, e.g. BLOGLIST_PORT=8080 or
        BLOGLIST_ARANGO_HOSTS=http://arangodb:8529. "true"/"false" and
        digit-only values are converted.
        """
        settings: dict[str, Any] = {}
        for name, raw in os.environ.items():
            if not name.startswith(ENV_PREFIX) or name == CONFIG_PATH_ENV:
                continue
            key = name[len(ENV_PREFIX) :].lower()
            if not key:
                continue
            if raw.lower() in ("true", "false"):
                settings[key] = raw.lower() == "true"
            elif raw.isdigit():
                settings[key] = int(raw)
            else:
                settings[key] = raw
        return settings
