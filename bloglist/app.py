"""
Bloglist wiring: settings, the ArangoDB connection and the service registry.

start() opens the database, makes sure the collections exist and registers
five services by name:
    config  ConfigService
    auth    AuthService
    blogs   BlogService
    users   UserService
    stats   StatsService

Interfaces look services up through `application` (see
interfaces/api/web/dependencies.py) instead of constructing them.
"""

from __future__ import annotations

import logging
from typing import Any

from bloglist.components.platform.arango_bootstrap_comp import ensure_schema
from bloglist.persistence.db import Database
from bloglist.services.domain.blog_svc import BlogService
from bloglist.services.domain.stats_svc import StatsService
from bloglist.services.domain.user_svc import UserService
from bloglist.services.infrastructure.auth_svc import AuthConfig, AuthService
from bloglist.services.infrastructure.config_svc import ConfigService

logger = logging.getLogger(__name__)


class Application:
    """
    Service registry and lifecycle owner for one Bloglist process.

    Settings are read once in __init__ and exposed as attributes
    (arango_hosts, api_port, auth_config, ...); the ConfigService itself is
    registered as "config" for code that needs the raw values.
    """

    def __init__(self, config_service: ConfigService | None = None) -> None:
        """
        Load configuration. The database connection and services are created in start().
        """
        self._config_service = config_service or ConfigService()
        self._config = self._config_service.get_config()

        self.arango_hosts: str = str(self._config["arango_hosts"])
        self.arango_username: str = str(self._config["arango_username"])
        self.arango_password: str = str(self._config["arango_password"])
        self.arango_db: str = str(self._config["arango_db"])
        self.api_host: str = str(self._config["host"])
        self.api_port: int = int(self._config["port"])
        self.log_level: str = str(self._config["log_level"])
        self.auth_config = AuthConfig(
            secret=str(self._config["secret"]),
            token_ttl_seconds=int(self._config["token_ttl_seconds"]),
            bcrypt_rounds=int(self._config["bcrypt_rounds"]),
        )

        self.db: Database | None = None
        self.services: dict[str, Any] = {}
        self._running = False

    def register_service(self, name: str, service: Any) -> None:
        """
        Make a service available under ``name``.

        Args:
            name: Service name for lookup
            service: Service instance
        """
        self.services[name] = service

    def get_service(self, name: str) -> Any:
        """
        Look up a registered service.

        Raises:
            KeyError: If service not found
        """
        if name not in self.services:
            raise KeyError(f"Service '{name}' not found (registered: {', '.join(self.services) or 'none'})")
        return self.services[name]

    def start(self, db: Database | None = None) -> None:
        """
        Connect to the database, ensure the schema and register all services.

        Args:
            db: Pre-built Database to use instead of connecting (tests)
        """
        if self._running:
            logger.warning("[Application] Already running")
            return

        logger.info(f"[Application] Connecting to ArangoDB at {self.arango_hosts} (db={self.arango_db})")
        if db is None:
            db = Database(
                hosts=self.arango_hosts,
                username=self.arango_username,
                password=self.arango_password,
                db_name=self.arango_db,
            )
            ensure_schema(db.db)
        self.db = db

        auth_service = AuthService(db, self.auth_config)
        self.register_service("config", self._config_service)
        self.register_service("auth", auth_service)
        self.register_service("blogs", BlogService(db))
        self.register_service("users", UserService(db, auth_service))
        self.register_service("stats", StatsService(db))

        self._running = True
        logger.info(f"[Application] Started with services: {', '.join(self.services)}")

    def stop(self) -> None:
        """Unregister services and close the database connection."""
        if not self._running:
            return
        logger.info("[Application] Shutting down...")
        self.services.clear()
        if self.db is not None:
            self.db.close()
            self.db = None
        self._running = False
        logger.info("[Application] Shutdown complete")

    def is_running(self) -> bool:
        """True between start() and stop()."""
        return self._running


# ----------------------------------------------------------------------
#  Global application instance
# ----------------------------------------------------------------------
application = Application()
