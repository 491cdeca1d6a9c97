"""
Infrastructure services package.
"""

from .auth_svc import AuthConfig, AuthService
from .config_svc import ConfigService

__all__ = [
    "AuthConfig",
    "AuthService",
    "ConfigService",
]
