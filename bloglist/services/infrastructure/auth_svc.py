"""Authentication Service.

Centralized service for credentials and bearer tokens:
- Password hashing (bcrypt) for registration and login
- Token issuance and verification (signed JWT, HS256)
- Resolving a bearer token to the stored user

Architecture Notes:
- This service uses dependency injection: Database must be provided at construction time.
- Interfaces must NOT construct this service directly.
- Services are instantiated once during app wiring (see Application.start() in app.py).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

import bcrypt
import jwt

from bloglist.helpers.dto.user_dto import LoginResult, TokenClaims, UserRecord
from bloglist.helpers.exceptions import AuthenticationError
from bloglist.helpers.time_helper import now_s

logger = logging.getLogger(__name__)
if TYPE_CHECKING:
    from bloglist.persistence.db import Database

TOKEN_ALGORITHM = "HS256"


@dataclass
class AuthConfig:
    """Configuration for AuthService."""

    secret: str
    token_ttl_seconds: int = 3600
    bcrypt_rounds: int = 12


class AuthService:
    """Service for password hashing, login and bearer token verification.

    Use the singleton instance from Application.services["auth"].
    """

    def __init__(self, db: Database, cfg: AuthConfig) -> None:
        """Initialize the auth service with injected dependencies.

        Args:
            db: Database instance for user lookups
            cfg: Secret, token lifetime and hashing cost

        """
        self._db = db
        self.cfg = cfg

    def hash_password(self, password: str) -> str:
        """Hash a password using bcrypt.

        Args:
            password: Plaintext password

        Returns:
            Bcrypt password hash

        """
        salt = bcrypt.gensalt(rounds=self.cfg.bcrypt_rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def verify_password(password: str, password_hash: str) -> bool:
        """Verify a password against a stored bcrypt hash.

        Returns:
            True if password matches, False otherwise (including malformed hashes)

        """
        try:
            return bool(bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8")))
        except ValueError:
            return False

    def issue_token(self, user: UserRecord) -> str:
        """Sign a token identifying the user.

        Returns:
            Encoded JWT string

        """
        issued_at = now_s()
        payload = {
            "username": user.username,
            "id": user.id,
            "iat": issued_at,
            "exp": issued_at + self.cfg.token_ttl_seconds,
        }
        return jwt.encode(payload, self.cfg.secret, algorithm=TOKEN_ALGORITHM)

    def verify_token(self, token: str) -> TokenClaims:
        """Decode and verify a token.

        Raises:
            AuthenticationError: If the token is malformed, badly signed, expired
                or lacks the user claims

        """
        try:
            payload = jwt.decode(token, self.cfg.secret, algorithms=[TOKEN_ALGORITHM])
        except jwt.ExpiredSignatureError as e:
            raise AuthenticationError("token expired") from e
        except jwt.PyJWTError as e:
            raise AuthenticationError("token missing or invalid") from e

        user_id = payload.get("id")
        username = payload.get("username")
        if not isinstance(user_id, str) or not isinstance(username, str):
            raise AuthenticationError("token missing or invalid")
        return TokenClaims(id=user_id, username=username)

    def authenticate(self, token: str) -> UserRecord:
        """Resolve a bearer token to the stored user it identifies.

        Raises:
            AuthenticationError: If the token is invalid or its user no longer exists

        """
        claims = self.verify_token(token)
        doc = self._db.users.get_user(claims.id)
        if doc is None:
            logger.warning(f"[AuthService] Token for unknown user {claims.id}")
            raise AuthenticationError("token missing or invalid")
        return UserRecord.from_doc(doc)

    def login(self, username: str, password: str) -> LoginResult:
        """Check credentials and issue a token.

        Raises:
            AuthenticationError: On unknown username or wrong password (same message for both)

        """
        doc = self._db.users.get_user_by_username(username)
        if doc is None or not self.verify_password(password, doc.get("password_hash", "")):
            logger.warning("[AuthService] Failed login attempt")
            raise AuthenticationError("invalid username or password")

        user = UserRecord.from_doc(doc)
        logger.info(f"[AuthService] User '{user.username}' logged in")
        return LoginResult(token=self.issue_token(user), username=user.username, name=user.name)
