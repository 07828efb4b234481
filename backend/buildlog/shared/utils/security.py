"""
Security Utilities

Passwords and bearer tokens for builder accounts.

    register / login ──► hash_password / verify_password    (bcrypt via passlib)
                     └─► create_access_token ──► client
    every request    ──► decode_access_token ──► get_current_user
                                                 (api/dependencies/auth.py)

Token Claims:
=============
    user_id   account UUID as a string; every query is scoped to it
    email     echoed by /auth/me
    iat, exp  issue and expiry time, both required on decode

Decode failures surface as ValueError, which the auth dependency turns
into AuthenticationError (401).
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from passlib.context import CryptContext


DEFAULT_TOKEN_LIFETIME = timedelta(days=7)

REQUIRED_CLAIMS = ["exp", "iat"]

pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
)


class SecurityUtils:
    """Password hashing and JWT helpers for the auth service."""

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORDS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash password using bcrypt (salt included in the result)."""
        return pwd_context.hash(password)

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Return True if the plain password matches the bcrypt hash."""
        return pwd_context.verify(plain_password, hashed_password)

    # ═══════════════════════════════════════════════════════════════════════════
    # BEARER TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict,
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Sign a bearer token for a builder.

        Args:
            data: Claims to carry (``user_id`` and ``email``)
            secret_key: SECRET_KEY
            expires_delta: Lifetime (default 7 days)
            algorithm: JWT_ALGORITHM

        Example:
            SecurityUtils.create_access_token(
                {"user_id": str(user.id), "email": user.email},
                settings.SECRET_KEY,
                expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            )
        """
        issued_at = datetime.now(timezone.utc)
        claims = {
            **data,
            "iat": issued_at,
            "exp": issued_at + (expires_delta or DEFAULT_TOKEN_LIFETIME),
        }
        return jwt.encode(claims, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict:
        """
        Verify a bearer token and return its claims.

        Raises:
            ValueError: If the token is expired, forged, malformed or has
                no expiry
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            raise ValueError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {e}") from e
