"""
Authentication Service

Business logic for user registration, login and identity lookup.

Every other service receives the authenticated user id from the request's
bearer token; nothing here keeps process-wide session state.

Usage:
======
    from buildlog.shared.services.auth_service import AuthService

    service = AuthService(db)
    user, token, expires = await service.register_user(email, password)
"""

from datetime import timedelta
from typing import Tuple
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from buildlog.config.settings import settings
from buildlog.shared.core.exceptions import (
    AuthenticationError,
    DuplicateResourceError,
)
from buildlog.shared.core.logging import get_logger
from buildlog.shared.models.user import User
from buildlog.shared.repositories.user_repository import UserRepository
from buildlog.shared.utils.security import SecurityUtils

logger = get_logger(__name__)


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with email/password
    - User authentication (login)
    - JWT token generation

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session
        self.repo = UserRepository(session)

    async def register_user(
        self,
        email: str,
        password: str,
    ) -> Tuple[User, str, int]:
        """
        Register a new user.

        Args:
            email: User's email address (stored lowercased)
            password: Plain text password (will be hashed)

        Returns:
            Tuple of (user, access_token, expires_in_seconds)

        Raises:
            DuplicateResourceError: If email already registered
        """
        email = email.strip().lower()
        if await self.repo.email_exists(email):
            raise DuplicateResourceError("Email already registered", details={"field": "email"})

        user = await self.repo.create(
            email=email,
            password_hash=SecurityUtils.hash_password(password),
        )
        logger.info("User registered", user_id=str(user.id))

        access_token, expires_in = self._issue_token(user)
        return user, access_token, expires_in

    async def login_user(
        self,
        email: str,
        password: str,
    ) -> Tuple[User, str, int]:
        """
        Authenticate user and generate token.

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = await self.repo.get_by_email(email.strip().lower())
        if not user or not SecurityUtils.verify_password(password, user.password_hash):
            logger.info("Login rejected", email=email)
            raise AuthenticationError("Invalid email or password")

        access_token, expires_in = self._issue_token(user)
        return user, access_token, expires_in

    async def get_user(self, user_id: UUID) -> User:
        """
        Load the account behind a token.

        Raises:
            AuthenticationError: If the user no longer exists
        """
        user = await self.repo.get(user_id)
        if not user:
            raise AuthenticationError("User no longer exists")
        return user

    @staticmethod
    def _issue_token(user: User) -> Tuple[str, int]:
        """Create a bearer token carrying the user id and email."""
        access_token = SecurityUtils.create_access_token(
            data={"user_id": str(user.id), "email": user.email},
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )
        return access_token, settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
