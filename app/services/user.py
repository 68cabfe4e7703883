"""
User service containing registration, authentication and account management
"""

from typing import Any, Dict

from app.core.errors import Conflict, NotFound, Unauthenticated
from app.core.logger import logger
from app.core.security import PasswordHasher, TokenCodec
from app.models.user import User
from app.repositories.user import UserRepository
from app.schemas.common import ListOptions, Pagination
from app.schemas.user import UserLogin, UserProfileUpdate, UserRegister

INVALID_CREDENTIALS = "Invalid email or password"


class UserService:
    """Service layer for user business logic"""

    def __init__(self, repository: UserRepository, tokens: TokenCodec, hasher: PasswordHasher):
        self.repository = repository
        self.tokens = tokens
        self.hasher = hasher

    def _session(self, user: User) -> Dict[str, Any]:
        return {
            "user": user,
            "token": self.tokens.issue(user.id),
            "refreshToken": self.tokens.issue_refresh(user.id),
        }

    async def register(self, data: UserRegister) -> Dict[str, Any]:
        """Create an account and return it with a fresh token pair"""
        # Best-effort pre-check; the unique index settles concurrent registrations
        if await self.repository.get_by_email(data.email):
            raise Conflict("User already exists with this email")

        user = await self.repository.create(name=data.name, email=data.email, password=data.password)

        logger.info(
            f"Registered user {user.id}",
            user_id=user.id,
            metadata={"event": "user_registered"},
        )
        return self._session(user)

    async def login(self, data: UserLogin) -> Dict[str, Any]:
        """
        Authenticate by email and password.

        Unknown email and wrong password fail with the same message.
        """
        credentials = await self.repository.get_credentials(data.email)
        if credentials is None or not await self.hasher.verify_async(data.password, credentials.password):
            logger.warning("Login failed: invalid credentials", metadata={"event": "login_failed"})
            raise Unauthenticated(INVALID_CREDENTIALS)

        if not credentials.is_active:
            logger.warning(
                "Login refused for deactivated account",
                user_id=credentials.id,
                metadata={"event": "login_deactivated"},
            )
            raise Unauthenticated("Account is deactivated")

        await self.repository.touch_last_login(credentials.id)
        user = await self.repository.get_by_id(credentials.id) or credentials.to_user()

        logger.info("Login successful", user_id=user.id, metadata={"event": "login_succeeded"})
        return self._session(user)

    async def get_profile(self, user_id: str) -> User:
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    async def update_profile(self, user_id: str, data: UserProfileUpdate) -> User:
        """Update name and/or email; any other input is ignored"""
        user = await self.get_profile(user_id)
        changes = data.changes()

        if "email" in changes and changes["email"] != user.email:
            existing = await self.repository.get_by_email(changes["email"])
            if existing is not None and existing.id != user.id:
                raise Conflict("Email already in use")

        updated = await self.repository.update(user_id, changes)
        if updated is None:
            raise NotFound("User not found")

        logger.info(
            "Profile updated",
            user_id=user_id,
            metadata={"event": "profile_updated", "fields": sorted(changes)},
        )
        return updated

    async def list_users(self, options: ListOptions) -> Dict[str, Any]:
        page = await self.repository.list(options)
        return {
            "users": page.items,
            "pagination": Pagination.build(options.page, options.limit, page.total),
        }

    async def delete_user(self, user_id: str, deleted_by: str) -> None:
        """Hard delete a user; their products are left in place"""
        if await self.repository.get_by_id(user_id) is None:
            raise NotFound("User not found")

        if not await self.repository.delete(user_id):
            raise NotFound("User not found")

        logger.info(
            f"Deleted user {user_id}",
            user_id=deleted_by,
            metadata={"event": "user_deleted", "deleted_user_id": user_id},
        )
