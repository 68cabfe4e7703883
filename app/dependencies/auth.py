"""
Authentication dependencies for FastAPI
Provides bearer token validation, subject loading and role checks
"""

from typing import Callable, Optional

from fastapi import Depends, Header

from app.core.errors import ErrorResponse, Forbidden, Unauthenticated
from app.core.logger import logger
from app.core.security import TokenCodec, TokenError, TokenExpired, get_token_codec
from app.dependencies.services import get_user_repository
from app.models.user import Role, User
from app.repositories.user import UserRepository

NO_TOKEN = "Access denied. No token provided."


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Return the token from an "Authorization: Bearer <token>" header, if any"""
    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme != "Bearer" or not token.strip():
        return None
    return token.strip()


async def authenticate(token: str, tokens: TokenCodec, users: UserRepository) -> User:
    """
    Verify a token and load its subject.

    Raises:
        Unauthenticated: expired or malformed token, missing or deactivated subject
    """
    try:
        user_id = tokens.verify(token)
    except TokenExpired as e:
        logger.warning("Authentication failed: token expired", metadata={"event": "token_expired"})
        raise Unauthenticated(e.message)
    except TokenError as e:
        logger.warning(f"Authentication failed: {e.message}", metadata={"event": "token_invalid"})
        raise Unauthenticated("Invalid token")

    user = await users.get_by_id(user_id)
    if user is None:
        logger.warning(
            "Authentication failed: subject no longer exists",
            user_id=user_id,
            metadata={"event": "token_subject_missing"},
        )
        raise Unauthenticated("Token is valid but user no longer exists")

    if not user.is_active:
        logger.warning(
            "Authentication failed: account deactivated",
            user_id=user_id,
            metadata={"event": "token_subject_inactive"},
        )
        raise Unauthenticated("User account is deactivated")

    return user


async def get_current_user(
    authorization: Optional[str] = Header(None),
    tokens: TokenCodec = Depends(get_token_codec),
    users: UserRepository = Depends(get_user_repository),
) -> User:
    """
    Dependency to extract and validate current user from JWT token.
    Raises 401 if authentication fails.

    Usage:
        @router.post("/")
        async def create_item(user: User = Depends(get_current_user)):
            ...
    """
    token = extract_bearer_token(authorization)
    if token is None:
        logger.warning("Authentication required: No token provided", metadata={"event": "token_missing"})
        raise Unauthenticated(NO_TOKEN)

    user = await authenticate(token, tokens, users)
    logger.debug("Authentication successful", user_id=user.id)
    return user


async def get_optional_user(
    authorization: Optional[str] = Header(None),
    tokens: TokenCodec = Depends(get_token_codec),
    users: UserRepository = Depends(get_user_repository),
) -> Optional[User]:
    """
    Optional authentication dependency.
    Returns the User for a valid token. Any failure, including a store error
    while loading the subject, means an anonymous caller.
    """
    token = extract_bearer_token(authorization)
    if token is None:
        return None

    try:
        return await authenticate(token, tokens, users)
    except ErrorResponse as e:
        logger.debug(
            f"Optional authentication skipped: {e.message}",
            metadata={"event": "optional_auth_skipped", "error_type": type(e).__name__},
        )
        return None


def require_roles(*roles: Role) -> Callable:
    """
    Dependency factory restricting a route to the given roles.
    Authentication runs first through get_current_user.

    Usage:
        @router.get("/", dependencies=[Depends(require_roles(Role.ADMIN))])
    """

    async def check_role(user: User = Depends(get_current_user)) -> User:
        if not user.has_role(*roles):
            logger.warning(
                "Access denied: insufficient permissions",
                user_id=user.id,
                metadata={"event": "role_forbidden", "required": [role.value for role in roles]},
            )
            raise Forbidden("Access denied. Insufficient permissions.")
        return user

    return check_role


require_admin = require_roles(Role.ADMIN)
