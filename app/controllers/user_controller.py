"""
User controller
Handles HTTP-facing logic for user operations
"""

from app.core.logger import logger
from app.models.user import User
from app.schemas.common import ListOptions, success_envelope
from app.schemas.user import UserLogin, UserProfileUpdate, UserRegister
from app.services.user import UserService


async def register_user(service: UserService, data: UserRegister) -> dict:
    result = await service.register(data)
    return success_envelope("User registered successfully", result)


async def login_user(service: UserService, data: UserLogin) -> dict:
    result = await service.login(data)
    return success_envelope("Login successful", result)


async def logout_user(user: User) -> dict:
    # Tokens are stateless; the client discards its copy
    logger.info("Logout", user_id=user.id, metadata={"event": "logout"})
    return success_envelope("Logout successful.")


async def get_user_profile(service: UserService, user: User) -> dict:
    profile = await service.get_profile(user.id)
    return success_envelope("User profile retrieved successfully", {"user": profile})


async def update_user_profile(service: UserService, user: User, data: UserProfileUpdate) -> dict:
    updated = await service.update_profile(user.id, data)
    return success_envelope("Profile updated successfully", {"user": updated})


async def get_all_users(service: UserService, options: ListOptions) -> dict:
    result = await service.list_users(options)
    return success_envelope("Users retrieved successfully", result)


async def delete_user(service: UserService, user_id: str, admin: User) -> dict:
    await service.delete_user(user_id, deleted_by=admin.id)
    return success_envelope("User deleted successfully")
