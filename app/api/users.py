"""
User API endpoints
"""

from fastapi import APIRouter, Depends, status

import app.controllers.user_controller as user_controller
from app.core.errors import ErrorResponseModel
from app.dependencies.auth import get_current_user, require_admin
from app.dependencies.listing import user_list_options
from app.dependencies.services import get_user_service
from app.models.user import User
from app.schemas.common import ListOptions, SuccessResponse
from app.schemas.user import UserLogin, UserProfileUpdate, UserRegister
from app.services.user import UserService

router = APIRouter()

AUTH_ERRORS = {401: {"model": ErrorResponseModel}}
ADMIN_ERRORS = {401: {"model": ErrorResponseModel}, 403: {"model": ErrorResponseModel}}


# Public routes
@router.post(
    "/register",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}},
)
async def register_user(data: UserRegister, service: UserService = Depends(get_user_service)):
    """Register a new account and receive an access token"""
    return await user_controller.register_user(service, data)


@router.post(
    "/login",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponseModel}, **AUTH_ERRORS},
)
async def login_user(data: UserLogin, service: UserService = Depends(get_user_service)):
    """Exchange email and password for an access token"""
    return await user_controller.login_user(service, data)


# Authenticated routes
@router.post(
    "/logout",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    responses=AUTH_ERRORS,
)
async def logout_user(user: User = Depends(get_current_user)):
    return await user_controller.logout_user(user)


@router.get(
    "/profile",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    responses=AUTH_ERRORS,
)
async def get_user_profile(
    user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    return await user_controller.get_user_profile(service, user)


@router.put(
    "/profile",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    responses={400: {"model": ErrorResponseModel}, 409: {"model": ErrorResponseModel}, **AUTH_ERRORS},
)
async def update_user_profile(
    data: UserProfileUpdate,
    user: User = Depends(get_current_user),
    service: UserService = Depends(get_user_service),
):
    """Update name and email; other fields in the body are ignored"""
    return await user_controller.update_user_profile(service, user, data)


# Admin routes
@router.get(
    "",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    responses=ADMIN_ERRORS,
)
async def get_all_users(
    admin: User = Depends(require_admin),
    options: ListOptions = Depends(user_list_options),
    service: UserService = Depends(get_user_service),
):
    """Paginated user listing with optional name/email search"""
    return await user_controller.get_all_users(service, options)


@router.delete(
    "/{user_id}",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    responses={404: {"model": ErrorResponseModel}, **ADMIN_ERRORS},
)
async def delete_user(
    user_id: str,
    admin: User = Depends(require_admin),
    service: UserService = Depends(get_user_service),
):
    """Delete a user account; products they created are kept"""
    return await user_controller.delete_user(service, user_id, admin)
