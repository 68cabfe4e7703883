"""
Category API endpoints
"""

from fastapi import APIRouter, Depends, status

import app.controllers.category_controller as category_controller
from app.core.errors import ErrorResponseModel
from app.dependencies.auth import get_current_user
from app.dependencies.services import get_category_service
from app.models.user import User
from app.schemas.category import CategoryCreate
from app.schemas.common import SuccessResponse
from app.services.category import CategoryService

router = APIRouter()


@router.post(
    "",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponseModel}, 401: {"model": ErrorResponseModel}},
)
async def create_category(
    data: CategoryCreate,
    # Any authenticated caller; no role restriction is applied here
    user: User = Depends(get_current_user),
    service: CategoryService = Depends(get_category_service),
):
    return await category_controller.create_category(service, data, user)


@router.get(
    "",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
)
async def get_all_categories(service: CategoryService = Depends(get_category_service)):
    return await category_controller.get_all_categories(service)
