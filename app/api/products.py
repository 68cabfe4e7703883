"""
Product API endpoints
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

import app.controllers.product_controller as product_controller
from app.core.errors import ErrorResponseModel
from app.dependencies.auth import get_current_user, get_optional_user
from app.dependencies.listing import product_list_options
from app.dependencies.services import get_product_service
from app.models.user import User
from app.schemas.common import ListOptions, SuccessResponse
from app.schemas.product import ProductCreate, ProductUpdate
from app.services.product import ProductService

router = APIRouter()

WRITE_ERRORS = {
    400: {"model": ErrorResponseModel},
    401: {"model": ErrorResponseModel},
    403: {"model": ErrorResponseModel},
    404: {"model": ErrorResponseModel},
}


# Public routes
@router.get(
    "",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
)
async def get_all_products(
    options: ListOptions = Depends(product_list_options),
    category: Optional[str] = Query(None, description="Exact category name"),
    subcategory: Optional[str] = Query(None, description="Exact subcategory name"),
    mine: bool = Query(False, description="Only the caller's products (requires a token)"),
    user: Optional[User] = Depends(get_optional_user),
    service: ProductService = Depends(get_product_service),
):
    """List products with pagination, search and category filters"""
    return await product_controller.get_all_products(
        service, options, category=category, subcategory=subcategory, mine=mine, user=user
    )


@router.get(
    "/{product_id}",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    responses={404: {"model": ErrorResponseModel}},
)
async def get_product_by_id(product_id: str, service: ProductService = Depends(get_product_service)):
    return await product_controller.get_product_by_id(service, product_id)


# Authenticated routes
@router.post(
    "",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponseModel}, 401: {"model": ErrorResponseModel}},
)
async def create_product(
    data: ProductCreate,
    user: User = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    """
    Create a product owned by the caller.
    The subcategory must belong to the named category.
    """
    return await product_controller.create_product(service, data, user)


@router.put(
    "/{product_id}",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    responses=WRITE_ERRORS,
)
async def update_product(
    product_id: str,
    data: ProductUpdate,
    user: User = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    """Update a product. Only the creator or an admin can update."""
    return await product_controller.update_product(service, product_id, data, user)


@router.delete(
    "/{product_id}",
    response_model=SuccessResponse,
    response_model_exclude_unset=True,
    responses=WRITE_ERRORS,
)
async def delete_product(
    product_id: str,
    user: User = Depends(get_current_user),
    service: ProductService = Depends(get_product_service),
):
    """Delete a product. Only the creator or an admin can delete."""
    return await product_controller.delete_product(service, product_id, user)
