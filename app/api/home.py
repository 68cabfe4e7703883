"""
API information endpoint
"""

from fastapi import APIRouter

from app.core.config import config

router = APIRouter()


@router.get("")
async def api_info():
    """Describe the API version and its endpoint groups"""
    prefix = config.api_prefix
    return {
        "success": True,
        "message": f"Welcome to {config.service_name}",
        "version": config.service_version,
        "endpoints": {
            "users": f"{prefix}/users",
            "products": f"{prefix}/products",
            "categories": f"{prefix}/categories",
            "health": "/health",
        },
    }
