from fastapi import APIRouter

from .routers import moderation, navigation, support

api_router = APIRouter()

# Include all API routes
api_router.include_router(moderation.router)
api_router.include_router(support.router)
api_router.include_router(navigation.router)
