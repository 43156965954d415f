"""Main API router — combines all endpoint routers."""

from fastapi import APIRouter

from itemservice.api.health import router as health_router
from itemservice.api.items import router as items_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Item validation
api_router.include_router(items_router, tags=["Items"])
