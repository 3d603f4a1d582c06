"""API v1 router: includes all endpoint routers with prefixes and tags."""

from fastapi import APIRouter

from colletro.api.v1.endpoints import (
    achievements,
    admin,
    collections,
    community_collections,
    folders,
    health,
    items,
    recommended_collections,
    search,
)

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(collections.router, prefix="/collections", tags=["collections"])
api_router.include_router(
    community_collections.router,
    prefix="/community-collections",
    tags=["community-collections"],
)
api_router.include_router(
    recommended_collections.router,
    prefix="/recommended-collections",
    tags=["recommended-collections"],
)
api_router.include_router(items.router, tags=["items"])
api_router.include_router(folders.router, prefix="/folders", tags=["folders"])
api_router.include_router(achievements.router, prefix="/achievements", tags=["achievements"])
api_router.include_router(search.router, prefix="/search", tags=["search"])
api_router.include_router(admin.router, prefix="/admin", tags=["admin"])
