from fastapi import APIRouter
from app.api.routes import admin, menu, square

api_router = APIRouter()

api_router.include_router(menu.router, prefix="/menu", tags=["Menu"])
api_router.include_router(square.router, prefix="/square", tags=["Square"])
api_router.include_router(admin.router, prefix="/admin", tags=["Admin"])
