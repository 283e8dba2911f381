"""API routes."""

from fastapi import APIRouter

from app.api.routes import admin, auth, books, health

router = APIRouter()
router.include_router(health.router, prefix="/health", tags=["health"])
router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(admin.router, prefix="/admin", tags=["admin"])
router.include_router(books.router, prefix="/books", tags=["books"])
