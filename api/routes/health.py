"""Health check route"""

from fastapi import APIRouter

from app.config import settings

router = APIRouter(tags=["Health"])


@router.get("/health-check")
def health_check():
    """Basic liveness check; does not touch storage"""
    return {"status": "ok", "service": settings.app_name}
