# app/api/routers/health.py
from datetime import datetime, timezone

from fastapi import APIRouter

from app.utils.settings import APP_ENV

router = APIRouter(tags=["health"])


@router.get("/health")
def health():
    return {
        "status": "success",
        "message": "E-commerce Backend API is running!",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "environment": APP_ENV,
    }
