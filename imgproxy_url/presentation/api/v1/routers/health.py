"""
Health check API endpoints
"""

import time

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])

_started_at = time.time()


@router.get("/health")
def health_check(request: Request):
    """
    Health check endpoint reporting uptime and whether signing is configured
    """
    return {
        "status": "healthy",
        "signing_enabled": request.app.state.settings.signing_enabled,
        "uptime": time.time() - _started_at,
    }


@router.get("/")
def root():
    """
    Root endpoint
    """
    return {"message": "imgproxy URL API is running", "status": "healthy"}
