import platform
from datetime import datetime, timezone

from fastapi import APIRouter

from ..settings import settings

router = APIRouter(tags=["health"])


@router.get("/")
def root():
	return {
		"message": "PTE Scoring API",
		"version": settings.app_version,
		"endpoints": ["/api/health", "/api/grade"],
	}


@router.get("/api/health")
def health():
	return {
		"status": "ok",
		"timestamp": datetime.now(timezone.utc).isoformat(),
		"anthropicConfigured": bool(settings.anthropic_api_key),
		"pythonVersion": platform.python_version(),
	}
