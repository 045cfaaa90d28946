import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .settings import settings
from .routers import health
from .routers import grade

logging.basicConfig(
	level=settings.log_level.upper(),
	format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="PTE Scoring API", version=settings.app_version)
app.add_middleware(
	CORSMiddleware,
	allow_origins=settings.cors_origin_list,
	allow_methods=["*"],
	allow_headers=["*"],
)
app.include_router(health.router)
app.include_router(grade.router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
	logger.info("%s %s", request.method, request.url.path)
	return await call_next(request)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
	if exc.status_code == 404:
		return JSONResponse(status_code=404, content={"error": "Endpoint not found", "path": request.url.path})
	return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
	logger.exception("Unhandled error on %s", request.url.path)
	return JSONResponse(status_code=500, content={"error": "Internal server error", "message": "Something went wrong"})


@app.on_event("startup")
async def startup_event():
	logger.info("PTE Scoring API v%s started", settings.app_version)
	logger.info("Anthropic API: %s", "Configured" if settings.anthropic_api_key else "Not configured (local mode)")
