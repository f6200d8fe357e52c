"""MetaSnap API - page metadata analyzer."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes import analyze_router, health_router
from config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup and shutdown."""
    logger.info(f"Starting {settings.app_name}...")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title="MetaSnap API",
    description="Scores a page's SEO and social metadata and renders link previews.",
    version="0.1.0",
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject bad request bodies with 400 before any analysis runs."""
    errors = exc.errors()
    logger.warning(f"Rejected request to {request.url.path}: {errors}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(errors)},
    )


app.include_router(health_router, prefix="/api")
app.include_router(analyze_router, prefix="/api")


@app.get("/", include_in_schema=False)
async def root():
    """Point clients at the docs."""
    return {
        "service": "MetaSnap API",
        "docs": "/docs",
        "health": "/api/health",
    }
