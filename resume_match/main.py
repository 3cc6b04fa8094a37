from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_match.routers import analysis
from resume_match.utils.config import CORS_ORIGINS, get_settings
from resume_match.utils.logging_config import configure_for_environment, get_logger
from resume_match.middleware.error_handlers import (
    ExceptionHandlerMiddleware,
    RequestLoggingMiddleware,
    PerformanceMiddleware,
)

# Configure logging first
configure_for_environment()
logger = get_logger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan context manager"""
    logger.info("Resume Match API starting up...")

    # Vocabulary and settings are read-only after this point
    get_settings()

    logger.info("Resume Match API startup completed")

    yield

    logger.info("Resume Match API shutting down...")


app = FastAPI(title="Resume Match API", version=API_VERSION, lifespan=lifespan)

# Last added is outermost: exception handler wraps logging and timing
app.add_middleware(PerformanceMiddleware, slow_request_threshold=2.0)
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(ExceptionHandlerMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
@app.head("/health")
async def health_check():
    """Health check endpoint - handles both GET and HEAD requests"""
    return {"status": "healthy", "version": API_VERSION}


app.include_router(analysis.router, prefix="/api")

logger.info("Resume Match API initialized successfully")
