import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import get_settings
from .gateway.handle import Available, build_gateway_handle
from .gateway.service import AIGateway

settings = get_settings()

# Configure both file and console logging
logs_dir = Path(__file__).parent.parent / settings.LOG_DIR
logs_dir.mkdir(parents=True, exist_ok=True)

_log_handlers = [
    logging.FileHandler(logs_dir / "zenvibe.log", encoding="utf-8"),
    logging.StreamHandler(),
]
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=_log_handlers,
)
logger = logging.getLogger(__name__)


def _close_log_handlers() -> None:
    root_logger = logging.getLogger()
    for h in _log_handlers:
        h.flush()
        h.close()
        root_logger.removeHandler(h)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # The Gemini handle is built exactly once per process.
    settings = get_settings()
    handle = build_gateway_handle(settings.API_KEY)
    app.state.gateway = AIGateway(handle, model=settings.MODEL_NAME)
    logger.info(
        "AI gateway %s (model=%s)",
        "available" if handle.is_available else f"unavailable: {handle.reason}",
        settings.MODEL_NAME,
    )
    try:
        yield
    finally:
        if isinstance(handle, Available):
            try:
                await handle.client.aio.aclose()
            except Exception as e:
                logger.warning("Gemini client aclose() failed: %s", e)
        # Close logging file handlers to avoid unclosed file warnings during tests
        _close_log_handlers()


# Initialize FastAPI app with lifespan
app = FastAPI(
    title="ZenVibe API",
    description="Backend API for ZenVibe - peer support for teens",
    version=settings.VERSION,
    docs_url=f"{settings.API_PREFIX}/docs",
    redoc_url=f"{settings.API_PREFIX}/redoc",
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    lifespan=lifespan,
)

# Set up CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_origin_regex=settings.CORS_ORIGIN_REGEX or None,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Health check endpoint
@app.get("/api/health")
async def health_check():
    gateway = getattr(app.state, "gateway", None)
    return {
        "status": "healthy",
        "service": "ZenVibe API",
        "environment": get_settings().ENVIRONMENT,
        "ai": "available" if gateway is not None and gateway.available else "unavailable",
    }


# Import and include routers
from .api.v1.api import api_router  # noqa: E402

# API v1 routes
app.include_router(api_router, prefix="/api/v1")


# Root endpoint
@app.get("/")
async def root():
    return {"message": "Welcome to ZenVibe API", "docs": f"{settings.API_PREFIX}/docs", "version": settings.VERSION}


# Error handlers
@app.exception_handler(HTTPException)
async def http_exception_handler(request, exc):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
    )


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    logger.error(f"Unhandled exception: {str(exc)}", exc_info=True)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )
