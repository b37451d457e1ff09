"""
llms.txt Generator - FastAPI Application Entry Point
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.errors import LlmsTxtError
from app.api.v1.endpoints import health, llmstxt
from app.logger import logger

# Create app
app = FastAPI(
    title=settings.APP_NAME,
    description="Generate llms.txt and llms-full.txt from a list of web pages",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc"
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(health.router, prefix="/api/v1")
app.include_router(llmstxt.router, prefix="/api/v1/llmstxt")
app.include_router(llmstxt.router, prefix="/api/service")


@app.exception_handler(LlmsTxtError)
async def llmstxt_error_handler(request: Request, exc: LlmsTxtError):
    """Map service errors to their HTTP status."""
    logger.error(f"{type(exc).__name__} on {request.url.path}: {exc.message}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": type(exc).__name__, "detail": exc.message},
    )


@app.on_event("startup")
async def startup():
    """Log configuration on startup."""
    logger.info(f"Starting {settings.APP_NAME}...")
    if not settings.FIRECRAWL_API_KEY:
        logger.warning("FIRECRAWL_API_KEY not configured; only requests with their own key will succeed")
    if not settings.SUPABASE_URL:
        logger.warning("SUPABASE_URL not configured; cache reads will miss and writes will fail")


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "app": settings.APP_NAME,
        "version": "1.0.0",
        "docs": "/docs"
    }
