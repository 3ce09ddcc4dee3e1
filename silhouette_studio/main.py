"""FastAPI application entry point."""
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from silhouette_studio.core.config import get_settings
from silhouette_studio.core.logging import setup_logging

# Setup logging
logger = setup_logging("main")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Initialize services at startup."""
    from silhouette_studio.services.generation import GenerationService
    from silhouette_studio.services.image import ImageRequestClient

    settings = get_settings()
    image_client = ImageRequestClient(
        default_api_key=settings.gemini_api_key,
        model=settings.image_model,
    )
    app.state.generation_service = GenerationService(image_client=image_client)
    if not settings.gemini_api_key:
        logger.info("No ambient API key configured; requests must supply one")
    logger.info("Services initialized successfully")

    yield


# Create FastAPI app
app = FastAPI(
    title="Nano Silhouette Studio",
    description="Silhouette prompt composer and Gemini image generation",
    version="0.1.0",
    lifespan=lifespan,
)

# CORS configuration
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=[f"http://localhost:{settings.frontend_port}"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
from silhouette_studio.api.silhouette import router as silhouette_router  # noqa: E402

app.include_router(silhouette_router)


@app.get("/health")
async def health_check(request: Request) -> dict:
    """Health check endpoint.

    Always returns HTTP 200; check `services.image_client` for actual status.
    """
    svc = getattr(request.app.state, "generation_service", None)

    logger.info("Health check requested")
    return {
        "status": "ok",
        "version": app.version,
        "services": {
            "image_client": "ok" if svc is not None else "unavailable",
        },
    }


def run() -> None:
    """Serve the app with uvicorn using the configured host and port."""
    import uvicorn

    cfg = get_settings()
    uvicorn.run(
        "silhouette_studio.main:app",
        host=cfg.backend_host,
        port=cfg.backend_port,
    )
