"""Silhouette API router."""
import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from silhouette_studio.core.errors import ErrorCategory
from silhouette_studio.models.generation import GenerateRequest, GenerationResult
from silhouette_studio.models.silhouette import BodySize, PromptPreview, SilhouetteConfig
from silhouette_studio.services.generation import GenerationService
from silhouette_studio.services.prompt import (
    BODY_SIZE_LABELS,
    LINE_COLOR_PRESETS,
    SILHOUETTE_COLOR_PRESETS,
    preview,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/silhouette", tags=["silhouette"])

ERROR_STATUS: dict[ErrorCategory, int] = {
    ErrorCategory.missing_credential: 401,
    ErrorCategory.invalid_credential: 401,
    ErrorCategory.quota_exceeded: 429,
    ErrorCategory.rate_limited: 429,
    ErrorCategory.no_image_in_response: 502,
    ErrorCategory.network_error: 502,
    ErrorCategory.unknown: 502,
}


def get_generation_service(request: Request) -> GenerationService:
    """FastAPI dependency: retrieve GenerationService from app.state.

    Returns HTTP 503 if the service was not initialized at startup.
    """
    svc: GenerationService | None = getattr(
        request.app.state, "generation_service", None
    )
    if svc is None:
        raise HTTPException(
            status_code=503,
            detail="Image service unavailable. Service not initialized.",
        )
    return svc


@router.get("/presets")
async def get_presets() -> dict:
    """Colour presets, framing labels and the default configuration for the form."""
    return {
        "silhouette_colors": SILHOUETTE_COLOR_PRESETS,
        "line_colors": LINE_COLOR_PRESETS,
        "body_sizes": [
            {"value": size.value, "label": BODY_SIZE_LABELS[size]} for size in BodySize
        ],
        "default_config": SilhouetteConfig().model_dump(by_alias=True, mode="json"),
    }


@router.post("/prompt", response_model=PromptPreview)
async def compose(config: SilhouetteConfig) -> PromptPreview:
    """Return the model-facing prompt and the localized subject summary."""
    return preview(config)


@router.post("/generate", response_model=GenerationResult)
async def generate(
    body: GenerateRequest,
    service: GenerationService = Depends(get_generation_service),
) -> GenerationResult:
    """Generate one silhouette image.

    Raises:
        HTTPException 401: Missing or invalid API key.
        HTTPException 429: Quota exhausted or rate limited.
        HTTPException 502: No image, network error, or unknown upstream failure.
    """
    result = await service.generate(body.config, body.api_key)
    if result.error_category is not None:
        logger.info("generate failed: category=%s", result.error_category.value)
        raise HTTPException(
            status_code=ERROR_STATUS[result.error_category],
            detail=result.model_dump(by_alias=True, mode="json"),
        )
    return result
