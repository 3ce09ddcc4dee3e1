"""GenerationService: compose the prompt, request one image, report the outcome."""
from silhouette_studio.core.errors import SilhouetteError
from silhouette_studio.core.logging import setup_logging
from silhouette_studio.models.generation import GenerationResult
from silhouette_studio.models.silhouette import SilhouetteConfig
from silhouette_studio.services.error_classifier import classify_error
from silhouette_studio.services.image import ImageRequestClient
from silhouette_studio.services.prompt import compose_prompt

logger = setup_logging("generation")


class GenerationService:
    """Runs one user-triggered generation.

    Responsibilities:
    1. Compose the prompt from the current configuration
    2. Make exactly one call through ImageRequestClient
    3. Turn local failures into their own category, and classify every
       other failure once
    4. Return a fresh GenerationResult

    Holds no per-request state; each call builds a new result.
    """

    def __init__(self, image_client: ImageRequestClient) -> None:
        self.image_client = image_client

    async def generate(self, config: SilhouetteConfig, api_key: str = "") -> GenerationResult:
        """Generate a silhouette image for the configuration.

        Args:
            config: Attributes chosen in the form.
            api_key: Caller-supplied key; empty means use the ambient key.

        Returns:
            GenerationResult with either image_url or error populated.
        """
        prompt = compose_prompt(config)

        try:
            image = await self.image_client.generate_image(prompt, api_key)
        except SilhouetteError as exc:
            logger.warning(
                "Generation aborted: %s",
                exc.category.value,
                extra={"service": "GenerationService", "error_category": exc.category.value},
            )
            return GenerationResult(
                prompt_used=prompt,
                error=exc.user_message,
                error_category=exc.category,
            )
        except Exception as exc:
            classified = classify_error(exc)
            logger.error(
                "Image API call failed: %s",
                type(exc).__name__,
                exc_info=True,
                extra={
                    "service": "GenerationService",
                    "error_type": type(exc).__name__,
                    "error_category": classified.category.value,
                },
            )
            return GenerationResult(
                prompt_used=prompt,
                error=classified.message,
                error_category=classified.category,
            )

        return GenerationResult(
            prompt_used=prompt,
            image_url=image.data_uri,
            filename=image.filename,
        )
