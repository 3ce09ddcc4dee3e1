"""Image request client for the Gemini image API."""
import base64
import logging
import mimetypes
from datetime import datetime
from typing import Any, Optional

from silhouette_studio.core.errors import MissingCredentialError, NoImageInResponseError
from silhouette_studio.models.generation import GeneratedImage

logger = logging.getLogger(__name__)

IMAGE_MODEL_ID = "gemini-2.5-flash-image"
ASPECT_RATIO = "16:9"
FILENAME_PREFIX = "silhouette"


def download_filename(mime_type: str, now: Optional[datetime] = None) -> str:
    """Return a timestamped download name.

    File name format: silhouette_{YYYYMMDDHHMMSS}{ext}
    """
    timestamp = (now or datetime.now()).strftime("%Y%m%d%H%M%S")
    ext = mimetypes.guess_extension(mime_type) or ".png"
    return f"{FILENAME_PREFIX}_{timestamp}{ext}"


def extract_image(response: Any) -> GeneratedImage:
    """Pull the first inline image out of the first candidate.

    Raises:
        NoImageInResponseError: When no part carries inline data and a MIME type.
    """
    candidates = getattr(response, "candidates", None)
    if candidates and candidates[0].content is not None:
        for part in candidates[0].content.parts or []:
            inline = getattr(part, "inline_data", None)
            if inline is None or not inline.data or not inline.mime_type:
                continue
            payload = base64.b64encode(bytes(inline.data)).decode("ascii")
            return GeneratedImage(
                mime_type=inline.mime_type,
                data_uri=f"data:{inline.mime_type};base64,{payload}",
                filename=download_filename(inline.mime_type),
            )
    raise NoImageInResponseError()


class ImageRequestClient:
    """Sends one prompt to the Gemini image model and decodes the reply.

    The credential is taken from the call, falling back to the ambient key
    given at construction. Upstream failures are not interpreted here;
    they propagate unchanged for the error classifier.
    """

    def __init__(self, default_api_key: str = "", model: str = IMAGE_MODEL_ID) -> None:
        self.default_api_key = default_api_key
        self.model = model

    def resolve_api_key(self, api_key: str = "") -> str:
        """Return the explicit key, else the ambient one.

        Raises:
            MissingCredentialError: When neither is set.
        """
        key = api_key.strip() or self.default_api_key.strip()
        if not key:
            raise MissingCredentialError()
        return key

    async def generate_image(self, prompt: str, api_key: str = "") -> GeneratedImage:
        """Generate a single image for the prompt.

        Exactly one upstream call is made, with no retry.

        Args:
            prompt: Composed model-facing prompt.
            api_key: Caller-supplied key; empty means use the ambient key.

        Returns:
            The decoded image as a data URI.

        Raises:
            MissingCredentialError: No key available; raised before any network I/O.
            NoImageInResponseError: The response had no inline image part.
        """
        key = self.resolve_api_key(api_key)
        logger.info("Requesting image from %s (%d char prompt)", self.model, len(prompt))
        response = await self._call_image_api(prompt, key)
        image = extract_image(response)
        logger.info("Received %s image", image.mime_type)
        return image

    def _make_client(self, api_key: str) -> Any:
        from google import genai  # type: ignore[import-untyped]

        return genai.Client(api_key=api_key)

    async def _call_image_api(self, prompt: str, api_key: str) -> Any:
        """Call the Gemini image model and return the raw response."""
        from google.genai import types  # type: ignore[import-untyped]

        client = self._make_client(api_key)
        return await client.aio.models.generate_content(
            model=self.model,
            contents=types.Content(role="user", parts=[types.Part(text=prompt)]),
            config=types.GenerateContentConfig(
                response_modalities=["IMAGE"],
                image_config=types.ImageConfig(aspect_ratio=ASPECT_RATIO),
            ),
        )
