"""Image generation request/result models."""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from silhouette_studio.core.errors import ErrorCategory
from silhouette_studio.models.silhouette import SilhouetteConfig


class GenerateRequest(BaseModel):
    """Body of POST /api/silhouette/generate."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    config: SilhouetteConfig = Field(default_factory=SilhouetteConfig)
    # Empty string falls back to the ambient key from Settings
    api_key: str = Field(default="", repr=False)


class GeneratedImage(BaseModel):
    """Inline image decoded from the upstream response."""

    mime_type: str
    data_uri: str
    filename: str


class GenerationResult(BaseModel):
    """Outcome of one generation request, recreated per request.

    Shape only; nothing enforces that image and error are exclusive.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    prompt_used: str
    image_url: Optional[str] = None
    filename: Optional[str] = None
    loading: bool = False
    error: Optional[str] = None
    error_category: Optional[ErrorCategory] = None
