"""Silhouette configuration data models."""
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Gender(str, Enum):
    """Who appears in the silhouette."""

    male = "male"
    female = "female"
    mixed = "mixed"


class BodySize(str, Enum):
    """Camera framing of the figures."""

    close_up = "close-up"
    upper_body = "upper-body"
    full_body = "full-body"
    long_shot = "long-shot"


class SilhouetteConfig(BaseModel):
    """Attributes chosen in the browser form.

    Accepts both snake_case and the form's camelCase keys
    (``mixedMaleCount`` etc.); serializes with camelCase aliases.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # count is only read when gender is male/female
    count: int = Field(default=1, ge=1, le=10)
    gender: Gender = Gender.male
    # mixed_* counts are only read when gender is mixed
    mixed_male_count: int = Field(default=1, ge=0, le=10)
    mixed_female_count: int = Field(default=1, ge=0, le=10)
    silhouette_color: str = Field(default="#000000", min_length=1)
    body_size: BodySize = BodySize.full_body
    has_lines: bool = False
    line_color: str = Field(default="#FFFFFF", min_length=1)
    extra_details: str = ""


class PromptPreview(BaseModel):
    """Model-facing prompt plus the localized summary shown next to it."""

    prompt: str
    summary: str
