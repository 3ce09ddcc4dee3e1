"""Prompt composition: SilhouetteConfig -> model-facing prompt.

Everything here is pure and synchronous; the browser form re-runs it on
every field change.
"""
import logging

from silhouette_studio.models.silhouette import (
    BodySize,
    Gender,
    PromptPreview,
    SilhouetteConfig,
)

logger = logging.getLogger(__name__)

BODY_SIZE_PROMPTS: dict[BodySize, str] = {
    BodySize.close_up: "close-up shot, distinct facial features visible in profile",
    BodySize.upper_body: "upper body portrait, waist up",
    BodySize.full_body: "full body view, standing or walking",
    BodySize.long_shot: "long shot, small figures in distance",
}

# Labels shown in the form's framing dropdown
BODY_SIZE_LABELS: dict[BodySize, str] = {
    BodySize.close_up: "클로즈업 (얼굴/어깨)",
    BodySize.upper_body: "상반신 (허리 위)",
    BodySize.full_body: "전신",
    BodySize.long_shot: "원거리 (배경 포함)",
}

GENDER_LABELS: dict[Gender, str] = {
    Gender.male: "남성",
    Gender.female: "여성",
}

SILHOUETTE_COLOR_PRESETS = ["#000000", "#FFFFFF", "#FF0000", "#808080", "#1E3A8A", "#064E3B"]
LINE_COLOR_PRESETS = ["#FFFFFF", "#000000", "#FF0000", "#FFFF00"]

FALLBACK_SUBJECT = "a group of people"
FALLBACK_SUBJECT_SUMMARY = "사람들"
FALLBACK_DETAILS = "standing naturally"
NO_LINES_PROMPT = "solid flat shape, no internal details"

_WHITE_VALUES = {"#ffffff", "white"}


def subject_phrase(config: SilhouetteConfig) -> str:
    """English subject phrase, e.g. ``"3 females"`` or ``"2 male(s) and 1 female(s)"``."""
    if config.gender is Gender.mixed:
        parts = []
        if config.mixed_male_count > 0:
            parts.append(f"{config.mixed_male_count} male(s)")
        if config.mixed_female_count > 0:
            parts.append(f"{config.mixed_female_count} female(s)")
        return " and ".join(parts) or FALLBACK_SUBJECT
    plural = "s" if config.count > 1 else ""
    return f"{config.count} {config.gender.value}{plural}"


def subject_summary(config: SilhouetteConfig) -> str:
    """Korean display summary of the subject; never sent to the model."""
    if config.gender is Gender.mixed:
        parts = []
        if config.mixed_male_count > 0:
            parts.append(f"{GENDER_LABELS[Gender.male]} {config.mixed_male_count}명")
        if config.mixed_female_count > 0:
            parts.append(f"{GENDER_LABELS[Gender.female]} {config.mixed_female_count}명")
        return ", ".join(parts) or FALLBACK_SUBJECT_SUMMARY
    return f"{GENDER_LABELS[config.gender]} {config.count}명"


def line_style_phrase(config: SilhouetteConfig) -> str:
    if not config.has_lines:
        return NO_LINES_PROMPT
    return (
        f"with distinct {config.line_color} internal line details outlining "
        "features and clothing folds, comic book noir style"
    )


def background_color(silhouette_color: str) -> str:
    """Pick the background that contrasts with the figures."""
    return "black" if silhouette_color.strip().lower() in _WHITE_VALUES else "white"


def compose_prompt(config: SilhouetteConfig) -> str:
    """Build the single-line English prompt sent to the image model.

    Args:
        config: Complete silhouette configuration.

    Returns:
        Prompt with every whitespace run collapsed to one space and no
        leading/trailing whitespace.
    """
    color = config.silhouette_color
    color_kind = "black" if color.lower() == "#000000" else "colored"
    prompt = f"""
        Create a high-contrast 16:9 silhouette illustration.
        Subject: {subject_phrase(config)}.
        Action/Details: {config.extra_details or FALLBACK_DETAILS}.
        Framing: {BODY_SIZE_PROMPTS[config.body_size]}.
        Style: Minimalist vector art, clean sharp edges.
        Colors: The figures are purely {color} ({color_kind}) silhouette. {line_style_phrase(config)}.
        Background: Isolated on a solid {background_color(color)} background for easy background removal (chroma key friendly).
        Ensure the silhouette is crisp with no gradients or shadows.
    """
    prompt = " ".join(prompt.split())
    logger.debug("Composed prompt (%d chars)", len(prompt))
    return prompt


def preview(config: SilhouetteConfig) -> PromptPreview:
    """Prompt plus localized summary, kept as two separate strings."""
    return PromptPreview(prompt=compose_prompt(config), summary=subject_summary(config))
