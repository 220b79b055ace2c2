"""Request/response models for the AI session adapter."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel

DEFAULT_TEXT_MODEL = "gpt-5.2"
DEFAULT_IMAGE_MODEL = "gpt-image-1"
DEFAULT_VISION_MODEL = "gpt-4o"
DEFAULT_MAX_RETRIES = 2
DEFAULT_TIMEOUT_MS = 60_000
DEFAULT_IMAGE_SIZE = "1024x1024"
DEFAULT_IMAGE_QUALITY = "auto"
DEFAULT_IMAGE_FORMAT = "png"
DEFAULT_IMAGE_COUNT = 1

ImageSize = Literal["1024x1024", "1024x1536", "1536x1024", "auto"]
ImageQuality = Literal["low", "medium", "high", "auto"]
ImageOutputFormat = Literal["png", "jpeg", "webp"]


class AISessionConfig(BaseModel):
    """Configuration required to create an AI session."""

    api_key: str
    default_text_model: str = DEFAULT_TEXT_MODEL
    default_image_model: str = DEFAULT_IMAGE_MODEL
    default_vision_model: str = DEFAULT_VISION_MODEL
    max_retries: int = DEFAULT_MAX_RETRIES
    timeout_ms: int = DEFAULT_TIMEOUT_MS


class TextGenerationResult(BaseModel):
    """Result of a text generation call."""

    text: str
    model: str
    request_id: str = ""
    # {"inputTokens": n, "outputTokens": m} from the provider
    usage: dict[str, Any] = {}


class ImageAnalysisResult(TextGenerationResult):
    """Result of a vision call; same shape as text generation."""


class GeneratedImage(BaseModel):
    """A single generated image."""

    b64_data: str | None = None
    url: str | None = None


class ImageGenerationResult(BaseModel):
    """Result of an image generation call."""

    images: list[GeneratedImage]
    model: str
    request_id: str = ""
