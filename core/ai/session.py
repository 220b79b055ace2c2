"""OpenAI-backed AI session for text, image and vision calls.

Transient-error retries and request timeouts are delegated to the OpenAI
client (``max_retries`` / ``timeout``); callers of the session never retry.
"""

from __future__ import annotations

from typing import Any

from openai import AsyncOpenAI

from core.ai.types import (
    DEFAULT_IMAGE_COUNT,
    DEFAULT_IMAGE_FORMAT,
    DEFAULT_IMAGE_QUALITY,
    DEFAULT_IMAGE_SIZE,
    AISessionConfig,
    GeneratedImage,
    ImageAnalysisResult,
    ImageGenerationResult,
    TextGenerationResult,
)
from shared.env import EnvResolver, get_default_resolver
from shared.log import ToolLogger


def _usage(response: Any) -> dict[str, int]:
    usage = getattr(response, "usage", None)
    return {
        "inputTokens": getattr(usage, "input_tokens", 0) or 0,
        "outputTokens": getattr(usage, "output_tokens", 0) or 0,
    }


def _request_id(response: Any) -> str:
    return getattr(response, "_request_id", None) or ""


def _optional_params(
    instructions: str | None,
    temperature: float | None,
    max_output_tokens: int | None,
) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if instructions:
        params["instructions"] = instructions
    if temperature is not None:
        params["temperature"] = temperature
    if max_output_tokens is not None:
        params["max_output_tokens"] = max_output_tokens
    return params


class AISession:
    """Uniform wrapper over the OpenAI Responses and Images APIs.

    Example::

        session = AISession(AISessionConfig(api_key="sk-..."))
        result = await session.generate_text("Explain recursion in one sentence.")
        print(result.text)
    """

    def __init__(
        self,
        config: AISessionConfig,
        client: AsyncOpenAI | None = None,
        logger: ToolLogger | None = None,
    ):
        self.config = config
        self.client = client or AsyncOpenAI(
            api_key=config.api_key,
            max_retries=config.max_retries,
            timeout=config.timeout_ms / 1000,
        )
        self.logger = logger

    def _debug(self, message: str) -> None:
        if self.logger is not None:
            self.logger.debug("ai-session", message)

    async def generate_text(
        self,
        prompt: str,
        *,
        model: str | None = None,
        instructions: str | None = None,
        temperature: float | None = None,
        max_output_tokens: int | None = None,
    ) -> TextGenerationResult:
        """Generate text from a prompt."""
        model = model or self.config.default_text_model
        self._debug(f"responses.create model={model}")

        response = await self.client.responses.create(
            model=model,
            input=prompt,
            **_optional_params(instructions, temperature, max_output_tokens),
        )

        return TextGenerationResult(
            text=response.output_text,
            model=response.model,
            request_id=_request_id(response),
            usage=_usage(response),
        )

    async def generate_image(
        self,
        prompt: str,
        *,
        model: str | None = None,
        size: str | None = None,
        quality: str | None = None,
        n: int | None = None,
        output_format: str | None = None,
    ) -> ImageGenerationResult:
        """Generate one or more images from a prompt."""
        model = model or self.config.default_image_model
        self._debug(f"images.generate model={model}")

        response = await self.client.images.generate(
            model=model,
            prompt=prompt,
            size=size or DEFAULT_IMAGE_SIZE,
            quality=quality or DEFAULT_IMAGE_QUALITY,
            n=n or DEFAULT_IMAGE_COUNT,
            output_format=output_format or DEFAULT_IMAGE_FORMAT,
        )

        images = [
            GeneratedImage(b64_data=img.b64_json or None, url=img.url or None)
            for img in (response.data or [])
        ]
        return ImageGenerationResult(
            images=images,
            model=model,
            request_id=_request_id(response),
        )

    async def analyze_image(
        self,
        image_url: str,
        prompt: str,
        *,
        model: str | None = None,
        instructions: str | None = None,
        temperature: float | None = 0,
        max_output_tokens: int | None = None,
    ) -> ImageAnalysisResult:
        """Describe or classify an image with a vision-capable model."""
        model = model or self.config.default_vision_model
        self._debug(f"responses.create (vision) model={model}")

        response = await self.client.responses.create(
            model=model,
            input=[
                {
                    "role": "user",
                    "content": [
                        {"type": "input_image", "image_url": image_url, "detail": "auto"},
                        {"type": "input_text", "text": prompt},
                    ],
                }
            ],
            **_optional_params(instructions, temperature, max_output_tokens),
        )

        return ImageAnalysisResult(
            text=response.output_text,
            model=response.model,
            request_id=_request_id(response),
            usage=_usage(response),
        )


def create_ai_session(config: AISessionConfig, logger: ToolLogger | None = None) -> AISession:
    return AISession(config, logger=logger)


def create_ai_session_from_env(
    resolver: EnvResolver | None = None,
    logger: ToolLogger | None = None,
    **overrides: Any,
) -> AISession:
    """Create a session with ``OPENAI_API_KEY`` from the environment.

    Raises:
        ConfigurationError: If the key is missing.
    """
    resolver = resolver or get_default_resolver()
    api_key = resolver.openai_config().api_key
    return AISession(AISessionConfig(api_key=api_key, **overrides), logger=logger)
