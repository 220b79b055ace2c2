from core.ai.session import AISession, create_ai_session, create_ai_session_from_env
from core.ai.types import (
    AISessionConfig,
    GeneratedImage,
    ImageAnalysisResult,
    ImageGenerationResult,
    TextGenerationResult,
)

__all__ = [
    "AISession",
    "AISessionConfig",
    "GeneratedImage",
    "ImageAnalysisResult",
    "ImageGenerationResult",
    "TextGenerationResult",
    "create_ai_session",
    "create_ai_session_from_env",
]
