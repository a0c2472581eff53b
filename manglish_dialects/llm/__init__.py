"""Model invocation over an OpenAI-compatible endpoint.

Exports:
    Types: Role, CoreMessage, TokenUsage
    Model config: ModelOptions
    Response types: ModelResponse, SpeechResponse
    Functions: generate, generate_structured, generate_speech
"""

from .client import NO_AUDIO_MESSAGE, generate, generate_speech, generate_structured
from .model_options import ModelOptions
from .model_response import ModelResponse, SpeechResponse
from .types import CoreMessage, Role, TokenUsage

__all__ = [
    "NO_AUDIO_MESSAGE",
    "CoreMessage",
    "ModelOptions",
    "ModelResponse",
    "Role",
    "SpeechResponse",
    "TokenUsage",
    "generate",
    "generate_speech",
    "generate_structured",
]
