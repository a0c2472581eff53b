"""Response types for model calls.

Usage:
    # Unstructured (T=str)
    response: ModelResponse[str] = await generate(...)
    print(response.content)  # Raw text
    print(response.parsed)   # Same as content

    # Structured (T=MyModel)
    response: ModelResponse[MyModel] = await generate_structured(..., MyModel)
    print(response.parsed.field)

    # Speech
    speech: SpeechResponse = await generate_speech("Njan veetil aanu", ...)
    print(speech.data_uri)
"""

import base64
from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from .types import TokenUsage

T = TypeVar("T")
"""Type parameter for response output. str for unstructured, BaseModel subclass for structured."""


class ModelResponse(BaseModel, Generic[T]):
    """LLM response for both structured and unstructured output.

    After a JSON round-trip, ``parsed`` becomes a dict for structured
    responses (use ``MyModel.model_validate(response.parsed)`` to reconstruct).
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    content: str
    """Raw LLM output text (or JSON string for structured)."""

    parsed: T
    """Parsed result: same as content for T=str, typed model for T=BaseModel."""

    usage: TokenUsage
    model: str
    response_id: str = ""
    metadata: Mapping[str, Any] = Field(default_factory=dict)
    """Timing and other per-call metadata."""

    @field_serializer("parsed", when_used="always")
    def serialize_parsed(self, value: T) -> Any:
        """Serialize parsed value - convert BaseModel to dict."""
        if isinstance(value, BaseModel):
            return value.model_dump()
        return value

    def get_laminar_metadata(self) -> dict[str, str | int | float]:
        """Span attributes for Laminar, named after its gen_ai.* conventions."""
        result: dict[str, str | int | float] = {
            "gen_ai.response.id": self.response_id,
            "gen_ai.request_model": self.model,
            "gen_ai.usage.input_tokens": self.usage.prompt_tokens,
            "gen_ai.usage.output_tokens": self.usage.completion_tokens,
            "gen_ai.usage.total_tokens": self.usage.total_tokens,
        }
        if self.usage.cached_tokens:
            result["gen_ai.usage.cache_read_input_tokens"] = self.usage.cached_tokens
        if self.usage.reasoning_tokens:
            result["gen_ai.usage.reasoning_tokens"] = self.usage.reasoning_tokens

        for key, value in self.metadata.items():
            if isinstance(value, (str, int, float)):
                result[key] = value

        return result


class SpeechResponse(BaseModel):
    """Synthesized audio returned by the speech endpoint."""

    model_config = ConfigDict(frozen=True)

    audio: bytes
    mime_type: str
    model: str
    voice: str
    metadata: Mapping[str, Any] = Field(default_factory=dict)

    @property
    def data_uri(self) -> str:
        """Audio as a base64 ``data:`` URI, e.g. ``data:audio/mpeg;base64,...``."""
        encoded = base64.b64encode(self.audio).decode("ascii")
        return f"data:{self.mime_type};base64,{encoded}"

    @field_serializer("audio", when_used="always")
    def serialize_audio(self, value: bytes) -> str:
        """Serialize audio bytes as base64 text."""
        return base64.b64encode(value).decode("ascii")
