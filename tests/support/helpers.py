"""Test helpers: canned model responses and fake OpenAI clients."""

import json
from types import SimpleNamespace
from typing import Any
from unittest.mock import AsyncMock, MagicMock

from pydantic import BaseModel

from manglish_dialects.llm import ModelResponse, TokenUsage
from manglish_dialects.schemas import DISTRICTS


def translation_payload(sentence: str = "Njan veetil aanu", score: int = 97) -> dict[str, Any]:
    """A complete, canonically ordered model answer for the translation prompt."""
    return {
        "translations": [
            {"district": district.value, "slang": f"{sentence} ({district.value})", "meaningMatchScore": score}
            for district in DISTRICTS
        ]
    }


def create_test_model_response(
    content: str = "Test response",
    model: str = "test-model",
    response_id: str = "test-response-id",
    prompt_tokens: int = 10,
    completion_tokens: int = 20,
) -> ModelResponse[str]:
    """Create a ModelResponse[str] for testing."""
    return ModelResponse[str](
        content=content,
        parsed=content,
        usage=TokenUsage(
            prompt_tokens=prompt_tokens,
            completion_tokens=completion_tokens,
            total_tokens=prompt_tokens + completion_tokens,
        ),
        model=model,
        response_id=response_id,
        metadata={},
    )


def create_test_structured_model_response(parsed: BaseModel, model: str = "test-model") -> ModelResponse[Any]:
    """Create a ModelResponse with structured output for testing."""
    return ModelResponse(
        content=parsed.model_dump_json(by_alias=True),
        parsed=parsed,
        usage=TokenUsage(prompt_tokens=10, completion_tokens=20, total_tokens=30),
        model=model,
        response_id="test-response-id",
        metadata={},
    )


def fake_completion(content: str | None, *, response_id: str = "resp-1", usage: Any = None) -> SimpleNamespace:
    """Shape of a chat completion as read by the client."""
    return SimpleNamespace(
        id=response_id,
        choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
        usage=usage,
    )


def fake_json_completion(payload: dict[str, Any]) -> SimpleNamespace:
    return fake_completion(json.dumps(payload))


def install_fake_openai(mock_client_class: MagicMock) -> MagicMock:
    """Wire a patched AsyncOpenAI class so ``async with AsyncOpenAI(...) as client`` yields a mock."""
    mock_client = MagicMock()
    mock_client_class.return_value.__aenter__.return_value = mock_client
    mock_client_class.return_value.__aexit__.return_value = False
    mock_client.chat.completions.create = AsyncMock()
    mock_client.chat.completions.parse = AsyncMock()
    mock_client.audio.speech.create = AsyncMock()
    return mock_client


def install_fake_laminar(mock_laminar: MagicMock) -> MagicMock:
    """Make ``Laminar.start_as_current_span`` usable as a context manager."""
    mock_span = MagicMock()
    mock_laminar.start_as_current_span.return_value.__enter__ = MagicMock(return_value=mock_span)
    mock_laminar.start_as_current_span.return_value.__exit__ = MagicMock(return_value=False)
    return mock_span
