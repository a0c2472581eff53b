"""Primitive model client.

This module provides the low-level generate(), generate_structured() and
generate_speech() functions. Flows reach them through prompt_compiler.send_spec
or, for speech, directly.
"""

import asyncio
import time
from typing import Any, TypeVar

from lmnr import Laminar
from openai import AsyncOpenAI
from openai.types.chat import ChatCompletionMessageParam
from pydantic import BaseModel, ValidationError

from manglish_dialects.exceptions import ModelInvocationError
from manglish_dialects.logging import get_pipeline_logger
from manglish_dialects.settings import settings

from .model_options import ModelOptions
from .model_response import ModelResponse, SpeechResponse
from .types import CoreMessage, Role, TokenUsage

logger = get_pipeline_logger(__name__)

T = TypeVar("T", bound=BaseModel)

NO_AUDIO_MESSAGE = "No audio media returned from the model."

_AUDIO_MIME_TYPES = {
    "mp3": "audio/mpeg",
    "wav": "audio/wav",
    "opus": "audio/ogg",
    "aac": "audio/aac",
    "flac": "audio/flac",
    "pcm": "audio/L16",
}


def _messages_to_api(messages: list[CoreMessage]) -> list[ChatCompletionMessageParam]:
    """Convert CoreMessages to OpenAI API format."""
    return [{"role": msg.role.value, "content": msg.content} for msg in messages if msg.content]  # type: ignore[misc]


def _extract_usage(response: Any) -> TokenUsage:
    """Extract token usage from API response."""
    usage = response.usage
    if not usage:
        return TokenUsage(prompt_tokens=0, completion_tokens=0, total_tokens=0)

    cached = 0
    reasoning = 0

    if prompt_details := getattr(usage, "prompt_tokens_details", None):
        cached = getattr(prompt_details, "cached_tokens", 0) or 0

    if completion_details := getattr(usage, "completion_tokens_details", None):
        reasoning = getattr(completion_details, "reasoning_tokens", 0) or 0

    return TokenUsage(
        prompt_tokens=usage.prompt_tokens,
        completion_tokens=usage.completion_tokens,
        total_tokens=usage.total_tokens,
        cached_tokens=cached,
        reasoning_tokens=reasoning,
    )


def _model_name_to_openrouter_model(model: str) -> str:
    """Convert model name to OpenRouter format if needed."""
    if "/" in model:
        return model
    if model.startswith("gemini"):
        return f"google/{model}"
    if model.startswith("gpt"):
        return f"openai/{model}"
    if model.startswith("claude"):
        return f"anthropic/{model}"
    return model


def _audio_mime_type(audio_format: str) -> str:
    """MIME type for a speech ``response_format`` value."""
    try:
        return _AUDIO_MIME_TYPES[audio_format]
    except KeyError:
        raise ValueError(f"Unsupported audio format '{audio_format}'. Supported: {', '.join(_AUDIO_MIME_TYPES)}") from None


async def _complete(
    client: AsyncOpenAI,
    model: str,
    messages: list[ChatCompletionMessageParam],
    completion_kwargs: dict[str, Any],
) -> tuple[Any, dict[str, Any]]:
    """Execute a single chat completion. Returns (response, metadata).

    Pydantic ``response_format`` values go through ``chat.completions.parse``
    so the endpoint receives a strict JSON schema.
    """
    start_time = time.time()

    response_format = completion_kwargs.get("response_format")
    if isinstance(response_format, type) and issubclass(response_format, BaseModel):
        response = await client.chat.completions.parse(
            model=model,
            messages=messages,
            **completion_kwargs,
        )
    else:
        response = await client.chat.completions.create(
            model=model,
            messages=messages,
            stream=False,
            **completion_kwargs,
        )

    metadata = {"time_taken": round(time.time() - start_time, 2)}
    return response, metadata


async def _generate_with_retry(
    messages: list[CoreMessage],
    *,
    model: str,
    model_options: ModelOptions,
    purpose: str | None,
    response_format: type[BaseModel] | None = None,
) -> ModelResponse[Any]:
    """Run the attempt loop shared by generate() and generate_structured().

    With ``response_format`` set, every attempt's content must validate against
    it; a schema violation (raised by the SDK's ``parse`` or by the local
    re-validation) uses up an attempt just like a transport failure.
    """
    if not messages:
        raise ValueError("messages must not be empty")
    if not model:
        raise ValueError("model must be provided")

    effective_messages = list(messages)
    if model_options.system_prompt:
        effective_messages = [CoreMessage(role=Role.SYSTEM, content=model_options.system_prompt), *effective_messages]

    api_messages = _messages_to_api(effective_messages)

    if "openrouter" in settings.openai_base_url.lower():
        model = _model_name_to_openrouter_model(model)

    completion_kwargs = model_options.to_openai_completion_kwargs()
    retries = max(model_options.retries, 1)

    for attempt in range(retries):
        try:
            async with AsyncOpenAI(
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url or None,
            ) as client:
                with Laminar.start_as_current_span(purpose or model, span_type="LLM", input=api_messages) as span:
                    response, metadata = await _complete(client, model, api_messages, completion_kwargs)

                    if not response.choices:
                        raise ValueError("Response contained no choices")

                    content = response.choices[0].message.content or ""
                    # Strip thinking tags if present
                    if "</think>" in content:
                        content = content.split("</think>")[-1].strip()

                    result = ModelResponse[str](
                        content=content,
                        parsed=content,
                        usage=_extract_usage(response),
                        model=model,
                        response_id=response.id or "",
                        metadata=metadata,
                    )

                    span_attrs: dict[str, Any] = result.get_laminar_metadata()
                    if purpose:
                        span_attrs["purpose"] = purpose
                    span.set_attributes(span_attrs)
                    Laminar.set_span_output(content)

                    if not content:
                        raise ValueError("Empty response content")

                    if response_format is None:
                        return result

                    parsed = response_format.model_validate_json(content)
                    return ModelResponse[Any](
                        content=content,
                        parsed=parsed,
                        usage=result.usage,
                        model=model,
                        response_id=result.response_id,
                        metadata=metadata,
                    )

        except TimeoutError:
            logger.warning(f"LLM generation timeout (attempt {attempt + 1}/{retries})")
            if attempt == retries - 1:
                raise ModelInvocationError("Model request timed out.") from None
        except ValidationError as e:
            logger.warning(f"Structured output validation failed (attempt {attempt + 1}/{retries}): {e}")
            if attempt == retries - 1:
                raise ModelInvocationError(f"Structured output validation failed after {retries} attempt(s).") from e
        except Exception as e:
            logger.warning(f"LLM generation failed (attempt {attempt + 1}/{retries}): {e}")
            if attempt == retries - 1:
                raise ModelInvocationError(f"Model request failed after {retries} attempt(s).") from e

        await asyncio.sleep(model_options.retry_delay_seconds)

    raise ModelInvocationError("Unknown error occurred during LLM generation.")


async def generate(
    messages: list[CoreMessage],
    *,
    model: str,
    model_options: ModelOptions | None = None,
    purpose: str | None = None,
) -> ModelResponse[str]:
    """Send messages to the model and return its text reply.

    Args:
        messages: List of CoreMessage objects.
        model: Model identifier (e.g., "gemini-2.5-flash").
        model_options: Optional configuration for the model.
        purpose: Optional semantic label for the tracing span name.

    Returns:
        ModelResponse[str] with content, parsed (same as content) and usage.

    Raises:
        ValueError: If messages is empty or model is not provided.
        ModelInvocationError: If generation fails on every attempt.
    """
    return await _generate_with_retry(messages, model=model, model_options=model_options or ModelOptions(), purpose=purpose)


async def generate_structured(
    messages: list[CoreMessage],
    response_format: type[T],
    *,
    model: str,
    model_options: ModelOptions | None = None,
    purpose: str | None = None,
) -> ModelResponse[T]:
    """Send messages and validate the reply against a Pydantic model.

    Transport failures and schema violations share the caller's
    ``retries`` budget.

    Args:
        messages: List of CoreMessage objects.
        response_format: Pydantic model class for structured output.
        model: Model identifier.
        model_options: Optional configuration for the model.
        purpose: Optional semantic label for the tracing span name.

    Returns:
        ModelResponse[T] with .parsed returning the typed model instance.

    Raises:
        ValueError: If messages is empty or model is not provided.
        ModelInvocationError: If generation or validation fails on every attempt.
    """
    if model_options is None:
        model_options = ModelOptions()
    else:
        model_options = model_options.model_copy()

    model_options.response_format = response_format

    return await _generate_with_retry(
        messages,
        model=model,
        model_options=model_options,
        purpose=purpose,
        response_format=response_format,
    )



async def generate_speech(
    text: str,
    *,
    model: str,
    voice: str,
    audio_format: str = "mp3",
    model_options: ModelOptions | None = None,
    purpose: str | None = None,
) -> SpeechResponse:
    """Synthesize speech for ``text`` through the endpoint's speech API.

    The text is passed as-is; there is no prompt template.

    Raises:
        ValueError: If text, model or voice is empty, or the format is unknown.
        ModelInvocationError: If the request fails or no audio bytes come back.
    """
    if not text:
        raise ValueError("text must not be empty")
    if not model:
        raise ValueError("model must be provided")
    if not voice:
        raise ValueError("voice must be provided")

    mime_type = _audio_mime_type(audio_format)

    if model_options is None:
        model_options = ModelOptions()

    request_kwargs: dict[str, Any] = {}
    if model_options.timeout is not None:
        request_kwargs["timeout"] = model_options.timeout
    if model_options.extra_body:
        request_kwargs["extra_body"] = dict(model_options.extra_body)

    retries = max(model_options.retries, 1)
    audio = b""
    metadata: dict[str, Any] = {}

    for attempt in range(retries):
        try:
            async with AsyncOpenAI(
                api_key=settings.openai_api_key,
                base_url=settings.openai_base_url or None,
            ) as client:
                with Laminar.start_as_current_span(purpose or model, span_type="LLM", input=text) as span:
                    start_time = time.time()
                    response = await client.audio.speech.create(
                        model=model,
                        voice=voice,  # type: ignore[arg-type]
                        input=text,
                        response_format=audio_format,  # type: ignore[arg-type]
                        **request_kwargs,
                    )
                    audio = response.content
                    metadata = {"time_taken": round(time.time() - start_time, 2)}
                    span.set_attributes({"gen_ai.request_model": model, "voice": voice, "audio_bytes": len(audio), **metadata})
            break
        except TimeoutError:
            logger.warning(f"Speech synthesis timeout (attempt {attempt + 1}/{retries})")
            if attempt == retries - 1:
                raise ModelInvocationError("Speech request timed out.") from None
        except Exception as e:
            logger.warning(f"Speech synthesis failed (attempt {attempt + 1}/{retries}): {e}")
            if attempt == retries - 1:
                raise ModelInvocationError(f"Speech request failed after {retries} attempt(s).") from e

        await asyncio.sleep(model_options.retry_delay_seconds)

    if not audio:
        raise ModelInvocationError(NO_AUDIO_MESSAGE)

    return SpeechResponse(audio=audio, mime_type=mime_type, model=model, voice=voice, metadata=metadata)
