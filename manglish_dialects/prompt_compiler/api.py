"""High-level API for sending prompt specifications to the model."""

from typing import Any, cast, overload

from pydantic import BaseModel
from typing_extensions import TypeVar

from manglish_dialects.llm import CoreMessage, ModelOptions, ModelResponse, Role, generate, generate_structured
from manglish_dialects.logging import get_pipeline_logger

from .render import render_text
from .spec import PromptSpec

logger = get_pipeline_logger(__name__)

U = TypeVar("U", bound=BaseModel)


@overload
async def send_spec(
    spec: PromptSpec[str],
    *,
    model: str,
    model_options: ModelOptions | None = None,
    purpose: str | None = None,
) -> ModelResponse[str]: ...


@overload
async def send_spec(  # noqa: UP047
    spec: PromptSpec[U],
    *,
    model: str,
    model_options: ModelOptions | None = None,
    purpose: str | None = None,
) -> ModelResponse[U]: ...


async def send_spec(
    spec: PromptSpec[Any],
    *,
    model: str,
    model_options: ModelOptions | None = None,
    purpose: str | None = None,
) -> ModelResponse[Any]:
    """Render a PromptSpec and send it to the model as a single user message.

    Dispatches to generate() or generate_structured() based on the spec's
    output type. The tracing purpose defaults to the spec class name.
    """
    spec_cls = type(spec)
    prompt_text = render_text(spec)
    trace_purpose = purpose or spec_cls.__name__
    messages = [CoreMessage(role=Role.USER, content=prompt_text)]

    logger.debug(f"Sending {spec_cls.__name__} to {model} ({len(prompt_text)} chars)")

    if spec_cls.output_type is str:
        return await generate(messages, model=model, model_options=model_options, purpose=trace_purpose)

    response_format = cast(type[BaseModel], spec_cls.output_type)
    return await generate_structured(messages, response_format, model=model, model_options=model_options, purpose=trace_purpose)


__all__ = ["send_spec"]
