"""Convert district slang back into standard Manglish."""

from collections.abc import Mapping
from typing import Any

from manglish_dialects.llm import ModelOptions
from manglish_dialects.logging import get_pipeline_logger
from manglish_dialects.prompt_compiler import send_spec
from manglish_dialects.prompts import ReverseTranslationSpec
from manglish_dialects.schemas import ReverseTranslationRequest, ReverseTranslationResult, validate_request
from manglish_dialects.settings import settings

from ._facade import flow_errors

logger = get_pipeline_logger(__name__)

REVERSE_TRANSLATION_FAILED = "Failed to convert the slang back to standard Manglish due to a server error."


async def reverse_translate(
    request: ReverseTranslationRequest | Mapping[str, Any],
    *,
    model: str | None = None,
    model_options: ModelOptions | None = None,
) -> ReverseTranslationResult:
    """Translate ``request.slang_sentence`` from ``request.district`` slang to formal Manglish.

    @public

    The district must be one of the 14 district names (matched case-insensitively).

    Raises:
        ValidationError: Empty sentence or unknown district. No model call is made.
        ModelInvocationError: The model failed or returned an unusable result.
        UnexpectedError: Any other internal fault.
    """
    parsed = validate_request(ReverseTranslationRequest, request)
    spec = ReverseTranslationSpec(slang_sentence=parsed.slang_sentence, district=parsed.district)

    with flow_errors("reverse translation", REVERSE_TRANSLATION_FAILED):
        logger.info(f"Reverse translating {parsed.district.value} slang")
        response = await send_spec(spec, model=model or settings.text_model, model_options=model_options)
        return response.parsed
