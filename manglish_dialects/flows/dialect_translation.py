"""Translate a Manglish sentence into the slang of all 14 districts."""

from collections.abc import Mapping
from typing import Any

from manglish_dialects.exceptions import ModelInvocationError, ValidationError
from manglish_dialects.llm import ModelOptions
from manglish_dialects.logging import get_pipeline_logger
from manglish_dialects.prompt_compiler import send_spec
from manglish_dialects.prompts import DialectTranslationSpec
from manglish_dialects.schemas import (
    DistrictResult,
    TranslationRequest,
    validate_request,
    validate_translations,
)
from manglish_dialects.settings import settings

from ._facade import flow_errors

logger = get_pipeline_logger(__name__)

TRANSLATION_FAILED = "Failed to get dialect translations due to a server error."


async def translate_dialects(
    request: TranslationRequest | Mapping[str, Any],
    *,
    model: str | None = None,
    model_options: ModelOptions | None = None,
) -> list[DistrictResult]:
    """Translate ``request.sentence`` into every district's slang.

    @public

    Args:
        request: A TranslationRequest or a mapping with ``sentence`` and
            ``slangIntensity`` (``low``/``medium``/``high``, or slider index 0-2).
        model: Model override; defaults to ``settings.text_model``.
        model_options: Optional per-call model options.

    Returns:
        Exactly 14 results ordered Thiruvananthapuram ... Kasaragod.

    Raises:
        ValidationError: The request is malformed. No model call is made.
        ModelInvocationError: The model failed or returned an unusable result.
        UnexpectedError: Any other internal fault.

    Example:
        >>> results = await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": "medium"})
        >>> results[0].district
        <District.THIRUVANANTHAPURAM: 'Thiruvananthapuram'>
    """
    parsed = validate_request(TranslationRequest, request)
    spec = DialectTranslationSpec(sentence=parsed.sentence, slang_intensity=parsed.slang_intensity)

    with flow_errors("dialect translation", TRANSLATION_FAILED):
        logger.info(f"Translating sentence into district dialects (intensity={parsed.slang_intensity.value})")
        response = await send_spec(spec, model=model or settings.text_model, model_options=model_options)
        try:
            results = validate_translations(response.parsed.translations)
        except ValidationError as e:
            raise ModelInvocationError(f"Model returned an incomplete district list: {e}") from e

        if low := response.parsed.below_target():
            logger.warning(f"Meaning match below target for: {', '.join(item.district.value for item in low)}")

        return results
