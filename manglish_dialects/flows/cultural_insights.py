"""Cultural and linguistic notes about a district's dialect."""

from collections.abc import Mapping
from typing import Any

from manglish_dialects.llm import ModelOptions
from manglish_dialects.logging import get_pipeline_logger
from manglish_dialects.prompt_compiler import send_spec
from manglish_dialects.prompts import CulturalInsightSpec
from manglish_dialects.schemas import CulturalInsightRequest, CulturalInsightResult, validate_request
from manglish_dialects.settings import settings

from ._facade import flow_errors

logger = get_pipeline_logger(__name__)

CULTURAL_INSIGHTS_FAILED = "Failed to get cultural insights due to a server error."


async def get_cultural_insights(
    request: CulturalInsightRequest | Mapping[str, Any],
    *,
    model: str | None = None,
    model_options: ModelOptions | None = None,
) -> CulturalInsightResult:
    """Return a short insight and 3-4 popular phrases for ``request.district``.

    @public

    Raises:
        ValidationError: Unknown district. No model call is made.
        ModelInvocationError: The model failed or returned an unusable result.
        UnexpectedError: Any other internal fault.
    """
    parsed = validate_request(CulturalInsightRequest, request)
    spec = CulturalInsightSpec(district=parsed.district)

    with flow_errors("cultural insights", CULTURAL_INSIGHTS_FAILED):
        response = await send_spec(spec, model=model or settings.text_model, model_options=model_options)
        result = response.parsed
        if not 3 <= len(result.popular_phrases) <= 4:
            logger.warning(f"Expected 3-4 popular phrases for {parsed.district.value}, got {len(result.popular_phrases)}")
        return result
