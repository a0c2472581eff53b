"""Classify which district dialect a sentence is written in."""

from collections.abc import Mapping
from typing import Any

from manglish_dialects.llm import ModelOptions
from manglish_dialects.prompt_compiler import send_spec
from manglish_dialects.prompts import SentenceAnalysisSpec
from manglish_dialects.schemas import AnalysisRequest, AnalysisResult, validate_request
from manglish_dialects.settings import settings

from ._facade import flow_errors

ANALYSIS_FAILED = "Failed to analyze the sentence due to a server error."


async def analyze_sentence(
    request: AnalysisRequest | Mapping[str, Any],
    *,
    model: str | None = None,
    model_options: ModelOptions | None = None,
) -> AnalysisResult:
    """Return the dialect, standard-vs-slang flag and confidence for ``request.sentence``.

    @public

    Raises:
        ValidationError: The sentence is missing or empty. No model call is made.
        ModelInvocationError: The model failed or returned an unusable result.
        UnexpectedError: Any other internal fault.
    """
    parsed = validate_request(AnalysisRequest, request)
    spec = SentenceAnalysisSpec(sentence=parsed.sentence)

    with flow_errors("sentence analysis", ANALYSIS_FAILED):
        response = await send_spec(spec, model=model or settings.text_model, model_options=model_options)
        return response.parsed
