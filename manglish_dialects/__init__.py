"""Manglish Dialects - Kerala district slang translation backed by a hosted LLM.

@public

Translates a Manglish (Latin-script Malayalam) sentence into the slang of all
14 Kerala districts, and offers reverse translation, cultural insights,
sentence analysis and text-to-speech. Every flow validates its input with
Pydantic, renders a typed prompt specification, calls an OpenAI-compatible
endpoint and validates the model's answer before returning it.

Quick Start:
    >>> from manglish_dialects import translate_dialects
    >>>
    >>> results = await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": "medium"})
    >>> for item in results:
    ...     print(item.district, item.slang, item.meaning_match_score)

Environment Variables:
    - OPENAI_BASE_URL: OpenAI-compatible endpoint (e.g. a LiteLLM proxy)
    - OPENAI_API_KEY: API key for the endpoint

Optional Environment Variables:
    - LMNR_PROJECT_API_KEY: Laminar (LMNR) API key for tracing
    - TEXT_MODEL, SPEECH_MODEL, SPEECH_VOICE: model selection
"""

from .exceptions import (
    ManglishDialectsError,
    ModelInvocationError,
    PromptError,
    PromptRenderError,
    UnexpectedError,
    ValidationError,
)
from .flows import (
    analyze_sentence,
    get_cultural_insights,
    reverse_translate,
    synthesize_speech,
    translate_dialects,
)
from .live import LatestOnlyRunner
from .llm import ModelOptions
from .logging import LoggingConfig, get_pipeline_logger, setup_logging
from .logging import get_pipeline_logger as get_logger
from .observability import initialize_observability
from .schemas import (
    DISTRICTS,
    AnalysisResult,
    CulturalInsightResult,
    District,
    DistrictResult,
    ReverseTranslationResult,
    SlangIntensity,
    SpeechResult,
)
from .settings import settings

__version__ = "0.1.0"

__all__ = [
    # Config/Settings
    "settings",
    # Logging
    "get_logger",
    "get_pipeline_logger",
    "LoggingConfig",
    "setup_logging",
    "initialize_observability",
    # Errors
    "ManglishDialectsError",
    "ModelInvocationError",
    "PromptError",
    "PromptRenderError",
    "UnexpectedError",
    "ValidationError",
    # Flows
    "analyze_sentence",
    "get_cultural_insights",
    "reverse_translate",
    "synthesize_speech",
    "translate_dialects",
    "LatestOnlyRunner",
    # Types
    "DISTRICTS",
    "AnalysisResult",
    "CulturalInsightResult",
    "District",
    "DistrictResult",
    "ModelOptions",
    "ReverseTranslationResult",
    "SlangIntensity",
    "SpeechResult",
]
