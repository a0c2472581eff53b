"""Flow façades: one async entry point per capability.

Each façade validates its input, renders and sends the prompt, and turns any
internal failure into a generic per-flow error after logging the cause.
"""

from .cultural_insights import CULTURAL_INSIGHTS_FAILED, get_cultural_insights
from .dialect_translation import TRANSLATION_FAILED, translate_dialects
from .reverse_translation import REVERSE_TRANSLATION_FAILED, reverse_translate
from .sentence_analysis import ANALYSIS_FAILED, analyze_sentence
from .text_to_speech import SPEECH_FAILED, synthesize_speech

__all__ = [
    "ANALYSIS_FAILED",
    "CULTURAL_INSIGHTS_FAILED",
    "REVERSE_TRANSLATION_FAILED",
    "SPEECH_FAILED",
    "TRANSLATION_FAILED",
    "analyze_sentence",
    "get_cultural_insights",
    "reverse_translate",
    "synthesize_speech",
    "translate_dialects",
]
