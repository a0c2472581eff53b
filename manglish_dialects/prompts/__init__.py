"""Prompt specifications, one per text flow."""

from .cultural_insights import CulturalInsightSpec
from .dialect_translation import DialectTranslationSpec
from .reverse_translation import ReverseTranslationSpec
from .sentence_analysis import SentenceAnalysisSpec

__all__ = [
    "CulturalInsightSpec",
    "DialectTranslationSpec",
    "ReverseTranslationSpec",
    "SentenceAnalysisSpec",
]
