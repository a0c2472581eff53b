"""Prompt for classifying which dialect a sentence is written in."""

from pydantic import Field

from manglish_dialects.prompt_compiler import Guide, OutputRule, PromptSpec, Role, Rule
from manglish_dialects.schemas import DISTRICTS, AnalysisResult

from .components import JsonSchemaOnly

_DISTRICT_NAMES = ", ".join(district.value for district in DISTRICTS)


class DialectAnalyst(Role):
    """Sentence analysis persona."""

    text = "expert in the regional dialects of Malayalam written in Manglish"


class ClassifyDialect(Rule):
    """Dialect label choices."""

    text = f"""
        Identify the district dialect the sentence is written in. Choose one of: {_DISTRICT_NAMES}.
        If the sentence carries no district markers, use "Standard Malayalam".
    """


class StandardFlag(Rule):
    """Meaning of the standard flag."""

    text = "Set isStandard to true only when the sentence is standard, dialect-neutral Manglish with no slang."


class ConfidenceScore(OutputRule):
    """Confidence format."""

    text = "Report confidence as an integer from 0 to 100."


class SentenceAnalysisExample(Guide):
    """Worked examples of sentence analysis."""

    template = "guides/sentence_analysis_example.md"


class SentenceAnalysisSpec(PromptSpec[AnalysisResult]):
    """Classify the dialect of one Manglish sentence."""

    role = DialectAnalyst
    task = "Analyze the input sentence and classify its dialect."
    rules = (ClassifyDialect, StandardFlag)
    guides = (SentenceAnalysisExample,)
    output_rules = (ConfidenceScore, JsonSchemaOnly)

    sentence: str = Field(description="Input sentence (Manglish)")
