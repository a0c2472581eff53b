"""Prompt for a short cultural note on a district's dialect."""

from pydantic import Field

from manglish_dialects.prompt_compiler import Guide, OutputRule, PromptSpec, Role, Rule
from manglish_dialects.schemas import CulturalInsightResult, District

from .components import JsonSchemaOnly


class CulturalExpert(Role):
    """Cultural insight persona."""

    text = "Keralan cultural and linguistic expert"


class ConciseInsight(Rule):
    """Length and content of the insight."""

    text = "Write a short paragraph (2-3 sentences) about the linguistic characteristics, history or cultural context of the district's dialect."


class PopularPhrases(Rule):
    """Phrase list content."""

    text = "List 3 or 4 unique or popular phrases or words from the district."


class PhraseMeaning(OutputRule):
    """Phrase gloss format."""

    text = "Follow every phrase with its standard Malayalam meaning in parentheses."


class CulturalInsightExample(Guide):
    """Worked example of a cultural insight."""

    template = "guides/cultural_insight_example.md"


class CulturalInsightSpec(PromptSpec[CulturalInsightResult]):
    """Give a brief, engaging insight into one district's dialect."""

    role = CulturalExpert
    task = "Provide cultural and linguistic insights for the given district, along with a few popular phrases."
    rules = (ConciseInsight, PopularPhrases)
    guides = (CulturalInsightExample,)
    output_rules = (PhraseMeaning, JsonSchemaOnly)

    district: District = Field(description="Input district")
