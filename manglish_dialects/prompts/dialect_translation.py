"""Prompt for translating a Manglish sentence into all 14 district slangs."""

from pydantic import Field

from manglish_dialects.prompt_compiler import Guide, OutputRule, PromptSpec, Role, Rule
from manglish_dialects.schemas import DISTRICTS, MEANING_MATCH_TARGET, DialectTranslation, SlangIntensity

from .components import JsonSchemaOnly, ManglishOnly, PreserveProperNouns

_DISTRICT_ORDER = "\n".join(f"{index}. {district.value}" for index, district in enumerate(DISTRICTS, 1))


class DialectConverter(Role):
    """Dialect translation persona."""

    text = "AI Malayalam dialect converter specializing in Manglish (Malayalam written in Latin script)"


class PreserveMeaning(Rule):
    """Meaning preservation."""

    text = "Keep 100% of the original meaning, intent and tone in every district's version."


class AuthenticDialect(Rule):
    """Dialect accuracy."""

    text = "Use vocabulary, idioms, sentence particles and phrasing that are authentic to each district's native slang."


class NaturalPhrasing(Rule):
    """Tone of the generated slang."""

    text = "Make every version sound natural to a native speaker. Slight stylistic uniformity across districts is acceptable."


class ScoreMeaningMatch(Rule):
    """Self-reported meaning fidelity."""

    text = f"""
        For each version, estimate meaningMatchScore (0-100): how close the slang version is to the original meaning.
        Target a score of at least {MEANING_MATCH_TARGET}; rephrase any version that would score lower.
    """


class SlangIntensityLevels(Guide):
    """How each slang intensity level changes the output."""

    template = "guides/slang_intensity_levels.md"


class DialectTranslationExample(Guide):
    """Worked example of the expected output."""

    template = "guides/dialect_translation_example.md"


class OneEntryPerDistrict(OutputRule):
    """Completeness and order of the result list."""

    text = f"""
        Return exactly {len(DISTRICTS)} entries in "translations", one per district, in the order listed in the task.
        Spell every district name exactly as listed.
    """


class DialectTranslationSpec(PromptSpec[DialectTranslation]):
    """Convert one Manglish sentence into the slang of every Kerala district."""

    role = DialectConverter
    task = (
        f"Convert the input sentence into native-sounding slang for all {len(DISTRICTS)} districts of Kerala, "
        "using the requested slang intensity.\n\n"
        "Order of districts:\n" + _DISTRICT_ORDER
    )
    rules = (PreserveMeaning, AuthenticDialect, ManglishOnly, PreserveProperNouns, NaturalPhrasing, ScoreMeaningMatch)
    guides = (SlangIntensityLevels, DialectTranslationExample)
    output_rules = (OneEntryPerDistrict, JsonSchemaOnly)

    sentence: str = Field(description="Input sentence (Manglish)")
    slang_intensity: SlangIntensity = Field(description="Slang intensity")
