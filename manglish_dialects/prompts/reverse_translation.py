"""Prompt for converting district slang back to standard Manglish."""

from pydantic import Field

from manglish_dialects.prompt_compiler import Guide, PromptSpec, Role, Rule
from manglish_dialects.schemas import District, ReverseTranslationResult

from .components import JsonSchemaOnly, ManglishOnly, PreserveProperNouns


class DialectExpert(Role):
    """Reverse translation persona."""

    text = "AI expert in Malayalam dialects"


class IdentifySlang(Rule):
    """Ground the conversion in the named district."""

    text = "Recognize the unique words, phrases and grammar of the given district's slang before converting."


class FormalStandard(Rule):
    """Target register."""

    text = """
        Produce formal, "bookish" Malayalam that anyone from Kerala could understand, whatever their native dialect.
        Keep the original meaning and intent intact.
    """


class ReverseTranslationExample(Guide):
    """Worked example of a reverse translation."""

    template = "guides/reverse_translation_example.md"


class ReverseTranslationSpec(PromptSpec[ReverseTranslationResult]):
    """Convert a sentence in a district's slang to standard, formal Manglish."""

    role = DialectExpert
    task = "Convert the slang sentence from the given district back into standard, formal Manglish."
    rules = (IdentifySlang, FormalStandard, PreserveProperNouns, ManglishOnly)
    guides = (ReverseTranslationExample,)
    output_rules = (JsonSchemaOnly,)

    slang_sentence: str = Field(description="Input sentence (district slang)")
    district: District = Field(description="Input district")
