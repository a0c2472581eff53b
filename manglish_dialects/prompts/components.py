"""Prompt components shared by several flows."""

from manglish_dialects.prompt_compiler import OutputRule, Rule


class ManglishOnly(Rule):
    """Latin-script output constraint."""

    text = "Write Malayalam in Latin script (Manglish) only. Never output Malayalam script or any other script."


class PreserveProperNouns(Rule):
    """Proper nouns and fixed tokens stay untouched."""

    text = """
        Do not alter person names, place names, numbers or embedded English words.
        Copy them exactly as they appear in the input.
    """


class JsonSchemaOnly(OutputRule):
    """Structured output constraint."""

    text = "Respond with a single JSON object that matches the response schema exactly. Add no commentary."
