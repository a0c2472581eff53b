"""Request and response models for every flow.

@public

The same models validate caller input before a prompt is rendered and the
model's JSON output before it reaches the caller. Python attributes are
snake_case; the wire form (and the JSON schema sent to the model) uses the
camelCase names of the original server actions, e.g. ``slangIntensity`` and
``meaningMatchScore``. Both spellings are accepted on input.

Example:
    >>> request = validate_request(TranslationRequest, {"sentence": "Njan veetil aanu", "slangIntensity": "medium"})
    >>> request.slang_intensity
    <SlangIntensity.MEDIUM: 'medium'>
"""

from collections import Counter
from collections.abc import Mapping, Sequence
from enum import StrEnum
from typing import Annotated, Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StringConstraints, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from manglish_dialects.exceptions import ValidationError

MEANING_MATCH_TARGET = 95


class District(StrEnum):
    """The 14 districts of Kerala, in north-bound canonical order."""

    THIRUVANANTHAPURAM = "Thiruvananthapuram"
    KOLLAM = "Kollam"
    PATHANAMTHITTA = "Pathanamthitta"
    ALAPPUZHA = "Alappuzha"
    KOTTAYAM = "Kottayam"
    IDUKKI = "Idukki"
    ERNAKULAM = "Ernakulam"
    THRISSUR = "Thrissur"
    PALAKKAD = "Palakkad"
    MALAPPURAM = "Malappuram"
    KOZHIKODE = "Kozhikode"
    WAYANAD = "Wayanad"
    KANNUR = "Kannur"
    KASARAGOD = "Kasaragod"

    @classmethod
    def _missing_(cls, value: object) -> "District | None":
        if isinstance(value, str):
            key = value.strip().casefold()
            for member in cls:
                if member.value.casefold() == key:
                    return member
        return None


DISTRICTS: tuple[District, ...] = tuple(District)
"""Canonical district order used for prompts and for ordering results."""


class SlangIntensity(StrEnum):
    """How far a translation departs from formal Malayalam."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


_INTENSITY_BY_INDEX = dict(enumerate(SlangIntensity))

NonEmptyText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Score = Annotated[int, Field(ge=0, le=100)]


class _Schema(BaseModel):
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


# ---------------------------------------------------------------------------
# Requests
# ---------------------------------------------------------------------------


class TranslationRequest(_Schema):
    """Input for ``translate_dialects``."""

    sentence: NonEmptyText = Field(description="The sentence to translate into Malayalam dialects (in Manglish).")
    slang_intensity: SlangIntensity = Field(description="The intensity of slang to use in the translation.")

    @field_validator("slang_intensity", mode="before")
    @classmethod
    def _intensity_from_slider(cls, value: Any) -> Any:
        # Slider positions 0..2 map onto low/medium/high; anything else is left for enum validation.
        if isinstance(value, int) and not isinstance(value, bool):
            return _INTENSITY_BY_INDEX.get(value, value)
        return value


class AnalysisRequest(_Schema):
    """Input for ``analyze_sentence``."""

    sentence: NonEmptyText = Field(description="The Manglish sentence to analyze.")


class ReverseTranslationRequest(_Schema):
    """Input for ``reverse_translate``."""

    slang_sentence: NonEmptyText = Field(description="The sentence in a specific Malayalam dialect (Manglish).")
    district: District = Field(description="The district the slang belongs to.")


class CulturalInsightRequest(_Schema):
    """Input for ``get_cultural_insights``."""

    district: District = Field(description="The name of the Kerala district.")


class SpeechRequest(_Schema):
    """Input for ``synthesize_speech``."""

    text: NonEmptyText = Field(description="The text to be converted to speech.")


# ---------------------------------------------------------------------------
# Results
# ---------------------------------------------------------------------------


class DistrictResult(_Schema):
    """One district's rendering of the input sentence."""

    district: District = Field(description="The district name.")
    slang: str = Field(description="The translated sentence in the district's dialect.")
    meaning_match_score: Score = Field(description="A score (0-100) estimating how close the slang version is to the original meaning.")


class DialectTranslation(_Schema):
    """Structured output of the dialect translation prompt."""

    translations: list[DistrictResult] = Field(description="One entry per district, in the requested district order.")

    def below_target(self, threshold: int = MEANING_MATCH_TARGET) -> list[DistrictResult]:
        """Entries whose self-reported meaning score is under ``threshold``."""
        return [item for item in self.translations if item.meaning_match_score < threshold]


class AnalysisResult(_Schema):
    """Dialect classification of a single sentence."""

    dialect: str = Field(description="The district dialect the sentence belongs to, or 'Standard Malayalam'.")
    is_standard: bool = Field(description="True when the sentence is standard, dialect-neutral Manglish.")
    confidence: Score = Field(description="Confidence (0-100) in the classification.")


class ReverseTranslationResult(_Schema):
    """Standard Manglish rendering of a dialect sentence."""

    standard_sentence: str = Field(description="The sentence translated back to standard, formal Manglish.")


class CulturalInsightResult(_Schema):
    """Short cultural note about a district's dialect."""

    insight: str = Field(description="A brief, interesting cultural or linguistic insight about the dialect of the specified district.")
    popular_phrases: list[str] = Field(
        description="A list of 3-4 popular or unique phrases from the district, with their standard Malayalam meaning in parentheses."
    )


class SpeechResult(_Schema):
    """Synthesized speech for the requested text."""

    audio: str = Field(description="The generated audio as a Base64-encoded MP3 data URI.")

    @field_validator("audio")
    @classmethod
    def _require_audio_data_uri(cls, value: str) -> str:
        if not value.startswith("data:audio/") or ";base64," not in value:
            raise ValueError("audio must be a base64 data URI with an audio/* media type")
        return value


# ---------------------------------------------------------------------------
# Validation helpers
# ---------------------------------------------------------------------------

M = TypeVar("M", bound=BaseModel)


def _field_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "__root__"


def to_validation_error(model_cls: type[BaseModel], error: PydanticValidationError) -> ValidationError:
    """Convert a pydantic error into the package ValidationError."""
    errors = tuple((_field_path(item["loc"]), item["msg"]) for item in error.errors())
    details = "; ".join(f"{field}: {message}" for field, message in errors)
    return ValidationError(f"Invalid {model_cls.__name__}: {details}", errors)


def validate_request(model_cls: type[M], payload: M | Mapping[str, Any]) -> M:
    """Validate ``payload`` against ``model_cls``.

    Instances of ``model_cls`` are returned unchanged.

    Raises:
        ValidationError: Listing every violated field constraint.
    """
    if isinstance(payload, model_cls):
        return payload
    try:
        return model_cls.model_validate(payload)
    except PydanticValidationError as e:
        raise to_validation_error(model_cls, e) from None


def validate_translations(results: Sequence[DistrictResult]) -> list[DistrictResult]:
    """Check that ``results`` cover every district exactly once and return them in canonical order.

    Raises:
        ValidationError: If a district is missing or repeated.
    """
    counts = Counter(item.district for item in results)
    errors: list[tuple[str, str]] = []

    for district, count in counts.items():
        if count > 1:
            errors.append(("district", f"{district.value} appears {count} times"))
    for district in DISTRICTS:
        if district not in counts:
            errors.append(("district", f"{district.value} is missing"))

    if errors:
        details = "; ".join(message for _, message in errors)
        raise ValidationError(f"Expected exactly one result per district ({len(DISTRICTS)}): {details}", tuple(errors))

    position = {district: index for index, district in enumerate(DISTRICTS)}
    return sorted(results, key=lambda item: position[item.district])


__all__ = [
    "DISTRICTS",
    "MEANING_MATCH_TARGET",
    "AnalysisRequest",
    "AnalysisResult",
    "CulturalInsightRequest",
    "CulturalInsightResult",
    "DialectTranslation",
    "District",
    "DistrictResult",
    "ReverseTranslationRequest",
    "ReverseTranslationResult",
    "SlangIntensity",
    "SpeechRequest",
    "SpeechResult",
    "TranslationRequest",
    "to_validation_error",
    "validate_request",
    "validate_translations",
]
