"""Speech synthesis for a piece of Manglish text."""

from collections.abc import Mapping
from typing import Any

from manglish_dialects.llm import ModelOptions, generate_speech
from manglish_dialects.schemas import SpeechRequest, SpeechResult, validate_request
from manglish_dialects.settings import settings

from ._facade import flow_errors

SPEECH_FAILED = "Failed to generate speech due to a server error."

AUDIO_FORMAT = "mp3"


async def synthesize_speech(
    request: SpeechRequest | Mapping[str, Any],
    *,
    model: str | None = None,
    voice: str | None = None,
    model_options: ModelOptions | None = None,
) -> SpeechResult:
    """Synthesize ``request.text`` as MP3 audio and return it as a data URI.

    @public

    The text is sent verbatim; voice and format are fixed by configuration.

    Raises:
        ValidationError: The text is missing or empty. No model call is made.
        ModelInvocationError: The request failed or no audio was returned.
        UnexpectedError: Any other internal fault.
    """
    parsed = validate_request(SpeechRequest, request)

    with flow_errors("text to speech", SPEECH_FAILED):
        speech = await generate_speech(
            parsed.text,
            model=model or settings.speech_model,
            voice=voice or settings.speech_voice,
            audio_format=AUDIO_FORMAT,
            model_options=model_options,
            purpose="synthesize_speech",
        )
        return SpeechResult(audio=speech.data_uri)
