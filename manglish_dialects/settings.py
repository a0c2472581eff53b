"""Core configuration settings for Manglish Dialects.

@public

Centralizes the model endpoint credentials and the model identifiers used by
the flows. Settings are loaded from environment variables with .env file
support via pydantic-settings.

Environment variables:
    OPENAI_BASE_URL: OpenAI-compatible endpoint (e.g. a LiteLLM proxy at http://localhost:4000)
    OPENAI_API_KEY: API key for the endpoint
    LMNR_PROJECT_API_KEY: Laminar project key for tracing
    TEXT_MODEL: Model used by the translation, insight and analysis flows
    SPEECH_MODEL: Model used by the text-to-speech flow
    SPEECH_VOICE: Prebuilt voice name for speech synthesis

Configuration precedence:
    1. Environment variables (highest priority)
    2. .env file in current directory
    3. Default values

Example:
    >>> from manglish_dialects.settings import settings
    >>> print(settings.openai_base_url)
    >>> print(settings.text_model)

Note:
    Settings are loaded once at module import and frozen. The process must be
    restarted to pick up changes to environment variables or the .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Configuration for the model endpoint and flow models.

    @public

    Attributes:
        openai_base_url: Endpoint URL for the OpenAI-compatible API.
        openai_api_key: Authentication key for the endpoint.
        lmnr_project_api_key: Laminar (LMNR) project API key. Tracing is
                              disabled when empty.
        text_model: Model identifier for the JSON-producing flows.
        speech_model: Model identifier for speech synthesis.
        speech_voice: Prebuilt voice used for speech synthesis.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # LLM API Configuration
    openai_base_url: str = ""
    openai_api_key: str = ""

    # Observability
    lmnr_project_api_key: str = ""

    # Flow models
    text_model: str = "gemini-2.5-flash"
    speech_model: str = "gemini-2.5-flash-preview-tts"
    speech_voice: str = "Algenib"


settings = Settings()
"""Global settings instance for the entire package.

@public
"""
