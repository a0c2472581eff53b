"""Per-call configuration for model requests."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict


class ModelOptions(BaseModel):
    """Options for a single model call.

    Retry fields are consumed by the client and never forwarded to the API.
    ``retries`` defaults to a single attempt: flows do not retry on their own,
    callers opt into bounded retries explicitly.

    Example:
        >>> options = ModelOptions(temperature=0.2, retries=3, retry_delay_seconds=2)
        >>> options.to_openai_completion_kwargs()["temperature"]
        0.2
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    system_prompt: str | None = None
    temperature: float | None = None
    max_completion_tokens: int | None = None
    reasoning_effort: Literal["low", "medium", "high"] | None = None
    stop: str | list[str] | None = None
    timeout: float | None = None
    retries: int = 1
    retry_delay_seconds: float = 2
    response_format: type[BaseModel] | None = None
    usage_tracking: bool = True
    user: str | None = None
    extra_body: dict[str, Any] | None = None

    def to_openai_completion_kwargs(self) -> dict[str, Any]:
        """Convert options to keyword arguments for ``chat.completions``."""
        kwargs: dict[str, Any] = {}

        if self.timeout is not None:
            kwargs["timeout"] = self.timeout
        if self.temperature is not None:
            kwargs["temperature"] = self.temperature
        if self.max_completion_tokens is not None:
            kwargs["max_completion_tokens"] = self.max_completion_tokens
        if self.reasoning_effort is not None:
            kwargs["reasoning_effort"] = self.reasoning_effort
        if self.stop is not None:
            kwargs["stop"] = self.stop
        if self.response_format is not None:
            kwargs["response_format"] = self.response_format
        if self.user is not None:
            kwargs["user"] = self.user

        extra_body: dict[str, Any] = dict(self.extra_body or {})
        if self.usage_tracking:
            extra_body["usage"] = {"include": True}
        kwargs["extra_body"] = extra_body

        return kwargs
