"""Latest-input-wins wrapper for keystroke-driven calls such as live analysis.

Example:
    >>> from manglish_dialects.flows import analyze_sentence
    >>> live = LatestOnlyRunner(lambda text: analyze_sentence({"sentence": text}), debounce_seconds=0.5)
    >>> result = await live.submit("Enda gadi")  # None if a newer submit() arrived meanwhile
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from manglish_dialects.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)

T = TypeVar("T")
R = TypeVar("R")


class LatestOnlyRunner(Generic[T, R]):
    """Run an async call per submission and deliver only the newest submission's result.

    Every ``submit()`` bumps a generation counter. A submission whose
    generation is no longer current when its debounce delay ends is dropped
    without calling ``func``; one that goes stale while ``func`` runs has its
    result (or failure) discarded. In-flight calls are never cancelled.
    """

    def __init__(self, func: Callable[[T], Awaitable[R]], *, debounce_seconds: float = 0.0) -> None:
        if debounce_seconds < 0:
            raise ValueError("debounce_seconds must not be negative")
        self._func = func
        self._debounce_seconds = debounce_seconds
        self._generation = 0
        self.latest: R | None = None

    @property
    def generation(self) -> int:
        """Number of submissions so far."""
        return self._generation

    def _is_current(self, generation: int) -> bool:
        return generation == self._generation

    async def submit(self, value: T) -> R | None:
        """Run ``func(value)`` and return its result, or None if superseded.

        Raises whatever ``func`` raises, unless the submission was superseded.
        """
        self._generation += 1
        generation = self._generation

        if self._debounce_seconds:
            await asyncio.sleep(self._debounce_seconds)
            if not self._is_current(generation):
                logger.debug(f"Submission {generation} superseded before start")
                return None

        try:
            result = await self._func(value)
        except Exception:
            if self._is_current(generation):
                raise
            logger.debug(f"Discarding failure of superseded submission {generation}")
            return None

        if not self._is_current(generation):
            logger.debug(f"Discarding result of superseded submission {generation}")
            return None

        self.latest = result
        return result
