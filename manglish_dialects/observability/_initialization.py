"""Observability system initialization.

Provides ``initialize_observability()`` as the single entry point for
setting up Laminar.
"""

from lmnr import Instruments, Laminar

from manglish_dialects.logging import get_pipeline_logger
from manglish_dialects.settings import settings

logger = get_pipeline_logger(__name__)


def initialize_observability(project_api_key: str | None = None) -> bool:
    """Initialize Laminar tracing when a project key is configured.

    Disables automatic OpenAI instrumentation; the llm client opens its own
    spans. Returns True when Laminar was initialized.

    Multiple calls are safe (Laminar handles idempotency).
    """
    api_key = project_api_key if project_api_key is not None else settings.lmnr_project_api_key
    if not api_key:
        logger.debug("LMNR_PROJECT_API_KEY not set, tracing disabled")
        return False

    Laminar.initialize(
        project_api_key=api_key,
        disabled_instruments={Instruments.OPENAI},
        export_timeout_seconds=15,
    )
    logger.info("Laminar tracing initialized")
    return True
