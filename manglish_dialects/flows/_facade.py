"""Error boundary shared by the flow façades."""

from collections.abc import Iterator
from contextlib import contextmanager

from manglish_dialects.exceptions import ModelInvocationError, UnexpectedError
from manglish_dialects.logging import get_pipeline_logger

logger = get_pipeline_logger(__name__)


@contextmanager
def flow_errors(flow_name: str, failure_message: str) -> Iterator[None]:
    """Log any failure inside the block and re-raise it as a generic, user-safe error.

    Model failures become ModelInvocationError, everything else UnexpectedError.
    Both carry ``failure_message`` only; the original exception is logged with
    its traceback and suppressed from the chain.
    """
    try:
        yield
    except ModelInvocationError:
        logger.exception(f"Error in {flow_name} flow")
        raise ModelInvocationError(failure_message) from None
    except Exception:
        logger.exception(f"Unexpected error in {flow_name} flow")
        raise UnexpectedError(failure_message) from None
