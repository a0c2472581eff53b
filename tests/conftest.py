"""Common test fixtures."""

from collections.abc import Iterator
from unittest.mock import MagicMock, patch

import pytest

from tests.support.helpers import install_fake_laminar, install_fake_openai


@pytest.fixture
def fake_openai() -> Iterator[MagicMock]:
    """Patch AsyncOpenAI in the llm client; yields the client object seen inside ``async with``."""
    with patch("manglish_dialects.llm.client.AsyncOpenAI") as mock_client_class:
        yield install_fake_openai(mock_client_class)


@pytest.fixture
def fake_laminar() -> Iterator[MagicMock]:
    """Patch Laminar in the llm client; yields the span opened for each call."""
    with patch("manglish_dialects.llm.client.Laminar") as mock_laminar:
        yield install_fake_laminar(mock_laminar)


@pytest.fixture
def no_sleep() -> Iterator[MagicMock]:
    """Skip retry delays."""
    with patch("manglish_dialects.llm.client.asyncio.sleep") as mock_sleep:
        yield mock_sleep
