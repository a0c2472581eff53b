"""Tests for initialize_observability."""

from unittest.mock import MagicMock, patch

from lmnr import Instruments

from manglish_dialects.observability import initialize_observability


@patch("manglish_dialects.observability._initialization.Laminar")
def test_initializes_with_explicit_key(mock_laminar: MagicMock) -> None:
    assert initialize_observability("lmnr-key") is True

    mock_laminar.initialize.assert_called_once_with(
        project_api_key="lmnr-key",
        disabled_instruments={Instruments.OPENAI},
        export_timeout_seconds=15,
    )


@patch("manglish_dialects.observability._initialization.Laminar")
def test_uses_settings_key(mock_laminar: MagicMock) -> None:
    with patch("manglish_dialects.observability._initialization.settings") as mock_settings:
        mock_settings.lmnr_project_api_key = "from-env"
        assert initialize_observability() is True

    assert mock_laminar.initialize.call_args.kwargs["project_api_key"] == "from-env"


@patch("manglish_dialects.observability._initialization.Laminar")
def test_disabled_without_key(mock_laminar: MagicMock) -> None:
    assert initialize_observability("") is False
    mock_laminar.initialize.assert_not_called()
