"""Tests for translate_dialects."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from manglish_dialects.exceptions import ModelInvocationError, UnexpectedError, ValidationError
from manglish_dialects.flows import TRANSLATION_FAILED, translate_dialects
from manglish_dialects.llm import ModelOptions
from manglish_dialects.prompts import DialectTranslationSpec
from manglish_dialects.schemas import DISTRICTS, DialectTranslation, District, SlangIntensity, TranslationRequest
from manglish_dialects.settings import settings
from tests.support.helpers import create_test_structured_model_response, fake_json_completion, translation_payload


@pytest.fixture
def mock_send_spec():
    with patch("manglish_dialects.flows.dialect_translation.send_spec", new_callable=AsyncMock) as mock:
        yield mock


@pytest.fixture(autouse=True)
def quiet_loggers():
    with patch("manglish_dialects.flows._facade.logger"), patch("manglish_dialects.flows.dialect_translation.logger") as flow_logger:
        yield flow_logger


def _respond_with(mock: AsyncMock, payload: dict) -> None:
    mock.return_value = create_test_structured_model_response(DialectTranslation.model_validate(payload))


class TestTranslateDialects:
    @pytest.mark.asyncio
    async def test_returns_fourteen_results_in_order(self, mock_send_spec: AsyncMock) -> None:
        _respond_with(mock_send_spec, translation_payload())

        results = await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": "medium"})

        assert [item.district for item in results] == list(DISTRICTS)
        assert results[0].district == District.THIRUVANANTHAPURAM
        assert results[-1].district == District.KASARAGOD

    @pytest.mark.asyncio
    async def test_builds_spec_from_request(self, mock_send_spec: AsyncMock) -> None:
        _respond_with(mock_send_spec, translation_payload())
        options = ModelOptions(temperature=0.7)

        await translate_dialects(TranslationRequest(sentence="  Enthokke und  ", slang_intensity=SlangIntensity.HIGH), model_options=options)

        spec = mock_send_spec.call_args.args[0]
        assert isinstance(spec, DialectTranslationSpec)
        assert spec.sentence == "Enthokke und"
        assert spec.slang_intensity == SlangIntensity.HIGH
        assert mock_send_spec.call_args.kwargs["model"] == settings.text_model
        assert mock_send_spec.call_args.kwargs["model_options"] is options

    @pytest.mark.asyncio
    async def test_slider_index_accepted(self, mock_send_spec: AsyncMock) -> None:
        _respond_with(mock_send_spec, translation_payload())

        await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": 0}, model="gpt-5-mini")

        assert mock_send_spec.call_args.args[0].slang_intensity == SlangIntensity.LOW
        assert mock_send_spec.call_args.kwargs["model"] == "gpt-5-mini"

    @pytest.mark.asyncio
    async def test_permuted_output_is_reordered(self, mock_send_spec: AsyncMock) -> None:
        payload = translation_payload()
        payload["translations"].reverse()
        _respond_with(mock_send_spec, payload)

        results = await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": "low"})

        assert [item.district for item in results] == list(DISTRICTS)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"sentence": "", "slangIntensity": "medium"},
            {"sentence": "   ", "slangIntensity": "medium"},
            {"sentence": "Njan veetil aanu", "slangIntensity": "extreme"},
            {"sentence": "Njan veetil aanu"},
            {"slangIntensity": "low"},
        ],
    )
    async def test_invalid_request_never_reaches_model(self, mock_send_spec: AsyncMock, payload: dict) -> None:
        with pytest.raises(ValidationError):
            await translate_dialects(payload)
        mock_send_spec.assert_not_called()

    @pytest.mark.asyncio
    async def test_missing_district_is_a_model_failure(self, mock_send_spec: AsyncMock) -> None:
        payload = translation_payload()
        payload["translations"] = payload["translations"][:13]
        _respond_with(mock_send_spec, payload)

        with pytest.raises(ModelInvocationError) as exc_info:
            await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": "medium"})

        assert str(exc_info.value) == TRANSLATION_FAILED
        assert exc_info.value.__cause__ is None

    @pytest.mark.asyncio
    async def test_duplicate_district_is_a_model_failure(self, mock_send_spec: AsyncMock) -> None:
        payload = translation_payload()
        payload["translations"][1] = dict(payload["translations"][0])
        _respond_with(mock_send_spec, payload)

        with pytest.raises(ModelInvocationError, match=TRANSLATION_FAILED):
            await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": "medium"})

    @pytest.mark.asyncio
    async def test_model_error_is_replaced_by_generic_message(self, mock_send_spec: AsyncMock) -> None:
        mock_send_spec.side_effect = ModelInvocationError("401 invalid api key sk-secret")

        with pytest.raises(ModelInvocationError) as exc_info:
            await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": "medium"})

        assert str(exc_info.value) == TRANSLATION_FAILED
        assert "sk-secret" not in str(exc_info.value)
        assert exc_info.value.__suppress_context__ is True

    @pytest.mark.asyncio
    async def test_internal_error_is_unexpected(self, mock_send_spec: AsyncMock) -> None:
        mock_send_spec.side_effect = AttributeError("'NoneType' object has no attribute 'translations'")

        with pytest.raises(UnexpectedError, match=TRANSLATION_FAILED):
            await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": "medium"})

    @pytest.mark.asyncio
    async def test_low_scores_are_returned_and_logged(self, mock_send_spec: AsyncMock, quiet_loggers: MagicMock) -> None:
        payload = translation_payload(score=97)
        payload["translations"][4]["meaningMatchScore"] = 80
        _respond_with(mock_send_spec, payload)

        results = await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": "high"})

        assert results[4].meaning_match_score == 80
        quiet_loggers.warning.assert_called_once()
        assert "Kottayam" in quiet_loggers.warning.call_args.args[0]


class TestTranslateDialectsEndToEnd:
    @pytest.mark.asyncio
    async def test_through_fake_endpoint(self, fake_openai: MagicMock, fake_laminar: MagicMock) -> None:
        fake_openai.chat.completions.parse.return_value = fake_json_completion(translation_payload("Njan veetil aanu"))

        results = await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": "medium"})

        assert len(results) == 14
        assert results[0].district == District.THIRUVANANTHAPURAM
        assert results[-1].district == District.KASARAGOD
        assert all(0 <= item.meaning_match_score <= 100 for item in results)

        kwargs = fake_openai.chat.completions.parse.call_args.kwargs
        assert kwargs["response_format"] is DialectTranslation
        prompt = kwargs["messages"][0]["content"]
        assert "```text\nNjan veetil aanu\n```" in prompt
        assert "```text\nmedium\n```" in prompt

    @pytest.mark.asyncio
    async def test_endpoint_failure(self, fake_openai: MagicMock, fake_laminar: MagicMock) -> None:
        fake_openai.chat.completions.parse.side_effect = RuntimeError("502 Bad Gateway")

        with pytest.raises(ModelInvocationError) as exc_info:
            await translate_dialects({"sentence": "Njan veetil aanu", "slangIntensity": "medium"})

        assert str(exc_info.value) == "Failed to get dialect translations due to a server error."
