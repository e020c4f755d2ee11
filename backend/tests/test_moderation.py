import json

import pytest
from pydantic import ValidationError

from backend.app.gateway.prompts import MODERATION_SCHEMA, MODERATION_SYSTEM
from backend.app.gateway.service import MODERATION_FAILED, MODERATION_UNAVAILABLE
from backend.app.models.moderation import ModerationResult


@pytest.mark.anyio
async def test_unavailable_returns_fixed_result(unavailable_gateway):
    result = await unavailable_gateway.moderate_content("I feel sad today")
    assert result.model_dump(by_alias=True) == {
        "isPositive": False,
        "reason": "Moderation service is currently unavailable.",
        "isSevere": False,
    }


@pytest.mark.anyio
async def test_valid_response_is_parsed(make_gateway):
    payload = {"isPositive": True, "reason": "Love this!", "isSevere": False}
    gateway, client = make_gateway(text="  " + json.dumps(payload) + "\n")
    result = await gateway.moderate_content("You all got this")
    assert result == ModerationResult(isPositive=True, reason="Love this!", isSevere=False)
    assert len(client.calls) == 1


@pytest.mark.anyio
async def test_request_carries_schema_and_prompt(make_gateway):
    gateway, client = make_gateway(text='{"isPositive": false, "reason": "r", "isSevere": true}')
    result = await gateway.moderate_content('he said "hi"')
    assert result.is_severe is True
    call = client.calls[0]
    assert call["model"] == "gemini-2.5-flash"
    assert call["contents"] == 'Analyze the following text: "he said "hi""'
    config = call["config"]
    assert config.system_instruction == MODERATION_SYSTEM
    assert config.response_mime_type == "application/json"
    assert config.response_schema == MODERATION_SCHEMA


@pytest.mark.anyio
@pytest.mark.parametrize(
    "text",
    [
        "not json at all",
        '{"isPositive": true, "reason": "ok"}',
        '{"isPositive": "true", "reason": "ok", "isSevere": false}',
        '{"isPositive": true, "reason": 3, "isSevere": false}',
        '{"isPositive": true, "reason": "ok", "isSevere": 1}',
        '{"isPositive": true, "reason": "ok", "isSevere": false, "extra": 1}',
        '{"is_positive": true, "reason": "ok", "is_severe": true}',
        "[]",
        "",
        None,
    ],
)
async def test_schema_violations_fall_back(make_gateway, text):
    gateway, client = make_gateway(text=text)
    result = await gateway.moderate_content("hello")
    assert result == MODERATION_FAILED
    assert result.is_severe is False
    assert len(client.calls) == 1


@pytest.mark.anyio
async def test_transport_error_falls_back_and_logs(make_gateway, caplog):
    gateway, client = make_gateway(error=ConnectionError("network down"))
    result = await gateway.moderate_content("I want to hurt myself tonight")
    assert result == MODERATION_FAILED
    assert result.is_severe is False
    assert "Error moderating content" in caplog.text


@pytest.mark.anyio
async def test_unavailable_result_is_distinct_from_failure(unavailable_gateway):
    result = await unavailable_gateway.moderate_content("")
    assert result == MODERATION_UNAVAILABLE
    assert result != MODERATION_FAILED


def test_snake_case_names_are_rejected():
    with pytest.raises(ValidationError):
        ModerationResult.model_validate_json('{"is_positive": true, "reason": "ok", "is_severe": true}')


@pytest.mark.anyio
async def test_generate_refuses_unavailable_handle(unavailable_gateway):
    with pytest.raises(RuntimeError, match="missing_api_key"):
        await unavailable_gateway._generate("hi", None)
