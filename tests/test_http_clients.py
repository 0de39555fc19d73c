"""Tests for the generative-model adapters."""

import asyncio
import json

import pytest

from diet_genius.adapters.gemini_structured_client import GeminiStructuredClient
from diet_genius.adapters.openai_structured_client import OpenAIStructuredClient
from diet_genius.domain.analysis import ImagePayload
from diet_genius.services.schemas import DIET_PLAN_SCHEMA, FOOD_ANALYSIS_SCHEMA
from tests.conftest import diet_plan_payload, food_analysis_payload


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str) -> None:
        self.responses = _FakeResponses(output_text)
        self.closed = False

    async def close(self) -> None:
        self.closed = True


class _FakeGeminiModels:
    def __init__(self, text: str | None) -> None:
        self.text = text
        self.last_payload: dict[str, object] | None = None

    async def generate_content(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"text": self.text})()


class _FakeGeminiAio:
    def __init__(self, text: str | None) -> None:
        self.models = _FakeGeminiModels(text)
        self.closed = False

    async def aclose(self) -> None:
        self.closed = True


class _FakeGenaiClient:
    def __init__(self, text: str | None) -> None:
        self.aio = _FakeGeminiAio(text)


def test_openai_client_sends_strict_schema_for_text_prompt() -> None:
    fake = _FakeOpenAI(json.dumps(diet_plan_payload()))
    client = OpenAIStructuredClient(client=fake, model="gpt-4.1-mini")

    result = asyncio.run(
        client.generate_json(
            prompt="Plan my day",
            schema=DIET_PLAN_SCHEMA,
            schema_name="diet_plan",
        )
    )

    assert result == diet_plan_payload()
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["model"] == "gpt-4.1-mini"
    assert payload["store"] is False
    assert "reasoning" not in payload
    assert payload["input"][0]["content"] == [
        {"type": "input_text", "text": "Plan my day"}
    ]
    text_format = payload["text"]["format"]
    assert text_format["type"] == "json_schema"
    assert text_format["name"] == "diet_plan"
    assert text_format["strict"] is True
    assert text_format["schema"] is DIET_PLAN_SCHEMA


def test_openai_client_inlines_image_and_reasoning() -> None:
    fake = _FakeOpenAI("  " + json.dumps(food_analysis_payload()) + "\n")
    client = OpenAIStructuredClient(
        client=fake, model="o4-mini", reasoning_effort="low", store=True
    )

    result = asyncio.run(
        client.generate_json(
            prompt="What is this?",
            schema=FOOD_ANALYSIS_SCHEMA,
            schema_name="food_analysis",
            image=ImagePayload(data=b"fake", mime_type="image/jpeg"),
        )
    )

    assert result["foodName"] == "Caesar salad"
    payload = fake.responses.last_payload
    assert payload["reasoning"] == {"effort": "low"}
    assert payload["store"] is True
    assert payload["input"][0]["content"][1] == {
        "type": "input_image",
        "image_url": "data:image/jpeg;base64,ZmFrZQ==",
    }


def test_openai_client_rejects_empty_output() -> None:
    client = OpenAIStructuredClient(client=_FakeOpenAI("   "), model="gpt-4.1-mini")

    with pytest.raises(RuntimeError):
        asyncio.run(
            client.generate_json(
                prompt="Plan my day",
                schema=DIET_PLAN_SCHEMA,
                schema_name="diet_plan",
            )
        )


def test_openai_client_propagates_invalid_json() -> None:
    client = OpenAIStructuredClient(
        client=_FakeOpenAI("Sorry, I can't help"), model="gpt-4.1-mini"
    )

    with pytest.raises(json.JSONDecodeError):
        asyncio.run(
            client.generate_json(
                prompt="Plan my day",
                schema=DIET_PLAN_SCHEMA,
                schema_name="diet_plan",
            )
        )


def test_openai_client_close() -> None:
    fake = _FakeOpenAI("{}")
    client = OpenAIStructuredClient(client=fake, model="gpt-4.1-mini")

    asyncio.run(client.close())

    assert fake.closed


def test_gemini_client_places_image_before_prompt() -> None:
    fake = _FakeGenaiClient(json.dumps(food_analysis_payload()))
    client = GeminiStructuredClient(client=fake, model="gemini-2.5-flash")

    result = asyncio.run(
        client.generate_json(
            prompt="What is this?",
            schema=FOOD_ANALYSIS_SCHEMA,
            schema_name="food_analysis",
            image=ImagePayload(data=b"png-bytes", mime_type="image/png"),
        )
    )

    assert result == food_analysis_payload()
    payload = fake.aio.models.last_payload
    assert payload is not None
    assert payload["model"] == "gemini-2.5-flash"
    image_part, text_part = payload["contents"]
    assert image_part.inline_data.mime_type == "image/png"
    assert image_part.inline_data.data == b"png-bytes"
    assert text_part.text == "What is this?"
    config = payload["config"]
    assert config.response_mime_type == "application/json"
    assert config.response_json_schema == FOOD_ANALYSIS_SCHEMA


def test_gemini_client_text_only_prompt() -> None:
    fake = _FakeGenaiClient(json.dumps(diet_plan_payload()))
    client = GeminiStructuredClient(client=fake, model="gemini-2.5-flash")

    asyncio.run(
        client.generate_json(
            prompt="Plan my day",
            schema=DIET_PLAN_SCHEMA,
            schema_name="diet_plan",
        )
    )

    contents = fake.aio.models.last_payload["contents"]
    assert len(contents) == 1
    assert contents[0].text == "Plan my day"


def test_gemini_client_rejects_empty_output() -> None:
    client = GeminiStructuredClient(client=_FakeGenaiClient(None), model="gemini")

    with pytest.raises(RuntimeError):
        asyncio.run(
            client.generate_json(
                prompt="Plan my day",
                schema=DIET_PLAN_SCHEMA,
                schema_name="diet_plan",
            )
        )


def test_gemini_client_close() -> None:
    fake = _FakeGenaiClient("{}")
    client = GeminiStructuredClient(client=fake, model="gemini-2.5-flash")

    asyncio.run(client.close())

    assert fake.aio.closed
