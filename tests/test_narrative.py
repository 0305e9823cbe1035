import json
from datetime import date
from types import SimpleNamespace
import httpx
import pytest
from config import Settings
from utils.narrative import (
    NarrativeClient,
    NarrativeServiceError,
    NarrativeUnavailableError,
    build_application_prompt,
    build_cadet_prompt,
    parse_narrative,
)




def application_record(**fields):
    record = dict(
        first_name="Nalu",
        last_name="Keawe",
        date_of_birth=date(2008, 9, 30),
        city="Honolulu",
        state="HI",
        preferred_campus="oahu",
        current_school=None,
        grade_level="10",
        reason_for_applying="Wants structure",
        previous_challenges=None,
        goals="Finish high school",
    )
    record.update(fields)
    return SimpleNamespace(**record)


def cadet_record(**fields):
    record = dict(
        first_name="Keoni",
        last_name="Kahale",
        class_number=61,
        campus="hilo",
        status="active",
        academic_progress=72.5,
        fitness_progress=None,
        leadership_progress=64,
        service_hours=12,
        notes=None,
    )
    record.update(fields)
    return SimpleNamespace(**record)


def completion(content):
    return httpx.Response(200, json={"choices": [{"message": {"content": content}}]})


def make_client(handler, api_key="test-key"):
    settings = Settings(narrative_api_key=api_key, narrative_api_url="https://llm.test/v1/chat/completions")
    return NarrativeClient(settings, transport=httpx.MockTransport(handler))


class TestParseNarrative:
    def test_embedded_json(self):
        result = parse_narrative('Here you go:\n{"suitability": "high", "score": 8}\nThanks')
        assert result.kind == "structured"
        assert result.data == {"suitability": "high", "score": 8}

    def test_plain_text(self):
        result = parse_narrative("The applicant shows strong motivation.")
        assert result.kind == "raw"
        assert result.data is None
        assert result.text == "The applicant shows strong motivation."

    def test_malformed_json_falls_back_to_raw(self):
        result = parse_narrative("{not really json}")
        assert result.kind == "raw"
        assert result.text == "{not really json}"


class TestPrompts:
    def test_application_prompt(self):
        prompt = build_application_prompt(application_record(), today=date(2026, 10, 17))

        assert "Applicant: Nalu Keawe" in prompt
        assert "Age: 18" in prompt
        assert "Current School: Not specified" in prompt
        assert "Wants structure" in prompt

    def test_cadet_prompt_defaults_missing_progress(self):
        prompt = build_cadet_prompt(cadet_record())

        assert "Cadet: Keoni Kahale" in prompt
        assert "Fitness Progress: 0%" in prompt
        assert "No additional notes" in prompt


class TestNarrativeClient:
    async def test_missing_key(self):
        client = make_client(lambda request: completion("unused"), api_key="")
        assert not client.configured
        with pytest.raises(NarrativeUnavailableError):
            await client.generate_cadet_insights(cadet_record())
        await client.aclose()

    async def test_structured_reply(self):
        seen = {}

        def handler(request):
            seen["auth"] = request.headers["Authorization"]
            seen["body"] = json.loads(request.content)
            return completion('{"strengths": ["discipline"]}')

        client = make_client(handler)
        result = await client.analyze_application(application_record())
        await client.aclose()

        assert seen["auth"] == "Bearer test-key"
        assert seen["body"]["messages"][0]["role"] == "user"
        assert result.kind == "structured"
        assert result.data == {"strengths": ["discipline"]}

    async def test_empty_reply_uses_fallback_text(self):
        client = make_client(lambda request: httpx.Response(200, json={"choices": []}))
        result = await client.analyze_application(application_record())
        await client.aclose()

        assert result.kind == "raw"
        assert result.text == "Analysis could not be completed"

    async def test_upstream_error(self):
        client = make_client(lambda request: httpx.Response(502, json={"error": "bad gateway"}))
        with pytest.raises(NarrativeServiceError):
            await client.generate_cadet_insights(cadet_record())
        await client.aclose()

    async def test_ping(self):
        ok = make_client(lambda request: completion("Hi"))
        failing = make_client(lambda request: httpx.Response(500))
        unconfigured = make_client(lambda request: completion("Hi"), api_key="")

        assert await ok.ping() is True
        assert await failing.ping() is False
        assert await unconfigured.ping() is False

        for client in (ok, failing, unconfigured):
            await client.aclose()
