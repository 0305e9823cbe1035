import json
import logging
import re
from dataclasses import dataclass
from datetime import date
from typing import Any, Optional
import httpx
from config import Settings, get_settings




logger = logging.getLogger(__name__)

JSON_BLOCK = re.compile(r"\{[\s\S]*\}")


class NarrativeError(Exception):
    pass


class NarrativeUnavailableError(NarrativeError):
    """No API key configured"""


class NarrativeServiceError(NarrativeError):
    """The completion API could not be reached or answered with an error"""


@dataclass(frozen=True)
class NarrativeResult:
    kind: str  # structured, raw
    text: str
    data: Optional[dict[str, Any]] = None


def parse_narrative(text: str) -> NarrativeResult:
    """Pull the first JSON object out of a model reply, falling back to the raw text"""
    match = JSON_BLOCK.search(text or "")
    if match:
        try:
            data = json.loads(match.group(0))
        except ValueError:
            logger.warning("Narrative reply contains malformed JSON, returning raw text")
        else:
            if isinstance(data, dict):
                return NarrativeResult(kind="structured", text=text, data=data)
    return NarrativeResult(kind="raw", text=text)


def _age_on(birth: date | None, today: date) -> str:
    if birth is None:
        return "Not specified"
    years = today.year - birth.year - ((today.month, today.day) < (birth.month, birth.day))
    return str(years)


def build_application_prompt(application, today: date | None = None) -> str:
    today = today or date.today()
    return f"""Analyze this Youth Challenge Academy application and provide insights on the applicant's suitability, potential challenges, and recommendations for success:

Applicant: {application.first_name} {application.last_name}
Age: {_age_on(application.date_of_birth, today)} (born {application.date_of_birth})
Location: {application.city}, {application.state}
Preferred Campus: {application.preferred_campus}
Current School: {application.current_school or 'Not specified'}
Grade Level: {application.grade_level or 'Not specified'}

Reason for Applying:
{application.reason_for_applying or 'Not provided'}

Previous Challenges:
{application.previous_challenges or 'Not provided'}

Goals:
{application.goals or 'Not provided'}

Please provide:
1. Overall suitability assessment (1-10 scale)
2. Key strengths identified
3. Potential risk factors or challenges
4. Specific recommendations for success if accepted
5. Suggested mentorship focus areas

Format your response as a structured assessment suitable for staff review."""


def build_cadet_prompt(cadet) -> str:
    return f"""Generate insights and recommendations for this Youth Challenge Academy cadet's development:

Cadet: {cadet.first_name} {cadet.last_name}
Class: {cadet.class_number or 'Not assigned'}
Campus: {cadet.campus}
Status: {cadet.status}

Progress Metrics:
- Academic Progress: {cadet.academic_progress or 0}%
- Fitness Progress: {cadet.fitness_progress or 0}%
- Leadership Progress: {cadet.leadership_progress or 0}%
- Community Service Hours: {cadet.service_hours or 0}

Additional Notes:
{cadet.notes or 'No additional notes'}

Provide:
1. Overall development assessment
2. Areas of strength
3. Areas needing improvement
4. Specific action recommendations
5. Mentorship suggestions
6. Risk factors to monitor

Format as actionable insights for staff."""


class NarrativeClient:
    def __init__(self, settings: Settings, transport: httpx.AsyncBaseTransport | None = None):
        self._settings = settings
        self._client = httpx.AsyncClient(timeout=settings.narrative_timeout, transport=transport)

    @property
    def configured(self) -> bool:
        return bool(self._settings.narrative_api_key)

    async def aclose(self):
        await self._client.aclose()

    async def _complete(self, prompt: str, max_tokens: int | None = None, timeout: float | None = None) -> str | None:
        if not self.configured:
            raise NarrativeUnavailableError("AI analysis unavailable - API key not configured")

        payload = {
            "model": self._settings.narrative_model,
            "messages": [{"role": "user", "content": prompt}],
        }
        if max_tokens is not None:
            payload["max_tokens"] = max_tokens

        try:
            resp = await self._client.post(
                self._settings.narrative_api_url,
                json=payload,
                headers={"Authorization": f"Bearer {self._settings.narrative_api_key}"},
                timeout=timeout or self._settings.narrative_timeout,
            )
        except httpx.HTTPError as e:
            raise NarrativeServiceError(f"Narrative request failed: {e!r}") from e

        if resp.status_code >= 400:
            try:
                err = resp.json()
            except ValueError:
                err = resp.text
            logger.error("Narrative request failed: status=%s error=%s", resp.status_code, err)
            raise NarrativeServiceError(f"Narrative service answered {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as e:
            raise NarrativeServiceError("Narrative service returned a non-JSON body") from e

        choices = data.get("choices") or []
        if not choices:
            return None
        return (choices[0].get("message") or {}).get("content")

    async def analyze_application(self, application) -> NarrativeResult:
        """Staff-facing assessment of an intake application"""
        content = await self._complete(build_application_prompt(application))
        return parse_narrative(content or "Analysis could not be completed")

    async def generate_cadet_insights(self, cadet) -> NarrativeResult:
        """Development insights for an enrolled cadet"""
        content = await self._complete(build_cadet_prompt(cadet))
        return parse_narrative(content or "Insights could not be generated")

    async def ping(self) -> bool:
        if not self.configured:
            return False
        try:
            await self._complete("Hello", max_tokens=10, timeout=5)
            return True
        except NarrativeError as e:
            logger.warning("AI health check failed: %s", e)
            return False


async def get_narrative_client():
    client = NarrativeClient(get_settings())
    try:
        yield client
    finally:
        await client.aclose()
