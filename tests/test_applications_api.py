from conftest import application_payload
from main import app
from utils.narrative import NarrativeResult, NarrativeServiceError, get_narrative_client




class FailingNarrative:
    async def analyze_application(self, application):
        raise NarrativeServiceError("Narrative service answered 502")


class EchoNarrative:
    async def analyze_application(self, application):
        return NarrativeResult(kind="raw", text=f"Assessment for {application.first_name}")


class TestApplicationsApi:
    async def test_public_submission_is_pending(self, client):
        response = await client.post("/applications", json=application_payload(status="approved"))

        assert response.status_code == 201
        body = response.json()
        assert body["status"] == "pending"
        assert body["reviewedBy"] is None
        assert body["submittedAt"]

    async def test_submission_validated(self, client):
        payload = application_payload()
        del payload["parentGuardianName"]

        response = await client.post("/applications", json=payload)

        assert response.status_code == 422

    async def test_list_filters(self, client, auth_headers):
        await client.post("/applications", json=application_payload(firstName="A"))
        await client.post("/applications", json=application_payload(firstName="B", preferredCampus="hilo"))

        response = await client.get("/applications", headers=auth_headers)
        assert [a["firstName"] for a in response.json()] == ["A"]

        response = await client.get("/applications", params={"campus": "hilo"}, headers=auth_headers)
        assert [a["firstName"] for a in response.json()] == ["B"]

        response = await client.get("/applications", params={"status": "approved"}, headers=auth_headers)
        assert response.json() == []

    async def test_list_requires_session(self, client):
        response = await client.get("/applications")
        assert response.status_code == 401

    async def test_review_stamps_reviewer(self, client, auth_headers):
        created = (await client.post("/applications", json=application_payload())).json()

        response = await client.patch(
            f"/applications/{created['id']}",
            json={"status": "approved", "reviewNotes": "Strong interview"},
            headers=auth_headers,
        )

        assert response.status_code == 200
        reviewed = response.json()
        assert reviewed["status"] == "approved"
        assert reviewed["reviewNotes"] == "Strong interview"
        assert reviewed["reviewedBy"] == "idp|oahu-1"
        assert reviewed["reviewedAt"]

        activities = (await client.get("/activities", headers=auth_headers)).json()
        assert [a["title"] for a in activities] == ["Application Reviewed", "New Application Received"]
        assert activities[0]["type"] == "task_completed"

    async def test_notes_only_review_adds_no_activity(self, client, auth_headers):
        created = (await client.post("/applications", json=application_payload())).json()

        await client.patch(f"/applications/{created['id']}", json={"reviewNotes": "Call back"}, headers=auth_headers)

        activities = (await client.get("/activities", headers=auth_headers)).json()
        assert [a["title"] for a in activities] == ["New Application Received"]

    async def test_review_missing_application(self, client, auth_headers):
        response = await client.patch("/applications/999", json={"status": "denied"}, headers=auth_headers)

        assert response.status_code == 404
        assert response.json()["detail"] == "Application not found"

    async def test_review_rejects_unknown_status(self, client, auth_headers):
        created = (await client.post("/applications", json=application_payload())).json()

        response = await client.patch(f"/applications/{created['id']}", json={"status": "maybe"}, headers=auth_headers)

        assert response.status_code == 422

    async def test_analyze(self, client, auth_headers):
        app.dependency_overrides[get_narrative_client] = EchoNarrative
        created = (await client.post("/applications", json=application_payload())).json()

        response = await client.post(f"/applications/{created['id']}/analyze", headers=auth_headers)

        assert response.status_code == 200
        assert response.json() == {"kind": "raw", "text": "Assessment for Nalu", "data": None}

    async def test_analyze_upstream_failure(self, client, auth_headers):
        app.dependency_overrides[get_narrative_client] = FailingNarrative
        created = (await client.post("/applications", json=application_payload())).json()

        response = await client.post(f"/applications/{created['id']}/analyze", headers=auth_headers)

        assert response.status_code == 500

    async def test_analyze_missing_application(self, client, auth_headers):
        app.dependency_overrides[get_narrative_client] = EchoNarrative

        response = await client.post("/applications/999/analyze", headers=auth_headers)

        assert response.status_code == 404
