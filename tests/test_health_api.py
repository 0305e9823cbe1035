from main import app
from utils.narrative import get_narrative_client




class ReachableNarrative:
    async def ping(self):
        return True


class TestHealthApi:
    async def test_without_api_key(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["database"] is True
        assert body["ai"] is False
        assert body["timestamp"]

    async def test_with_reachable_ai(self, client):
        app.dependency_overrides[get_narrative_client] = ReachableNarrative

        response = await client.get("/health")

        assert response.json()["ai"] is True
