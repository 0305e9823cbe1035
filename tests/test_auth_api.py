from conftest import login




class TestAuthApi:
    async def test_login_returns_session(self, client):
        response = await client.post("/auth/login", json={"subject": "idp|hilo-1", "campus": "hilo"})

        assert response.status_code == 200
        body = response.json()
        assert body["sessionToken"]
        assert body["staff"]["subject"] == "idp|hilo-1"
        assert body["staff"]["campus"] == "hilo"
        assert body["staff"]["role"] == "staff"

    async def test_login_again_updates_profile(self, client):
        await login(client, subject="idp|same", campus="oahu")
        headers = await login(client, subject="idp|same", campus="hilo")

        response = await client.get("/auth/me", headers=headers)

        assert response.status_code == 200
        assert response.json()["campus"] == "hilo"

    async def test_missing_token(self, client):
        response = await client.get("/cadets")

        assert response.status_code == 401
        assert response.headers["www-authenticate"] == "Bearer"

    async def test_unknown_token(self, client):
        response = await client.get("/cadets", headers={"Authorization": "Bearer nope"})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid or expired session token"

    async def test_logout_ends_session(self, client, auth_headers):
        response = await client.post("/auth/logout", headers=auth_headers)
        assert response.status_code == 200

        response = await client.get("/auth/me", headers=auth_headers)
        assert response.status_code == 401
