import os
import tempfile

_db_dir = tempfile.mkdtemp(prefix="cadet-admin-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{os.path.join(_db_dir, 'test.db')}"
os.environ["NARRATIVE_API_KEY"] = ""
os.environ["GROK_API_KEY"] = ""
os.environ["RESET_DATABASE"] = "false"
os.environ["SEED_TEST_DATA"] = "false"

import httpx
import pytest
from database import create_tables, delete_tables, engine
from main import app




@pytest.fixture
async def database():
    await create_tables()
    yield
    await delete_tables()
    await engine.dispose()


@pytest.fixture
async def client(database):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


async def login(client, subject="idp|oahu-1", campus="oahu"):
    response = await client.post("/auth/login", json={
        "subject": subject,
        "email": f"{subject}@academy.example",
        "firstName": "Kumu",
        "lastName": "Test",
        "campus": campus,
    })
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['sessionToken']}"}


@pytest.fixture
async def auth_headers(client):
    return await login(client)


def cadet_payload(**overrides):
    payload = {
        "firstName": "Keoni",
        "lastName": "Kahale",
        "dateOfBirth": "2008-04-12",
        "emergencyContactName": "Malia Kahale",
        "emergencyContactPhone": "808-555-0199",
        "emergencyContactRelation": "mother",
        "classNumber": 61,
    }
    payload.update(overrides)
    return payload


def application_payload(**overrides):
    payload = {
        "firstName": "Nalu",
        "lastName": "Keawe",
        "email": "nalu@example.org",
        "phone": "808-555-0142",
        "dateOfBirth": "2008-09-30",
        "address": "12 Ala Moana Blvd",
        "city": "Honolulu",
        "state": "HI",
        "zipCode": "96815",
        "parentGuardianName": "Lani Keawe",
        "parentGuardianPhone": "808-555-0143",
        "preferredCampus": "oahu",
    }
    payload.update(overrides)
    return payload
