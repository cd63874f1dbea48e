import asyncio

import pytest
from fastapi.testclient import TestClient

from contenthub.core.config import load_settings
from contenthub.infrastructure.database import Database
from contenthub.init_admin import create_admin
from contenthub.main import create_app

PASSWORD = "secret123"


@pytest.fixture
def settings(tmp_path):
    return load_settings(
        _env_file=None,
        environment="test",
        database={"url": f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"},
        security={"secret_key": "test-secret-key"},
        storage={
            "root": tmp_path / "media",
            "public_base_url": "http://testserver",
            "max_asset_bytes": 4096,
            "max_document_bytes": 8192,
        },
    )


@pytest.fixture
def client(settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client


def register(client, username, password=PASSWORD):
    response = client.post("/api/auth/register", json={"username": username, "password": password})
    assert response.status_code == 201, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def alice(client):
    return register(client, "alice")


@pytest.fixture
def bob(client):
    return register(client, "bob")


@pytest.fixture
def admin(client, settings):
    async def run():
        database = Database(settings)
        try:
            return await create_admin(database, "admin", PASSWORD, None)
        finally:
            await database.dispose()

    assert asyncio.run(run())
    response = client.post("/api/auth/login", json={"username": "admin", "password": PASSWORD})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


def upload_asset(client, headers, name="pic.png", data=b"\x89PNG fake image", folder=None):
    form = {"folder": folder} if folder else {}
    response = client.post(
        "/api/assets",
        files={"file": (name, data, "image/png")},
        data=form,
        headers=headers,
    )
    return response


def create_content(client, headers, **fields):
    payload = {"title": "My Page", "subject": "Computer Science"}
    payload.update(fields)
    return client.post("/api/contents", json=payload, headers=headers)


def upload_document(client, headers, name, data=b"%PDF-1.4 body", mime_type="application/pdf", **form):
    fields = {"title": "Lecture Notes", "subject": "Physics"}
    fields.update(form)
    return client.post(
        "/api/documents",
        files={"file": (name, data, mime_type)},
        data=fields,
        headers=headers,
    )
