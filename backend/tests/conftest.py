import os
import tempfile

# must be set before faniko.config is imported
os.environ["FANIKO_UPLOADS_DIR"] = tempfile.mkdtemp(prefix="faniko-uploads-")
os.environ["TELEGRAM_BOT_TOKEN"] = ""

import pytest
from fastapi.testclient import TestClient

from faniko.db import get_db
from faniko.main import app


@pytest.fixture(autouse=True)
def fresh_store():
    get_db().reset()
    yield
    get_db().reset()


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def make_creator(client):
    def _make(username="jane", account_type="subscription", price="9.99", email=None, display_name="Jane Doe"):
        data = {
            "displayName": display_name,
            "username": username,
            "email": email or f"{username}@example.com",
            "accountType": account_type,
        }
        if price is not None:
            data["price"] = price
        resp = client.post("/api/creators", data=data)
        assert resp.status_code == 200, resp.text
        return resp.json()["creatorId"]

    return _make


@pytest.fixture
def make_post(client):
    def _make(username="jane", title="Hello fans", visibility="free", price=None, description=None):
        data = {"title": title, "visibility": visibility}
        if price is not None:
            data["price"] = price
        if description is not None:
            data["description"] = description
        resp = client.post(f"/api/creators/{username}/posts", data=data)
        assert resp.status_code == 200, resp.text
        return resp.json()["post"]

    return _make


@pytest.fixture
def make_user(client):
    def _make(email="fan@example.com", username="fan1", password="secret123"):
        resp = client.post(
            "/api/auth/signup",
            json={"email": email, "username": username, "password": password},
        )
        assert resp.status_code == 200, resp.text
        return resp.json()

    return _make
