from contenthub.core.security import create_access_token

from conftest import PASSWORD, register


def test_register_and_fetch_current_account(client):
    headers = register(client, "carol")

    response = client.get("/api/auth/me", headers=headers)

    assert response.status_code == 200
    assert response.json()["username"] == "carol"
    assert response.json()["role"] == "user"


def test_duplicate_username_is_rejected(client, alice):
    response = client.post("/api/auth/register", json={"username": "alice", "password": PASSWORD})

    assert response.status_code == 409


def test_login_checks_password(client, alice):
    ok = client.post("/api/auth/login", json={"username": "alice", "password": PASSWORD})
    bad = client.post("/api/auth/login", json={"username": "alice", "password": "wrong-password"})

    assert ok.status_code == 200
    assert ok.json()["token_type"] == "bearer"
    assert bad.status_code == 401


def test_protected_routes_need_a_valid_token(client):
    assert client.get("/api/auth/me").status_code in (401, 403)
    response = client.get("/api/auth/me", headers={"Authorization": "Bearer not-a-token"})
    assert response.status_code == 401


def test_token_for_missing_account_is_rejected(client, settings):
    token = create_access_token(settings, "no-such-account", "ghost", "user")

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
