def test_login_returns_token_usable_on_me(client, test_user):
    r = client.post("/auth/login", json={"email": "traveler@example.com", "password": "password"})
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["user"]["email"] == "traveler@example.com"
    token = data["token"]["access_token"]
    assert data["token"]["token_type"] == "bearer"

    r2 = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})
    assert r2.status_code == 200
    assert r2.json()["data"]["user"]["name"] == "Traveler"


def test_invalid_login_returns_error_envelope(client, test_user):
    r = client.post("/auth/login", json={"email": "traveler@example.com", "password": "wrongpass"})
    assert r.status_code == 401
    body = r.json()
    assert body["error_code"] == "NOT_AUTHENTICATED"
    assert body["message"] == "Invalid credentials"
    assert body["request_id"]


def test_me_requires_token(client):
    r = client.get("/auth/me")
    assert r.status_code == 401
    assert r.json()["error_code"] == "NOT_AUTHENTICATED"


def test_logout_revokes_token(client, user_headers):
    r = client.post("/auth/logout", headers=user_headers)
    assert r.status_code == 200

    r2 = client.get("/auth/me", headers=user_headers)
    assert r2.status_code == 401


def test_health_and_root(client):
    assert client.get("/health").json()["status"] == "healthy"
    assert client.get("/").json()["admin"] == "/admin"
