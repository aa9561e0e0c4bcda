def login(client, email="eater@example.com", password="secret-pass"):
    return client.post("/api/v1/auth/login", json={"email": email, "password": password})


def test_signup_creates_account(anonymous_client, supabase):
    response = anonymous_client.post(
        "/api/v1/auth/signup", json={"email": "new@example.com", "password": "secret-pass"}
    )
    assert response.status_code == 201
    assert response.json()["email"] == "new@example.com"
    assert "new@example.com" in supabase.auth.users


def test_duplicate_signup_surfaces_provider_error(anonymous_client, supabase):
    supabase.auth.add_user("taken@example.com", "secret-pass")
    response = anonymous_client.post(
        "/api/v1/auth/signup", json={"email": "taken@example.com", "password": "other"}
    )
    assert response.status_code == 422
    assert response.json()["detail"] == "User already registered"


def test_signup_rejects_malformed_email(anonymous_client):
    response = anonymous_client.post("/api/v1/auth/signup", json={"email": "nope", "password": "x"})
    assert response.status_code == 422


def test_login_returns_token(anonymous_client, supabase):
    user_id = supabase.auth.add_user("eater@example.com", "secret-pass")
    response = login(anonymous_client)
    assert response.status_code == 200
    body = response.json()
    assert body["user_id"] == user_id
    assert body["token_type"] == "bearer"
    assert body["access_token"].startswith("token-")


def test_login_with_wrong_password_surfaces_provider_message(anonymous_client, supabase):
    supabase.auth.add_user("eater@example.com", "secret-pass")
    response = login(anonymous_client, password="wrong")
    assert response.status_code == 400
    assert response.json()["detail"] == "Invalid login credentials"


def test_protected_route_without_token_is_rejected(anonymous_client):
    for path in ("/api/v1/auth/me", "/api/v1/allergies", "/api/v1/history", "/api/v1/dashboard"):
        assert anonymous_client.get(path).status_code == 401


def test_protected_route_with_bad_token_is_rejected(anonymous_client):
    response = anonymous_client.get("/api/v1/auth/me", headers={"Authorization": "Bearer forged"})
    assert response.status_code == 401


def test_me_resolves_session_and_caches_it(anonymous_client, supabase):
    supabase.auth.add_user("eater@example.com", "secret-pass")
    token = login(anonymous_client).json()["access_token"]
    headers = {"Authorization": f"Bearer {token}"}

    first = anonymous_client.get("/api/v1/auth/me", headers=headers)
    second = anonymous_client.get("/api/v1/auth/me", headers=headers)

    assert first.status_code == second.status_code == 200
    assert first.json()["email"] == "eater@example.com"
    # login already registered the session, so the provider is never asked
    assert supabase.auth.get_user_calls == 0


def test_logout_forgets_session(anonymous_client, supabase):
    supabase.auth.add_user("eater@example.com", "secret-pass")
    token = login(anonymous_client).json()["access_token"]
    headers = {"Authorization": f"Bearer {token}"}

    assert anonymous_client.post("/api/v1/auth/logout", headers=headers).status_code == 200
    assert token in supabase.auth.revoked
    assert anonymous_client.get("/api/v1/auth/me", headers=headers).status_code == 401


def test_public_routes(anonymous_client):
    assert anonymous_client.get("/").json()["status"] == "healthy"
    assert anonymous_client.get("/health").status_code == 200
    assert anonymous_client.get("/ready").json() == {"status": "ready"}
