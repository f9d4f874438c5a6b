from movie_api.core.security import TokenService

REGISTER_URL = "/api/auth/register"
LOGIN_URL = "/api/auth/login"


def test_register_returns_token_for_new_user(client, token_service):
    resp = client.post(
        REGISTER_URL,
        json={"name": "Ada", "email": "ada@example.com", "password": "analytical"},
    )

    assert resp.status_code == 201
    body = resp.json()
    assert body["message"] == "User registered successfully"
    assert body["user"]["name"] == "Ada"
    assert body["user"]["email"] == "ada@example.com"
    assert token_service.decode(body["token"]) == body["user"]["id"]


def test_register_never_exposes_password(client):
    resp = client.post(
        REGISTER_URL,
        json={"name": "Ada", "email": "ada@example.com", "password": "analytical"},
    )

    assert set(resp.json()["user"]) == {"id", "name", "email"}
    assert "analytical" not in resp.text


def test_register_duplicate_email_conflicts(client, registered_user):
    resp = client.post(
        REGISTER_URL,
        json={"name": "Other", "email": "tester@example.com", "password": "whatever"},
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "User already exists"}


def test_register_rejects_invalid_email(client):
    resp = client.post(
        REGISTER_URL,
        json={"name": "Ada", "email": "not-an-email", "password": "analytical"},
    )

    assert resp.status_code == 400
    assert "email" in resp.json()["error"]


def test_register_requires_name(client):
    resp = client.post(
        REGISTER_URL,
        json={"email": "ada@example.com", "password": "analytical"},
    )

    assert resp.status_code == 400
    assert "name" in resp.json()["error"]


def test_login_with_correct_credentials(client, registered_user, token_service):
    resp = client.post(
        LOGIN_URL,
        json={"email": "tester@example.com", "password": "s3cret-pass"},
    )

    assert resp.status_code == 200
    body = resp.json()
    assert body["message"] == "Login successful"
    assert body["user"] == registered_user["user"]
    assert token_service.decode(body["token"]) == registered_user["user"]["id"]


def test_login_failures_share_one_message(client, registered_user):
    wrong_password = client.post(
        LOGIN_URL,
        json={"email": "tester@example.com", "password": "wrong"},
    )
    unknown_email = client.post(
        LOGIN_URL,
        json={"email": "nobody@example.com", "password": "s3cret-pass"},
    )

    assert wrong_password.status_code == unknown_email.status_code == 400
    assert wrong_password.json() == unknown_email.json() == {"error": "Invalid credentials"}


def test_login_token_opens_write_endpoints(client, registered_user):
    login = client.post(
        LOGIN_URL,
        json={"email": "tester@example.com", "password": "s3cret-pass"},
    ).json()

    resp = client.post(
        "/api/directors",
        json={"name": "Agnes Varda", "birthYear": 1928, "nationality": "French"},
        headers={"Authorization": f"Bearer {login['token']}"},
    )
    assert resp.status_code == 201


def test_token_from_other_secret_is_not_accepted(client):
    forged = TokenService("not-the-server-secret").issue("someone")

    resp = client.post(
        "/api/directors",
        json={"name": "Agnes Varda", "birthYear": 1928, "nationality": "French"},
        headers={"Authorization": f"Bearer {forged}"},
    )
    assert resp.status_code == 401


def test_email_uniqueness_ignores_case(client, registered_user):
    resp = client.post(
        REGISTER_URL,
        json={"name": "Shouty", "email": "TESTER@Example.com", "password": "whatever"},
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "User already exists"}


def test_login_email_is_case_insensitive(client, registered_user):
    resp = client.post(
        LOGIN_URL,
        json={"email": "Tester@EXAMPLE.com", "password": "s3cret-pass"},
    )

    assert resp.status_code == 200
    assert resp.json()["user"]["email"] == "tester@example.com"
