from datetime import timedelta

import pytest

DIRECTOR_BODY = {"name": "Ada", "birthYear": 1980, "nationality": "X"}
MOVIE_BODY = {"title": "Heat", "genre": "Crime", "releaseYear": 1995}


def _write_requests(director_id, movie_id):
    return [
        ("post", "/api/directors", DIRECTOR_BODY),
        ("put", f"/api/directors/{director_id}", {"name": "Changed"}),
        ("delete", f"/api/directors/{director_id}", None),
        ("post", "/api/movies", MOVIE_BODY),
        ("put", f"/api/movies/{movie_id}", {"title": "Changed"}),
        ("delete", f"/api/movies/{movie_id}", None),
    ]


@pytest.fixture
def existing(client, auth_headers, director):
    movie = client.post(
        "/api/movies", json={**MOVIE_BODY, "director": director["id"]}, headers=auth_headers
    ).json()
    return director, movie


def _snapshot(client):
    return client.get("/api/directors").json(), client.get("/api/movies").json()


@pytest.mark.parametrize(
    "headers",
    [
        {},
        {"Authorization": "Bearer"},
        {"Authorization": "Basic dXNlcjpwYXNz"},
        {"Authorization": "Bearer not-a-jwt"},
    ],
    ids=["missing", "empty-bearer", "basic-scheme", "malformed"],
)
def test_writes_rejected_without_valid_token(client, existing, headers):
    director, movie = existing
    before = _snapshot(client)

    for method, url, body in _write_requests(director["id"], movie["id"]):
        kwargs = {"headers": headers}
        if body is not None:
            kwargs["json"] = body
        resp = client.request(method.upper(), url, **kwargs)
        assert resp.status_code == 401, (method, url)
        assert "error" in resp.json()
        assert resp.headers["WWW-Authenticate"] == "Bearer"

    assert _snapshot(client) == before


def test_expired_token_rejected(client, existing, token_service, registered_user):
    director, movie = existing
    expired = token_service.issue(registered_user["user"]["id"], expires_delta=timedelta(hours=-1))
    before = _snapshot(client)

    for method, url, body in _write_requests(director["id"], movie["id"]):
        kwargs = {"headers": {"Authorization": f"Bearer {expired}"}}
        if body is not None:
            kwargs["json"] = body
        resp = client.request(method.upper(), url, **kwargs)
        assert resp.status_code == 401
        assert resp.json() == {"error": "Token has expired"}

    assert _snapshot(client) == before


def test_guard_runs_before_body_validation(client):
    resp = client.post("/api/directors", json={})

    assert resp.status_code == 401


def test_reads_do_not_need_a_token(client, existing):
    director, movie = existing

    assert client.get("/api/directors").status_code == 200
    assert client.get(f"/api/directors/{director['id']}").status_code == 200
    assert client.get("/api/movies").status_code == 200
    assert client.get(f"/api/movies/{movie['id']}").status_code == 200


def test_any_authenticated_user_may_modify(client, existing):
    director, _ = existing
    other = client.post(
        "/api/auth/register",
        json={"name": "Other", "email": "other@example.com", "password": "pw"},
    ).json()

    resp = client.put(
        f"/api/directors/{director['id']}",
        json={"name": "Renamed"},
        headers={"Authorization": f"Bearer {other['token']}"},
    )
    assert resp.status_code == 200
    assert resp.json()["name"] == "Renamed"
