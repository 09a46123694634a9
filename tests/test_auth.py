"""
Tests for join/login/logout routes and the session cookie guard.
"""
import pytest

from taskflow.auth.session import SESSION_COOKIE_NAME, create_session_token
from taskflow.auth.user_service import delete_user_by_email
from taskflow.auth.validation import safe_redirect, validate_email

from conftest import FRONTEND_ORIGIN, PASSWORD


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Join
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


@pytest.mark.parametrize(
    "email",
    ["not-an-email", "user@", "@example.com", "user@example", "alice@..com", "a@b.c,", "", None],
)
def test_join_rejects_malformed_email(client, email):
    resp = client.post("/join", json={"email": email, "password": PASSWORD})

    assert resp.status_code == 400
    assert resp.json() == {"errors": {"email": "L'adresse email est invalide", "password": None}}


def test_join_requires_password(client):
    resp = client.post("/join", json={"email": "alice@example.com"})

    assert resp.status_code == 400
    assert resp.json()["errors"] == {"email": None, "password": "Le mot de passe est requis"}


def test_join_rejects_short_password(client):
    resp = client.post("/join", json={"email": "alice@example.com", "password": "short12"})

    assert resp.status_code == 400
    assert resp.json()["errors"]["password"] == "Le mot de passe doit contenir au moins 8 caractères"
    assert resp.json()["errors"]["email"] is None


def test_join_rejects_duplicate_email(client):
    first = client.post("/join", json={"email": "alice@example.com", "password": PASSWORD})
    assert first.status_code == 201

    resp = client.post("/join", json={"email": "alice@example.com", "password": PASSWORD})

    assert resp.status_code == 400
    assert resp.json()["errors"]["email"] == "Un utilisateur avec cette adresse email existe déjà"


def test_join_concurrent_duplicate_is_field_error(client, monkeypatch):
    client.post("/join", json={"email": "alice@example.com", "password": PASSWORD})
    client.post("/logout")
    # second request passed the lookup before the first one committed
    monkeypatch.setattr("taskflow.auth.auth_router.get_user_by_email", lambda db, email: None)

    resp = client.post("/join", json={"email": "alice@example.com", "password": PASSWORD})

    assert resp.status_code == 400
    assert resp.json()["errors"]["email"] == "Un utilisateur avec cette adresse email existe déjà"
    assert "set-cookie" not in resp.headers


def test_join_creates_user_and_session(client):
    resp = client.post("/join", json={"email": "alice@example.com", "password": PASSWORD})

    assert resp.status_code == 201
    body = resp.json()
    assert body["redirect_to"] == "/dashboard"
    assert body["user"]["email"] == "alice@example.com"
    assert SESSION_COOKIE_NAME in resp.cookies
    # not remembered: browser-session cookie
    assert "Max-Age" not in resp.headers["set-cookie"]

    me = client.get("/me")
    assert me.status_code == 200
    assert me.json()["email"] == "alice@example.com"


def test_join_ignores_offsite_redirect(client):
    resp = client.post(
        "/join",
        json={"email": "alice@example.com", "password": PASSWORD, "redirect_to": "//evil.example.com"},
    )
    assert resp.json()["redirect_to"] == "/dashboard"


def test_join_page_redirects_signed_in_user(logged_in_client):
    assert logged_in_client.get("/join").json() == {"redirect_to": "/"}


def test_join_page_anonymous(client):
    assert client.get("/join").json() == {}


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Login / logout
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_login_unknown_email_is_generic(client):
    resp = client.post("/login", json={"email": "ghost@example.com", "password": PASSWORD})

    assert resp.status_code == 400
    assert resp.json()["errors"] == {"email": "Email ou mot de passe invalide", "password": None}


def test_login_wrong_password_is_generic(logged_in_client):
    logged_in_client.post("/logout")

    resp = logged_in_client.post("/login", json={"email": "alice@example.com", "password": "wrong-pass"})

    assert resp.status_code == 400
    assert resp.json()["errors"]["email"] == "Email ou mot de passe invalide"


def test_login_remember_sets_persistent_cookie(logged_in_client):
    logged_in_client.post("/logout")

    resp = logged_in_client.post(
        "/login",
        json={"email": "alice@example.com", "password": PASSWORD, "remember": True, "redirect_to": "/dashboard/kanban"},
    )

    assert resp.status_code == 200
    assert resp.json()["redirect_to"] == "/dashboard/kanban"
    assert "Max-Age=604800" in resp.headers["set-cookie"]


def test_logout_clears_session(logged_in_client):
    resp = logged_in_client.post("/logout")

    assert resp.json() == {"redirect_to": "/"}
    assert f"{SESSION_COOKIE_NAME}=" in resp.headers["set-cookie"]
    assert logged_in_client.get("/me").status_code == 401


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Session guard
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


@pytest.mark.parametrize(
    "path",
    ["/dashboard", "/dashboard/projects", "/dashboard/tasks", "/dashboard/kanban", "/dashboard/gantt"],
)
def test_dashboard_requires_session(client, path):
    assert client.get(path).status_code == 401


def test_tampered_cookie_is_rejected(client):
    client.cookies.set(SESSION_COOKIE_NAME, "not-a-jwt")
    assert client.get("/dashboard/kanban").status_code == 401


def test_session_for_deleted_user(client, db):
    client.post("/join", json={"email": "alice@example.com", "password": PASSWORD})
    delete_user_by_email(db, "alice@example.com")

    resp = client.get("/me")

    assert resp.status_code == 401
    assert SESSION_COOKIE_NAME in resp.headers["set-cookie"]


def test_expired_session_is_rejected(client):
    client.cookies.set(SESSION_COOKIE_NAME, create_session_token(42, minutes=-1))
    assert client.get("/dashboard/tasks").status_code == 401


def test_home_shows_signed_in_email(logged_in_client):
    body = logged_in_client.get("/").json()
    assert body["name"] == "TaskFlow Pro"
    assert body["user"] == "alice@example.com"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# Helpers
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def test_validate_email():
    assert validate_email("a@b.co")
    assert not validate_email("a b@c.co")
    assert not validate_email(42)
    assert not validate_email("alice@..com")
    assert not validate_email("a@b.c,")


def test_safe_redirect():
    assert safe_redirect("/dashboard/tasks") == "/dashboard/tasks"
    assert safe_redirect("https://evil.example.com") == "/dashboard"
    assert safe_redirect("//evil.example.com", "/") == "/"
    assert safe_redirect(None) == "/dashboard"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# CORS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━


def _preflight(client, origin):
    return client.options(
        "/login",
        headers={"Origin": origin, "Access-Control-Request-Method": "POST"},
    )


def test_cors_allows_configured_frontend_origin(client):
    resp = _preflight(client, FRONTEND_ORIGIN)

    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] == FRONTEND_ORIGIN
    assert resp.headers["access-control-allow-credentials"] == "true"


def test_cors_rejects_unknown_origin(client):
    resp = _preflight(client, "https://evil.example.com")

    assert resp.status_code == 400
    assert "access-control-allow-origin" not in resp.headers
