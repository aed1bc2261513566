import jwt
import pytest

from notes_web.core.config import settings
from notes_web.services import auth_service
from notes_web.services.session_service import safe_redirect

PASSWORD = "racheliscool"

JSON = {"Accept": "application/json"}


@pytest.mark.parametrize("to,expected", [
    (None, "/"),
    ("", "/"),
    ("/notes", "/notes"),
    ("/notes/new?x=1", "/notes/new?x=1"),
    ("//evil.example", "/"),
    ("https://evil.example", "/"),
    ("notes", "/"),
])
def test_safe_redirect(to, expected):
    assert safe_redirect(to) == expected


def test_landing_anonymous(client):
    resp = client.get("/")
    assert "Sign up" in resp.text
    assert "Log In" in resp.text


def test_landing_logged_in(auth_client):
    resp = auth_client.get("/")
    assert "View Notes for rachel@remix.run" in resp.text


@pytest.mark.parametrize("form,errors", [
    ({"email": "nope", "password": PASSWORD}, {"email": "Email is invalid"}),
    ({"email": "a@b.co"}, {"password": "Password is required"}),
    ({"email": "rachel@remix.run", "password": "short"}, {"password": "Password is too short"}),
])
def test_join_validation(client, form, errors):
    resp = client.post("/join", data=form, headers=JSON)
    assert resp.status_code == 400
    assert resp.json() == {"errors": errors}


def test_join_duplicate_email(client, user):
    resp = client.post("/join", data={"email": "Rachel@Remix.run", "password": PASSWORD}, headers=JSON)
    assert resp.status_code == 400
    assert resp.json() == {"errors": {"email": "A user already exists with this email"}}


def test_join_creates_user_and_session(client, db):
    resp = client.post(
        "/join",
        data={"email": "new@remix.run", "password": PASSWORD, "redirectTo": "/notes"},
        follow_redirects=False,
    )

    assert resp.status_code == 303
    assert resp.headers["location"] == "/notes"
    assert settings.session_cookie_name in resp.cookies
    stored = db["user"].find_one({"email": "new@remix.run"})
    assert stored["password_hash"] != PASSWORD

    assert client.get("/notes").status_code == 200


def test_join_html_error_rendered_inline(client):
    resp = client.post("/join", data={"email": "nope", "password": PASSWORD})
    assert resp.status_code == 400
    assert "Email is invalid" in resp.text


def test_login_rejects_wrong_password(client, user):
    resp = client.post("/login", data={"email": user["email"], "password": "wrong-password"}, headers=JSON)
    assert resp.status_code == 400
    assert resp.json() == {"errors": {"email": "Invalid email or password"}}


def test_login_unknown_user(client, db):
    resp = client.post("/login", data={"email": "ghost@remix.run", "password": PASSWORD}, headers=JSON)
    assert resp.json() == {"errors": {"email": "Invalid email or password"}}


def test_login_redirects_to_requested_page(client, user):
    gate = client.get("/notes/new", follow_redirects=False)
    assert gate.headers["location"] == "/login?redirectTo=%2Fnotes%2Fnew"

    resp = client.post(
        "/login",
        data={"email": user["email"], "password": PASSWORD, "redirectTo": "/notes/new", "remember": "on"},
        follow_redirects=False,
    )

    assert resp.status_code == 303
    assert resp.headers["location"] == "/notes/new"
    assert "Max-Age" in resp.headers["set-cookie"]
    assert client.get("/notes/new").status_code == 200


def test_login_without_remember_sets_browser_session_cookie(client, user):
    resp = client.post(
        "/login", data={"email": user["email"], "password": PASSWORD}, follow_redirects=False
    )
    assert resp.headers["location"] == "/notes"
    assert "HttpOnly" in resp.headers["set-cookie"]
    assert "Max-Age" not in resp.headers["set-cookie"]


def test_login_ignores_offsite_redirect(client, user):
    resp = client.post(
        "/login",
        data={"email": user["email"], "password": PASSWORD, "redirectTo": "//evil.example"},
        follow_redirects=False,
    )
    assert resp.headers["location"] == "/notes"


def test_join_ignores_offsite_redirect(client, db):
    resp = client.post(
        "/join",
        data={"email": "kody@remix.run", "password": "kodylovesyou", "redirectTo": "https://evil.example"},
        follow_redirects=False,
    )
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"


def test_logged_in_user_skips_login_page(auth_client):
    resp = auth_client.get("/login", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"


def test_logout_clears_session(auth_client):
    resp = auth_client.post("/logout", follow_redirects=False)
    assert resp.status_code == 303
    assert resp.headers["location"] == "/"
    assert auth_client.get("/notes", follow_redirects=False).status_code == 303


def test_tampered_session_is_ignored(client, user):
    client.cookies.set(settings.session_cookie_name, "not-a-jwt")
    resp = client.get("/notes", follow_redirects=False)
    assert resp.headers["location"].startswith("/login")


def test_session_for_deleted_user_logs_out(auth_client, user, db):
    db["user"].delete_one({"_id": user["_id"]})

    resp = auth_client.get("/notes", follow_redirects=False)

    assert resp.status_code == 303
    assert resp.headers["location"] == "/"
    assert settings.session_cookie_name in resp.headers["set-cookie"]


def test_verify_login_service(user):
    assert auth_service.verify_login(email="RACHEL@remix.run", password=PASSWORD)["_id"] == user["_id"]
    assert auth_service.verify_login(email="rachel@remix.run", password="nope-nope") is None


def test_expired_session_is_ignored(client, user):
    expired = jwt.encode(
        {"sub": str(user["_id"]), "token_version": 0, "exp": 1},
        settings.session_secret,
        algorithm=settings.session_algorithm,
    )
    client.cookies.set(settings.session_cookie_name, expired)

    resp = client.get("/notes", follow_redirects=False)

    assert resp.headers["location"] == "/login?redirectTo=%2Fnotes"
