import time
from datetime import timedelta

from jose import jwt

from app.config.settings import settings
from app.core.auth.service import AuthService


def test_jwt_endpoint_embeds_submitted_claims(client):
    r = client.post("/jwt", json={"email": "rahim@niyejai.com", "name": "Rahim"})
    assert r.status_code == 200
    token = r.json()["token"]

    claims = jwt.decode(token, settings.token_secret, algorithms=[settings.algorithm])
    assert claims["email"] == "rahim@niyejai.com"
    assert claims["name"] == "Rahim"
    assert "exp" in claims


def test_token_expires_after_24_hours():
    token = AuthService.create_access_token({"email": "a@niyejai.com"})
    claims = jwt.get_unverified_claims(token)
    assert abs(claims["exp"] - time.time() - 24 * 3600) <= 5


def test_verify_token_rejects_bad_tokens():
    assert AuthService.verify_token(None) is None
    assert AuthService.verify_token("not-a-token") is None

    forged = jwt.encode({"email": "a@niyejai.com"}, "other-secret", algorithm="HS256")
    assert AuthService.verify_token(forged) is None

    expired = AuthService.create_access_token({"email": "a@niyejai.com"}, expires_delta=timedelta(seconds=-30))
    assert AuthService.verify_token(expired) is None


def test_protected_route_without_token_is_401(client):
    r = client.get("/users")
    assert r.status_code == 401
    assert r.json() == {"message": "Unauthorized Access"}
    assert r.headers["www-authenticate"] == "Bearer"


def test_protected_route_with_wrong_scheme_is_401(client):
    r = client.get("/users", headers={"Authorization": "Basic abc"})
    assert r.status_code == 401


def test_admin_route_with_non_admin_token_is_403(client, user_headers):
    r = client.get("/bookings", headers=user_headers)
    assert r.status_code == 403
    assert r.json() == {"message": "Forbidden Access"}


def test_admin_route_with_unknown_user_is_403(client, bearer):
    r = client.get("/bookings", headers=bearer("ghost@niyejai.com"))
    assert r.status_code == 403


def test_admin_route_without_token_is_401(client):
    r = client.delete("/user-delete/6710f2c9a1b2c3d4e5f60718")
    assert r.status_code == 401


def test_admin_route_with_expired_token_is_401(client, make_user):
    make_user("admin@niyejai.com", role="Admin")
    token = AuthService.create_access_token({"email": "admin@niyejai.com"}, expires_delta=timedelta(seconds=-30))
    r = client.get("/bookings", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 401


def test_admin_route_with_admin_token_passes(client, admin_headers):
    r = client.get("/bookings", headers=admin_headers)
    assert r.status_code == 200
    assert r.json() == []
