"""
Tests for sign-up, log-in and bearer token resolution.
"""

import jwt

from app.config import settings
from app.models.profile import Profile
from app.models.user import User

SIGNUP_URL = "/auth/signup"
LOGIN_URL = "/auth/login"
PASSWORD = "scrap-is-money-42"


def signup(client, email="meera@example.com", password=PASSWORD, **extra):
    return client.post(SIGNUP_URL, json={"email": email, "password": password, **extra})


def login(client, email="meera@example.com", password=PASSWORD):
    return client.post(LOGIN_URL, data={"username": email, "password": password})


# ============================================================================
# Sign-up
# ============================================================================

class TestSignup:

    def test_creates_user_and_profile(self, client, db_session) -> None:
        response = signup(client, displayName="Meera K")

        assert response.status_code == 201
        data = response.json()
        assert data["email"] == "meera@example.com"
        assert data["username"] == "meera"
        assert data["isVerified"] is True
        assert "password" not in data

        user = db_session.query(User).filter(User.user_id == data["userId"]).one()
        assert user.password != PASSWORD
        profile = db_session.query(Profile).filter(Profile.user_id == user.user_id).one()
        assert profile.display_name == "Meera K"

    def test_email_is_case_insensitive(self, client) -> None:
        assert signup(client, email="Meera@Example.com").status_code == 201

        response = signup(client, email="meera@example.com")

        assert response.status_code == 400
        assert response.json() == {"detail": "Email already registered"}

    def test_short_password(self, client) -> None:
        response = signup(client, password="short")

        assert response.status_code == 400
        assert response.json() == {"detail": f"Password must be at least {settings.MIN_PASSWORD_LENGTH} characters"}

    def test_invalid_email(self, client) -> None:
        response = signup(client, email="not-an-email")

        assert response.status_code == 400


# ============================================================================
# Log-in
# ============================================================================

class TestLogin:

    def test_token_authenticates_requests(self, client) -> None:
        signup(client)

        response = login(client)

        assert response.status_code == 200
        token = response.json()
        assert token["token_type"] == "bearer"

        profile = client.get("/profile/", headers={"Authorization": f"Bearer {token['access_token']}"})
        assert profile.status_code == 200
        assert profile.json()["displayName"] == "meera"

    def test_token_claims(self, client) -> None:
        user_id = signup(client).json()["userId"]

        token = login(client).json()["access_token"]
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])

        assert payload["sub"] == str(user_id)
        assert "exp" in payload

    def test_wrong_password(self, client) -> None:
        signup(client)

        response = login(client, password="wrong-password")

        assert response.status_code == 401
        assert response.json() == {"detail": "Incorrect email or password"}

    def test_unknown_email(self, client) -> None:
        response = login(client, email="nobody@example.com")

        assert response.status_code == 401


# ============================================================================
# Bearer token resolution
# ============================================================================

class TestBearerToken:

    def test_token_signed_with_another_key(self, client, user) -> None:
        forged = jwt.encode({"sub": str(user.user_id)}, "some-other-key-that-is-also-long-enough", algorithm="HS256")

        response = client.get("/profile/", headers={"Authorization": f"Bearer {forged}"})

        assert response.status_code == 401
        assert response.json() == {"detail": "Unauthorized"}

    def test_token_without_subject(self, client) -> None:
        token = jwt.encode({"scope": "anything"}, settings.SECRET_KEY, algorithm=settings.ALGORITHM)

        response = client.get("/profile/", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_non_bearer_scheme(self, client) -> None:
        response = client.get("/profile/", headers={"Authorization": "Basic bWVlcmE6cGFzcw=="})

        assert response.status_code == 401
        assert response.json() == {"detail": "Missing authorization header"}
