"""API tests for the /user endpoints.

Tests the complete HTTP request/response cycle:
- POST /user/register
- POST /user/login
- GET  /user/{user_id}/verify/{token}
- POST /user/resendVerification

Architecture:
- Real app, real AuthService, in-memory store, real bcrypt (cost 10)
- Notification sink mocked to capture links
- Verifies RFC 7807 error bodies
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from authlink.core.enums import ErrorCode
from authlink.core.errors import InfrastructureError
from authlink.core.result import Failure

REGISTER_BODY = {
    "firstName": "Ada",
    "lastName": "Lovelace",
    "email": "ada@example.com",
    "password": "secret1",
}


def register(client, **overrides):
    return client.post("/user/register", json=REGISTER_BODY | overrides)


# =============================================================================
# POST /user/register
# =============================================================================


@pytest.mark.api
class TestRegister:
    def test_register_success(self, client, notification_sink):
        response = register(client)

        assert response.status_code == 201
        data = response.json()
        assert data["message"] == "Verification email has been sent"
        assert data["success"] is True
        assert data["statusCode"] == 201
        assert data["user"]["email"] == "ada@example.com"
        assert data["user"]["firstName"] == "Ada"
        assert data["user"]["verified"] is False
        assert "password" not in data["user"]
        assert "passwordHash" not in data["user"]
        notification_sink.send.assert_awaited_once()

    def test_missing_names_is_forbidden(self, client):
        response = register(client, firstName="")

        assert response.status_code == 403
        data = response.json()
        assert data["detail"] == "Firstname and Lastname are required"
        assert data["status"] == 403
        assert data["instance"] == "/user/register"

    def test_invalid_email_is_forbidden(self, client):
        response = register(client, email="not-an-email")

        assert response.status_code == 403
        assert response.json()["detail"] == "Invalid email address"

    def test_short_password_is_bad_request(self, client):
        response = register(client, password="12345")

        assert response.status_code == 400
        assert response.json()["detail"] == "Password must be at least 6 characters long"

    def test_duplicate_email_is_forbidden(self, client):
        register(client)

        response = register(client, firstName="Other")

        assert response.status_code == 403
        assert response.json()["detail"] == "User with this email already exists"

    def test_malformed_body_is_bad_request(self, client):
        response = client.post(
            "/user/register",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request"

    def test_wrong_field_type_is_bad_request(self, client):
        response = register(client, email=["a@b.com"])

        assert response.status_code == 400


# =============================================================================
# POST /user/login
# =============================================================================


@pytest.mark.api
class TestLogin:
    def test_login_success(self, client):
        register(client)

        response = client.post(
            "/user/login", json={"email": "ada@example.com", "password": "secret1"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["statusCode"] == 200
        assert len(data["token"]) == 64

    def test_wrong_password_and_unknown_email_look_the_same(self, client):
        register(client)

        wrong_password = client.post(
            "/user/login", json={"email": "ada@example.com", "password": "nope-nope"}
        )
        unknown_email = client.post(
            "/user/login", json={"email": "who@example.com", "password": "secret1"}
        )

        assert wrong_password.status_code == unknown_email.status_code == 401
        assert wrong_password.json()["detail"] == unknown_email.json()["detail"]
        assert wrong_password.json()["detail"] == "Invalid email or password"


# =============================================================================
# GET /user/{user_id}/verify/{token}
# =============================================================================


@pytest.mark.api
class TestVerifyEmail:
    def test_verify_success_renders_page(self, client, last_link):
        register(client)
        user_id, token = last_link()

        response = client.get(f"/user/{user_id}/verify/{token}")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Email verified" in response.text

    def test_replay_is_not_found(self, client, last_link):
        register(client)
        user_id, token = last_link()
        client.get(f"/user/{user_id}/verify/{token}")

        response = client.get(f"/user/{user_id}/verify/{token}")

        assert response.status_code == 404
        assert response.json()["detail"] == "Invalid token link"

    def test_malformed_user_id_is_bad_request(self, client):
        response = client.get(f"/user/not-a-uuid/verify/{'a' * 64}")

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid user ID"

    def test_unknown_user_is_not_found(self, client):
        response = client.get(f"/user/{uuid7()}/verify/{'a' * 64}")

        assert response.status_code == 404
        assert response.json()["detail"] == "Invalid user link"

    def test_expired_token_is_gone(self, client, container, last_link):
        register(client)
        user_id, token = last_link()
        stored = container.store._tokens
        for record in stored.values():
            record.created_at = record.created_at.replace(
                year=record.created_at.year - 1
            )

        response = client.get(f"/user/{user_id}/verify/{token}")

        assert response.status_code == 410
        assert response.json()["detail"] == "Token has expired"


# =============================================================================
# POST /user/resendVerification
# =============================================================================


@pytest.mark.api
class TestResendVerification:
    def test_resend_success(self, client, notification_sink, last_link):
        register(client)
        user_id, old_token = last_link()

        response = client.post(
            "/user/resendVerification",
            json={"email": "ada@example.com", "userId": user_id},
        )

        assert response.status_code == 200
        assert response.json() == {"message": "Verification email has been resent"}
        assert notification_sink.send.await_count == 2
        _, new_token = last_link()
        assert new_token != old_token
        assert client.get(f"/user/{user_id}/verify/{old_token}").status_code == 404
        assert client.get(f"/user/{user_id}/verify/{new_token}").status_code == 200

    def test_empty_input_is_bad_request(self, client):
        response = client.post("/user/resendVerification", json={})

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid request"

    def test_malformed_user_id_is_bad_request(self, client):
        response = client.post(
            "/user/resendVerification",
            json={"email": "ada@example.com", "userId": "abc"},
        )

        assert response.status_code == 400

    def test_email_mismatch_is_not_found(self, client, last_link):
        register(client)
        user_id, _ = last_link()

        response = client.post(
            "/user/resendVerification",
            json={"email": "eve@example.com", "userId": user_id},
        )

        assert response.status_code == 404


# =============================================================================
# Infrastructure failures and health
# =============================================================================


@pytest.mark.api
class TestInfrastructureFailure:
    def test_store_failure_is_internal_error(self, client, container):
        failing = AsyncMock()
        failing.login.return_value = Failure(
            error=InfrastructureError(
                code=ErrorCode.STORE_OPERATION_FAILED,
                message="Internal server error",
                operation="login",
            )
        )
        client.app.state.container.auth_service = failing

        response = client.post(
            "/user/login", json={"email": "ada@example.com", "password": "secret1"}
        )

        assert response.status_code == 500
        assert response.json()["detail"] == "Internal server error"


@pytest.mark.api
class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}
