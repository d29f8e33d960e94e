"""
Unit tests for REST member routes.

Tests endpoint responses with mocked dependencies.
"""

from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from kitchensink.api.dependencies import get_member_service
from kitchensink.api.rest.routes import UNEXPECTED_ERROR_MESSAGE, router
from kitchensink.domain.exceptions import EmailAlreadyRegistered, InvalidMember
from kitchensink.domain.model import Member
from kitchensink.domain.registration import MemberService

JANE = Member(id="abc123", name="Jane Doe", email="jane@example.com", phone_number="0987654321")
VALID_BODY = {"name": "Jane Doe", "email": "jane@example.com", "phoneNumber": "0987654321"}


@pytest.fixture
def mock_service() -> MagicMock:
    return MagicMock(spec=MemberService)


@pytest.fixture
def app(mock_service: MagicMock) -> FastAPI:
    """Create test FastAPI application with the service overridden."""
    test_app = FastAPI()
    test_app.include_router(router, prefix="/rest")
    test_app.dependency_overrides[get_member_service] = lambda: mock_service
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    """Create test client for the application."""
    return TestClient(app)


class TestCreateMember:
    """Tests for POST /rest/members endpoint."""

    def test_create_success_returns_201(self, client: TestClient, mock_service: MagicMock) -> None:
        """Successful registration returns 201 Created with the member."""
        mock_service.register.return_value = JANE

        response = client.post("/rest/members", json=VALID_BODY)

        assert response.status_code == 201
        assert response.json() == {
            "id": "abc123",
            "name": "Jane Doe",
            "email": "jane@example.com",
            "phoneNumber": "0987654321",
        }

    def test_create_passes_candidate_to_service(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        """Request body is converted to a candidate member without id."""
        mock_service.register.return_value = JANE

        client.post("/rest/members", json={**VALID_BODY, "id": "forged"})

        mock_service.register.assert_called_once_with(
            Member(name="Jane Doe", email="jane@example.com", phone_number="0987654321")
        )

    def test_create_invalid_name_returns_400(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        """Field validation failure returns 400 with field -> message map."""
        mock_service.register.side_effect = InvalidMember({"name": "Must not contain numbers"})

        response = client.post("/rest/members", json={**VALID_BODY, "name": "Jane123"})

        assert response.status_code == 400
        assert response.json() == {"name": "Must not contain numbers"}

    def test_create_invalid_phone_returns_400(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        mock_service.register.side_effect = InvalidMember({"phoneNumber": "Must contain only numbers"})

        response = client.post("/rest/members", json={**VALID_BODY, "phoneNumber": "invalid-phone"})

        assert response.status_code == 400
        assert response.json() == {"phoneNumber": "Must contain only numbers"}

    def test_create_duplicate_email_returns_409(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        """Duplicate email returns 409 Conflict with the error message."""
        mock_service.register.side_effect = EmailAlreadyRegistered("jane@example.com")

        response = client.post("/rest/members", json=VALID_BODY)

        assert response.status_code == 409
        assert response.json() == {"error": "Email address jane@example.com is already registered."}

    def test_create_unexpected_error_returns_500(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        """Unexpected failures return a generic 500 without internal details."""
        mock_service.register.side_effect = RuntimeError("password authentication failed for user")

        response = client.post("/rest/members", json=VALID_BODY)

        assert response.status_code == 500
        assert response.json() == {"error": UNEXPECTED_ERROR_MESSAGE}
        assert "password authentication" not in response.text

    def test_create_unexpected_error_is_logged(
        self,
        client: TestClient,
        mock_service: MagicMock,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Unexpected failures are logged server-side with the exception."""
        mock_service.register.side_effect = RuntimeError("store down")

        client.post("/rest/members", json=VALID_BODY)

        errors = [r for r in caplog.records if r.levelname == "ERROR"]
        assert errors
        assert errors[0].exc_info is not None

    def test_create_missing_fields_reach_service(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        """Missing fields are passed as None for the domain to reject."""
        mock_service.register.side_effect = InvalidMember({"name": "must not be null"})

        response = client.post("/rest/members", json={"email": "jane@example.com"})

        assert response.status_code == 400
        candidate = mock_service.register.call_args[0][0]
        assert candidate.name is None
        assert candidate.phone_number is None


class TestListMembers:
    """Tests for GET /rest/members endpoint."""

    def test_list_returns_members(self, client: TestClient, mock_service: MagicMock) -> None:
        mock_service.list_all.return_value = [
            Member(id="1", name="Amy", email="amy@x.com", phone_number="1234567890"),
            Member(id="2", name="Zoe", email="ana@x.com", phone_number="1234567890"),
        ]

        response = client.get("/rest/members")

        assert response.status_code == 200
        assert [m["name"] for m in response.json()] == ["Amy", "Zoe"]
        assert response.json()[0] == {
            "id": "1",
            "name": "Amy",
            "email": "amy@x.com",
            "phoneNumber": "1234567890",
        }

    def test_list_empty(self, client: TestClient, mock_service: MagicMock) -> None:
        mock_service.list_all.return_value = []

        response = client.get("/rest/members")

        assert response.status_code == 200
        assert response.json() == []


class TestGetMember:
    """Tests for GET /rest/members/{id} endpoint."""

    def test_get_existing_member(self, client: TestClient, mock_service: MagicMock) -> None:
        mock_service.find_by_id.return_value = JANE

        response = client.get("/rest/members/abc123")

        assert response.status_code == 200
        assert response.json()["id"] == "abc123"
        mock_service.find_by_id.assert_called_once_with("abc123")

    def test_get_missing_member_returns_404(
        self, client: TestClient, mock_service: MagicMock
    ) -> None:
        mock_service.find_by_id.return_value = None

        response = client.get("/rest/members/missing")

        assert response.status_code == 404
