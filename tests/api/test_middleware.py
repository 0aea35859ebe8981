"""Tests for API middleware."""

from fastapi.testclient import TestClient

from products_api.auth.security import JwtTokenProvider


class TestRequestIdMiddleware:
    """Tests for request ID correlation middleware."""

    def test_generates_request_id_if_not_provided(self, client: TestClient) -> None:
        """Should generate request ID if not in request headers."""
        response = client.get("/health")
        assert response.status_code == 200
        # UUID format
        assert len(response.headers["X-Request-ID"]) == 36

    def test_uses_provided_request_id(self, client: TestClient) -> None:
        """Should use request ID from request headers."""
        custom_id = "custom-request-id-12345"
        response = client.get("/health", headers={"X-Request-ID": custom_id})
        assert response.headers["X-Request-ID"] == custom_id

    def test_error_body_carries_request_id(self, client: TestClient) -> None:
        response = client.get("/api/products/999", headers={"X-Request-ID": "trace-me"})
        assert response.status_code == 404
        assert response.json()["request_id"] == "trace-me"


class TestJwtAuthenticationMiddleware:
    """Tests for bearer token authentication middleware."""

    def test_public_endpoints_dont_require_auth(self, client: TestClient) -> None:
        assert client.get("/health").status_code == 200
        assert client.get("/api/categories").status_code == 200

    def test_invalid_token_ignored_on_public_endpoint(self, client: TestClient) -> None:
        response = client.get(
            "/api/brands", headers={"Authorization": "Bearer not.a.token"}
        )
        assert response.status_code == 200

    def test_invalid_token_rejected_on_protected_endpoint(self, client: TestClient) -> None:
        response = client.post(
            "/api/brands",
            json={"name": "Dell"},
            headers={"Authorization": "Bearer not.a.token"},
        )
        assert response.status_code == 401

    def test_non_bearer_scheme_ignored(self, client: TestClient) -> None:
        response = client.post(
            "/api/brands", json={"name": "Dell"}, headers={"Authorization": "Basic YWRtaW4="}
        )
        assert response.status_code == 401

    def test_token_from_other_secret_rejected(self, client: TestClient) -> None:
        forged = JwtTokenProvider(secret="forged-secret").generate_token("admin", ["ROLE_ADMIN"])
        response = client.post(
            "/api/brands",
            json={"name": "Dell"},
            headers={"Authorization": f"Bearer {forged}"},
        )
        assert response.status_code == 401
