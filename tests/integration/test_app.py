"""Tests for the assembled HTTP application."""


class TestApp:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "domain": "storefront"}

    def test_unknown_route(self, client):
        response = client.get("/api/nowhere")
        assert response.status_code == 404
        assert "message" in response.json()

    def test_unsupported_method(self, client):
        response = client.patch("/api/products")
        assert response.status_code == 405
        assert "message" in response.json()

    def test_request_id_is_echoed(self, client):
        response = client.get("/health", headers={"x-request-id": "req-123"})
        assert response.headers["x-request-id"] == "req-123"

    def test_request_id_is_generated(self, client):
        assert client.get("/health").headers["x-request-id"]

    def test_unexpected_command_failure_is_a_500(self, client, monkeypatch):
        from storefront.catalogue.category.category import Category

        def broken(self, *args, **kwargs):
            raise RuntimeError("database connection refused")

        monkeypatch.setattr(Category, "create", classmethod(broken))
        response = client.post("/api/categories", json={"name": "Anklet", "slug": "anklet"})

        assert response.status_code == 500
        assert response.json() == {"message": "Storage is unavailable, please retry"}
