import pytest

pytestmark = pytest.mark.integration


class TestOpenApiSchema:
    def test_schema_lists_product_routes(self, api_client):
        response = api_client.get("/api/schema/", HTTP_ACCEPT="application/vnd.oai.openapi+json")
        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/api/products" in paths
        assert "/api/products/{id}" in paths
        assert set(paths["/api/products/{id}"]) >= {"get", "put", "patch", "delete"}
