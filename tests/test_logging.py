import logging


class TestDomainEventLogging:
    def test_product_creation_is_logged(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.post("/api/products", {"name": "Mouse", "price": 10})
        assert any("product.created" in r.getMessage() for r in caplog.records)

    def test_validation_failure_is_logged(self, api_client, caplog):
        with caplog.at_level(logging.INFO):
            api_client.post("/api/products", {})
        assert any("validation.failed" in r.getMessage() for r in caplog.records)
