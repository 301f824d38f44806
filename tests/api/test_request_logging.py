"""Tests for the request logging middleware."""

import logging


class TestRequestLogging:
    def test_logs_one_line_per_request(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="api.requests"):
            client.get("/health")

        records = [r for r in caplog.records if r.name == "api.requests"]
        assert len(records) == 1
        method, path, status, _client, duration = records[0].getMessage().split(" | ")
        assert (method, path, status) == ("GET", "/health", "200")
        assert duration.endswith("ms")

    def test_client_errors_logged_at_info(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="api.requests"):
            client.get("/users")

        record = next(r for r in caplog.records if r.name == "api.requests")
        assert record.levelno == logging.INFO
        assert " | 401 | " in record.getMessage()
