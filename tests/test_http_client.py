"""Tests for the shared HTTP helpers and logging utilities."""

import logging
from unittest.mock import MagicMock, patch

import requests

from common import http_client
from common.logging_utils import Timer, configure_logging, extra_context, is_debug_enabled, safe_url


def _response(status=200, text="[]"):
    res = MagicMock()
    res.status_code = status
    res.headers = {"Content-Type": "application/json"}
    res.text = text
    return res


class TestGetJson:
    """Tests for get_json()/robust_get()."""

    @patch("common.http_client.requests.get")
    def test_parses_json(self, mock_get):
        mock_get.return_value = _response(text='[{"tag_name": "v1.0.0"}]')
        status, headers, data = http_client.get_json("https://api.test/x", timeout=2)
        assert status == 200
        assert headers["Content-Type"] == "application/json"
        assert data == [{"tag_name": "v1.0.0"}]
        assert mock_get.call_args[1]["timeout"] == 2

    @patch("common.http_client.requests.get")
    def test_each_call_reaches_the_network(self, mock_get):
        mock_get.return_value = _response()
        http_client.get_json("https://api.test/releases")
        http_client.get_json("https://api.test/releases")
        assert mock_get.call_count == 2

    @patch("common.http_client.requests.get")
    def test_server_error_status_returned(self, mock_get):
        mock_get.return_value = _response(status=502, text="")
        assert http_client.get_json("https://api.test/flaky") == (
            502, {"Content-Type": "application/json"}, None
        )

    @patch("common.http_client.requests.get")
    def test_invalid_json(self, mock_get):
        mock_get.return_value = _response(text="<html>")
        assert http_client.get_json("https://api.test/html") == (
            200, {"Content-Type": "application/json"}, None
        )

    @patch("common.http_client.requests.get", side_effect=requests.Timeout())
    def test_retries_then_gives_up(self, mock_get):
        status, headers, data = http_client.get_json("https://api.test/slow", retries=2)
        assert (status, headers, data) == (0, {}, None)
        assert mock_get.call_count == 2

    @patch("common.http_client.requests.get", side_effect=requests.ConnectionError("refused"))
    def test_connection_error(self, mock_get):
        status, _, body = http_client.robust_get("https://api.test/down", retries=1)
        assert status == 0
        assert "refused" in body
        assert mock_get.call_count == 1


class TestLoggingUtils:
    """Tests for logging helpers."""

    def test_extra_context_drops_none(self):
        assert extra_context(event="x", outcome=None, count=0) == {"event": "x", "count": 0}

    def test_safe_url_strips_credentials_and_query(self):
        assert safe_url("https://user:pw@api.test:8443/repos?token=abc") == "https://api.test:8443/repos"

    def test_timer(self):
        with Timer() as timer:
            pass
        assert timer.duration_ms() >= 0

    def test_configure_logging_from_env(self, monkeypatch):
        root = logging.getLogger()
        level = root.level
        monkeypatch.setenv("PROVIDER_PROJECT_LOG_LEVEL", "debug")
        try:
            configure_logging()
            assert is_debug_enabled(logging.getLogger("anything"))
            configure_logging("WARNING")
            assert root.level == logging.WARNING
        finally:
            root.setLevel(level)
