"""Tests del cliente HTTP compartido con reintentos."""

from unittest.mock import patch

import requests
from urllib3.util.retry import Retry

from bloommap.services.http import DEFAULT_RETRY, create_session


class TestDefaultRetry:
    def test_only_idempotent_methods(self):
        assert "GET" in DEFAULT_RETRY.allowed_methods
        assert "POST" not in DEFAULT_RETRY.allowed_methods

    def test_retries_on_gateway_errors(self):
        assert {502, 503, 504} <= set(DEFAULT_RETRY.status_forcelist)


class TestCreateSession:
    def test_mounts_retry_adapter(self):
        s = create_session()
        adapter = s.get_adapter("http://localhost:8000")
        assert adapter.max_retries.total == DEFAULT_RETRY.total

    def test_custom_retry(self):
        s = create_session(retry=Retry(total=7))
        assert s.get_adapter("https://example.com").max_retries.total == 7

    def test_default_timeout_injected(self):
        s = create_session(timeout=12)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(requests.adapters.HTTPAdapter, "send", return_value=requests.Response()) as send:
            s.send(prep)
            assert send.call_args.kwargs["timeout"] == 12

    def test_explicit_timeout_kept(self):
        s = create_session(timeout=12)
        prep = requests.Request("GET", "https://example.com").prepare()
        with patch.object(requests.adapters.HTTPAdapter, "send", return_value=requests.Response()) as send:
            s.send(prep, timeout=3)
            assert send.call_args.kwargs["timeout"] == 3
