"""Unit tests for PageFetcher using httpx's mock transport."""
import asyncio
import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

import httpx
import pytest
from services.errors import FetchError
from services.page_fetcher import PageFetcher

PAGE = "<html><body><p>Hello fetcher</p></body></html>"


def make_fetcher(handler, **kwargs) -> PageFetcher:
    return PageFetcher(transport=httpx.MockTransport(handler), **kwargs)


class TestPageFetcher:
    """Test suite for PageFetcher class."""

    def test_fetch_success(self):
        """Test a 200 response body is returned as text."""
        fetcher = make_fetcher(lambda request: httpx.Response(200, text=PAGE))
        assert asyncio.run(fetcher.fetch("https://example.com")) == PAGE

    def test_fetch_sends_single_get_with_headers(self):
        """Test one GET is issued with the configured User-Agent."""
        requests = []

        def handler(request):
            requests.append(request)
            return httpx.Response(200, text=PAGE)

        fetcher = make_fetcher(handler, user_agent="WordMeterTest/1.0")
        asyncio.run(fetcher.fetch("https://example.com/page"))

        assert len(requests) == 1
        assert requests[0].method == "GET"
        assert str(requests[0].url) == "https://example.com/page"
        assert requests[0].headers["User-Agent"] == "WordMeterTest/1.0"

    def test_fetch_follows_redirects(self):
        """Test redirects are followed to the final document."""
        def handler(request):
            if request.url.path == "/old":
                return httpx.Response(301, headers={"Location": "https://example.com/new"})
            return httpx.Response(200, text=PAGE)

        fetcher = make_fetcher(handler)
        assert asyncio.run(fetcher.fetch("https://example.com/old")) == PAGE

    def test_fetch_http_error_status(self):
        """Test non-2xx status raises FetchError with the status code."""
        fetcher = make_fetcher(lambda request: httpx.Response(404, text="missing"))

        with pytest.raises(FetchError) as exc_info:
            asyncio.run(fetcher.fetch("https://example.com/missing"))

        error = exc_info.value.error
        assert error.code == "HTTP_STATUS_ERROR"
        assert error.details["status_code"] == 404
        assert error.details["url"] == "https://example.com/missing"
        assert "404" in error.message

    def test_fetch_server_error_not_retried(self):
        """Test a 500 fails immediately after a single attempt."""
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(500)

        fetcher = make_fetcher(handler)
        with pytest.raises(FetchError):
            asyncio.run(fetcher.fetch("https://example.com"))
        assert len(calls) == 1

    def test_fetch_connection_error(self):
        """Test an unreachable host raises FetchError."""
        def handler(request):
            raise httpx.ConnectError("Connection refused", request=request)

        fetcher = make_fetcher(handler)
        with pytest.raises(FetchError) as exc_info:
            asyncio.run(fetcher.fetch("https://unreachable.invalid"))

        assert exc_info.value.error.code == "CONNECTION_ERROR"
        assert exc_info.value.error.details["error_type"] == "ConnectError"

    def test_fetch_timeout(self):
        """Test a timeout raises FetchError with TIMEOUT_ERROR."""
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        fetcher = make_fetcher(handler, timeout=2.5)
        with pytest.raises(FetchError) as exc_info:
            asyncio.run(fetcher.fetch("https://slow.example.com"))

        assert exc_info.value.error.code == "TIMEOUT_ERROR"
        assert "2.5s" in exc_info.value.error.message

    def test_default_timeout_from_config(self):
        """Test the default timeout comes from configuration."""
        from config import FETCH_TIMEOUT_SECONDS
        assert PageFetcher().timeout == FETCH_TIMEOUT_SECONDS
