"""Unit tests for page fetching."""

import httpx
import pytest

from yawst.scraping.fetch import _get_ssl_verify, _get_timeout, fetch_page

URL = "https://example.com/page"


def _transport(handler):
    return httpx.MockTransport(handler)


class TestFetchPage:
    """Test suite for fetch_page."""

    def test_returns_body(self) -> None:
        """Test a successful response returns its text."""
        transport = _transport(lambda request: httpx.Response(200, text="<h1>Hi</h1>"))

        assert fetch_page(URL, transport=transport) == "<h1>Hi</h1>"

    def test_follows_redirects(self) -> None:
        """Test redirects are followed to the final page."""

        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(301, headers={"Location": URL})
            return httpx.Response(200, text="moved here")

        assert fetch_page("https://example.com/old", transport=_transport(handler)) == "moved here"

    @pytest.mark.parametrize("status", [404, 500])
    def test_error_status_is_failure(self, status: int) -> None:
        """Test error statuses are reported as empty content."""
        transport = _transport(lambda request: httpx.Response(status, text="Not here"))

        assert fetch_page(URL, transport=transport) == ""

    def test_network_error_is_failure(self) -> None:
        """Test connection errors are reported as empty content."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        assert fetch_page(URL, transport=_transport(handler)) == ""

    def test_blank_body_is_failure(self) -> None:
        """Test a page with only whitespace counts as not fetched."""
        transport = _transport(lambda request: httpx.Response(200, text="  \n"))

        assert fetch_page(URL, transport=transport) == ""


class TestHttpSettings:
    """Test suite for environment-driven HTTP settings."""

    def test_no_timeout_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test requests wait indefinitely unless configured."""
        monkeypatch.delenv("YAWST_TIMEOUT", raising=False)

        assert _get_timeout() is None

    def test_timeout_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test YAWST_TIMEOUT sets the timeout in seconds."""
        monkeypatch.setenv("YAWST_TIMEOUT", "2.5")

        assert _get_timeout() == 2.5

    def test_invalid_timeout_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a non-numeric timeout falls back to none."""
        monkeypatch.setenv("YAWST_TIMEOUT", "soon")

        assert _get_timeout() is None

    @pytest.mark.parametrize(("value", "expected"), [("", True), ("false", False), ("0", False), ("yes", True)])
    def test_ssl_verify(self, monkeypatch: pytest.MonkeyPatch, value: str, expected: bool) -> None:
        """Test YAWST_HTTPS_VERIFY can turn certificate checks off."""
        monkeypatch.setenv("YAWST_HTTPS_VERIFY", value)

        assert _get_ssl_verify() is expected
