"""HTTP page fetching."""

from __future__ import annotations

import os

import httpx

# Environment variables for HTTP configuration
YAWST_TIMEOUT_ENV = "YAWST_TIMEOUT"
YAWST_HTTPS_VERIFY_ENV = "YAWST_HTTPS_VERIFY"


def _get_timeout() -> float | None:
    """Get timeout setting from environment.

    Set YAWST_TIMEOUT to a number of seconds to bound each request.

    Returns:
        Timeout in seconds, or None to wait indefinitely
    """
    timeout_env = os.environ.get(YAWST_TIMEOUT_ENV)
    if timeout_env:
        try:
            return float(timeout_env)
        except ValueError:
            pass
    return None


def _get_ssl_verify() -> bool:
    """Get SSL verification setting from environment.

    Set YAWST_HTTPS_VERIFY=false to disable SSL verification
    (useful for self-signed certificates).
    """
    verify_env = os.environ.get(YAWST_HTTPS_VERIFY_ENV, "").lower()
    return verify_env not in ("false", "0", "no", "off")


def _get_http_client(transport: httpx.BaseTransport | None = None) -> httpx.Client:
    """Create HTTP client that follows redirects.

    httpx respects HTTP_PROXY, HTTPS_PROXY and NO_PROXY on its own.
    """
    return httpx.Client(
        timeout=_get_timeout(),
        verify=_get_ssl_verify(),
        follow_redirects=True,
        transport=transport,
    )


def fetch_page(url: str, transport: httpx.BaseTransport | None = None) -> str:
    """Fetch page content.

    Args:
        url: Address of the page.
        transport: Optional httpx transport, used by tests.

    Returns:
        Decoded response body, or an empty string if the request failed,
        the server answered with an error status, or the body was blank.
    """
    try:
        with _get_http_client(transport) as client:
            response = client.get(url)
            response.raise_for_status()
    except (httpx.HTTPError, httpx.InvalidURL):
        return ""

    content = response.text
    return content if content.strip() else ""
