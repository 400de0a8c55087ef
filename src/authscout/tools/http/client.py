"""Async HTTP client used for relay retrieval."""

import time
from dataclasses import dataclass

import httpx

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)
HTML_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


@dataclass
class HTTPResponse:
    """Represents an HTTP response."""

    url: str
    status_code: int
    headers: dict[str, str]
    body: str
    response_time: float
    content_type: str = ""

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


class HTTPClient:
    """Async HTTP client wrapping a single httpx session."""

    def __init__(
        self,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        headers: dict[str, str] | None = None,
    ):
        self.timeout = timeout
        self.follow_redirects = follow_redirects
        self.headers = {"User-Agent": DEFAULT_USER_AGENT, **(headers or {})}
        self.client: httpx.AsyncClient | None = None

    async def __aenter__(self):
        self.client = httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=self.follow_redirects,
            headers=self.headers,
        )
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        if self.client:
            await self.client.aclose()
            self.client = None

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
        timeout: float | None = None,
    ) -> HTTPResponse:
        """Make a GET request."""
        if not self.client:
            raise RuntimeError("Client not initialized. Use async context manager.")

        start = time.time()

        response = await self.client.get(
            url,
            headers=headers,
            timeout=timeout if timeout is not None else self.timeout,
        )

        elapsed = time.time() - start

        return HTTPResponse(
            url=str(response.url),
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.text,
            response_time=elapsed,
            content_type=response.headers.get("content-type", ""),
        )
