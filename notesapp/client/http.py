"""
HTTP Client.

Async HTTP client for communicating with the notes backend. Every request
carries an X-Frontend-ID header so backend logs show where it came from.
"""

from typing import Any

import httpx

from notesapp.backend.core.config import get_server_base_url
from notesapp.backend.core.logging import get_logger, log_with_source

logger = get_logger(__name__)


class APIClient:
    """
    HTTP client for backend API communication.

    Usage:
        client = APIClient(frontend="cli")
        response = await client.request("GET", "/api/notes")
        await client.close()
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        frontend: str = "web",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Initialize the API client.

        Args:
            base_url: Backend base URL. If None, read from application.yaml.
            timeout: Request timeout in seconds. If None, read from application.yaml.
            frontend: Value of the X-Frontend-ID header
            transport: Optional httpx transport (tests use ASGI or mock transports)
        """
        if base_url is None:
            config_base_url, config_timeout = get_server_base_url()
            base_url = config_base_url
            timeout = timeout if timeout is not None else config_timeout

        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else 30.0
        self.frontend = frontend
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    def _get_client(self) -> httpx.AsyncClient:
        """Get or create the underlying httpx client."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
                transport=self._transport,
                headers={"X-Frontend-ID": self.frontend},
            )
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            await self._client.aclose()
        self._client = None

    async def request(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        """
        Make an HTTP request to the backend.

        Raises:
            httpx.HTTPError: On transport failure
        """
        client = self._get_client()
        log_with_source(logger, self.frontend, "debug", "API request", method=method, path=path)

        try:
            response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as e:
            log_with_source(
                logger,
                self.frontend,
                "error",
                "API request failed",
                method=method,
                path=path,
                error=str(e),
            )
            raise

        log_with_source(
            logger,
            self.frontend,
            "debug",
            "API response",
            method=method,
            path=path,
            status_code=response.status_code,
        )
        return response
