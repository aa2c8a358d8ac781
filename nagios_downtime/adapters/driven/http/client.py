"""HTTP client adapter with basic auth and timeouts."""

import asyncio
import logging
from collections.abc import Mapping
from types import TracebackType

import aiohttp
from aiohttp import ClientResponse, ClientTimeout

from nagios_downtime.core.errors import TransportError
from nagios_downtime.ports.connection import ConnectionConfig
from nagios_downtime.ports.http import HttpResponseDto

__all__ = ["HttpClient"]

logger = logging.getLogger(__name__)


class HttpClient:
    """HTTP transport for the Nagios web interface.

    Features:
    - HTTP basic auth on every request.
    - Total timeout per request.
    - Optional TLS verification bypass.
    - Context manager for proper resource cleanup.

    Every request is sent once; failures surface as TransportError.
    """

    def __init__(self, config: ConnectionConfig) -> None:
        """Initialize HTTP client.

        Args:
            config: Credentials, timeout and TLS settings.
        """
        self.config = config
        self.session: aiohttp.ClientSession | None = None

    async def __aenter__(self) -> "HttpClient":
        """Enter async context manager (start session).

        Returns:
            Self for use in async with statement.
        """
        connector = None if self.config.verify_tls else aiohttp.TCPConnector(ssl=False)
        self.session = aiohttp.ClientSession(
            auth=aiohttp.BasicAuth(self.config.username, self.config.password),
            timeout=ClientTimeout(total=self.config.timeout_sec),
            connector=connector,
        )
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Exit async context manager (close session).

        Args:
            exc_type: Exception type if raised in context.
            exc: Exception instance if raised in context.
            tb: Traceback if raised in context.
        """
        if self.session:
            await self.session.close()

    def _require_session(self) -> aiohttp.ClientSession:
        if self.session is None:
            raise RuntimeError("Session not initialized; use 'async with' context manager")
        return self.session

    @staticmethod
    async def _read(resp: ClientResponse) -> HttpResponseDto:
        """Read the whole body and release the connection."""
        try:
            text = await resp.text(errors="replace")
        finally:
            resp.release()
        return HttpResponseDto(status=resp.status, text=text, url=str(resp.url))

    async def get(self, url: str) -> HttpResponseDto:
        """Single HTTP GET request.

        Args:
            url: URL to fetch.

        Returns:
            Response DTO, whatever the status.

        Raises:
            RuntimeError: If session not initialized.
            TransportError: On network errors, timeout or an undecodable charset.
        """
        session = self._require_session()
        logger.debug(f"GET {url}")
        try:
            resp = await session.get(url, allow_redirects=True)
            result = await self._read(resp)
        except (aiohttp.ClientError, asyncio.TimeoutError, LookupError) as e:
            raise TransportError(f"GET {url} failed: {e!r}") from e
        logger.debug(f"GET {url} returned status {result.status}")
        return result

    async def post_form(self, url: str, data: Mapping[str, str]) -> HttpResponseDto:
        """Single urlencoded form POST.

        Args:
            url: Form action URL.
            data: Form fields.

        Returns:
            Response DTO, whatever the status.

        Raises:
            RuntimeError: If session not initialized.
            TransportError: On network errors, timeout or an undecodable charset.
        """
        session = self._require_session()
        logger.debug(f"POST {url} ({len(data)} fields)")
        try:
            resp = await session.post(url, data=dict(data))
            result = await self._read(resp)
        except (aiohttp.ClientError, asyncio.TimeoutError, LookupError) as e:
            raise TransportError(f"POST {url} failed: {e!r}") from e
        logger.debug(f"POST {url} returned status {result.status}")
        return result
