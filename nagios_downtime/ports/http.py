"""HTTP transport port definition (interface and DTO)."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Protocol

__all__ = ["HttpResponseDto", "HttpTransportPort"]


@dataclass(slots=True, frozen=True)
class HttpResponseDto:
    """Fully read HTTP response.

    Attributes:
        status: HTTP status code.
        text: Decoded response body.
        url: Final URL after redirects, used to resolve relative form actions.
    """

    status: int
    text: str
    url: str

    @property
    def ok(self) -> bool:
        """True for 2xx responses."""
        return 200 <= self.status < 300


class HttpTransportPort(Protocol):
    """Minimal transport the submitter needs: GET a page, POST a form."""

    async def get(self, url: str, /) -> HttpResponseDto:
        """Fetch a page.

        Args:
            url: Absolute URL.

        Returns:
            The response, whatever its status.
        """
        ...

    async def post_form(self, url: str, data: Mapping[str, str], /) -> HttpResponseDto:
        """Submit urlencoded form fields.

        Args:
            url: Absolute form action URL.
            data: Field name to value mapping.

        Returns:
            The response, whatever its status.
        """
        ...
