"""Shared fixtures."""

import os
from collections.abc import Mapping

import pytest

from nagios_downtime.core.errors import TransportError
from nagios_downtime.ports.connection import ConnectionConfig
from nagios_downtime.ports.downtime import DowntimeRequest
from nagios_downtime.ports.http import HttpResponseDto

__all__ = []

PAGE_URL = "http://nagios.example.org:80/cgi-bin/nagios3/cmd.cgi?cmd_typ=55"

NAGIOS_FORM_PAGE = """
<html><body>
<p>You are requesting to schedule downtime for a particular host</p>
<form method='post' action='cmd.cgi'>
<input type='hidden' name='cmd_typ' value='55'>
<input type='hidden' name='cmd_mod' value='2'>
<table>
<tr><td>Host Name:</td><td><input type='text' name='host' value=''></td></tr>
<tr><td>Author (Your Name):</td><td><input type='text' name='com_author' value='nagiosadmin'></td></tr>
<tr><td>Comment:</td><td><input type='text' name='com_data' value=''></td></tr>
<tr><td>Triggered By:</td><td><select name='trigger'><option value='0'>N/A</option></select></td></tr>
<tr><td>Start Time:</td><td><input type='text' name='start_time' value='11-14-2023 22:00:00'></td></tr>
<tr><td>End Time:</td><td><input type='text' name='end_time' value='11-15-2023 00:00:00'></td></tr>
<tr><td>Type:</td><td><select name='fixed'>
<option value=1>Fixed</option><option value=0>Flexible</option></select></td></tr>
<tr><td>Hours:</td><td><input type='text' name='hours' value='2'></td></tr>
<tr><td>Minutes:</td><td><input type='text' name='minutes' value='0'></td></tr>
<tr><td>Child Hosts:</td><td><select name='childoptions'>
<option value='0'>Do nothing with child hosts</option>
<option value='1'>Schedule triggered downtime for all child hosts</option>
</select></td></tr>
<tr><td><input type='submit' name='btnSubmit' value='Commit'>
<input type='reset' value='Reset'></td></tr>
</table>
</form>
</body></html>
"""

SUCCESS_PAGE = (
    "<html><body><div class='infoMessage'>Your command request was "
    "successfully submitted to Nagios for processing.</div></body></html>"
)


class FakeTransport:
    """Transport double that records every call and replays canned responses."""

    def __init__(
        self,
        get_response: HttpResponseDto | Exception | None = None,
        post_response: HttpResponseDto | Exception | None = None,
    ) -> None:
        self.get_response = get_response or HttpResponseDto(200, NAGIOS_FORM_PAGE, PAGE_URL)
        self.post_response = post_response or HttpResponseDto(200, SUCCESS_PAGE, PAGE_URL)
        self.gets: list[str] = []
        self.posts: list[tuple[str, dict[str, str]]] = []

    @property
    def calls(self) -> int:
        return len(self.gets) + len(self.posts)

    async def get(self, url: str) -> HttpResponseDto:
        self.gets.append(url)
        if isinstance(self.get_response, Exception):
            raise self.get_response
        return self.get_response

    async def post_form(self, url: str, data: Mapping[str, str]) -> HttpResponseDto:
        self.posts.append((url, dict(data)))
        if isinstance(self.post_response, Exception):
            raise self.post_response
        return self.post_response


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def connection() -> ConnectionConfig:
    return ConnectionConfig(
        protocol="http",
        server="nagios.example.org",
        username="nagiosadmin",
        password="secret",
    )


@pytest.fixture
def downtime() -> DowntimeRequest:
    return DowntimeRequest(
        hostname="web01",
        message="kernel upgrade",
        start=1700000000,
        duration=3600,
    )


@pytest.fixture(autouse=True)
def clean_nagios_env(monkeypatch) -> None:
    """Keep NAGIOS_* variables from the outer environment out of the tests."""
    for name in list(os.environ):
        if name.startswith("NAGIOS_"):
            monkeypatch.delenv(name)


@pytest.fixture
def make_transport() -> type[FakeTransport]:
    return FakeTransport


@pytest.fixture
def transport_error() -> TransportError:
    return TransportError("connection refused")


@pytest.fixture
def form_page() -> HttpResponseDto:
    return HttpResponseDto(200, NAGIOS_FORM_PAGE, PAGE_URL)
