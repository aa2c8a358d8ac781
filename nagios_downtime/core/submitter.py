"""Schedule a fixed host downtime through the Nagios cmd.cgi form."""

import logging
from datetime import timezone, tzinfo

from nagios_downtime.core.errors import (
    DowntimeConnectionError,
    FormError,
    InvalidProtocolOrPortError,
    MissingParameterError,
    SubmissionError,
    TransportError,
)
from nagios_downtime.core.time_window import format_nagios_time, window_bounds
from nagios_downtime.ports.connection import ConnectionConfig
from nagios_downtime.ports.downtime import DowntimeRequest, SubmissionResult
from nagios_downtime.ports.form import FormParserPort
from nagios_downtime.ports.http import HttpTransportPort

__all__ = [
    "COMMAND_PATH",
    "SUCCESS_MARKER",
    "build_command_url",
    "is_confirmed",
    "resolve_port",
    "submit",
    "validate_required",
]

logger = logging.getLogger(__name__)

# cmd_typ=55 is "schedule host downtime"; the remote server routes on this exact path.
COMMAND_PATH = "/cgi-bin/nagios3/cmd.cgi?cmd_typ=55"
SUCCESS_MARKER = "successfully submitted"
DEFAULT_PORTS = {"http": 80, "https": 443}
MAX_MESSAGE_LEN = 40
FIXED_DOWNTIME = "1"


def resolve_port(protocol: str, port: int | None) -> int:
    """Pick the effective port.

    Args:
        protocol: URL scheme.
        port: Explicit port; None or 0 derives it from the protocol.

    Returns:
        443 for https, 80 for anything else, unless an explicit port was given.

    Raises:
        InvalidProtocolOrPortError: If the explicit port is not a TCP port.
    """
    if not port:
        return DEFAULT_PORTS.get(protocol.lower(), DEFAULT_PORTS["http"])
    if not 0 < port < 65536:
        raise InvalidProtocolOrPortError(f"Port must be between 1 and 65535 (got: {port})")
    return port


def build_command_url(protocol: str, server: str, port: int) -> str:
    return f"{protocol.lower()}://{server}:{port}{COMMAND_PATH}"


def validate_required(config: ConnectionConfig, request: DowntimeRequest) -> None:
    """Fail before any network activity if a required value is empty.

    Raises:
        MissingParameterError: Listing every empty value.
    """
    required = {
        "message": request.message,
        "server": config.server,
        "user": config.username,
        "password": config.password,
        "hostname": request.hostname,
    }
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise MissingParameterError(missing)


def is_confirmed(body: str) -> bool:
    return SUCCESS_MARKER in body.lower()


async def submit(
    config: ConnectionConfig,
    request: DowntimeRequest,
    transport: HttpTransportPort,
    parser: FormParserPort,
    tz: tzinfo = timezone.utc,
) -> SubmissionResult:
    """Load the downtime form, fill it and submit it.

    Steps:
    1. Resolve the port and validate required values.
    2. Compute the window, aborting on unrepresentable dates.
    3. GET the downtime screen (basic auth is handled by the transport).
    4. Fill the first form and POST it through its submit button.
    5. Look for the success marker in the response body.

    No step is retried. Calling this twice schedules two downtimes.

    Args:
        config: Server and credentials.
        request: Host, comment and window.
        transport: HTTP transport.
        parser: Extracts the downtime form from the page.
        tz: Zone used to render the window bounds.

    Returns:
        Result whose success flag reflects the success marker.

    Raises:
        MissingParameterError: If a required value is empty.
        InvalidProtocolOrPortError: If the port is out of range.
        InvalidTimestampError: If the start is not a valid date.
        InvalidDurationError: If the end is not a valid date.
        DowntimeConnectionError: If the downtime screen cannot be loaded.
        FormError: If the page lacks the expected form or button.
        SubmissionError: If the form POST fails.
    """
    port = resolve_port(config.protocol, config.port)
    validate_required(config, request)
    start_dt, end_dt = window_bounds(request.start, request.duration, tz)

    if len(request.message) > MAX_MESSAGE_LEN:
        logger.warning(
            f"Comment is {len(request.message)} chars, "
            f"the downtime screen expects at most {MAX_MESSAGE_LEN}"
        )

    url = build_command_url(config.protocol, config.server, port)
    logger.info(f"Loading downtime screen {url} as {config.username}")
    try:
        page = await transport.get(url)
    except TransportError as e:
        raise DowntimeConnectionError(f"Cannot reach downtime screen {url}: {e}") from e
    if not page.ok:
        raise DowntimeConnectionError(
            f"Downtime screen {url} answered HTTP {page.status}"
        )

    fields = request.fields
    form = parser.parse(page.text, page.url, index=fields.form_index)
    if form.method != "POST":
        logger.debug(f"Form declares method {form.method}, posting it anyway")
    form.fill(
        {
            fields.host: request.hostname,
            fields.author: request.author,
            fields.comment: request.message,
            fields.start_time: format_nagios_time(start_dt),
            fields.end_time: format_nagios_time(end_dt),
            fields.fixed: FIXED_DOWNTIME,
        }
    )
    data = form.submission(fields.submit_name, fields.submit_value)
    if data is None:
        raise FormError(
            f"Submit button {fields.submit_name!r} (value {fields.submit_value!r}) not found; "
            f"available buttons: {form.buttons}"
        )

    logger.info(
        f"Submitting downtime for {request.hostname}: "
        f"{data[fields.start_time]} -> {data[fields.end_time]}"
    )
    try:
        resp = await transport.post_form(form.action, data)
    except TransportError as e:
        raise SubmissionError(f"Downtime submission to {form.action} failed: {e}") from e
    if not resp.ok:
        raise SubmissionError(f"Downtime submission to {form.action} answered HTTP {resp.status}")

    success = is_confirmed(resp.text)
    if success:
        logger.info(f"Downtime for {request.hostname} confirmed by the server")
    else:
        logger.warning(f"Server response for {request.hostname} lacks {SUCCESS_MARKER!r}")
        logger.debug(f"Response body: {resp.text}")
    return SubmissionResult(success=success, body=resp.text, status_code=resp.status)
