"""Application entrypoint."""

import asyncio
import logging
from collections.abc import Sequence

from nagios_downtime.adapters.driven.config.settings import Settings, load_settings
from nagios_downtime.adapters.driven.html.form import SoupFormParser
from nagios_downtime.adapters.driven.http.client import HttpClient
from nagios_downtime.adapters.driven.logging.logging_config import configure_logs
from nagios_downtime.adapters.driving.cli import parse_args
from nagios_downtime.core.errors import DowntimeError
from nagios_downtime.core.submitter import submit
from nagios_downtime.ports.downtime import SubmissionResult

__all__ = ["EXIT_FAILURE", "EXIT_NOT_CONFIRMED", "EXIT_OK", "main", "run"]

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
# argparse already exits with 2 on usage errors
EXIT_NOT_CONFIRMED = 3


async def run(settings: Settings) -> SubmissionResult:
    """Submit one downtime with a fresh HTTP session.

    Args:
        settings: Validated settings.

    Returns:
        Submission outcome.
    """
    connection = settings.to_connection()
    request = settings.to_request()
    async with HttpClient(connection) as http:
        return await submit(connection, request, http, SoupFormParser(), tz=settings.zone)


def main(argv: Sequence[str] | None = None) -> int:
    """Schedule the downtime described by the command line.

    Returns:
        EXIT_OK when confirmed, EXIT_NOT_CONFIRMED when the server answered
        without the success marker, EXIT_FAILURE on any other error.
    """
    args = parse_args(argv)
    configure_logs(debug=args.debug)

    try:
        settings = load_settings(args)
        result = asyncio.run(run(settings))
    except DowntimeError as exc:
        logger.error(f"Downtime not scheduled: {exc}")
        print(f"FAILED: {exc}")
        return EXIT_FAILURE

    if result.success:
        print(f"OK: downtime scheduled for {settings.hostname}")
        return EXIT_OK

    print(f"FAILED: server did not confirm downtime for {settings.hostname}")
    return EXIT_NOT_CONFIRMED


if __name__ == "__main__":
    try:
        raise SystemExit(main())
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("Interrupted by user (Ctrl+C).")
        raise SystemExit(130)
