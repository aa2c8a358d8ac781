"""Command-line option parsing."""

import argparse
from collections.abc import Sequence

from nagios_downtime.ports.downtime import DEFAULT_AUTHOR, DEFAULT_DURATION_SEC

__all__ = ["build_parser", "parse_args"]

PROG = "nagios-downtime"


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser.

    Connection options default to None so that NAGIOS_* environment
    variables can fill them in later.
    """
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Schedule a fixed downtime for one host through the Nagios web interface.",
        epilog=(
            "Omitted connection options are read from NAGIOS_SERVER, NAGIOS_PROTOCOL, "
            "NAGIOS_PORT, NAGIOS_USER, NAGIOS_PASSWORD, NAGIOS_TIMEOUT and "
            "NAGIOS_TIMEZONE (a .env file is honoured)."
        ),
    )
    conn = parser.add_argument_group("connection")
    conn.add_argument("--server", help="Nagios web server host name.")
    conn.add_argument(
        "--protocol",
        type=str.lower,
        choices=("http", "https"),
        help="URL scheme (default: http).",
    )
    conn.add_argument("--port", type=int, help="TCP port (default: 0, derived from protocol).")
    conn.add_argument("--user", help="HTTP basic auth user.")
    conn.add_argument("--password", help="HTTP basic auth password.")
    conn.add_argument("--timeout", type=float, help="Per-request timeout in seconds (default: 30).")
    conn.add_argument("--insecure", action="store_true", help="Do not verify TLS certificates.")

    downtime = parser.add_argument_group("downtime")
    downtime.add_argument("--hostname", help="Monitored host to put in downtime.")
    downtime.add_argument("--message", help="Downtime comment (40 characters max advised).")
    downtime.add_argument("--start", type=int, help="Start in epoch seconds (default: now).")
    downtime.add_argument(
        "--duration",
        type=int,
        default=DEFAULT_DURATION_SEC,
        help="Duration in seconds (default: %(default)s).",
    )
    downtime.add_argument(
        "--author",
        default=DEFAULT_AUTHOR,
        help="Comment author reported to Nagios (default: %(default)s).",
    )
    downtime.add_argument("--timezone", help="IANA zone for the form times (default: UTC).")

    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging.")
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)
