"""Conversion of epoch seconds into the downtime window the form expects."""

from datetime import datetime, timezone, tzinfo

from nagios_downtime.core.errors import InvalidDurationError, InvalidTimestampError

__all__ = ["NAGIOS_TIME_FORMAT", "format_nagios_time", "window_bounds"]

NAGIOS_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def _is_integer(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def window_bounds(
    start: int, duration: int, tz: tzinfo = timezone.utc
) -> tuple[datetime, datetime]:
    """Compute the calendar start and end of a downtime window.

    Args:
        start: Window start in seconds since the Unix epoch.
        duration: Window length in seconds.
        tz: Zone the date-times are expressed in.

    Returns:
        Aware (start, end) date-times.

    Raises:
        InvalidTimestampError: If start is not an integer or out of range.
        InvalidDurationError: If duration is not an integer or the end is out of range.
    """
    if not _is_integer(start):
        raise InvalidTimestampError(f"Start time must be integer epoch seconds (got: {start!r})")
    try:
        start_dt = datetime.fromtimestamp(start, tz=tz)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidTimestampError(f"Start time {start} is not a valid date: {e}") from e

    if not _is_integer(duration):
        raise InvalidDurationError(f"Duration must be integer seconds (got: {duration!r})")
    try:
        # absolute time, so a DST change inside the window keeps its length
        end_dt = datetime.fromtimestamp(start + duration, tz=tz)
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidDurationError(
            f"Start {start} plus duration {duration}s is not a valid date: {e}"
        ) from e

    return start_dt, end_dt


def format_nagios_time(moment: datetime) -> str:
    """Render a date-time the way cmd.cgi parses it (YYYY-MM-DD HH:MM:SS)."""
    return moment.strftime(NAGIOS_TIME_FORMAT)
