"""Error hierarchy for downtime submission."""

__all__ = [
    "ConfigurationError",
    "DowntimeConnectionError",
    "DowntimeError",
    "FormError",
    "InvalidDurationError",
    "InvalidProtocolOrPortError",
    "InvalidTimestampError",
    "MissingParameterError",
    "SubmissionError",
    "TransportError",
]


class DowntimeError(Exception):
    """Base class for every failure that aborts a submission."""


class ConfigurationError(DowntimeError):
    """Options or environment could not be turned into valid settings."""


class MissingParameterError(DowntimeError):
    """One or more required values are empty."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(f"Missing required parameter(s): {', '.join(missing)}")


class InvalidProtocolOrPortError(DowntimeError):
    """Port cannot be used to build the command URL."""


class InvalidTimestampError(DowntimeError):
    """Start time is not a representable calendar date-time."""


class InvalidDurationError(DowntimeError):
    """Start plus duration is not a representable calendar date-time."""


class TransportError(DowntimeError):
    """The HTTP request itself failed (DNS, refused, timeout, ...)."""


class DowntimeConnectionError(DowntimeError, ConnectionError):
    """The downtime screen could not be loaded or the login was refused."""


class SubmissionError(DowntimeError):
    """The downtime form POST did not get a successful HTTP response."""


class FormError(SubmissionError):
    """The downtime page does not carry the expected form or button."""
