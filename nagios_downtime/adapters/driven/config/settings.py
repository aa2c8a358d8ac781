"""Configuration loading from command-line options and environment variables."""

import argparse
import logging
import os
import time
from datetime import tzinfo
from typing import Any, Literal
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from nagios_downtime.core.errors import ConfigurationError
from nagios_downtime.ports.connection import ConnectionConfig
from nagios_downtime.ports.downtime import (
    DEFAULT_AUTHOR,
    DEFAULT_DURATION_SEC,
    DowntimeRequest,
    FormFieldNames,
)

__all__ = ["ENV_PREFIX", "Settings", "load_settings"]

load_dotenv()

logger = logging.getLogger(__name__)

ENV_PREFIX = "NAGIOS_"

# option name -> environment variable used when the option is omitted
_ENV_FALLBACKS = {
    "server": "SERVER",
    "protocol": "PROTOCOL",
    "port": "PORT",
    "user": "USER",
    "password": "PASSWORD",
    "timeout": "TIMEOUT",
    "timezone": "TIMEZONE",
}

# FormFieldNames attribute -> environment variable
_FIELD_ENV = {
    "host": "FIELD_HOST",
    "author": "FIELD_AUTHOR",
    "comment": "FIELD_COMMENT",
    "start_time": "FIELD_START_TIME",
    "end_time": "FIELD_END_TIME",
    "fixed": "FIELD_FIXED",
    "submit_name": "SUBMIT_NAME",
    "submit_value": "SUBMIT_VALUE",
    "form_index": "FORM_INDEX",
}


class Settings(BaseModel):
    """Runtime configuration for one downtime submission.

    Required values may be empty here; they are checked right before
    submitting so that every missing one is reported together.

    Attributes:
        server: Nagios web server host name.
        protocol: "http" or "https".
        port: TCP port, 0 derives it from the protocol.
        user: HTTP basic auth user.
        password: HTTP basic auth password.
        hostname: Monitored host to schedule downtime for.
        message: Downtime comment.
        start: Window start in epoch seconds (None means now).
        duration: Window length in seconds.
        author: Comment author reported to Nagios.
        timezone: IANA zone used to render the window.
        timeout_sec: Total timeout per HTTP request.
        verify_tls: Whether to verify the server certificate.
        form_fields: Form control names.
    """

    server: str = ""
    protocol: Literal["http", "https"] = "http"
    port: int = Field(default=0, description="0 means derive from protocol.")
    user: str = ""
    password: str = Field(default="", repr=False)
    hostname: str = ""
    message: str = ""
    start: int | None = None
    duration: int = DEFAULT_DURATION_SEC
    author: str = DEFAULT_AUTHOR
    timezone: str = "UTC"
    timeout_sec: float = Field(default=30.0, gt=0, description="Per-request timeout.")
    verify_tls: bool = True
    form_fields: FormFieldNames = Field(default_factory=FormFieldNames)

    @field_validator("protocol", mode="before")
    @classmethod
    def normalize_protocol(cls, v: Any) -> Any:
        """Accept the protocol in any letter case."""
        return v.strip().lower() if isinstance(v, str) else v

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Validate that the zone is known to the system tz database.

        Raises:
            ValueError: If the zone does not exist.
        """
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v}") from e
        return v

    @property
    def zone(self) -> tzinfo:
        return ZoneInfo(self.timezone)

    def to_connection(self) -> ConnectionConfig:
        return ConnectionConfig(
            protocol=self.protocol,
            server=self.server,
            port=self.port,
            username=self.user,
            password=self.password,
            timeout_sec=self.timeout_sec,
            verify_tls=self.verify_tls,
        )

    def to_request(self) -> DowntimeRequest:
        """Build the downtime request, starting now if no start was given."""
        start = self.start if self.start is not None else int(time.time())
        return DowntimeRequest(
            hostname=self.hostname,
            message=self.message,
            start=start,
            duration=self.duration,
            author=self.author,
            fields=self.form_fields,
        )


def _env(name: str) -> str | None:
    return os.getenv(ENV_PREFIX + name)


def _fields_from_env() -> dict[str, str]:
    overrides = {}
    for attr, env_name in _FIELD_ENV.items():
        value = _env(env_name)
        if value is not None:
            overrides[attr] = value
    return overrides


def load_settings(args: argparse.Namespace) -> Settings:
    """Merge parsed options with environment fallbacks and validate them.

    Options given on the command line win. For omitted connection options
    the NAGIOS_* variables (also read from a .env file) are used:
    NAGIOS_SERVER, NAGIOS_PROTOCOL, NAGIOS_PORT, NAGIOS_USER,
    NAGIOS_PASSWORD, NAGIOS_TIMEOUT, NAGIOS_TIMEZONE.
    Form control names come from NAGIOS_FIELD_*, NAGIOS_SUBMIT_* and
    NAGIOS_FORM_INDEX.

    Args:
        args: Namespace produced by the CLI parser.

    Returns:
        Validated Settings object.

    Raises:
        ConfigurationError: If a value cannot be validated.
    """
    raw: dict[str, Any] = {}
    for option, env_name in _ENV_FALLBACKS.items():
        value = getattr(args, option, None)
        if value is None:
            value = _env(env_name)
        if value is not None:
            raw[option] = value

    if "timeout" in raw:
        raw["timeout_sec"] = raw.pop("timeout")

    for option in ("hostname", "message", "start", "duration", "author"):
        value = getattr(args, option, None)
        if value is not None:
            raw[option] = value
    if getattr(args, "insecure", False):
        raw["verify_tls"] = False

    raw["form_fields"] = _fields_from_env()

    try:
        settings = Settings(**raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e

    logger.debug(
        f"Configured: server={settings.server or '<unset>'}, "
        f"protocol={settings.protocol}, port={settings.port or '<auto>'}, "
        f"user={settings.user or '<unset>'}, timezone={settings.timezone}, "
        f"timeout={settings.timeout_sec}s, verify_tls={settings.verify_tls}"
    )
    return settings
