"""Tests for configuration loading and validation."""

import pytest

from nagios_downtime.adapters.driven.config.settings import Settings, load_settings
from nagios_downtime.adapters.driving.cli import parse_args
from nagios_downtime.core.errors import ConfigurationError
from nagios_downtime.ports.downtime import FormFieldNames

__all__ = []

FULL_ARGS = [
    "--server", "nagios.example.org",
    "--user", "nagiosadmin",
    "--password", "secret",
    "--hostname", "web01",
    "--message", "kernel upgrade",
]


def test_load_settings_from_options() -> None:
    """Options should map onto connection config and downtime request."""
    settings = load_settings(
        parse_args(FULL_ARGS + ["--protocol", "HTTPS", "--port", "8443", "--start", "1700000000"])
    )

    connection = settings.to_connection()
    assert connection.protocol == "https"
    assert connection.port == 8443
    assert connection.username == "nagiosadmin"
    assert connection.password == "secret"
    assert connection.verify_tls is True

    request = settings.to_request()
    assert request.hostname == "web01"
    assert request.message == "kernel upgrade"
    assert request.start == 1700000000
    assert request.duration == 7200
    assert request.author == "nagios-downtime"
    assert request.fields == FormFieldNames()


def test_load_settings_defaults() -> None:
    settings = load_settings(parse_args([]))

    assert settings.protocol == "http"
    assert settings.port == 0
    assert settings.server == ""
    assert settings.timeout_sec == 30.0
    assert settings.timezone == "UTC"
    assert str(settings.zone) == "UTC"


def test_start_defaults_to_now(monkeypatch) -> None:
    monkeypatch.setattr("nagios_downtime.adapters.driven.config.settings.time.time", lambda: 1234.9)

    assert load_settings(parse_args(FULL_ARGS)).to_request().start == 1234


def test_load_settings_env_fallback(monkeypatch) -> None:
    """Omitted connection options should come from NAGIOS_* variables."""
    monkeypatch.setenv("NAGIOS_SERVER", "env.example.org")
    monkeypatch.setenv("NAGIOS_PROTOCOL", "Https")
    monkeypatch.setenv("NAGIOS_PORT", "8443")
    monkeypatch.setenv("NAGIOS_USER", "envuser")
    monkeypatch.setenv("NAGIOS_PASSWORD", "envpass")
    monkeypatch.setenv("NAGIOS_TIMEOUT", "5")

    settings = load_settings(parse_args(["--server", "cli.example.org"]))

    assert settings.server == "cli.example.org"
    assert settings.protocol == "https"
    assert settings.port == 8443
    assert settings.user == "envuser"
    assert settings.password == "envpass"
    assert settings.timeout_sec == 5.0


def test_load_settings_form_fields_from_env(monkeypatch) -> None:
    monkeypatch.setenv("NAGIOS_FIELD_COMMENT", "comment")
    monkeypatch.setenv("NAGIOS_SUBMIT_NAME", "submit")
    monkeypatch.setenv("NAGIOS_FORM_INDEX", "1")

    fields = load_settings(parse_args(FULL_ARGS)).to_request().fields

    assert fields.comment == "comment"
    assert fields.submit_name == "submit"
    assert fields.form_index == 1
    assert fields.host == "host"


def test_insecure_disables_tls_verification() -> None:
    settings = load_settings(parse_args(FULL_ARGS + ["--insecure"]))

    assert settings.to_connection().verify_tls is False


@pytest.mark.parametrize(
    ("env_name", "value"),
    [
        ("NAGIOS_PROTOCOL", "ftp"),
        ("NAGIOS_PORT", "eighty"),
        ("NAGIOS_TIMEOUT", "0"),
        ("NAGIOS_TIMEZONE", "Mars/Olympus_Mons"),
        ("NAGIOS_FORM_INDEX", "first"),
    ],
)
def test_load_settings_rejects_invalid_values(monkeypatch, env_name, value) -> None:
    monkeypatch.setenv(env_name, value)

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_settings(parse_args(FULL_ARGS))


def test_settings_repr_hides_password() -> None:
    settings = Settings(password="secret")

    assert "secret" not in repr(settings)
    assert "secret" not in repr(settings.to_connection())


def test_empty_submit_value_from_env_matches_any_button(monkeypatch) -> None:
    """An empty NAGIOS_SUBMIT_VALUE is kept, selecting any button value."""
    monkeypatch.setenv("NAGIOS_SUBMIT_VALUE", "")

    fields = load_settings(parse_args(FULL_ARGS)).to_request().fields

    assert fields.submit_value == ""
    assert fields.submit_name == "btnSubmit"
