"""Downtime request/result port definitions (DTOs)."""

from dataclasses import dataclass, field

__all__ = [
    "DEFAULT_AUTHOR",
    "DEFAULT_DURATION_SEC",
    "DowntimeRequest",
    "FormFieldNames",
    "SubmissionResult",
]

DEFAULT_AUTHOR = "nagios-downtime"
DEFAULT_DURATION_SEC = 7200


@dataclass(frozen=True)
class FormFieldNames:
    """Names of the controls on the "schedule host downtime" form.

    Defaults match the Nagios 3 cmd.cgi page.

    Attributes:
        host: Target host control.
        author: Comment author control.
        comment: Comment text control.
        start_time: Window start control.
        end_time: Window end control.
        fixed: Fixed/flexible selector control.
        submit_name: Name of the submit button.
        submit_value: Value of the submit button (empty matches any).
        form_index: Position of the downtime form on the page.
    """

    host: str = "host"
    author: str = "com_author"
    comment: str = "com_data"
    start_time: str = "start_time"
    end_time: str = "end_time"
    fixed: str = "fixed"
    submit_name: str = "btnSubmit"
    submit_value: str = "Commit"
    form_index: int = 0


@dataclass
class DowntimeRequest:
    """One downtime window for one host.

    Attributes:
        hostname: Monitored host to put in downtime.
        message: Downtime comment (advisory max 40 chars).
        start: Window start, epoch seconds.
        duration: Window length in seconds.
        author: Literal reported as the comment author.
        fields: Form control names to fill.
    """

    hostname: str
    message: str
    start: int
    duration: int = DEFAULT_DURATION_SEC
    author: str = DEFAULT_AUTHOR
    fields: FormFieldNames = field(default_factory=FormFieldNames)


@dataclass
class SubmissionResult:
    """Outcome of a form submission.

    Attributes:
        success: True if the response carried the success marker.
        body: Decoded response body, kept for diagnostics.
        status_code: HTTP status of the submission response.
    """

    success: bool
    body: str
    status_code: int | None = None
