"""Form parsing port definition (interface and DTO)."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Protocol

__all__ = ["FormParserPort", "HtmlForm"]

logger = logging.getLogger(__name__)


@dataclass
class HtmlForm:
    """Successful controls of one HTML form, as a browser would submit them.

    Attributes:
        action: Absolute URL the form posts to.
        method: HTTP method declared by the form (upper case).
        fields: Control name to current value, in document order.
        buttons: (name, value) of every named submit button.
    """

    action: str
    method: str = "POST"
    fields: dict[str, str] = field(default_factory=dict)
    buttons: list[tuple[str, str]] = field(default_factory=list)

    def fill(self, values: Mapping[str, str]) -> None:
        """Override control values; unknown names are added as new fields."""
        for name, value in values.items():
            if name not in self.fields:
                logger.debug(f"Form has no control named {name!r}, adding it")
            self.fields[name] = value

    def submission(self, button_name: str, button_value: str = "") -> dict[str, str] | None:
        """Build the data posted when the given button is clicked.

        Args:
            button_name: Name of the submit button.
            button_value: Its value; empty accepts any value.

        Returns:
            Field mapping including the clicked button, or None if no such button exists.
        """
        for name, value in self.buttons:
            if name == button_name and (not button_value or value == button_value):
                data = dict(self.fields)
                data[name] = value
                return data
        return None


class FormParserPort(Protocol):
    """Extracts a form from a page so the core can fill and submit it."""

    def parse(self, html: str, base_url: str, index: int = 0) -> HtmlForm:
        """Extract the index-th form of a page.

        Args:
            html: Page source.
            base_url: URL the page was served from, to resolve the action.
            index: Which form to take (0 = first).

        Returns:
            The parsed form.
        """
        ...
