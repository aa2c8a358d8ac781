"""HTML form extraction (BeautifulSoup)."""

import logging
from urllib.parse import urljoin

from bs4 import BeautifulSoup
from bs4.element import Tag

from nagios_downtime.core.errors import FormError
from nagios_downtime.ports.form import FormParserPort, HtmlForm

__all__ = ["SoupFormParser"]

logger = logging.getLogger(__name__)

_BUTTON_TYPES = {"submit", "image"}
_IGNORED_INPUT_TYPES = {"button", "reset", "file"}


def _select_value(select: Tag) -> str | None:
    options = select.find_all("option")
    chosen = [o for o in options if o.has_attr("selected")]
    if not chosen and not select.has_attr("multiple"):
        chosen = options[:1]
    if not chosen:
        return None
    option = chosen[0]
    return option.get("value", option.get_text(strip=True))


class SoupFormParser(FormParserPort):
    """Form parser built on BeautifulSoup's html.parser backend."""

    def parse(self, html: str, base_url: str, index: int = 0) -> HtmlForm:
        """Extract the index-th form of a page.

        Args:
            html: Page source.
            base_url: URL the page was served from, to resolve the action.
            index: Which form to take (0 = first).

        Returns:
            The parsed form.

        Raises:
            FormError: If the page has no form at that position.
        """
        soup = BeautifulSoup(html, "html.parser")
        forms = soup.find_all("form")
        if index >= len(forms):
            raise FormError(f"Page has {len(forms)} form(s), form #{index} not found")

        node = forms[index]
        form = HtmlForm(
            action=urljoin(base_url, node.get("action") or base_url),
            method=(node.get("method") or "GET").upper(),
        )

        for control in node.find_all(["input", "select", "textarea", "button"]):
            name = control.get("name")
            if not name or control.has_attr("disabled"):
                continue

            if control.name == "select":
                value = _select_value(control)
                if value is not None:
                    form.fields[name] = value
            elif control.name == "textarea":
                form.fields[name] = control.get_text()
            elif control.name == "button":
                if (control.get("type") or "submit").lower() == "submit":
                    form.buttons.append((name, control.get("value", "")))
            else:
                kind = (control.get("type") or "text").lower()
                if kind in _BUTTON_TYPES:
                    form.buttons.append((name, control.get("value", "")))
                elif kind in _IGNORED_INPUT_TYPES:
                    continue
                elif kind in ("checkbox", "radio"):
                    if control.has_attr("checked"):
                        form.fields[name] = control.get("value", "on")
                else:
                    form.fields[name] = control.get("value", "")

        logger.debug(
            f"Parsed form #{index}: action={form.action}, "
            f"{len(form.fields)} field(s), buttons={form.buttons}"
        )
        return form
