"""Extraction of links and event titles from HTML pages."""

from __future__ import annotations

from bs4 import BeautifulSoup, NavigableString

EVENT_TITLE_CLASS = "dod_new-event__title js-dod-new-event-title"


class HtmlParseError(ValueError):
    """Raised when a document cannot be parsed as HTML."""


def _parse(html: str) -> BeautifulSoup:
    if not html.strip():
        raise HtmlParseError("Failed to parse HTML")
    # Keep attribute values as written so the class check sees the raw text.
    return BeautifulSoup(html, "html.parser", multi_valued_attributes=None)


def _trim_title(text: str) -> str:
    """Cut a raw title text down to its first line, dropping leading blanks.

    Leading control characters and spaces are skipped; the title then runs
    up to the next newline. Text that does not start with a blank is cut
    from its first blank onwards, as the event pages always indent titles.
    """
    start = 0
    end = 0
    for ch in text:
        if end == 0:
            if "\0" < ch <= " ":
                start += 1
            else:
                end = start
        else:
            if ch == "\n":
                break
            end += 1
    return text[start:end + 1]


def extract_details(html: str, base_url: str) -> list[str]:
    """Return the event titles found in ``html``, in document order."""
    soup = _parse(html)
    titles = []
    for div in soup.find_all("div"):
        class_name = div.get("class")
        if class_name is None or EVENT_TITLE_CLASS not in class_name:
            continue
        if not div.contents:
            continue
        first = div.contents[0]
        if not isinstance(first, NavigableString):
            continue
        content = str(first)
        if content:
            titles.append(_trim_title(content))
    return titles


def extract_links(html: str, base_url: str) -> list[str]:
    """Return every anchor ``href`` in ``html`` prefixed with ``base_url``."""
    soup = _parse(html)
    return [base_url + anchor["href"] for anchor in soup.find_all("a") if anchor.has_attr("href")]