"""Command that lists upcoming, subscribed and archived events."""

from __future__ import annotations

import argparse
import sys

from webparser.downloader import DownloadError, WebDownloader
from webparser.html_parser import HtmlParseError, extract_details
from webparser.url_queue import UrlQueueManager

BASE_URL = "https://otus.ru"
COOKIE_FILE = "cookies.txt"
NEAR_URL = "https://otus.ru/events/near/"
SUBSCRIBED_URL = "https://otus.ru/events/subscribed/"
ARCHIVE_URL = "https://otus.ru/events/archive/"
TARGET_URLS = frozenset({NEAR_URL, SUBSCRIBED_URL, ARCHIVE_URL})
SUBSCRIBED_MARKER = "вы записаны"

HEADINGS = {
    NEAR_URL: "Ближайшие мероприятия:",
    SUBSCRIBED_URL: "Мероприятия, на которые вы подписаны:",
    ARCHIVE_URL: "Архив мероприятий:",
}


def filename_from_url(url: str) -> str:
    """Turn a URL into a file name: drop the scheme and replace slashes."""
    scheme_end = url.find("://")
    if scheme_end == -1:
        raise ValueError("URL does not contain a valid protocol (http/https)")
    return url[scheme_end + 3:].replace("/", "_")


def save_html_to_file(html_content: str, filename: str) -> None:
    """Write ``html_content`` to ``filename``."""
    with open(filename, "w", encoding="utf-8") as file:
        file.write(html_content)


def is_target_url(url: str) -> bool:
    """Return True for the event pages this command reports on."""
    return url in TARGET_URLS


def main(argv=None) -> int:
    """Print the event titles of each event page."""
    argparse.ArgumentParser(prog="webparser", description=__doc__).parse_args(argv)

    downloader = WebDownloader()
    queue = UrlQueueManager()
    for url in (NEAR_URL, SUBSCRIBED_URL, ARCHIVE_URL):
        queue.add_url(url)

    try:
        while queue.has_urls():
            url = queue.next_url()
            if url is None or not is_target_url(url):
                continue
            html = downloader.download_page(url, COOKIE_FILE)
            if url == SUBSCRIBED_URL and SUBSCRIBED_MARKER not in html:
                continue
            sys.stdout.write(f"\n\n{HEADINGS[url]}\n\n")
            for title in extract_details(html, BASE_URL):
                sys.stdout.write(f"Title: {title}\n")
    except (DownloadError, HtmlParseError) as err:
        print(f"Error processing URL: {err}", file=sys.stderr)
        return 1
    return 0