# webparser

A small command-line tool that downloads three event listing pages
(upcoming, subscribed and archived events), keeps the session's cookies in
a file, and prints the title of every event found on each page.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
webparser
```

The command takes no options apart from `--help`. It visits its target
pages in a fixed order. For each page it prints a heading and then one
`Title: ...` line per event. The page of events you are subscribed to is
shown only when the downloaded page contains the phrase "вы записаны"
("you are signed up"). Cookies are read from and written to `cookies.txt`
in the current directory, so a logged-in session can be reused between
runs.

If a page cannot be downloaded or parsed, the command prints
`Error processing URL: ...` on standard error and exits with status 1.
Otherwise it exits with status 0.

## Library use

The pieces the command is built from can be used on their own.

```python
from webparser.url_queue import UrlQueueManager
from webparser.html_parser import extract_details, extract_links
from webparser.downloader import WebDownloader

queue = UrlQueueManager()
queue.add_url("https://example.com/events/")

downloader = WebDownloader()
while queue.has_urls():
    url = queue.next_url()
    if url is None:
        continue
    html = downloader.download_page(url, "cookies.txt")
    for title in extract_details(html, "https://example.com"):
        print(title)
    for link in extract_links(html, "https://example.com"):
        if not queue.is_processed(link):
            queue.add_url(link)
```

- `webparser.url_queue.UrlQueueManager` is a first-in, first-out queue that
  hands out each URL at most once. `add_url()` ignores URLs already handed
  out, `next_url()` marks the URL it returns as processed and returns
  `None` when nothing new is left, `has_urls()` and `is_processed()` report
  on the queue.
- `webparser.html_parser.extract_details(html, base_url)` returns, in
  document order, the first line (with leading blanks removed) of every
  `<div>` whose class contains
  `dod_new-event__title js-dod-new-event-title`.
- `webparser.html_parser.extract_links(html, base_url)` returns the `href`
  of every `<a>` element, with `base_url` put in front of it as is.
- Both raise `HtmlParseError` (a `ValueError`) for an empty or blank
  document.
- `webparser.downloader.WebDownloader.download_page(url, cookie_file)`
  returns the page body as text, decoded as UTF-8. Cookies are loaded from
  and saved to `cookie_file` in Netscape cookie-file format. Redirects are
  not followed, and error responses still return their body; only
  transport failures raise `DownloadError` (a `RuntimeError`).

`webparser.cli` also provides `is_target_url(url)`,
`filename_from_url(url)` (drops the scheme and turns `/` into `_`, raising
`ValueError` when there is no `://`) and
`save_html_to_file(html_content, filename)`.

## What it does not do

The command does not crawl: it does not follow the links it could extract,
and it only reports on its three fixed pages. It does not save the pages it
downloads; `save_html_to_file` is there for callers that want to.