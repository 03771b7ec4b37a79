"""A FIFO queue of URLs that hands out each URL at most once."""

from __future__ import annotations

from collections import deque


class UrlQueueManager:
    """Queue of URLs to visit, remembering the ones already handed out."""

    def __init__(self) -> None:
        self._queue: deque[str] = deque()
        self._processed: set[str] = set()

    def add_url(self, url: str) -> None:
        """Queue ``url`` unless it has already been processed."""
        if url not in self._processed:
            self._queue.append(url)

    def has_urls(self) -> bool:
        """Return True while the queue still holds entries."""
        return bool(self._queue)

    def next_url(self) -> str | None:
        """Return the next unprocessed URL and mark it processed.

        Entries already processed are dropped; None is returned when the
        queue runs out.
        """
        while self._queue:
            url = self._queue.popleft()
            if url in self._processed:
                continue
            self._processed.add(url)
            return url
        return None

    def is_processed(self, url: str) -> bool:
        """Return True if ``url`` has already been handed out."""
        return url in self._processed