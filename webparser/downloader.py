"""Page downloads over HTTP with a persistent cookie file."""

from __future__ import annotations

import http.client
import os
import urllib.error
import urllib.request
import urllib.response
from http.cookiejar import LoadError, MozillaCookieJar


class DownloadError(RuntimeError):
    """Raised when a page cannot be fetched."""


class _NoRedirect(urllib.request.HTTPRedirectHandler):
    """Hand back redirect responses as they are instead of following them."""

    def _keep_response(self, req, fp, code, msg, headers):
        return urllib.response.addinfourl(fp, headers, req.full_url, code)

    http_error_301 = _keep_response
    http_error_302 = _keep_response
    http_error_303 = _keep_response
    http_error_307 = _keep_response
    http_error_308 = _keep_response


class WebDownloader:
    """Fetches pages, loading and saving cookies in a Netscape cookie file."""

    def download_page(self, url: str, cookie_file: str) -> str:
        """Return the body of ``url``; cookies are read from and written to ``cookie_file``.

        Error responses still yield their body; only transport failures
        raise DownloadError.
        """
        jar = MozillaCookieJar()
        if os.path.exists(cookie_file):
            try:
                jar.load(cookie_file, ignore_discard=True, ignore_expires=True)
            except (LoadError, OSError):
                jar.clear()
        opener = urllib.request.build_opener(
            urllib.request.HTTPCookieProcessor(jar), _NoRedirect()
        )
        try:
            try:
                with opener.open(url) as response:
                    body = response.read()
            except urllib.error.HTTPError as err:
                with err:
                    body = err.read()
        except urllib.error.URLError as err:
            raise DownloadError(f"Failed to download page: {err.reason}") from err
        except (OSError, ValueError, http.client.HTTPException) as err:
            raise DownloadError(f"Failed to download page: {err}") from err
        finally:
            try:
                jar.save(cookie_file, ignore_discard=True, ignore_expires=True)
            except OSError:
                pass
        return body.decode("utf-8", errors="replace")