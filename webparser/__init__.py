"""Download event pages with a cookie file, queue visited URLs and extract event titles and links."""

__version__ = "0.1.0"
__all__ = ["__version__"]