"""Content-management REST backend for the news site."""

__version__ = "0.1.0"
