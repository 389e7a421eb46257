"""Bookworm: browse a small catalogue and keep a personal reading list."""

__version__ = "0.1.0"
