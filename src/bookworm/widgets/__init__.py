"""Bookworm TUI widgets."""
