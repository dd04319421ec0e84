"""Taskbook - personal task tracking for an address book."""

__version__ = "0.1.0"
