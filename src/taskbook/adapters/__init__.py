"""Adapters - I/O implementations of ports."""

from .memory_model import InMemoryTaskModel
from .json_source import JsonTaskSource

__all__ = [
    "InMemoryTaskModel",
    "JsonTaskSource",
]
