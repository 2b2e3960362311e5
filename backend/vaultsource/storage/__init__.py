"""Backing store implementations for datasources."""

from .base import FileStorage
from .local import LocalFileStorage
from .memory import MemoryFileStorage

__all__ = [
    "FileStorage",
    "LocalFileStorage",
    "MemoryFileStorage",
]
