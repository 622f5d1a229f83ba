"""Shared file I/O helpers."""

from .files import read_text, write_text_atomic

__all__ = ["read_text", "write_text_atomic"]
