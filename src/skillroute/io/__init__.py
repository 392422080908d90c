"""Shared file I/O helpers."""

from .files import file_sha256
from .json_io import load_json_file, write_json_atomic

__all__ = ["file_sha256", "load_json_file", "write_json_atomic"]
