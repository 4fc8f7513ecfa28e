"""Shared utilities for daypath."""

from daypath.core.utils.json import read_json, write_json
from daypath.core.utils.math import clamp, clamp01, finite_or

__all__ = [
    "clamp",
    "clamp01",
    "finite_or",
    "read_json",
    "write_json",
]
