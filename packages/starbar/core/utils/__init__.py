"""Shared utilities for Starbar."""

from starbar.core.utils.json import read_json, write_json
from starbar.core.utils.math import clamp, format_number, split_rating

__all__ = [
    "clamp",
    "format_number",
    "split_rating",
    "read_json",
    "write_json",
]
