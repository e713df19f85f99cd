#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/utils/__init__.py
"""Utility modules for the docmark package."""

from docmark.utils.highlight import PygmentsHighlighter, highlight
from docmark.utils.text import decode_character_references, normalize_link_url, slugify

__all__ = [
    "PygmentsHighlighter",
    "decode_character_references",
    "highlight",
    "normalize_link_url",
    "slugify",
]
