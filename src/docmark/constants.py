#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/constants.py
"""Constants and default values shared across docmark."""

from __future__ import annotations

from typing import Literal

OutputFormat = Literal["json", "html", "text"]

# The only language the documentation highlights
DEFAULT_HIGHLIGHT_LANGUAGE = "rust"

DEFAULT_PARSE_TABLES = True
DEFAULT_ENABLE_SYMBOL_LINKS = True
DEFAULT_ENABLE_GLOSSARY_LINKS = True

# Resolved link targets
DEFAULT_GLOSSARY_URL_PREFIX = "/glossary#"
DEFAULT_BASIS_URL_PREFIX = "/basis#"
DEFAULT_BASIS_TERM_PREFIX = "basis-"
MISSING_REFERENCE_URL = "#"
MISSING_GLOSSARY_DESCRIPTION = "Missing Glossary Term — Please report this issue."

# Link url normalization: urls starting with one of these are left untouched
ABSOLUTE_URL_PREFIXES = ("http://", "https://")
PRESERVED_URL_PREFIXES = ABSOLUTE_URL_PREFIXES + ("/", "#")

# Inline extension syntax
SYMBOL_LINK_START = r"\[\["
SYMBOL_LINK_PATTERN = r"\[\[((?:[A-Za-z0-9_!]+::)*[A-Za-z0-9_!]+)\]\]"
GLOSSARY_LINK_START = r"@\["
GLOSSARY_LINK_PATTERN = r"@\[([^\]]+)\](?:\{([^}]+)\})?"

# HTML rendering
DEFAULT_HEADING_ANCHORS = True
DEFAULT_GLOSSARY_TOOLTIPS = True

DEFAULT_OUTPUT_FORMAT: OutputFormat = "json"
DEFAULT_LOG_LEVEL = "WARNING"
