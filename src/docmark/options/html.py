#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering."""
# src/docmark/options/html.py

from __future__ import annotations

from dataclasses import dataclass, field

from docmark.constants import DEFAULT_GLOSSARY_TOOLTIPS, DEFAULT_HEADING_ANCHORS
from docmark.options.base import OptionsBase


@dataclass(frozen=True)
class HtmlRendererOptions(OptionsBase):
    """Configuration options for rendering a node sequence to HTML.

    Parameters
    ----------
    heading_anchors : bool, default True
        Emit ``id`` attributes on headings.
    glossary_tooltips : bool, default True
        Emit a ``title`` tooltip with the term name and description on
        glossary links.

    """

    heading_anchors: bool = field(
        default=DEFAULT_HEADING_ANCHORS,
        metadata={"help": "Emit id attributes on headings"},
    )
    glossary_tooltips: bool = field(
        default=DEFAULT_GLOSSARY_TOOLTIPS,
        metadata={"help": "Emit title tooltips on glossary links"},
    )
