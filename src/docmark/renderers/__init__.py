#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers consuming compiled node sequences."""

from docmark.renderers.html import HtmlRenderer, render_html

__all__ = ["HtmlRenderer", "render_html"]
