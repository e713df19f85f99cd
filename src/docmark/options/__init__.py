#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option classes for the docmark compiler and renderers."""

from docmark.options.base import OptionsBase
from docmark.options.compiler import CompilerOptions
from docmark.options.html import HtmlRendererOptions

__all__ = [
    "CompilerOptions",
    "HtmlRendererOptions",
    "OptionsBase",
]
