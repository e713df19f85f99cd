#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tokenizing and compiling markdown documentation source."""

from docmark.parsers.extensions import (
    GlossaryLinkExtension,
    InlineExtension,
    InlineExtensionRegistry,
    InlineMatch,
    ResolutionContext,
    SymbolLinkExtension,
)
from docmark.parsers.markdown import CompiledDocument, MarkdownCompiler, compile_markdown
from docmark.parsers.tokenizer import Tokenizer

__all__ = [
    "CompiledDocument",
    "GlossaryLinkExtension",
    "InlineExtension",
    "InlineExtensionRegistry",
    "InlineMatch",
    "MarkdownCompiler",
    "ResolutionContext",
    "SymbolLinkExtension",
    "Tokenizer",
    "compile_markdown",
]
