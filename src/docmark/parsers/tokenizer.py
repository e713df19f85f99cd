#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/parsers/tokenizer.py
"""Markdown tokenizer.

Wraps mistune's AST mode: block grammar, standard inline grammar, pipe tables
(``docmark.parsers.tables``) and the cross-reference extensions from
``docmark.parsers.extensions``. The result is mistune's nested token list,
with inline content already tokenized into ``children``.

"""

from __future__ import annotations

import logging
from typing import Any, Optional

import mistune

from docmark.options.compiler import CompilerOptions
from docmark.parsers.extensions import InlineExtensionRegistry, ResolutionContext
from docmark.parsers.tables import ragged_table

logger = logging.getLogger(__name__)


class Tokenizer:
    """Convert source text into a mistune token tree.

    A new mistune instance is created for every call, bound to that call's
    resolution context, so a tokenizer can be shared between threads.

    Parameters
    ----------
    registry : InlineExtensionRegistry or None
        Inline extensions to install; defaults to the built-in ones enabled
        by ``options``
    options : CompilerOptions or None
        Compiler configuration

    """

    def __init__(
        self,
        registry: Optional[InlineExtensionRegistry] = None,
        options: Optional[CompilerOptions] = None,
    ):
        """Store the registry and options."""
        self.options = options or CompilerOptions()
        self.registry = registry if registry is not None else InlineExtensionRegistry.from_options(self.options)

    def _create_markdown(self, context: ResolutionContext) -> mistune.Markdown:
        plugins = []
        if self.options.parse_tables:
            plugins.append(ragged_table)

        markdown = mistune.create_markdown(renderer=None, plugins=plugins)
        self.registry.install(markdown, context)
        return markdown

    def tokenize(self, text: str, context: ResolutionContext) -> list[dict[str, Any]]:
        """Tokenize ``text``.

        Parameters
        ----------
        text : str
            Markdown source
        context : ResolutionContext
            Knowledge base, diagnostics sink and options for cross-references

        Returns
        -------
        list of dict
            Top-level block tokens

        """
        markdown = self._create_markdown(context)
        tokens, _state = markdown.parse(text)
        if not isinstance(tokens, list):
            return []
        logger.debug("Tokenized %d top-level tokens", len(tokens))
        return tokens
