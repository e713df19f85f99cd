#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/parsers/markdown.py
"""Markdown compiler.

This module ties the tokenizer and the tree builder together: source text
goes in, an ordered sequence of semantic nodes (one per top-level block)
comes out, together with the diagnostics recorded while resolving
cross-references.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from docmark.ast.builder import TreeBuilder
from docmark.ast.nodes import Node
from docmark.exceptions import FileAccessError, FileNotFoundError
from docmark.options.compiler import CompilerOptions
from docmark.parsers.extensions import InlineExtensionRegistry, ResolutionContext
from docmark.parsers.tokenizer import Tokenizer
from docmark.references.diagnostics import DiagnosticsCollector, ResolverMiss
from docmark.references.resolvers import KnowledgeBase
from docmark.utils.decorators import debug_timer
from docmark.utils.highlight import Highlighter, PygmentsHighlighter

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompiledDocument:
    """Result of compiling one document.

    Parameters
    ----------
    nodes : tuple of Node
        Top-level blocks in document order
    diagnostics : tuple of ResolverMiss
        Unresolved references, in the order they were met

    """

    nodes: tuple[Node, ...]
    diagnostics: tuple[ResolverMiss, ...] = ()


class MarkdownCompiler:
    r"""Compile markdown documentation source into semantic nodes.

    Parameters
    ----------
    knowledge_base : KnowledgeBase or None, default None
        Lookup tables for symbol and glossary links. Without one every
        cross-reference is reported as a miss.
    options : CompilerOptions or None, default None
        Compiler configuration
    highlighter : Highlighter or None, default None
        Callable highlighting code in ``options.highlight_language``;
        defaults to a Pygments highlighter for that language
    registry : InlineExtensionRegistry or None, default None
        Inline extensions; defaults to the built-in ones enabled by options

    Examples
    --------
        >>> kb = KnowledgeBase.from_tables(symbols={"mod::fn": {"url": "/docs/mod/fn"}})
        >>> compiler = MarkdownCompiler(kb)
        >>> nodes = compiler.parse("# Title\n\nSee [[mod::fn]].\n")
        >>> nodes[0].id
        'title'
        >>> nodes[1].content[1].url
        '/docs/mod/fn'

    Notes
    -----
    A compiler may be reused for any number of documents. ``diagnostics``
    holds the misses of the most recent call only; concurrent callers should
    use one compiler each or read ``compile(...).diagnostics`` instead.

    """

    def __init__(
        self,
        knowledge_base: Optional[KnowledgeBase] = None,
        options: Optional[CompilerOptions] = None,
        highlighter: Optional[Highlighter] = None,
        registry: Optional[InlineExtensionRegistry] = None,
    ):
        """Initialize the compiler with its injected dependencies."""
        self.options = options or CompilerOptions()
        self.knowledge_base = knowledge_base or KnowledgeBase.empty()
        self.highlighter = highlighter or PygmentsHighlighter(self.options.highlight_language)
        self.tokenizer = Tokenizer(registry=registry, options=self.options)
        self.diagnostics: tuple[ResolverMiss, ...] = ()

    def compile(self, source: str, source_name: Optional[str] = None) -> CompiledDocument:
        """Compile ``source`` into nodes and diagnostics.

        Parameters
        ----------
        source : str
            Markdown text
        source_name : str or None
            Document name used in log messages

        Returns
        -------
        CompiledDocument
            The complete node sequence and its diagnostics

        Raises
        ------
        UnsupportedTokenKindError
            If the tokenizer produced a token without a node mapping

        """
        # Fresh per-call state; nothing carries over between documents
        self.diagnostics = ()
        collector = DiagnosticsCollector(source_name)
        context = ResolutionContext(knowledge_base=self.knowledge_base, diagnostics=collector, options=self.options)
        builder = TreeBuilder(self.highlighter, self.options.highlight_language)

        with debug_timer(logger, f"Compiling {source_name or 'markdown source'}"):
            tokens = self.tokenizer.tokenize(source, context)
            nodes = tuple(builder.build_all(tokens))

        self.diagnostics = collector.items
        if collector:
            logger.info("%s: %d unresolved reference(s)", source_name or "<string>", len(collector))
        return CompiledDocument(nodes=nodes, diagnostics=collector.items)

    def parse(self, source: str) -> list[Node]:
        """Compile ``source`` and return its top-level nodes.

        Diagnostics from this call are left in ``self.diagnostics``.

        """
        return list(self.compile(source).nodes)

    def compile_file(self, path: Union[str, Path]) -> CompiledDocument:
        """Read a UTF-8 file and compile its contents.

        Raises
        ------
        FileNotFoundError
            If ``path`` does not exist
        FileAccessError
            If the file cannot be read or is not valid UTF-8

        """
        file_path = Path(path)
        try:
            source = file_path.read_text(encoding="utf-8")
        except OSError as e:
            if not file_path.exists():
                raise FileNotFoundError(str(file_path), original_error=e) from e
            raise FileAccessError(str(file_path), original_error=e) from e
        except UnicodeDecodeError as e:
            raise FileAccessError(
                str(file_path), message=f"File is not valid UTF-8: {file_path}", original_error=e
            ) from e
        return self.compile(source, source_name=str(file_path))

    def parse_file(self, path: Union[str, Path]) -> list[Node]:
        """Read a UTF-8 file and return its top-level nodes."""
        return list(self.compile_file(path).nodes)


def compile_markdown(
    source: str,
    knowledge_base: Optional[KnowledgeBase] = None,
    options: Optional[CompilerOptions] = None,
) -> CompiledDocument:
    r"""Compile a markdown string in one step.

    Parameters
    ----------
    source : str
        Markdown text
    knowledge_base : KnowledgeBase or None
        Lookup tables for cross-references
    options : CompilerOptions or None
        Compiler configuration

    Returns
    -------
    CompiledDocument
        Nodes and diagnostics

    Examples
    --------
    >>> from docmark.parsers.markdown import compile_markdown
    >>> doc = compile_markdown("# Hello\n\nWorld")
    >>> len(doc.nodes)
    2

    """
    return MarkdownCompiler(knowledge_base, options).compile(source)
