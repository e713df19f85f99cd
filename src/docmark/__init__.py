#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/__init__.py
"""docmark - compile markdown documentation into a semantic node tree.

docmark turns the markdown of a documentation site (guides, recipes,
tutorials, API prose) into an immutable tree of typed nodes for page
templates. On top of standard markdown it understands two cross-reference
syntaxes:

- ``[[path::to::item]]`` links to an API symbol, resolved against the
  symbol index.
- ``@[term]`` and ``@[term]{display text}`` link to a glossary term,
  resolved against the glossary and then the basis dictionary.

Unresolved references never fail a build: they point at ``#`` and are
reported as diagnostics. Code in the site's language is syntax highlighted
with Pygments while compiling.

Examples
--------
    >>> from docmark import KnowledgeBase, compile_markdown
    >>> kb = KnowledgeBase.from_tables(
    ...     symbols={"mod::fn": {"url": "/docs/mod/fn"}},
    ...     glossary={"ast": {"name": "AST", "short_desc": "Abstract syntax tree"}},
    ... )
    >>> doc = compile_markdown("# Title\\n\\nSee [[mod::fn]] and @[ast]{trees}.", kb)
    >>> doc.nodes[0].id
    'title'
    >>> doc.diagnostics
    ()

"""

from docmark.ast import (
    BlockQuote,
    CodeBlock,
    CodeSpan,
    DocsLink,
    Em,
    GlossaryLink,
    Heading,
    HorizontalRule,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    NodeKind,
    NodeVisitor,
    Paragraph,
    RawHtml,
    Strong,
    Table,
    Text,
)
from docmark.exceptions import (
    DocmarkError,
    FileAccessError,
    FileError,
    FileNotFoundError,
    ParsingError,
    ReferenceNotFoundError,
    RenderingError,
    UnsupportedTokenKindError,
    ValidationError,
)
from docmark.options import CompilerOptions, HtmlRendererOptions
from docmark.parsers import CompiledDocument, MarkdownCompiler, compile_markdown
from docmark.references import KnowledgeBase, ResolverMiss
from docmark.renderers import HtmlRenderer, render_html
from docmark.utils.text import slugify

__version__ = "0.1.0"

__all__ = [
    "BlockQuote",
    "CodeBlock",
    "CodeSpan",
    "CompiledDocument",
    "CompilerOptions",
    "DocmarkError",
    "DocsLink",
    "Em",
    "FileAccessError",
    "FileError",
    "FileNotFoundError",
    "GlossaryLink",
    "Heading",
    "HorizontalRule",
    "HtmlRenderer",
    "HtmlRendererOptions",
    "Image",
    "KnowledgeBase",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "MarkdownCompiler",
    "Node",
    "NodeKind",
    "NodeVisitor",
    "Paragraph",
    "ParsingError",
    "RawHtml",
    "ReferenceNotFoundError",
    "RenderingError",
    "ResolverMiss",
    "Strong",
    "Table",
    "Text",
    "UnsupportedTokenKindError",
    "ValidationError",
    "__version__",
    "compile_markdown",
    "render_html",
    "slugify",
]
