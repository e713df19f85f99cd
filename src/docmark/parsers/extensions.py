#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/parsers/extensions.py
"""Custom inline syntaxes for cross-references.

Two link syntaxes extend standard markdown:

``[[path::to::item]]``
    Symbol link, resolved against the API symbol index.

``@[term]`` or ``@[term]{display text}``
    Glossary link, resolved against the glossary, then the basis dictionary.

Each extension owns a start pattern (where it may begin), a tokenizing rule
(what it matches from that offset) and a resolution step that consults the
knowledge base. A lookup miss never fails tokenization: the token is still
produced with fallback values and a ``ResolverMiss`` is recorded.

Extensions are installed into mistune's inline parser ahead of the standard
``link`` rule with their full patterns, so text that is not well formed is
left to the standard rules (``[[a b]](c)`` is still a link). Once a rule
fires, the registry tries its extensions in declaration order at that
offset, so the first-declared extension wins ties.

"""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Iterable, Iterator, Optional

from docmark.constants import (
    GLOSSARY_LINK_PATTERN,
    GLOSSARY_LINK_START,
    SYMBOL_LINK_PATTERN,
    SYMBOL_LINK_START,
)
from docmark.exceptions import ReferenceNotFoundError, ValidationError
from docmark.options.compiler import CompilerOptions
from docmark.references.diagnostics import DiagnosticsCollector, LinkContext
from docmark.references.resolvers import BasisEntry, KnowledgeBase

if TYPE_CHECKING:
    from mistune import Markdown

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InlineMatch:
    """Result of a successful extension match.

    Parameters
    ----------
    start : int
        Offset of the first matched character
    end : int
        Offset just past the match
    raw : str
        The matched source text
    groups : tuple of (str or None)
        Captured groups of the extension's pattern

    """

    start: int
    end: int
    raw: str
    groups: tuple[Optional[str], ...]


@dataclass(frozen=True)
class ResolutionContext:
    """Everything the resolution step needs for one compilation."""

    knowledge_base: KnowledgeBase
    diagnostics: DiagnosticsCollector
    options: CompilerOptions


class InlineExtension(ABC):
    """A pluggable inline syntax.

    Subclasses set ``name`` (also the produced token type), ``start_pattern``
    and ``pattern`` and implement ``resolve``.

    """

    name: ClassVar[str]
    start_pattern: ClassVar[str]
    pattern: ClassVar[str]

    def __init__(self) -> None:
        """Compile the start and full patterns."""
        self._start_re = re.compile(self.start_pattern)
        self._full_re = re.compile(self.pattern)

    def can_start_at(self, text: str, offset: int) -> bool:
        """Return True if this syntax may begin at ``offset``."""
        return self._start_re.match(text, offset) is not None

    def try_match(self, text: str, offset: int) -> Optional[InlineMatch]:
        """Match the full syntax at ``offset``.

        Returns
        -------
        InlineMatch or None
            The match, or None when the text at ``offset`` is not well formed

        """
        m = self._full_re.match(text, offset)
        if m is None:
            return None
        return InlineMatch(start=m.start(), end=m.end(), raw=m.group(0), groups=m.groups())

    @abstractmethod
    def resolve(self, match: InlineMatch, context: ResolutionContext) -> dict[str, Any]:
        """Resolve a match into token attributes, recording any miss."""

    def to_token(self, match: InlineMatch, context: ResolutionContext) -> dict[str, Any]:
        """Build the mistune token for a match."""
        return {"type": self.name, "raw": match.raw, "attrs": self.resolve(match, context)}


class SymbolLinkExtension(InlineExtension):
    """``[[path::to::item]]`` links into the API documentation.

    Path segments are identifiers made of letters, digits, ``_`` and ``!``
    (for macros), separated by ``::``.

    """

    name = "docs_link"
    start_pattern = SYMBOL_LINK_START
    pattern = SYMBOL_LINK_PATTERN

    def resolve(self, match: InlineMatch, context: ResolutionContext) -> dict[str, Any]:
        path = match.groups[0] or ""
        try:
            url = context.knowledge_base.symbols.lookup(path).url
        except ReferenceNotFoundError:
            url = context.options.missing_reference_url
            context.diagnostics.resolver_miss(path, LinkContext.SYMBOL_LINK)
        return {"path": path, "url": url}


class GlossaryLinkExtension(InlineExtension):
    """``@[term]{display text}`` links to glossary and basis entries.

    The glossary is consulted first, then the basis dictionary. When neither
    knows the term the link points at ``#``, shows the raw term and carries
    the missing-term description.

    """

    name = "glossary_link"
    start_pattern = GLOSSARY_LINK_START
    pattern = GLOSSARY_LINK_PATTERN

    def resolve(self, match: InlineMatch, context: ResolutionContext) -> dict[str, Any]:
        term = match.groups[0] or ""
        display = match.groups[1]
        kb = context.knowledge_base

        glossary_entry = kb.glossary.resolve(term)
        if glossary_entry is not None:
            name, url, desc = glossary_entry.name, glossary_entry.url, glossary_entry.short_desc
        else:
            basis_entry = self._resolve_basis(term, context)
            if basis_entry is not None:
                name, url, desc = basis_entry.name, basis_entry.url, basis_entry.description
            else:
                name = term
                url = context.options.missing_reference_url
                desc = context.options.missing_glossary_description
                context.diagnostics.resolver_miss(term, LinkContext.GLOSSARY_LINK)

        return {
            "term": term,
            "link_text": display if display is not None else name,
            "name": name,
            "url": url,
            "desc": desc,
        }

    @staticmethod
    def _resolve_basis(term: str, context: ResolutionContext) -> Optional[BasisEntry]:
        candidates = [term]
        prefix = context.options.basis_term_prefix
        if prefix and term.startswith(prefix) and len(term) > len(prefix):
            candidates.append(term[len(prefix) :])
        for candidate in candidates:
            entry = context.knowledge_base.basis.resolve(candidate)
            if entry is not None:
                return entry
        return None


class InlineExtensionRegistry:
    """Ordered collection of inline extensions.

    Registration order is significant: when two extensions could start at
    the same offset, the one registered first wins.

    Parameters
    ----------
    extensions : iterable of InlineExtension, optional
        Initial extensions, in priority order

    """

    def __init__(self, extensions: Iterable[InlineExtension] = ()):
        """Register the initial extensions in order."""
        self._extensions: list[InlineExtension] = []
        for extension in extensions:
            self.register(extension)

    @classmethod
    def from_options(cls, options: CompilerOptions) -> InlineExtensionRegistry:
        """Create the registry of built-in extensions enabled by ``options``."""
        registry = cls()
        if options.enable_symbol_links:
            registry.register(SymbolLinkExtension())
        if options.enable_glossary_links:
            registry.register(GlossaryLinkExtension())
        return registry

    def register(self, extension: InlineExtension) -> None:
        """Append ``extension`` with the lowest priority so far.

        Raises
        ------
        ValidationError
            If an extension with the same name is already registered

        """
        if any(existing.name == extension.name for existing in self._extensions):
            raise ValidationError(
                f"Inline extension {extension.name!r} is already registered",
                parameter_name="extension",
                parameter_value=extension.name,
            )
        self._extensions.append(extension)

    def __iter__(self) -> Iterator[InlineExtension]:
        return iter(self._extensions)

    def __len__(self) -> int:
        return len(self._extensions)

    @property
    def token_types(self) -> tuple[str, ...]:
        """Token types the registered extensions produce."""
        return tuple(extension.name for extension in self._extensions)

    def first_match(self, text: str, offset: int) -> Optional[tuple[InlineExtension, InlineMatch]]:
        """Return the first extension, in registry order, matching at ``offset``."""
        for extension in self._extensions:
            if extension.can_start_at(text, offset):
                match = extension.try_match(text, offset)
                if match is not None:
                    return extension, match
        return None

    def install(self, markdown: Markdown, context: ResolutionContext) -> None:
        """Register every extension with a mistune instance.

        Each extension is inserted just before the ``link`` rule, after the
        ones installed before it, with its full pattern. Malformed syntax
        therefore never triggers the rule and the standard inline rules see
        the text instead. When a rule fires, ``first_match`` picks the
        extension, so the registry order settles ties at one offset.

        """
        inline_parser = self._make_inline_parser(context)
        for extension in self._extensions:
            markdown.inline.register(extension.name, extension.pattern, inline_parser, before="link")

    def _make_inline_parser(self, context: ResolutionContext) -> Callable[..., Optional[int]]:
        def parse(inline: Any, m: re.Match, state: Any) -> Optional[int]:
            found = self.first_match(state.src, m.start())
            if found is None:
                return None
            extension, match = found
            state.append_token(extension.to_token(match, context))
            return match.end

        return parse
