#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/references/resolvers.py
"""Lookup tables for cross-references.

Documentation source refers to three kinds of external knowledge:

- the API symbol index (``[[path::to::item]]`` links)
- the glossary (``@[term]`` links)
- the basis dictionary (``@[term]`` links that miss the glossary)

Each table is wrapped in a resolver that validates every entry up front and
then exposes read-only lookups. Resolvers never change after construction;
to reload data, build a new ``KnowledgeBase`` and swap the reference.

Examples
--------
    >>> kb = KnowledgeBase.from_tables(
    ...     symbols={"mod::fn": {"url": "/docs/mod/fn"}},
    ...     glossary={"epsilon": {"name": "Epsilon", "short_desc": "small quantity"}},
    ... )
    >>> kb.symbols.lookup("mod::fn").url
    '/docs/mod/fn'
    >>> kb.glossary.resolve("delta") is None
    True

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, ClassVar, Generic, Iterator, Mapping, Optional, TypeVar

from docmark.constants import DEFAULT_BASIS_URL_PREFIX, DEFAULT_GLOSSARY_URL_PREFIX, MISSING_REFERENCE_URL
from docmark.exceptions import ReferenceNotFoundError, ValidationError

if TYPE_CHECKING:
    from docmark.ast.nodes import DocsLink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SymbolEntry:
    """A documented API item."""

    path: str
    url: str


@dataclass(frozen=True)
class GlossaryEntry:
    """A glossary term with its display name and one-line description."""

    term: str
    name: str
    short_desc: str
    url: str


@dataclass(frozen=True)
class BasisEntry:
    """A basis concept and its description paragraphs."""

    term: str
    name: str
    desc: tuple[str, ...]
    url: str

    @property
    def description(self) -> str:
        """Description paragraphs joined by blank lines."""
        return "\n\n".join(self.desc)


EntryT = TypeVar("EntryT", SymbolEntry, GlossaryEntry, BasisEntry)


def _require_str(table: str, key: str, raw: Mapping[str, Any], field_name: str) -> str:
    value = raw.get(field_name)
    if not isinstance(value, str):
        raise ValidationError(
            f"{table} entry {key!r} needs a string {field_name!r} field",
            parameter_name=field_name,
            parameter_value=value,
        )
    return value


class ReferenceResolver(ABC, Generic[EntryT]):
    """Read-only lookup over one preloaded table.

    Parameters
    ----------
    table : Mapping[str, Mapping] or None
        Raw table as loaded from the site data, keyed by identifier. Values
        may also be ready-made entry objects.

    Raises
    ------
    ValidationError
        If any entry is missing a required field

    """

    table_name: ClassVar[str]
    entry_type: ClassVar[type]

    def __init__(self, table: Optional[Mapping[str, Any]] = None):
        """Validate and freeze every entry of ``table``."""
        entries: dict[str, EntryT] = {}
        for key, raw in (table or {}).items():
            if isinstance(raw, self.entry_type):
                entries[key] = raw
            elif isinstance(raw, Mapping):
                entries[key] = self._make_entry(key, raw)
            else:
                raise ValidationError(
                    f"{self.table_name} entry {key!r} must be a mapping, got {type(raw).__name__}",
                    parameter_name=key,
                    parameter_value=raw,
                )
        self._entries: Mapping[str, EntryT] = MappingProxyType(entries)
        logger.debug("Loaded %d %s entries", len(entries), self.table_name)

    @abstractmethod
    def _make_entry(self, key: str, raw: Mapping[str, Any]) -> EntryT:
        """Build the typed entry for one raw table row."""

    def lookup(self, key: str) -> EntryT:
        """Return the entry for ``key``.

        Raises
        ------
        ReferenceNotFoundError
            If the table has no such key

        """
        try:
            return self._entries[key]
        except KeyError as e:
            raise ReferenceNotFoundError(key, self.table_name) from e

    def resolve(self, key: str) -> Optional[EntryT]:
        """Return the entry for ``key``, or None when absent."""
        return self._entries.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


class SymbolResolver(ReferenceResolver[SymbolEntry]):
    """Resolve ``path::to::item`` strings to documentation urls."""

    table_name = "symbols"
    entry_type = SymbolEntry

    def _make_entry(self, key: str, raw: Mapping[str, Any]) -> SymbolEntry:
        return SymbolEntry(path=key, url=_require_str(self.table_name, key, raw, "url"))


class GlossaryResolver(ReferenceResolver[GlossaryEntry]):
    """Resolve glossary terms to their name, short description and url.

    Parameters
    ----------
    table : Mapping or None
        Glossary data keyed by term; each row needs ``name`` and ``short_desc``
    url_prefix : str, default "/glossary#"
        The term key is appended to this to form the entry url

    """

    table_name = "glossary"
    entry_type = GlossaryEntry

    def __init__(self, table: Optional[Mapping[str, Any]] = None, url_prefix: str = DEFAULT_GLOSSARY_URL_PREFIX):
        """Store the url prefix before entries are built."""
        self.url_prefix = url_prefix
        super().__init__(table)

    def _make_entry(self, key: str, raw: Mapping[str, Any]) -> GlossaryEntry:
        return GlossaryEntry(
            term=key,
            name=_require_str(self.table_name, key, raw, "name"),
            short_desc=_require_str(self.table_name, key, raw, "short_desc"),
            url=f"{self.url_prefix}{key}",
        )


class BasisResolver(ReferenceResolver[BasisEntry]):
    """Resolve basis concepts to their description paragraphs.

    Rows need a ``desc`` list of paragraph strings; ``name`` is optional and
    defaults to the key.

    """

    table_name = "basis"
    entry_type = BasisEntry

    def __init__(self, table: Optional[Mapping[str, Any]] = None, url_prefix: str = DEFAULT_BASIS_URL_PREFIX):
        """Store the url prefix before entries are built."""
        self.url_prefix = url_prefix
        super().__init__(table)

    def _make_entry(self, key: str, raw: Mapping[str, Any]) -> BasisEntry:
        desc = raw.get("desc")
        if isinstance(desc, str):
            desc = [desc]
        if not isinstance(desc, (list, tuple)) or not all(isinstance(p, str) for p in desc):
            raise ValidationError(
                f"basis entry {key!r} needs a 'desc' list of paragraph strings",
                parameter_name="desc",
                parameter_value=desc,
            )
        name = raw.get("name")
        return BasisEntry(
            term=key,
            name=name if isinstance(name, str) else key,
            desc=tuple(desc),
            url=f"{self.url_prefix}{key}",
        )


@dataclass(frozen=True)
class KnowledgeBase:
    """The three lookup tables the compiler resolves references against.

    Instances are immutable and may be shared by any number of compilers
    running in parallel.

    """

    symbols: SymbolResolver
    glossary: GlossaryResolver
    basis: BasisResolver

    @classmethod
    def from_tables(
        cls,
        symbols: Optional[Mapping[str, Any]] = None,
        glossary: Optional[Mapping[str, Any]] = None,
        basis: Optional[Mapping[str, Any]] = None,
        glossary_url_prefix: str = DEFAULT_GLOSSARY_URL_PREFIX,
        basis_url_prefix: str = DEFAULT_BASIS_URL_PREFIX,
    ) -> KnowledgeBase:
        """Build a knowledge base from raw mappings.

        Parameters
        ----------
        symbols : Mapping or None
            ``{path: {"url": ...}}``
        glossary : Mapping or None
            ``{term: {"name": ..., "short_desc": ...}}``
        basis : Mapping or None
            ``{term: {"desc": [paragraph, ...]}}``
        glossary_url_prefix : str, default "/glossary#"
            Url prefix for glossary entries
        basis_url_prefix : str, default "/basis#"
            Url prefix for basis entries

        Returns
        -------
        KnowledgeBase
            Validated, read-only knowledge base

        """
        return cls(
            symbols=SymbolResolver(symbols),
            glossary=GlossaryResolver(glossary, url_prefix=glossary_url_prefix),
            basis=BasisResolver(basis, url_prefix=basis_url_prefix),
        )

    @classmethod
    def empty(cls) -> KnowledgeBase:
        """Return a knowledge base where every lookup misses."""
        return cls.from_tables()

    def symbol_link(self, path: str) -> DocsLink:
        """Resolve a bare symbol path into a ``DocsLink`` node.

        Used for symbol lists kept outside markdown, such as the ``refs`` of
        an API section. An unknown path yields a link to ``#``; callers that
        need the miss should check ``path in kb.symbols`` first.

        """
        from docmark.ast.nodes import DocsLink

        entry = self.symbols.resolve(path)
        if entry is None:
            logger.warning("Could not find docs item for path: %s", path)
            return DocsLink(path=path, url=MISSING_REFERENCE_URL)
        return DocsLink(path=path, url=entry.url)
