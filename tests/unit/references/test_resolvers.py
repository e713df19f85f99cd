#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for knowledge-base lookup tables."""

import logging

import pytest

from docmark.ast import DocsLink
from docmark.exceptions import ReferenceNotFoundError, ValidationError
from docmark.references import (
    BasisEntry,
    BasisResolver,
    GlossaryEntry,
    GlossaryResolver,
    KnowledgeBase,
    SymbolEntry,
    SymbolResolver,
)


@pytest.mark.unit
class TestSymbolResolver:
    """Test symbol path lookup."""

    def test_lookup(self) -> None:
        """Test a known path resolves to its url."""
        resolver = SymbolResolver({"core::module::func": {"url": "/docs/core/module/func"}})
        assert resolver.lookup("core::module::func") == SymbolEntry("core::module::func", "/docs/core/module/func")

    def test_lookup_miss(self) -> None:
        """Test an unknown path raises with the table name."""
        with pytest.raises(ReferenceNotFoundError) as exc_info:
            SymbolResolver({}).lookup("nope::nothing")
        assert exc_info.value.identifier == "nope::nothing"
        assert exc_info.value.table == "symbols"

    def test_resolve_returns_none_on_miss(self) -> None:
        """Test the non-raising lookup."""
        assert SymbolResolver().resolve("x") is None

    def test_missing_url_rejected(self) -> None:
        """Test entries are validated when the table is loaded."""
        with pytest.raises(ValidationError):
            SymbolResolver({"a::b": {"href": "/x"}})

    def test_non_mapping_entry_rejected(self) -> None:
        """Test that entry rows must be mappings."""
        with pytest.raises(ValidationError):
            SymbolResolver({"a::b": "/x"})

    def test_mapping_protocol(self) -> None:
        """Test membership, length and iteration."""
        resolver = SymbolResolver({"a": {"url": "/a"}, "b": {"url": "/b"}})
        assert "a" in resolver
        assert "c" not in resolver
        assert len(resolver) == 2
        assert sorted(resolver) == ["a", "b"]

    def test_table_is_copied(self) -> None:
        """Test later changes to the source table are not seen."""
        table = {"a": {"url": "/a"}}
        resolver = SymbolResolver(table)
        table["b"] = {"url": "/b"}
        assert "b" not in resolver


@pytest.mark.unit
class TestGlossaryResolver:
    """Test glossary term lookup."""

    def test_entry_url(self) -> None:
        """Test entries link into the glossary page."""
        resolver = GlossaryResolver({"epsilon": {"name": "Epsilon", "short_desc": "small quantity"}})
        assert resolver.lookup("epsilon") == GlossaryEntry("epsilon", "Epsilon", "small quantity", "/glossary#epsilon")

    def test_custom_prefix(self) -> None:
        """Test a configured url prefix."""
        resolver = GlossaryResolver({"t": {"name": "T", "short_desc": "d"}}, url_prefix="/terms/")
        assert resolver.lookup("t").url == "/terms/t"

    def test_requires_short_desc(self) -> None:
        """Test rows without a description are rejected."""
        with pytest.raises(ValidationError):
            GlossaryResolver({"t": {"name": "T"}})


@pytest.mark.unit
class TestBasisResolver:
    """Test basis dictionary lookup."""

    def test_paragraphs(self) -> None:
        """Test description paragraphs are kept in order."""
        entry = BasisResolver({"cheb": {"name": "Chebyshev", "desc": ["One.", "Two."]}}).lookup("cheb")
        assert entry == BasisEntry("cheb", "Chebyshev", ("One.", "Two."), "/basis#cheb")
        assert entry.description == "One.\n\nTwo."

    def test_name_defaults_to_key(self) -> None:
        """Test entries without a name use their key."""
        assert BasisResolver({"mono": {"desc": ["x"]}}).lookup("mono").name == "mono"

    def test_string_desc(self) -> None:
        """Test a single string description is one paragraph."""
        assert BasisResolver({"mono": {"desc": "x"}}).lookup("mono").desc == ("x",)

    def test_invalid_desc(self) -> None:
        """Test descriptions must be strings."""
        with pytest.raises(ValidationError):
            BasisResolver({"mono": {"desc": [1, 2]}})


@pytest.mark.unit
class TestKnowledgeBase:
    """Test the combined knowledge base."""

    def test_empty(self) -> None:
        """Test the empty knowledge base misses everything."""
        kb = KnowledgeBase.empty()
        assert len(kb.symbols) == len(kb.glossary) == len(kb.basis) == 0

    def test_from_tables(self, knowledge_base: KnowledgeBase) -> None:
        """Test all three tables are loaded."""
        assert "mod::fn" in knowledge_base.symbols
        assert "epsilon" in knowledge_base.glossary
        assert "chebyshev" in knowledge_base.basis

    def test_symbol_link(self, knowledge_base: KnowledgeBase) -> None:
        """Test resolving a bare path into a link node."""
        assert knowledge_base.symbol_link("mod::fn") == DocsLink(path="mod::fn", url="/docs/mod/fn")

    def test_symbol_link_miss(self, knowledge_base: KnowledgeBase, caplog: pytest.LogCaptureFixture) -> None:
        """Test an unknown path links to '#' and is logged."""
        with caplog.at_level(logging.WARNING, logger="docmark"):
            link = knowledge_base.symbol_link("nope::x")
        assert link.url == "#"
        assert "nope::x" in caplog.text
