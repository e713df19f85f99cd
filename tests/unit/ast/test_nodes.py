#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_nodes.py
"""Unit tests for semantic tree node classes.

Tests cover:
- Derived plaintext for every node kind
- Heading anchor ids and level validation
- Link url normalization
- Immutability
- Visitor dispatch

"""

import dataclasses

import pytest

from docmark.ast import (
    NODE_TYPES,
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
    NodeKind,
    Paragraph,
    RawHtml,
    Strong,
    Table,
    Text,
    get_node_children,
)


@pytest.mark.unit
class TestInlinePlaintext:
    """Test plaintext of inline nodes."""

    def test_text_leaf(self) -> None:
        """Test a leaf Text returns its content."""
        assert Text("hello").plaintext == "hello"

    def test_text_with_children(self) -> None:
        """Test a Text with children concatenates them."""
        node = Text(children=(Text("a "), Strong("b"), DocsLink("x::y", "#")))
        assert node.plaintext == "a bx::y"

    def test_strong_and_em(self) -> None:
        """Test emphasis nodes return their flattened content."""
        assert Strong("bold").plaintext == "bold"
        assert Em("soft").plaintext == "soft"

    def test_code_span_uses_source(self) -> None:
        """Test code span plaintext is the code as written, not the HTML."""
        node = CodeSpan(content='<span class="n">x</span>', source="x")
        assert node.plaintext == "x"

    def test_code_span_source_defaults_to_content(self) -> None:
        """Test code span without source falls back to content."""
        node = CodeSpan("x")
        assert node.source == "x"
        assert node.plaintext == "x"

    def test_links(self) -> None:
        """Test plaintext of the link kinds."""
        assert Link("https://x.com", "site").plaintext == "site"
        assert DocsLink("core::module::func", "/docs").plaintext == "core::module::func"
        glossary = GlossaryLink(term="t", link_text="shown", name="Term", url="#", desc="d")
        assert glossary.plaintext == "shown"

    def test_image_line_break_and_html(self) -> None:
        """Test plaintext of image, line break and raw html."""
        assert Image("a.png", alt="diagram").plaintext == "diagram"
        assert LineBreak().plaintext == "\n"
        assert RawHtml("<br/>").plaintext == "<br/>"


@pytest.mark.unit
class TestBlockPlaintext:
    """Test plaintext of block nodes."""

    def test_paragraph_joins_inline_children(self) -> None:
        """Test paragraph plaintext is its children concatenated."""
        node = Paragraph(content=(Text("See "), DocsLink("mod::fn", "/docs"), Text(".")))
        assert node.plaintext == "See mod::fn."

    def test_code_block_uses_source(self) -> None:
        """Test code block plaintext is the unhighlighted code."""
        node = CodeBlock(language="rust", content="<span>fn</span>", source="fn")
        assert node.plaintext == "fn"

    def test_block_quote_with_heading(self) -> None:
        """Test block quote plaintext puts the heading on its own line."""
        node = BlockQuote(heading="Note", content=(Paragraph(content=(Text("a"),)), Paragraph(content=(Text("b"),))))
        assert node.plaintext == "Note\na\nb"

    def test_block_quote_without_heading(self) -> None:
        """Test block quote plaintext without a heading."""
        node = BlockQuote(content=(Paragraph(content=(Text("a"),)),))
        assert node.plaintext == "a"

    def test_list(self) -> None:
        """Test list plaintext puts each item on its own line."""
        items = (ListItem(content=(Text("one"),)), ListItem(content=(Text("two"), Text("more"))))
        node = List(ordered=True, items=items)
        assert node.plaintext == "one\ntwo more"

    def test_table(self) -> None:
        """Test table plaintext is tab separated with a header line."""
        node = Table(headers=("A", "B"), rows=((Text("1"), Text("2")), (Text("3"), Text("4"))))
        assert node.plaintext == "A\tB\n1\t2\n3\t4"

    def test_table_keeps_ragged_rows(self) -> None:
        """Test rows shorter or longer than the header are kept as given."""
        node = Table(headers=("A", "B"), rows=((Text("1"),), (Text("2"), Text("3"), Text("4"))))
        assert len(node.rows[0]) == 1
        assert len(node.rows[1]) == 3

    def test_horizontal_rule(self) -> None:
        """Test horizontal rule plaintext."""
        assert HorizontalRule().plaintext == "---"


@pytest.mark.unit
class TestHeading:
    """Test heading anchors and validation."""

    def test_id_is_slug_of_plaintext(self) -> None:
        """Test that the id is derived from the heading text."""
        node = Heading(content=(Text("Hello, "), Strong("World!")), level=2)
        assert node.plaintext == "Hello, World!"
        assert node.id == "hello-world"

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_invalid_level(self, level: int) -> None:
        """Test that levels outside 1-6 are rejected."""
        with pytest.raises(ValueError):
            Heading(content=(Text("x"),), level=level)


@pytest.mark.unit
class TestLinkNormalization:
    """Test url normalization of standard links."""

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("relative/path", "/relative/path"),
            ("https://x.com", "https://x.com"),
            ("#anchor", "#anchor"),
            ("/already/rooted", "/already/rooted"),
        ],
    )
    def test_url(self, url: str, expected: str) -> None:
        """Test link urls are rooted unless absolute, rooted or fragments."""
        assert Link(url, "text").url == expected


@pytest.mark.unit
class TestNodeBehavior:
    """Test immutability, equality and dispatch."""

    def test_nodes_are_frozen(self) -> None:
        """Test that nodes cannot be modified after construction."""
        node = Text("a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            node.content = "b"  # type: ignore[misc]

    def test_child_sequences_become_tuples(self) -> None:
        """Test that lists passed as children are stored as tuples."""
        node = Paragraph(content=[Text("a")])  # type: ignore[arg-type]
        assert isinstance(node.content, tuple)

    def test_equality_by_value(self) -> None:
        """Test structurally equal nodes compare equal."""
        assert Paragraph(content=(Text("a"),)) == Paragraph(content=(Text("a"),))

    def test_every_kind_has_a_class(self) -> None:
        """Test the kind registry is complete."""
        assert set(NODE_TYPES) == set(NodeKind)
        for kind, cls in NODE_TYPES.items():
            assert cls.kind is kind

    def test_accept_dispatches_on_kind(self) -> None:
        """Test accept calls visit_<kind> on the visitor."""

        class Recorder:
            def visit_docs_link(self, node):
                return ("docs", node.path)

        assert DocsLink("a::b", "#").accept(Recorder()) == ("docs", "a::b")

    def test_get_node_children(self) -> None:
        """Test direct children of container nodes."""
        cell = Text("1")
        table = Table(headers=("A",), rows=((cell,),))
        assert get_node_children(table) == [cell]
        item = ListItem(content=(Text("x"),))
        assert get_node_children(List(items=(item,))) == [item]
        assert get_node_children(Text("leaf")) == []
