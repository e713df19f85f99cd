#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Integration tests for the docmark command-line interface."""

import json
import logging

import pytest
import yaml

from docmark.ast.builder import TreeBuilder
from docmark.cli import EXIT_ERROR, EXIT_SUCCESS, EXIT_UNRESOLVED_REFERENCES, load_table, main
from docmark.exceptions import FileNotFoundError, UnsupportedTokenKindError, ValidationError

PAGE = "# Title\n\nSee [[mod::fn]] and @[epsilon].\n"


@pytest.fixture(autouse=True)
def restore_logging():
    """Remove the handlers installed by the CLI and restore the root level."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if not type(handler).__module__.startswith("_pytest"):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def project(temp_dir):
    """Write a page and its lookup tables."""
    (temp_dir / "page.md").write_text(PAGE, encoding="utf-8")
    (temp_dir / "symbols.json").write_text(json.dumps({"mod::fn": {"url": "/docs/mod/fn"}}), encoding="utf-8")
    (temp_dir / "glossary.yaml").write_text(
        yaml.safe_dump({"epsilon": {"name": "Epsilon", "short_desc": "small quantity"}}), encoding="utf-8"
    )
    return temp_dir


def _args(project, *extra):
    return [
        str(project / "page.md"),
        "--symbols",
        str(project / "symbols.json"),
        "--glossary",
        str(project / "glossary.yaml"),
        *extra,
    ]


@pytest.mark.integration
@pytest.mark.cli
class TestCLI:
    """End-to-end CLI runs."""

    def test_json_output(self, project, capsys) -> None:
        """Test the default output is the JSON node list."""
        assert main(_args(project)) == EXIT_SUCCESS
        nodes = json.loads(capsys.readouterr().out)
        assert [node["type"] for node in nodes] == ["heading", "paragraph"]
        assert nodes[0]["id"] == "title"
        docs_link = nodes[1]["content"][1]
        assert docs_link == {"type": "docs_link", "path": "mod::fn", "url": "/docs/mod/fn", "plaintext": "mod::fn"}

    def test_html_output_file(self, project) -> None:
        """Test HTML written to a file."""
        out = project / "page.html"
        assert main(_args(project, "--format", "html", "--out", str(out))) == EXIT_SUCCESS
        html = out.read_text(encoding="utf-8")
        assert '<h1 id="title">Title</h1>' in html
        assert 'href="/glossary#epsilon"' in html

    def test_text_output(self, project, capsys) -> None:
        """Test plain text output."""
        assert main(_args(project, "--format", "text")) == EXIT_SUCCESS
        assert capsys.readouterr().out == "Title\n\nSee mod::fn and Epsilon.\n"

    def test_unresolved_references_are_warnings(self, project, capsys) -> None:
        """Test misses do not fail a normal build but are logged."""
        assert main([str(project / "page.md"), "--format", "text"]) == EXIT_SUCCESS
        err = capsys.readouterr().err
        assert "mod::fn" in err
        assert "epsilon" in err

    def test_strict_fails_on_misses(self, project, capsys) -> None:
        """Test strict mode exits with a distinct status."""
        assert main([str(project / "page.md"), "--strict"]) == EXIT_UNRESOLVED_REFERENCES
        assert "2 unresolved reference(s)" in capsys.readouterr().err

    def test_strict_passes_when_resolved(self, project) -> None:
        """Test strict mode succeeds when everything resolves."""
        assert main(_args(project, "--strict")) == EXIT_SUCCESS

    def test_rich_diagnostics_table(self, project, capsys) -> None:
        """Test the rich summary lists unresolved identifiers."""
        main([str(project / "page.md"), "--rich", "--log-level", "ERROR"])
        err = capsys.readouterr().err
        assert "mod::fn" in err
        assert "glossary_link" in err

    def test_missing_source(self, temp_dir, capsys) -> None:
        """Test a missing input file is a fatal error."""
        assert main([str(temp_dir / "missing.md")]) == EXIT_ERROR
        assert "File not found" in capsys.readouterr().err

    def test_bad_table(self, project, capsys) -> None:
        """Test an invalid lookup table is a fatal error."""
        (project / "symbols.json").write_text("[1, 2]", encoding="utf-8")
        assert main(_args(project)) == EXIT_ERROR
        assert "must be a mapping" in capsys.readouterr().err

    def test_unknown_highlight_language(self, project, capsys) -> None:
        """Test a language without a Pygments lexer is rejected."""
        assert main(_args(project, "--highlight-language", "no-such-lexer")) == EXIT_ERROR

    def test_parsing_stage_reported(self, project, capsys, monkeypatch) -> None:
        """Test a compilation failure names the stage it happened in."""

        def fail(self, tokens):
            raise UnsupportedTokenKindError("footnote_ref")

        monkeypatch.setattr(TreeBuilder, "build_all", fail)
        assert main(_args(project)) == EXIT_ERROR
        assert "Error during tree_building: Unsupported token type: 'footnote_ref'" in capsys.readouterr().err

    def test_log_file(self, project) -> None:
        """Test log messages are also written to a file."""
        log_file = project / "build.log"
        main([str(project / "page.md"), "--log-file", str(log_file)])
        assert "mod::fn" in log_file.read_text(encoding="utf-8")


@pytest.mark.unit
class TestLoadTable:
    """Test reading lookup tables."""

    def test_yaml(self, temp_dir) -> None:
        """Test YAML tables."""
        path = temp_dir / "basis.yml"
        path.write_text("chebyshev:\n  desc:\n    - One.\n    - Two.\n", encoding="utf-8")
        assert load_table(path) == {"chebyshev": {"desc": ["One.", "Two."]}}

    def test_empty_file(self, temp_dir) -> None:
        """Test an empty file is an empty table."""
        path = temp_dir / "empty.json"
        path.write_text("", encoding="utf-8")
        assert load_table(path) == {}

    def test_missing(self, temp_dir) -> None:
        """Test a missing table file."""
        with pytest.raises(FileNotFoundError):
            load_table(temp_dir / "nope.json")

    def test_invalid_json(self, temp_dir) -> None:
        """Test malformed JSON."""
        path = temp_dir / "bad.json"
        path.write_text("{", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_table(path)
