#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/cli.py
"""Command-line interface for the docmark compiler.

Compiles one markdown document against the documentation lookup tables and
writes the resulting node sequence as JSON, HTML or plain text. Unresolved
cross-references are logged as warnings; ``--strict`` turns them into a
failing exit status so CI builds catch content gaps.

Examples
--------
Compile to JSON on stdout::

    $ docmark guide.md --symbols symbols.json --glossary glossary.yaml

Render HTML to a file::

    $ docmark guide.md --format html --out guide.html

Fail the build on unresolved links, with a summary table::

    $ docmark guide.md --symbols symbols.json --strict --rich

"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml

from docmark.ast.nodes import Node
from docmark.ast.serialization import nodes_to_json
from docmark.constants import DEFAULT_HIGHLIGHT_LANGUAGE, DEFAULT_LOG_LEVEL, DEFAULT_OUTPUT_FORMAT
from docmark.exceptions import (
    DocmarkError,
    FileAccessError,
    FileNotFoundError,
    ParsingError,
    RenderingError,
    ValidationError,
)
from docmark.logging_utils import LOG_LEVEL_NAMES, configure_logging
from docmark.options.compiler import CompilerOptions
from docmark.options.html import HtmlRendererOptions
from docmark.parsers.markdown import CompiledDocument, MarkdownCompiler
from docmark.references.diagnostics import ResolverMiss
from docmark.references.resolvers import KnowledgeBase
from docmark.renderers.html import render_html

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_UNRESOLVED_REFERENCES = 2

# Boolean options exposed as --no-<name> switches
_NEGATED_FLAGS = {
    "parse_tables": "--no-tables",
    "enable_symbol_links": "--no-symbol-links",
    "enable_glossary_links": "--no-glossary-links",
    "heading_anchors": "--no-heading-anchors",
    "glossary_tooltips": "--no-glossary-tooltips",
}


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ``docmark`` command."""
    parser = argparse.ArgumentParser(
        prog="docmark",
        description="Compile markdown documentation into a semantic node tree.",
    )
    parser.add_argument("source", metavar="SOURCE", help="Markdown file to compile")

    tables = parser.add_argument_group("lookup tables", "JSON or YAML files mapping keys to entries")
    tables.add_argument("--symbols", metavar="FILE", help="Symbol index: {path: {url: ...}}")
    tables.add_argument("--glossary", metavar="FILE", help="Glossary: {term: {name: ..., short_desc: ...}}")
    tables.add_argument("--basis", metavar="FILE", help="Basis dictionary: {term: {desc: [...]}}")

    compiler = parser.add_argument_group("compiler options")
    compiler.add_argument(
        "--highlight-language",
        default=DEFAULT_HIGHLIGHT_LANGUAGE,
        help=CompilerOptions.field_help("highlight_language"),
    )
    for name in ("parse_tables", "enable_symbol_links", "enable_glossary_links"):
        compiler.add_argument(
            _NEGATED_FLAGS[name],
            dest=name,
            action="store_false",
            help=f"Disable: {CompilerOptions.field_help(name)}",
        )

    output = parser.add_argument_group("output")
    output.add_argument(
        "--format",
        choices=["json", "html", "text"],
        default=DEFAULT_OUTPUT_FORMAT,
        help="Output format (default: %(default)s)",
    )
    output.add_argument("--out", "-o", metavar="FILE", help="Write output to FILE instead of stdout")
    output.add_argument("--indent", type=int, default=2, help="JSON indentation (default: %(default)s)")
    for name in ("heading_anchors", "glossary_tooltips"):
        output.add_argument(
            _NEGATED_FLAGS[name],
            dest=name,
            action="store_false",
            help=f"HTML, disable: {HtmlRendererOptions.field_help(name)}",
        )

    diagnostics = parser.add_argument_group("diagnostics")
    diagnostics.add_argument(
        "--strict",
        action="store_true",
        help=f"Exit with status {EXIT_UNRESOLVED_REFERENCES} if any reference is unresolved",
    )
    diagnostics.add_argument("--rich", action="store_true", help="Rich console logging and a table of unresolved references")
    diagnostics.add_argument(
        "--log-level",
        choices=LOG_LEVEL_NAMES,
        default=DEFAULT_LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    diagnostics.add_argument("--log-file", metavar="FILE", help="Also write log messages to FILE")
    diagnostics.add_argument("--trace", action="store_true", help="Debug logging with timestamps and logger names")

    return parser


def load_table(path: str | Path) -> dict[str, Any]:
    """Load a lookup table from a JSON or YAML file.

    Files ending in ``.json`` are read as JSON; anything else is read as
    YAML. An empty file is an empty table.

    Parameters
    ----------
    path : str or Path
        File to load

    Returns
    -------
    dict
        The table's top-level mapping

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the file cannot be read
    ValidationError
        If the contents do not parse or are not a mapping

    """
    table_path = Path(path)
    try:
        text = table_path.read_text(encoding="utf-8")
    except OSError as e:
        if not table_path.exists():
            raise FileNotFoundError(str(table_path), original_error=e) from e
        raise FileAccessError(str(table_path), original_error=e) from e

    try:
        if not text.strip():
            data = None
        elif table_path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValidationError(
            f"Could not parse lookup table {table_path}: {e}", parameter_value=str(table_path), original_error=e
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError(
            f"Lookup table {table_path} must be a mapping, got {type(data).__name__}",
            parameter_value=str(table_path),
        )
    return data


def load_knowledge_base(parsed_args: argparse.Namespace) -> KnowledgeBase:
    """Build the knowledge base from the table files named on the command line."""
    return KnowledgeBase.from_tables(
        symbols=load_table(parsed_args.symbols) if parsed_args.symbols else None,
        glossary=load_table(parsed_args.glossary) if parsed_args.glossary else None,
        basis=load_table(parsed_args.basis) if parsed_args.basis else None,
    )


def format_output(nodes: Sequence[Node], output_format: str, parsed_args: argparse.Namespace) -> str:
    """Serialize compiled nodes in the requested output format."""
    if output_format == "html":
        html_options = HtmlRendererOptions(
            heading_anchors=parsed_args.heading_anchors,
            glossary_tooltips=parsed_args.glossary_tooltips,
        )
        return render_html(nodes, html_options)
    if output_format == "text":
        return "\n\n".join(node.plaintext for node in nodes) + "\n"
    return nodes_to_json(nodes, indent=parsed_args.indent) + "\n"


def _print_diagnostics_rich(source: str, diagnostics: Sequence[ResolverMiss]) -> None:
    from rich.console import Console
    from rich.table import Table

    console = Console(stderr=True)
    if not diagnostics:
        console.print(f"[green]{source}: all references resolved[/green]")
        return

    table = Table(title=f"Unresolved references in {source}")
    table.add_column("#", style="dim", justify="right")
    table.add_column("Link", style="magenta")
    table.add_column("Identifier", style="cyan")
    for index, miss in enumerate(diagnostics, start=1):
        table.add_row(str(index), miss.context.value, miss.identifier)
    console.print(table)


def _setup_logging(parsed_args: argparse.Namespace) -> None:
    # --trace takes precedence over --log-level
    log_level = logging.DEBUG if parsed_args.trace else parsed_args.log_level
    configure_logging(
        log_level,
        log_file=parsed_args.log_file,
        trace_mode=parsed_args.trace,
        rich_output=parsed_args.rich,
    )


def _error_message(error: DocmarkError) -> str:
    stage = None
    if isinstance(error, ParsingError):
        stage = error.parsing_stage
    elif isinstance(error, RenderingError):
        stage = error.rendering_stage
    if stage:
        return f"Error during {stage}: {error}"
    return f"Error: {error}"


def _write_output(content: str, out: Optional[str]) -> None:
    if out:
        out_path = Path(out)
        try:
            out_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise FileAccessError(str(out_path), message=f"Cannot write output file: {out_path}", original_error=e) from e
        logger.info("Wrote %s", out_path)
    else:
        sys.stdout.write(content)


def main(args: list[str] | None = None) -> int:
    """Execute the ``docmark`` command.

    Returns
    -------
    int
        0 on success, 1 on a fatal error, 2 when ``--strict`` is set and a
        reference could not be resolved

    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)
    _setup_logging(parsed_args)

    try:
        options = CompilerOptions(
            highlight_language=parsed_args.highlight_language,
            parse_tables=parsed_args.parse_tables,
            enable_symbol_links=parsed_args.enable_symbol_links,
            enable_glossary_links=parsed_args.enable_glossary_links,
        )
        knowledge_base = load_knowledge_base(parsed_args)
        compiler = MarkdownCompiler(knowledge_base, options)
        document: CompiledDocument = compiler.compile_file(parsed_args.source)
        _write_output(format_output(document.nodes, parsed_args.format, parsed_args), parsed_args.out)
    except DocmarkError as e:
        print(_error_message(e), file=sys.stderr)
        logger.debug("Compilation failed", exc_info=True)
        return EXIT_ERROR

    if parsed_args.rich:
        _print_diagnostics_rich(parsed_args.source, document.diagnostics)

    if parsed_args.strict and document.diagnostics:
        print(
            f"Error: {len(document.diagnostics)} unresolved reference(s) in {parsed_args.source}",
            file=sys.stderr,
        )
        return EXIT_UNRESOLVED_REFERENCES
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
