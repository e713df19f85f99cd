#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the markdown compiler."""
# src/docmark/options/compiler.py

from __future__ import annotations

from dataclasses import dataclass, field

from docmark.constants import (
    DEFAULT_BASIS_TERM_PREFIX,
    DEFAULT_ENABLE_GLOSSARY_LINKS,
    DEFAULT_ENABLE_SYMBOL_LINKS,
    DEFAULT_HIGHLIGHT_LANGUAGE,
    DEFAULT_PARSE_TABLES,
    MISSING_GLOSSARY_DESCRIPTION,
    MISSING_REFERENCE_URL,
)
from docmark.exceptions import ValidationError
from docmark.options.base import OptionsBase


@dataclass(frozen=True)
class CompilerOptions(OptionsBase):
    """Configuration options for compiling markdown into a semantic tree.

    Parameters
    ----------
    highlight_language : str, default "rust"
        The single language that gets syntax highlighted. Code blocks tagged
        with it are highlighted; code spans always are.
    parse_tables : bool, default True
        Whether to recognize GFM pipe tables.
    enable_symbol_links : bool, default True
        Whether ``[[path::to::item]]`` links are recognized.
    enable_glossary_links : bool, default True
        Whether ``@[term]{text}`` links are recognized.
    basis_term_prefix : str, default "basis-"
        Glossary terms carrying this prefix are also looked up in the basis
        table with the prefix removed.
    missing_reference_url : str, default "#"
        Url used for links whose target could not be resolved.
    missing_glossary_description : str
        Description used for unresolved glossary terms.

    """

    highlight_language: str = field(
        default=DEFAULT_HIGHLIGHT_LANGUAGE,
        metadata={"help": "Language highlighted in code blocks and code spans"},
    )
    parse_tables: bool = field(
        default=DEFAULT_PARSE_TABLES,
        metadata={"help": "Recognize GFM pipe tables"},
    )
    enable_symbol_links: bool = field(
        default=DEFAULT_ENABLE_SYMBOL_LINKS,
        metadata={"help": "Recognize [[path::to::item]] symbol links"},
    )
    enable_glossary_links: bool = field(
        default=DEFAULT_ENABLE_GLOSSARY_LINKS,
        metadata={"help": "Recognize @[term]{text} glossary links"},
    )
    basis_term_prefix: str = field(
        default=DEFAULT_BASIS_TERM_PREFIX,
        metadata={"help": "Glossary term prefix that marks a basis term"},
    )
    missing_reference_url: str = field(
        default=MISSING_REFERENCE_URL,
        metadata={"help": "Url for unresolved symbol and glossary links"},
    )
    missing_glossary_description: str = field(
        default=MISSING_GLOSSARY_DESCRIPTION,
        metadata={"help": "Description shown for unresolved glossary terms"},
    )

    def __post_init__(self) -> None:
        """Validate option values."""
        if not self.highlight_language:
            raise ValidationError(
                "highlight_language must not be empty",
                parameter_name="highlight_language",
                parameter_value=self.highlight_language,
            )
