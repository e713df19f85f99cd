#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Cross-reference lookup tables and resolver diagnostics."""

from docmark.references.diagnostics import DiagnosticsCollector, LinkContext, ResolverMiss
from docmark.references.resolvers import (
    BasisEntry,
    BasisResolver,
    GlossaryEntry,
    GlossaryResolver,
    KnowledgeBase,
    ReferenceResolver,
    SymbolEntry,
    SymbolResolver,
)

__all__ = [
    "BasisEntry",
    "BasisResolver",
    "DiagnosticsCollector",
    "GlossaryEntry",
    "GlossaryResolver",
    "KnowledgeBase",
    "LinkContext",
    "ReferenceResolver",
    "ResolverMiss",
    "SymbolEntry",
    "SymbolResolver",
]
