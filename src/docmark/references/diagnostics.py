#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/references/diagnostics.py
"""Non-fatal diagnostics emitted while compiling a document.

A cross-reference that cannot be resolved does not stop compilation: the
link is still produced (pointing at ``#``) and a ``ResolverMiss`` is recorded
so the build can report content gaps.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

logger = logging.getLogger(__name__)


class LinkContext(str, Enum):
    """The link syntax that triggered a lookup."""

    SYMBOL_LINK = "symbol_link"
    GLOSSARY_LINK = "glossary_link"


@dataclass(frozen=True)
class ResolverMiss:
    """A lookup that found no entry in any table.

    Parameters
    ----------
    identifier : str
        Symbol path or glossary term as written in the source
    context : LinkContext
        Which link syntax referenced it

    """

    identifier: str
    context: LinkContext
    kind: str = field(default="resolver_miss", init=False)

    def __str__(self) -> str:
        if self.context is LinkContext.SYMBOL_LINK:
            return f"could not find docs item for path: {self.identifier}"
        return f"glossary term not found: {self.identifier}"


class DiagnosticsCollector:
    """Ordered, per-compilation record of diagnostics.

    Every recorded miss is also logged at WARNING so it reaches build logs
    even when nobody inspects the collector.

    Parameters
    ----------
    source_name : str or None
        Document name included in log messages

    """

    def __init__(self, source_name: str | None = None):
        """Start with an empty record."""
        self.source_name = source_name
        self._items: list[ResolverMiss] = []

    def resolver_miss(self, identifier: str, context: LinkContext) -> ResolverMiss:
        """Record and log an unresolved reference.

        Parameters
        ----------
        identifier : str
            The path or term that missed
        context : LinkContext
            Link syntax that referenced it

        Returns
        -------
        ResolverMiss
            The recorded diagnostic

        """
        miss = ResolverMiss(identifier=identifier, context=context)
        self._items.append(miss)
        if self.source_name:
            logger.warning("%s: %s", self.source_name, miss)
        else:
            logger.warning("%s", miss)
        return miss

    @property
    def items(self) -> tuple[ResolverMiss, ...]:
        """Diagnostics in emission order."""
        return tuple(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[ResolverMiss]:
        return iter(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)
