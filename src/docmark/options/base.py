#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Shared behavior of docmark's option classes.

Options are frozen dataclasses. Each field carries a ``help`` entry in its
metadata, which the command-line interface uses for its argument help.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from docmark.exceptions import ValidationError


@dataclass(frozen=True)
class OptionsBase:
    """Base class for immutable option sets."""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Names of all configurable fields, in declaration order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def field_help(cls, name: str) -> str:
        """Return the help text declared for field ``name``.

        Raises
        ------
        ValidationError
            If the class has no such field

        """
        for f in fields(cls):
            if f.name == name:
                return f.metadata.get("help", "")
        raise ValidationError(f"{cls.__name__} has no option {name!r}", parameter_name=name)

    def create_updated(self, **kwargs: Any) -> Self:
        """Return a copy with the given fields replaced.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Raises
        ------
        ValidationError
            If a keyword is not a field of this class

        """
        unknown = sorted(set(kwargs) - set(self.field_names()))
        if unknown:
            raise ValidationError(
                f"Unknown {type(self).__name__} option(s): {', '.join(unknown)}",
                parameter_name=unknown[0],
                parameter_value=kwargs[unknown[0]],
            )
        return replace(self, **kwargs)
