#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/utils/highlight.py
"""Syntax highlighting for code blocks and code spans.

The compiler treats highlighting as a capability: any callable taking source
code and returning an HTML fragment. The default implementation wraps a
Pygments lexer and emits inline ``<span>`` markup without the surrounding
``<div><pre>`` wrapper, so the result can be placed inside ``<code>``.

"""

from __future__ import annotations

import logging
from typing import Callable

from pygments import highlight as pygments_highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from docmark.constants import DEFAULT_HIGHLIGHT_LANGUAGE
from docmark.exceptions import ValidationError

logger = logging.getLogger(__name__)

Highlighter = Callable[[str], str]


class PygmentsHighlighter:
    """Highlight code in a single language using Pygments.

    Parameters
    ----------
    language : str, default "rust"
        Pygments lexer alias
    css_class_prefix : str, default ""
        Prefix prepended to every Pygments token class

    Raises
    ------
    ValidationError
        If Pygments has no lexer for ``language``

    """

    def __init__(self, language: str = DEFAULT_HIGHLIGHT_LANGUAGE, css_class_prefix: str = ""):
        """Create the lexer and formatter once; both are reused per call."""
        try:
            self._lexer = get_lexer_by_name(language, stripnl=False, ensurenl=False)
        except ClassNotFound as e:
            raise ValidationError(
                f"No syntax highlighter available for language {language!r}",
                parameter_name="language",
                parameter_value=language,
                original_error=e,
            ) from e
        self.language = language
        self._formatter = HtmlFormatter(nowrap=True, classprefix=css_class_prefix)

    def __call__(self, code: str) -> str:
        """Return highlighted HTML for ``code``.

        Pygments ends its output with a newline even when the lexer is told
        not to add one; it is removed unless ``code`` itself ends with one.

        """
        result = pygments_highlight(code, self._lexer, self._formatter)
        if result.endswith("\n") and not code.endswith("\n"):
            result = result[:-1]
        return result


def highlight(code: str, language: str = DEFAULT_HIGHLIGHT_LANGUAGE) -> str:
    """Highlight ``code`` as ``language`` and return an HTML fragment.

    Parameters
    ----------
    code : str
        Source code to highlight
    language : str, default "rust"
        Pygments lexer alias

    Returns
    -------
    str
        HTML with Pygments token spans

    """
    return PygmentsHighlighter(language)(code)
