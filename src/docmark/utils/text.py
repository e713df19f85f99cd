#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/docmark/utils/text.py
"""Text processing utilities.

Functions
---------
slugify : Convert text to a stable anchor identifier
normalize_link_url : Root relative link targets
decode_character_references : Replace entity and numeric references with characters

Examples
--------
Heading anchors:

    >>> from docmark.utils.text import slugify
    >>> slugify("Hello, World!")
    'hello-world'

The same function names recipes, tutorials and API sections:

    >>> slugify("Fitting a Chebyshev basis")
    'fitting-a-chebyshev-basis'

"""

from __future__ import annotations

import html
import re
from html.entities import html5

from docmark.constants import PRESERVED_URL_PREFIXES

_WHITESPACE_RUN = re.compile(r"\s+")
_NON_SLUG_CHARS = re.compile(r"[^a-z0-9\-_]")
# Named, decimal and hex references; the semicolon is required
_CHARACTER_REFERENCE = re.compile(r"&(?:#[0-9]{1,7}|#[xX][0-9a-fA-F]{1,6}|[A-Za-z][A-Za-z0-9]{1,31});")


def slugify(text: str) -> str:
    """Derive an anchor identifier from arbitrary text.

    The text is lower-cased, each run of whitespace becomes a single hyphen,
    and every remaining character outside ``[a-z0-9-_]`` is dropped. Non-ASCII
    letters are removed rather than transliterated, so ``"über"`` becomes
    ``"ber"``.

    Parameters
    ----------
    text : str
        Text to convert; any string is accepted, including the empty string

    Returns
    -------
    str
        The identifier (possibly empty)

    """
    slug = _WHITESPACE_RUN.sub("-", text.lower())
    return _NON_SLUG_CHARS.sub("", slug)


def normalize_link_url(url: str) -> str:
    """Prefix site-relative link targets with ``/``.

    Absolute ``http(s)://`` urls, root-relative paths and fragments are
    returned unchanged; anything else is treated as relative to the site root.

    Parameters
    ----------
    url : str
        Link target as written in the source

    Returns
    -------
    str
        Normalized url

    """
    if url.startswith(PRESERVED_URL_PREFIXES):
        return url
    return "/" + url


def decode_character_references(text: str) -> str:
    """Replace ``&name;``, ``&#nnn;`` and ``&#xhh;`` references with characters.

    Markdown text keeps references as written. Only terminated references are
    decoded, so ``AT&T`` and ``&copy2020`` stay as they are, and unknown names
    such as ``&notanentity;`` are left untouched.

    Examples
    --------
        >>> decode_character_references("Fish &amp; chips &#169;")
        'Fish & chips ©'

    """
    if "&" not in text:
        return text
    return _CHARACTER_REFERENCE.sub(_decode_reference, text)


def _decode_reference(m: re.Match) -> str:
    reference = m.group(0)
    if reference[1] == "#":
        return html.unescape(reference)
    return html5.get(reference[1:], reference)
