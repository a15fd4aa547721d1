"""Character classification and initials extraction for display names."""

from __future__ import annotations

import re
import unicodedata

from .errors import InvalidArgumentError

# Whitespace runs and apostrophe-like marks separate name parts.
SPLIT_RE = re.compile(r"\s+|['`´]")

_WORD_CATEGORIES = frozenset({"Lu", "Ll", "Nd"})


def is_letter_or_digit(char: str) -> bool:
    """True for an upper/lowercase letter or a decimal digit in any script."""
    return unicodedata.category(char) in _WORD_CATEGORIES


def clean_token(token: str) -> str:
    return "".join(c for c in token if is_letter_or_digit(c))


def split_name(name: str) -> list[str]:
    parts = (clean_token(p) for p in SPLIT_RE.split(name.strip()))
    return [p for p in parts if p]


def _upper(text: str) -> str:
    # str.upper() is locale independent but may expand a character ("ß" -> "SS");
    # keep one output character per input character.
    out = []
    for c in text:
        up = c.upper()
        out.append(up if len(up) == 1 else c)
    return "".join(out)


def get_initials(name: str | None) -> str | None:
    """Derive 1-2 uppercase initials from a display name.

    Returns ``None`` when nothing usable remains after trimming and cleaning.
    Raises ``InvalidArgumentError`` when ``name`` itself is ``None``.
    """
    if name is None:
        raise InvalidArgumentError("name must not be None")

    parts = split_name(name)
    if not parts:
        return None

    if len(parts) == 1:
        initials = parts[0][:2]
    else:
        initials = parts[0][0] + parts[-1][0]

    return _upper(initials)
