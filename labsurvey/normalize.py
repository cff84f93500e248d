"""
Name normalization.

Survey answers are typed by hand, so the same course, teacher or program
shows up as "Administración", "administracion " or "ADMINISTRACION.". Every
comparison in the package goes through the helpers in this module.
"""

import re
import unicodedata
from typing import Optional

from .config import NO_DATA_SENTINELS

_NON_WORD = re.compile(r"[^A-Za-z0-9_\s]")
_WHITESPACE = re.compile(r"\s+")


def strip_accents(text: str) -> str:
    """Decompose to NFD and drop the combining marks."""
    decomposed = unicodedata.normalize("NFD", text)
    return "".join(ch for ch in decomposed if not unicodedata.combining(ch))


def normalize(text: Optional[str]) -> str:
    """
    Canonical form used for equality between free-text names.

    Steps (order matters):
        1. lowercase
        2. trim
        3. strip diacritics
        4. drop everything that is not an ASCII letter, digit, "_" or whitespace
        5. collapse whitespace runs to a single space

    normalize(normalize(x)) == normalize(x) for every x.
    """
    if not text:
        return ""
    result = strip_accents(text.lower().strip())
    result = _NON_WORD.sub("", result)
    return _WHITESPACE.sub(" ", result).strip()


def normalize_software_name(text: Optional[str]) -> str:
    """
    Display-safe normalization for software names.

    Keeps punctuation ("C++", "Node.js") and the original casing; only
    diacritics and extra whitespace are removed.
    """
    if not text:
        return ""
    return _WHITESPACE.sub(" ", strip_accents(text.strip())).strip()


def software_key(text: Optional[str]) -> str:
    """Lookup key for a software name."""
    return normalize_software_name(text).lower()


def collation_key(text: str) -> tuple:
    """
    Sort key for alphabetical listings of names.

    Accents and case only break ties, so "Álvarez" sorts next to "Alvarez"
    instead of after "Zúñiga".
    """
    folded = strip_accents(text).casefold()
    return (folded, strip_accents(text), text)


def is_no_data(text: Optional[str]) -> bool:
    """True for blank answers and the "Ninguno"/"Ninguna" sentinels."""
    if not text or not text.strip():
        return True
    return text.strip().lower() in NO_DATA_SENTINELS
