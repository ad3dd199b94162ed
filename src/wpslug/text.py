"""WordPress-style title sanitization and slugification.

Pure functions with no I/O, safe to call from any thread.

The pipeline is a fixed chain of text stages followed by a tokenizer:

  1. :func:`~wpslug.markup.strip_markup`: tags, entities, ``%XX`` octets
  2. :func:`substitute_symbols`: ``&`` becomes the word ``and``
  3. :func:`~wpslug.accents.remove_accents`: fixed Latin accent table
  4. :func:`fold_case`: full Unicode case folding
  5. :func:`tokenize`: separators split, other punctuation deleted

:func:`sanitize` returns the word list; :func:`slugify` joins it with
single hyphens.
"""

from __future__ import annotations

import unicodedata
from typing import TYPE_CHECKING

from wpslug.accents import remove_accents
from wpslug.markup import strip_markup

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

SLUG_SEPARATOR = "-"

# Punctuation that separates words rather than disappearing inside them
_SEPARATOR_PUNCT = frozenset("_.?!;:@")

# Combining mark blocks applied to Latin letters; marks of other scripts are kept
_LATIN_MARKS = (
    range(0x0300, 0x0370),  # Combining Diacritical Marks
    range(0x1AB0, 0x1B00),  # Extended
    range(0x1DC0, 0x1E00),  # Supplement
    range(0x20D0, 0x2100),  # for Symbols
    range(0xFE20, 0xFE30),  # Half Marks
)


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def substitute_symbols(text: str) -> str:
    """Spell out ``&`` as ``and`` so it survives punctuation removal."""
    return text.replace("&", " and ")


def fold_case(text: str) -> str:
    return text.casefold()


def _is_separator(ch: str) -> bool:
    return ch.isspace() or ch in _SEPARATOR_PUNCT or unicodedata.category(ch) == "Pd"


def _is_word_char(ch: str) -> bool:
    if ch.isalnum():
        return True
    if not unicodedata.category(ch).startswith("M"):
        return False
    return not any(ord(ch) in block for block in _LATIN_MARKS)


def tokenize(text: str) -> list[str]:
    """Split *text* into word tokens.

    Whitespace, dashes, and ``_ . ? ! ; : @`` separate words; every other
    character that is not a letter, digit, or non-Latin combining mark
    is deleted in place, so ``don't`` stays one word.

    >>> tokenize("excellent!!!1!1")
    ['excellent', '1', '1']
    """
    kept: list[str] = []
    for ch in text:
        if _is_separator(ch):
            kept.append(" ")
        elif _is_word_char(ch):
            kept.append(ch)
    # Deleting punctuation can leave a base and a mark adjacent
    return unicodedata.normalize("NFC", "".join(kept)).split()


STAGES: tuple[Callable[[str], str], ...] = (
    strip_markup,
    substitute_symbols,
    remove_accents,
    fold_case,
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def sanitize(text: str) -> list[str]:
    """Run *text* through every stage and return its words in order.

    Never raises; degenerate input (empty, pure punctuation, pure markup)
    yields an empty list.

    >>> sanitize("<b>Hello</b> World")
    ['hello', 'world']
    >>> sanitize("Top 10 Lists")
    ['top', '10', 'lists']
    """
    for stage in STAGES:
        text = stage(text)
    return tokenize(text)


def join_words(words: Iterable[str]) -> str:
    """Join words with a single hyphen; no words gives ``""``."""
    return SLUG_SEPARATOR.join(words)


def slugify(text: str) -> str:
    """Convert *text* to a lowercase, hyphen-separated slug.

    >>> slugify("Tom & Jerry")
    'tom-and-jerry'
    >>> slugify("Café Münchner")
    'cafe-munchner'
    """
    return join_words(sanitize(text))
