"""Slug shaping: stopword removal and length limits.

:func:`~wpslug.text.sanitize` exposes the word list precisely so callers
can post-process it before joining.  These helpers cover the two common
cases: dropping filler words and capping the slug length without
leaving half a word or a dangling hyphen.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from wpslug.errors import ActionableError
from wpslug.text import SLUG_SEPARATOR, join_words, sanitize

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


def drop_words(words: Sequence[str], stopwords: Iterable[str]) -> list[str]:
    """Remove every stopword from *words*.

    Stopwords are sanitized the same way titles are, so ``"The"`` drops
    ``"the"``.  If nothing would remain, *words* is returned unchanged
    so a title made only of stopwords still gets a slug.
    """
    dropped = {word for stopword in stopwords for word in sanitize(stopword)}
    kept = [word for word in words if word not in dropped]
    return kept or list(words)


def shape_slug(
    words: Sequence[str],
    *,
    max_length: int = 0,
    stopwords: Iterable[str] = (),
) -> str:
    """Join *words* into a slug of at most *max_length* characters.

    Truncation happens at the last hyphen that fits.  A first word longer
    than *max_length* is cut to *max_length* characters.  ``max_length``
    of 0 or less means no limit.

    >>> shape_slug(["the", "quick", "brown", "fox"], max_length=12, stopwords=["the"])
    'quick-brown'
    """
    if not isinstance(max_length, int) or isinstance(max_length, bool):
        raise ActionableError.validation(
            field_name="max_length",
            reason=f"must be an integer, got {type(max_length).__name__}",
        )

    slug = join_words(drop_words(words, stopwords))
    if max_length <= 0 or len(slug) <= max_length:
        return slug

    cut = slug[:max_length]
    if slug[max_length] == SLUG_SEPARATOR:
        return cut
    head, sep, _ = cut.rpartition(SLUG_SEPARATOR)
    return head if sep else cut
