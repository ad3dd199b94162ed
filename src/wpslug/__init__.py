"""WordPress-compatible slugs over the full Unicode range."""

from wpslug.shaping import drop_words, shape_slug
from wpslug.text import join_words, sanitize, slugify

__all__ = ["drop_words", "join_words", "sanitize", "shape_slug", "slugify"]
