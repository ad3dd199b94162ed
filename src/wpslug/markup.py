"""Markup, entity, and percent-octet stripping.

First stage of the sanitization pipeline.  Removes tags and the bodies
of ``<script>``/``<style>`` elements, then resolves character entities
and ``%XX`` octet runs so that encoded letters survive as letters and
everything else encoded is erased.

Best-effort only; malformed markup never raises.
"""

from __future__ import annotations

import html
import re
import unicodedata

# ---------------------------------------------------------------------------
# Patterns
# ---------------------------------------------------------------------------

# Opener of an element whose body is never prose; an unclosed one runs to end-of-string
_SCRIPT_OR_STYLE = re.compile(r"<(script|style)\b[^>]*(?:>|\Z)", re.IGNORECASE)
_CLOSERS = {
    name: re.compile(rf"</{name}\s*>", re.IGNORECASE) for name in ("script", "style")
}

# A tag opens with a letter, '/', '!' or '?'; an unclosed one runs to end-of-string
_TAG = re.compile(r"<[A-Za-z/!?][^>]*(?:>|\Z)")

# Named, decimal, and hex entities, or a run of percent-encoded octets.
# One alternation so a decoded result is never decoded again.
_ENCODED = re.compile(
    r"&(?:#[0-9]{1,7}|#[xX][0-9A-Fa-f]{1,6}|[A-Za-z][A-Za-z0-9]{1,31});"
    r"|(?:%[0-9A-Fa-f]{2})+"
)


# ---------------------------------------------------------------------------
# Resolution
# ---------------------------------------------------------------------------


def _resolve_char(ch: str) -> str:
    """Decide what one decoded character contributes to the text."""
    if ch.isalnum() or ch == "&" or unicodedata.category(ch).startswith("M"):
        return ch
    if ch.isspace() or unicodedata.category(ch) == "Pd":
        return " "
    return ""


def _strip_script_and_style(text: str) -> str:
    """Remove ``<script>``/``<style>`` elements in one forward pass.

    Once an element has no closer, later openers of the same name are
    skipped and left for :data:`_TAG`, so their bodies stay as text.
    """
    kept: list[str] = []
    unclosed: set[str] = set()
    pos = 0
    while True:
        opener = _SCRIPT_OR_STYLE.search(text, pos)
        if opener is None:
            break
        name = opener.group(1).lower()
        closer = None
        if name not in unclosed:
            closer = _CLOSERS[name].search(text, opener.end())
        if closer is None:
            unclosed.add(name)
            kept.append(text[pos : opener.end()])
            pos = opener.end()
        else:
            kept.append(text[pos : opener.start()])
            pos = closer.end()
    kept.append(text[pos:])
    return "".join(kept)


def _decode(match: re.Match[str]) -> str:
    token = match.group(0)
    if token.startswith("&"):
        decoded = html.unescape(token)
        if decoded == token:
            # Unknown entity name
            return ""
    else:
        decoded = bytes.fromhex(token.replace("%", "")).decode("utf-8", errors="replace")
    return "".join(_resolve_char(ch) for ch in decoded)


# ---------------------------------------------------------------------------
# Public stage
# ---------------------------------------------------------------------------


def strip_markup(text: str) -> str:
    """Remove tags, entities, and percent-encoded octets from *text*.

    Entities and octets that decode to letters or digits are kept as
    those characters; whitespace and dashes become a space; a decoded
    ``&`` is kept for symbol substitution; anything else is dropped.

    >>> strip_markup("<b>caf&eacute;</b> caf%C3%A9")
    'café café'
    """
    text = _strip_script_and_style(text)
    text = _TAG.sub("", text)
    return _ENCODED.sub(_decode, text)
