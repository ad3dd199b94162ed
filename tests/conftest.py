"""Global test configuration — shared title corpus and logging guard.

This conftest provides:

1. **Title corpus** — ``TITLE_CORPUS``, a list of awkward real-world
   titles (markup, entities, octets, mixed scripts, control characters)
   used by the property tests.  Import it with ``from conftest import
   TITLE_CORPUS``.

2. **Logging guard** — resets the ``wpslug`` logger level after every
   test so a test that enables DEBUG does not leak into the next one.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from wpslug.logging import set_level

if TYPE_CHECKING:
    from collections.abc import Iterator

TITLE_CORPUS: list[str] = [
    "",
    "   ",
    "This is a test.",
    "This is a <script>alert('!')</script> test",
    "this is a <em>test</em>",
    "        this    is --- a       <em>test</em>        ",
    "Excellent!!!1!1",
    "make\nit   work?",
    "Töxic Tësticle Färm?",
    "  ----You--and--_-_me",
    "Boys & Girls & Those Elsewhere",
    "user@example.com",
    "Tom &amp; Jerry",
    "Caf&eacute; M&#252;nchner &#x26; Co",
    "caf%C3%A9%20au%20lait",
    "100% pure & 50%off",
    "&&&",
    "---",
    "<p></p><br/>",
    "<unterminated tag",
    "1 < 2 > 0",
    "Don't Stop Me Now",
    "“Smart” quotes… and — dashes – too",
    "STRASSE Straße ẞ",
    "İstanbul ışık",
    "ǅemal ǈubljana ǋjeguš",
    "Tiếng Việt có dấu",
    "Cafe\u0301 decomposed",
    "ΐ ΰ Greek with tonos",
    "ΟΔΟΣ",
    "Привет Мир",
    "東京 タワー",
    "हिन्दी भाषा",
    "ﬁnance ½ price",
    "tab\there\x00null\x1fctrl",
    "C++ & C# • 3.14",
    "%zz %4 %C3 stray percents",
    "&bogus; &#0; &#99999999; entities",
    "&amp;eacute; %26amp%3B",
]


@pytest.fixture(autouse=True)
def _reset_logger_level() -> Iterator[None]:
    yield
    set_level(logging.INFO)
