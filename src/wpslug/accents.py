"""Fixed accent table for Latin letters.

Maps decorated Latin letters to their plain equivalents, the way
WordPress ``remove_accents()`` does, without a transliteration library.

Coverage:
  - Latin-1 Supplement letters (U+00C0–U+00FF)
  - Latin Extended-A in full (U+0100–U+017F)
  - Latin Extended-B: Pinyin caron vowels, Vietnamese horned O/U,
    Romanian comma-below S/T, Croatian digraphs, ``ǰ``
  - Latin Extended Additional: the Vietnamese block (U+1EA0–U+1EF9)
    and capital sharp S

Everything else passes through unchanged, including Greek, Cyrillic,
CJK, Indic scripts, IPA extensions, Latin Extended-C/D/E and fullwidth
Latin.  Every key has its case partner in the table, and no value
contains a key, so the mapping is idempotent.
"""

from __future__ import annotations

import unicodedata
from types import MappingProxyType

# Plain replacement → decorated letters that map to it
_GROUPS: dict[str, str] = {
    "A": "ÀÁÂÃÄÅĀĂĄǍẠẢẤẦẨẪẬẮẰẲẴẶ",
    "a": "àáâãäåāăąǎạảấầẩẫậắằẳẵặ",
    "C": "ÇĆĈĊČ",
    "c": "çćĉċč",
    "D": "ÐĎĐ",
    "d": "ðďđ",
    "E": "ÈÉÊËĒĔĖĘĚẸẺẼẾỀỂỄỆ",
    "e": "èéêëēĕėęěẹẻẽếềểễệ",
    "G": "ĜĞĠĢ",
    "g": "ĝğġģ",
    "H": "ĤĦ",
    "h": "ĥħ",
    "I": "ÌÍÎÏĨĪĬĮİǏỈỊ",
    "i": "ìíîïĩīĭįıǐỉị",
    "J": "Ĵ",
    "j": "ĵǰ",
    "K": "Ķ",
    "k": "ķĸ",
    "L": "ĹĻĽĿŁ",
    "l": "ĺļľŀł",
    "N": "ÑŃŅŇŊ",
    "n": "ñńņňŉŋ",
    "O": "ÒÓÔÕÖØŌŎŐƠǑỌỎỐỒỔỖỘỚỜỞỠỢ",
    "o": "òóôõöøōŏőơǒọỏốồổỗộớờởỡợ",
    "R": "ŔŖŘ",
    "r": "ŕŗř",
    "S": "ŚŜŞŠȘ",
    "s": "śŝşšșſ",
    "T": "ŢŤŦȚ",
    "t": "ţťŧț",
    "U": "ÙÚÛÜŨŪŬŮŰŲƯǓǕǗǙǛỤỦỨỪỬỮỰ",
    "u": "ùúûüũūŭůűųưǔǖǘǚǜụủứừửữự",
    "W": "Ŵ",
    "w": "ŵ",
    "Y": "ÝŶŸỲỴỶỸ",
    "y": "ýÿŷỳỵỷỹ",
    "Z": "ŹŻŽ",
    "z": "źżž",
    # Ligatures, thorn, sharp s, digraphs
    "AE": "Æ",
    "ae": "æ",
    "OE": "Œ",
    "oe": "œ",
    "TH": "Þ",
    "th": "þ",
    "SS": "ẞ",
    "ss": "ß",
    "IJ": "Ĳ",
    "ij": "ĳ",
    "DZ": "Ǆ",
    "Dz": "ǅ",
    "dz": "ǆ",
    "LJ": "Ǉ",
    "Lj": "ǈ",
    "lj": "ǉ",
    "NJ": "Ǌ",
    "Nj": "ǋ",
    "nj": "ǌ",
}

ACCENT_TABLE: MappingProxyType[str, str] = MappingProxyType(
    {letter: plain for plain, letters in _GROUPS.items() for letter in letters}
)

# str.translate() table keyed by code point
_TRANSLATION = {ord(letter): plain for letter, plain in ACCENT_TABLE.items()}


def remove_accents(text: str) -> str:
    """Replace every table letter in *text* with its plain equivalent.

    Text is composed to NFC first so a base letter followed by a
    combining accent is looked up as the precomposed letter.

    >>> remove_accents("Café Münchner")
    'Cafe Munchner'
    """
    return unicodedata.normalize("NFC", text).translate(_TRANSLATION)
