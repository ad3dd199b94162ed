"""Tests for :mod:`wpslug.text` — the sanitization pipeline and slugifier.

Covers :class:`TestSanitize`, :class:`TestSlugify`,
:class:`TestWordPressReferenceSamples`, :class:`TestUnicodeTransparency`,
:class:`TestStageChain`.
"""

from __future__ import annotations

import pytest

from wpslug.accents import remove_accents
from wpslug.markup import strip_markup
from wpslug.text import (
    STAGES,
    fold_case,
    join_words,
    sanitize,
    slugify,
    substitute_symbols,
    tokenize,
)


class TestSanitize:
    """
    REQUIREMENT: sanitize() returns the clean, ordered word list of a title.

    WHO: Callers that post-process words before joining (length limits,
         stopword removal) as well as slugify() itself
    WHAT: Markup is erased; words are lowercased and in input order;
          numbers are words; punctuation inside a word is deleted, while
          separators split words; degenerate input yields []
    WHY: The word list is the contract every slug is built from — a stray
         empty token or tag fragment would corrupt every downstream slug
    """

    def test_markup_is_erased(self) -> None:
        """
        When a title contains inline tags
        Then only the visible words remain, lowercased
        """
        result = sanitize("<b>Hello</b> World")

        assert result == ["hello", "world"], f"Expected tag-free words, got {result!r}"

    def test_numeric_tokens_are_preserved(self) -> None:
        """
        When a title contains a number
        Then the number is kept as its own word
        """
        result = sanitize("Top 10 Lists")

        assert result == ["top", "10", "lists"], f"Expected numeric token kept, got {result!r}"

    def test_repeated_words_are_kept_in_order(self) -> None:
        """
        When a word appears more than once
        Then every occurrence is kept in input order
        """
        result = sanitize("New York, New York")

        assert result == ["new", "york", "new", "york"], f"Expected repeats kept, got {result!r}"

    def test_apostrophe_is_deleted_inside_the_word(self) -> None:
        """
        When a word contains an apostrophe
        Then the apostrophe is deleted and the word stays whole
        """
        result = sanitize("Don't Stop")

        assert result == ["dont", "stop"], f"Expected 'dont', got {result!r}"

    @pytest.mark.parametrize("text", ["", "   ", "\t\n", "!!!", "<p></p><br/>", "&nbsp;&hellip;"])
    def test_degenerate_input_yields_no_words(self, text: str) -> None:
        """
        When a title has no letters or digits at all
        Then the word list is empty
        """
        result = sanitize(text)

        assert result == [], f"Expected [] for {text!r}, got {result!r}"

    def test_control_characters_are_removed_and_tabs_split(self) -> None:
        """
        When a title contains tabs and NUL bytes
        Then tabs separate words and NUL bytes vanish
        """
        result = sanitize("tab\there\x00null")

        assert result == ["tab", "herenull"], f"Expected controls handled, got {result!r}"

    def test_decomposed_accent_entity_folds(self) -> None:
        """
        When an accent arrives as a combining-mark entity after its base letter
        Then it folds into the plain letter
        """
        result = sanitize("Cafe&#769;")

        assert result == ["cafe"], f"Expected ['cafe'], got {result!r}"


class TestSlugify:
    """
    REQUIREMENT: slugify() produces lowercase, single-hyphen slugs.

    WHO: Any code building URLs or file names from human titles
    WHAT: Words are joined with one hyphen; '&' reads as 'and'; accents fold;
          entities and percent octets resolve; no leading, trailing, or
          doubled hyphens; degenerate input gives ""
    WHY: Slugs are permanent URL components — they must be predictable,
         readable, and safe
    """

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Tom & Jerry", "tom-and-jerry"),
            ("AT&T", "at-and-t"),
            ("Café Münchner", "cafe-munchner"),
            ("Caf&eacute; &amp; Bar", "cafe-and-bar"),
            ("caf%C3%A9 au lait", "cafe-au-lait"),
            ("Senior Staff Engineer — Platform (Remote)", "senior-staff-engineer-platform-remote"),
            ("“Quoted” Title…", "quoted-title"),
            ("2024 Olympics: 100m", "2024-olympics-100m"),
            ("3.14 is pi", "3-14-is-pi"),
            ("C++ & C#", "c-and-c"),
            ("some_file_name", "some-file-name"),
            ("STRASSE Straße", "strasse-strasse"),
        ],
    )
    def test_titles_slugify_as_expected(self, title: str, expected: str) -> None:
        """
        When a realistic title is slugified
        Then it produces the expected slug
        """
        result = slugify(title)

        assert result == expected, f"Expected {expected!r} for {title!r}, got {result!r}"

    @pytest.mark.parametrize("text", ["", "   !!! ---", "---", "<em></em>"])
    def test_degenerate_input_yields_empty_slug(self, text: str) -> None:
        """
        When a title has no word characters
        Then the slug is the empty string
        """
        result = slugify(text)

        assert result == "", f"Expected '' for {text!r}, got {result!r}"

    def test_already_clean_slug_is_unchanged(self) -> None:
        """
        When text is already a valid slug
        Then slugifying it again returns it unchanged
        """
        result = slugify("already-clean-slug-2")

        assert result == "already-clean-slug-2", f"Expected no change, got {result!r}"

    def test_join_words_of_nothing_is_empty(self) -> None:
        """
        When no words are joined
        Then the result is the empty string
        """
        result = join_words([])

        assert result == "", f"Expected '', got {result!r}"


class TestWordPressReferenceSamples:
    """
    REQUIREMENT: Output matches WordPress sanitize_title_with_dashes() on its
    reference samples, except where accent folding and '&' → 'and' apply.

    WHO: Sites migrating content to or from WordPress
    WHAT: The classic sample titles produce the WordPress slugs
    WHY: Existing permalinks must keep resolving after a migration
    """

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("This is a test.", "this-is-a-test"),
            ("This is a <script>alert('!')</script> test", "this-is-a-test"),
            ("this is a <em>test</em>", "this-is-a-test"),
            ("        this    is --- a       <em>test</em>        ", "this-is-a-test"),
            ("Excellent!!!1!1", "excellent-1-1"),
            ("make\nit   work?", "make-it-work"),
            ("  ----You--and--_-_me", "you-and-me"),
            ("user@example.com", "user-example-com"),
            ("Töxic Tësticle Färm?", "toxic-testicle-farm"),
            ("Boys & Girls & Those Elsewhere", "boys-and-girls-and-those-elsewhere"),
        ],
    )
    def test_reference_sample(self, title: str, expected: str) -> None:
        """
        When a WordPress reference title is slugified
        Then the slug matches the reference output
        """
        result = slugify(title)

        assert result == expected, f"Expected {expected!r} for {title!r}, got {result!r}"


class TestUnicodeTransparency:
    """
    REQUIREMENT: Scripts outside the accent table survive intact.

    WHO: Authors writing in Cyrillic, Greek, CJK, and Indic scripts
    WHAT: Letters are kept and case-folded; Indic vowel signs are kept as part
          of their word; Latin combining accents left over from case folding
          are removed
    WHY: An ASCII-only slugger would reduce these titles to an empty string
    """

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("Привет Мир", "привет-мир"),
            ("ΟΔΟΣ", "οδοσ"),
            ("東京 タワー", "東京-タワー"),
            ("हिन्दी भाषा", "हिन्दी-भाषा"),
            ("ΐ", "ι"),
            ("ﬁnance", "finance"),
        ],
    )
    def test_non_latin_titles_are_kept(self, title: str, expected: str) -> None:
        """
        When a title is written in a script the accent table does not cover
        Then its letters appear in the slug, case-folded
        """
        result = slugify(title)

        assert result == expected, f"Expected {expected!r} for {title!r}, got {result!r}"

    @pytest.mark.parametrize(
        ("title", "expected"),
        [
            ("e\u1dc4te", "ete"),
            ("a\u1ab0b", "ab"),
            ("vector x\u20d7", "vector-x"),
            ("n\ufe20g", "ng"),
        ],
        ids=["supplement", "extended", "for-symbols", "half-marks"],
    )
    def test_latin_marks_outside_the_main_block_are_removed(
        self, title: str, expected: str
    ) -> None:
        """
        When a Latin letter carries a mark from a supplementary combining block
        Then the mark is removed and the letter is kept
        """
        result = slugify(title)

        assert result == expected, f"Expected {expected!r} for {title!r}, got {result!r}"


class TestStageChain:
    """
    REQUIREMENT: The pipeline is a fixed, ordered chain of pure stages.

    WHO: Maintainers reasoning about why a title produced a given slug
    WHAT: Stages run markup → symbols → accents → case; each stage can be
          called on its own; sanitize() equals the chain followed by tokenize()
    WHY: Order matters — '&amp;' must be decoded before '&' is spelled out,
         and accents must fold before punctuation filtering
    """

    def test_stage_order(self) -> None:
        """The stage tuple lists the stages in pipeline order."""
        assert STAGES == (strip_markup, substitute_symbols, remove_accents, fold_case), (
            f"Unexpected stage order: {STAGES!r}"
        )

    def test_sanitize_equals_manual_chain(self) -> None:
        """Running each stage by hand then tokenizing matches sanitize()."""
        title = "<i>Caf&eacute;</i> &amp; Crème Brûlée!"
        text = title
        for stage in STAGES:
            text = stage(text)

        assert tokenize(text) == sanitize(title), "Expected sanitize() to be the stage chain"

    def test_substitute_symbols_pads_ampersand(self) -> None:
        """The ampersand becomes the word 'and' with spaces on both sides."""
        result = substitute_symbols("Tom&Jerry")

        assert result == "Tom and Jerry", f"Expected padded 'and', got {result!r}"

    def test_fold_case_uses_full_case_folding(self) -> None:
        """Case folding is full Unicode folding, not ASCII lowercasing."""
        result = fold_case("ΣΊΣΥΦΟΣ ǅ")

        assert result == "σίσυφοσ ǆ", f"Expected full case folding, got {result!r}"

    def test_tokenize_splits_on_separators_and_deletes_other_punctuation(self) -> None:
        """Separators split words; other punctuation disappears in place."""
        result = tokenize("a.b_c-d e,f (g)")

        assert result == ["a", "b", "c", "d", "ef", "g"], f"Unexpected tokens {result!r}"
