"""
Per-word phonetic edits applied between dictionary lookup and encoding.

Handles what the symbol tables cannot: trailing sentence punctuation,
single letters, word-final vowels, apostrophe suffixes ('t, 'd, 's, 'll,
', 're, 've) and the letter x.

Usage:
    from futhorc.words import transform_word

    rec = transform_word("he'll", "ˈhiəl")
    rec.text          # -> "hI'l"
    rec.translated    # -> True
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from futhorc.phonetics import (
    ELIDED_VOWELS,
    FINAL_A,
    LETTER_X,
    REDUCED_VOWELS,
    SHORT_I,
    remove_stress_markers,
)


SENTENCE_PUNCTUATION = ",:;.!?"

# One-letter words translated even though most letters are left as is.
SINGLE_LETTER_WORDS = ("a", "i")


@dataclass(slots=True)
class WordRecord:
    """One unit of output: a phonetic string to encode, or literal text."""

    surface: str         # token as typed (lowercased, punctuation stripped)
    text: str            # phonetic string if translated, else literal text
    translated: bool = False
    punctuation: str = ""

    def reattach(self, mark: str) -> None:
        """Put a stripped punctuation mark back at the end of the text."""
        self.punctuation = mark
        self.text += mark


def split_punctuation(token: str) -> tuple[str, str]:
    """Split off one trailing sentence punctuation mark, if any."""
    if token and token[-1] in SENTENCE_PUNCTUATION:
        return token[:-1], token[-1]
    return token, ""


# ── Apostrophe suffixes ─────────────────────────────────────────────────────

def _elide(stem: str) -> str:
    """Drop a reduced vowel before the clitic; final /i/ becomes short."""
    if stem.endswith(ELIDED_VOWELS):
        stem = stem[:-1]
    if stem.endswith("i"):
        stem = stem[:-1] + SHORT_I
    return stem


def _not_contraction(phonetic: str) -> str:
    return phonetic[:-1] + "'" + phonetic[-1]


def _d_contraction(phonetic: str) -> str:
    stem, final = phonetic[:-1], phonetic[-1]
    if stem.endswith(("ʌ", "ɪ")):
        return stem[:-1] + "'d"
    return stem + "'" + final


def _s_suffix(phonetic: str) -> str:
    stem, final = phonetic[:-1], phonetic[-1]
    if stem.endswith("i"):
        stem = stem[:-1] + SHORT_I
    return stem + "'" + final


def _ll_contraction(phonetic: str) -> str:
    if not phonetic.endswith("l"):
        return phonetic + "'l"
    return _elide(phonetic[:-1]) + "'l"


def _plural_possessive(phonetic: str) -> str:
    return phonetic + "'"


def _re_contraction(phonetic: str) -> str:
    return phonetic[:-1] + "'ɹ"


def _ve_contraction(phonetic: str) -> str:
    return _elide(phonetic[:-1]) + "'" + phonetic[-1]


# Checked in order against the surface spelling; the first match applies.
SUFFIX_RULES: tuple[tuple[str, Callable[[str], str]], ...] = (
    ("'t", _not_contraction),
    ("'d", _d_contraction),
    ("'s", _s_suffix),
    ("'ll", _ll_contraction),
    ("'", _plural_possessive),
    ("'re", _re_contraction),
    ("'ve", _ve_contraction),
)


def apply_suffix(surface: str, phonetic: str) -> str:
    """Reshape the end of a transcription for an apostrophe suffix.

    `phonetic` must hold at least one symbol.
    """
    for ending, rule in SUFFIX_RULES:
        if surface.endswith(ending):
            return rule(phonetic)
    return phonetic


# ── Letter x ────────────────────────────────────────────────────────────────

def mark_letter_x(surface: str, phonetic: str) -> str:
    """Collapse one /ks/ into the x marker for every x in the spelling.

    Each x takes the first /ks/ after the previous one, left to right.
    An x without a matching /ks/ (xylophone) changes nothing.
    """
    if "x" not in surface.lower():
        return phonetic

    start = 0
    for ch in surface:
        if ch not in "xX":
            continue
        pos = phonetic.find("ks", start)
        if pos >= 0:
            phonetic = phonetic[:pos] + LETTER_X + phonetic[pos + 2:]
            start = pos + 1
    return phonetic


# ── Whole word ──────────────────────────────────────────────────────────────

def transform_word(surface: str, phonetic: str) -> WordRecord:
    """Turn a dictionary transcription into the string fed to encoding.

    `surface` is the spelling that was looked up; for a hyphenated token
    it is the whole token, so its suffix and letters drive the edits of
    every segment.
    """
    if len(surface) == 1 and surface not in SINGLE_LETTER_WORDS:
        return WordRecord(surface=surface, text=surface)

    phonetic = remove_stress_markers(phonetic)

    if phonetic.endswith(REDUCED_VOWELS):
        phonetic = phonetic[:-1] + FINAL_A

    if phonetic.endswith("i"):
        phonetic = phonetic[:-1] + SHORT_I

    phonetic = apply_suffix(surface, phonetic)
    phonetic = mark_letter_x(surface, phonetic)

    return WordRecord(surface=surface, text=phonetic, translated=True)
