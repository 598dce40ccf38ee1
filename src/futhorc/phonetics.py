"""
Phonetic alphabet helpers shared by every stage of the rune pipeline.

Transcriptions use the CMU-derived IPA symbol set (ɑ æ ə ɛ ɪ i ʊ u ...,
ɹ for r, ASCII g) plus a few internal marker symbols that later stages
recognise.

Usage:
    from futhorc.phonetics import remove_stress_markers, shape

    shape(remove_stress_markers("ˈlif")) == shape("liv")   # True
"""

from __future__ import annotations


# ── Marker symbols ──────────────────────────────────────────────────────────

STRESS_MARKERS = "ˈˌ"

UNVOICED_F = "F"        # /f/ proven ambiguous, keeps the doubled rune ᚠᚠ
UNVOICED_S = "S"        # /s/ proven ambiguous, keeps the doubled rune ᛋᛋ
SHORT_I = "I"           # word-final /i/, written as a single ᛁ
LETTER_X = "ˣ"          # /ks/ spelled with the letter x, rune ᛉ
FINAL_A = "a"           # word-final reduced vowel, rune ᚪ
SUPPRESSED_SPACE = "X"  # space right after punctuation, no interword rune

REDUCED_VOWELS = ("ə", "ʌ", "ɜ")
ELIDED_VOWELS = REDUCED_VOWELS + (FINAL_A,)

# Sentinels used in a Phonetic Shape
F_CLASS = "\x00"
S_CLASS = "\x01"


# ── Translation tables ──────────────────────────────────────────────────────

_STRIP_STRESS = str.maketrans("", "", STRESS_MARKERS)

_SHAPE = str.maketrans({
    "f": F_CLASS,
    "v": F_CLASS,
    "s": S_CLASS,
    UNVOICED_S: S_CLASS,
    "z": S_CLASS,
})


def remove_stress_markers(phonetic: str) -> str:
    """Drop primary and secondary stress marks."""
    return phonetic.translate(_STRIP_STRESS)


def shape(phonetic: str) -> str:
    """Collapse /f v/ and /s z/ so words differing only in voicing match.

    The result is the key of the ambiguity table. Apart from the two
    collapsed classes every symbol stays at its own position, so indices
    into the shape are indices into the phonetic string.
    """
    return phonetic.translate(_SHAPE)
