"""
Romanized typing for futhorc: Latin keystrokes -> runes as you type.

Works without a dictionary. Each keystroke first becomes a rune
(q -> ᛢ, a -> ᚫ, ...); the next keystroke can then merge with that rune
into a compound (ᛟ + a -> ᚩ, ᛏ + h -> ᚦ). A '.' typed between the two
letters keeps them apart (o.a -> ᛟᚫ). Short vowels are rewritten at the
end of a word once a space or punctuation confirms the word is over.

Principles:
- Rules are written against the buffer as it stands after the previous
  keystroke, so compounds look for a rune followed by a raw letter.
- Every rule replaces its first occurrence only. Replaying text one
  keystroke at a time is what makes this well defined.
- Word-final rewrites, interword dots and their punctuation fix-ups
  replace every occurrence.

Usage:
    from futhorc.keyboard import transliterate

    transliterate("the boat ")            # -> "ᚦᛖ ᛒᚩᛏ "
    transliterate("no no", dots=True)     # -> "ᚾᚩ᛫ᚾᛟ"
"""

from __future__ import annotations


INTERWORD_DOT = "᛫"


# ── Compound rules ──────────────────────────────────────────────────────────
# (typed, result). Each compound is followed by its '.'-escaped form.
# Order matters: ᛁᛁr must be tried before ᛁr.

COMPOUND_VOWELS: tuple[tuple[str, str], ...] = (
    ("ᛟa",  "ᚩ"),    ("ᛟ.a", "ᛟᚫ"),
    ("ᛟh",  "ᚩ"),    ("ᛟ.h", "ᛟᚻ"),
    ("ᛖe",  "ᛁᛁ"),   ("ᛖ.e", "ᛖᛖ"),
    ("ᚫa",  "ᚪ"),    ("ᚫ.a", "ᚫᚫ"),
    ("ᚫu",  "ᛟ"),    ("ᚫ.u", "ᚫᚢ"),
    ("ᚢu",  "ᚣ"),    ("ᚢ.u", "ᚢᚢ"),
    ("ᛟo",  "ᚣ"),    ("ᛟ.o", "ᛟᛟ"),
    ("ᛟu",  "ᚪᚹ"),   ("ᛟ.u", "ᛟᚢ"),
    ("ᛁi",  "ᛡ"),    ("ᛁ.i", "ᛁᛁ"),
    ("ᚫi",  "ᛠ"),    ("ᚫ.i", "ᚫᛄ"),
    ("ᚫy",  "ᛠ"),    ("ᚫ.y", "ᚫᛄ"),
    ("ᛁᛁr", "ᛁᛁᚱ"),
    ("ᛁr",  "ᚢᚱ"),   ("ᛁ.r", "ᛁᚱ"),
    ("ᛟi",  "ᚩᛁ"),   ("ᛟ.i", "ᛟᛁ"),
    ("ᛟy",  "ᚩᛁ"),   ("ᛟ.y", "ᛟᛄ"),
    ("ᛖr",  "ᚢᚱ"),   ("ᛖ.r", "ᛖᚱ"),
    ("ᚫr",  "ᚪᚱ"),   ("ᚫ.r", "ᚫᚱ"),
    ("ᛟr",  "ᚪᚱ"),   ("ᛟ.r", "ᛟᚱ"),
    ("ᛟw",  "ᚪᚹ"),   ("ᛟ.w", "ᛟᚹ"),
    ("ᛢu",  "ᛢ"),    ("ᛢ.u", "ᛢᚢ"),
)

COMPOUND_CONSONANTS: tuple[tuple[str, str], ...] = (
    ("ᛏh", "ᚦ"),     ("ᛏ.h", "ᛏᚻ"),
    ("ᚾg", "ᛝ"),     ("ᚾ.g", "ᚾᚷ"),
    ("ᚾk", "ᛝᚳ"),    ("ᚾ.k", "ᚾᚳ"),
    ("ᛋt", "ᛥ"),     ("ᛋ.t", "ᛋᛏ"),
)


# ── Word-final vowels ───────────────────────────────────────────────────────

# A bare '.' may still be an escape, so a period only ends a word once a
# space follows it.
WORD_END_PUNCTUATION = (". ", ",", ":", ";", "!", "?", ")")

FINAL_VOWELS: tuple[tuple[str, str], ...] = (
    ("ᚫ ", "ᚪ "),
    ("ᛁᛁ ", "ᛁ "),     # /i/ is a single ᛁ word-finally
    ("ᛟ ", "ᚩ "),
)


# ── Single keys ─────────────────────────────────────────────────────────────

LETTERS: tuple[tuple[str, str], ...] = (
    ("q", "ᛢ"), ("w", "ᚹ"), ("e", "ᛖ"), ("r", "ᚱ"), ("t", "ᛏ"),
    ("y", "ᛄ"), ("u", "ᚢ"), ("i", "ᛁ"), ("o", "ᛟ"), ("p", "ᛈ"),
    ("a", "ᚫ"), ("s", "ᛋ"), ("d", "ᛞ"), ("f", "ᚠ"), ("g", "ᚷ"),
    ("h", "ᚻ"), ("j", "ᚷᚻ"), ("k", "ᚳ"), ("l", "ᛚ"),
    ("z", "ᛋ"), ("x", "ᛉ"), ("c", "ᚳ"), ("v", "ᚠ"), ("b", "ᛒ"),
    ("n", "ᚾ"), ("m", "ᛗ"),
    ("&", "⁊"),
)


def _replace_first(text: str, rules: tuple[tuple[str, str], ...]) -> str:
    for typed, result in rules:
        text = text.replace(typed, result, 1)
    return text


def _rewrite_final_vowels(text: str) -> str:
    # Pad punctuation with a space so the vowel rules see a word end,
    # then take the padding back out.
    for punct in WORD_END_PUNCTUATION:
        text = text.replace(punct, " " + punct)
    for vowel, final in FINAL_VOWELS:
        text = text.replace(vowel, final)
    for punct in WORD_END_PUNCTUATION:
        text = text.replace(" " + punct, punct)
    return text


def _place_dots(text: str, dots: bool) -> str:
    if dots:
        text = text.replace(" ", INTERWORD_DOT)
    # punctuation is followed by a plain space, never a dot
    for punct in WORD_END_PUNCTUATION:
        text = text.replace(punct + INTERWORD_DOT, punct + " ")
    text = text.replace("." + INTERWORD_DOT, ". ")
    return text.replace(INTERWORD_DOT + "(", " (")


def apply_keystroke(buffer: str, dots: bool = False) -> str:
    """Rewrite the buffer after one keystroke has been appended to it."""
    text = buffer.lower()
    text = _replace_first(text, COMPOUND_VOWELS)
    text = _replace_first(text, COMPOUND_CONSONANTS)
    text = _rewrite_final_vowels(text)
    text = _replace_first(text, LETTERS)
    return _place_dots(text, dots)


def transliterate(text: str, dots: bool = False) -> str:
    """Type `text` key by key and return the resulting runes.

    With `dots`, spaces between words become ᛫ (but a space after
    punctuation or before '(' stays a space).
    """
    buffer = ""
    for key in text:
        buffer = apply_keystroke(buffer + key, dots)
    return buffer
