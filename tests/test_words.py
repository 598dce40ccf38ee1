"""Tests for per-word phonetic edits (words.py)."""

import pytest
from futhorc.words import (
    WordRecord,
    apply_suffix,
    mark_letter_x,
    split_punctuation,
    transform_word,
)


# ── split_punctuation ─────────────────────────────────────────────────────────

@pytest.mark.parametrize("token, expected", [
    ("be,", ("be", ",")),
    ("question:", ("question", ":")),
    ("end;", ("end", ";")),
    ("sleep.", ("sleep", ".")),
    ("rub!", ("rub", "!")),
    ("heir?", ("heir", "?")),
    ("be", ("be", "")),
    ("who's", ("who's", "")),
    ("(aside)", ("(aside)", "")),
    ("", ("", "")),
])
def test_split_punctuation(token, expected):
    assert split_punctuation(token) == expected


def test_split_punctuation_strips_only_one_mark():
    assert split_punctuation("what?!") == ("what?", "!")


# ── WordRecord ────────────────────────────────────────────────────────────────

def test_reattach_appends_mark():
    rec = WordRecord(surface="be", text="bI", translated=True)
    rec.reattach(",")
    assert rec.text == "bI,"
    assert rec.punctuation == ","


# ── transform_word: single letters and final vowels ───────────────────────────

def test_single_letter_stays_literal():
    rec = transform_word("b", "ˈbi")
    assert rec.translated is False
    assert rec.text == "b"


def test_single_letters_a_and_i_are_translated():
    assert transform_word("a", "ᚢ").translated is True
    assert transform_word("i", "ˈaɪ").text == "aɪ"


def test_stress_markers_removed():
    assert transform_word("banana", "bəˈnænə").text == "bənæna"


@pytest.mark.parametrize("phonetic, expected", [
    ("ˈkɑmə", "kɑma"),
    ("ˈkʌmʌ", "kʌma"),
    ("ˈkɜ", "ka"),
])
def test_final_reduced_vowel_becomes_a(phonetic, expected):
    assert transform_word("comma", phonetic).text == expected


def test_the_override_keeps_its_vowel():
    assert transform_word("the", "ðɛ").text == "ðɛ"


def test_final_i_becomes_short():
    assert transform_word("any", "ˈɛni").text == "ɛnI"
    assert transform_word("wheel", "ˈwil").text == "wil"


# ── Apostrophe suffixes ───────────────────────────────────────────────────────

def test_not_contraction():
    assert apply_suffix("aren't", "ɑɹnt") == "ɑɹn't"


def test_d_contraction_plain():
    assert apply_suffix("who'd", "hud") == "hu'd"


@pytest.mark.parametrize("surface, phonetic, expected", [
    ("it'd", "ɪtɪd", "ɪt'd"),
    ("that'd", "ðætɪd", "ðæt'd"),
    ("what'd", "wʌtʌd", "wʌt'd"),
])
def test_d_contraction_drops_vowel(surface, phonetic, expected):
    assert apply_suffix(surface, phonetic) == expected


def test_s_suffix():
    assert apply_suffix("who's", "huz") == "hu'z"
    assert apply_suffix("abram's", "eɪbɹəmz") == "eɪbɹəm'z"


def test_s_suffix_promotes_i():
    assert apply_suffix("lady's", "leɪdiz") == "leɪdI'z"


def test_ll_contraction_elides_schwa():
    assert apply_suffix("who'll", "huəl") == "hu'l"


def test_ll_contraction_elides_and_promotes():
    assert apply_suffix("he'll", "hiəl") == "hI'l"
    assert apply_suffix("we'll", "wil") == "wI'l"


def test_ll_contraction_without_final_l():
    assert apply_suffix("it'll", "ɪt") == "ɪt'l"


def test_plural_possessive():
    assert apply_suffix("immigrants'", "ɪmɪgɹənts") == "ɪmɪgɹənts'"


def test_re_contraction():
    assert apply_suffix("who're", "huɚ") == "hu'ɹ"


def test_ve_contraction():
    assert apply_suffix("who've", "huv") == "hu'v"
    assert apply_suffix("should've", "ʃʊdəv") == "ʃʊd'v"


def test_no_suffix():
    assert apply_suffix("stone", "stoʊn") == "stoʊn"


def test_transform_runs_suffix_after_final_vowel_rules():
    # the final ə has already become a when the clitic is added
    assert transform_word("she'll", "ˈʃiə").text == "ʃia'l"
    assert transform_word("company'll", "ˈkʌmpənil").text == "kʌmpənI'l"


# ── mark_letter_x ─────────────────────────────────────────────────────────────

def test_x_marks_ks():
    assert mark_letter_x("tax", "tæks") == "tæˣ"


def test_no_x_in_spelling():
    assert mark_letter_x("racks", "ɹæks") == "ɹæks"


def test_x_is_case_insensitive():
    assert mark_letter_x("TAX", "tæks") == "tæˣ"


def test_x_marks_only_first_pair():
    assert mark_letter_x("textbooks", "tɛkstbʊks") == "tɛˣtbʊks"


def test_each_x_takes_next_pair():
    assert mark_letter_x("xx", "ksks") == "ˣˣ"


def test_extra_x_without_pair():
    assert mark_letter_x("exxon", "ɛksən") == "ɛˣən"
    assert mark_letter_x("xerox", "zɪɹɑks") == "zɪɹɑˣ"


def test_x_after_suffix_edit():
    rec = transform_word("tax's", "ˈtæksəz")
    assert rec.text == "tæˣə'z"


def test_record_keeps_spelling():
    rec = transform_word("he'll", "ˈhiəl")
    assert rec.surface == "he'll"
    assert transform_word("b", "ˈbi").surface == "b"
