"""Shared test fixtures."""

import pytest

from futhorc.dictionary import PhoneticDictionary
from futhorc.translator import RuneTranslator


# CMU-style transcriptions (stress marks included) for the words the
# tests translate. The built-in overrides are applied on top.
SAMPLE_ENTRIES: dict[str, str] = {
    # no / know
    "no": "ˈnoʊ",
    "know": "ˈnoʊ",
    # voicing pairs
    "leaf": "ˈlif",
    "leave": "ˈliv",
    "leaves": "ˈlivz",
    "live": "ˈlɪv",
    "lives": "ˈlɪvz",
    "lose": "ˈluz",
    "loose": "ˈlus",
    "once": "ˈwʌns",
    "ones": "ˈwʌnz",
    "after": "ˈæftɚ",
    "ask": "ˈæsk",
    # vowels
    "comma": "ˈkɑmə",
    "bottle": "ˈbɑtəl",
    "wheel": "ˈwil",
    "any": "ˈɛni",
    "apple": "ˈæpəl",
    "banana": "bəˈnænə",
    "carrot": "ˈkæɹət",
    # apostrophes
    "he'll": "ˈhiəl",
    "who'll": "ˈhuəl",
    "we'll": "ˈwil",
    "company'll": "ˈkʌmpənil",
    "lady's": "ˈleɪdiz",
    "abram's": "ˈeɪbɹəmz",
    "absolut's": "ˈæbsəluts",
    "immigrants'": "ˈɪmɪgɹənts",
    "who'd": "ˈhud",
    "it'd": "ˈɪtɪd",
    "that'd": "ˈðætɪd",
    "who're": "ˈhuɚ",
    "who's": "ˈhuz",
    "who've": "ˈhuv",
    "should've": "ˈʃʊdəv",
    # letter x
    "tax": "ˈtæks",
    "taxes": "ˈtæksəz",
    "racks": "ˈɹæks",
    "exxon": "ˈɛksən",
    "xerox": "ˈzɪɹɑks",
    "textbooks": "ˈtɛkstˌbʊks",
    # sentences
    "to": "ˈtu",
    "be": "ˈbi",
    "or": "ˈɔɹ",
    "not": "ˈnɑt",
    "that": "ˈðæt",
    "is": "ˈɪz",
    "question": "ˈkwɛstʃən",
    "stone": "ˈstoʊn",
    "heart": "ˈhɑɹt",
    "ache": "ˈeɪk",
    "i": "ˈaɪ",
    "b": "ˈbi",
}


@pytest.fixture(scope="session")
def dictionary() -> PhoneticDictionary:
    return PhoneticDictionary.from_dict(SAMPLE_ENTRIES)


@pytest.fixture(scope="session")
def translator(dictionary) -> RuneTranslator:
    return RuneTranslator(dictionary)
