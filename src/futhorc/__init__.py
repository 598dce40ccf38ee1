"""futhorc: English to Anglo-Saxon futhorc rune transliteration."""

from futhorc.ambiguity import AmbiguityTable, detect_ambiguities, disambiguate
from futhorc.dictionary import PhoneticDictionary, DictionaryError, OVERRIDES
from futhorc.keyboard import transliterate
from futhorc.runes import encode, fold_digraphs, map_symbols
from futhorc.words import WordRecord, transform_word
from futhorc.translator import RuneTranslator, words_to_runes

__all__ = [
    "AmbiguityTable", "detect_ambiguities", "disambiguate",
    "PhoneticDictionary", "DictionaryError", "OVERRIDES",
    "transliterate",
    "encode", "fold_digraphs", "map_symbols",
    "WordRecord", "transform_word",
    "RuneTranslator", "words_to_runes",
]
