"""
English text -> futhorc runes.

Splits text on whitespace, looks each word up in the phonetic dictionary,
applies the per-word edits, resolves voicing and encodes to runes, then
puts the text back together with its original spacing and line breaks.
Words that are not in the dictionary are kept as typed.

Spelling conventions implemented here:
  1. Apostrophes and punctuation are used as in English.
  2. /i/ at the end of a word or before an apostrophe is a single ᛁ:
     we'll/ᚹᛁ'ᛚ, will/ᚹᛁᛚ, wheel/ᚹᛁᛁᛚ, any/ᛖᚾᛁ.
  3. Where /f/ and /v/ contrast, /f/ is ᚠᚠ and /v/ is ᚠ:
     live/ᛚᛁᚠ, leave/ᛚᛁᛁᚠ, leaf/ᛚᛁᛁᚠᚠ, leaves/ᛚᛁᛁᚠᛋ.
  4. Likewise /s/ is ᛋᛋ and /z/ is ᛋ where they contrast: ones/ᚹᚢᚾᛋ, once/ᚹᚢᚾᛋᛋ.
  5. "no" is ᚾᚩ and "know" is ᚾᚩᚹ.
  6. The letter x is ᛉ: tax/ᛏᚫᛉ, racks/ᚱᚫᚳᛋ.
  7. Word-final /ə/ is ᚪ: comma/ᚳᛟᛗᚪ. Exception: the/ᚦᛖ.
  8. Syllabic consonants take ᚢ: bottle/ᛒᛟᛏᚢᛚ.
  9. ᛋᛏ is written ᛥ and ᚳᚹ is written ᛢ.

Usage:
    from futhorc.translator import RuneTranslator

    tr = RuneTranslator.default()          # bundled sample word list
    tr.translate("no know")                # -> "ᚾᚩ᛫ᚾᚩᚹ"

    tr = RuneTranslator.from_config("futhorc.toml")
"""

from __future__ import annotations

import glob
import logging
import re
import string
import tomllib
from functools import lru_cache
from pathlib import Path

from futhorc.ambiguity import disambiguate
from futhorc.dictionary import OVERRIDES, PhoneticDictionary
from futhorc.phonetics import SUPPRESSED_SPACE, remove_stress_markers
from futhorc.runes import encode, fold_digraphs, map_symbols
from futhorc.words import WordRecord, split_punctuation, transform_word

log = logging.getLogger(__name__)


_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

# Same whitespace definition as str.split(), so gaps and tokens line up.
_TOKEN_RE = re.compile(r"\S+")


def split_gaps(text: str) -> list[str]:
    """Whitespace runs around and between tokens: len(tokens) + 1 items."""
    return _TOKEN_RE.split(text)


class RuneTranslator:
    """Translates English text to runes using one phonetic dictionary."""

    def __init__(self, dictionary: PhoneticDictionary):
        self.dictionary = dictionary

    @classmethod
    def default(cls) -> RuneTranslator:
        """Translator over the sample word list shipped with the package."""
        return cls(PhoneticDictionary.bundled())

    @classmethod
    def from_files(cls, *paths: str | Path) -> RuneTranslator:
        return cls(PhoneticDictionary.from_file(*_expand_paths(paths)))

    @classmethod
    def from_config(cls, config_path: str | Path = "futhorc.toml") -> RuneTranslator:
        """Build a translator from a TOML config file.

        [dictionary] paths are resolved relative to the config file and may
        be globs; without them the bundled sample list is used. Entries in
        [overrides] are applied on top of the built-in pronunciations.
        """
        config_path = Path(config_path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config not found: {config_path}")

        with config_path.open("rb") as f:
            cfg = tomllib.load(f)

        overrides = dict(OVERRIDES)
        overrides.update(cfg.get("overrides", {}))

        raw_paths = cfg.get("dictionary", {}).get("paths", [])
        if raw_paths:
            resolved = _resolve_config_paths(raw_paths, config_path.parent)
            dictionary = PhoneticDictionary.from_file(*resolved, overrides=overrides)
        else:
            dictionary = PhoneticDictionary.bundled(overrides=overrides)
        return cls(dictionary)

    # ── Word level ───────────────────────────────────────────────────────

    def _segments(self, token: str) -> list[tuple[str, str | None]]:
        """(spelling, transcription or None) per unit of one token.

        A token missing from the dictionary is split at its hyphens.
        """
        phonetic = self.dictionary.get(token)
        if phonetic is not None or "-" not in token:
            return [(token, phonetic)]
        return [(seg, self.dictionary.get(seg)) for seg in token.split("-")]

    def _lookup(self, token: str) -> list[WordRecord]:
        """Records for one punctuation-free token, hyphen segments split."""
        records = []
        for segment, phonetic in self._segments(token):
            if phonetic is None:
                records.append(WordRecord(surface=segment, text=segment))
            else:
                records.append(transform_word(token, phonetic))
        return records

    def render(self, record: WordRecord) -> str:
        """Runes for a translated record, the literal text otherwise."""
        if not record.translated:
            return record.text
        runes = encode(disambiguate(record.text, self.dictionary.ambiguities))
        log.debug("%s: %s -> %s", record.surface, record.text, runes)
        return runes

    def explain(self, word: str) -> list[tuple[str, str]]:
        """Intermediate forms of one word, as (stage, value) pairs.

        Hyphenated words the dictionary lacks are explained segment by
        segment, each introduced by a ("segment", ...) pair.
        """
        token, mark = split_punctuation(word.translate(_ASCII_LOWER))
        segments = self._segments(token)
        stages: list[tuple[str, str]] = []
        for i, (segment, phonetic) in enumerate(segments):
            # punctuation belongs to the last segment
            seg_mark = mark if i == len(segments) - 1 else ""
            if len(segments) > 1:
                stages.append(("segment", segment))
            if phonetic is None:
                stages.append(("not in dictionary", segment + seg_mark))
                continue

            record = transform_word(token, phonetic)
            if seg_mark:
                record.reattach(seg_mark)
            stages.append(("dictionary", phonetic))
            if not record.translated:
                stages.append(("literal", record.text))
                continue

            resolved = disambiguate(record.text, self.dictionary.ambiguities)
            folded = fold_digraphs(resolved)
            stages.extend([
                ("stressless", remove_stress_markers(phonetic)),
                ("transformed", record.text),
                ("disambiguated", resolved),
                ("folded", folded),
                ("runes", map_symbols(folded)),
            ])
        return stages

    # ── Text level ───────────────────────────────────────────────────────

    def translate(self, text: str) -> str:
        """Translate a text, keeping its whitespace and punctuation."""
        text = text.translate(_ASCII_LOWER)
        gaps = split_gaps(text)
        units: list[WordRecord] = []

        for token in text.split():
            token, mark = split_punctuation(token)
            records = self._lookup(token)
            # gaps[len(units)] is the run before this token's first unit
            at = len(units) + 1
            for _ in records[1:]:
                gaps.insert(at, "-")
                at += 1
            units.extend(records)
            if mark:
                self._attach_punctuation(mark, units[-1], gaps, at)

        parts = [map_symbols(gaps[0])]
        for record, gap in zip(units, gaps[1:]):
            parts.append(self.render(record))
            parts.append(map_symbols(gap))
        return "".join(parts)

    @staticmethod
    def _attach_punctuation(
        mark: str, record: WordRecord, gaps: list[str], index: int,
    ) -> None:
        record.reattach(mark)
        gap = gaps[index]
        if gap.startswith(" "):
            gaps[index] = SUPPRESSED_SPACE + gap[1:]

    # ── Introspection ────────────────────────────────────────────────────

    def summary(self) -> str:
        lines = ["Rune Translator (English -> futhorc)"]
        for sub_line in self.dictionary.summary().split("\n"):
            lines.append(f"  {sub_line}")
        return "\n".join(lines)


@lru_cache(maxsize=1)
def _default_translator() -> RuneTranslator:
    return RuneTranslator.default()


def words_to_runes(text: str) -> str:
    """Translate with the bundled word list."""
    return _default_translator().translate(text)


# ── Path helpers ─────────────────────────────────────────────────────────

def _expand_paths(paths: tuple[str | Path, ...]) -> list[Path]:
    """Expand globs; plain paths are kept as given.

    Raises FileNotFoundError when nothing is left to load.
    """
    result = []
    for p in paths:
        p_str = str(p)
        if "*" in p_str or "?" in p_str:
            matches = sorted(glob.glob(p_str))
            if not matches:
                log.warning("No word lists match %s", p_str)
            result.extend(Path(m) for m in matches)
        else:
            result.append(Path(p))
    if not result:
        patterns = ", ".join(str(p) for p in paths) or "(none given)"
        raise FileNotFoundError(f"No word lists match: {patterns}")
    return result


def _resolve_config_paths(raw_paths: list[str], base_dir: Path) -> list[Path]:
    """Resolve config paths relative to base_dir, expanding globs."""
    return _expand_paths(tuple(
        Path(p) if Path(p).is_absolute() else base_dir / p for p in raw_paths
    ))
