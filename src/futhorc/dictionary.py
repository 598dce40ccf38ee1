"""
English word -> IPA pronunciation dictionary used by the rune translator.

Loads one or more CMU-derived IPA word lists (one entry per line,
"word, ipa"), applies a small set of hand-written pronunciations that the
futhorc spelling rules rely on, and computes the voicing ambiguity table
once for the whole dictionary.

Usage:
    from futhorc.dictionary import PhoneticDictionary

    d = PhoneticDictionary.from_file("data/CMU.in.IPA.txt")
    d.get("know")          # -> "noʊw"
    print(d.summary())

    d = PhoneticDictionary.bundled()   # small sample shipped with the package
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from importlib import resources
from pathlib import Path
from types import MappingProxyType

from futhorc.ambiguity import AmbiguityTable, detect_ambiguities
from futhorc.phonetics import remove_stress_markers

log = logging.getLogger(__name__)


# Word-list lines starting with this field are placeholders, not words.
_SKIP_FIELD = "XXXXX"

_BUNDLED_LIST = "cmu_ipa_sample.txt"

# Pronunciations that replace the word list's. Some pick a dialect or a
# weak form ("for", "of"), some exist only to reach a fixed spelling:
# "know" keeps its final glide so it differs from "no", "a" maps straight
# to its rune.
OVERRIDES: dict[str, str] = {
    "know": "noʊw",
    "futhorc": "vʌθɑɹk",
    "the": "ðɛ",
    "'tis": "'tɪz",
    "and": "ænd",
    "of": "ɔv",
    "a": "ᚢ",
    "from": "fɹɔm",
    "aren't": "ɑɹnt",
    "isn't": "ɪznt",
    "didn't": "dɪdnt",
    "doesn't": "dʌznt",
    "shouldn't": "ʃʊdənt",
    "couldn't": "kʊdnt",
    "wouldn't": "wʊdnt",
    "i'm": "aɪ'm",
    "for": "vɔɹ",
    "so": "zow",
    "use": "juz",
    "first": "vɚst",
    "vase": "vaz",
    "worse": "wɚz",
    "either": "aɪðɚ",
    "neither": "naɪðɚ",
    "else": "ɛlz",
    "since": "zɪns",
}


class DictionaryError(ValueError):
    """Raised when word-list or override data cannot be used."""


def _parse_word_list(lines: Iterable[str], source: str) -> dict[str, str]:
    """Parse "word, ipa[, ipa ...]" lines, keeping the first pronunciation.

    The word field ends in one separator character, which is dropped.
    """
    entries: dict[str, str] = {}
    for lineno, line in enumerate(lines, 1):
        fields = line.split()
        if not fields or fields[0] == _SKIP_FIELD:
            continue
        if len(fields) < 2:
            raise DictionaryError(
                f"{source}:{lineno}: no transcription for {fields[0]!r}"
            )
        entries[fields[0][:-1]] = fields[1].rstrip(",")
    return entries


class PhoneticDictionary:
    """
    Immutable word -> IPA mapping with its voicing ambiguity table.

    Every transcription must keep at least one symbol once stress marks
    are removed; the suffix rules edit the last symbol of a word.
    """

    def __init__(self, entries: Mapping[str, str]):
        for word, phonetic in entries.items():
            if not remove_stress_markers(phonetic):
                raise DictionaryError(f"empty transcription for {word!r}")

        self._entries: Mapping[str, str] = MappingProxyType(dict(entries))
        self.ambiguities: AmbiguityTable = detect_ambiguities(self._entries)
        log.info(
            "Phonetic dictionary: %d entries, %d ambiguous shapes",
            len(self._entries), len(self.ambiguities),
        )

    @classmethod
    def from_dict(
        cls,
        raw: Mapping[str, str],
        overrides: Mapping[str, str] | None = OVERRIDES,
    ) -> PhoneticDictionary:
        """Build from an in-memory mapping, then apply overrides."""
        entries = dict(raw)
        if overrides:
            entries.update(overrides)
        return cls(entries)

    @classmethod
    def from_file(
        cls,
        *paths: str | Path,
        overrides: Mapping[str, str] | None = OVERRIDES,
    ) -> PhoneticDictionary:
        """Load one or more word lists; later files win on duplicates."""
        entries: dict[str, str] = {}
        for path in paths:
            path = Path(path)
            if not path.exists():
                raise FileNotFoundError(f"Word list not found: {path}")
            with path.open(encoding="utf-8-sig") as f:
                parsed = _parse_word_list(f, str(path))
            log.info("Loaded %d words from %s", len(parsed), path)
            entries.update(parsed)
        return cls.from_dict(entries, overrides)

    @classmethod
    def bundled(
        cls, overrides: Mapping[str, str] | None = OVERRIDES,
    ) -> PhoneticDictionary:
        """Load the sample word list shipped inside the package."""
        resource = resources.files("futhorc") / "data" / _BUNDLED_LIST
        text = resource.read_text(encoding="utf-8")
        entries = _parse_word_list(text.splitlines(), _BUNDLED_LIST)
        return cls.from_dict(entries, overrides)

    # ── Lookup ───────────────────────────────────────────────────────────

    def get(self, word: str) -> str | None:
        return self._entries.get(word)

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    @property
    def entries(self) -> Mapping[str, str]:
        return self._entries

    def summary(self) -> str:
        positions = sum(len(p) for p in self.ambiguities.positions.values())
        lines = ["Phonetic Dictionary"]
        lines.append(f"  Entries:          {len(self._entries):,}")
        lines.append(f"  Ambiguous shapes: {len(self.ambiguities):,}")
        lines.append(f"  Ambiguous slots:  {positions:,}")
        return "\n".join(lines)
