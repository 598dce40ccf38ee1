"""
Voicing ambiguity detection and resolution for /f v/ and /s z/.

Futhorc has one rune for /f v/ (ᚠ) and one for /s z/ (ᛋ). A sound is
written with the single rune unless the dictionary proves that voicing
is contrastive at that spot: if two words share a Phonetic Shape and one
has /f/ where the other has /v/ (or /s/ against /z/) at the same
position, the unvoiced sound is written doubled (ᚠᚠ, ᛋᛋ).

    leaf  /lif/  -> ᛚᛁᛁᚠᚠ
    leave /liv/  -> ᛚᛁᛁᚠ

Usage:
    from futhorc.ambiguity import detect_ambiguities, disambiguate

    table = detect_ambiguities({"leaf": "ˈlif", "leave": "ˈliv"})
    disambiguate("ˈlif", table)    # -> "lif"  (f stays unvoiced)
    disambiguate("ˈliv", table)    # -> "liv"
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from futhorc.phonetics import (
    UNVOICED_F,
    UNVOICED_S,
    remove_stress_markers,
    shape,
)


# Positions past this index are never marked ambiguous.
MAX_TRACKED_POSITIONS = 32


# ── Per-shape voicing evidence ──────────────────────────────────────────────

@dataclass(slots=True)
class _VoicingMasks:
    """Bitmasks of the positions where each sound was seen."""
    f: int = 0
    v: int = 0
    s: int = 0
    z: int = 0

    def merge(self, other: _VoicingMasks) -> None:
        self.f |= other.f
        self.v |= other.v
        self.s |= other.s
        self.z |= other.z

    @property
    def ambiguous(self) -> int:
        return (self.f & self.v) | (self.s & self.z)


def _ingest(phonetic: str) -> _VoicingMasks:
    masks = _VoicingMasks()
    for i, ch in enumerate(phonetic):
        if i >= MAX_TRACKED_POSITIONS:
            break
        bit = 1 << i
        if ch == "f":
            masks.f |= bit
        elif ch == "v":
            masks.v |= bit
        elif ch in ("s", UNVOICED_S):
            masks.s |= bit
        elif ch == "z":
            masks.z |= bit
    return masks


def _set_bits(mask: int) -> Iterator[int]:
    """Yield set bit indices, lowest first."""
    while mask:
        yield (mask & -mask).bit_length() - 1
        mask &= mask - 1  # clear lowest set bit


# ── Ambiguity table ─────────────────────────────────────────────────────────

@dataclass(frozen=True, slots=True)
class AmbiguityTable:
    """Read-only map of Phonetic Shape -> ambiguous positions (ascending)."""

    positions: Mapping[str, tuple[int, ...]] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def lookup(self, key: str) -> tuple[int, ...]:
        """Ambiguous positions for a shape; empty when it has none."""
        return self.positions.get(key, ())

    def __contains__(self, key: object) -> bool:
        return key in self.positions

    def __len__(self) -> int:
        return len(self.positions)

    def __iter__(self) -> Iterator[str]:
        return iter(self.positions)


def detect_ambiguities(entries: Mapping[str, str]) -> AmbiguityTable:
    """Scan a word -> IPA mapping and build the ambiguity table."""
    evidence: dict[str, _VoicingMasks] = {}
    for phonetic in entries.values():
        phonetic = remove_stress_markers(phonetic)
        evidence.setdefault(shape(phonetic), _VoicingMasks()).merge(
            _ingest(phonetic)
        )

    positions: dict[str, tuple[int, ...]] = {}
    for key, masks in evidence.items():
        amb = masks.ambiguous
        if amb:
            positions[key] = tuple(_set_bits(amb))
    return AmbiguityTable(MappingProxyType(positions))


# ── Resolution ──────────────────────────────────────────────────────────────

_NORMALIZE = str.maketrans({UNVOICED_F: "f", "V": "v", UNVOICED_S: "s", "Z": "z"})
_VOICE = str.maketrans({"f": "v", "s": "z"})
_UNMARK = str.maketrans({UNVOICED_F: "f", UNVOICED_S: "s"})


def disambiguate(phonetic: str, table: AmbiguityTable) -> str:
    """Resolve every /f/ and /s/ of one word to voiced or unvoiced.

    Sounds default to voiced (v, z). Only positions the table marks as
    ambiguous for this word's shape keep their unvoiced f or s.
    """
    symbols = list(remove_stress_markers(phonetic).translate(_NORMALIZE))

    for idx in table.lookup(shape("".join(symbols))):
        if idx < len(symbols):
            if symbols[idx] == "f":
                symbols[idx] = UNVOICED_F
            elif symbols[idx] == "s":
                symbols[idx] = UNVOICED_S

    return "".join(symbols).translate(_VOICE).translate(_UNMARK)
