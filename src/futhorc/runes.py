"""
Two-pass encoding of a disambiguated phonetic string into futhorc runes.

Pass 1 folds diphthongs and digraphs (two symbols -> one rune unit),
pass 2 maps each remaining symbol to its rune(s) and applies the ᛥ and
ᛢ ligatures.

Usage:
    from futhorc.runes import encode

    encode("noʊ")     # -> "ᚾᚩ"
    encode("zoʊ")     # -> "ᛋᚩ"
    encode("kwɪk")    # -> "ᛢᛁᚳ"  (ᚳᚹ ligature)
"""

from __future__ import annotations

from futhorc.phonetics import SUPPRESSED_SPACE


# ── Pass 1: diphthongs and digraphs ─────────────────────────────────────────

# (first symbols, second symbols, output). Tried in order, first match wins.
DIGRAPH_RULES: tuple[tuple[str, str, str], ...] = (
    ("e",  "ɪj", "ᛠ"),    # st_ay_
    ("a",  "ɪj", "ᛡ"),    # l_ie_
    ("a",  "ʊw", "ᚪᚹ"),   # f_ou_nd
    ("ɑ",  "ɹ",  "ᚪᚱ"),   # f_ar_
    ("ɛ",  "ɹ",  "ᛠᚱ"),   # ai_r_
    ("ɪi", "ɹ",  "ᛁᛁᚱ"),  # f_ear_
    ("o",  "ʊw", "ᚩ"),    # n_o_
    ("ɔ",  "ɪj", "ᚩᛁ"),   # p_oi_nt
    ("ɔ",  "ɹ",  "ᚩᚱ"),   # d_oor_
    ("t",  "ʃ",  "ᚳᚻ"),   # _ch_eese
    ("d",  "ʒ",  "ᚷᚻ"),   # _j_og
    ("ŋ",  "g",  "ᛝ"),    # ri_ng_
    ("s",  "S",  "ᛋᛋᛋ"),  # mi_ss_tate
)


def _match_digraph(first: str, second: str) -> str | None:
    for firsts, seconds, runes in DIGRAPH_RULES:
        if first in firsts and second in seconds:
            return runes
    return None


def fold_digraphs(phonetic: str) -> str:
    """Pass 1: replace matching symbol pairs, scanning left to right.

    A matched pair is consumed whole, so the second symbol is never the
    start of another pair.
    """
    out: list[str] = []
    i = 0
    n = len(phonetic)
    while i < n - 1:
        runes = _match_digraph(phonetic[i], phonetic[i + 1])
        if runes is None:
            out.append(phonetic[i])
            i += 1
        else:
            out.append(runes)
            i += 2
    if i < n:
        out.append(phonetic[i])
    return "".join(out)


# ── Pass 2: symbols to runes ────────────────────────────────────────────────

RUNES: dict[str, str] = {
    SUPPRESSED_SPACE: " ",
    " ": "᛫",
    "a": "ᚪ",                                  # f_a_r
    "ɑ": "ᛟ", "ɔ": "ᛟ",                        # h_o_t
    "æ": "ᚫ",                                  # h_a_t
    "ɛ": "ᛖ",                                  # s_e_nd
    "ɪ": "ᛁ", "I": "ᛁ",                        # s_i_t, an_y_
    "i": "ᛁᛁ",                                 # s_ee_d
    "ʊ": "ᚣ", "u": "ᚣ",                        # b_oo_k, f_oo_d
    "ə": "ᚢ", "ʌ": "ᚢ", "ɜ": "ᚢ",              # _a_bout, f_u_n, t_u_rn
    "p": "ᛈ", "P": "ᛈ",
    "b": "ᛒ",
    "t": "ᛏ", "T": "ᛏ",
    "d": "ᛞ", "D": "ᛞ",
    "k": "ᚳ", "K": "ᚳ",
    "g": "ᚷ",
    "f": "ᚠᚠ", "F": "ᚠᚠ",                      # _f_ear
    "v": "ᚠ",                                  # _v_ine
    "θ": "ᚦ", "ð": "ᚦ",
    "s": "ᛋᛋ",                                 # _s_ee
    "z": "ᛋ",                                  # _z_ebra, song_s_
    "ʃ": "ᛋᚻ", "ʒ": "ᛋᚻ",                      # _sh_are, mea_s_ure
    "h": "ᚻ",
    "m": "ᛗ", "M": "ᛗ",
    "n": "ᚾ", "N": "ᚾ",
    "ŋ": "ᛝ",
    "j": "ᛄ",                                  # _y_ou
    "w": "ᚹ",
    "ɹ": "ᚱ", "R": "ᚱ",
    "l": "ᛚ", "L": "ᛚ",
    "ˣ": "ᛉ",                                  # ta_x_
    "ʤ": "ᚷᚻ",
    "ʧ": "ᚳᚻ",
    "ɚ": "ᚢᚱ",                                 # runn_er_
}

LIGATURES: tuple[tuple[str, str], ...] = (
    ("ᛋᛏ", "ᛥ"),
    ("ᚳᚹ", "ᛢ"),
)

_RUNE_TABLE = str.maketrans(RUNES)


def map_symbols(text: str) -> str:
    """Pass 2: symbol-by-symbol rune lookup, then ligatures.

    Symbols without a rune (punctuation, hyphens, newlines, runes already
    produced by pass 1) are copied unchanged.
    """
    text = text.translate(_RUNE_TABLE)
    for pair, ligature in LIGATURES:
        text = text.replace(pair, ligature)
    return text


def encode(phonetic: str) -> str:
    """Run both passes over a disambiguated phonetic string."""
    return map_symbols(fold_digraphs(phonetic))
