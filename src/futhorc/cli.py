#!/usr/bin/env python3
"""
English to futhorc runes CLI.

Uses futhorc.toml from the current directory when present, the bundled
sample word list otherwise, or an explicit word list:

    futhorc                              # translate stdin line by line
    futhorc --text "To be, or not to be"
    futhorc --explain "leaves"
    futhorc --dictionary data/CMU.in.IPA.txt --summary
    futhorc --config futhorc.toml -vv
    futhorc --keyboard "the boat" --dots     # romanized typing, no dictionary
"""

import argparse
import logging
import sys
from pathlib import Path


def _find_default_config() -> Path | None:
    """Look for futhorc.toml in CWD."""
    candidate = Path("futhorc.toml")
    if candidate.exists():
        return candidate
    return None


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Transliterate English into Anglo-Saxon futhorc runes"
    )
    parser.add_argument(
        "--config",
        metavar="FILE",
        help="Path to TOML config file (default: auto-detect futhorc.toml)",
    )
    parser.add_argument(
        "--dictionary",
        nargs="+",
        metavar="FILE",
        help="Path(s) to CMU IPA word lists (overrides config)",
    )
    parser.add_argument(
        "--text",
        help="Translate this text instead of reading stdin",
    )
    parser.add_argument(
        "--explain",
        metavar="WORD",
        help="Show each pipeline stage for a single word",
    )
    parser.add_argument(
        "--keyboard",
        metavar="TEXT",
        help="Type TEXT on the romanized rune keyboard (no dictionary needed)",
    )
    parser.add_argument(
        "--dots",
        action="store_true",
        help="With --keyboard, separate words with ᛫",
    )
    parser.add_argument(
        "--summary",
        action="store_true",
        help="Print dictionary statistics",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log to stderr (-v info, -vv debug)",
    )
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG if args.verbose > 1 else logging.INFO,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
        )

    # ── Keyboard ─────────────────────────────────────────────────────────

    if args.keyboard is not None:
        from futhorc.keyboard import transliterate

        print(transliterate(args.keyboard, dots=args.dots))
        return

    # ── Build translator ─────────────────────────────────────────────────

    from futhorc.dictionary import DictionaryError
    from futhorc.translator import RuneTranslator

    try:
        if args.dictionary:
            translator = RuneTranslator.from_files(*args.dictionary)
        else:
            config_path = Path(args.config) if args.config else _find_default_config()
            if config_path is None:
                translator = RuneTranslator.default()
            else:
                translator = RuneTranslator.from_config(config_path)
    except (FileNotFoundError, DictionaryError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        sys.exit(1)

    # ── Summary ──────────────────────────────────────────────────────────

    if args.summary:
        print(translator.summary())
        print()

    # ── Explain ──────────────────────────────────────────────────────────

    if args.explain:
        print(f"═══ '{args.explain}' ═══")
        for stage, value in translator.explain(args.explain):
            print(f"  {stage:16s} {value}")
        print()

    # ── Translate ────────────────────────────────────────────────────────

    if args.text is not None:
        print(translator.translate(args.text))
    elif not (args.summary or args.explain):
        for line in sys.stdin:
            sys.stdout.write(translator.translate(line))
            sys.stdout.flush()


if __name__ == "__main__":
    main()
