"""Tests for the command-line entry point (cli.py)."""

import io

import pytest
from futhorc.cli import main


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path, monkeypatch):
    # keep a futhorc.toml in the real CWD from being picked up
    monkeypatch.chdir(tmp_path)


def test_text(capsys):
    main(["--text", "no know"])
    assert capsys.readouterr().out == "ᚾᚩ᛫ᚾᚩᚹ\n"


def test_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("no, know\nleaf leave\n"))
    main([])
    assert capsys.readouterr().out == "ᚾᚩ, ᚾᚩᚹ\nᛚᛁᛁᚠᚠ᛫ᛚᛁᛁᚠ\n"


def test_explain(capsys):
    main(["--explain", "leaf"])
    out = capsys.readouterr().out
    assert "═══ 'leaf' ═══" in out
    assert "runes" in out
    assert "ᛚᛁᛁᚠᚠ" in out


def test_summary_does_not_read_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("no\n"))
    main(["--summary"])
    out = capsys.readouterr().out
    assert "Rune Translator" in out
    assert "ᚾᚩ" not in out


def test_dictionary_option(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("loose,\tˈlus\nlose,\tˈluz\n", encoding="utf-8")
    main(["--dictionary", str(words), "--text", "loose lose"])
    assert capsys.readouterr().out == "ᛚᚣᛋᛋ᛫ᛚᚣᛋ\n"


def test_config_in_cwd_is_used(tmp_path, capsys):
    (tmp_path / "futhorc.toml").write_text(
        '[overrides]\n"zzz" = "zɪz"\n', encoding="utf-8",
    )
    main(["--text", "zzz"])
    assert capsys.readouterr().out == "ᛋᛁᛋ\n"


def test_missing_dictionary_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", str(tmp_path / "nope.txt"), "--text", "no"])
    assert exc.value.code == 1
    assert "Word list not found" in capsys.readouterr().err


def test_bad_word_list_exits(tmp_path, capsys):
    words = tmp_path / "words.txt"
    words.write_text("broken,\n", encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", str(words), "--text", "no"])
    assert exc.value.code == 1
    assert capsys.readouterr().err.startswith("ERROR:")


def test_keyboard(capsys):
    main(["--keyboard", "the boat"])
    assert capsys.readouterr().out == "ᚦᛖ ᛒᚩᛏ\n"


def test_keyboard_dots(capsys):
    main(["--keyboard", "no no", "--dots"])
    assert capsys.readouterr().out == "ᚾᚩ᛫ᚾᛟ\n"


def test_explain_hyphenated(capsys):
    main(["--explain", "heart-ache"])
    out = capsys.readouterr().out
    assert "not in dictionary" not in out
    assert "ᚻᚪᚱᛏ" in out
    assert "ᛠᚳ" in out


def test_dictionary_glob_without_matches_exits(tmp_path, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--dictionary", str(tmp_path / "*.txt"), "--text", "no"])
    assert exc.value.code == 1
    assert "No word lists match" in capsys.readouterr().err
