import csv
import datetime as dt
from pathlib import Path

import pytest
from packages.engine import Guess, GuessLogFull, MalformedGuessLog
from packages.guesslog import (append_guess, default_log_path, ensure_log, format_candidates,
                               format_history, read_guesses, write_csv)


def test_default_log_path_is_dated_under_home(tmp_path: Path):
    p = default_log_path(today=dt.date(2024, 3, 1), home=tmp_path)
    assert p == tmp_path / ".re" / "2024-03-01-guesses.txt"


def test_ensure_log_creates_dir_and_file(tmp_path: Path):
    p = tmp_path / ".re" / "2024-03-01-guesses.txt"
    assert ensure_log(p) == p
    assert p.exists() and p.read_text(encoding="utf-8") == ""
    # second call leaves existing content alone
    p.write_text("crane\n..y..\n", encoding="utf-8")
    ensure_log(p)
    assert p.read_text(encoding="utf-8") == "crane\n..y..\n"


def test_append_then_read_keeps_order(tmp_path: Path):
    p = ensure_log(tmp_path / "log.txt")
    append_guess(p, Guess("crane", "..y.."))
    append_guess(p, Guess("salty", ".gg.."))
    assert p.read_text(encoding="utf-8") == "crane\n..y..\nsalty\n.gg..\n"
    assert read_guesses(p) == [Guess("crane", "..y.."), Guess("salty", ".gg..")]


def test_read_skips_blanks_and_unpaired_tail(tmp_path: Path):
    p = tmp_path / "log.txt"
    p.write_text("CRANE\n\n..Y..\nsalty\n", encoding="utf-8")
    assert read_guesses(p) == [Guess("crane", "..y..")]


def test_read_malformed_pair_reports_line(tmp_path: Path):
    p = tmp_path / "log.txt"
    p.write_text("crane\n..y..\nslate\n..x..\n", encoding="utf-8")
    with pytest.raises(MalformedGuessLog) as exc:
        read_guesses(p)
    assert exc.value.line == 3
    assert "log.txt:3" in str(exc.value)


def test_read_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        read_guesses(tmp_path / "missing.txt")


def test_append_refuses_sixth_guess(tmp_path: Path):
    p = ensure_log(tmp_path / "log.txt")
    for w in ["abcde", "fghij", "klmno", "pqrst", "uvwxy"]:
        append_guess(p, Guess(w, "....."))
    with pytest.raises(GuessLogFull):
        append_guess(p, Guess("crane", "....."))
    assert len(read_guesses(p)) == 5


def test_format_history():
    lines = format_history([Guess("crane", "..y..")])
    assert lines == ["== Already guessed ==", "crane :: ..y.."]


def test_format_candidates_caps_output():
    assert format_candidates(["crane", "slate", "adieu"], limit=2) == [
        "Possible words:", "  crane", "  slate", "... there are more than 2 words",
    ]
    assert format_candidates(["crane", "slate"], limit=2) == ["Possible words:", "  crane", "  slate"]
    assert format_candidates([]) == ["Possible words:"]


def test_write_csv_expands_history(tmp_path: Path):
    results = [{
        "log": "2024-03-01-guesses.txt",
        "words": 3,
        "history": [Guess("crane", "..y..")],
        "remaining": [1],
    }]
    out = write_csv(results, str(tmp_path / "out" / "replay.csv"))
    with open(out, newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert len(rows) == 1
    row = rows[0]
    assert row["guesses"] == "1" and row["remaining"] == "1"
    assert row["guess_1"] == "crane" and row["feedback_1"] == "'..y.." and row["left_1"] == "1"
    assert row["guess_2"] == "" and row["left_5"] == ""


def test_read_non_utf8_log(tmp_path: Path):
    p = tmp_path / "log.txt"
    p.write_bytes(b"crane\n..y..\ncr\xffne\n..y..\n")
    with pytest.raises(MalformedGuessLog) as exc:
        read_guesses(p)
    assert exc.value.line == 3
    assert "UTF-8" in str(exc.value)
