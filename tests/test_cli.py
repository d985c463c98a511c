from __future__ import annotations

import pytest

from tricolor.cli import main


def test_solves_and_prints_path(capsys):
    assert main(["XXX", "RRR"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "Searching path from XXX to RRR",
        "Found solution!",
        " : XXX",
        "0: RRR",
    ]


def test_header_uses_canonical_glyphs(capsys):
    assert main(["x_ ", "xxx"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Searching path from XXX to XXX"
    assert out[2:] == [" : XXX"]


@pytest.mark.parametrize("argv", [[], ["XXX"], ["XXX", "RRR", "GGG"]])
def test_wrong_argument_count(capsys, argv):
    with pytest.raises(SystemExit) as excinfo:
        main(argv)
    assert excinfo.value.code != 0
    assert "usage:" in capsys.readouterr().err


def test_reports_unreachable_goal(capsys):
    assert main(["XXX", "RXX", "--max-states", "100"]) == 1
    captured = capsys.readouterr()
    assert "Found solution!" not in captured.out
    assert "error: Can't reach RXX from XXX" in captured.err


def test_reports_exhausted_budget(capsys):
    assert main(["XXXXX", "RRRRG", "--max-states", "5"]) == 1
    assert "within 5 iterations" in capsys.readouterr().err


@pytest.mark.parametrize(
    "argv, message",
    [
        (["XYZ", "XXX"], "'Y'"),
        (["XX", "XXX"], "at least 3"),
        (["XXX", "XXXX"], "same number of lights"),
    ],
)
def test_reports_invalid_input(capsys, argv, message):
    assert main(argv) == 1
    assert message in capsys.readouterr().err


def test_reads_problem_file(tmp_path, capsys):
    problem = tmp_path / "problem.txt"
    problem.write_text("XXXXX\nRXXRR\n", encoding="utf-8")
    assert main(["--file", str(problem)]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "4: RXXRR"


def test_missing_problem_file(tmp_path, capsys):
    assert main(["--file", str(tmp_path / "nope.txt")]) == 1
    assert "error:" in capsys.readouterr().err


def test_file_and_positionals_conflict(tmp_path):
    with pytest.raises(SystemExit):
        main(["--file", str(tmp_path / "p.txt"), "XXX", "RRR"])


def test_writes_html(tmp_path, capsys):
    out = tmp_path / "out" / "solution.html"
    assert main(["XXXXX", "RRRRG", "--out", str(out)]) == 0
    assert out.exists()
    assert "Wrote solution visualization" in capsys.readouterr().out


def test_reports_bad_json_meta(tmp_path, capsys):
    problem = tmp_path / "problem.json"
    problem.write_text('{"start": "XXX", "goal": "RRR", "meta": 7}', encoding="utf-8")
    assert main(["--file", str(problem)]) == 1
    assert "error: Problem JSON 'meta' must be an object" in capsys.readouterr().err


def test_reads_json_problem_with_null_meta(tmp_path, capsys):
    problem = tmp_path / "problem.json"
    problem.write_text('{"start": "XXX", "goal": "RRR", "meta": null}', encoding="utf-8")
    assert main(["--file", str(problem)]) == 0
    assert capsys.readouterr().out.splitlines()[-1] == "0: RRR"
