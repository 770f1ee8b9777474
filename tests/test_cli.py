import runpy
from pathlib import Path

import pytest

import wordle_solver
from wordsolve.words import DEMO_WORDS


ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture
def demo_vocab(tmp_path):
    path = tmp_path / "demo.txt"
    path.write_text("\n".join(DEMO_WORDS) + "\n")
    return str(path)


def test_self_play(demo_vocab, capsys):
    wordle_solver.main(["nadir", "-vocab", demo_vocab])
    out = capsys.readouterr().out
    assert "GUESS #1: ultra" in out
    assert "GUESS #3: nadir" in out
    assert "scrap xxyyx ..ra." in out
    assert "correct! got it in 3 guesses!" in out


def test_self_play_with_suggestions(demo_vocab, capsys):
    wordle_solver.main(["NADIR", "-vocab", demo_vocab, "-suggest", "2"])
    out = capsys.readouterr().out
    assert "10 candidates left, best 2:" in out
    assert "  ultra: 23" in out


def test_secret_outside_vocabulary(demo_vocab, capsys):
    wordle_solver.main(["fizzy", "-vocab", demo_vocab])
    assert "oh no, could not guess it" in capsys.readouterr().out


def test_rejects_bad_secret(demo_vocab):
    with pytest.raises(SystemExit):
        wordle_solver.main(["abc", "-vocab", demo_vocab])


def test_missing_vocabulary(tmp_path):
    with pytest.raises(SystemExit) as excinfo:
        wordle_solver.main(["nadir", "-vocab", str(tmp_path / "missing.txt")])
    assert "Can't read vocabulary" in str(excinfo.value)


def test_interactive(demo_vocab, capsys, monkeypatch):
    answers = iter(["nope", "xxxyy", "xxyyx", "ggggg"])
    monkeypatch.setattr("builtins.input", lambda prompt: next(answers))

    wordle_solver.main(["-vocab", demo_vocab])

    out = capsys.readouterr().out
    assert out.count("Not a valid result") == 1
    assert "correct! got it in 3 guesses!" in out


def test_interactive_end_of_input(demo_vocab, capsys, monkeypatch):
    def no_input(prompt):
        raise EOFError

    monkeypatch.setattr("builtins.input", no_input)
    wordle_solver.main(["-vocab", demo_vocab])
    assert "Aborted: no more input." in capsys.readouterr().out


def test_benchmark(capsys):
    counts, failures = wordle_solver.run_benchmark(DEMO_WORDS)
    assert failures == []
    assert len(counts) == len(DEMO_WORDS)
    assert counts.max() <= len(DEMO_WORDS)
    out = capsys.readouterr().out
    assert "Failures: 0" in out


def test_benchmark_empty(capsys):
    counts, failures = wordle_solver.run_benchmark([])
    assert counts.size == 0 and failures == []


def test_demo_script(capsys):
    runpy.run_path(str(ROOT / "main.py"))
    out = capsys.readouterr().out
    assert "First guess: ultra" in out
    assert "Solved: True in 3 guesses" in out
