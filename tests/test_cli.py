import sys

import pytest

from philosim.cli import main, main_bonus
from philosim.config import ALREADY_SATISFIED, NOT_NUMERIC, NOT_POSITIVE, USAGE


@pytest.mark.parametrize("argv", [[], ["4", "410", "200"], ["1", "2", "3", "4", "5", "6"]])
def test_wrong_argument_count_prints_usage(argv, capsys):
    assert main(argv) == 0
    out = capsys.readouterr().out
    assert out == USAGE + "\n"
    assert out.startswith("You need to insert 4 or 5 arguments.")

    assert main_bonus(argv) == 0
    assert capsys.readouterr().out == USAGE + "\n"


def test_argv_defaults_to_sys_argv(capsys, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["philo"])
    assert main() == 0
    assert capsys.readouterr().out == USAGE + "\n"
    assert main_bonus() == 0
    assert capsys.readouterr().out == USAGE + "\n"


def test_non_numeric_field(capsys):
    assert main(["4", "410", "abc", "200"]) == 0
    out = capsys.readouterr().out
    assert out == NOT_NUMERIC + "\n"
    assert "You need to insert numerical values in all fields." in out

    assert main_bonus(["4", "410", "abc", "200"]) == 0
    assert capsys.readouterr().out == NOT_NUMERIC + "\n"


def test_non_positive_value(capsys):
    assert main(["4", "-410", "200", "200"]) == 0
    assert capsys.readouterr().out == NOT_POSITIVE + "\n"
    assert main_bonus(["4", "-410", "200", "200"]) == 0
    assert capsys.readouterr().out == NOT_POSITIVE + "\n"


def test_zero_philosophers_is_silent(capsys):
    assert main(["0", "410", "200", "200"]) == 0
    assert capsys.readouterr().out == ""
    assert main_bonus(["0", "410", "200", "200"]) == 0
    assert capsys.readouterr().out == ""


def test_zero_meals_reports_satisfied(capsys):
    assert main(["4", "410", "200", "200", "0"]) == 0
    out = capsys.readouterr().out
    assert out == ALREADY_SATISFIED + "\n"
    assert out.startswith("0 all philosophers have eaten the required amount.")

    assert main_bonus(["4", "410", "200", "200", "0"]) == 0
    assert capsys.readouterr().out == ALREADY_SATISFIED + "\n"


def _check_single_death(lines):
    assert len(lines) == 2
    assert lines[0] == "0 1 has taken a fork"
    timestamp, rest = lines[1].split(" ", 1)
    assert rest == "1 died"
    assert int(timestamp) >= 100


def test_single_philosopher_takes_fork_and_dies(capsys):
    assert main(["1", "100", "50", "50"]) == 0
    _check_single_death(capsys.readouterr().out.splitlines())


def test_bonus_single_philosopher_takes_fork_and_dies(capsys):
    assert main_bonus(["1", "100", "50", "50"]) == 0
    _check_single_death(capsys.readouterr().out.splitlines())


def test_bonus_run_ends_satisfied(capsys):
    assert main_bonus(["4", "800", "50", "50", "2"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith(" everyone is satisfied")
    assert not any(line.endswith(" died") for line in lines)
    eating = [line for line in lines if line.endswith(" is eating")]
    assert len(eating) >= 2
    timestamps = [int(line.split(" ", 1)[0]) for line in lines]
    assert all(value >= 0 for value in timestamps)