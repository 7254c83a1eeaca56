import os
from unittest import mock

import pygame
import pytest

from my_defender.app import (
    EXIT_FAILURE,
    MissingEnvironmentError,
    UsageError,
    get_help,
    main,
    verify,
)
from my_defender.menu import TEXT_LIMIT


def environment(size):
    return {f"VAR_{index}": "1" for index in range(size)}


@pytest.fixture
def full_env(monkeypatch):
    for name, value in environment(60).items():
        monkeypatch.setenv(name, value)


def test_verify_environment_boundary():
    assert verify([], environment(51)) is None
    with pytest.raises(MissingEnvironmentError):
        verify([], environment(50))


def test_verify_empty_environment():
    with pytest.raises(MissingEnvironmentError):
        verify(["-h"], {})


def test_verify_too_many_arguments():
    with pytest.raises(UsageError, match="retry with -h"):
        verify(["a", "b"], environment(60))


def test_get_help_reads_file(tmp_path):
    rules = tmp_path / "rules.txt"
    rules.write_text("place towers\nstop the wave\n")
    assert get_help(str(rules)) == "place towers\nstop the wave\n"


def test_get_help_truncates(tmp_path):
    rules = tmp_path / "rules.txt"
    rules.write_text("x" * (TEXT_LIMIT * 2))
    assert get_help(str(rules)) == "x" * TEXT_LIMIT


def test_get_help_missing_file(tmp_path):
    assert get_help(str(tmp_path / "absent.txt")) is None


def test_main_too_many_arguments(full_env, capsys):
    assert main(["a", "b"]) == EXIT_FAILURE
    assert capsys.readouterr().out == " retry with -h\n"


def test_main_small_environment(monkeypatch, capsys):
    monkeypatch.setattr(os, "environ", {})
    assert main([]) == 84
    assert capsys.readouterr().out == ""


def test_main_help_prints_rules(full_env, tmp_path, monkeypatch, capsys):
    rules_dir = tmp_path / "resources" / "rules_game"
    rules_dir.mkdir(parents=True)
    (rules_dir / "rules.txt").write_text("defend the castle\n")
    monkeypatch.chdir(tmp_path)
    assert main(["-h"]) == 0
    assert capsys.readouterr().out == "defend the castle\n"


def test_main_launches_and_quits(full_env, tmp_path, monkeypatch, capsys):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.chdir(tmp_path)
    with mock.patch("pygame.event.get", return_value=[pygame.event.Event(pygame.QUIT)]):
        assert main([]) == 0
    out = capsys.readouterr().out
    assert "|Base game loaded\n" in out
    assert out.index("Base game loaded") < out.index("Base game destroyed")