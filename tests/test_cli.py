from __future__ import annotations

import json

from amnezic.cli import main


def test_cli_prints_reproducible_game(capsys) -> None:
    argv = ["--seed", "42", "--questions", "2", "--answers", "3", "--players", "4", "--sources", "legacy"]

    assert main(argv) == 0
    first = json.loads(capsys.readouterr().out)
    assert main(argv) == 0
    second = json.loads(capsys.readouterr().out)

    assert first["success"] is True
    assert len(first["game"]["questions"]) == 2
    assert first["game"]["questions"] == second["game"]["questions"]


def test_cli_reports_invalid_settings(capsys) -> None:
    assert main(["--players", "1"]) == 2
    assert "invalid number of player" in capsys.readouterr().err
