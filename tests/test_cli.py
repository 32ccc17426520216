"""Tests for the `python -m arrays` entry point."""

import pytest


@pytest.fixture(autouse=True)
def no_logging_setup(monkeypatch):
    import arrays.__main__ as cli

    monkeypatch.setattr(cli, "setup_logging", lambda level=None: None)


def test_list(capsys):
    from arrays.__main__ import main

    assert main(["list", "--category", "transforms"]) == 0
    out = capsys.readouterr().out
    assert "transforms.remove_dollars" in out
    assert "aggregates.make_math" not in out


def test_check_passes(capsys):
    from arrays.__main__ import main

    assert main(["check"]) == 0
    out = capsys.readouterr().out
    assert "examples passed" in out
    assert "FAIL" not in out


def test_check_reports_failure(capsys, monkeypatch):
    import arrays.__main__ as cli
    from arrays.discovery import ExampleFailure

    monkeypatch.setattr(
        cli, "check_examples",
        lambda: [ExampleFailure("x.y", [1], [2], actual=[1])],
    )

    assert cli.main(["check"]) == 1
    assert "FAIL x.y([1]): expected [2], got [1]" in capsys.readouterr().out


def test_export_removed():
    from arrays.__main__ import main

    with pytest.raises(SystemExit):
        main(["export"])
