import pytest
from typer.testing import CliRunner

from goldsearch import cli
from goldsearch.cli import app
from goldsearch.errors import InputParseError

runner = CliRunner()


def test_parse():
    assert cli.parse(" 12 ", int) == 12
    assert cli.parse("-1.5", float) == -1.5

    with pytest.raises(InputParseError):
        cli.parse("abc", int)

    with pytest.raises(ValueError):
        cli.parse("1.5", int)


def test_functions():
    result = runner.invoke(app, ["functions"])
    assert result.exit_code == 0
    assert "0] y = x^2" in result.output
    assert "1] y = sin(x)" in result.output


def test_solve():
    result = runner.invoke(app, ["solve"])
    assert result.exit_code == 0
    assert "[-1.00000;1.00000]" in result.output
    assert "(found in 26 iterations)" in result.output


def test_solve_sin():
    result = runner.invoke(
        app, ["solve", "-f", "1", "--left=6", "--right=3", "--precision=4"]
    )
    assert result.exit_code == 0
    assert "y = sin(x) on [3.0000;6.0000]" in result.output
    assert "Minimum: 4.712" in result.output


def test_solve_no_minimum():
    result = runner.invoke(app, ["solve", "-f", "1", "--left=0", "--right=3.14159"])
    assert result.exit_code == cli.EXIT_ERROR
    assert "no minimum" in result.output


def test_solve_bad_index():
    result = runner.invoke(app, ["solve", "-f", "2"])
    assert result.exit_code == cli.EXIT_ERROR
    assert "invalid function index: 2" in result.output


def test_solve_unexpected(monkeypatch):
    def broken():
        raise RuntimeError("boom")

    monkeypatch.setattr(cli, "default_registry", broken)
    result = runner.invoke(app, ["solve"])
    assert result.exit_code == cli.EXIT_UNEXPECTED
    assert "Unknown error" in result.output


def test_solve_env(monkeypatch):
    monkeypatch.setenv("GOLDSEARCH_PRECISION", "2")
    result = runner.invoke(app, ["solve"])
    assert result.exit_code == 0
    assert "[-1.00;1.00]" in result.output


def test_menu_quit():
    result = runner.invoke(app, [], input="0\n")
    assert result.exit_code == 0
    assert "1] Select function (selected: y = x^2)" in result.output
    assert "3] Select precision (selected: 5 digits (0.00001))" in result.output


def test_menu_end_of_input():
    result = runner.invoke(app, ["menu"], input="")
    assert result.exit_code == 0


def test_menu_solve():
    result = runner.invoke(app, ["menu"], input="4\n\n0\n")
    assert result.exit_code == 0
    assert "Minimum: " in result.output
    assert "(found in 26 iterations)" in result.output


def test_menu_session():
    lines = [
        "1",  # select function
        "2",  # sin(x)
        "",
        "2",  # select interval
        "0",
        "3.14159",
        "",
        "4",  # no minimum on [0, pi]
        "",
        "2",
        "3",
        "6",
        "",
        "3",  # select precision
        "3",
        "",
        "4",
        "",
        "0",
    ]
    result = runner.invoke(app, ["menu"], input="\n".join(lines) + "\n")
    assert result.exit_code == 0
    assert "Selected y = sin(x)" in result.output
    assert "Interval set to [0.00000;3.14159]" in result.output
    assert "* apparently there is no minimum on the given interval" in result.output
    assert "Interval set to [3.00000;6.00000]" in result.output
    assert "Precision set to 3 digits (0.001)" in result.output
    assert "Minimum: 4.71" in result.output


def test_menu_keep_bounds():
    result = runner.invoke(app, ["menu"], input="2\n\n0.5\n\n0\n")
    assert result.exit_code == 0
    assert "Interval set to [-1.00000;0.50000]" in result.output


def test_menu_invalid_input():
    result = runner.invoke(app, ["menu"], input="abc\n\n7\n1\n0\n\n0\n")
    assert result.exit_code == 0
    assert "* invalid input: 'abc'" in result.output
    assert "Cancelled" in result.output


def test_solve_precision_underflow():
    result = runner.invoke(app, ["solve", "--precision=400"])
    assert result.exit_code == cli.EXIT_ERROR
    assert "no minimum" in result.output


def test_menu_precision_overflow():
    result = runner.invoke(app, ["menu"], input="3\n-400\n\n4\n\n0\n")
    assert result.exit_code == 0
    assert "Precision set to -400 digits (inf)" in result.output
    assert "* apparently there is no minimum on the given interval" in result.output
