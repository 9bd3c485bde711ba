"""Typer CLI for goldsearch: the interactive menu and one-shot commands."""

import enum
import logging
import sys
from collections.abc import Callable
from typing import Optional

import typer

from goldsearch import __version__
from goldsearch.config import configure_logging, default_problem
from goldsearch.errors import InputParseError, SearchError
from goldsearch.format import bounds_string, precision_string, solution_string
from goldsearch.problem import SearchProblem
from goldsearch.registry import FunctionRegistry, default_registry

logger = logging.getLogger(__name__)

app = typer.Typer(help="goldsearch: minimum of a function by golden-section search")

EXIT_ERROR = 1
EXIT_UNEXPECTED = 2


class Command(enum.IntEnum):
    QUIT = 0
    FUNC = 1
    RANGE = 2
    PRECISION = 3
    SOLVE = 4


class EndOfInput(Exception):
    """Standard input was closed."""


def read_line(prompt: str = "") -> str:
    if prompt:
        typer.echo(prompt, nl=False)

    if not (line := sys.stdin.readline()):
        raise EndOfInput

    return line.rstrip("\r\n")


def parse[T](text: str, convert: Callable[[str], T]) -> T:
    """Convert `text` with `convert`, raising :class:`InputParseError` on failure."""
    try:
        return convert(text.strip())
    except ValueError:
        raise InputParseError(f"invalid input: {text!r}") from None


def read_choice(count: int) -> int:
    """Prompt until a number in ``[0, count)`` is entered."""
    while True:
        index = parse(read_line("Command:> "), int)

        if 0 <= index < count:
            return index


class Session:
    """State of one interactive session.

    Parameters
    ----------
    functions : FunctionRegistry
    problem : SearchProblem
    """

    functions: FunctionRegistry
    problem: SearchProblem
    current: int

    def __init__(self, functions: FunctionRegistry, problem: SearchProblem):
        self.functions = functions
        self.problem = problem
        self.current = 0

    def show_menu(self) -> None:
        fun = self.functions.get(self.current)
        typer.echo(f"{Command.QUIT}] Quit")
        typer.echo(f"{Command.FUNC}] Select function (selected: {fun.name})")
        typer.echo(
            f"{Command.RANGE}] Select interval (selected: {bounds_string(self.problem)})"
        )
        typer.echo(
            f"{Command.PRECISION}] Select precision "
            f"(selected: {precision_string(self.problem)})"
        )
        typer.echo(f"{Command.SOLVE}] Find minimum")

    def select_function(self) -> None:
        typer.echo("0] Back")

        for i, name in enumerate(self.functions.names(), 1):
            typer.echo(f"{i}] {name}")

        if (index := read_choice(self.functions.size() + 1)) == 0:
            typer.echo("Cancelled")
            return

        self.current = index - 1
        typer.echo(f"Selected {self.functions.get(self.current).name}")

    def select_range(self) -> None:
        typer.echo("An empty line keeps the previous value (in parentheses)")
        a = self.problem.left
        b = self.problem.right

        if line := read_line(f"Left end of the interval ({a}): ").strip():
            a = parse(line, float)

        if line := read_line(f"Right end of the interval ({b}): ").strip():
            b = parse(line, float)

        self.problem.set_bounds(a, b)
        typer.echo(f"Interval set to {bounds_string(self.problem)}")

    def select_precision(self) -> None:
        precision = parse(read_line("Enter precision (decimal digits): "), int)
        self.problem.set_precision(precision)
        typer.echo(f"Precision set to {precision_string(self.problem)}")

    def solve(self) -> None:
        fun = self.functions.get(self.current)
        result = self.problem.find_minimum(fun)

        if not result.success:
            typer.echo(f"* {result.message}", err=True)
            return

        typer.echo(f"Minimum: {solution_string(self.problem)}")

    def run(self) -> None:
        """Process the main menu until the user quits or input ends."""
        actions = {
            Command.FUNC: self.select_function,
            Command.RANGE: self.select_range,
            Command.PRECISION: self.select_precision,
            Command.SOLVE: self.solve,
        }

        try:
            while True:
                self.show_menu()

                try:
                    if (cmd := Command(read_choice(len(Command)))) is Command.QUIT:
                        return

                    actions[cmd]()
                except SearchError as exc:
                    typer.echo(f"* {exc.message}", err=True)

                read_line("Press <Enter>...")
        except EndOfInput:
            logger.debug("end of input")


def _guard(fun: Callable[[], None]) -> None:
    # maps errors to exit statuses: 1 for SearchError, 2 for anything else
    try:
        fun()
    except SearchError as exc:
        typer.echo(f"* {exc.message}", err=True)
        raise typer.Exit(EXIT_ERROR)
    except Exception:
        logger.exception("unexpected error")
        typer.echo("* Unknown error", err=True)
        raise typer.Exit(EXIT_UNEXPECTED)


@app.callback(invoke_without_command=True)
def default(ctx: typer.Context):
    """Run the interactive menu when no command is given."""
    if ctx.invoked_subcommand is None:
        menu()


@app.command()
def menu():
    """Run the interactive menu."""
    _guard(lambda: Session(default_registry(), default_problem()).run())


@app.command()
def solve(
    function: int = typer.Option(0, "--function", "-f", help="Function index"),
    left: Optional[float] = typer.Option(None, help="Left end of the interval"),
    right: Optional[float] = typer.Option(None, help="Right end of the interval"),
    precision: Optional[int] = typer.Option(None, help="Number of decimal digits"),
):
    """Find the minimum of one function and print it."""

    def run():
        fun = default_registry().get(function)
        problem = default_problem()

        if left is not None or right is not None:
            problem.set_bounds(
                problem.left if left is None else left,
                problem.right if right is None else right,
            )

        if precision is not None:
            problem.set_precision(precision)

        problem.find_minimum(fun).unwrap()
        typer.echo(f"{fun.name} on {bounds_string(problem)}")
        typer.echo(f"Minimum: {solution_string(problem)}")

    _guard(run)


@app.command()
def functions():
    """List the available functions."""
    for i, name in enumerate(default_registry().names()):
        typer.echo(f"{i}] {name}")


@app.command()
def version():
    """Show goldsearch version."""
    typer.echo(f"goldsearch v{__version__}")


def main():
    configure_logging()
    app()
