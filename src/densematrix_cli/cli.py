"""Typer-powered command-line interface for dense matrix arithmetic."""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

import typer
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from densematrix import Err, Matrix, Outcome

from .config import (
    DEFAULT_DTYPE,
    DEFAULT_LOG_LEVEL,
    DTYPE_ENVVAR,
    LOG_LEVEL_ENVVAR,
    MENU,
    MENU_BY_CODE,
    MENU_BY_OPERATION,
    QUIT_CODE,
    MenuEntry,
    Operation,
    parse_matrix,
    parse_vector,
    resolve_element_type,
)
from .operations import evaluate

app = typer.Typer(help="Dense matrix arithmetic: build matrices and apply linear-algebra operations.")
console = Console()
LOGGER = logging.getLogger(__name__)

_PARSE_ERRORS = (ValueError, ArithmeticError)


@app.callback()
def configure(
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        envvar=LOG_LEVEL_ENVVAR,
        help="Python logging level (default: WARNING).",
    ),
) -> None:
    """Dense matrix arithmetic from the command line."""

    logging.basicConfig(level=getattr(logging, str(log_level).upper(), logging.WARNING))


def _element_type(dtype: str) -> Callable[[Any], Any]:
    try:
        return resolve_element_type(dtype)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--dtype") from exc


def render_matrix(matrix: Matrix, title: Optional[str] = None) -> None:
    """Print ``matrix`` row by row as a borderless table."""

    if matrix.row_count == 0 or matrix.col_count == 0:
        prefix = f"{title}: " if title else ""
        console.print(f"{prefix}(empty {matrix.row_count}x{matrix.col_count} matrix)")
        return
    if title:
        console.print(f"{title}:")
    table = Table(show_header=False, box=box.SIMPLE)
    for _ in range(matrix.col_count):
        table.add_column(justify="right")
    for row in matrix.rows():
        table.add_row(*(str(value) for value in row))
    console.print(table)


def _join(values: List[Any]) -> str:
    return " ".join(str(value) for value in values)


def _render_outcome(entry: MenuEntry, outcome: Outcome[Any], arguments: Dict[str, Any]) -> None:
    if isinstance(outcome, Err):
        console.print(f"[bold red]error:[/bold red] {escape(outcome.message)}")
        return
    value = outcome.value
    operation = entry.operation
    if isinstance(value, Matrix):
        render_matrix(value, "New matrix" if entry.mutates else f"{entry.label} result")
    elif operation is Operation.ROW:
        console.print(f"row {arguments['row']}: {_join(value)}")
    elif operation is Operation.COLUMN:
        console.print(f"col {arguments['col']}: {_join(value)}")
    elif operation is Operation.CELL:
        console.print(f"number in the cell ({arguments['row']}, {arguments['col']}): {value}")
    else:
        console.print(f"Determinant of matrix A: {value}")


# ----------------------------------------------------------------------
# Interactive session
# ----------------------------------------------------------------------
def _prompt_dimension(label: str) -> int:
    while True:
        value = typer.prompt(label, type=int)
        if value >= 0:
            return value
        console.print("[red]dimensions must be non-negative[/red]")


def _prompt_values(label: str, element_type: Callable[[Any], Any], count: int) -> List[Any]:
    if count == 0:
        return []
    while True:
        text = typer.prompt(label)
        try:
            values = parse_vector(text, element_type)
        except _PARSE_ERRORS as exc:
            console.print(f"[red]invalid element:[/red] {escape(str(exc))}")
            continue
        if len(values) == count:
            return values
        console.print(f"[red]expected {count} values, got {len(values)}[/red]")


def _prompt_matrix(element_type: Callable[[Any], Any]) -> Matrix:
    rows = _prompt_dimension("enter number of rows")
    cols = _prompt_dimension("enter number of columns")
    matrix = Matrix(rows, cols, zero=element_type(0))
    for i in range(rows):
        matrix[i][:] = _prompt_values(f"row {i}", element_type, cols)
    return matrix


def _prompt_argument(name: str, entry: MenuEntry, a: Matrix, element_type: Callable[[Any], Any]) -> Any:
    if name == "scalar":
        return _prompt_values("enter a scalar", element_type, 1)[0]
    if name == "row":
        return typer.prompt("enter a row index", type=int)
    if name == "col":
        return typer.prompt("enter a col index", type=int)
    if entry.operation is Operation.ADD_ROW:
        return _prompt_values("enter row elements", element_type, a.col_count)
    return _prompt_values("enter col elements", element_type, a.row_count)


def _print_menu() -> None:
    console.print("choose operation:")
    for entry in MENU:
        console.print(f"{entry.code}. {entry.label}")
    console.print(f"{QUIT_CODE}. Quit")


@app.command("session")
def session(
    dtype: str = typer.Option(
        DEFAULT_DTYPE,
        "--dtype",
        envvar=DTYPE_ENVVAR,
        help="Element type of both matrices: float, int or fraction.",
    ),
) -> None:
    """Build matrices A and B interactively, then apply operations until quit."""

    element_type = _element_type(dtype)
    console.print("Build first matrix:")
    a = _prompt_matrix(element_type)
    console.print("Build second matrix:")
    b = _prompt_matrix(element_type)
    LOGGER.debug("Session started with A=%dx%d B=%dx%d", *a.shape, *b.shape)

    while True:
        _print_menu()
        choice = typer.prompt("operation", type=int)
        if choice == QUIT_CODE:
            break
        entry = MENU_BY_CODE.get(choice)
        if entry is None:
            console.print("unknown operation.")
            continue
        arguments = {
            name: _prompt_argument(name, entry, a, element_type)
            for name in entry.arguments
            if name != "b"
        }
        outcome = evaluate(entry.operation, a, b, **arguments)
        _render_outcome(entry, outcome, arguments)


# ----------------------------------------------------------------------
# One-shot evaluation
# ----------------------------------------------------------------------
def _parse_matrix_option(text: str, element_type: Callable[[Any], Any], hint: str) -> Matrix:
    try:
        return parse_matrix(text, element_type)
    except _PARSE_ERRORS as exc:
        raise typer.BadParameter(str(exc), param_hint=hint) from exc


def _parse_vector_option(text: str, element_type: Callable[[Any], Any], hint: str) -> List[Any]:
    try:
        return parse_vector(text, element_type)
    except _PARSE_ERRORS as exc:
        raise typer.BadParameter(str(exc), param_hint=hint) from exc


@app.command("compute")
def compute(
    operation: Operation = typer.Argument(
        ...,
        case_sensitive=False,
        help="Operation to evaluate on matrix A.",
    ),
    a: str = typer.Option(
        ...,
        "--a",
        "-a",
        help="Matrix A literal: rows separated by ';', elements by spaces or commas.",
        rich_help_panel="Operands",
    ),
    b: Optional[str] = typer.Option(
        None,
        "--b",
        "-b",
        help="Matrix B literal for add, subtract and multiply.",
        rich_help_panel="Operands",
    ),
    scalar: Optional[str] = typer.Option(
        None,
        "--scalar",
        help="Scalar factor for the scalar operation.",
        rich_help_panel="Operands",
    ),
    row: Optional[int] = typer.Option(
        None,
        "--row",
        help="Row index for remove-row, row and cell.",
        rich_help_panel="Indices",
    ),
    col: Optional[int] = typer.Option(
        None,
        "--col",
        help="Column index for remove-column, column and cell.",
        rich_help_panel="Indices",
    ),
    values: Optional[str] = typer.Option(
        None,
        "--values",
        help="Elements for add-row and add-column.",
        rich_help_panel="Operands",
    ),
    dtype: str = typer.Option(
        DEFAULT_DTYPE,
        "--dtype",
        envvar=DTYPE_ENVVAR,
        help="Element type: float, int or fraction.",
    ),
) -> None:
    """Evaluate a single operation and print its result."""

    element_type = _element_type(dtype)
    entry = MENU_BY_OPERATION[operation]
    provided = {"b": b, "scalar": scalar, "row": row, "col": col, "values": values}
    missing = [f"--{name}" for name in entry.arguments if provided[name] is None]
    if missing:
        console.print(f"[bold red]{operation.value} requires {', '.join(missing)}[/bold red]")
        raise typer.Exit(code=1)

    matrix_a = _parse_matrix_option(a, element_type, "--a")
    matrix_b = _parse_matrix_option(b, element_type, "--b") if "b" in entry.arguments else None
    arguments: Dict[str, Any] = {}
    for name in entry.arguments:
        if name == "scalar":
            scalars = _parse_vector_option(scalar, element_type, "--scalar")
            if len(scalars) != 1:
                raise typer.BadParameter("expected a single value", param_hint="--scalar")
            arguments["scalar"] = scalars[0]
        elif name == "values":
            arguments["values"] = _parse_vector_option(values, element_type, "--values")
        elif name in ("row", "col"):
            arguments[name] = provided[name]

    outcome = evaluate(operation, matrix_a, matrix_b, **arguments)
    _render_outcome(entry, outcome, arguments)
    if isinstance(outcome, Err):
        raise typer.Exit(code=1)


def main() -> None:
    """Entry point for ``python -m densematrix_cli``."""

    app()


if __name__ == "__main__":
    main()
