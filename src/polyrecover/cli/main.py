"""Typer-based command line interface for polyrecover."""
from __future__ import annotations

from pathlib import Path
from typing import List, Optional

import typer

from ..config import AppConfig, load_config
from ..decoding import decode_value, load_share_file, parse_pick
from ..errors import ReconstructionError
from ..interpolation import Polynomial, get_solver
from ..logging import configure_logging
from ..models import ReconstructionResult
from ..reconstructor import Reconstructor

app = typer.Typer(help="Recover the secret constant term from polynomial shares")


@app.callback()
def main(
    ctx: typer.Context,
    config: Optional[Path] = typer.Option(None, "--config", metavar="PATH"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="Override the configured log level"),
) -> None:
    try:
        ctx.obj = load_config(config)
        configure_logging(log_level or ctx.obj.logging.normalized_level())
    except ReconstructionError as exc:
        _fail(exc)


def _fail(exc: Exception) -> None:
    message = exc.args[0] if isinstance(exc, KeyError) and exc.args else exc
    typer.echo(f"Error: {message}", err=True)
    raise typer.Exit(code=1)


def _build_reconstructor(config: AppConfig, method: Optional[str], workers: Optional[int]) -> Reconstructor:
    solver = get_solver(method) if method else config.solver.build_solver()
    return Reconstructor(solver, workers=workers or config.solver.workers)


def _render(result: ReconstructionResult, votes: bool, coefficients: bool) -> List[str]:
    lines = [f"constant = {result.secret}"]
    if votes and result.tally is not None:
        for value, count in result.tally.summary():
            lines.append(f"votes[{value}] = {count}")
        lines.append("witness = " + ",".join(str(key) for key in result.witness_keys()))
    if coefficients and result.coefficients:
        polynomial = Polynomial.from_coefficients(result.coefficients)
        lines.extend(f"{name} = {value}" for name, value in polynomial.named_terms())
    return lines


@app.command()
def solve(
    ctx: typer.Context,
    path: Path = typer.Argument(..., exists=True, readable=True, dir_okay=False),
    pick: Optional[str] = typer.Option(None, "--pick", help="Comma separated x keys to interpolate, e.g. 1,3,4"),
    find_consistent: bool = typer.Option(False, "--find-consistent", help="Vote over every k-subset"),
    method: Optional[str] = typer.Option(None, "--method", help="Interpolation strategy: lagrange|gauss"),
    workers: Optional[int] = typer.Option(None, "--workers", min=1, help="Threads for voting mode"),
    votes: bool = typer.Option(False, "--votes", help="Print the vote tally and witness keys"),
    coefficients: bool = typer.Option(False, "--coefficients", help="Print every polynomial coefficient"),
) -> None:
    config: AppConfig = ctx.obj
    try:
        keys = parse_pick(pick) if pick is not None else None
        reconstructor = _build_reconstructor(config, method, workers)
        problem = load_share_file(path)
        result = reconstructor.reconstruct(problem.points, problem.k, pick=keys, exhaustive=find_consistent)
    except (ReconstructionError, KeyError) as exc:
        _fail(exc)
    for line in _render(result, votes, coefficients):
        typer.echo(line)


@app.command()
def decode(
    value: str = typer.Argument(...),
    base: int = typer.Option(10, "--base", help="Radix between 2 and 36"),
) -> None:
    try:
        typer.echo(decode_value(value, base))
    except ReconstructionError as exc:
        _fail(exc)


@app.command()
def version() -> None:
    from ..version import __version__

    typer.echo(f"polyrecover {__version__}")


if __name__ == "__main__":  # pragma: no cover
    app()
