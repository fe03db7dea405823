"""
CLI: list and run the programs, grade a roster file, inspect an inventory log.
Every command builds the application from settings (RECORDKEEPER_* env vars plus options).
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from recordkeeper.core import Application, configure_logging, load_settings
from recordkeeper.grading import StudentResultProcessor, generate_report
from recordkeeper.inventory import InventoryLogger
from recordkeeper.main import create_app

app = typer.Typer(help="recordkeeper: small record-keeping programs.", no_args_is_help=True)


@app.callback()
def main_callback(
    ctx: typer.Context,
    data_dir: Optional[Path] = typer.Option(None, "--data-dir", "-d", help="Directory for data files"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING, ERROR"),
) -> None:
    """Load settings and configure logging before any command runs."""
    settings = load_settings()
    if data_dir is not None:
        settings.data_dir = data_dir
    if log_level is not None:
        settings.log_level = log_level
    configure_logging(settings.log_level)
    ctx.obj = create_app(settings)


def _app(ctx: typer.Context) -> Application:
    return ctx.obj


@app.command("list")
def list_programs(ctx: typer.Context) -> None:
    """List available programs."""
    for program in _app(ctx).programs:
        typer.echo(f"{program.name:<12} {program.description}")


@app.command()
def run(ctx: typer.Context, program: str = typer.Argument(..., help="Program name (see `list`)")) -> None:
    """Run one program."""
    application = _app(ctx)
    names = [p.name for p in application.programs]
    if program not in names:
        typer.echo(f"Unknown program '{program}'. Available: {', '.join(names)}", err=True)
        raise typer.Exit(2)
    code = application.run(program)
    if code:
        raise typer.Exit(code)


@app.command()
def grade(
    ctx: typer.Context,
    input_file: Path = typer.Argument(..., help="Roster file: id,fullName,score per line"),
    report: Optional[Path] = typer.Option(None, "--report", "-r", help="Report output path"),
    errors: Optional[Path] = typer.Option(None, "--errors", "-e", help="Error log path"),
) -> None:
    """Grade a roster file into a summary report."""
    application = _app(ctx)
    settings = application.container.resolve("config")
    processor = application.container.resolve(StudentResultProcessor)
    code = generate_report(
        processor,
        input_file,
        report or settings.report_path,
        errors or settings.error_log_path,
    )
    if code:
        raise typer.Exit(code)


@app.command()
def inventory(
    ctx: typer.Context,
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Inventory JSON log"),
) -> None:
    """Show the contents of an inventory log without changing it."""
    settings = _app(ctx).container.resolve("config")
    log = InventoryLogger(file or settings.inventory_path)
    if not log.load_from_file():
        raise typer.Exit(1)
    for item in log.get_all():
        typer.echo(str(item))


def main() -> None:
    """Entry point for the recordkeeper console command."""
    app()


if __name__ == "__main__":
    main()
