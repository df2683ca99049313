"""
Command-line interface for the GLSL linter, powered by Typer.

The CLI never runs glslangValidator itself; ``parse`` works on output that
was captured to a file beforehand.
"""

import json
from enum import Enum
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from loguru import logger

from ..api import build_shader_record, lint_output
from ..classifier import classify
from ..config import DEFAULT_VALIDATOR_PATH, LinterSettings
from ..core.enums import Severity
from ..core.exceptions import GlslLinterError
from ..formatter import DiagnosticFormatter
from ..logging_config import setup_logging

app = typer.Typer(
    name="glsl-lint",
    help="Classify GLSL shader files and parse glslangValidator output.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


class OutputStyle(str, Enum):
    TEXT = "text"
    JSON = "json"


@app.callback()
def main_options(
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging."),
):
    """Manage global options."""
    setup_logging("DEBUG" if verbose else "WARNING")


@app.command("classify")
def classify_command(
    files: List[Path] = typer.Argument(..., help="Shader files to classify."),
):
    """Show the shader stage and canonical name of each file."""
    failed = False
    for file_path in files:
        try:
            tokens = classify(file_path)
        except GlslLinterError as e:
            console.print(f"[red]Error:[/red] {e}")
            failed = True
            continue
        console.print(
            f"{file_path}: [bold]{tokens.stage.display_name}[/bold] "
            f"-> {tokens.canonical_output_name}"
        )
    if failed:
        raise typer.Exit(code=1)


@app.command("parse")
def parse_command(
    output_log: Path = typer.Argument(
        ..., help="File holding captured glslangValidator output.",
        exists=True, readable=True),
    shaders: List[Path] = typer.Option(
        ..., "--shader", "-s", help="Shader file submitted to the validator.",
        exists=True, readable=True),
    output_format: OutputStyle = typer.Option(
        OutputStyle.TEXT, "--format", "-f", help="Output format."),
    output_file: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Also write the diagnostics as JSON to this file."),
    no_color: bool = typer.Option(
        False, "--no-color", help="Disable colorized output."),
):
    """Parse a saved validator log against the shaders that produced it."""
    try:
        records = [build_shader_record(path) for path in shaders]
        raw_output = output_log.read_text(encoding="utf-8")
    except (GlslLinterError, UnicodeDecodeError, OSError) as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    diagnostics = lint_output(records, raw_output)
    logger.info(f"Found {len(diagnostics)} diagnostics in {output_log}")

    payload = [d.to_dict() for d in diagnostics]
    if output_file is not None:
        output_file.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info(f"JSON output written to {output_file}")

    if output_format is OutputStyle.JSON:
        typer.echo(json.dumps(payload, indent=2))
    else:
        typer.echo(DiagnosticFormatter(colorize=not no_color).format(diagnostics))

    if any(d.severity is Severity.ERROR for d in diagnostics):
        raise typer.Exit(code=1)


@app.command("locate")
def locate_command(
    validator: str = typer.Option(
        DEFAULT_VALIDATOR_PATH, "--validator", help="Path or name of glslangValidator."),
):
    """Report where the validator binary resolves to."""
    try:
        settings = LinterSettings(validator_path=validator)
    except ValueError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1)

    resolved = settings.resolve_validator()
    if resolved is None:
        console.print(
            f"[red]Unable to locate glslangValidator at '{settings.validator_path}'[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]✔[/green] {resolved}")


def main():
    app()
