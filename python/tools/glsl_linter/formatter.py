"""
Console formatter.

This module formats parsed diagnostics for terminal display, colorized by
severity.
"""

from typing import Sequence

from termcolor import colored

from .core.enums import Severity
from .core.data_structures import Diagnostic


class DiagnosticFormatter:
    """Formatter for printing diagnostics to a console."""

    def __init__(self, colorize: bool = True):
        self.colorize = colorize
        self.color_map = {
            Severity.ERROR: "red",
            Severity.WARNING: "yellow",
            Severity.INFO: "blue",
        }

    def format_diagnostic(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic, with one-based line and column."""
        location = diagnostic.file or "<unknown>"
        location += f":{diagnostic.line + 1}:{diagnostic.column + 1}"
        text = f"{diagnostic.severity.value.upper()}: {location} - {diagnostic.message}"
        if not self.colorize:
            return text
        return colored(text, self.color_map.get(diagnostic.severity, "white"))

    def format_summary(self, diagnostics: Sequence[Diagnostic]) -> str:
        """Format counts of diagnostics by severity."""
        counts = {severity: 0 for severity in Severity}
        for diagnostic in diagnostics:
            counts[diagnostic.severity] += 1
        return (
            f"{len(diagnostics)} diagnostic(s): "
            f"{counts[Severity.ERROR]} error(s), "
            f"{counts[Severity.WARNING]} warning(s), "
            f"{counts[Severity.INFO]} info"
        )

    def format(self, diagnostics: Sequence[Diagnostic]) -> str:
        """Format all diagnostics followed by a summary line."""
        lines = [self.format_diagnostic(d) for d in diagnostics]
        lines.append(self.format_summary(diagnostics))
        return "\n".join(lines)
