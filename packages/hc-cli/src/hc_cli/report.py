from rich.console import Console
from rich.markup import escape

from hc_core.models.findings import Report


def _printable(text: str) -> str:
    # lone surrogates from JSON \ud800 escapes cannot be encoded to UTF-8
    return text.encode("utf-8", "backslashreplace").decode("utf-8")


def _line(console: Console, text: str = "") -> None:
    # soft_wrap keeps long messages on one line so they stay greppable
    console.print(_printable(text), soft_wrap=True)


def render_report(report: Report, console: Console) -> None:
    """Print the human-readable report for one document."""
    _line(console, f"\nValidating: [bold]{escape(report.document)}[/bold]\n")

    if not report.errors and not report.warnings:
        _line(console, "[green]✅ Valid HC file![/green]")
        return

    if report.errors:
        _line(console, "[red]❌ Errors:[/red]")
        for finding in report.errors:
            _line(console, f"   - {escape(finding.message)}")

    if report.warnings:
        _line(console, "\n[yellow]⚠️  Warnings:[/yellow]")
        for finding in report.warnings:
            _line(console, f"   - {escape(finding.message)}")

    _line(console, f"\nSummary: {len(report.errors)} error(s), {len(report.warnings)} warning(s)")


def render_read_error(name: str, message: str, console: Console) -> None:
    """I/O failures are reported apart from content findings."""
    _line(console, f"\nValidating: [bold]{escape(name)}[/bold]\n")
    _line(console, f"[red]Error reading file: {escape(message)}[/red]")
