import logging
import sys
from pathlib import Path
from typing import Optional

import click
import yaml
from rich.console import Console

from hc_cli.report import render_read_error, render_report
from hc_core.codebase.debug import configure_logger
from hc_core.data.loader import DocumentReadError
from hc_core.data.schema import load_schema
from hc_core.models.findings import Report, error
from hc_core.models.schema import HCSchema
from hc_core.validation.document import validate_file

logger = logging.getLogger("hc.cli")


def resolve_schema(schema_path: Optional[str]) -> HCSchema:
    try:
        return load_schema(schema_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.BadParameter(str(e), param_hint="'--schema'") from e


def _export_reports(reports: list[Report], export: str) -> None:
    documents = []
    for report in reports:
        entry = report.model_dump()
        entry["failed"] = report.failed
        documents.append(entry)

    data = {
        "documents": documents,
        "summary": {
            "documents": len(reports),
            "failed": sum(1 for r in reports if r.failed),
            "errors": sum(len(r.errors) for r in reports),
            "warnings": sum(len(r.warnings) for r in reports),
        },
    }
    with open(export, "w") as f:
        yaml.dump(data, f, default_flow_style=False, sort_keys=True)


@click.command("validate")
@click.argument(
    "files",
    nargs=-1,
    required=True,
    type=click.Path(path_type=str, exists=False),
)
@click.option(
    "--schema",
    "schema_path",
    type=click.Path(path_type=str, dir_okay=False, exists=False),
    default=None,
    help="YAML file overriding HC schema constants (types, fields, thresholds).",
)
@click.option(
    "--export",
    type=click.Path(path_type=str, dir_okay=False),
    help="Export validation findings to YAML file.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def validate(files: tuple[str, ...], schema_path: Optional[str], export: Optional[str], verbose: bool) -> None:
    """Validate one or more HC documents against the HC format."""
    configure_logger(logging.DEBUG if verbose else logging.WARNING)
    schema = resolve_schema(schema_path)
    console = Console()

    reports: list[Report] = []
    any_failed = False

    for file in files:
        name = Path(file).name
        try:
            report = validate_file(file, schema=schema)
        except (FileNotFoundError, DocumentReadError) as e:
            logger.debug("read failed for %s: %s", file, e)
            render_read_error(name, str(e), console)
            report = Report(document=name, errors=[error("READ_ERROR", str(e), path=file)])
        else:
            render_report(report, console)

        reports.append(report)
        any_failed = any_failed or report.failed

    if export:
        _export_reports(reports, export)
        console.print(f"\n[green]✓[/green] Findings exported to {export}", soft_wrap=True)

    sys.exit(1 if any_failed else 0)
