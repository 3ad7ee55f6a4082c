from typing import Optional

import click
import yaml

from hc_cli.commands.validate import resolve_schema


@click.command("schema")
@click.option(
    "--schema",
    "schema_path",
    type=click.Path(path_type=str, dir_okay=False, exists=False),
    default=None,
    help="YAML file overriding HC schema constants.",
)
def schema(schema_path: Optional[str]) -> None:
    """Print the effective HC schema as YAML."""
    effective = resolve_schema(schema_path)
    click.echo(yaml.dump(effective.model_dump(), default_flow_style=False, sort_keys=True), nl=False)
