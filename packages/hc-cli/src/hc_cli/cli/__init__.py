import click
from hc_cli.commands import schema, validate


@click.group()
def cli():
    """HyperContext (HC) document validator."""
    pass


# add cli commands here

cli.add_command(validate)
cli.add_command(schema)
