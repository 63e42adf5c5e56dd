import click

from resource_id.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV
from resource_id.log import setup_logging
from resource_id.cli.generate import generate
from resource_id.cli.describe import parse
from resource_id.cli.reconstruct import from_bytes, from_int, from_value


@click.group()
@click.option(
    "--log-level",
    envvar=LOG_LEVEL_ENV,
    default=DEFAULT_LOG_LEVEL,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for diagnostics on stderr.",
)
def cli(log_level):
    """Generate, validate and convert typo-resistant resource ids."""
    setup_logging(log_level)


cli.add_command(generate)
cli.add_command(parse)

# Storage form conversions
cli.add_command(from_int)
cli.add_command(from_value)
cli.add_command(from_bytes)


if __name__ == "__main__":
    cli()
