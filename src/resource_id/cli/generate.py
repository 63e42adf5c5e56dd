import click

from resource_id.config import DEFAULT_SIZE_IN_BYTES, SIZE_ENV
from resource_id.exceptions import InvalidArgumentError
from resource_id.identifier import ResourceId
from resource_id.cli.params import parent_option


@click.command("generate")
@click.argument("resource_type")
@parent_option
@click.option(
    "--size",
    type=int,
    envvar=SIZE_ENV,
    default=DEFAULT_SIZE_IN_BYTES,
    show_default=True,
    help="Payload size in bytes.",
)
@click.option(
    "--count", "-n", type=click.IntRange(min=1), default=1, help="Number of ids."
)
def generate(resource_type, parent, size, count):
    """Generates new random ids for RESOURCE_TYPE."""
    try:
        for _ in range(count):
            click.echo(
                ResourceId.generate(resource_type, parent=parent, size_in_bytes=size)
            )
    except InvalidArgumentError as e:
        raise click.ClickException(str(e))

    click.echo(f"Generated {count} id(s) of {size} byte(s)", err=True)
