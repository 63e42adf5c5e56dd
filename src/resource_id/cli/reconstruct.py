"""Commands that rebuild a full id from one of its storage forms."""

import click

from resource_id.config import SIZE_ENV
from resource_id.exceptions import DecodingError, InvalidArgumentError
from resource_id.identifier import ResourceId
from resource_id.cli.params import parent_option


@click.command("from-int")
@click.argument("resource_type")
@click.argument("value", type=int)
@click.option(
    "--size",
    type=int,
    envvar=SIZE_ENV,
    required=True,
    help="Original payload size in bytes.",
)
@parent_option
def from_int(resource_type, value, size, parent):
    """Rebuilds an id from its integer (BIGINT) form."""
    try:
        click.echo(ResourceId.from_int(resource_type, value, size, parent=parent))
    except InvalidArgumentError as e:
        raise click.ClickException(str(e))


@click.command("from-value")
@click.argument("resource_type")
@click.argument("value")
@parent_option
def from_value(resource_type, value, parent):
    """Rebuilds an id from its bare Base32 value."""
    try:
        click.echo(ResourceId.from_value(resource_type, value, parent=parent))
    except (InvalidArgumentError, DecodingError) as e:
        raise click.ClickException(str(e))


@click.command("from-bytes")
@click.argument("resource_type")
@click.argument("hex_bytes")
@parent_option
def from_bytes(resource_type, hex_bytes, parent):
    """Rebuilds an id from its raw bytes, given as hex."""
    try:
        data = bytes.fromhex(hex_bytes)
    except ValueError:
        raise click.BadParameter(
            f"{hex_bytes!r} is not valid hex", param_hint="HEX_BYTES"
        )

    try:
        click.echo(ResourceId.from_bytes(resource_type, data, parent=parent))
    except InvalidArgumentError as e:
        raise click.ClickException(str(e))
