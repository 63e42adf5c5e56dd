import json

import click

from resource_id.exceptions import ChecksumMismatchError, FormatError
from resource_id.identifier import ResourceId
from resource_id.cli.params import ChecksumMismatchException


def describe(resource_id: ResourceId) -> dict:
    """Flatten an id into the fields shown by `parse`."""
    parent = resource_id.parent
    return {
        "id": str(resource_id),
        "resource_type": resource_id.resource_type,
        "value": resource_id.value,
        "checksum": resource_id.checksum,
        "size_in_bytes": resource_id.size_in_bytes,
        "int": resource_id.as_int,
        "hex": resource_id.bytes.hex(),
        "parent": str(parent) if parent is not None else None,
    }


@click.command("parse")
@click.argument("identifier")
@click.option("--json", "as_json", is_flag=True, help="Print details as JSON.")
def parse(identifier, as_json):
    """Validates IDENTIFIER and prints what it contains.

    Exits with status 3 on a checksum mismatch (most likely a typo) and 1 for
    any other malformed input.
    """
    try:
        resource_id = ResourceId.parse(identifier)
    except ChecksumMismatchError as e:
        raise ChecksumMismatchException(str(e))
    except FormatError as e:
        raise click.ClickException(str(e))

    details = describe(resource_id)
    if as_json:
        click.echo(json.dumps(details, indent=2))
        return

    for key, value in details.items():
        click.echo(f"{key}: {'-' if value is None else value}")
