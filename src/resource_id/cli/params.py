import click

from resource_id.exceptions import FormatError
from resource_id.identifier import ResourceId


class ResourceIdParamType(click.ParamType):
    """Click parameter that parses and validates a full resource id."""

    name = "resource_id"

    def convert(self, value, param, ctx):
        if isinstance(value, ResourceId):
            return value
        try:
            return ResourceId.parse(value)
        except FormatError as e:
            self.fail(str(e), param, ctx)


RESOURCE_ID = ResourceIdParamType()


class ChecksumMismatchException(click.ClickException):
    """Exit status 3 lets scripts tell a typo apart from malformed input."""

    exit_code = 3


parent_option = click.option(
    "--parent",
    type=RESOURCE_ID,
    default=None,
    help="Full id of the parent resource, e.g. books/BKB3XYT465KZ69.",
)
