"""Command-line interface for formschema."""

import logging
import sys

import click

from .output.formatter import format_field_tree
from .schema.errors import SchemaLoadError, SchemaValidationError, UnsupportedKindError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.version_option(package_name="formschema")
@click.option(
    "--log-level",
    envvar="FORMSCHEMA_LOG_LEVEL",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    help="Logging level (defaults to FORMSCHEMA_LOG_LEVEL env var or WARNING)",
)
def main(log_level: str):
    """formschema: compile JSON-Schema-like definitions into form field trees."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command()
@click.argument("schema_file", type=click.Path(exists=True))
@click.option(
    "--model",
    "model_file",
    type=click.Path(exists=True),
    default=None,
    help="YAML or JSON file holding the current value",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def parse(schema_file: str, model_file: str | None, output_format: str):
    """Compile a schema file into a field tree and print it.

    SCHEMA_FILE is the path to a YAML or JSON schema.

    Exit codes:
      0 - Success
      2 - File, schema or unsupported kind error
    """
    from .compiler import compile_schema_file

    try:
        field = compile_schema_file(schema_file, model_file)
    except SchemaLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)
    except SchemaValidationError as e:
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)
    except UnsupportedKindError as e:
        click.echo(f"Unsupported schema: {e}", err=True)
        sys.exit(2)

    click.echo(format_field_tree(field, output_format))  # type: ignore
    sys.exit(0)


@main.command()
def kinds():
    """List the registered parser kinds."""
    from .parsers import registry

    for kind in registry.kinds():
        click.echo(f"{kind}: {registry.get(kind).__name__}")


if __name__ == "__main__":
    main()
