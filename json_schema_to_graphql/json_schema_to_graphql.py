import json
import logging
import sys
from pathlib import Path

import click

from .cli_utils import reconstruct_command_line
from .pipeline import (
    AtomicWriter,
    ConverterConfig,
    MetaSchemaMode,
    OutputMode,
    SchemaConversionError,
    SdlWriteError,
    convert,
    to_sdl,
)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--output", "-o", default=None, type=click.Path(resolve_path=True), help="Write SDL here instead of stdout")
@click.option("--force", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--strict", is_flag=True, default=False, help="Fail on documents that are not valid JSON Schema")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("paths", nargs=-1, required=True, type=click.Path(exists=True, resolve_path=True))
def json_schema_to_graphql(config, output, force, strict, verbose, paths):
    """Convert JSON Schema files (in dependency order) to GraphQL SDL."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            config = ConverterConfig.from_dict(json.load(f))
    else:
        config = ConverterConfig()

    # CLI flags override the config file
    if strict:
        config.meta_schema_validation = MetaSchemaMode.ERROR
    if force:
        config.output_mode = OutputMode.FORCE

    schemas = []
    for path in paths:
        with open(path) as f:
            schemas.append(json.load(f))

    try:
        schema = convert(schemas, config=config)
    except SchemaConversionError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    comment = None
    if config.add_generation_comment:
        comment = f"Generated by {reconstruct_command_line(json_schema_to_graphql)}"
    sdl = to_sdl(schema, comment)

    if output is None:
        click.echo(sdl, nl=False)
    else:
        try:
            AtomicWriter().write(Path(output), sdl, config.output_mode)
        except (FileExistsError, SdlWriteError) as e:
            click.echo(f"Error: {e}", err=True)
            sys.exit(1)
