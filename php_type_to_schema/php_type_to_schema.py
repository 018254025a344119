import json
import logging
import sys

import click

from .config import ResolverConfig
from .diagnostics import Diagnostics, TypeResolutionError
from .resolver import TypeResolver
from .serializer import SchemaSerializer
from .type_ast import TypeNodeParseError, TypeNodeParser


def convert_document(document: dict, config: ResolverConfig, diagnostics: Diagnostics) -> dict:
    """Resolve and serialize every entry of a types document."""
    parser = TypeNodeParser()
    resolver = TypeResolver(document.get("definitions", []), diagnostics, config)
    serializer = SchemaSerializer()

    schemas = {}
    for name, entry in document.get("types", {}).items():
        if "node" not in entry:
            raise TypeNodeParseError(f"$.types.{name}", "missing required key 'node'")
        node = parser.parse(entry["node"], f"$.types.{name}.node")
        resolved = resolver.resolve(name, node)
        if "default" in entry:
            resolved = resolved.with_default(entry["default"])
        schemas[name] = serializer.serialize(resolved, entry.get("parameter", False))
    return schemas


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat discouraged types (bare 'array', 'mixed' in unions) as fatal errors",
)
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default="-", type=click.Path(allow_dash=True))
def php_type_to_schema(config, strict, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING, format="%(levelname)s %(message)s")

    with open(path) as f:
        document = json.load(f)

    if config is not None:
        with open(config) as f:
            config = ResolverConfig.from_dict(json.load(f))
    else:
        config = ResolverConfig()

    # CLI flag overrides the config file
    if strict:
        config.errors_are_fatal = True

    diagnostics = Diagnostics(errors_are_fatal=config.errors_are_fatal)
    try:
        schemas = convert_document(document, config, diagnostics)
    except (TypeResolutionError, TypeNodeParseError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    out = json.dumps(schemas, indent=4)
    if output == "-":
        click.echo(out)
    else:
        with open(output, "w") as f:
            f.write(out + "\n")
