"""
Identifier resolution.

Maps primitive and pseudo type names of PHP and phpdoc to base schema
descriptors, and any other name to a $ref against the known definitions.
"""

from __future__ import annotations

from collections.abc import Collection
from typing import Any

from ..config import ResolverConfig
from ..diagnostics import Diagnostics
from ..utils import clean_schema_name
from .resolved_type import ResolvedType

BARE_ARRAY_MESSAGE = (
    "Instead of 'array' use:\n"
    "'new stdClass()' for empty objects\n"
    "'array<string, mixed>' for non-empty objects\n"
    "'array<empty>' for empty lists\n"
    "'array<YourTypeHere>' for lists"
)

_INT64 = {"type": "integer", "format": "int64"}

# Type name -> ResolvedType keyword arguments
IDENTIFIER_TYPES: dict[str, dict[str, Any]] = {
    "string": {"type": "string"},
    "non-falsy-string": {"type": "string"},
    "numeric-string": {"type": "string"},
    "non-empty-string": {"type": "string", "min_length": 1},
    "int": _INT64,
    "integer": _INT64,
    "non-negative-int": {**_INT64, "minimum": 0},
    "positive-int": {**_INT64, "minimum": 1},
    "negative-int": {**_INT64, "maximum": -1},
    "non-positive-int": {**_INT64, "maximum": 0},
    "bool": {"type": "boolean"},
    "boolean": {"type": "boolean"},
    "true": {"type": "boolean", "enum": (True,)},
    "false": {"type": "boolean", "enum": (False,)},
    "numeric": {"type": "number"},
    # Both float and double are always stored with double precision
    "float": {"type": "number", "format": "double"},
    "double": {"type": "number", "format": "double"},
    "mixed": {"type": "object"},
    "empty": {"type": "object"},
    "array": {"type": "object"},
    "object": {"type": "object", "additional_properties": True},
    "stdClass": {"type": "object", "additional_properties": True},
    "null": {"nullable": True},
}


def resolve_identifier(
    context: str,
    definitions: Collection[str],
    name: str,
    diagnostics: Diagnostics,
    config: ResolverConfig,
) -> ResolvedType:
    """
    Resolve a bare type name.

    Args:
        context: Location of the type (for diagnostics)
        definitions: Names of the schemas known to the target document
        name: The identifier, optionally with a leading backslash
        diagnostics: Diagnostics sink
        config: Resolver configuration

    Returns:
        The resolved type
    """
    if name == "array":
        diagnostics.error(context, BARE_ARRAY_MESSAGE)
    name = name.removeprefix("\\")

    if name in IDENTIFIER_TYPES:
        return ResolvedType(context=context, **IDENTIFIER_TYPES[name])

    if name in definitions:
        return ResolvedType(
            context=context,
            ref=config.ref_prefix + clean_schema_name(name, config.schema_name_prefix),
        )

    diagnostics.panic(context, f"Unable to resolve OpenAPI type for identifier '{name}'")
