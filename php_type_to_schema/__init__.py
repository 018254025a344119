"""PHP Type to OpenAPI Schema

A Python package resolving PHP native and phpdoc type expressions into
OpenAPI 3.0 Schema Objects, with enum merging, nullability hoisting and
oneOf/anyOf/allOf selection for unions and intersections.
"""

__version__ = "1.0.1"

from .config import ResolverConfig
from .diagnostics import Diagnostic, Diagnostics, Severity, TypeResolutionError
from .resolver import ResolvedType, TypeResolver, resolve
from .serializer import SchemaSerializer
from .type_ast import TypeNodeParseError, TypeNodeParser

__all__ = [
    "ResolvedType",
    "TypeResolver",
    "resolve",
    "SchemaSerializer",
    "ResolverConfig",
    "Diagnostic",
    "Diagnostics",
    "Severity",
    "TypeResolutionError",
    "TypeNodeParser",
    "TypeNodeParseError",
]
