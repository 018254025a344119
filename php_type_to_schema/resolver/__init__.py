"""
Resolver module.

Contains the resolved schema tree and the rules turning type expressions
into it.
"""

from __future__ import annotations

from .identifiers import IDENTIFIER_TYPES, resolve_identifier
from .resolved_type import ResolvedType
from .resolver import TypeResolver, resolve
from .unions import combine, deduplicate, merge_enums, resolve_literal_union

__all__ = [
    "ResolvedType",
    "IDENTIFIER_TYPES",
    "TypeResolver",
    "resolve",
    "resolve_identifier",
    "resolve_literal_union",
    "deduplicate",
    "merge_enums",
    "combine",
]
