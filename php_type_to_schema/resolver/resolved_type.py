"""
Resolved schema tree.

A ResolvedType is a node of the OpenAPI schema tree produced from a type
expression. Nodes are immutable once built; the helpers below return
modified copies.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any


@dataclass(frozen=True)
class ResolvedType:
    """A resolved OpenAPI schema node.

    Attributes:
        context: Location of the type in the source, used in diagnostics only
        ref: Pointer to a named schema (``#/components/schemas/<name>``)
        type: string, integer, number, boolean, object, array, or None (None + nullable is the null type)
        format: Refinement of ``type`` (``int64``, ``double``)
        nullable: OpenAPI 3.0 nullable flag
        has_default_value: Whether ``default_value`` is set
        default_value: Default value of a parameter or property
        items: Schema of the array elements
        properties: Ordered mapping of field name to schema
        required: Names of the mandatory fields
        additional_properties: True, or the schema of unlisted keys
        one_of / any_of / all_of: Combinator members
        enum: Allowed literal values, all of the same primitive type
        description: Free text from the doc-comment
    """

    context: str = field(default="", compare=False)
    ref: str | None = None
    type: str | None = None
    format: str | None = None
    nullable: bool = False
    has_default_value: bool = False
    default_value: Any = None
    items: ResolvedType | None = None
    properties: dict[str, ResolvedType] | None = None
    one_of: tuple[ResolvedType, ...] | None = None
    any_of: tuple[ResolvedType, ...] | None = None
    all_of: tuple[ResolvedType, ...] | None = None
    additional_properties: bool | ResolvedType | None = None
    required: tuple[str, ...] | None = None
    description: str | None = None
    min_length: int | None = None
    max_length: int | None = None
    minimum: int | None = None
    maximum: int | None = None
    min_items: int | None = None
    max_items: int | None = None
    enum: tuple[Any, ...] | None = None

    # properties is a dict, so nodes compare by value but cannot be hashed
    __hash__ = None

    def with_nullable(self, nullable: bool = True) -> ResolvedType:
        return replace(self, nullable=nullable)

    def with_description(self, description: str | None) -> ResolvedType:
        return replace(self, description=description)

    def with_default(self, value: Any) -> ResolvedType:
        """Return a copy carrying ``value`` as default."""
        return replace(self, has_default_value=True, default_value=value)

    def to_dict(self, is_parameter: bool = False) -> dict[str, Any]:
        """Serialize this node, see SchemaSerializer.serialize."""
        from ..serializer import SchemaSerializer

        return SchemaSerializer().serialize(self, is_parameter)
