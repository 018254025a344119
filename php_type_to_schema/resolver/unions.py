"""
Union and intersection resolution.

Decides how a list of already resolved member types is represented: as a
single type, as an enum, or with one of the oneOf/anyOf/allOf combinators.
"""

from __future__ import annotations

from collections.abc import Sequence

from ..type_ast.nodes import ConstNode, TypeNode
from .resolved_type import ResolvedType


def _is_string_literal(node: TypeNode) -> bool:
    return isinstance(node, ConstNode) and isinstance(node.value, str)


def _is_integer_literal(node: TypeNode) -> bool:
    return isinstance(node, ConstNode) and isinstance(node.value, int) and not isinstance(node.value, bool)


def resolve_literal_union(context: str, types: Sequence[TypeNode]) -> ResolvedType | None:
    """
    Collapse a union made only of string literals or only of integer literals.

    Args:
        context: Location of the union (for diagnostics)
        types: The union members

    Returns:
        A string or integer enum, or None if the union is not a literal union
    """
    if not types:
        return None

    if all(_is_string_literal(t) for t in types):
        values = tuple(t.value for t in types)
        if "" in values:
            # Not a valid enum
            return ResolvedType(context=context, type="string")
        return ResolvedType(context=context, type="string", enum=values)

    if all(_is_integer_literal(t) for t in types):
        return ResolvedType(
            context=context,
            type="integer",
            format="int64",
            enum=tuple(t.value for t in types),
        )

    return None


def deduplicate(types: Sequence[ResolvedType]) -> list[ResolvedType]:
    """Drop structurally equal members, keeping the first occurrence."""
    unique: list[ResolvedType] = []
    for resolved in types:
        if resolved not in unique:
            unique.append(resolved)
    return unique


def merge_enums(context: str, types: Sequence[ResolvedType]) -> list[ResolvedType]:
    """
    Merge the enum members sharing a base type into a single enum.

    A member without enum sharing the base type of an enum group drops that
    group entirely: the type is not restricted to the literals.

    Args:
        context: Location of the union (for diagnostics)
        types: Deduplicated members

    Returns:
        The members without enum, followed by one enum per remaining base type
    """
    enums: dict[str | None, list] = {}
    non_enums: list[ResolvedType] = []

    for resolved in types:
        if resolved.enum is not None:
            enums.setdefault(resolved.type, []).extend(resolved.enum)
        else:
            non_enums.append(resolved)

    for resolved in non_enums:
        enums.pop(resolved.type, None)

    return non_enums + [
        ResolvedType(context=context, type=type_name, enum=tuple(values)) for type_name, values in enums.items()
    ]


def openapi_type_name(resolved: ResolvedType) -> str | None:
    """Type name used to tell union members apart; integers count as numbers."""
    if resolved.type == "integer":
        return "number"
    return resolved.type


def combine(
    context: str,
    types: Sequence[ResolvedType],
    nullable: bool,
    is_intersection: bool,
) -> ResolvedType:
    """
    Build the resolved type of a union or intersection.

    Args:
        context: Location of the union (for diagnostics)
        types: Resolved members, without the null member
        nullable: Whether a null member was present
        is_intersection: Whether the members are intersected

    Returns:
        The single remaining member, or an allOf, anyOf or oneOf node
    """
    members = merge_enums(context, deduplicate(types))

    if not members:
        return ResolvedType(context=context, nullable=nullable)

    if len(members) == 1:
        return members[0].with_nullable(nullable)

    if is_intersection:
        return ResolvedType(context=context, nullable=nullable, all_of=tuple(members))

    type_names = [openapi_type_name(member) for member in members]
    if None in type_names or len(set(type_names)) != len(type_names):
        return ResolvedType(context=context, nullable=nullable, any_of=tuple(members))

    return ResolvedType(context=context, nullable=nullable, one_of=tuple(members))
