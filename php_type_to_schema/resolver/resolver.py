"""
Type resolver that turns type expression nodes into OpenAPI schema trees.

Dispatches on the node kind and resolves recursively: identifiers through the
identifier table or the known definitions, containers and array shapes into
array/object schemas, unions and intersections through the combinator rules.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence

from ..config import ResolverConfig
from ..diagnostics import Diagnostics
from ..type_ast.nodes import (
    ArrayOfNode,
    ArrayShapeItem,
    ArrayShapeNode,
    ConstNode,
    GenericNode,
    IdentifierNode,
    IntersectionNode,
    NullableNode,
    ParamTagNode,
    QualifiedNameNode,
    TypeNode,
    UnionNode,
)
from .identifiers import resolve_identifier
from .resolved_type import ResolvedType
from .unions import combine, resolve_literal_union

UNSUPPORTED_GENERICS = ("value-of", "key-of")


def _is_identifier(node: TypeNode, name: str) -> bool:
    return isinstance(node, IdentifierNode) and node.name.removeprefix("\\") == name


def _integer_bound(node: TypeNode) -> int | None:
    """Bound of an `int<min, max>` range, None unless given as an integer literal."""
    if isinstance(node, ConstNode) and isinstance(node.value, int) and not isinstance(node.value, bool):
        return node.value
    return None


class TypeResolver:
    """Resolves type expression nodes against a set of known definitions."""

    def __init__(
        self,
        definitions: Collection[str],
        diagnostics: Diagnostics | None = None,
        config: ResolverConfig | None = None,
    ):
        """
        Initialize the resolver.

        Args:
            definitions: Names of the schemas known to the target document
            diagnostics: Diagnostics sink, a fresh one if omitted
            config: Resolver configuration
        """
        self.definitions = definitions
        self.config = config or ResolverConfig()
        self.diagnostics = diagnostics or Diagnostics(errors_are_fatal=self.config.errors_are_fatal)

    def resolve(self, context: str, node: TypeNode) -> ResolvedType:
        """
        Resolve a type expression.

        Args:
            context: Location of the type (for diagnostics)
            node: The type expression

        Returns:
            The resolved schema tree

        Raises:
            TypeResolutionError: If the type cannot be represented
        """
        match node:
            case ParamTagNode(type=inner, description=description):
                return self.resolve(context, inner).with_description(description)

            case IdentifierNode(name=name):
                return self._resolve_identifier(context, name)

            case QualifiedNameNode():
                return self._resolve_identifier(context, node.last)

            case ArrayOfNode(type=inner):
                return ResolvedType(
                    context=context,
                    type="array",
                    items=self.resolve(f"{context}: items", inner),
                )

            case GenericNode(name="array" | "list", args=(argument,)):
                if _is_identifier(argument, "empty"):
                    return ResolvedType(context=context, type="array", max_items=0)
                return ResolvedType(context=context, type="array", items=self.resolve(context, argument))

            case GenericNode(name=name) if name in UNSUPPORTED_GENERICS:
                self.diagnostics.panic(context, f"'{name}' is not supported")

            case ArrayShapeNode(items=items):
                return self._resolve_array_shape(context, items)

            case GenericNode(name="array", args=(IdentifierNode(name=key_type), value_type)):
                if key_type != "string":
                    self.diagnostics.panic(
                        context,
                        f"JSON objects can only be indexed by 'string' but got '{key_type}'",
                    )
                return ResolvedType(
                    context=context,
                    type="object",
                    additional_properties=self.resolve(f"{context}: additionalProperties", value_type),
                )

            case GenericNode(name="int", args=(lower, upper)):
                return ResolvedType(
                    context=context,
                    type="integer",
                    format="int64",
                    minimum=_integer_bound(lower),
                    maximum=_integer_bound(upper),
                )

            case NullableNode(type=inner):
                return self.resolve(context, inner).with_nullable()

            case UnionNode(types=types):
                return self._resolve_combination(context, types, is_intersection=False)

            case IntersectionNode(types=types):
                return self._resolve_combination(context, types, is_intersection=True)

            case ConstNode():
                return self._resolve_const(context, node)

            case _:
                self.diagnostics.panic(
                    context,
                    f"Unable to resolve OpenAPI type:\n{node!r}\n"
                    "Please open an issue with the error message and a link to your source code.",
                )

    def _resolve_identifier(self, context: str, name: str) -> ResolvedType:
        return resolve_identifier(context, self.definitions, name, self.diagnostics, self.config)

    def _resolve_array_shape(self, context: str, items: Sequence[ArrayShapeItem]) -> ResolvedType:
        properties: dict[str, ResolvedType] = {}
        required: list[str] = []
        for item in items:
            properties[item.key] = self.resolve(context, item.type)
            if not item.optional:
                required.append(item.key)

        return ResolvedType(
            context=context,
            type="object",
            properties=properties,
            required=tuple(required) if required else None,
        )

    def _resolve_combination(self, context: str, types: Sequence[TypeNode], is_intersection: bool) -> ResolvedType:
        if not types:
            kind = "intersection" if is_intersection else "union"
            self.diagnostics.panic(context, f"Empty {kind} type")

        if not is_intersection:
            literal_enum = resolve_literal_union(context, types)
            if literal_enum is not None:
                return literal_enum

        nullable = False
        members: list[ResolvedType] = []
        for type_node in types:
            if _is_identifier(type_node, "null"):
                nullable = True
                continue
            if _is_identifier(type_node, "mixed"):
                self.diagnostics.error(context, "Unions and intersections should not contain 'mixed'")

            member = self.resolve(context, type_node)
            if member.nullable:
                nullable = True
                member = member.with_nullable(False)
                if member == ResolvedType():
                    continue
            members.append(member)

        return combine(context, members, nullable, is_intersection)

    def _resolve_const(self, context: str, node: ConstNode) -> ResolvedType:
        value = node.value
        if isinstance(value, str):
            if value == "":
                # Not a valid enum
                return ResolvedType(context=context, type="string")
            return ResolvedType(context=context, type="string", enum=(value,))

        if isinstance(value, int) and not isinstance(value, bool):
            return ResolvedType(context=context, type="integer", format="int64", enum=(value,))

        self.diagnostics.panic(context, "Constants are not supported")


def resolve(
    context: str,
    definitions: Collection[str],
    node: TypeNode,
    diagnostics: Diagnostics | None = None,
    config: ResolverConfig | None = None,
) -> ResolvedType:
    """Resolve a single type expression, see TypeResolver.resolve."""
    return TypeResolver(definitions, diagnostics, config).resolve(context, node)
