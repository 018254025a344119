"""
Type expression node definitions.

These nodes represent a type expression as produced by the upstream PHP
parser (native declarations and phpdoc annotations) before any resolution
to OpenAPI schema constructs takes place.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class TypeNode:
    """Base class for all type expression nodes."""


@dataclass(frozen=True)
class IdentifierNode(TypeNode):
    """A bare type identifier (`int`, `non-empty-string`, `NotificationsItem`)."""

    name: str = ""


@dataclass(frozen=True)
class QualifiedNameNode(TypeNode):
    """A native PHP class name, possibly namespaced (`\\OCA\\App\\Foo`)."""

    parts: tuple[str, ...] = ()

    @property
    def last(self) -> str:
        return self.parts[-1] if self.parts else ""


@dataclass(frozen=True)
class NullableNode(TypeNode):
    """`?T`"""

    type: TypeNode | None = None


@dataclass(frozen=True)
class UnionNode(TypeNode):
    """`A|B|...`"""

    types: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class IntersectionNode(TypeNode):
    """`A&B&...`"""

    types: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class ArrayOfNode(TypeNode):
    """`T[]`"""

    type: TypeNode | None = None


@dataclass(frozen=True)
class GenericNode(TypeNode):
    """A generic container such as `list<T>`, `array<K, V>` or `int<0, max>`."""

    name: str = ""
    args: tuple[TypeNode, ...] = ()


@dataclass(frozen=True)
class ArrayShapeItem:
    """A single field of an array shape."""

    key: str = ""
    type: TypeNode | None = None
    optional: bool = False


@dataclass(frozen=True)
class ArrayShapeNode(TypeNode):
    """`array{id: int, name?: string}`"""

    items: tuple[ArrayShapeItem, ...] = ()


@dataclass(frozen=True)
class ConstNode(TypeNode):
    """A literal type (`'foo'`, `42`)."""

    value: str | int | float | bool | None = None


@dataclass(frozen=True)
class ParamTagNode(TypeNode):
    """A `@param` tag: the annotated type plus its free-text description."""

    type: TypeNode | None = None
    description: str = ""
