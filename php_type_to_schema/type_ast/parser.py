"""
Loader building type expression nodes from JSON documents.

The upstream PHP parser is not part of this package; callers hand over its
output either as node objects directly or encoded as JSON-compatible
dictionaries, which this module turns into a node tree.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from .nodes import (
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


class TypeNodeParseError(Exception):
    """Raised when a type document does not describe a valid node."""

    def __init__(self, path: str, message: str):
        super().__init__(f"{path}: {message}")
        self.path = path
        self.message = message


class TypeNodeParser:
    """Parses JSON-encoded type expressions into a node tree.

    A node is either a string (shorthand for an identifier) or a dictionary
    with a ``kind`` key:

    - ``{"kind": "identifier", "name": "int"}``
    - ``{"kind": "name", "parts": ["OCA", "App", "Foo"]}``
    - ``{"kind": "nullable", "type": ...}``
    - ``{"kind": "union", "types": [...]}`` / ``{"kind": "intersection", ...}``
    - ``{"kind": "array", "type": ...}``
    - ``{"kind": "generic", "name": "array", "args": [...]}``
    - ``{"kind": "shape", "items": [{"key": "id", "type": ..., "optional": false}]}``
    - ``{"kind": "const", "value": "foo"}``
    - ``{"kind": "param", "type": ..., "description": "..."}``
    """

    def parse(self, data: Any, path: str = "$") -> TypeNode:
        """
        Parse a JSON-encoded type expression.

        Args:
            data: The decoded JSON value
            path: Location of ``data`` in the document (for error messages)

        Returns:
            The corresponding TypeNode
        """
        if isinstance(data, str):
            return IdentifierNode(name=data)
        if not isinstance(data, dict):
            raise TypeNodeParseError(path, f"expected an object or a string, got {type(data).__name__}")

        kind = self._require(data, "kind", path)
        handler = self._handlers().get(kind) if isinstance(kind, str) else None
        if handler is None:
            raise TypeNodeParseError(path, f"unknown node kind '{kind}'")
        return handler(data, path)

    def _handlers(self) -> dict[str, Callable[[dict[str, Any], str], TypeNode]]:
        return {
            "identifier": self._parse_identifier,
            "name": self._parse_name,
            "nullable": self._parse_nullable,
            "union": self._parse_union,
            "intersection": self._parse_intersection,
            "array": self._parse_array,
            "generic": self._parse_generic,
            "shape": self._parse_shape,
            "const": self._parse_const,
            "param": self._parse_param,
        }

    def _require(self, data: dict[str, Any], key: str, path: str) -> Any:
        if key not in data:
            raise TypeNodeParseError(path, f"missing required key '{key}'")
        return data[key]

    def _require_string(self, data: dict[str, Any], key: str, path: str) -> str:
        value = self._require(data, key, path)
        if not isinstance(value, str):
            raise TypeNodeParseError(f"{path}.{key}", "expected a string")
        return value

    def _optional_string(self, data: dict[str, Any], key: str, path: str) -> str:
        value = data.get(key, "")
        if not isinstance(value, str):
            raise TypeNodeParseError(f"{path}.{key}", "expected a string")
        return value

    def _parse_node_list(self, data: dict[str, Any], key: str, path: str) -> tuple[TypeNode, ...]:
        values = self._require(data, key, path)
        if not isinstance(values, list):
            raise TypeNodeParseError(f"{path}.{key}", "expected a list")
        return tuple(self.parse(value, f"{path}.{key}[{i}]") for i, value in enumerate(values))

    def _parse_identifier(self, data: dict[str, Any], path: str) -> IdentifierNode:
        return IdentifierNode(name=self._require_string(data, "name", path))

    def _parse_name(self, data: dict[str, Any], path: str) -> QualifiedNameNode:
        parts = self._require(data, "parts", path)
        if isinstance(parts, str):
            parts = [part for part in parts.split("\\") if part]
        elif not isinstance(parts, list) or not all(isinstance(part, str) for part in parts):
            raise TypeNodeParseError(f"{path}.parts", "expected a string or a list of strings")
        return QualifiedNameNode(parts=tuple(parts))

    def _parse_nullable(self, data: dict[str, Any], path: str) -> NullableNode:
        return NullableNode(type=self.parse(self._require(data, "type", path), f"{path}.type"))

    def _parse_union(self, data: dict[str, Any], path: str) -> UnionNode:
        return UnionNode(types=self._parse_node_list(data, "types", path))

    def _parse_intersection(self, data: dict[str, Any], path: str) -> IntersectionNode:
        return IntersectionNode(types=self._parse_node_list(data, "types", path))

    def _parse_array(self, data: dict[str, Any], path: str) -> ArrayOfNode:
        return ArrayOfNode(type=self.parse(self._require(data, "type", path), f"{path}.type"))

    def _parse_generic(self, data: dict[str, Any], path: str) -> GenericNode:
        return GenericNode(
            name=self._require_string(data, "name", path),
            args=self._parse_node_list(data, "args", path),
        )

    def _parse_shape(self, data: dict[str, Any], path: str) -> ArrayShapeNode:
        items = self._require(data, "items", path)
        if not isinstance(items, list):
            raise TypeNodeParseError(f"{path}.items", "expected a list")

        shape_items = []
        for i, item in enumerate(items):
            item_path = f"{path}.items[{i}]"
            if not isinstance(item, dict):
                raise TypeNodeParseError(item_path, "expected an object")
            shape_items.append(
                ArrayShapeItem(
                    key=str(self._require(item, "key", item_path)),
                    type=self.parse(self._require(item, "type", item_path), f"{item_path}.type"),
                    optional=bool(item.get("optional", False)),
                )
            )
        return ArrayShapeNode(items=tuple(shape_items))

    def _parse_const(self, data: dict[str, Any], path: str) -> ConstNode:
        return ConstNode(value=self._require(data, "value", path))

    def _parse_param(self, data: dict[str, Any], path: str) -> ParamTagNode:
        return ParamTagNode(
            type=self.parse(self._require(data, "type", path), f"{path}.type"),
            description=self._optional_string(data, "description", path),
        )
