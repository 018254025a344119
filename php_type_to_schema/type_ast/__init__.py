"""
Type AST module.

Contains the type expression node definitions and a loader building them
from JSON documents.
"""

from __future__ import annotations

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
from .parser import TypeNodeParseError, TypeNodeParser

__all__ = [
    "TypeNode",
    "IdentifierNode",
    "QualifiedNameNode",
    "NullableNode",
    "UnionNode",
    "IntersectionNode",
    "ArrayOfNode",
    "GenericNode",
    "ArrayShapeItem",
    "ArrayShapeNode",
    "ConstNode",
    "ParamTagNode",
    "TypeNodeParser",
    "TypeNodeParseError",
]
