"""
Schema serializer.

Converts a resolved type tree into the plain dictionaries of an OpenAPI
Schema Object, ready to be embedded into an OpenAPI document.
"""

from __future__ import annotations

from typing import Any

from .resolver.resolved_type import ResolvedType
from .utils import clean_doc_comment


class SchemaSerializer:
    """Serializes resolved types to OpenAPI Schema Objects."""

    def serialize(self, resolved: ResolvedType, is_parameter: bool = False) -> dict[str, Any]:
        """
        Serialize a resolved type.

        Args:
            resolved: The resolved type tree
            is_parameter: Whether the schema describes a request parameter;
                boolean parameters are sent as 0/1 and carry no description

        Returns:
            The Schema Object; an empty dict when the type has no constraints
        """
        if is_parameter and resolved.type == "boolean":
            resolved = self._boolean_parameter(resolved)

        values: dict[str, Any] = {}
        if resolved.ref is not None:
            values["$ref"] = resolved.ref
        if resolved.type is not None:
            values["type"] = resolved.type
        if resolved.format is not None:
            values["format"] = resolved.format
        if resolved.nullable:
            values["nullable"] = True
        if resolved.has_default_value and resolved.default_value is not None:
            if resolved.type == "object" and not resolved.default_value:
                values["default"] = {}
            else:
                values["default"] = resolved.default_value
        if resolved.enum is not None:
            values["enum"] = list(resolved.enum)
        if resolved.description and not is_parameter:
            values["description"] = clean_doc_comment(resolved.description)
        if resolved.items is not None:
            values["items"] = self.serialize(resolved.items)
        if resolved.min_length is not None:
            values["minLength"] = resolved.min_length
        if resolved.max_length is not None:
            values["maxLength"] = resolved.max_length
        if resolved.minimum is not None:
            values["minimum"] = resolved.minimum
        if resolved.maximum is not None:
            values["maximum"] = resolved.maximum
        if resolved.min_items is not None:
            values["minItems"] = resolved.min_items
        if resolved.max_items is not None:
            values["maxItems"] = resolved.max_items
        if resolved.required is not None:
            values["required"] = list(resolved.required)
        if resolved.properties:
            values["properties"] = {name: self.serialize(prop) for name, prop in resolved.properties.items()}
        if resolved.additional_properties is not None:
            if isinstance(resolved.additional_properties, ResolvedType):
                values["additionalProperties"] = self.serialize(resolved.additional_properties)
            else:
                values["additionalProperties"] = resolved.additional_properties
        if resolved.one_of is not None:
            values["oneOf"] = [self.serialize(member) for member in resolved.one_of]
        if resolved.any_of is not None:
            values["anyOf"] = [self.serialize(member) for member in resolved.any_of]
        if resolved.all_of is not None:
            values["allOf"] = [self.serialize(member) for member in resolved.all_of]

        return values

    def _boolean_parameter(self, resolved: ResolvedType) -> ResolvedType:
        """Rewrite a boolean parameter as an integer restricted to 0 and 1."""
        default_value = None
        if resolved.has_default_value:
            default_value = 1 if resolved.default_value is True else 0

        return ResolvedType(
            context=resolved.context,
            type="integer",
            nullable=resolved.nullable,
            has_default_value=resolved.has_default_value,
            default_value=default_value,
            description=resolved.description,
            enum=(0, 1),
        )
