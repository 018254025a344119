import json
from pathlib import Path

import pytest

from php_type_to_schema.resolver import TypeResolver
from php_type_to_schema.serializer import SchemaSerializer
from php_type_to_schema.type_ast import TypeNodeParser


def load_test_data():
    """Load test cases from JSON file"""
    test_data_path = Path(__file__).parent / "test_data" / "resolution_cases.json"
    with open(test_data_path) as f:
        return json.load(f)


@pytest.mark.parametrize("test_case", load_test_data(), ids=lambda tc: tc["name"])
def test_resolution_case(test_case):
    """Resolve and serialize a type expression and compare with the expected schema"""
    node = TypeNodeParser().parse(test_case["node"])
    resolver = TypeResolver(test_case.get("definitions", []))

    resolved = resolver.resolve(test_case["name"], node)
    if "default" in test_case:
        resolved = resolved.with_default(test_case["default"])

    output = SchemaSerializer().serialize(resolved, test_case.get("parameter", False))
    assert output == test_case["expected"], f"Unexpected schema for {test_case['name']}:\n{output}"
    assert resolver.diagnostics.entries == []


if __name__ == "__main__":
    pytest.main([__file__])
