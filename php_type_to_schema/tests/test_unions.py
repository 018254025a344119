from unittest import TestCase

from php_type_to_schema.diagnostics import Diagnostics, TypeResolutionError
from php_type_to_schema.resolver import ResolvedType, TypeResolver, deduplicate, merge_enums
from php_type_to_schema.type_ast import (
    ArrayShapeItem,
    ArrayShapeNode,
    ConstNode,
    IdentifierNode,
    IntersectionNode,
    NullableNode,
    UnionNode,
)


def ident(name):
    return IdentifierNode(name=name)


class TestUnions(TestCase):
    """Test union and intersection resolution"""

    def setUp(self):
        self.resolver = TypeResolver({"CoreUser", "CoreGroup"})

    def test_duplicates_are_removed(self):
        node = UnionNode(types=(ident("int"), ident("integer"), ident("null")))
        resolved = self.resolver.resolve("ctx", node)
        self.assertEqual(resolved, ResolvedType(type="integer", format="int64", nullable=True))

    def test_structural_duplicates_are_removed(self):
        shape = ArrayShapeNode(items=(ArrayShapeItem(key="id", type=ident("int")),))
        other = ArrayShapeNode(items=(ArrayShapeItem(key="id", type=ident("integer")),))
        resolved = self.resolver.resolve("ctx", UnionNode(types=(shape, other)))
        self.assertIsNone(resolved.any_of)
        self.assertEqual(resolved.type, "object")

    def test_mixed_member_reports_error(self):
        resolved = self.resolver.resolve("ctx", UnionNode(types=(ident("mixed"), ident("string"))))
        self.assertEqual(len(self.resolver.diagnostics.errors), 1)
        self.assertIn("should not contain 'mixed'", self.resolver.diagnostics.errors[0].message)
        self.assertEqual(resolved.one_of, (ResolvedType(type="object"), ResolvedType(type="string")))

    def test_mixed_intersection_member_reports_error(self):
        resolved = self.resolver.resolve("ctx", IntersectionNode(types=(ident("CoreUser"), ident("mixed"))))
        self.assertEqual(len(self.resolver.diagnostics.errors), 1)
        self.assertIn("should not contain 'mixed'", self.resolver.diagnostics.errors[0].message)
        self.assertEqual(
            resolved.all_of,
            (ResolvedType(ref="#/components/schemas/CoreUser"), ResolvedType(type="object")),
        )

    def test_mixed_member_fatal_in_strict_mode(self):
        resolver = TypeResolver(set(), Diagnostics(errors_are_fatal=True))
        with self.assertRaises(TypeResolutionError):
            resolver.resolve("ctx", UnionNode(types=(ident("mixed"), ident("string"))))

    def test_nullable_member_is_hoisted(self):
        node = UnionNode(types=(NullableNode(type=ident("CoreUser")), ident("string")))
        resolved = self.resolver.resolve("ctx", node)
        self.assertTrue(resolved.nullable)
        self.assertFalse(any(member.nullable for member in resolved.any_of))

    def test_only_null_members(self):
        resolved = self.resolver.resolve("ctx", UnionNode(types=(ident("null"), ident("null"))))
        self.assertEqual(resolved, ResolvedType(nullable=True))

    def test_empty_union_is_fatal(self):
        with self.assertRaises(TypeResolutionError):
            self.resolver.resolve("ctx", UnionNode(types=()))

    def test_single_intersection_member(self):
        resolved = self.resolver.resolve("ctx", IntersectionNode(types=(ident("CoreUser"), ident("null"))))
        self.assertEqual(resolved, ResolvedType(ref="#/components/schemas/CoreUser", nullable=True))

    def test_intersection_of_distinct_types_uses_all_of(self):
        resolved = self.resolver.resolve("ctx", IntersectionNode(types=(ident("string"), ident("int"))))
        self.assertIsNone(resolved.one_of)
        self.assertEqual(len(resolved.all_of), 2)

    def test_string_and_integer_literals_mixed(self):
        node = UnionNode(types=(ConstNode(value="a"), ConstNode(value=1), ConstNode(value="b")))
        resolved = self.resolver.resolve("ctx", node)
        # Merged enum groups only carry type and values
        self.assertEqual(
            resolved.one_of,
            (ResolvedType(type="string", enum=("a", "b")), ResolvedType(type="integer", enum=(1,))),
        )

    def test_empty_literal_in_mixed_union(self):
        node = UnionNode(types=(ConstNode(value=""), ident("null")))
        self.assertEqual(self.resolver.resolve("ctx", node), ResolvedType(type="string", nullable=True))


class TestEnumMerge(TestCase):
    """Test merging of enum members"""

    def test_groups_by_type(self):
        types = [
            ResolvedType(type="string", enum=("a",)),
            ResolvedType(type="boolean", enum=(True,)),
            ResolvedType(type="string", enum=("b",)),
        ]
        self.assertEqual(
            merge_enums("ctx", types),
            [ResolvedType(type="string", enum=("a", "b")), ResolvedType(type="boolean", enum=(True,))],
        )

    def test_non_enum_member_cancels_group(self):
        types = [
            ResolvedType(type="string", enum=("a",)),
            ResolvedType(type="string", min_length=1),
            ResolvedType(type="integer", format="int64", enum=(1,)),
        ]
        self.assertEqual(
            merge_enums("ctx", types),
            [ResolvedType(type="string", min_length=1), ResolvedType(type="integer", enum=(1,))],
        )

    def test_deduplicate_ignores_context(self):
        types = [ResolvedType(context="a", type="string"), ResolvedType(context="b", type="string")]
        self.assertEqual(len(deduplicate(types)), 1)
