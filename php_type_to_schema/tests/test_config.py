from unittest import TestCase

from php_type_to_schema.config import DEFAULT_REF_PREFIX, ResolverConfig
from php_type_to_schema.utils import clean_doc_comment, clean_schema_name


class TestResolverConfig(TestCase):
    def test_defaults(self):
        config = ResolverConfig()
        self.assertEqual(config.ref_prefix, DEFAULT_REF_PREFIX)
        self.assertFalse(config.errors_are_fatal)

    def test_from_dict_ignores_unknown_keys(self):
        config = ResolverConfig.from_dict({"schema_name_prefix": "Files", "unknown": 1})
        self.assertEqual(config.schema_name_prefix, "Files")
        self.assertFalse(hasattr(config, "unknown"))

    def test_round_trip(self):
        config = ResolverConfig(schema_name_prefix="Files", errors_are_fatal=True)
        self.assertEqual(ResolverConfig.from_dict(config.to_dict()), config)


class TestUtils(TestCase):
    def test_clean_doc_comment(self):
        self.assertEqual(clean_doc_comment("\tA  long\n\n description  "), "A long description")

    def test_clean_schema_name(self):
        self.assertEqual(clean_schema_name("FilesNode", "Files"), "Node")
        self.assertEqual(clean_schema_name("Node", "Files"), "Node")
        self.assertEqual(clean_schema_name("Files", "Files"), "Files")
        self.assertEqual(clean_schema_name("FilesNode"), "FilesNode")
