from unittest import TestCase

from json_schema_to_graphql.pipeline.schema_ast import (
    ArrayNode,
    EnumNode,
    ObjectNode,
    PrimitiveNode,
    RefNode,
    SchemaParser,
    UnionNode,
    UnrecognizedNode,
)


class TestSchemaParser(TestCase):
    def setUp(self):
        self.parser = SchemaParser()

    def test_object(self):
        node = self.parser.parse(
            {
                "type": "object",
                "title": "Person",
                "properties": {"name": {"type": "string"}, "age": {"type": "integer"}},
                "required": ["name"],
            }
        )
        self.assertIsInstance(node, ObjectNode)
        self.assertEqual(node.title, "Person")
        self.assertEqual([p.name for p in node.properties], ["name", "age"])
        self.assertEqual([p.is_required for p in node.properties], [True, False])
        self.assertIsInstance(node.properties[0].type_node, PrimitiveNode)
        self.assertEqual(node.properties[0].type_node.source_path, "#/properties/name")

    def test_object_without_properties(self):
        node = self.parser.parse({"type": "object"})
        self.assertIsInstance(node, ObjectNode)
        self.assertEqual(node.properties, [])

    def test_array(self):
        node = self.parser.parse({"type": "array", "items": {"$ref": "Person"}})
        self.assertIsInstance(node, ArrayNode)
        self.assertIsInstance(node.items, RefNode)
        self.assertEqual(node.items.ref, "Person")

    def test_array_without_items(self):
        node = self.parser.parse({"type": "array"})
        self.assertIsInstance(node, ArrayNode)
        self.assertIsNone(node.items)

    def test_enum_keeps_declared_type(self):
        node = self.parser.parse({"type": "integer", "enum": [1, 2]})
        self.assertIsInstance(node, EnumNode)
        self.assertEqual(node.base_type, "integer")
        self.assertEqual(node.values, [1, 2])

    def test_union_cases_keyed_by_position_and_unwrapped(self):
        node = self.parser.parse(
            {
                "oneOf": [
                    {"type": "object", "properties": {"x": {"type": "string"}}},
                    {"if": {"properties": {"kind": {"const": "y"}}}, "then": {"type": "object"}},
                ]
            }
        )
        self.assertIsInstance(node, UnionNode)
        self.assertEqual(list(node.cases), ["0", "1"])
        self.assertIsInstance(node.cases["1"], ObjectNode)
        self.assertEqual(node.cases["1"].source_path, "#/oneOf/1/then")

    def test_precedence_oneof_before_object(self):
        node = self.parser.parse({"type": "object", "oneOf": [{"type": "object"}]})
        self.assertIsInstance(node, UnionNode)

    def test_precedence_object_before_stray_enum(self):
        node = self.parser.parse({"type": "object", "enum": ["a"], "properties": {}})
        self.assertIsInstance(node, ObjectNode)

    def test_precedence_enum_before_ref(self):
        node = self.parser.parse({"type": "string", "enum": ["a"], "$ref": "Other"})
        self.assertIsInstance(node, EnumNode)

    def test_primitives(self):
        for type_name in ["string", "integer", "number", "boolean"]:
            node = self.parser.parse({"type": type_name})
            self.assertIsInstance(node, PrimitiveNode)
            self.assertEqual(node.type_name, type_name)

    def test_unrecognized(self):
        self.assertIsInstance(self.parser.parse({"type": "null"}), UnrecognizedNode)
        self.assertIsInstance(self.parser.parse({}), UnrecognizedNode)
        self.assertIsInstance(self.parser.parse(True), UnrecognizedNode)
