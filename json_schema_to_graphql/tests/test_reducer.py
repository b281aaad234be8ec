import logging

import pytest
from graphql import GraphQLList, GraphQLSchema, print_schema

from json_schema_to_graphql.pipeline import (
    ConverterConfig,
    DuplicateIdentifierError,
    MetaSchemaMode,
    MetaSchemaValidationError,
    MissingIdentifierError,
    SchemaData,
    TypeRegistry,
    UnresolvedReferenceError,
    reduce_schemas,
    schema_reducer,
)

PERSON = {
    "$id": "Person",
    "type": "object",
    "properties": {"name": {"type": "string"}},
    "required": ["name"],
}
POST = {
    "$id": "Post",
    "type": "object",
    "properties": {"author": {"$ref": "Person"}, "title": {"type": "string"}},
}
INVALID_META = {
    "$id": "Odd",
    "type": "object",
    "properties": {"a": {"type": "string"}},
    "minProperties": -1,
}


def reduce(*schemas, config=None):
    return reduce_schemas([SchemaData(schema) for schema in schemas], config)


class TestBatch:
    def test_independent_documents(self):
        docs = [{"$id": f"Thing{i}", "type": "object", "properties": {"n": {"type": "integer"}}} for i in range(4)]
        registry = reduce(*docs)
        assert len(registry) == 4
        assert list(registry) == ["Thing0", "Thing1", "Thing2", "Thing3"]

    def test_reference_to_earlier_document_is_identical(self):
        registry = reduce(PERSON, POST)
        assert registry.get("Post").fields["author"].type is registry.get("Person")

    def test_registry_is_passed_through(self):
        registry = TypeRegistry()
        returned = schema_reducer(registry, SchemaData(PERSON))
        assert returned is registry
        assert "Person" in registry

    def test_starting_registry(self):
        registry = reduce(PERSON)
        registry = reduce_schemas([SchemaData(POST)], registry=registry)
        assert len(registry) == 2

    def test_missing_id(self):
        with pytest.raises(MissingIdentifierError):
            reduce(PERSON, {"type": "object"})

    def test_duplicate_id_rejected(self):
        with pytest.raises(DuplicateIdentifierError):
            reduce(PERSON, PERSON)

    def test_duplicate_id_allowed(self, caplog):
        replacement = dict(PERSON, properties={"nickname": {"type": "string"}}, required=[])
        with caplog.at_level(logging.WARNING):
            registry = reduce(PERSON, replacement, config=ConverterConfig(allow_duplicate_ids=True))
        assert len(registry) == 1
        assert list(registry.get("Person").fields) == ["nickname"]
        assert "more than once" in caplog.text


class TestReferenceOrdering:
    def test_eager_forward_reference_fails(self):
        alias = {"$id": "Author", "$ref": "Person"}
        with pytest.raises(UnresolvedReferenceError):
            reduce(alias, PERSON)
        assert reduce(PERSON, alias).get("Author") is not None

    def test_forward_reference_in_array_items_fails(self):
        people = {"$id": "People", "type": "array", "items": {"$ref": "Person"}}
        with pytest.raises(UnresolvedReferenceError):
            reduce(people, PERSON)
        registry = reduce(PERSON, people)
        assert isinstance(registry.get("People"), GraphQLList)

    def test_never_present_reference_fails(self):
        with pytest.raises(UnresolvedReferenceError):
            reduce({"$id": "Post", "type": "object", "properties": {"author": {"$ref": "Ghost"}}})

    def test_cyclic_object_graph(self):
        parent = {"$id": "Parent", "type": "object", "properties": {"children": {"type": "array", "items": {"$ref": "Child"}}}}
        child = {"$id": "Child", "type": "object", "properties": {"parent": {"$ref": "Parent"}}}
        registry = reduce(parent, child)
        assert registry.get("Child").fields["parent"].type is registry.get("Parent")
        assert registry.get("Parent").fields["children"].type.of_type.of_type is registry.get("Child")

    def test_self_reference(self):
        node = {"$id": "Node", "type": "object", "properties": {"next": {"$ref": "Node"}}}
        registry = reduce(node)
        assert registry.get("Node").fields["next"].type is registry.get("Node")


class TestMetaSchema:
    def test_warn_by_default(self, caplog):
        with caplog.at_level(logging.WARNING):
            registry = reduce(INVALID_META)
        assert "Odd" in registry
        assert "not a valid JSON Schema" in caplog.text

    def test_off_mode_given_as_string(self, caplog):
        config = ConverterConfig(meta_schema_validation="off")
        with caplog.at_level(logging.WARNING):
            reduce(INVALID_META, config=config)
        assert caplog.text == ""

    def test_error_mode(self):
        config = ConverterConfig(meta_schema_validation=MetaSchemaMode.ERROR)
        with pytest.raises(MetaSchemaValidationError):
            reduce(INVALID_META, config=config)

    def test_off_mode(self, caplog):
        config = ConverterConfig(meta_schema_validation=MetaSchemaMode.OFF)
        with caplog.at_level(logging.WARNING):
            reduce(INVALID_META, config=config)
        assert caplog.text == ""

    def test_valid_schema_passes_error_mode(self):
        config = ConverterConfig(meta_schema_validation=MetaSchemaMode.ERROR)
        assert len(reduce(PERSON, POST, config=config)) == 2


def test_compiling_twice_gives_equal_output():
    def printed():
        registry = reduce(PERSON, POST)
        return print_schema(GraphQLSchema(types=registry.named_types()))

    assert printed() == printed()


def test_long_reference_chain_resolves_every_field_map():
    docs = [{"$id": "Link0", "type": "object", "properties": {"value": {"type": "integer"}}}]
    for i in range(1, 300):
        docs.append({"$id": f"Link{i}", "type": "object", "properties": {"prev": {"$ref": f"Link{i - 1}"}}})
    registry = reduce(*docs)
    assert registry.get("Link299").fields["prev"].type is registry.get("Link298")
