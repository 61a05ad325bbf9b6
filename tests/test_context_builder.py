"""Tests for the context_builder module."""

from pathlib import Path

import pytest

from ts_codegen.config import GeneratorConfig
from ts_codegen.context_builder import build_context
from ts_codegen.document import Document
from ts_codegen.errors import MissingTagError, SchemaCollisionError
from ts_codegen.loader import parse_document

PETSTORE = Path(__file__).parent / "fixtures" / "petstore.json"


def _config(**options) -> GeneratorConfig:
    return GeneratorConfig.from_options("out", str(PETSTORE), **options)


def _single_op_doc(method: str, operation: dict, schemas: dict | None = None) -> Document:
    return parse_document({
        "components": {"schemas": schemas or {}},
        "paths": {"/thing": {method: operation}},
        "tags": [{"name": "Things", "description": ""}],
    })


class TestBuildContext:
    """Test the enumerator with the petstore fixture."""

    @pytest.fixture(autouse=True)
    def _build(self, petstore):
        self.document = petstore
        self.ctx = build_context(petstore, _config())
        self.by_id = {e.operation_id: e for e in self.ctx.endpoints}

    def test_endpoint_order(self):
        """Sorted by URL, then get/post/put/delete; patch is ignored."""
        assert [e.operation_id for e in self.ctx.endpoints] == [
            "login",
            "listPets",
            "createPet",
            "showPetById",
            "updatePet",
            "deletePet",
            "getInventory",
            "listUsers",
            "createUser",
        ]

    def test_first_tag_wins(self):
        assert self.by_id["login"].module == "Users"

    def test_get_query_schema_synthesized(self):
        """One required and one optional parameter: both strings, no | void."""
        endpoint = self.by_id["listPets"]
        assert endpoint.request_schema_name == "ListPetsQuery"
        assert endpoint.request_type == "ListPetsQuery"

        query = self.ctx.schemas["ListPetsQuery"]
        assert set(query.properties) == {"limit", "status"}
        assert all(p.type == "string" for p in query.properties.values())
        assert query.required == ["status"]
        assert query.properties["limit"].description == "How many items to return"

    def test_delete_uses_query_schema(self):
        endpoint = self.by_id["deletePet"]
        assert endpoint.request_type == "DeletePetQuery"
        assert "DeletePetQuery" in self.ctx.schemas

    def test_get_without_parameters_is_void(self):
        endpoint = self.by_id["listUsers"]
        assert endpoint.request_schema_name == "void"
        assert endpoint.request_type == "void"
        assert "ListUsersQuery" not in self.ctx.schemas

    def test_post_body_with_required_fields(self):
        endpoint = self.by_id["createPet"]
        assert endpoint.request_schema_name == "NewPet"
        assert endpoint.request_type == "NewPet"

    def test_put_body_with_empty_required_list(self):
        endpoint = self.by_id["updatePet"]
        assert endpoint.request_type == "PetPatch | void"

    def test_post_without_body_is_void(self):
        endpoint = self.by_id["login"]
        assert (endpoint.request_schema_name, endpoint.request_type) == ("void", "void")

    def test_response_types(self):
        assert self.by_id["listPets"].response_type == "Array<Pet>"
        assert self.by_id["createPet"].response_type == "ResultPet"
        assert self.by_id["listUsers"].response_type == "Array<Array<User>>"
        assert self.by_id["getInventory"].response_type == "any"

    def test_response_takes_first_non_null_media_type(self):
        assert self.by_id["login"].response_type == "string"

    def test_response_without_content_is_void(self):
        assert self.by_id["deletePet"].response_type == "void"

    def test_response_any_media_type(self):
        assert self.by_id["createUser"].response_type == "User"

    def test_is_form_only_for_post_with_parameters(self):
        assert self.by_id["createUser"].is_form is True
        assert self.by_id["createPet"].is_form is False
        assert self.by_id["listPets"].is_form is False

    def test_missing_summary_defaults_to_empty(self):
        assert self.by_id["getInventory"].summary == ""

    def test_document_not_mutated(self):
        """Synthetic schemas go to the context, never into the document."""
        assert "ListPetsQuery" not in self.document.components.schemas
        assert set(self.document.components.schemas) < set(self.ctx.schemas)

    def test_request_schema_names(self):
        assert "NewPet" in self.ctx.request_schema_names
        assert "ListPetsQuery" in self.ctx.request_schema_names
        assert "Pet" not in self.ctx.request_schema_names


class TestBuildContextOptions:
    """Test prefix, namespace and tag filter handling."""

    def test_prefix_applied_to_operation_id_only(self, petstore):
        ctx = build_context(petstore, _config(namespace="pet store"))
        by_id = {e.operation_id: e for e in ctx.endpoints}
        assert "petstore_listPets" in by_id
        assert "ListPetsQuery" in ctx.schemas

    def test_namespace_on_type_names(self, petstore):
        ctx = build_context(petstore, _config(namespace="ns"))
        by_id = {e.operation_id: e for e in ctx.endpoints}
        assert by_id["ns_listPets"].request_type == "Ns.ListPetsQuery"
        assert by_id["ns_listPets"].response_type == "Array<Ns.Pet>"
        assert by_id["ns_updatePet"].request_type == "Ns.PetPatch | void"
        assert by_id["ns_createPet"].response_type == "Ns.ResultPet"

    def test_tag_filter(self, petstore):
        ctx = build_context(petstore, _config(tags="Users"))
        assert {e.module for e in ctx.endpoints} == {"Users"}
        assert [m.name for m in ctx.modules] == ["Users"]

    def test_filtered_operations_add_no_query_schemas(self, petstore):
        ctx = build_context(petstore, _config(tags="Users"))
        assert "ListPetsQuery" not in ctx.schemas

    def test_document_order_does_not_matter(self, petstore_spec):
        reordered = dict(petstore_spec)
        reordered["paths"] = dict(reversed(list(petstore_spec["paths"].items())))
        a = build_context(parse_document(petstore_spec), _config())
        b = build_context(parse_document(reordered), _config())
        assert a.endpoints == b.endpoints


class TestBuildContextErrors:
    """Fatal enumeration errors."""

    def test_empty_tags_is_fatal(self):
        doc = _single_op_doc("get", {"operationId": "noTag", "tags": [], "responses": {}})
        with pytest.raises(MissingTagError, match="noTag"):
            build_context(doc, _config())

    def test_empty_tags_fatal_even_when_filtered(self):
        doc = _single_op_doc("get", {"operationId": "noTag", "responses": {}})
        with pytest.raises(MissingTagError):
            build_context(doc, _config(tags="Things"))

    def test_query_schema_collision_with_component(self):
        doc = _single_op_doc(
            "get",
            {
                "operationId": "listThings",
                "tags": ["Things"],
                "parameters": [{"name": "q", "in": "query"}],
            },
            schemas={"ListThingsQuery": {"type": "object", "properties": {}}},
        )
        with pytest.raises(SchemaCollisionError, match="ListThingsQuery"):
            build_context(doc, _config())

    def test_query_schema_collision_between_operations(self):
        doc = parse_document({
            "components": {"schemas": {}},
            "paths": {
                "/a": {"get": {"operationId": "find", "tags": ["T"], "parameters": [{"name": "x"}]}},
                "/b": {"get": {"operationId": "find", "tags": ["T"], "parameters": [{"name": "y"}]}},
            },
            "tags": [{"name": "T"}],
        })
        with pytest.raises(SchemaCollisionError):
            build_context(doc, _config())
