# -*- coding: utf-8 -*-

import pytest
from py_gql import graphql_blocking
from py_gql.schema import ListType, NonNullType

from typed_gql import ID, String, build_schema, field, non_null, object_type
from typed_gql import query_type
from typed_gql.relay import (
    backward_connection_args,
    connection_args,
    connection_args_from,
    connection_definitions,
    connection_from_list,
    forward_connection_args,
    node_definitions,
    page_info_type,
)

ITEMS = [{"id": letter} for letter in "abcde"]


def _cursors(connection):
    return [edge["cursor"] for edge in connection["edges"]]


class Item:
    def __init__(self, id):
        self.id = id


class TestConnectionFromList:
    def test_no_arguments_returns_everything(self):
        connection = connection_from_list(ITEMS)
        assert _cursors(connection) == ["a", "b", "c", "d", "e"]
        assert connection["edges"][0]["node"] is ITEMS[0]
        assert connection["pageInfo"] == {
            "startCursor": "a",
            "endCursor": "e",
            "hasNextPage": False,
            "hasPreviousPage": False,
        }

    def test_first(self):
        connection = connection_from_list(ITEMS, first=2)
        assert _cursors(connection) == ["a", "b"]
        assert connection["pageInfo"]["startCursor"] == "a"
        assert connection["pageInfo"]["endCursor"] == "b"
        assert connection["pageInfo"]["hasNextPage"] is True
        assert connection["pageInfo"]["hasPreviousPage"] is False

    def test_after_includes_the_matching_item(self):
        connection = connection_from_list(ITEMS, after="b", first=2)
        assert _cursors(connection) == ["b", "c"]

    def test_after_unknown_cursor_starts_at_the_beginning(self):
        connection = connection_from_list(ITEMS, after="z", first=2)
        assert _cursors(connection) == ["a", "b"]

    def test_last(self):
        connection = connection_from_list(ITEMS, last=2)
        assert _cursors(connection) == ["d", "e"]
        assert connection["pageInfo"]["hasPreviousPage"] is True
        assert connection["pageInfo"]["hasNextPage"] is False

    def test_before(self):
        connection = connection_from_list(ITEMS, before="d", last=2)
        assert _cursors(connection) == ["b", "c"]

    def test_before_without_last_is_empty(self):
        assert _cursors(connection_from_list(ITEMS, before="d")) == []

    def test_before_unknown_cursor_is_empty(self):
        connection = connection_from_list(ITEMS, before="z")
        assert _cursors(connection) == []

    def test_before_unknown_cursor_with_last(self):
        connection = connection_from_list(ITEMS, before="z", last=2)
        assert _cursors(connection) == ["d", "e"]

    def test_first_larger_than_the_list(self):
        connection = connection_from_list(ITEMS, first=10)
        assert len(connection["edges"]) == 5
        assert connection["pageInfo"]["hasNextPage"] is False

    def test_first_equal_to_list_length_has_next_page(self):
        connection = connection_from_list(ITEMS, first=5)
        assert connection["pageInfo"]["hasNextPage"] is True

    def test_zero_is_treated_as_unset(self):
        connection = connection_from_list(ITEMS, first=0, last=0)
        assert len(connection["edges"]) == 5
        assert connection["pageInfo"]["hasNextPage"] is False
        assert connection["pageInfo"]["hasPreviousPage"] is False

    def test_page_cursors_refer_to_the_returned_edges(self):
        connection = connection_from_list(ITEMS, after="b", first=2)
        assert connection["pageInfo"]["startCursor"] == "b"
        assert connection["pageInfo"]["endCursor"] == "c"

    def test_empty_page_has_no_cursors(self):
        connection = connection_from_list(ITEMS, before="z")
        assert connection["pageInfo"]["startCursor"] is None
        assert connection["pageInfo"]["endCursor"] is None

    def test_empty_list(self):
        connection = connection_from_list([], first=2)
        assert connection["edges"] == []
        assert connection["pageInfo"] == {
            "startCursor": None,
            "endCursor": None,
            "hasNextPage": False,
            "hasPreviousPage": False,
        }

    def test_object_items_use_id_attribute(self):
        items = [Item("x"), Item("y")]
        connection = connection_from_list(items, after="y")
        assert _cursors(connection) == ["y"]
        assert connection["edges"][0]["node"] is items[1]


def test_connection_args_from_ignores_other_arguments():
    assert connection_args_from(
        {"first": 1, "after": "a", "filter": "foo"}
    ) == {"first": 1, "after": "a"}


def test_connection_args():
    assert list(forward_connection_args) == ["after", "first"]
    assert list(backward_connection_args) == ["before", "last"]
    assert list(connection_args) == ["after", "first", "before", "last"]


def test_connection_definitions_types():
    Ship = object_type("Ship", [field("id", non_null(ID))])
    ShipEdge, ShipConnection = connection_definitions(
        Ship,
        edge_fields=[field("boardedAt", String)],
        connection_fields=lambda: [field("fleetName", String)],
    )

    schema = build_schema(
        query_type([field("ships", ShipConnection, args=connection_args)])
    )

    edge = schema.get_type("ShipEdge")
    connection = schema.get_type("ShipConnection")
    page_info = schema.get_type("PageInfo")

    assert ShipEdge.name == "ShipEdge"
    assert [f.name for f in edge.fields] == ["node", "cursor", "boardedAt"]
    assert edge.field_map["node"].type is schema.get_type("Ship")
    assert isinstance(edge.field_map["cursor"].type, NonNullType)

    assert [f.name for f in connection.fields] == [
        "pageInfo",
        "edges",
        "fleetName",
    ]
    assert connection.field_map["pageInfo"].type.type is page_info
    edges_type = connection.field_map["edges"].type
    assert isinstance(edges_type, ListType)
    assert edges_type.type is edge

    assert [f.name for f in page_info.fields] == [
        "hasNextPage",
        "hasPreviousPage",
        "startCursor",
        "endCursor",
    ]
    schema.validate()


def test_connection_definitions_custom_name():
    Ship = object_type("Ship", [field("id", non_null(ID))])
    edge, connection = connection_definitions(Ship, name="Fleet")
    assert edge.name == "FleetEdge"
    assert connection.name == "FleetConnection"


def test_page_info_type_is_shared():
    A = object_type("A", [field("id", ID)])
    B = object_type("B", [field("id", ID)])
    _, AConnection = connection_definitions(A)
    _, BConnection = connection_definitions(B)

    schema = build_schema(
        query_type([field("a", AConnection), field("b", BConnection)])
    )

    assert (
        schema.get_type("AConnection").field_map["pageInfo"].type.type
        is schema.get_type("BConnection").field_map["pageInfo"].type.type
    )
    assert page_info_type.name == "PageInfo"


def _node_schema(fetcher):
    node_interface, node_field = node_definitions(fetcher)

    Photo = object_type(
        "Photo",
        [field("id", non_null(ID)), field("width", String)],
        interfaces=[node_interface],
        is_type_of=lambda value, *_: "width" in value,
    )
    User = object_type(
        "User",
        [field("id", non_null(ID)), field("name", String)],
        interfaces=[node_interface],
        is_type_of=lambda value, *_: "name" in value,
    )

    return build_schema(query_type([node_field]), types=[Photo, User])


DATA = {
    "1": {"id": "1", "name": "John"},
    "2": {"id": "2", "width": "400"},
}


@pytest.mark.asyncio
async def test_node_field_calls_the_fetcher_once(assert_execution):
    calls = []

    def fetcher(id_, context, info):
        calls.append((id_, context))
        return DATA.get(id_)

    await assert_execution(
        _node_schema(fetcher),
        """
        {
            node(id: "1") {
                id
                ... on User { name }
            }
        }
        """,
        expected_data={"node": {"id": "1", "name": "John"}},
        context={"foo": "bar"},
    )

    assert calls == [("1", {"foo": "bar"})]


@pytest.mark.asyncio
async def test_node_field_uses_is_type_of(assert_execution):
    await assert_execution(
        _node_schema(lambda id_, *_: DATA.get(id_)),
        """
        {
            user: node(id: "1") {
                __typename
                ... on User { name }
            }
            photo: node(id: "2") {
                __typename
                ... on Photo { width }
            }
        }
        """,
        expected_data={
            "user": {"__typename": "User", "name": "John"},
            "photo": {"__typename": "Photo", "width": "400"},
        },
    )


@pytest.mark.asyncio
async def test_node_field_unknown_id(assert_execution):
    await assert_execution(
        _node_schema(lambda id_, *_: DATA.get(id_)),
        '{ node(id: "42") { id } }',
        expected_data={"node": None},
    )


@pytest.mark.asyncio
async def test_node_field_requires_id(assert_execution):
    await assert_execution(
        _node_schema(lambda id_, *_: DATA.get(id_)),
        "{ node { id } }",
        expected_data=None,
        expected_errors=[
            (
                'Field "node" argument "id" of type ID! is required but '
                "not provided",
                None,
            )
        ],
    )


def test_node_field_without_id_has_no_data():
    response = graphql_blocking(
        _node_schema(lambda id_, *_: DATA.get(id_)), "{ node { id } }"
    ).response()
    assert "data" not in response
    assert len(response["errors"]) == 1


def test_node_interface_shape():
    node_interface, node_field = node_definitions(lambda *_: None)

    assert node_interface.name == "Node"
    assert node_interface.description == "An object with an ID"
    assert [f.name for f in node_interface.fields_fn()] == ["id"]

    assert node_field.name == "node"
    assert node_field.type is node_interface
    assert node_field.description == "Fetches an object given its ID"
    assert list(node_field.args) == ["id"]
    assert node_field.args["id"].description == "The ID of an object"
