# -*- coding: utf-8 -*-
"""
Helpers implementing the `Relay <https://relay.dev/docs/guides/graphql-server-specification/>`_
server conventions on top of type nodes: global object identification
through a ``Node`` interface and cursor based pagination through
connections.
"""

from collections.abc import Mapping
from typing import (
    Any,
    Callable,
    Dict,
    List,
    NamedTuple,
    Optional,
    Sequence,
    Union,
)

from ._utils import Lazy, find_index, lazy_list
from .nodes import (
    ID,
    ArgumentDef,
    Boolean,
    FieldDef,
    Int,
    InterfaceNode,
    ObjectNode,
    String,
    abstract_field,
    arg,
    field,
    interface_type,
    list_of,
    non_null,
    object_type,
)

IdFetcher = Callable[[str, Any, Any], Any]

NodeDefinitions = NamedTuple(
    "NodeDefinitions",
    [("node_interface", InterfaceNode), ("node_field", FieldDef)],
)

ConnectionDefinitions = NamedTuple(
    "ConnectionDefinitions",
    [("edge_type", ObjectNode), ("connection_type", ObjectNode)],
)


def node_definitions(
    id_fetcher: IdFetcher,
    interface_name: str = "Node",
    field_name: str = "node",
) -> NodeDefinitions:
    """
    Create the ``Node`` interface and the root ``node(id: ID!)`` field.

    Args:
        id_fetcher: Called as ``id_fetcher(id, context, info)`` with the
            global id passed to the root field. Its return value (or awaitable)
            is returned as is: decoding ids is up to the caller.
        interface_name: Name of the interface type.
        field_name: Name of the root field.

    Returns:
        NodeDefinitions: ``(node_interface, node_field)`` tuple.

    Object types exposed through the interface must list it in their
    ``interfaces`` and provide an ``is_type_of`` discriminator.
    """
    node_interface = interface_type(
        interface_name,
        [
            abstract_field(
                "id", non_null(ID), description="The id of the object."
            )
        ],
        description="An object with an ID",
    )

    def _resolve_node(_root: Any, context: Any, info: Any, **args: Any) -> Any:
        return id_fetcher(args["id"], context, info)

    node_field = field(
        field_name,
        node_interface,
        _resolve_node,
        args={"id": arg(non_null(ID), "The ID of an object")},
        description="Fetches an object given its ID",
    )

    return NodeDefinitions(node_interface, node_field)


forward_connection_args = {
    "after": arg(String),
    "first": arg(Int),
}  # type: Dict[str, ArgumentDef]

backward_connection_args = {
    "before": arg(String),
    "last": arg(Int),
}  # type: Dict[str, ArgumentDef]

connection_args = dict(
    forward_connection_args, **backward_connection_args
)  # type: Dict[str, ArgumentDef]


page_info_type = object_type(
    "PageInfo",
    [
        field(
            "hasNextPage",
            non_null(Boolean),
            description="When paginating forwards, are there more items?",
        ),
        field(
            "hasPreviousPage",
            non_null(Boolean),
            description="When paginating backwards, are there more items?",
        ),
        field(
            "startCursor",
            String,
            description="When paginating backwards, the cursor to continue.",
        ),
        field(
            "endCursor",
            String,
            description="When paginating forwards, the cursor to continue.",
        ),
    ],
    description="Information about pagination in a connection.",
)


def connection_definitions(
    node_type: Union[ObjectNode, InterfaceNode],
    name: Optional[str] = None,
    edge_fields: Optional[Lazy[Sequence[FieldDef]]] = None,
    connection_fields: Optional[Lazy[Sequence[FieldDef]]] = None,
) -> ConnectionDefinitions:
    """
    Create the edge and connection types for a given node type.

    Args:
        node_type: Type of the paginated items.
        name: Prefix for the ``<name>Edge`` and ``<name>Connection`` types,
            defaults to the node type's name.
        edge_fields: Extra fields for the edge type.
        connection_fields: Extra fields for the connection type.

    Returns:
        ConnectionDefinitions: ``(edge_type, connection_type)`` tuple.

    Values resolved for the connection type are expected to look like the
    output of :func:`connection_from_list`.
    """
    prefix = name or node_type.name

    edge_type = object_type(
        prefix + "Edge",
        lambda _: [
            field(
                "node", node_type, description="The item at the end of the edge"
            ),
            field(
                "cursor",
                non_null(String),
                description="A cursor for use in pagination",
            ),
            *lazy_list(edge_fields),
        ],
        description="An edge in a connection.",
    )

    connection_type = object_type(
        prefix + "Connection",
        lambda _: [
            field(
                "pageInfo",
                non_null(page_info_type),
                description="Information to aid in pagination.",
            ),
            field("edges", list_of(edge_type), description="A list of edges."),
            *lazy_list(connection_fields),
        ],
        description="A connection to a list of items.",
    )

    return ConnectionDefinitions(edge_type, connection_type)


def connection_args_from(args: "Mapping[str, Any]") -> Dict[str, Any]:
    """ Extract the pagination arguments from resolver keyword arguments. """
    return {
        key: args[key]
        for key in ("before", "after", "first", "last")
        if key in args
    }


def connection_from_list(
    items: Sequence[Any],
    before: Optional[str] = None,
    after: Optional[str] = None,
    first: Optional[int] = None,
    last: Optional[int] = None,
) -> Dict[str, Any]:
    """
    Slice a fully loaded list of items according to connection arguments.

    Each item's cursor is its ``id`` (key for mappings, attribute otherwise).
    Arguments are applied in the following order: ``after``, ``first``,
    ``before``, ``last`` and are not validated against each other.

    Warning:
        This follows the behaviour of existing clients closely, including
        some surprising cases:

        - The item matching ``after`` is included in the page.
        - When ``before`` doesn't match any item, the page starts past the
          end of the list.
        - ``hasNextPage`` and ``hasPreviousPage`` only compare the requested
          page size to the total number of items.
        - ``startCursor`` and ``endCursor`` come from the returned edges,
          whereas existing clients read the first and last items of the
          whole list.

    ``startCursor`` and ``endCursor`` are ``None`` for an empty page.

    Args:
        items: Ordered items.
        before: Cursor of the item closing the page.
        after: Cursor of the item opening the page.
        first: Maximum number of items, counted from the start of the page.
        last: Maximum number of items, counted from the end of the page.

    Returns:
        Connection value with ``edges`` and ``pageInfo`` entries.
    """
    start, end = 0, len(items)

    if after:
        index = find_index(items, lambda item: _cursor(item) == after)
        if index > -1:
            start = index

    if first:
        end = min(start + first, len(items))

    if before:
        start = len(items)
        index = find_index(items, lambda item: _cursor(item) == before)
        if index > -1:
            end = index

    if last:
        start = max(end - last, 0)

    edges = [
        {"cursor": _cursor(item), "node": item} for item in items[start:end]
    ]  # type: List[Dict[str, Any]]

    return {
        "edges": edges,
        "pageInfo": {
            "startCursor": edges[0]["cursor"] if edges else None,
            "endCursor": edges[-1]["cursor"] if edges else None,
            "hasNextPage": len(items) >= first if first else False,
            "hasPreviousPage": len(items) >= last if last else False,
        },
    }


def _cursor(item: Any) -> Any:
    if isinstance(item, Mapping):
        return item.get("id", None)
    return getattr(item, "id", None)
