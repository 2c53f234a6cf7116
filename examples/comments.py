# -*- coding: utf-8 -*-
""" Self referencing types and relay style pagination.

Comments reply to other comments, which is expressed by having the ``replies``
field of the ``Comment`` type refer to the type itself. Every comment is also
reachable through the root ``node`` field.

Run this with:

    python comments.py
"""

import json

from py_gql import graphql_blocking

from typed_gql import ID, String, build_schema, field, non_null, object_type
from typed_gql import query_type
from typed_gql.relay import (
    connection_args,
    connection_args_from,
    connection_definitions,
    connection_from_list,
    node_definitions,
)

COMMENTS = {
    "1": {"id": "1", "body": "First!", "replies": ["2", "3"]},
    "2": {"id": "2", "body": "Not quite.", "replies": ["4"]},
    "3": {"id": "3", "body": "Congratulations.", "replies": []},
    "4": {"id": "4", "body": "Close enough.", "replies": []},
}


def resolve_replies(comment, *_, **args):
    return connection_from_list(
        [COMMENTS[id_] for id_ in comment["replies"]],
        **connection_args_from(args)
    )


node_interface, node_field = node_definitions(
    lambda id_, *_: COMMENTS.get(id_)
)

Comment = object_type(
    "Comment",
    lambda self: [
        field("id", non_null(ID)),
        field("body", String),
        field(
            "replies",
            non_null(ReplyConnection),
            resolve_replies,
            args=connection_args,
        ),
    ],
    interfaces=[node_interface],
    is_type_of=lambda value, *_: "body" in value,
)

ReplyEdge, ReplyConnection = connection_definitions(Comment, name="Reply")

schema = build_schema(query_type([node_field]), types=[Comment])

QUERY = """
{
    node(id: "1") {
        ... on Comment {
            body
            replies(first: 1) {
                pageInfo { hasNextPage endCursor }
                edges {
                    cursor
                    node {
                        body
                        replies { edges { node { body } } }
                    }
                }
            }
        }
    }
}
"""


if __name__ == "__main__":
    result = graphql_blocking(schema, QUERY)
    print(json.dumps(result.response(), indent=4))
