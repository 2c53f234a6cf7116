# -*- coding: utf-8 -*-
from py_gql import graphql_blocking

from typed_gql import String, build_schema, default_arg, field, non_null
from typed_gql import query_type


def resolve_hello(*_, value):
    return "Hello {}!".format(value)


schema = build_schema(
    query_type(
        [
            field(
                "hello",
                non_null(String),
                resolve_hello,
                args={"value": default_arg(String, "world")},
            )
        ]
    )
)


result = graphql_blocking(schema, '{ hello(value: "World") }')
assert result.response() == {"data": {"hello": "Hello World!"}}
