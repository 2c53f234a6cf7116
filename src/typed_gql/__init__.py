# -*- coding: utf-8 -*-
"""
typed_gql

typed_gql lets you declare a GraphQL schema as a graph of plain type nodes,
which may reference each other freely, and turns it into an executable
:class:`py_gql.schema.Schema`.

The main :mod:`typed_gql` package exposes the node constructors and
:func:`build_schema`; :mod:`typed_gql.relay` contains helpers for global
object identification and connections.
"""

from .version import __version__  # isort:skip

from . import relay  # noqa: F401
from .build import SchemaBuilder, build_schema, build_schema_from_def
from .exc import (
    SchemaBuildError,
    TypedGqlError,
    TypeResolutionError,
    UnknownNodeKindError,
)
from .nodes import (
    ID,
    Boolean,
    Float,
    Int,
    Kind,
    SchemaDef,
    String,
    abstract_field,
    arg,
    default_arg,
    enum_type,
    enum_value,
    field,
    input_field,
    input_object_type,
    interface_type,
    list_of,
    mutation_type,
    non_null,
    object_type,
    query_type,
    scalar,
    subscription_field,
    subscription_type,
    union_type,
)


__all__ = (
    "__version__",
    "SchemaBuilder",
    "build_schema",
    "build_schema_from_def",
    "TypedGqlError",
    "SchemaBuildError",
    "UnknownNodeKindError",
    "TypeResolutionError",
    "Kind",
    "SchemaDef",
    "String",
    "Int",
    "Float",
    "Boolean",
    "ID",
    "scalar",
    "enum_type",
    "enum_value",
    "object_type",
    "query_type",
    "mutation_type",
    "subscription_type",
    "interface_type",
    "union_type",
    "input_object_type",
    "list_of",
    "non_null",
    "field",
    "subscription_field",
    "abstract_field",
    "arg",
    "default_arg",
    "input_field",
)
