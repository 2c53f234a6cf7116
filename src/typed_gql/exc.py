# -*- coding: utf-8 -*-
"""This module implements all the exceptions exposed by this library."""

from typing import Any


class TypedGqlError(Exception):
    """
    Base exception from which all other inherit. You should prefer using one
    of its subclasses most of the time.
    """

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class SchemaBuildError(TypedGqlError):
    """
    Raised when a declared type graph cannot be turned into a schema.

    Errors raised by user code (field accessors, etc.) are never wrapped
    in this and propagate as is.
    """


class UnknownNodeKindError(SchemaBuildError, TypeError):
    """
    Raised when a value which isn't a known type node reaches the schema
    builder.

    Args:
        value: Offending value

    Attributes:
        value (Any): Offending value
    """

    def __init__(self, value: Any):
        super().__init__(
            "Expected a type node but got %r (kind: %r)"
            % (value, getattr(value, "kind", None))
        )
        self.value = value


class TypeResolutionError(TypedGqlError):
    """
    Raised at execution time when a ``resolve_type`` callback returns a type
    node which isn't part of the built schema.

    Args:
        node: Returned type node

    Attributes:
        node (Any): Returned type node
    """

    def __init__(self, node: Any):
        super().__init__(
            'Type resolver returned "%s" which is not part of the schema'
            % getattr(node, "name", node)
        )
        self.node = node
