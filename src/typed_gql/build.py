# -*- coding: utf-8 -*-
"""
Materialize a graph of type nodes into an executable
:class:`py_gql.schema.Schema`.
"""

import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, List, Optional, Sequence

from py_gql.schema import (
    Argument,
    Directive,
    EnumType,
    EnumValue,
    Field,
    GraphQLType,
    InputField,
    InputObjectType,
    InterfaceType,
    ListType,
    NonNullType,
    ObjectType,
    ScalarType,
    Schema,
    UnionType,
)

from ._utils import identity, lazy_list
from .exc import TypeResolutionError, UnknownNodeKindError
from .nodes import (
    ArgumentDef,
    EnumNode,
    FieldDef,
    InputFieldDef,
    InputObjectNode,
    InterfaceNode,
    Kind,
    NamedNode,
    ObjectNode,
    ScalarNode,
    SchemaDef,
    TypeNode,
    UnionNode,
    WrappingNode,
)

logger = logging.getLogger(__name__)


class SchemaBuilder:
    """
    Translate type nodes into engine types.

    Every node is materialized at most once per builder: results are
    memoized by node identity which is what makes shared references resolve
    to a single engine type and recursive references terminate. Composite
    types are registered in the memo *before* their fields are evaluated so
    that any path leading back to them while they are being built finds the
    (still incomplete) engine type.

    A builder is not thread safe and is meant to be used once, through
    :func:`build_schema`.
    """

    def __init__(self) -> None:
        self._memo = {}  # type: Dict[TypeNode, GraphQLType]
        self._object_nodes = {}  # type: Dict[ObjectType, ObjectNode]

    def __contains__(self, node: TypeNode) -> bool:
        return node in self._memo

    def lookup(self, node: TypeNode) -> GraphQLType:
        """
        Return the engine type previously built for ``node``.

        Raises:
            :py:class:`KeyError` if the node hasn't been materialized.
        """
        return self._memo[node]

    def build(
        self,
        query: ObjectNode,
        mutation: Optional[ObjectNode] = None,
        subscription: Optional[ObjectNode] = None,
        types: Optional[Sequence[NamedNode]] = None,
        directives: Optional[Sequence[Directive]] = None,
    ) -> Schema:
        query_type = self.materialize(query)
        mutation_type = (
            self.materialize(mutation) if mutation is not None else None
        )
        subscription_type = (
            self.materialize(subscription)
            if subscription is not None
            else None
        )
        extra_types = [self.materialize(t) for t in types or ()]

        schema = Schema(
            query_type=query_type,
            mutation_type=mutation_type,
            subscription_type=subscription_type,
            directives=list(directives or ()),
            types=extra_types,
        )

        logger.debug(
            "Built schema for %s from %d type nodes",
            ", ".join(
                str(t)
                for t in (query_type, mutation_type, subscription_type)
                if t is not None
            ),
            len(self._memo),
        )
        return schema

    def materialize(self, node: TypeNode) -> Any:
        """
        Return the engine type for a type node, creating it if needed.

        This is used for both input and output positions.

        Raises:
            UnknownNodeKindError: ``node`` is not a type node.
        """
        try:
            return self._memo[node]
        except KeyError:
            pass
        except TypeError:
            # Unhashable, can't be a node.
            raise UnknownNodeKindError(node) from None

        kind = getattr(node, "kind", None)

        if kind is Kind.SCALAR:
            return self._scalar(node)  # type: ignore
        elif kind is Kind.ENUM:
            return self._enum(node)  # type: ignore
        elif kind is Kind.LIST:
            return self._wrapper(node, ListType)  # type: ignore
        elif kind is Kind.NON_NULL:
            return self._wrapper(node, NonNullType)  # type: ignore
        elif kind is Kind.OBJECT:
            return self._object(node)  # type: ignore
        elif kind is Kind.INTERFACE:
            return self._interface(node)  # type: ignore
        elif kind is Kind.UNION:
            return self._union(node)  # type: ignore
        elif kind is Kind.INPUT_OBJECT:
            return self._input_object(node)  # type: ignore
        else:
            raise UnknownNodeKindError(node)

    def field(self, field_def: FieldDef) -> Field:
        """
        Translate an object or interface field.

        Resolvers are passed through untouched.
        """
        return Field(
            field_def.name,
            self.materialize(field_def.type),
            args=self.arguments(field_def.args),
            description=field_def.description,
            deprecation_reason=field_def.deprecation_reason,
            resolver=getattr(field_def, "resolve", None),
            subscription_resolver=getattr(field_def, "subscribe", None),
        )

    def arguments(self, args: "Mapping[str, ArgumentDef]") -> List[Argument]:
        return [self.argument(name, arg) for name, arg in args.items()]

    def argument(self, name: str, arg: ArgumentDef) -> Argument:
        kwargs = {}  # type: Dict[str, Any]
        if arg.has_default:
            kwargs["default_value"] = arg.default  # type: ignore
        return Argument(
            name,
            self.materialize(arg.type),
            description=arg.description,
            **kwargs
        )

    def input_field(self, name: str, field_def: InputFieldDef) -> InputField:
        kwargs = {}  # type: Dict[str, Any]
        if field_def.has_default:
            kwargs["default_value"] = field_def.default_value
        return InputField(
            name,
            self.materialize(field_def.type),
            description=field_def.description,
            **kwargs
        )

    def _register(self, node: TypeNode, type_: GraphQLType) -> None:
        self._memo[node] = type_
        if isinstance(node, NamedNode):
            logger.debug("Materialized %s %s", node.kind.value, node.name)

    def _scalar(self, node: ScalarNode) -> ScalarType:
        if node.builtin is not None:
            scalar = node.builtin
        else:
            scalar = ScalarType(
                node.name,
                node.serialize,
                node.parse_value if node.parse_value is not None else identity,
                parse_literal=node.parse_literal,
                description=node.description,
            )
        self._register(node, scalar)
        return scalar

    def _enum(self, node: EnumNode) -> EnumType:
        enum = EnumType(
            node.name,
            [
                EnumValue(
                    value.name,
                    value.value,
                    deprecation_reason=value.deprecation_reason,
                    description=value.description,
                )
                for value in node.values
            ],
            description=node.description,
        )
        self._register(node, enum)
        return enum

    def _wrapper(
        self, node: WrappingNode, wrapper_cls: Callable[[GraphQLType], Any]
    ) -> GraphQLType:
        wrapped = wrapper_cls(self.materialize(node.of_type))
        self._register(node, wrapped)
        return wrapped

    def _object(self, node: ObjectNode) -> ObjectType:
        object_type = ObjectType(node.name, [], description=node.description)
        self._register(node, object_type)
        self._object_nodes[object_type] = node

        object_type.interfaces = [
            self.materialize(i) for i in lazy_list(node.interfaces)
        ]
        object_type.fields = [
            self.field(f) for f in _evaluate_fields(node, node.fields_fn)
        ]
        return object_type

    def _interface(self, node: InterfaceNode) -> InterfaceType:
        interface = InterfaceType(node.name, [], description=node.description)
        interface.resolve_type = self._type_resolver(node, interface)
        self._register(node, interface)

        interface.fields = [
            self.field(f) for f in _evaluate_fields(node, node.fields_fn)
        ]
        return interface

    def _union(self, node: UnionNode) -> UnionType:
        union = UnionType(node.name, [], description=node.description)
        union.resolve_type = self._type_resolver(node, union)
        self._register(node, union)

        union.types = [
            self.materialize(t)
            for t in _evaluate_fields(node, lambda: lazy_list(node.types))
        ]
        return union

    def _input_object(self, node: InputObjectNode) -> InputObjectType:
        input_object = InputObjectType(
            node.name, [], description=node.description
        )
        self._register(node, input_object)

        fields = _evaluate_fields(node, lambda: list(node.fields_fn().items()))
        input_object.fields = [
            self.input_field(name, field_def) for name, field_def in fields
        ]
        return input_object

    def _type_resolver(
        self, node: Any, abstract_type: Any
    ) -> Callable[[Any, Any, Any], Any]:
        resolve_type = node.resolve_type
        memo = self._memo

        if resolve_type is None:
            return self._is_type_of_resolver(abstract_type)

        def _resolve_type(value: Any, context: Any, info: Any) -> Any:
            resolved = resolve_type(value, context, info, node)
            if isinstance(resolved, TypeNode):
                try:
                    return memo[resolved]
                except KeyError:
                    raise TypeResolutionError(resolved) from None
            return resolved

        return _resolve_type

    def _is_type_of_resolver(
        self, abstract_type: Any
    ) -> Callable[[Any, Any, Any], Any]:
        object_nodes = self._object_nodes

        def _resolve_type(value: Any, context: Any, info: Any) -> Any:
            for candidate in info.schema.get_possible_types(abstract_type):
                node = object_nodes.get(candidate)
                if (
                    node is not None
                    and node.is_type_of is not None
                    and node.is_type_of(value, context, info)
                ):
                    return candidate
            return _default_type_name(value)

        return _resolve_type


def build_schema(
    query: ObjectNode,
    mutation: Optional[ObjectNode] = None,
    subscription: Optional[ObjectNode] = None,
    types: Optional[Sequence[NamedNode]] = None,
    directives: Optional[Sequence[Directive]] = None,
) -> Schema:
    """
    Build an executable schema from root type nodes.

    Args:
        query: Root query type
        mutation: Root mutation type
        subscription: Root subscription type
        types: Additional type nodes to include, usually interface
            implementations which cannot be reached from the root types.
        directives: Custom engine directives.

    Returns:
        py_gql.schema.Schema: Executable schema.

    Raises:
        UnknownNodeKindError: A value which isn't a type node was found in the
            type graph.
    """
    return SchemaBuilder().build(
        query,
        mutation=mutation,
        subscription=subscription,
        types=types,
        directives=directives,
    )


def build_schema_from_def(schema_def: SchemaDef) -> Schema:
    """ :func:`build_schema` for a :class:`~typed_gql.nodes.SchemaDef`. """
    return build_schema(
        schema_def.query,
        mutation=schema_def.mutation,
        subscription=schema_def.subscription,
        types=schema_def.types,
        directives=schema_def.directives,
    )


def _evaluate_fields(node: NamedNode, accessor: Callable[[], Any]) -> List[Any]:
    try:
        return lazy_list(accessor)
    except Exception:
        logger.debug(
            "Failed to evaluate members of %s %s", node.kind.value, node
        )
        raise


def _default_type_name(value: Any) -> Optional[str]:
    # Same lookup as the engine's default type resolution.
    if isinstance(value, Mapping):
        return value.get("__typename__", None)
    return getattr(value, "__typename__", None)


__all__ = (
    "SchemaBuilder",
    "build_schema",
    "build_schema_from_def",
)
