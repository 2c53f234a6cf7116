# -*- coding: utf-8 -*-
"""
Type node model.

Type nodes are plain descriptors of the types making up a schema. They do
not reference any execution engine type and do no cross reference
resolution: that is the job of :class:`typed_gql.build.SchemaBuilder` which
materializes a graph of nodes into a :class:`py_gql.schema.Schema`.

Nodes are compared and hashed by identity: every logical type must be
declared exactly once and the resulting value reused wherever the type is
referenced. Composite types (objects, interfaces, input objects) declare
their fields through a function called lazily and receiving the node itself,
which makes self referencing and mutually referencing types possible:

>>> User = object_type(
...     "User",
...     lambda self: [
...         field("name", String),
...         field("parent", self),
...     ],
... )
"""

import enum
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Union,
)

from py_gql import schema as _schema

from ._utils import Lazy, lazy_list

_UNSET = object()

Resolver = Callable[..., Any]
TypeResolver = Callable[[Any, Any, Any, Any], Any]
IsTypeOf = Callable[[Any, Any, Any], bool]


class Kind(enum.Enum):
    """ Tag used by the schema builder to dispatch on type nodes. """

    SCALAR = "Scalar"
    ENUM = "Enum"
    OBJECT = "Object"
    INPUT_OBJECT = "InputObject"
    INTERFACE = "Interface"
    UNION = "Union"
    LIST = "List"
    NON_NULL = "NonNull"


class TypeNode:
    """
    Base type node class.

    Attributes:
        kind (Kind): Node kind.
    """

    kind = NotImplemented  # type: Kind


class NamedNode(TypeNode):
    """
    Named type node base class.

    Warning:
        Names must be unique across a single schema. This is not checked
        when declaring nodes.

    Attributes:
        name (str): Type name.
        description (Optional[str]): Type description.
    """

    name = NotImplemented  # type: str
    description = None  # type: Optional[str]

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return "%s(%s)" % (self.__class__.__name__, self.name)


class WrappingNode(TypeNode):
    __slots__ = ("of_type",)

    def __init__(self, of_type: TypeNode):
        self.of_type = of_type


class ListNode(WrappingNode):
    """ List of another type node. """

    __slots__ = ()

    kind = Kind.LIST

    def __str__(self) -> str:
        return "[%s]" % self.of_type


class NonNullNode(WrappingNode):
    """ Non nullable version of another type node. """

    __slots__ = ()

    kind = Kind.NON_NULL

    def __str__(self) -> str:
        return "%s!" % self.of_type


class ScalarNode(NamedNode):
    """
    Scalar type node.

    The coercion functions are passed as is to the engine, refer to
    :class:`py_gql.schema.ScalarType` for their exact contract.

    Args:
        name: Type name
        serialize: Convert a Python value to a JSON compatible one.
        parse_value: Convert an input value from variables. Defaults to
            returning the value unchanged.
        parse_literal: Convert an input value from a document literal.
        description: Type description
        builtin: Engine scalar to use instead of creating a new one.

    Attributes:
        builtin (Optional[py_gql.schema.ScalarType]): Engine scalar this node
            stands for, set for the specified scalars.
    """

    kind = Kind.SCALAR

    def __init__(
        self,
        name: str,
        serialize: Callable[[Any], Any],
        parse_value: Optional[Callable[[Any], Any]] = None,
        parse_literal: Optional[Callable[..., Any]] = None,
        description: Optional[str] = None,
        builtin: Optional[_schema.ScalarType] = None,
    ):
        self.name = name
        self.description = description
        self.serialize = serialize
        self.parse_value = parse_value
        self.parse_literal = parse_literal
        self.builtin = builtin

    @classmethod
    def from_builtin(cls, scalar: _schema.ScalarType) -> "ScalarNode":
        return cls(
            scalar.name,
            scalar.serialize,
            scalar.parse,
            description=scalar.description,
            builtin=scalar,
        )


String = ScalarNode.from_builtin(_schema.String)
Int = ScalarNode.from_builtin(_schema.Int)
Float = ScalarNode.from_builtin(_schema.Float)
Boolean = ScalarNode.from_builtin(_schema.Boolean)
ID = ScalarNode.from_builtin(_schema.ID)

SPECIFIED_SCALARS = (String, Int, Float, Boolean, ID)


class EnumValueDef:
    """
    Enum value declaration.

    Args:
        name: Name of the value
        value: Python value, defaults to ``name``.
        description: Value description
        deprecation_reason: If set, the value is marked as deprecated.
    """

    __slots__ = ("name", "value", "description", "deprecation_reason")

    def __init__(
        self,
        name: str,
        value: Any = _UNSET,
        description: Optional[str] = None,
        deprecation_reason: Optional[str] = None,
    ):
        self.name = name
        self.value = name if value is _UNSET else value
        self.description = description
        self.deprecation_reason = deprecation_reason

    @classmethod
    def from_def(
        cls, definition: Union["EnumValueDef", str, Tuple[str, Any]]
    ) -> "EnumValueDef":
        """
        Create an enum value from strings, ``(name, value)`` tuples or
        existing instances.
        """
        if isinstance(definition, cls):
            return definition
        elif isinstance(definition, str):
            return cls(definition)
        elif isinstance(definition, tuple):
            name, value = definition
            return cls(name, value)
        else:
            raise TypeError("Invalid enum value definition %r" % definition)

    def __repr__(self) -> str:
        return "EnumValueDef(%s)" % self.name


class EnumNode(NamedNode):
    """
    Enum type node.

    Args:
        name: Type name
        values: Ordered enum values
        description: Type description
    """

    kind = Kind.ENUM

    def __init__(
        self,
        name: str,
        values: Iterable[Union[EnumValueDef, str, Tuple[str, Any]]],
        description: Optional[str] = None,
    ):
        self.name = name
        self.description = description
        self.values = [EnumValueDef.from_def(v) for v in values]

    @classmethod
    def from_python_enum(
        cls, enum_: "enum.EnumMeta", description: Optional[str] = None
    ) -> "EnumNode":
        """
        Create an enum type node from a Python enum, member names are exposed
        and members are used as values.
        """
        return cls(
            enum_.__name__,
            [(member.name, member) for member in enum_],  # type: ignore
            description=description,
        )


class ArgumentDef:
    """
    Argument declaration without default value.

    Args:
        type_: Input type node
        description: Argument description
    """

    __slots__ = ("type", "description")

    has_default = False

    def __init__(self, type_: TypeNode, description: Optional[str] = None):
        self.type = type_
        self.description = description

    def __repr__(self) -> str:
        return "ArgumentDef(%s)" % self.type


class DefaultArgumentDef(ArgumentDef):
    """
    Argument declaration with a default value.

    ``None`` is a valid default value.

    Args:
        type_: Input type node
        default: Default value
        description: Argument description
    """

    __slots__ = ("default",)

    has_default = True

    def __init__(
        self, type_: TypeNode, default: Any, description: Optional[str] = None
    ):
        super().__init__(type_, description)
        self.default = default

    def __repr__(self) -> str:
        return "DefaultArgumentDef(%s = %r)" % (self.type, self.default)


ArgMap = Mapping[str, ArgumentDef]


class InputFieldDef:
    """
    Input object field declaration.

    Warning:
        As ``None`` is a valid default value, in order to declare a field
        without any default value, ``default_value`` **must** be omitted.
    """

    __slots__ = ("type", "description", "default_value")

    def __init__(
        self,
        type_: TypeNode,
        description: Optional[str] = None,
        default_value: Any = _UNSET,
    ):
        self.type = type_
        self.description = description
        self.default_value = default_value

    @property
    def has_default(self) -> bool:
        return self.default_value is not _UNSET


class FieldDef:
    """
    Field of an object type node.

    Args:
        name: Field name
        type_: Output type node
        resolve: Resolver, called by the engine as
            ``resolve(root, context, info, **args)``. When omitted the
            engine's default resolver is used.
        args: Field arguments, in declaration order.
        description: Field description
        deprecation_reason: If set, the field is marked as deprecated.
        subscribe: Subscription resolver for fields of the subscription
            root type, must return an async iterable of events.
    """

    __slots__ = (
        "name",
        "type",
        "resolve",
        "args",
        "description",
        "deprecation_reason",
        "subscribe",
    )

    def __init__(
        self,
        name: str,
        type_: TypeNode,
        resolve: Optional[Resolver] = None,
        args: Optional[ArgMap] = None,
        description: Optional[str] = None,
        deprecation_reason: Optional[str] = None,
        subscribe: Optional[Resolver] = None,
    ):
        self.name = name
        self.type = type_
        self.resolve = resolve
        self.args = dict(args or {})  # type: Dict[str, ArgumentDef]
        self.description = description
        self.deprecation_reason = deprecation_reason
        self.subscribe = subscribe

    def __repr__(self) -> str:
        return "FieldDef(%s: %s)" % (self.name, self.type)


class AbstractFieldDef:
    """ Field of an interface type node; abstract fields have no resolver. """

    __slots__ = ("name", "type", "args", "description", "deprecation_reason")

    def __init__(
        self,
        name: str,
        type_: TypeNode,
        args: Optional[ArgMap] = None,
        description: Optional[str] = None,
        deprecation_reason: Optional[str] = None,
    ):
        self.name = name
        self.type = type_
        self.args = dict(args or {})  # type: Dict[str, ArgumentDef]
        self.description = description
        self.deprecation_reason = deprecation_reason

    def __repr__(self) -> str:
        return "AbstractFieldDef(%s: %s)" % (self.name, self.type)


class InterfaceNode(NamedNode):
    """
    Interface type node.

    Args:
        name: Type name
        resolve_type: Called as ``resolve_type(value, context, info, node)``
            where ``node`` is this interface node. Must return the concrete
            :class:`ObjectNode` (or its name) for a runtime value. When
            omitted, implementing types' ``is_type_of`` are used.
        description: Type description

    Attributes:
        fields_fn (Callable[[], Sequence[AbstractFieldDef]]):
            Lazy field accessor, attached right after construction.
    """

    kind = Kind.INTERFACE

    def __init__(
        self,
        name: str,
        resolve_type: Optional[TypeResolver] = None,
        description: Optional[str] = None,
    ):
        self.name = name
        self.description = description
        self.resolve_type = resolve_type
        self.fields_fn = (
            lambda: []
        )  # type: Callable[[], Sequence[AbstractFieldDef]]


class ObjectNode(NamedNode):
    """
    Object type node.

    Args:
        name: Type name
        interfaces: Implemented interfaces, or a function returning them.
        is_type_of: Called as ``is_type_of(value, context, info)`` to decide
            whether a runtime value belongs to this type when resolving an
            abstract type without ``resolve_type``.
        description: Type description

    Attributes:
        fields_fn (Callable[[], Sequence[FieldDef]]):
            Lazy field accessor, attached right after construction.
    """

    kind = Kind.OBJECT

    def __init__(
        self,
        name: str,
        interfaces: Optional[Lazy[Sequence[InterfaceNode]]] = None,
        is_type_of: Optional[IsTypeOf] = None,
        description: Optional[str] = None,
    ):
        self.name = name
        self.description = description
        self.interfaces = interfaces
        self.is_type_of = is_type_of
        self.fields_fn = lambda: []  # type: Callable[[], Sequence[FieldDef]]


class UnionNode(NamedNode):
    """
    Union type node.

    Args:
        name: Type name
        types: Member object nodes, or a function returning them.
        resolve_type: Called as ``resolve_type(value, context, info, node)``
            where ``node`` is this union node, see :class:`InterfaceNode`.
        description: Type description
    """

    kind = Kind.UNION

    def __init__(
        self,
        name: str,
        types: Lazy[Sequence[ObjectNode]],
        resolve_type: Optional[TypeResolver],
        description: Optional[str] = None,
    ):
        self.name = name
        self.description = description
        self.types = types
        self.resolve_type = resolve_type


class InputObjectNode(NamedNode):
    """
    Input object type node.

    Attributes:
        fields_fn (Callable[[], Mapping[str, InputFieldDef]]):
            Lazy field accessor, attached right after construction.
    """

    kind = Kind.INPUT_OBJECT

    def __init__(self, name: str, description: Optional[str] = None):
        self.name = name
        self.description = description
        self.fields_fn = (
            lambda: {}
        )  # type: Callable[[], Mapping[str, InputFieldDef]]


class SchemaDef:
    """
    Root of a type graph.

    Args:
        query: Root query type
        mutation: Root mutation type
        subscription: Root subscription type
        types: Additional types which cannot be reached from the root types,
            usually implementations of interfaces.
        directives: Engine directives (:class:`py_gql.schema.Directive`),
            passed as is.
    """

    def __init__(
        self,
        query: ObjectNode,
        mutation: Optional[ObjectNode] = None,
        subscription: Optional[ObjectNode] = None,
        types: Optional[Sequence[NamedNode]] = None,
        directives: Optional[Sequence[_schema.Directive]] = None,
    ):
        self.query = query
        self.mutation = mutation
        self.subscription = subscription
        self.types = list(types or [])
        self.directives = list(directives or [])


# Constructors.


def scalar(
    name: str,
    serialize: Callable[[Any], Any],
    parse_value: Optional[Callable[[Any], Any]] = None,
    parse_literal: Optional[Callable[..., Any]] = None,
    description: Optional[str] = None,
) -> ScalarNode:
    return ScalarNode(
        name,
        serialize,
        parse_value=parse_value,
        parse_literal=parse_literal,
        description=description,
    )


def enum_value(
    name: str,
    value: Any = _UNSET,
    description: Optional[str] = None,
    deprecation_reason: Optional[str] = None,
) -> EnumValueDef:
    return EnumValueDef(
        name,
        value,
        description=description,
        deprecation_reason=deprecation_reason,
    )


def enum_type(
    name: str,
    values: Iterable[Union[EnumValueDef, str, Tuple[str, Any]]],
    description: Optional[str] = None,
) -> EnumNode:
    return EnumNode(name, values, description=description)


def object_type(
    name: str,
    fields: Union[
        Callable[[ObjectNode], Sequence[FieldDef]], Sequence[FieldDef]
    ],
    interfaces: Optional[Lazy[Sequence[InterfaceNode]]] = None,
    is_type_of: Optional[IsTypeOf] = None,
    description: Optional[str] = None,
) -> ObjectNode:
    """
    Declare an object type.

    Args:
        name: Type name
        fields: Function receiving the created node and returning its fields.
            A plain sequence is accepted for types without forward
            references.
        interfaces: Implemented interfaces, or a function returning them.
        is_type_of: See :class:`ObjectNode`.
        description: Type description
    """
    node = ObjectNode(
        name,
        interfaces=interfaces,
        is_type_of=is_type_of,
        description=description,
    )
    node.fields_fn = _bind_fields(node, fields)
    return node


def query_type(
    fields: Lazy[Sequence[FieldDef]],
    name: str = "Query",
    description: Optional[str] = None,
) -> ObjectNode:
    """ Declare the root query type, ``fields`` takes no argument. """
    return object_type(
        name, lambda _: lazy_list(fields), description=description
    )


def mutation_type(
    fields: Lazy[Sequence[FieldDef]],
    name: str = "Mutation",
    description: Optional[str] = None,
) -> ObjectNode:
    """ Declare the root mutation type, ``fields`` takes no argument. """
    return object_type(
        name, lambda _: lazy_list(fields), description=description
    )


def subscription_type(
    fields: Lazy[Sequence[FieldDef]],
    name: str = "Subscription",
    description: Optional[str] = None,
) -> ObjectNode:
    """
    Declare the root subscription type.

    Fields should be declared with :func:`subscription_field`.
    """
    return object_type(
        name, lambda _: lazy_list(fields), description=description
    )


def interface_type(
    name: str,
    fields: Union[
        Callable[[InterfaceNode], Sequence[AbstractFieldDef]],
        Sequence[AbstractFieldDef],
    ],
    resolve_type: Optional[TypeResolver] = None,
    description: Optional[str] = None,
) -> InterfaceNode:
    """
    Declare an interface type, see :func:`object_type` for how ``fields``
    is handled.
    """
    node = InterfaceNode(
        name, resolve_type=resolve_type, description=description
    )
    node.fields_fn = _bind_fields(node, fields)
    return node


def union_type(
    name: str,
    types: Lazy[Sequence[ObjectNode]],
    resolve_type: Optional[TypeResolver],
    description: Optional[str] = None,
) -> UnionNode:
    return UnionNode(name, types, resolve_type, description=description)


def input_object_type(
    name: str,
    fields: Union[
        Callable[[InputObjectNode], Mapping[str, InputFieldDef]],
        Mapping[str, InputFieldDef],
    ],
    description: Optional[str] = None,
) -> InputObjectNode:
    """
    Declare an input object type.

    ``fields`` maps field names to :func:`input_field` declarations and can
    be a function receiving the created node.
    """
    node = InputObjectNode(name, description=description)
    if callable(fields):
        node.fields_fn = lambda: fields(node)  # type: ignore
    else:
        node.fields_fn = lambda: fields  # type: ignore
    return node


def list_of(of_type: TypeNode) -> ListNode:
    return ListNode(of_type)


def non_null(of_type: TypeNode) -> NonNullNode:
    return NonNullNode(of_type)


def field(
    name: str,
    type_: TypeNode,
    resolve: Optional[Resolver] = None,
    *,
    args: Optional[ArgMap] = None,
    description: Optional[str] = None,
    deprecation_reason: Optional[str] = None
) -> FieldDef:
    return FieldDef(
        name,
        type_,
        resolve=resolve,
        args=args,
        description=description,
        deprecation_reason=deprecation_reason,
    )


def subscription_field(
    name: str,
    type_: TypeNode,
    subscribe: Resolver,
    resolve: Optional[Resolver] = None,
    *,
    args: Optional[ArgMap] = None,
    description: Optional[str] = None,
    deprecation_reason: Optional[str] = None
) -> FieldDef:
    """
    Declare a field of the subscription root type.

    ``subscribe`` produces the source event stream, ``resolve`` maps every
    event to the field's value and defaults to returning the event.
    """
    return FieldDef(
        name,
        type_,
        resolve=resolve if resolve is not None else _event_resolver,
        args=args,
        description=description,
        deprecation_reason=deprecation_reason,
        subscribe=subscribe,
    )


def abstract_field(
    name: str,
    type_: TypeNode,
    *,
    args: Optional[ArgMap] = None,
    description: Optional[str] = None,
    deprecation_reason: Optional[str] = None
) -> AbstractFieldDef:
    return AbstractFieldDef(
        name,
        type_,
        args=args,
        description=description,
        deprecation_reason=deprecation_reason,
    )


def arg(type_: TypeNode, description: Optional[str] = None) -> ArgumentDef:
    return ArgumentDef(type_, description=description)


def default_arg(
    type_: TypeNode, default: Any, description: Optional[str] = None
) -> DefaultArgumentDef:
    return DefaultArgumentDef(type_, default, description=description)


def input_field(
    type_: TypeNode,
    description: Optional[str] = None,
    default_value: Any = _UNSET,
) -> InputFieldDef:
    return InputFieldDef(
        type_, description=description, default_value=default_value
    )


def _bind_fields(node: TypeNode, fields: Any) -> Callable[[], List[Any]]:
    if callable(fields):
        return lambda: lazy_list(fields(node))
    return lambda: lazy_list(fields)


def _event_resolver(event: Any, *_: Any, **__: Any) -> Any:
    return event


__all__ = (
    "Kind",
    "TypeNode",
    "NamedNode",
    "WrappingNode",
    "ListNode",
    "NonNullNode",
    "ScalarNode",
    "EnumValueDef",
    "EnumNode",
    "ArgumentDef",
    "DefaultArgumentDef",
    "InputFieldDef",
    "FieldDef",
    "AbstractFieldDef",
    "InterfaceNode",
    "ObjectNode",
    "UnionNode",
    "InputObjectNode",
    "SchemaDef",
    "String",
    "Int",
    "Float",
    "Boolean",
    "ID",
    "SPECIFIED_SCALARS",
    "scalar",
    "enum_value",
    "enum_type",
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
