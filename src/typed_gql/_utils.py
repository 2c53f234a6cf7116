# -*- coding: utf-8 -*-
""" Some generic language level utilities for internal use. """

from typing import Any, Callable, Iterable, List, Sequence, TypeVar, Union

T = TypeVar("T")

Lazy = Union[T, Callable[[], T]]


def lazy(maybe_callable: Union[T, Callable[[], T]]) -> T:
    """ Calls a value if callable else returns it.

    >>> lazy(42)
    42

    >>> lazy(lambda: 42)
    42
    """
    if callable(maybe_callable):
        return maybe_callable()
    return maybe_callable


def lazy_list(maybe_callable: Lazy[Iterable[T]]) -> List[T]:
    """ Evaluate a lazy sequence into a list, ``None`` being the empty list.

    >>> lazy_list(lambda: (1, 2))
    [1, 2]

    >>> lazy_list(None)
    []
    """
    value = lazy(maybe_callable)
    if value is None:
        return []
    return list(value)


def identity(value: Any) -> Any:
    return value


def find_index(seq: Sequence[T], predicate: Callable[[T], bool]) -> int:
    """ Index of the first element matching ``predicate``, ``-1`` if none.

    >>> find_index([1, 2, 3], lambda x: x > 1)
    1

    >>> find_index([1, 2, 3], lambda x: x > 5)
    -1
    """
    for index, entry in enumerate(seq):
        if predicate(entry):
            return index
    return -1
