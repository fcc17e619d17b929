"""
Combinators over type lists.

A type list is a tuple of typed test parameters. These helpers build the
parameter lists fed to parametrized typed test suites.
"""

import itertools
from typing import Any, Callable, Iterable, Tuple

Types = Tuple[Any, ...]


def map_types(f: Callable[[Any], Any], types: Iterable[Any]) -> Types:
    """Apply ``f`` to every element of a type list."""
    return tuple(f(t) for t in types)


def concat_types(*lists: Iterable[Any]) -> Types:
    """
    Concatenate type lists, preserving order.

    Args:
        lists: One or more type lists

    Returns:
        A single type list
    """
    if not lists:
        raise ValueError("concat_types needs at least one type list")
    return tuple(itertools.chain.from_iterable(lists))


def with_op_types(op: Any, types: Iterable[Any]) -> Types:
    """Tag every element of a type list with ``op``: ``(op, t)``."""
    return tuple((op, t) for t in types)


def cross_product_types(*lists: Iterable[Any]) -> Types:
    """
    Generate the cross product of type lists.

    The first list varies slowest, so
    ``cross_product_types((int, float), (str, bytes))`` is
    ``((int, str), (int, bytes), (float, str), (float, bytes))``.
    With no lists there is exactly one (empty) combination.
    """
    return tuple(itertools.product(*lists))


def filter_types(predicate: Callable[[Any], Any], types: Iterable[Any]) -> Types:
    """Keep the elements of a type list for which ``predicate`` holds."""
    return tuple(t for t in types if predicate(t))


def same_types(items: Iterable[Any]) -> bool:
    """Check if all elements of a combination are the same."""
    items = tuple(items)
    return all(item == items[0] for item in items[1:])


def negate_pred(predicate: Callable[[Any], Any]) -> Callable[[Any], bool]:
    """Provide a new predicate that negates the given one."""
    def negated(*args, **kwargs) -> bool:
        return not predicate(*args, **kwargs)
    negated.__name__ = f"not_{getattr(predicate, '__name__', 'predicate')}"
    return negated
