"""
Explicit delegation lookups along ancestor references.

Merging never walks chains on its own. These helpers are the caller-invoked
walk: each step follows exactly one ``ancestor`` reference.
"""

from typing import Any, Iterator, List, Optional

from .merger import ANCESTOR, InvalidArgumentError, own_members


class _Undefined:
    """Sentinel for a name that resolves nowhere along a chain."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "undefined"

    __str__ = __repr__


UNDEFINED = _Undefined()


def ancestor_of(obj: Any) -> Optional[Any]:
    """
    Get the ancestor reference recorded on an object.

    Args:
        obj: A merge target (or any object)

    Returns:
        The ancestor, or None if the object was never merged

    Raises:
        InvalidArgumentError: If obj is None
    """
    if obj is None:
        raise InvalidArgumentError("None has no ancestor")
    return getattr(obj, ANCESTOR, None)


def ancestors(obj: Any) -> Iterator[Any]:
    """
    Yield the ancestors of an object, nearest first.

    Stops at the first missing ancestor or at the first object already seen,
    so self-referential and cyclic chains terminate.
    """
    seen = {id(obj)}
    current = ancestor_of(obj)

    while current is not None and id(current) not in seen:
        yield current
        seen.add(id(current))
        current = ancestor_of(current)


def lineage(obj: Any) -> List[Any]:
    """Get the object followed by all of its ancestors."""
    return [obj, *ancestors(obj)]


def lookup(obj: Any, name: str, default: Any = UNDEFINED) -> Any:
    """
    Resolve a member name on an object or, failing that, on its ancestors.

    Args:
        obj: Object to start from
        name: Member name to resolve
        default: Value returned when no object in the lineage has the member

    Returns:
        The first member value found, or ``default``

    Example:
        >>> lookup(sub_module, "doSomething")()
        'Foo'
        >>> str(lookup(sub_module, "name"))
        'undefined'
    """
    for holder in lineage(obj):
        members = own_members(holder)
        if name in members:
            return members[name]

    return default
