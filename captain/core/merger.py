"""
Capability merging for script-style modules.

This module provides the routine that lets one object take on the callable
behaviors of another: every behavior-valued member of a source is copied onto
a target, and the target keeps a single back-reference to the source.
"""

import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, Iterable

logger = logging.getLogger(__name__)

ANCESTOR = "ancestor"


class InvalidArgumentError(ValueError):
    """Raised when a merge operand is missing or cannot play its role."""


class MemberKind(str, Enum):
    """Classification of a capability set member."""

    BEHAVIOR = "behavior"
    DATA = "data"


def classify_member(value: Any) -> MemberKind:
    """
    Classify a member value as a behavior or as plain data.

    Args:
        value: Member value to classify

    Returns:
        MemberKind.BEHAVIOR for callables, MemberKind.DATA otherwise
    """
    return MemberKind.BEHAVIOR if callable(value) else MemberKind.DATA


class Module:
    """
    A named-member namespace that can be merged into other modules.

    Members live as instance attributes and any name may be used; the class
    defines no public attributes of its own. The ``ancestor`` slot is not a
    member: it holds the capability set this module was last merged with, or
    None. Use own_members, behaviors_of and data_of to enumerate a module.

    Example:
        >>> main = Module(doSomething=lambda: "Foo")
        >>> sub = merge(Module(), main)
        >>> sub.doSomething()
        'Foo'
    """

    def __init__(self, **members: Any):
        if ANCESTOR in members:
            raise InvalidArgumentError(f"'{ANCESTOR}' is reserved for the ancestor reference")

        self.ancestor = None
        for name, value in members.items():
            setattr(self, name, value)

    def __contains__(self, name: str) -> bool:
        return name != ANCESTOR and name in vars(self)

    def __repr__(self) -> str:
        return f"Module({', '.join(sorted(own_members(self)))})"


def own_members(obj: Any) -> Dict[str, Any]:
    """
    Enumerate the own members of a capability set.

    Modules yield their members, mappings yield their items, and other objects
    yield their public instance attributes. The ancestor slot is never a member.

    Args:
        obj: Capability set to enumerate

    Returns:
        Dictionary of member name to value (a fresh copy)

    Raises:
        InvalidArgumentError: If obj is None or has no enumerable members
    """
    if obj is None:
        raise InvalidArgumentError("Cannot enumerate members of None")

    if isinstance(obj, Module):
        return {name: value for name, value in vars(obj).items() if name != ANCESTOR}

    if isinstance(obj, Mapping):
        return {name: value for name, value in obj.items() if name != ANCESTOR}

    try:
        namespace = vars(obj)
    except TypeError:
        raise InvalidArgumentError(
            f"Cannot enumerate members of {type(obj).__name__!r} object"
        )

    return {
        name: value
        for name, value in namespace.items()
        if not name.startswith("_") and name != ANCESTOR
    }


def behaviors_of(obj: Any) -> Dict[str, Any]:
    """Get the behavior-valued own members of a capability set."""
    return {
        name: value
        for name, value in own_members(obj).items()
        if classify_member(value) is MemberKind.BEHAVIOR
    }


def data_of(obj: Any) -> Dict[str, Any]:
    """Get the data-valued own members of a capability set."""
    return {
        name: value
        for name, value in own_members(obj).items()
        if classify_member(value) is MemberKind.DATA
    }


def _check_target(target: Any) -> None:
    if target is None:
        raise InvalidArgumentError("Cannot merge into None")

    if isinstance(target, Module):
        return

    if isinstance(target, Mapping) or not hasattr(target, "__dict__"):
        raise InvalidArgumentError(
            f"Merge target {type(target).__name__!r} does not accept member assignment"
        )


def _check_assignable(target: Any, names: Iterable[str]) -> None:
    # Every assignment in merge must succeed once the first one is made
    for name in names:
        attribute = getattr(type(target), name, None)
        if isinstance(attribute, property) and attribute.fset is None:
            raise InvalidArgumentError(
                f"Merge target {type(target).__name__!r} has read-only attribute {name!r}"
            )


def merge(target: Any, source: Any) -> Any:
    """
    Merge the behaviors of ``source`` into ``target``.

    Every behavior-valued own member of source is assigned onto target under
    the same name (the same object, not a copy). Data members are skipped.
    Finally ``target.ancestor`` is set to source, replacing any earlier one.

    Both operands are validated before target is touched, so a failed merge
    leaves target unchanged.

    Args:
        target: Object receiving the behaviors (a Module or any object with
            a ``__dict__``)
        source: Capability set providing the behaviors

    Returns:
        The mutated target

    Raises:
        InvalidArgumentError: If either operand is None, source cannot be
            enumerated, or target cannot take member assignments
    """
    _check_target(target)
    if source is None:
        raise InvalidArgumentError("Cannot merge from None")

    behaviors = behaviors_of(source)
    _check_assignable(target, behaviors)

    for name, behavior in behaviors.items():
        setattr(target, name, behavior)

    setattr(target, ANCESTOR, source)

    logger.debug(
        "Merged %d behavior(s) from %r into %r: %s",
        len(behaviors),
        source,
        target,
        ", ".join(sorted(behaviors)) or "-",
    )
    return target
