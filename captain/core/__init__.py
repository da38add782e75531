"""
Core building blocks for capability merging.

This module contains the merge routine, the explicit delegation helpers and
the point value. None of them depend on the script context.
"""

from .geometry import Point, make_point, p
from .lookup import UNDEFINED, ancestor_of, ancestors, lineage, lookup
from .merger import (
    ANCESTOR,
    InvalidArgumentError,
    MemberKind,
    Module,
    behaviors_of,
    classify_member,
    data_of,
    merge,
    own_members,
)

__all__ = [
    # Merging
    "ANCESTOR",
    "InvalidArgumentError",
    "MemberKind",
    "Module",
    "classify_member",
    "own_members",
    "behaviors_of",
    "data_of",
    "merge",
    # Delegation
    "UNDEFINED",
    "ancestor_of",
    "ancestors",
    "lineage",
    "lookup",
    # Points
    "Point",
    "make_point",
    "p",
]
