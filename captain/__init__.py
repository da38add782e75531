"""
Captain: capability merging for script-style modules
"""

from .context import ModuleContext, ScriptCallable, create_default_context
from .core import (
    ANCESTOR,
    UNDEFINED,
    InvalidArgumentError,
    MemberKind,
    Module,
    Point,
    ancestor_of,
    ancestors,
    behaviors_of,
    classify_member,
    data_of,
    lineage,
    lookup,
    make_point,
    merge,
    own_members,
    p,
)
from .models import ModuleSummary

__version__ = "0.1.0"

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
    # Context
    "ModuleContext",
    "ScriptCallable",
    "create_default_context",
    # Models
    "ModuleSummary",
]
