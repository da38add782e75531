"""
Script context: named modules, global functions and calls by name.
"""

from .registry import ModuleContext, ScriptCallable, create_default_context

__all__ = [
    "ModuleContext",
    "ScriptCallable",
    "create_default_context",
]
