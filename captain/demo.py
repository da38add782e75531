"""
Inheritance example: a sub-module extending and overriding a main module.
"""

from typing import Dict, Optional

from .context import ModuleContext, create_default_context
from .core import lookup


def build_inheritance_context() -> ModuleContext:
    """
    Build a context with ``MainModule`` and ``SubModule``.

    SubModule extends MainModule and then overrides ``doSomething`` to call
    the inherited version through its ancestor.

    Returns:
        ModuleContext holding both modules
    """
    context = create_default_context()

    main_module = context.register("MainModule")
    main_module.doSomething = lambda: "Foo"
    main_module.doSomethingImpressive = lambda: "Yes"

    sub_module = context.register("SubModule")
    context.extend("SubModule", "MainModule")

    def do_something():
        # ``name`` is never set, so it resolves to undefined
        return sub_module.ancestor.doSomething() + "Bar, " + str(lookup(sub_module, "name"))

    sub_module.doSomething = do_something
    return context


def run_inheritance_demo(context: Optional[ModuleContext] = None) -> Dict[str, str]:
    """
    Call each example function and collect the results.

    Args:
        context: Context from build_inheritance_context (built when None)

    Returns:
        Dictionary mapping "Module.function" to the call result
    """
    if context is None:
        context = build_inheritance_context()

    calls = [
        ("MainModule", "doSomething"),
        ("MainModule", "doSomethingImpressive"),
        ("SubModule", "doSomething"),
        ("SubModule", "doSomethingImpressive"),
    ]
    return {
        f"{suite}.{name}": context.call_function(name, suite=suite)
        for suite, name in calls
    }
