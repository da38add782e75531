"""
Script context for named modules and global functions.

Holds a global namespace in which modules are registered by name, functions and
properties are installed, and functions are invoked by name, optionally inside
a named module (a "suite"). Python scripts can be loaded to populate it.
"""

import logging
import runpy
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Protocol

from rich.console import Console

from ..core import (
    ANCESTOR,
    UNDEFINED,
    Module,
    behaviors_of,
    data_of,
    lineage,
    lookup,
    make_point,
    merge,
    own_members,
)
from ..models import ModuleSummary

logger = logging.getLogger(__name__)
console = Console()

ANONYMOUS = "<anonymous>"
SCRIPT_PATTERN = "*.py"


def _check_global_name(name: str) -> None:
    if name == ANCESTOR:
        raise ValueError(f"Global name '{ANCESTOR}' is reserved")


class ScriptCallable(Protocol):
    """
    Protocol for objects that expose handlers to scripts.

    Implementations return a mapping of script-visible names to callables.
    """

    def handlers_for_script_methods(self) -> Dict[str, Callable[..., Any]]:
        ...


class ModuleContext:
    """
    Registry of named modules sharing one global namespace.

    Registered modules are members of ``globals``, so a module can be found
    both by name through the context and by lookup on the global namespace.
    """

    def __init__(self):
        self.globals = Module()

    def register(self, name: str, module: Optional[Module] = None) -> Module:
        """
        Register a module under a name.

        Args:
            name: Global name for the module
            module: Module to register (a new empty one when None)

        Returns:
            The registered module
        """
        _check_global_name(name)
        if module is None:
            module = Module()

        if self.get(name) is not None:
            console.print(
                f"[yellow]Warning: Module '{name}' already registered, replacing...[/yellow]"
            )

        setattr(self.globals, name, module)
        return module

    def get(self, name: str) -> Optional[Module]:
        """
        Get a registered module by name.

        Args:
            name: Module name

        Returns:
            Module instance or None if not found
        """
        value = own_members(self.globals).get(name)
        return value if isinstance(value, Module) else None

    def list_modules(self) -> List[str]:
        """Get list of registered module names."""
        return [
            name
            for name, value in own_members(self.globals).items()
            if isinstance(value, Module)
        ]

    def add_function(self, name: str, function: Callable[..., Any]) -> None:
        """Install a global function."""
        _check_global_name(name)
        if not callable(function):
            raise ValueError(f"Global function '{name}' is not callable")
        setattr(self.globals, name, function)

    def set_property(self, name: str, value: Any) -> None:
        """Install a global property."""
        _check_global_name(name)
        setattr(self.globals, name, value)

    def add_functions(
        self, functions: Mapping[str, Callable[..., Any]], name: str
    ) -> Module:
        """
        Register a suite of functions as a named module.

        Args:
            functions: Mapping of function name to callable
            name: Name for the suite

        Returns:
            The registered suite module
        """
        return self.register(name, Module(**functions))

    def expose(self, name: str, obj: ScriptCallable) -> Module:
        """Register the script handlers of an object as a named suite."""
        return self.add_functions(obj.handlers_for_script_methods(), name)

    def load_script(self, path: str | Path) -> List[str]:
        """
        Run a Python script against this context.

        The script sees every global of the context by name, plus ``context``,
        ``Module``, ``merge`` and ``lookup``. Each top-level Module the script
        binds (new or rebound) is registered under that name.

        Args:
            path: Path to the script file

        Returns:
            Names of the modules registered by the script

        Raises:
            ValueError: If the script file does not exist
        """
        path = Path(path)
        if not path.is_file():
            raise ValueError(f"Script not found: {path}")

        script_globals = {
            **own_members(self.globals),
            "context": self,
            "Module": Module,
            "merge": merge,
            "lookup": lookup,
        }
        namespace = runpy.run_path(str(path), init_globals=script_globals)

        registered = []
        for name, value in namespace.items():
            if name.startswith("_") or not isinstance(value, Module):
                continue
            if self.get(name) is value:
                continue
            self.register(name, value)
            registered.append(name)

        logger.info("Loaded script %s: %s", path, ", ".join(registered) or "-")
        return registered

    def load_all_scripts(self, directory: str | Path) -> List[str]:
        """
        Run every ``*.py`` script in a directory, in file name order.

        Args:
            directory: Directory holding the scripts

        Returns:
            Names of all modules registered, in load order

        Raises:
            ValueError: If the directory does not exist
        """
        directory = Path(directory)
        if not directory.is_dir():
            raise ValueError(f"Script directory not found: {directory}")

        registered = []
        for script in sorted(directory.glob(SCRIPT_PATTERN)):
            registered.extend(self.load_script(script))
        return registered

    def _require(self, name: str) -> Module:
        module = self.get(name)
        if module is None:
            raise ValueError(f"Unknown module: {name}")
        return module

    def extend(self, name: str, superclass_name: str) -> Module:
        """
        Merge the behaviors of one registered module into another.

        Args:
            name: Module receiving the behaviors
            superclass_name: Module providing them

        Returns:
            The extended module

        Raises:
            ValueError: If either module is not registered
        """
        module = self._require(name)
        superclass = self._require(superclass_name)
        return merge(module, superclass)

    def call_function(
        self, name: str, *parameters: Any, suite: Optional[str] = None
    ) -> Any:
        """
        Invoke a function by name.

        The function is resolved on the suite (or the global namespace) and
        then along its ancestors.

        Args:
            name: Function name
            *parameters: Positional arguments for the call
            suite: Optional name of the module holding the function

        Returns:
            Whatever the function returns

        Raises:
            ValueError: If the suite or function is unknown or not callable
        """
        holder = self.globals if suite is None else self._require(suite)
        function = lookup(holder, name)

        if function is UNDEFINED:
            where = f" in module '{suite}'" if suite else ""
            raise ValueError(f"Unknown function: {name}{where}")
        if not callable(function):
            raise ValueError(f"Member '{name}' is not a function")

        return function(*parameters)

    def name_of(self, module: Any) -> str:
        """Get the registered name of a module, by identity."""
        for name, value in own_members(self.globals).items():
            if value is module:
                return name
        return ANONYMOUS

    def resolve_lineage(self, name: str) -> List[str]:
        """
        Get the registered names along a module's ancestor chain.

        Args:
            name: Module name

        Returns:
            List of names, starting with the module itself
        """
        return [self.name_of(module) for module in lineage(self._require(name))]

    def describe(self, name: str) -> ModuleSummary:
        """Summarize a registered module."""
        module = self._require(name)
        ancestor = module.ancestor

        return ModuleSummary(
            name=name,
            behaviors=sorted(behaviors_of(module)),
            data=sorted(data_of(module)),
            ancestor=None if ancestor is None else self.name_of(ancestor),
            lineage=self.resolve_lineage(name),
        )


def create_default_context() -> ModuleContext:
    """
    Create a context with the standard script helpers installed.

    Returns:
        ModuleContext with the ``p`` point shorthand as a global function
    """
    context = ModuleContext()
    context.add_function("p", make_point)
    return context
