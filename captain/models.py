"""
Pydantic models describing modules for display and export.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class ModuleSummary(BaseModel):
    """Summary of a registered module's members and ancestry."""

    name: str = Field(description="Name the module is registered under.")
    behaviors: List[str] = Field(
        default_factory=list, description="Sorted names of behavior-valued members."
    )
    data: List[str] = Field(
        default_factory=list, description="Sorted names of data-valued members."
    )
    ancestor: Optional[str] = Field(
        default=None,
        description="Registered name of the ancestor, '<anonymous>' if unregistered, "
        "or None if the module was never merged.",
    )
    lineage: List[str] = Field(
        default_factory=list,
        description="Names along the ancestor chain, starting with the module itself.",
    )
