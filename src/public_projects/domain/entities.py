from __future__ import annotations
"""Core domain entities shared by projects, rule actions and use cases.

These data models are plain dataclasses and carry no behaviour of their own;
state transitions live in `Action` implementations.
"""

from dataclasses import dataclass


@dataclass(slots=True)
class ProjectState:
    """Mutable per-project state passed through the action pipeline.

    Rules read and write this object. It is owned by exactly one `Project`
    and is never shared between projects.

    Attributes:
        name: Human-readable project name. Not changed by any rule.
        department: Department currently responsible for the project.
        funded: Whether funding has been approved.
        budget: Current budget, signed and fractional.
        completed: Whether the project has been marked complete.
    """

    name: str
    department: str
    funded: bool
    budget: float
    completed: bool = False


@dataclass(frozen=True, slots=True)
class ProjectSnapshot:
    """Immutable copy of project field values at one point in time."""

    name: str
    department: str
    funded: bool
    budget: float
    completed: bool

    @classmethod
    def from_state(cls, state: ProjectState) -> ProjectSnapshot:
        return cls(
            name=state.name,
            department=state.department,
            funded=state.funded,
            budget=state.budget,
            completed=state.completed,
        )
