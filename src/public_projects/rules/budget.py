from __future__ import annotations
"""Rule actions that change a project's budget."""

from public_projects.domain.actions import Action
from public_projects.domain.entities import ProjectState


class AdjustBudget(Action):
    """Add a fixed delta to the current budget.

    A negative delta cuts the budget. The result is not clamped, so the budget
    may go below zero.
    """

    def __init__(self, delta: float) -> None:
        self._delta = delta

    @property
    def delta(self) -> float:
        return self._delta

    def apply(self, state: ProjectState) -> None:
        state.budget = state.budget + self._delta


class BudgetFreeze(Action):
    """Reset the budget to zero regardless of its previous value."""

    def apply(self, state: ProjectState) -> None:
        state.budget = 0
