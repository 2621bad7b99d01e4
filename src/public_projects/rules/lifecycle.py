from __future__ import annotations
"""Rule actions for project completion and ownership changes."""

from public_projects.domain.actions import Action
from public_projects.domain.entities import ProjectState


class CompleteProject(Action):
    """Mark the project completed, but only once it has been funded.

    Unfunded projects are left untouched.
    """

    def apply(self, state: ProjectState) -> None:
        if state.funded:
            state.completed = True


class DepartmentTransfer(Action):
    def __init__(self, new_department: str) -> None:
        self._new_department = new_department

    @property
    def new_department(self) -> str:
        return self._new_department

    def apply(self, state: ProjectState) -> None:
        state.department = self._new_department
