from __future__ import annotations
"""Project aggregate: mutable state plus the actions bound to it."""

import logging
from typing import Sequence

from .actions import Action, ActionPipeline
from .entities import ProjectSnapshot, ProjectState


LOGGER = logging.getLogger(__name__)


class Project:
    """A project record advanced by its bound actions.

    Field values are only readable from outside; they change exclusively
    through `process()`, which hands the internal `ProjectState` to each bound
    action in turn.
    """

    def __init__(
        self,
        name: str,
        department: str,
        funded: bool,
        budget: float,
        actions: Sequence[Action] = (),
    ) -> None:
        self._state = ProjectState(
            name=name,
            department=department,
            funded=funded,
            budget=budget,
        )
        self._pipeline = ActionPipeline(actions)

    @property
    def name(self) -> str:
        return self._state.name

    @property
    def department(self) -> str:
        return self._state.department

    @property
    def funded(self) -> bool:
        return self._state.funded

    @property
    def budget(self) -> float:
        return self._state.budget

    @property
    def completed(self) -> bool:
        return self._state.completed

    @property
    def actions(self) -> tuple[Action, ...]:
        """Actions in bind order."""
        return self._pipeline.actions

    def process(self) -> None:
        """Apply every bound action once, in bind order.

        Not a no-op on repeat: deltas are added again and gates are
        re-evaluated against the already mutated state.
        """
        self._pipeline.run(self._state)
        LOGGER.debug(
            "project processed",
            extra={
                "event": "project.processed",
                "project": self._state.name,
                "action_names": [action.name for action in self._pipeline.actions],
                "funded": self._state.funded,
                "budget": self._state.budget,
                "completed": self._state.completed,
            },
        )

    def snapshot(self) -> ProjectSnapshot:
        return ProjectSnapshot.from_state(self._state)

    def __repr__(self) -> str:
        return (
            f"Project(name={self.name!r}, department={self.department!r}, "
            f"funded={self.funded!r}, budget={self.budget!r}, completed={self.completed!r})"
        )
