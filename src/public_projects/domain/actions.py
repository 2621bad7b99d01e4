from __future__ import annotations
"""Domain action contracts and pipeline composition primitives."""

from abc import ABC, abstractmethod
from typing import Sequence

from .entities import ProjectState


class Action(ABC):
    """Pluggable project rule interface.

    Implementers should:
    - read required fields from `ProjectState`,
    - update `ProjectState` in place,
    - treat an unmet precondition as a no-op rather than an error.
    """

    @property
    def name(self) -> str:
        """Stable default action name used in summaries/logging."""
        return self.__class__.__name__

    @abstractmethod
    def apply(self, state: ProjectState) -> None:
        """Apply action logic to a single project.

        Args:
            state: Mutable state of the project being processed.
        """
        raise NotImplementedError


class ActionPipeline:
    """Ordered sequence of `Action` instances applied to one project."""

    def __init__(self, actions: Sequence[Action]) -> None:
        """Create pipeline from an ordered list/sequence of actions."""
        self._actions = tuple(actions)

    @property
    def actions(self) -> tuple[Action, ...]:
        """Read-only ordered actions configured for this pipeline."""
        return self._actions

    def __len__(self) -> int:
        return len(self._actions)

    def run(self, state: ProjectState) -> None:
        """Apply configured actions in bind order.

        Each action observes every mutation made by the actions before it.
        """
        for action in self._actions:
            action.apply(state)
