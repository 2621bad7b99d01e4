from __future__ import annotations
"""Rule actions that approve project funding, directly or behind a budget gate."""

import logging

from public_projects.domain.actions import Action
from public_projects.domain.entities import ProjectState


LOGGER = logging.getLogger(__name__)


class ApproveFunding(Action):
    """Mark the project as funded."""

    def apply(self, state: ProjectState) -> None:
        state.funded = True


class ConditionalApproval(Action):
    """Apply a wrapped action only while the budget meets a threshold.

    The gate reads `state.budget` when applied, not when constructed, so an
    earlier action in the same pipeline can open or close it. The threshold
    itself qualifies (`budget >= threshold`).

    Gates nest: wrapping another `ConditionalApproval` requires both
    thresholds to hold, and the inner gate is never evaluated when the outer
    one is closed.

    Expected usage:
    - `ConditionalApproval(ApproveFunding(), 1_000_000)`
    - `ConditionalApproval(ConditionalApproval(CompleteProject(), 2e6), 1e6)`
    """

    def __init__(self, action: Action, threshold: float) -> None:
        """Initialize gate.

        Args:
            action: Child action owned by this gate.
            threshold: Minimum budget required to delegate to `action`.
        """
        self._action = action
        self._threshold = threshold

    @property
    def child(self) -> Action:
        return self._action

    @property
    def threshold(self) -> float:
        return self._threshold

    def apply(self, state: ProjectState) -> None:
        if state.budget >= self._threshold:
            self._action.apply(state)
            return

        LOGGER.debug(
            "conditional gate closed",
            extra={
                "event": "action.gate.closed",
                "project": state.name,
                "child_action": self._action.name,
                "budget": state.budget,
                "threshold": self._threshold,
            },
        )
