from __future__ import annotations
"""Application use case for registering projects and processing them in bulk."""

from dataclasses import dataclass
import logging

from public_projects.domain.entities import ProjectSnapshot
from public_projects.domain.project import Project


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegistryProcessSummary:
    """Registry-level summary for one `process_all()` call."""

    projects: tuple[ProjectSnapshot, ...]
    funded_projects: int
    completed_projects: int


class ProjectRegistry:
    """Owner of projects with a bulk "process all" fan-out.

    Responsibilities:
    - keep projects in addition order (the same project may be added twice)
    - call `Project.process()` once per held entry on each `process_all()`
    - summarize resulting field values
    """

    def __init__(self) -> None:
        self._projects: list[Project] = []

    @property
    def projects(self) -> tuple[Project, ...]:
        """Read-only projects in addition order."""
        return tuple(self._projects)

    def __len__(self) -> int:
        return len(self._projects)

    def add(self, project: Project) -> None:
        self._projects.append(project)
        LOGGER.debug(
            "project registered",
            extra={"event": "registry.project.added", "project": project.name, "count": len(self._projects)},
        )

    def process_all(self) -> RegistryProcessSummary:
        """Process every registered project in addition order.

        Projects do not interact, so one project's actions never observe
        another's state. An empty registry is a successful no-op.

        Returns:
            `RegistryProcessSummary` with post-processing snapshots.
        """
        snapshots: list[ProjectSnapshot] = []

        for project in self._projects:
            project.process()
            snapshot = project.snapshot()
            snapshots.append(snapshot)
            LOGGER.info(
                "project processed",
                extra={
                    "event": "registry.project.processed",
                    "project": snapshot.name,
                    "department": snapshot.department,
                    "action_count": len(project.actions),
                    "funded": snapshot.funded,
                    "budget": snapshot.budget,
                    "completed": snapshot.completed,
                },
            )

        summary = RegistryProcessSummary(
            projects=tuple(snapshots),
            funded_projects=sum(1 for item in snapshots if item.funded),
            completed_projects=sum(1 for item in snapshots if item.completed),
        )

        LOGGER.info(
            "registry processing completed",
            extra={
                "event": "registry.completed",
                "project_count": len(summary.projects),
                "funded_projects": summary.funded_projects,
                "completed_projects": summary.completed_projects,
            },
        )

        return summary
