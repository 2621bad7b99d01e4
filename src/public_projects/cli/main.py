from __future__ import annotations

import argparse
import logging
import os

from public_projects.application.use_cases.project_registry import ProjectRegistry, RegistryProcessSummary
from public_projects.cli.config import load_config
from public_projects.domain.actions import Action
from public_projects.domain.project import Project
from public_projects.logging_utils import configure_logging
from public_projects.rules import (
    AdjustBudget,
    ApproveFunding,
    BudgetFreeze,
    CompleteProject,
    ConditionalApproval,
    DepartmentTransfer,
)


ALLOWED_ACTIONS = (
    "approve-funding",
    "adjust-budget:<delta>",
    "complete-project",
    "conditional-approval:<threshold>:<action>",
    "department-transfer:<department>",
    "budget-freeze",
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="public-projects",
        description="Build a project, apply its action sequence and print the resulting state.",
    )

    parser.add_argument("--name", required=False, help="Project name. Falls back to PROJECT_NAME.")
    parser.add_argument("--department", required=False, help="Owning department. Falls back to PROJECT_DEPARTMENT.")
    parser.add_argument("--budget", required=False, help="Initial budget. Falls back to PROJECT_BUDGET (default 0).")
    parser.add_argument(
        "--funded",
        action="store_true",
        help="Start with funding approved. Falls back to PROJECT_FUNDED.",
    )
    parser.add_argument(
        "--actions",
        required=False,
        help="Comma separated action tokens in bind order. Falls back to PROJECT_ACTIONS.",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        required=False,
        help="How many times to process the registry. Falls back to PROJECT_ROUNDS (default 1).",
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    configure_logging(os.environ.get("LOG_LEVEL", "INFO"))
    logger = logging.getLogger(__name__)

    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = load_config(args=args, env=os.environ)
    except ValueError as error:
        parser.error(str(error))

    logger.info(
        "cli configuration resolved",
        extra={
            "event": "cli.config.resolved",
            "project": config.name,
            "department": config.department,
            "funded": config.funded,
            "budget": config.budget,
            "actions": config.actions,
            "rounds": config.rounds,
        },
    )

    try:
        actions = build_actions(config.actions)
    except RuntimeError as error:
        logger.exception("cli action parsing failed", extra={"event": "cli.actions.failed"})
        parser.error(str(error))

    registry = ProjectRegistry()
    registry.add(Project(config.name, config.department, config.funded, config.budget, actions))

    summary = registry.process_all()
    for _ in range(config.rounds - 1):
        summary = registry.process_all()

    _print_summary(summary, config.rounds)
    return 0


def build_actions(raw_actions: str) -> list[Action]:
    """Build actions from a comma separated token list, keeping token order."""
    tokens = [item.strip() for item in raw_actions.split(",") if item.strip()]
    return [_build_action(token) for token in tokens]


def _build_action(token: str) -> Action:
    action_name, _, argument = token.partition(":")
    action_name = action_name.strip().lower()
    argument = argument.strip()

    if action_name == "approve-funding":
        return ApproveFunding()

    if action_name == "complete-project":
        return CompleteProject()

    if action_name == "budget-freeze":
        return BudgetFreeze()

    if action_name == "adjust-budget":
        return AdjustBudget(_parse_float(argument, token))

    if action_name == "department-transfer":
        if not argument:
            raise RuntimeError(f"Action '{token}' requires a department name")
        return DepartmentTransfer(argument)

    if action_name == "conditional-approval":
        raw_threshold, _, inner_token = argument.partition(":")
        if not inner_token.strip():
            raise RuntimeError(f"Action '{token}' requires a wrapped action")
        return ConditionalApproval(_build_action(inner_token), _parse_float(raw_threshold, token))

    raise RuntimeError(
        f"Unknown action '{action_name}' in '{token}'. Allowed values: {', '.join(ALLOWED_ACTIONS)}"
    )


def _parse_float(value: str, token: str) -> float:
    try:
        return float(value)
    except ValueError as error:
        raise RuntimeError(f"Action '{token}' requires a numeric argument") from error


def _print_summary(summary: RegistryProcessSummary, rounds: int) -> None:
    print(f"Rounds processed: {rounds}")
    for item in summary.projects:
        print(f"- {item.name} [{item.department}]")
        print(f"  funded: {'yes' if item.funded else 'no'}")
        print(f"  budget: {item.budget:,.2f}")
        print(f"  completed: {'yes' if item.completed else 'no'}")
