from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(slots=True)
class AppConfig:
    name: str
    department: str
    funded: bool
    budget: float
    actions: str
    rounds: int


def load_config(args, env: Mapping[str, str]) -> AppConfig:
    name = _normalize_empty(args.name) or _normalize_empty(env.get("PROJECT_NAME"))
    department = _normalize_empty(args.department) or _normalize_empty(env.get("PROJECT_DEPARTMENT"))
    raw_budget = _normalize_empty(args.budget) or _normalize_empty(env.get("PROJECT_BUDGET"))
    raw_funded = "true" if args.funded else _normalize_empty(env.get("PROJECT_FUNDED"))
    actions = _normalize_empty(args.actions) or _normalize_empty(env.get("PROJECT_ACTIONS")) or ""
    raw_rounds = _normalize_empty(str(args.rounds) if args.rounds is not None else None) or _normalize_empty(
        env.get("PROJECT_ROUNDS")
    )

    if not name:
        raise ValueError("Missing project name. Use --name or set PROJECT_NAME")

    if not department:
        raise ValueError("Missing department. Use --department or set PROJECT_DEPARTMENT")

    budget = 0.0
    if raw_budget is not None:
        try:
            budget = float(raw_budget)
        except ValueError as error:
            raise ValueError("PROJECT_BUDGET/--budget must be a number") from error

    funded = False
    if raw_funded is not None:
        normalized = raw_funded.lower()
        if normalized in {"1", "true", "yes", "on"}:
            funded = True
        elif normalized not in {"0", "false", "no", "off"}:
            raise ValueError("PROJECT_FUNDED must be a boolean (true/false)")

    rounds = 1
    if raw_rounds is not None:
        try:
            rounds = int(raw_rounds)
        except ValueError as error:
            raise ValueError("PROJECT_ROUNDS/--rounds must be an integer") from error
        if rounds <= 0:
            raise ValueError("PROJECT_ROUNDS/--rounds must be greater than 0")

    return AppConfig(
        name=name,
        department=department,
        funded=funded,
        budget=budget,
        actions=actions,
        rounds=rounds,
    )


def _normalize_empty(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped if stripped else None
