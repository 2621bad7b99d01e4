"""Tests for CLI configuration resolution."""

from argparse import Namespace

import pytest

from public_projects.cli.config import load_config


def make_args(**overrides):
    values = {"name": None, "department": None, "budget": None, "funded": False, "actions": None, "rounds": None}
    values.update(overrides)
    return Namespace(**values)


class TestLoadConfig:

    def test_arguments_resolve_config(self):
        config = load_config(
            make_args(name="River Bridge", department="Transportation", budget="1000000", actions="approve-funding", rounds=2),
            env={},
        )

        assert config.name == "River Bridge"
        assert config.department == "Transportation"
        assert config.budget == 1_000_000.0
        assert config.funded is False
        assert config.actions == "approve-funding"
        assert config.rounds == 2

    def test_environment_fallbacks(self):
        env = {
            "PROJECT_NAME": "City Park",
            "PROJECT_DEPARTMENT": "Environment",
            "PROJECT_BUDGET": "-250.5",
            "PROJECT_FUNDED": "yes",
            "PROJECT_ACTIONS": "budget-freeze",
            "PROJECT_ROUNDS": "3",
        }

        config = load_config(make_args(), env=env)

        assert config.name == "City Park"
        assert config.budget == -250.5
        assert config.funded is True
        assert config.actions == "budget-freeze"
        assert config.rounds == 3

    def test_arguments_win_over_environment(self):
        config = load_config(
            make_args(name="Arg Name", department="Arg Dept"),
            env={"PROJECT_NAME": "Env Name", "PROJECT_DEPARTMENT": "Env Dept"},
        )
        assert (config.name, config.department) == ("Arg Name", "Arg Dept")

    def test_defaults(self):
        config = load_config(make_args(name="P", department="D"), env={"PROJECT_BUDGET": "   "})

        assert config.budget == 0.0
        assert config.funded is False
        assert config.actions == ""
        assert config.rounds == 1

    @pytest.mark.parametrize(
        ("overrides", "env", "message"),
        [
            ({"department": "D"}, {}, "Missing project name"),
            ({"name": "P"}, {}, "Missing department"),
            ({"name": "P", "department": "D", "budget": "lots"}, {}, "must be a number"),
            ({"name": "P", "department": "D"}, {"PROJECT_FUNDED": "maybe"}, "must be a boolean"),
            ({"name": "P", "department": "D"}, {"PROJECT_ROUNDS": "x"}, "must be an integer"),
            ({"name": "P", "department": "D", "rounds": 0}, {}, "greater than 0"),
        ],
    )
    def test_invalid_configuration(self, overrides, env, message):
        with pytest.raises(ValueError, match=message):
            load_config(make_args(**overrides), env=env)
