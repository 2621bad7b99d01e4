"""Pluggable project rule actions."""

from .budget import AdjustBudget, BudgetFreeze
from .funding import ApproveFunding, ConditionalApproval
from .lifecycle import CompleteProject, DepartmentTransfer

__all__ = [
	"AdjustBudget",
	"ApproveFunding",
	"BudgetFreeze",
	"CompleteProject",
	"ConditionalApproval",
	"DepartmentTransfer",
]
