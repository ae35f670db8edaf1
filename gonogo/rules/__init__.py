# Importing the rule modules registers them.
from . import conditions, gates  # noqa: F401
from .context import RuleContext
from .registry import (
    get_all_conditions,
    get_all_gates,
    get_gate,
    register_condition,
    register_gate,
)

__all__ = [
    "RuleContext",
    "get_all_conditions",
    "get_all_gates",
    "get_gate",
    "register_condition",
    "register_gate",
]
