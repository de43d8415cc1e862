"""
Console output for the driver: command traces and the dry-run plan.
"""

import sys
from typing import TYPE_CHECKING, Sequence

from .config import REFERENCE_TARGET, DriverConfig

if TYPE_CHECKING:
    from .steps import Step


def print_trace(step: "Step") -> None:
    """Echoes a command before it runs, the way `set -x` does."""
    print(f"+ {step.command_line}", file=sys.stderr, flush=True)


def print_plan(config: DriverConfig, steps: Sequence["Step"]) -> None:
    """Prints the planned invocations without running them."""
    print(f"TARGET:     {config.target or '(empty)'}")
    if config.is_reference:
        print(f"REFERENCE:  yes ({REFERENCE_TARGET}), tests will run")
    else:
        print(f"REFERENCE:  no ({REFERENCE_TARGET}), check only")
    print("-" * 40)
    for i, step in enumerate(steps, start=1):
        print(f"{i}. {step.command_line}")
