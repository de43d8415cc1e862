"""
The build plan: which cargo invocations run, and in what order.
"""

import shlex
from dataclasses import dataclass
from typing import List, Tuple

from .config import CARGO_PROGRAM, DriverConfig


@dataclass(frozen=True)
class Step:
    name: str
    argv: Tuple[str, ...]

    @property
    def command_line(self) -> str:
        return " ".join(shlex.quote(arg) for arg in self.argv)


def check_step(config: DriverConfig) -> Step:
    return Step("check", (CARGO_PROGRAM, "check", "--target", config.target))


def test_step(config: DriverConfig, release: bool = False) -> Step:
    argv = (CARGO_PROGRAM, "test", "--target", config.target)
    if release:
        return Step("test-release", argv + ("--release",))
    return Step("test", argv)


def build_plan(config: DriverConfig) -> List[Step]:
    """
    Check always runs first. Debug then release tests follow only on the
    reference target.
    """
    plan = [check_step(config)]
    if config.is_reference:
        plan.append(test_step(config))
        plan.append(test_step(config, release=True))
    return plan
