"""
Orchestrator for the CI driver.
Connects config, plan and runner: Plan -> Run -> Exit status.
"""

import logging

from .config import DriverConfig
from .reporting import print_plan
from .runner import StepFailed, run_steps
from .steps import build_plan

logger = logging.getLogger(__name__)


def run_driver(config: DriverConfig, dry_run: bool = False) -> int:
    """
    Runs the plan for `config` and returns the process exit status:
    0 if every step passed, else the status of the first failing step.
    """
    plan = build_plan(config)
    logger.debug(
        "Target %r is %sthe reference platform; %d step(s) planned.",
        config.target,
        "" if config.is_reference else "not ",
        len(plan),
    )

    if dry_run:
        print_plan(config, plan)
        return 0

    try:
        run_steps(plan)
    except StepFailed as e:
        logger.debug("Stopping: %s", e)
        return e.returncode

    return 0
