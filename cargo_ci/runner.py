"""
Fail-fast execution of build steps.
"""

import errno
import logging
import subprocess
from typing import Iterable, List

from .reporting import print_trace
from .steps import Step

logger = logging.getLogger(__name__)

# Shell conventions for a command that could not be started.
EXIT_NOT_EXECUTABLE = 126
EXIT_NOT_FOUND = 127


class StepFailed(Exception):
    """A delegated step exited nonzero. Carries the status to exit with."""

    def __init__(self, step: Step, returncode: int):
        super().__init__(f"{step.name} failed with exit status {returncode}")
        self.step = step
        self.returncode = returncode


def exit_status(returncode: int) -> int:
    """Maps a subprocess return code to a shell exit status (signal N -> 128 + N)."""
    if returncode < 0:
        return 128 - returncode
    return returncode


def run_step(step: Step) -> None:
    """Runs one step to completion with inherited stdio. Raises StepFailed on failure."""
    print_trace(step)
    try:
        subprocess.check_call(list(step.argv))
    except subprocess.CalledProcessError as e:
        raise StepFailed(step, exit_status(e.returncode)) from e
    except FileNotFoundError as e:
        logger.error("%s: command not found", step.argv[0])
        raise StepFailed(step, EXIT_NOT_FOUND) from e
    except PermissionError as e:
        logger.error("%s: permission denied", step.argv[0])
        raise StepFailed(step, EXIT_NOT_EXECUTABLE) from e
    except OSError as e:
        # ENOTDIR reports as not found, everything else as not executable.
        status = EXIT_NOT_FOUND if e.errno == errno.ENOTDIR else EXIT_NOT_EXECUTABLE
        logger.error("%s: %s", step.argv[0], e.strerror or e)
        raise StepFailed(step, status) from e

    logger.debug("Step '%s' succeeded.", step.name)


def run_steps(steps: Iterable[Step]) -> List[Step]:
    """
    Runs steps strictly in order. The first StepFailed propagates and nothing
    after it runs. Returns the steps that completed.
    """
    completed = []
    for step in steps:
        run_step(step)
        completed.append(step)
    return completed
