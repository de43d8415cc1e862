"""
Environment-driven configuration for the CI driver.
"""

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

logger = logging.getLogger(__name__)

# The only platform the test suite is run on.
REFERENCE_TARGET = "x86_64-unknown-linux-gnu"

# Resolved through PATH.
CARGO_PROGRAM = "cargo"


@dataclass(frozen=True)
class DriverConfig:
    """Settings for one driver run. Read once, never mutated."""

    target: str

    @property
    def is_reference(self) -> bool:
        return is_reference_target(self.target)


def is_reference_target(target: str) -> bool:
    """Exact match against the reference triple. No trimming or case folding."""
    return target == REFERENCE_TARGET


def load_config(environ: Optional[Mapping[str, str]] = None) -> DriverConfig:
    """
    Builds a DriverConfig from the process environment.

    TARGET is forwarded as-is. An unset TARGET reads as an empty string and is
    left for cargo to reject.
    """
    if environ is None:
        environ = os.environ

    target = environ.get("TARGET", "")
    if not target:
        logger.debug("TARGET is empty or unset; forwarding it unchanged.")

    config = DriverConfig(target=target)
    logger.debug("Loaded config: target=%r", config.target)
    return config
