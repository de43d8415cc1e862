"""
Cargo Matrix CI Driver - Entry Point.
"""

import argparse
import logging
import sys

from cargo_ci.config import load_config
from cargo_ci.controller import run_driver


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Cargo Matrix CI Driver: runs `cargo check` for $TARGET, and on "
            "x86_64-unknown-linux-gnu also runs `cargo test` in debug and release."
        ),
        epilog="Configuration: TARGET (target triple). cargo is resolved through PATH.",
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the planned cargo invocations without running them.",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Pass control to the Controller in cargo_ci/
    return run_driver(load_config(), dry_run=args.dry_run)


if __name__ == "__main__":
    sys.exit(main())
