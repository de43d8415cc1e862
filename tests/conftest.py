"""
Pytest Configuration and Fixtures.
Centralizes configs and a fake cargo executable for the driver tests.
"""

import json
import stat
import sys

import pytest

from cargo_ci.config import REFERENCE_TARGET, DriverConfig

FAKE_CARGO = """#!{python}
import json
import os
import sys

args = sys.argv[1:]
with open(os.environ["FAKE_CARGO_LOG"], "a") as f:
    f.write(json.dumps(args) + "\\n")

# FAKE_CARGO_FAIL="<step>:<status>", step is check, test or test-release.
step = args[0] + ("-release" if "--release" in args else "")
fail = os.environ.get("FAKE_CARGO_FAIL", "")
if fail:
    name, status = fail.split(":")
    if name == step:
        sys.exit(int(status))
"""


@pytest.fixture
def reference_config():
    return DriverConfig(target=REFERENCE_TARGET)


@pytest.fixture
def other_config():
    return DriverConfig(target="aarch64-apple-darwin")


@pytest.fixture
def fake_cargo(tmp_path):
    """
    Writes an executable stand-in for cargo that records each invocation as a
    JSON line and fails on demand. Returns (script_path, read_calls).
    """
    script = tmp_path / "cargo"
    script.write_text(FAKE_CARGO.format(python=sys.executable))
    script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    log = tmp_path / "calls.jsonl"

    def read_calls():
        if not log.exists():
            return []
        return [json.loads(line) for line in log.read_text().splitlines()]

    return script, log, read_calls
