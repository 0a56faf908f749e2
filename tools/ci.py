#!/usr/bin/env python3
# Copyright 2026 structserde Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the local checks for structserde: formatting, lint, tests with coverage and the wheel build.

Pass step names (``format``, ``lint``, ``tests``, ``build``) to run a subset.
"""

import pathlib
import subprocess
import sys
import time

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["ruff", "check", "src/", "tests/", "tools/"],
    "tests": ["pytest", "--cov=structserde", "--cov-report=term-missing"],
    "build": ["uv", "build"],
}


def main(argv: list[str]) -> int:
    """Run the selected steps (all by default) and print a summary."""
    selected = argv or list(STEPS)
    unknown = [name for name in selected if name not in STEPS]
    if unknown:
        print(chalk.red(f"unknown step(s): {', '.join(unknown)}; choose from {', '.join(STEPS)}"))
        return 2

    outcomes = [_run_step(name, STEPS[name]) for name in selected]

    _banner("Summary")
    failed = 0
    for name, ok, elapsed in outcomes:
        label = chalk.green("ok  ") if ok else chalk.red("FAIL")
        print(f"  {label}  {name:<8} {elapsed:6.1f}s")
        failed += not ok
    print()
    return 1 if failed else 0


# ################
# Implementation
# ################

_ROOT = pathlib.Path(__file__).resolve().parent.parent


def _banner(title: str) -> None:
    rule = chalk.blue("-" * 60)
    print(f"\n{rule}\n{chalk.blue(title)}\n{rule}")


def _run_step(name: str, cmd: list[str]) -> tuple[str, bool, float]:
    _banner(f"{name}: {' '.join(cmd)}")
    start = time.monotonic()
    try:
        returncode = subprocess.run(cmd, cwd=_ROOT).returncode
    except FileNotFoundError:
        print(chalk.red(f"{cmd[0]} is not installed"))
        returncode = 127
    return name, returncode == 0, time.monotonic() - start


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
