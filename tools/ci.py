#!/usr/bin/env python3
# Copyright 2026 calclex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Run the calclex CI checks locally: format, lint, type check, tests, and build."""

import argparse
import pathlib
import subprocess
import sys
import time
from dataclasses import dataclass

from yachalk import chalk

# ###############
# Public Interface
# ###############

STEPS: dict[str, list[str]] = {
    "format": ["uv", "run", "ruff", "format", "--check", "src/", "tests/", "tools/"],
    "lint": ["uv", "run", "ruff", "check", "src/", "tests/", "tools/"],
    "types": ["uv", "run", "ty", "check", "src/"],
    "tests": ["uv", "run", "pytest", "--cov=calclex", "--cov-report=term-missing"],
    "build": ["uv", "build"],
}


@dataclass
class StepResult:
    name: str
    passed: bool
    elapsed: float


def main(argv: list[str] | None = None) -> int:
    """Run the selected CI steps and print a summary."""
    parser = argparse.ArgumentParser(description="Run calclex CI checks.")
    parser.add_argument(
        "steps",
        nargs="*",
        help=f"Steps to run (default: all of {', '.join(STEPS)})",
    )
    parser.add_argument("--fail-fast", action="store_true", help="Stop after the first failing step")
    args = parser.parse_args(argv)

    unknown = [name for name in args.steps if name not in STEPS]
    if unknown:
        parser.error(f"unknown step(s): {', '.join(unknown)}")

    selected = args.steps or list(STEPS)
    results: list[StepResult] = []
    for name in selected:
        result = _run_step(name, STEPS[name])
        results.append(result)
        if args.fail_fast and not result.passed:
            break

    _print_summary(results)
    return 0 if all(result.passed for result in results) else 1


# ################
# Implementation
# ################

_SEPARATOR = "=" * 60


def _run_step(name: str, cmd: list[str]) -> StepResult:
    print(f"\n{chalk.blue(_SEPARATOR)}")
    print(chalk.blue(name))
    print(chalk.blue(_SEPARATOR))
    start = time.monotonic()
    proc = subprocess.run(cmd, cwd=pathlib.Path(__file__).parent.parent)
    return StepResult(name=name, passed=proc.returncode == 0, elapsed=time.monotonic() - start)


def _print_summary(results: list[StepResult]) -> None:
    print(f"\n{chalk.blue(_SEPARATOR)}")
    print(chalk.blue("  Summary"))
    print(chalk.blue(_SEPARATOR))
    for result in results:
        color = chalk.green if result.passed else chalk.red
        status = "PASS" if result.passed else "FAIL"
        print(color(f"  {status}  {result.name} ({result.elapsed:.1f}s)"))
    print()


if __name__ == "__main__":
    sys.exit(main())
