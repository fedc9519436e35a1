#!/usr/bin/env python3
"""Run the pool example scripts one after another, stopping at the first failure.

Usage:
    python scripts/run_examples.py            # every example
    python scripts/run_examples.py basic      # only examples whose name contains "basic"
"""

import subprocess
import sys
from pathlib import Path

EXAMPLES_DIR = Path(__file__).resolve().parent.parent / "examples"

# Each example joins its pool before exiting; anything slower is a hang.
EXAMPLE_TIMEOUT = 30


def discover(patterns: list[str]) -> list[Path]:
    """Return example scripts in run order, filtered by name fragments."""
    scripts = sorted(EXAMPLES_DIR.glob("[0-9]*.py"))
    if not patterns:
        return scripts
    return [s for s in scripts if any(p in s.stem for p in patterns)]


def run_one(script: Path) -> subprocess.CompletedProcess[str] | None:
    """Run a script in a fresh interpreter; None means it timed out."""
    try:
        return subprocess.run(
            [sys.executable, str(script)],
            capture_output=True,
            text=True,
            timeout=EXAMPLE_TIMEOUT,
        )
    except subprocess.TimeoutExpired:
        return None


def report_failure(script: Path, proc: subprocess.CompletedProcess[str] | None) -> None:
    if proc is None:
        print(f"✗ {script.name} timed out after {EXAMPLE_TIMEOUT}s (pool never joined?)")
        return
    print(f"✗ {script.name} exited with {proc.returncode}")
    for label, stream in (("stdout", proc.stdout), ("stderr", proc.stderr)):
        if stream:
            print(f"--- {label} ---")
            print(stream.rstrip())


def main(argv: list[str]) -> int:
    if not EXAMPLES_DIR.is_dir():
        print(f"Examples directory not found: {EXAMPLES_DIR}")
        return 1

    scripts = discover(argv)
    if not scripts:
        print("No matching examples")
        return 1

    for index, script in enumerate(scripts, start=1):
        print(f"[{index}/{len(scripts)}] {script.name}", flush=True)
        proc = run_one(script)
        if proc is None or proc.returncode != 0:
            report_failure(script, proc)
            return 1
        if proc.stdout:
            print(proc.stdout.rstrip())
        print()

    print(f"✓ {len(scripts)} example(s) passed")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
