#!/usr/bin/env python3
"""
Simple test runner for the Robot Battle engine.

Wraps pytest so the whole suite or a single test module can be run with one
short command.
"""

import argparse
import subprocess
import sys
from pathlib import Path

TESTS_DIR = Path(__file__).resolve().parent / "tests"


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and report the outcome."""
    print(f"=== {description} ===")
    print(f"Running: {' '.join(cmd)}")

    result = subprocess.run(cmd)
    if result.returncode == 0:
        print(f"{description} completed successfully\n")
        return True
    print(f"{description} failed with exit code {result.returncode}\n")
    return False


def find_test_file(name: str) -> Path:
    """Locate a test module anywhere under tests/ by bare name."""
    if not name.startswith("test_"):
        name = f"test_{name}"
    if not name.endswith(".py"):
        name = f"{name}.py"
    matches = sorted(TESTS_DIR.rglob(name))
    if not matches:
        raise SystemExit(f"No test file named {name} under {TESTS_DIR}")
    return matches[0]


def main():
    parser = argparse.ArgumentParser(
        description="Simple test runner for Robot Battle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                      # Run all tests
  python run_tests.py --quiet              # Run tests with minimal output
  python run_tests.py --test battle_session  # Run a specific test file
        """
    )
    parser.add_argument("--test", help="Run specific test file (e.g., 'catalog' for test_catalog.py)")
    parser.add_argument("--quiet", "-q", action="store_true", help="Run with minimal output")
    args = parser.parse_args()

    cmd = [sys.executable, "-m", "pytest"]
    if args.test:
        test_path = find_test_file(args.test)
        cmd.append(str(test_path))
        description = f"Test: {test_path.name}"
    else:
        cmd.append(str(TESTS_DIR))
        description = "All Tests"
    cmd.append("-q" if args.quiet else "-v")

    sys.exit(0 if run_command(cmd, description) else 1)


if __name__ == "__main__":
    main()
