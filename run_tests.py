#!/usr/bin/env python3
"""
Simple test runner for the lob_sdk primitives.

Wraps pytest so the suite, or the tests matching a keyword, can be run
with one short command.
"""

import sys
import subprocess
import argparse


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and report whether it succeeded."""
    print(f"=== {description} ===")
    print(f"Running: {' '.join(cmd)}")

    result = subprocess.run(cmd)
    if result.returncode != 0:
        print(f"{description} failed with exit code {result.returncode}\n")
        return False
    print(f"{description} completed successfully\n")
    return True


def run_unit_tests(verbose: bool = True) -> bool:
    """Run all unit tests."""
    cmd = [sys.executable, "-m", "pytest", "tests/"]
    if verbose:
        cmd.append("-v")
    return run_command(cmd, "Unit Tests")


def run_matching_tests(keyword: str, verbose: bool = True) -> bool:
    """Run the tests whose names match a pytest -k expression."""
    cmd = [sys.executable, "-m", "pytest", "tests/", "-k", keyword]
    if verbose:
        cmd.append("-v")
    return run_command(cmd, f"Tests matching: {keyword}")


def main():
    """Main test runner function."""
    parser = argparse.ArgumentParser(
        description="Simple test runner for lob_sdk",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                        # Run all unit tests
  python run_tests.py --quiet                # Run tests with minimal output
  python run_tests.py --test douglas_peucker # Run tests matching a keyword
        """
    )

    parser.add_argument(
        "--test",
        help="Run tests matching a keyword (e.g., 'priority_queue')"
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Run with minimal output"
    )

    args = parser.parse_args()
    verbose = not args.quiet

    if args.test:
        success = run_matching_tests(args.test, verbose)
    else:
        success = run_unit_tests(verbose)

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
