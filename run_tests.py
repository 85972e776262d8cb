#!/usr/bin/env python3
"""
Test runner script for pynoisemap.

Wraps pytest with the suites used during development. The taichi backend of
the session is taken from --arch (exported as PYNOISEMAP_ARCH), cpu otherwise.
"""
import argparse
import os
import subprocess
import sys

SUITES = {
    "imports": (["tests/test_imports.py"], "Import tests"),
    "unit": (["tests/unit/"], "Unit tests"),
    "cli": (["tests/unit/test_cli.py"], "CLI tests"),
    "integration": (["tests/integration/"], "Integration tests"),
}


def run_pytest(pytest_args, description, env):
    """Run pytest with the given arguments; True on success."""
    print(f"→ {description}")
    cmd = [sys.executable, "-m", "pytest"] + pytest_args
    return subprocess.run(cmd, env=env).returncode == 0


def main():
    parser = argparse.ArgumentParser(
        description="pynoisemap test runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_tests.py                    # imports + unit tests
  python run_tests.py --suite cli        # CLI tests only
  python run_tests.py --all --fast       # every suite, skipping slow tests
  python run_tests.py --arch cuda -v     # run on the CUDA backend
        """,
    )
    parser.add_argument("--suite", choices=sorted(SUITES), action="append",
                        help="Suite to run (repeatable)")
    parser.add_argument("--all", action="store_true", help="Run every suite")
    parser.add_argument("--fast", action="store_true", help="Exclude tests marked slow")
    parser.add_argument("--arch", default=None, help="Taichi backend for the session")
    parser.add_argument("-k", dest="keyword", default=None, help="Only run tests matching this expression")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose output")
    parser.add_argument("--coverage", action="store_true", help="Run with coverage report")

    args = parser.parse_args()

    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [".", env.get("PYTHONPATH")]))
    if args.arch:
        env["PYNOISEMAP_ARCH"] = args.arch

    common = ["-v" if args.verbose else "-q", "--disable-warnings"]
    if args.coverage:
        common += ["--cov=pynoisemap", "--cov-report=html", "--cov-report=term"]
    if args.fast:
        common += ["-m", "not slow"]
    if args.keyword:
        common += ["-k", args.keyword]

    if args.all:
        suites = ["imports", "unit", "integration"]
    elif args.suite:
        suites = args.suite
    else:
        suites = ["imports", "unit"]

    success = True
    for name in suites:
        paths, description = SUITES[name]
        if not run_pytest(common + paths, description, env):
            success = False

    if success:
        print("\n✅ All tests passed!")
        return 0
    print("\n❌ Some tests failed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
