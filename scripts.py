#!/usr/bin/env python3
"""
Development scripts for the modkit project.

Every check runs through uv, e.g. ``python scripts.py check``.
"""

import subprocess
import sys
from collections.abc import Callable
from pathlib import Path

Command = tuple[list[str], str]


def run_command(cmd: list[str], description: str) -> bool:
    """Run a command and return True if successful."""
    print(f"\n🔄 {description}...")
    print(f"Running: {' '.join(cmd)}")

    try:
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as e:
        print(f"❌ {description} failed with exit code {e.returncode}")
        return False
    except FileNotFoundError:
        print(f"❌ Command not found: {cmd[0]}")
        return False

    print(f"✅ {description} passed")
    return True


def run_all(commands: list[Command]) -> int:
    """Run every command, even after a failure, and report overall status."""
    results = [run_command(cmd, description) for cmd, description in commands]
    return 0 if all(results) else 1


def run_tests() -> int:
    print("🧪 Running test suite")
    return run_all([(["uv", "run", "pytest", "-v"], "Tests")])


def run_lint() -> int:
    print("🔍 Running linting checks")
    status = run_all(
        [
            (["uv", "run", "ruff", "check", "."], "Ruff linting"),
            (["uv", "run", "ruff", "format", "--check", "."], "Ruff formatting"),
        ]
    )
    if status:
        print("\n💡 To auto-fix, run: uv run ruff format . && uv run ruff check --fix .")
    return status


def run_typecheck() -> int:
    print("🔬 Running type checking")
    return run_all(
        [
            (["uv", "run", "mypy", "src/modkit/"], "MyPy type checking"),
            (["uv", "run", "pyright", "src/modkit/"], "Pyright type checking"),
        ]
    )


def run_demos() -> int:
    """Run every script in demo/ except the ones starting with an underscore."""
    print("🎭 Running demo scripts")
    demos = sorted(path for path in Path("demo").glob("*.py") if not path.name.startswith("_"))
    if not demos:
        print("❌ No demo scripts found")
        return 1
    return run_all([(["uv", "run", "python", str(demo)], f"Demo: {demo.name}") for demo in demos])


def run_readme_validation() -> int:
    """Validate the code examples in README.md with phmdoctest."""
    print("📖 Validating README code examples")
    test_file = Path("test_readme.py")
    try:
        generated = run_command(
            ["uv", "run", "phmdoctest", "README.md", "--outfile", str(test_file)], "Generating README tests"
        )
        if not generated:
            return 1
        return run_all([(["uv", "run", "pytest", str(test_file), "-v"], "README code examples")])
    finally:
        test_file.unlink(missing_ok=True)


COMMANDS: dict[str, Callable[[], int]] = {
    "test": run_tests,
    "lint": run_lint,
    "typecheck": run_typecheck,
    "demos": run_demos,
    "readme": run_readme_validation,
}


def check_all() -> int:
    """Run every check and print a summary."""
    print("🚀 Running all checks for modkit")
    results = {name: func() == 0 for name, func in COMMANDS.items()}

    print(f"\n{'=' * 20} SUMMARY {'=' * 20}")
    for name, passed in results.items():
        print(f"{name:<15} {'✅ PASS' if passed else '❌ FAIL'}")
    return 0 if all(results.values()) else 1


if __name__ == "__main__":
    commands = {**COMMANDS, "check": check_all}
    if len(sys.argv) < 2 or sys.argv[1] not in commands:
        print(f"Available commands: {', '.join(commands)}")
        print("Usage: python scripts.py <command>")
        sys.exit(1)
    sys.exit(commands[sys.argv[1]]())
