"""Developer tasks for packstack.

Usage: uv run devops.py <task>
Tasks: fmt, lint, test, samples, clean
"""

import subprocess
import sys

SAMPLE_PLATFORMS = ("windows", "macos", "ubuntu", "debian", "arch", "fedora", "linux")
SAMPLE_IDS = ("git", "vscode", "firefox", "vlc")


def _run(commands: list[list[str]]) -> None:
    """Run commands in order and stop at the first failure."""
    for cmd in commands:
        try:
            subprocess.run(cmd, check=True)  # nosec: B603, B607
        except subprocess.CalledProcessError as e:
            print(f"Command failed: {' '.join(e.cmd)}", file=sys.stderr)
            sys.exit(e.returncode)


def format_code() -> None:
    """Format the codebase with Ruff."""
    _run([["ruff", "format", "."], ["ruff", "check", "--fix", "."]])


def lint() -> None:
    """Check formatting and lint rules without changing files."""
    _run([["ruff", "format", "--check", "."], ["ruff", "check", "."]])


def test() -> None:
    """Run the test suite."""
    _run([["uv", "run", "pytest", "-q"]])


def samples() -> None:
    """Write one sample script per platform into ./samples for manual review."""
    _run(
        [
            ["uv", "run", "packstack", "generate", *SAMPLE_IDS, "-p", platform, "-o", "samples"]
            for platform in SAMPLE_PLATFORMS
        ]
    )


def clean() -> None:
    """Remove caches and build artifacts."""
    _run(
        [
            ["find", ".", "-type", "d", "-name", "__pycache__", "-exec", "rm", "-rf", "{}", "+"],
            ["find", ".", "-type", "f", "-name", "*.pyc", "-delete"],
            ["rm", "-rf", ".pytest_cache", ".ruff_cache", "dist", "build", "samples"],
        ]
    )


TASKS = {
    "fmt": format_code,
    "lint": lint,
    "test": test,
    "samples": samples,
    "clean": clean,
}


if __name__ == "__main__":
    if len(sys.argv) != 2 or sys.argv[1] not in TASKS:
        print(__doc__, file=sys.stderr)
        sys.exit(2)
    TASKS[sys.argv[1]]()
