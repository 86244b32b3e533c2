"""Development script: format, lint, and test the symbol_opener package."""

import argparse
import subprocess
import sys


def run_step(command: list[str], step_name: str) -> None:
    """Run one check, exiting on the first failure."""
    print(f"\n--- {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\nFailed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Fix formatting and lint locally; only verify them with --ci."""
    parser = argparse.ArgumentParser(description="Run development checks.")
    parser.add_argument(
        "--ci", action="store_true", help="Check formatting and lint without rewriting files"
    )
    args = parser.parse_args()

    if args.ci:
        run_step(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
        run_step(["uv", "run", "ruff", "check"], "Ruff Lint")
    else:
        run_step(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_step(["uv", "run", "ruff", "check", "--fix"], "Ruff Linting & Fixes")

    run_step(["uv", "run", "pytest", "-q"], "Tests")
    print("\nAll checks passed.")


if __name__ == "__main__":
    main()
