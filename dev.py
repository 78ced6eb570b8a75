"""Development script to run checks (formatting, linting, tests) and a sample generation."""

import argparse
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run a shell command as a step in the development process."""
    print(f"\n--- Running Step: {step_name} ---")
    print(f"$ {' '.join(command)}")
    try:
        subprocess.run(command, check=True)
    except subprocess.CalledProcessError:
        print(f"\n❌ Failed: {step_name}")
        sys.exit(1)


def main() -> None:
    """Run the development checks and optionally generate pages for a manifest."""
    parser = argparse.ArgumentParser(
        description="Run development checks and an optional sample generation."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, without fixing"
    )
    parser.add_argument(
        "types",
        nargs="?",
        help="Type surface manifest to generate a dry-run listing for after the checks",
    )
    args = parser.parse_args()

    if args.ci:
        run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
        run_command(["uv", "run", "ruff", "check"], "Ruff Linting")
        run_command(["uv", "run", "pytest", "-q"], "Tests")
        print("\n✅ CI checks passed successfully.")
        return

    # Run auto-formatting and fixing
    run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
    run_command(
        ["uv", "run", "ruff", "check", "--fix", "--unsafe-fixes"],
        "Ruff Linting & Fixes",
    )
    run_command(["uv", "run", "pytest", "-q"], "Tests")

    if args.types:
        run_command(
            ["uv", "run", "python", "-m", "mdwikigen", args.types, "--dry-run"],
            "Sample Generation",
        )

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
