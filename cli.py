"""Developer CLI for the rbxts MCP server."""

from __future__ import annotations

import subprocess
import sys
import time
from dataclasses import dataclass

import click


@dataclass(frozen=True)
class Check:
    name: str
    command: list[str]


HEALTH_CHECKS: list[Check] = [
    Check("lint", ["ruff", "check", "."]),
    Check("typecheck", ["mypy", "shared", "core", "modules"]),
    Check("build", [sys.executable, "-m", "compileall", "-q", "shared", "core", "modules"]),
    Check("test", [sys.executable, "-m", "pytest", "-q"]),
    Check("dead-exports", ["vulture", "shared", "core", "modules"]),
    Check("format", ["ruff", "format", "--check", "."]),
]


def run_check(check: Check) -> tuple[bool, float, str]:
    """Run one check, returning (passed, seconds, combined output)."""
    start = time.monotonic()
    try:
        proc = subprocess.run(check.command, capture_output=True, text=True)
    except FileNotFoundError as e:
        return False, time.monotonic() - start, str(e)
    return proc.returncode == 0, time.monotonic() - start, proc.stdout + proc.stderr


@click.group()
def cli():
    """rbxts MCP server tooling."""
    pass


@cli.command()
@click.option("--verbose", "-v", is_flag=True, help="Print the output of failing checks.")
def health(verbose: bool):
    """Run lint, typecheck, build, tests, dead-export scan and format check."""
    passed = 0
    for check in HEALTH_CHECKS:
        ok, seconds, output = run_check(check)
        icon = "✅" if ok else "❌"
        click.echo(f"{icon} {check.name} ({seconds:.1f}s)")
        if ok:
            passed += 1
        elif verbose and output.strip():
            click.echo(output.rstrip())

    click.echo(f"\n{passed}/{len(HEALTH_CHECKS)} checks passed")
    sys.exit(0 if passed == len(HEALTH_CHECKS) else 1)


@cli.command()
def serve():
    """Start the MCP server on stdio."""
    from core.main import run

    run()


if __name__ == "__main__":
    cli()
