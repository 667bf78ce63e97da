# SPDX-License-Identifier: MIT
"""CLI entry point for the semrange command."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from .collection import VersionCollection
from .compare import compare_versions
from .config import CLIConfig, ConfigError, load_config
from .errors import InvalidVersionError
from .parser import parse_strict, parse_version
from .ranges import Range, parse_range
from .semver import Version


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None
        self.strict: Optional[bool] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    @property
    def use_strict(self) -> bool:
        if self.strict is not None:
            return self.strict
        return self.load_config().strict

    def parse(self, text: str) -> Version:
        """Parse ``text`` in the configured mode, exiting on failure."""
        parse = parse_strict if self.use_strict else parse_version
        try:
            return parse(text)
        except InvalidVersionError as e:
            echo_error(f"{text!r}: {e.message}")
            raise SystemExit(1) from e

    def render(self, version: Version, template: str = "") -> str:
        return version.format(template or self.load_config().format)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(package_name="semrange")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Read configuration from this directory's pyproject.toml.",
)
@click.option(
    "--strict/--permissive",
    default=None,
    help="Require exact SemVer 2.0.0 (overrides [tool.semrange] strict).",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path], strict: Optional[bool]) -> None:
    """Semantic version parsing, ordering and range matching.

    \b
    Examples:
        semrange parse 1.2.3-beta.1+build.5
        semrange compare 1.0.0-rc.1 1.0.0
        semrange sort 1.10.0 1.2.0 1.9.0 --desc
        semrange satisfies "^1.2" 1.9.3
        semrange max "~0.9.1" 0.9.0 0.9.5 0.10.0
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    ctx.strict = strict


@cli.command()
@click.argument("version")
@click.option(
    "--format",
    "-f",
    "template",
    default="",
    help="Output template, e.g. 'M.m.p-?' (tokens: M m p -? -! +? +!).",
)
@pass_context
def parse(ctx: Context, version: str, template: str) -> None:
    """Parse VERSION and print its components."""
    parsed = ctx.parse(version)
    echo_info(ctx.render(parsed, template))
    if ctx.verbose:
        echo_info(f"  major:      {parsed.major}")
        echo_info(f"  minor:      {parsed.minor}")
        echo_info(f"  patch:      {parsed.patch}")
        echo_info(f"  prerelease: {'.'.join(parsed.prerelease)}")
        echo_info(f"  build:      {'.'.join(parsed.build)}")


@cli.command()
@click.argument("first")
@click.argument("second")
@pass_context
def compare(ctx: Context, first: str, second: str) -> None:
    """Print '<', '=' or '>' for the precedence of FIRST against SECOND."""
    result = compare_versions(ctx.parse(first), ctx.parse(second))
    echo_info({-1: "<", 0: "=", 1: ">"}[result])


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--desc", is_flag=True, help="Sort from highest to lowest.")
@pass_context
def sort_versions(ctx: Context, versions: tuple[str, ...], desc: bool) -> None:
    """Print VERSIONS in precedence order, one per line."""
    collection = VersionCollection(ctx.parse(v) for v in versions)
    ordered = collection.sorted_descending() if desc else collection.sorted_ascending()
    for version in ordered:
        echo_info(ctx.render(version))


def _parse_range_or_exit(text: str) -> Range:
    try:
        return parse_range(text)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1) from e


@cli.command()
@click.argument("version_range", metavar="RANGE")
@click.argument("version")
@pass_context
def satisfies(ctx: Context, version_range: str, version: str) -> None:
    """Exit with status 0 if VERSION satisfies RANGE, 1 otherwise."""
    constraint = _parse_range_or_exit(version_range)
    parsed = ctx.parse(version)
    if constraint.satisfied_by(parsed):
        echo_success(f"{ctx.render(parsed)} satisfies {constraint}")
        return
    echo_warning(f"{ctx.render(parsed)} does not satisfy {constraint}")
    raise SystemExit(1)


@cli.command(name="max")
@click.argument("version_range", metavar="RANGE")
@click.argument("versions", nargs=-1, required=True)
@pass_context
def max_satisfying(ctx: Context, version_range: str, versions: tuple[str, ...]) -> None:
    """Print the greatest of VERSIONS that satisfies RANGE."""
    constraint = _parse_range_or_exit(version_range)
    collection = VersionCollection(ctx.parse(v) for v in versions)
    found = collection.greatest_satisfying(constraint)
    if found is None:
        echo_error(f"No version satisfies {constraint}")
        raise SystemExit(1)
    echo_info(ctx.render(found))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
