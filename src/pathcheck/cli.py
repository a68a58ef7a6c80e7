"""Command-line interface for pathcheck."""
import sys
import logging
from typing import Tuple

import click
from . import __version__
from .core.exceptions import ValidationFailed
from .core.models import Config, PLATFORM_NAMES
from .core.validator import PathValidator
from .utils.console import ConsoleManager, THEME_NAMES


def setup_logging(debug: bool) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug else logging.WARNING
    format_string = '[%(levelname)s] %(message)s'

    logging.basicConfig(
        level=level,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stderr)]
    )


class CliContext:
    """Objects shared by all subcommands."""

    def __init__(self, config: Config):
        self.config = config
        self.console = ConsoleManager(theme=config.theme)
        self.validator = PathValidator(config.platform_context())


pass_context = click.make_pass_decorator(CliContext)


@click.group()
@click.option('--platform', '-p', 'platform_name', type=click.Choice(PLATFORM_NAMES),
              help='Path rules to apply (default: PATHCHECK_PLATFORM or auto-detect)')
@click.option('--theme', '-t', type=click.Choice(THEME_NAMES), help='Terminal color theme')
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.version_option(version=__version__)
@click.pass_context
def main(ctx: click.Context, platform_name: str, theme: str, debug: bool) -> None:
    """
    Validate and normalize filesystem paths.

    Examples:

        pathcheck --platform windows check "C:\\temp\\file.txt"

        pathcheck validate some/very/long/path

        pathcheck equal ./src src
    """
    config = Config(debug=debug)
    if platform_name:
        config.platform = platform_name
    if theme:
        config.theme = theme

    setup_logging(config.debug)
    try:
        ctx.obj = CliContext(config)
    except ValueError as e:
        raise click.UsageError(str(e))


@main.command()
@click.argument('paths', nargs=-1, required=True)
@click.option('--warn/--no-warn', default=None, help='Log a warning for each failed check')
@click.option('--strict', is_flag=True, help='Stop at the first invalid path')
@pass_context
def check(cli: CliContext, paths: Tuple[str, ...], warn: bool, strict: bool) -> None:
    """Report whether each PATH is valid for the platform."""
    if warn is None:
        warn = cli.config.warn

    invalid = 0
    for path in paths:
        try:
            valid = cli.validator.is_valid(path, warn=warn, error=strict)
        except ValidationFailed as e:
            cli.console.print_error(e.message)
            sys.exit(1)

        if valid:
            cli.console.print_success(f"VALID: {path}")
        else:
            cli.console.print_warning(f"INVALID: {path}")
            invalid += 1

    if invalid:
        sys.exit(1)


@main.command()
@click.argument('paths', nargs=-1, required=True)
@pass_context
def validate(cli: CliContext, paths: Tuple[str, ...]) -> None:
    """Print each PATH in a form the platform accepts."""
    failed = 0
    for path in paths:
        try:
            cli.console.print_path(cli.validator.validate(path))
        except ValidationFailed as e:
            cli.console.print_error(e.message)
            failed += 1

    if failed:
        sys.exit(1)


@main.command()
@click.argument('path')
@pass_context
def native(cli: CliContext, path: str) -> None:
    """Print the absolute PATH with the platform's preferred separator."""
    cli.console.print_path(cli.validator.native_path(path))


@main.command()
@click.argument('path')
@pass_context
def canonical(cli: CliContext, path: str) -> None:
    """Print the absolute form of PATH."""
    cli.console.print_path(cli.validator.canonical_path(path))


@main.command()
@click.argument('path1')
@click.argument('path2')
@pass_context
def equal(cli: CliContext, path1: str, path2: str) -> None:
    """Exit 0 if PATH1 and PATH2 name the same location, 1 otherwise."""
    if cli.validator.paths_equal(path1, path2):
        cli.console.print_success("EQUAL")
    else:
        cli.console.print_warning("NOT EQUAL")
        sys.exit(1)


if __name__ == '__main__':
    main()
