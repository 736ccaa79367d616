"""
The ``semverkit`` command.

The group callback applies the global flags (color, verbosity, config
file) once and stores the result in a :class:`SemverKitContext` that every
subcommand receives. :func:`main` is the console-script entry point and
turns every outcome into a process exit code.
"""

from __future__ import annotations

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.markup import escape

from semverkit.config import load_config
from semverkit.constants import CONFIG_ENV_VAR
from semverkit.__version__ import __version__
from semverkit.context import SemverKitContext
from semverkit.exceptions import ConfigError, SemverKitError
from semverkit.utils.logger import get_logger, level_for_verbosity, setup_logging
from semverkit.utils.console import print_error, print_warning, reconfigure_console
from semverkit.commands.parse import parse_command, validate_command
from semverkit.commands.compare import compare_command, sort_command
from semverkit.commands.store import store

logger = get_logger("cli")

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_INTERRUPTED = 130


def _apply_color(enabled: bool) -> None:
    # NO_COLOR is also read by rich and by the log formatter.
    if enabled:
        os.environ.pop("NO_COLOR", None)
    else:
        os.environ["NO_COLOR"] = "1"
    reconfigure_console()


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar=CONFIG_ENV_VAR,
    help="Read settings from this TOML file.",
)
@click.option(
    "--verbose",
    "-v",
    count=True,
    help="Log more detail (-v for info, -vv for debug).",
)
@click.option(
    "--color/--no-color",
    default=True,
    envvar="SEMVERKIT_COLOR",
    help="Colorize terminal output.",
)
@click.version_option(
    version=__version__,
    prog_name="semverkit",
    message="%(prog)s %(version)s",
)
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[Path],
    verbose: int,
    color: bool,
) -> None:
    """Parse, compare and store semantic versions.

    \b
    Commands:
      parse VERSION          Show the components of a version
      validate VERSION...    Check versions against the grammar
      compare A B            Compare two versions by precedence
      sort VERSION...        Print versions in precedence order
      store get|set|unset    Keep versions in a JSON file

    \b
    Examples:
      semverkit parse 1.0.0-rc.1+build.5
      semverkit compare 1.0.0-alpha 1.0.0
      semverkit -v store set last_release 1.4.0
    """
    _apply_color(color)

    level = level_for_verbosity(verbose)
    setup_logging(level=level, verbose=verbose > 1)
    logger.debug("Logging initialized at %s level", logging.getLevelName(level))

    try:
        settings = load_config(config)
    except ConfigError as exc:
        print_error(escape(str(exc)))
        raise SystemExit(EXIT_FAILURE) from exc

    state = SemverKitContext()
    state.config_path = settings.source_path
    state.verbose = verbose
    state.color = color
    state.config = settings
    ctx.obj = state

    logger.debug("semverkit %s, config from %s", __version__, settings.source_path or "defaults")


for _command in (parse_command, validate_command, compare_command, sort_command, store):
    cli.add_command(_command)


def main() -> int:
    """Run the CLI and return its exit code.

    0 on success, 1 for invalid input or any semverkit error, Click's own
    code (2) for usage errors, and 130 when interrupted.
    """
    try:
        code = cli(standalone_mode=False)
    except (click.exceptions.Abort, KeyboardInterrupt):
        print_warning("\nOperation cancelled by user")
        return EXIT_INTERRUPTED
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        if exc.code is None:
            return EXIT_OK
        return exc.code if isinstance(exc.code, int) else EXIT_FAILURE
    except SemverKitError as exc:
        print_error(escape(str(exc)))
        logger.debug("Error details: %s", exc.details or "<none>", exc_info=True)
        return EXIT_FAILURE
    return code if isinstance(code, int) else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
