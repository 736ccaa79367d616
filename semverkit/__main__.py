"""
Executable module for semverkit.

Running:
    python -m semverkit

is equivalent to:
    semverkit
"""

from __future__ import annotations

import sys


def _print_startup_error(exc: ImportError) -> None:
    """Explain on stderr why the CLI could not be loaded."""
    sys.stderr.write("semverkit CLI could not be loaded.\n")
    sys.stderr.write(f"Python version : {sys.version}\n")
    try:
        from semverkit.__version__ import __version__

        sys.stderr.write(f"semverkit version: {__version__}\n")
    except ImportError:
        sys.stderr.write("semverkit version: <unknown>\n")
    sys.stderr.write(f"ImportError: {exc}\n")


def main() -> int:
    """
    Main entrypoint when executing `python -m semverkit`.

    Returns:
        Exit code returned by the CLI, or 1 if it cannot be imported.
    """
    try:
        # Import lazily so CLI dependencies are only loaded here
        from semverkit.cli import main as cli_main
    except ImportError as exc:
        _print_startup_error(exc)
        return 1

    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
