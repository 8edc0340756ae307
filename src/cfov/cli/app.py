"""CLI application entry point for cfov.

This module is the **sole error boundary** for the entire application.
It catches :class:`~cfov.exceptions.CfovError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering user-friendly messages on
stderr and returning well-defined exit codes.

Architecture notes
------------------
* No conversion math lives here; all work is delegated to the core
  layer.
* The converted angle is the only thing written to stdout; every
  diagnostic goes through the stderr console.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys
from decimal import Decimal

from cfov.cli import exit_codes
from cfov.cli.console import console
from cfov.core.conversion import run
from cfov.core.models import AspectRatio, ConversionRequest, FovAngle, FovDirection
from cfov.exceptions import (
    CfovError,
    ConflictingDirectionError,
    MissingArgumentsError,
    MissingDirectionError,
)
from cfov.version import __version__

_EPILOG = """\
examples:
  fov -v 16:9 90     vertical FOV for a 90 degree horizontal FOV at 16:9
  fov -h 4:3 55.5    horizontal FOV for a 55.5 degree vertical FOV at 4:3
"""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    ``-h`` selects the horizontal direction, so argparse's automatic
    help flag is replaced by ``-?/--help``.  The direction flags are
    plain booleans; :func:`_resolve_direction` turns them into typed
    errors rather than argparse usage errors.
    """
    parser = argparse.ArgumentParser(
        prog="fov",
        description="Convert between horizontal and vertical field of view.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument(
        "-v",
        "--vertical",
        action="store_true",
        help="Convert horizontal FOV to vertical FOV.",
    )
    parser.add_argument(
        "-h",
        "--horizontal",
        action="store_true",
        help="Convert vertical FOV to horizontal FOV.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Display version information.",
    )
    parser.add_argument(
        "-?",
        "--help",
        action="help",
        help="Display usage information.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="ARG",
        help="Aspect ratio (e.g. 16:9 or 1.78) followed by the input FOV in degrees.",
    )
    return parser


def _resolve_direction(vertical: bool, horizontal: bool) -> FovDirection:
    if vertical and horizontal:
        raise ConflictingDirectionError("Cannot specify both -h and -v")
    if vertical:
        return FovDirection.VERTICAL
    if horizontal:
        return FovDirection.HORIZONTAL
    raise MissingDirectionError("Must specify either -h or -v")


def _build_request(args: argparse.Namespace) -> ConversionRequest:
    """Validate parsed arguments into a :class:`ConversionRequest`."""
    direction = _resolve_direction(args.vertical, args.horizontal)

    if len(args.inputs) != 2:
        raise MissingArgumentsError(
            f"Must specify aspect ratio and input FOV "
            f"(got {len(args.inputs)} positional argument(s))"
        )

    ratio_text, fov_text = args.inputs
    return ConversionRequest(
        direction=direction,
        ratio=AspectRatio.parse(ratio_text),
        fov=FovAngle.parse(fov_text),
    )


def _format_angle(degrees: float) -> str:
    """Render *degrees* as a positional decimal, never in exponent notation."""
    return format(Decimal(repr(degrees)), "f")


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the fov CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.

    Raises
    ------
    CfovError
        When the arguments do not describe a valid conversion.
    """
    parser = _build_parser()
    args = parser.parse_intermixed_args(argv)

    request = _build_request(args)
    result = run(request)

    print(_format_angle(result.value))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except CfovError as exc:
        console.error(str(exc), exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
