"""CLI application entry point for quantcycle.

This module is the **sole error boundary** for the entire application.
It parses the command line, builds and runs the application, and
translates the outcome into a process exit code.  Failures are rendered
to stderr via the console proxy.

Architecture notes
------------------
* No application logic lives here — the work is delegated to the
  application object through the core runner.
* ``print()`` is forbidden outside the CLI layer.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from quantcycle.cli import exit_codes
from quantcycle.cli.console import console, escape
from quantcycle.core.models import AppConfig, CliArguments
from quantcycle.exceptions import QuantCycleError
from quantcycle.utils.log_setup import configure_logging
from quantcycle.version import __version__

logger = logging.getLogger(__name__)

_SHORT_SWITCHES = frozenset("vVh")
"""Short flags that take no value."""

_SHORT_VALUED = frozenset("io")
"""Short flags whose value may be attached (``-iin.csv``)."""


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

class _BooleanFlagAction(argparse.Action):
    """Boolean switch that also tolerates an attached value.

    ``--verbose`` and ``--verbose=<anything>`` set the flag; only the
    literal value ``false`` clears it.
    """

    def __init__(self, option_strings: list[str], dest: str, **kwargs: Any) -> None:
        super().__init__(option_strings, dest, nargs="?", const=True, **kwargs)

    def __call__(
        self,
        parser: argparse.ArgumentParser,
        namespace: argparse.Namespace,
        values: Any,
        option_string: str | None = None,
    ) -> None:
        setattr(namespace, self.dest, values is True or values != "false")


def _split_short_groups(argv: list[str]) -> list[str]:
    """Expand grouped short flags (``-vi in.csv``) into separate tokens.

    A value-taking letter consumes the rest of its group, as does
    ``v`` when followed by ``=`` (``-v=false``).  Unknown letters
    are dropped, and anything after a non-letter belongs to the dropped
    letter.  Tokens after ``--`` are left alone.
    """
    expanded: list[str] = []
    for position, token in enumerate(argv):
        if token == "--":
            expanded.extend(argv[position:])
            break
        if (
            not token.startswith("-")
            or token.startswith("--")
            or len(token) <= 2
            or not token[1:2].isalpha()
        ):
            expanded.append(token)
            continue
        if token[1] in _SHORT_VALUED:
            expanded.append(token)
            continue

        body = token[1:]
        for index, letter in enumerate(body):
            attached = body[index + 1 : index + 2] == "="
            if letter in _SHORT_VALUED or (letter == "v" and attached):
                expanded.append(f"-{body[index:]}")
                break
            if letter in _SHORT_SWITCHES:
                expanded.append(f"-{letter}")
            elif not letter.isalpha():
                break
            else:
                logger.debug("Ignoring unrecognized short flag: -%s", letter)
    return expanded


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Abbreviated long options are disabled so that anything other than
    the exact flags below is treated as unrecognized and ignored.
    """
    parser = argparse.ArgumentParser(
        prog="quantcycle",
        description="Run the QuantCycle application.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action=_BooleanFlagAction,
        default=False,
        metavar="BOOL",
        help="Enable debug logging.",
    )
    parser.add_argument(
        "-i",
        "--input",
        nargs="?",
        const="",
        default=None,
        help="Input path.",
    )
    parser.add_argument(
        "-o",
        "--output",
        nargs="?",
        const="",
        default=None,
        help="Output path.",
    )
    return parser


def parse_arguments(argv: list[str] | None = None) -> CliArguments:
    """Parse *argv* into a :class:`CliArguments` record.

    Unrecognized flags and positionals are ignored.  When *argv* is
    ``None``, ``sys.argv[1:]`` is used.
    """
    if argv is None:
        argv = sys.argv[1:]
    namespace, ignored = _build_parser().parse_known_args(
        _split_short_groups(list(argv)),
    )
    if ignored:
        logger.debug("Ignoring unrecognized arguments: %s", ignored)
    return CliArguments(
        verbose=namespace.verbose,
        input=namespace.input,
        output=namespace.output,
    )


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _report_failure(error: BaseException) -> None:
    """Write a representation of *error* to stderr."""
    hint = error.hint if isinstance(error, QuantCycleError) else None
    console.error(f"{type(error).__name__}: {error}", hint=hint)


def _handle_run(args: CliArguments) -> int:
    """Construct the application and run its operation to completion."""
    from quantcycle.core.application import QuantCycle
    from quantcycle.core.runner import run_application

    config = AppConfig.from_arguments(args)
    app = QuantCycle(config)

    outcome = run_application(app)
    if outcome.error is None:
        return exit_codes.SUCCESS

    logger.debug("Application failure", exc_info=outcome.error)
    _report_failure(outcome.error)
    return exit_codes.GENERAL_ERROR


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the quantcycle CLI.

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
    """
    args = parse_arguments(argv)
    configure_logging(args.verbose)
    logger.debug("Parsed arguments: %s", args)
    return _handle_run(args)


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
    except QuantCycleError as exc:
        console.error(str(exc), hint=exc.hint)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
