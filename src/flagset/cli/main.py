# Copyright 2026 Flagset Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the flagset command-line interface."""

import argparse
import logging
import sys
from pathlib import Path

from flagset.compiler.codegen import RenderForm, render
from flagset.compiler.parser import parse
from flagset.config import ConfigError, FlagsetConfig, find_config, load_config
from flagset.errors import ParseError
from flagset.logging import resolve_level, setup_logging

logger = logging.getLogger(__name__)

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the flagset CLI."""
    parser = argparse.ArgumentParser(
        prog="flagset",
        description="flagset: expand Namespace::Type::{A | B} flag invocations",
    )
    _add_common_options(parser, config_default=None, verbose_default=False)
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # expand subcommand
    expand_parser = subparsers.add_parser(
        "expand",
        help="Print the Python expression an invocation stands for",
        description="Parse each invocation and print its expansion.",
    )
    expand_parser.add_argument("invocations", nargs="+", metavar="INVOCATION")
    _add_common_options(expand_parser)
    expand_parser.add_argument(
        "--form",
        choices=[form.value for form in RenderForm] + ["elements"],
        default=RenderForm.FOLD.value,
        help="Output shape (default: fold)",
    )

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Check invocations for syntax errors",
        description="Parse each invocation and report syntax errors.",
    )
    check_parser.add_argument("invocations", nargs="+", metavar="INVOCATION")
    _add_common_options(check_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_common_options(
    parser: argparse.ArgumentParser,
    config_default: object = argparse.SUPPRESS,
    verbose_default: object = argparse.SUPPRESS,
) -> None:
    """Add --config and -v.

    They are accepted both before and after the subcommand. Subcommands use
    SUPPRESS defaults so an unset option does not overwrite the top-level value.
    """
    parser.add_argument(
        "--config",
        type=Path,
        default=config_default,
        help="Path to a .flagset.yaml file (default: ./.flagset.yaml if present)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=verbose_default,
        help="Log parser and resolver activity",
    )


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    try:
        config = _load_config(args.config)
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.verbose:
        setup_logging(logging.DEBUG)
    else:
        setup_logging(resolve_level(config.log_level))

    if args.command == "expand":
        return _cmd_expand(args, config)
    if args.command == "check":
        return _cmd_check(args, config)
    return 0


def _load_config(path: Path | None) -> FlagsetConfig:
    """Load the explicit config file, the one in the working directory, or defaults."""
    if path is None:
        path = find_config(Path.cwd())
        if path is None:
            return FlagsetConfig()
    logger.info("Using config %s", path)
    return load_config(path)


def _cmd_expand(args: argparse.Namespace, config: FlagsetConfig) -> int:
    """Handle the expand subcommand."""
    has_errors = False
    for source in args.invocations:
        try:
            invocation = parse(source, config.parser)
        except ParseError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            has_errors = True
            continue
        if args.form == "elements":
            for element in invocation.elements():
                print(element)
        else:
            print(render(invocation, RenderForm(args.form)))
    return 1 if has_errors else 0


def _cmd_check(args: argparse.Namespace, config: FlagsetConfig) -> int:
    """Handle the check subcommand."""
    has_errors = False
    for source in args.invocations:
        try:
            invocation = parse(source, config.parser)
        except ParseError as exc:
            print(f"Error: {source!r}: {exc}", file=sys.stderr)
            has_errors = True
            continue
        print(f"OK: {invocation}")
    return 1 if has_errors else 0
