# Copyright 2026 dfd-behavior Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the dfd-behavior command-line interface."""

import argparse
import json
import logging
import sys
from pathlib import Path

from yachalk import chalk

from dfdbehavior.model.entities import DfdNode, DfdOutputPort
from dfdbehavior.model.labels import LabelTypeRegistry
from dfdbehavior.validation.diagnostics import Diagnostic
from dfdbehavior.validation.validator import PortBehaviorValidator, ValidatorSettings
from dfdbehavior.workspace.config import ConfigError, load_diagram_config, load_label_catalog

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the dfd-behavior CLI."""
    parser = argparse.ArgumentParser(
        prog="dfdbehavior",
        description="Validate output port behaviors of dataflow diagrams",
    )
    parser.add_argument("--verbose", action="store_true", help="Print debug output")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # check subcommand
    check_parser = subparsers.add_parser(
        "check",
        help="Validate all output behaviors of a diagram file",
        description="Validate the behavior text of every output port listed in a diagram file.",
    )
    check_parser.add_argument("diagram", help="Path to the diagram file (YAML or JSON)")
    _add_output_arguments(check_parser)

    # lint subcommand
    lint_parser = subparsers.add_parser(
        "lint",
        help="Validate a single behavior text file",
        description="Validate one behavior text against the given inputs and label catalog.",
    )
    lint_parser.add_argument("file", help="Path to the behavior text file")
    lint_parser.add_argument(
        "--input",
        dest="inputs",
        action="append",
        default=[],
        metavar="NAME",
        help="Name of an available input (repeatable)",
    )
    lint_parser.add_argument(
        "--labels",
        help="Diagram file whose label types are used as the label catalog",
    )
    lint_parser.add_argument(
        "--min-input-name-length",
        type=int,
        default=1,
        help="Shortest accepted input name (default: 1)",
    )
    _add_output_arguments(lint_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_output_arguments(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    subparser.add_argument("--no-color", action="store_true", help="Disable colored output")


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "check":
        return _cmd_check(args)
    if args.command == "lint":
        return _cmd_lint(args)
    return 0


def _cmd_check(args: argparse.Namespace) -> int:
    """Handle the check subcommand."""
    try:
        config = load_diagram_config(Path(args.diagram))
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    validator = PortBehaviorValidator(config.build_registry(), config.settings)
    results: list[tuple[str, str, Diagnostic]] = []
    port_count = 0
    for node in config.nodes:
        for port in node.outputs:
            port_count += 1
            for diagnostic in validator.validate(port.behavior, port):
                results.append((f"{node.name}.{port.name}", port.behavior, diagnostic))

    return _report(results, args, clean_message=f"Checked {port_count} output port(s). No issues found.")


def _cmd_lint(args: argparse.Namespace) -> int:
    """Handle the lint subcommand."""
    path = Path(args.file)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        print(f"Error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1

    registry: LabelTypeRegistry | None = None
    if args.labels:
        try:
            registry = load_label_catalog(Path(args.labels))
        except ConfigError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1

    if args.min_input_name_length < 1:
        print("Error: --min-input-name-length must be at least 1.", file=sys.stderr)
        return 1

    # Trailing newlines of the file are not part of the behavior text.
    text = text.rstrip("\n")
    node = DfdNode(name=path.stem, inputs=list(args.inputs))
    port = node.add_output(DfdOutputPort(name="out", behavior=text))
    settings = ValidatorSettings(min_input_name_length=args.min_input_name_length)
    diagnostics = PortBehaviorValidator(registry, settings).validate(text, port)

    results = [(str(path), text, d) for d in diagnostics]
    return _report(results, args, clean_message="No issues found.")


def _report(results: list[tuple[str, str, Diagnostic]], args: argparse.Namespace, clean_message: str) -> int:
    """Print the diagnostics in the requested format and return the exit code."""
    if args.format == "json":
        payload = [{"source": source, **diagnostic.to_dict()} for source, _, diagnostic in results]
        print(json.dumps(payload, indent=2))
        return 1 if results else 0

    color = not args.no_color and sys.stdout.isatty()
    for source, text, diagnostic in results:
        print(_format_diagnostic(source, text, diagnostic, color))

    if results:
        print(f"Found {len(results)} issue(s).")
        return 1
    print(clean_message)
    return 0


def _format_diagnostic(source: str, text: str, diagnostic: Diagnostic, color: bool) -> str:
    """Render a diagnostic with its source line and a caret underline."""
    line_text = text.split("\n")[diagnostic.line]
    start = diagnostic.col_start or 0
    end = diagnostic.col_end if diagnostic.col_end is not None else len(line_text)
    underline = " " * start + "^" * max(end - start, 1)

    location = f"{source}:{diagnostic.line + 1}:{start + 1}:"
    message = diagnostic.message
    if color:
        location = chalk.bold(location)
        message = chalk.red(message)
        underline = chalk.red(underline)
    return f"{location} {message}\n    {line_text}\n    {underline}"
