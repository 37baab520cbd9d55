"""
Command line host for the single file generator.

Runs the same generation an IDE runs on save, with the external generator
services loaded from a ``module:factory`` path.
"""

from __future__ import annotations

import argparse
import importlib
import logging
import sys
from typing import Any, Callable

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .codegen import (
    GenerationError,
    ProjectInfo,
    SingleFileGenerator,
    Version,
    list_all_language_info,
    load_config,
)
from .codegen.core.generator import GeneratorServices
from .logging_config import get_logger, setup_logging

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def load_services_factory(path: str) -> Callable[[], GeneratorServices]:
    """Resolve a ``package.module:callable`` path to a services factory.

    Args:
        path: Dotted module path and attribute separated by a colon.

    Returns:
        The callable returning ``GeneratorServices``.

    Raises:
        CLIError: If the path is malformed or cannot be imported.
    """
    module_name, sep, attr_path = path.partition(":")
    if not sep or not module_name or not attr_path:
        raise CLIError(f"Services must be given as MODULE:FACTORY, got '{path}'")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise CLIError(f"Cannot import services module '{module_name}': {e}") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise CLIError(f"'{module_name}' has no attribute '{attr_path}'") from e

    if not callable(target):
        raise CLIError(f"'{path}' is not callable")

    return target


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="featuregen",
        description="Generate test code behind feature files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  featuregen generate Features/Login.feature --services my_gen.services:create --referenced-version 3.9
  featuregen generate Login.feature -o Login.feature.cs --services my_gen.services:create
  featuregen languages
        """.strip(),
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    subparsers = parser.add_subparsers(dest="command")

    generate = subparsers.add_parser("generate", help="Generate the file behind a feature file")
    generate.add_argument("input", help="Feature file, relative to the project folder or absolute")
    generate.add_argument("--output", "-o", help="Output file (default: input plus language extension)")
    generate.add_argument(
        "--services",
        required=True,
        metavar="MODULE:FACTORY",
        help="Callable returning the generator services",
    )
    generate.add_argument("--project-name", default="Project", help="Name of the consuming project")
    generate.add_argument(
        "--referenced-version",
        metavar="X.Y[.Z]",
        help="Framework version referenced by the project (omit if not referenced)",
    )
    generate.add_argument("--config", metavar="FILE", help="JSON configuration file")
    generate.add_argument("--verbose", action="store_true", help="Print the written output")
    generate.set_defaults(func=_handle_generate)

    languages = subparsers.add_parser("languages", help="List supported target languages")
    languages.set_defaults(func=_handle_languages)

    return parser


def _handle_generate(args: argparse.Namespace) -> int:
    referenced_version = None
    if args.referenced_version:
        try:
            referenced_version = Version.parse(args.referenced_version)
        except ValueError as e:
            raise CLIError(str(e)) from e

    try:
        config = load_config(config_file=args.config)
    except Exception as e:
        raise CLIError(f"Configuration error: {e}") from e

    services_factory = load_services_factory(args.services)

    generator = SingleFileGenerator(
        ProjectInfo(args.project_name, referenced_version), config=config
    )
    written: dict[str, str] = {}

    @generator.events.on_generation_error
    def _print_generation_error(error: GenerationError) -> None:
        console.print(f"[yellow]⚠️  {escape(str(error))}[/yellow]")

    @generator.events.on_other_error
    def _print_other_error(exception: BaseException) -> None:
        console.print(f"[red]✗ {type(exception).__name__}:[/red] {escape(str(exception))}")

    def _writer(path: str, content: str) -> None:
        generator.writer(path, content)
        written[path] = content

    output_path = generator.generate_file(
        args.input, args.output, services_factory, output_writer=_writer
    )

    if output_path is None:
        console.print(f"[red]✗ No output written for {escape(args.input)}[/red]")
        return 1

    console.print(f"[green]✓[/green] Wrote [cyan]{output_path}[/cyan]")
    if args.verbose:
        console.print(Panel(escape(written.get(output_path, "")), title=output_path, border_style="blue"))
    return 0


def _handle_languages(args: argparse.Namespace) -> int:
    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Aliases", style="blue")
    table.add_column("Error statement", style="dim")

    for info in list_all_language_info().values():
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "none"
        table.add_row(info["display_name"], info["file_extension"], aliases, info["sample"])

    console.print(table)
    return 0


def main(argv: list[str] | None = None) -> int:
    """Run the command line interface.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(getattr(logging, args.log_level))

    if not getattr(args, "func", None):
        parser.print_help()
        return 1

    try:
        return args.func(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("CLI error", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
