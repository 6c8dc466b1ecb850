"""
Command-line driver for model code generation.

Discovers ``*.model.xml`` documents, compiles them in parallel and writes
or prints the generated sources.
"""

from __future__ import annotations

import argparse
from typing import Sequence

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    ConfigError,
    GenerationResult,
    RegistryError,
    compile_batch,
    get_generator,
    iter_artifacts,
    list_all_language_info,
    load_config,
)
from .codegen.core.config import get_config_manager
from .logging_config import get_logger, setup_logging
from .utils import (
    SchemaLoaderError,
    find_duplicate_names,
    load_schema_units,
    write_artifacts,
)

logger = get_logger(__name__)

# Initialize rich console
console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="xml-modelgen",
        description="Generate entity/DTO classes and mappers from XML model documents",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  xml-modelgen models/ --output-dir Generated
  xml-modelgen Person.model.xml --namespace Contoso.Billing
  xml-modelgen models/ --config modelgen.json --workers 8 --verbose
  xml-modelgen --list-languages
        """.strip(),
    )

    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="PATH",
        help="Model documents or directories to search for *.model.xml",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        metavar="DIR",
        help="Directory for generated files (default: print to stdout)",
    )
    parser.add_argument(
        "--language",
        "-l",
        default="csharp",
        help="Target language (default: csharp)",
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument(
        "--namespace",
        metavar="NAME",
        help="Root namespace for generated code",
    )
    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't emit the auto-generated header comment",
    )
    parser.add_argument(
        "--workers",
        type=int,
        metavar="N",
        help="Number of parallel compilation workers",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show per-file results and warnings",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported target languages and exit",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def _build_config(args: argparse.Namespace):
    """Build configuration from the config file and CLI overrides."""
    overrides = {}
    if args.namespace:
        overrides["root_namespace"] = args.namespace
    if args.no_comments:
        overrides["add_comments"] = False

    try:
        config = load_config(
            args.language.lower(), custom_config=overrides, config_file=args.config
        )
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e

    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠️  Config:[/yellow] {warning}")

    return config


def _list_languages() -> int:
    """List supported languages."""
    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(list_all_language_info().items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], info["class"], aliases)

    console.print(table)
    return 0


def _print_summary(results: list[GenerationResult], verbose: bool) -> None:
    table = Table(title="📊 Generation Summary", box=box.SIMPLE, header_style="bold cyan")
    table.add_column("Model", style="bold")
    table.add_column("Status")
    table.add_column("Details", style="dim")

    for result in results:
        if not result.success:
            table.add_row(result.identifier, "[red]✗ failed[/red]", result.error_message)
        elif result.skipped:
            table.add_row(result.identifier, "[yellow]skipped[/yellow]", result.skip_reason)
        elif verbose:
            names = ", ".join(a.file_identifier for a in result.artifacts)
            table.add_row(result.identifier, "[green]✓[/green]", names)

    if table.row_count:
        console.print(table)

    if verbose:
        for result in results:
            for warning in result.warnings:
                console.print(f"  [yellow]•[/yellow] {warning}")

    compiled = sum(1 for r in results if r.success and not r.skipped)
    skipped = sum(1 for r in results if r.skipped)
    console.print(
        f"[green]✓[/green] {compiled} of {len(results)} model documents compiled "
        f"({skipped} skipped)"
    )


def _record_write_failures(
    results: list[GenerationResult], failures: dict[str, str]
) -> None:
    """Mark the units whose files could not be written as failed."""
    for result in results:
        reasons = [
            f"{a.file_identifier}: {failures[a.file_identifier]}"
            for a in result.artifacts
            if a.file_identifier in failures
        ]
        if reasons:
            result.success = False
            result.error_message = "; ".join(reasons)


def _print_sources(artifacts: list[tuple[str, str]]) -> None:
    for file_name, source in artifacts:
        console.print(Panel(Syntax(source, "csharp", theme="monokai"), title=file_name))


def run(args: argparse.Namespace) -> int:
    """Run generation for parsed arguments."""
    if args.list_languages:
        return _list_languages()

    if not args.inputs:
        raise CLIError("At least one model document or directory is required")

    config = _build_config(args)
    try:
        generator = get_generator(args.language, config)
    except RegistryError as e:
        raise CLIError(str(e)) from e

    try:
        units = list(load_schema_units(args.inputs, config.schema_suffix))
    except SchemaLoaderError as e:
        raise CLIError(str(e)) from e

    if not units:
        console.print(f"[yellow]No {config.schema_suffix} files found[/yellow]")
        return 0

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        progress.add_task(f"[cyan]Compiling {len(units)} model documents...", total=None)
        results = compile_batch(units, generator, max_workers=args.workers)

    artifacts = list(iter_artifacts(results))

    if args.output_dir:
        for name in find_duplicate_names(artifacts):
            console.print(f"[yellow]⚠️  {name} is generated by more than one model; last one wins[/yellow]")
        try:
            written, failures = write_artifacts(artifacts, args.output_dir)
        except SchemaLoaderError as e:
            raise CLIError(str(e)) from e
        _record_write_failures(results, failures)
        console.print(f"[green]✓[/green] Wrote {len(written)} files to [cyan]{args.output_dir}[/cyan]")
    else:
        _print_sources(artifacts)

    _print_summary(results, args.verbose)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Console entry point."""
    parser = create_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        return int(e.code or 0)

    setup_logging(args.log_level)

    try:
        return run(args)
    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.debug("CLI error", exc_info=True)
        return 1
