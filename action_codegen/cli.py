"""
Command-line interface for action code generation.

Generated code goes to stdout (or --output) as plain text so it can be
redirected; status, warnings and errors go to stderr through rich.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from rich import box
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    ListWriter,
    StreamWriter,
    load_config,
    run,
)
from .codegen.core.config import get_config_manager
from .logging_config import configure_logging, get_logger

logger = get_logger(__name__)

console = Console(stderr=True)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="action-codegen",
        description="Generate redux action enums, metadata, types and creators "
        "from TypeScript action declarations.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  action-codegen data/actions.ts > actions.generated.ts
  action-codegen --feature auth data/actions.ts -o auth.generated.ts
  action-codegen --config codegen.json data/actions.ts
        """.strip(),
    )

    parser.add_argument("file", help="TypeScript file declaring the action interfaces")

    parser.add_argument(
        "--feature",
        metavar="LABEL",
        help="Feature label prefixing every action value and added to metadata",
    )
    parser.add_argument(
        "--output", "-o", metavar="FILE", help="Output file (default: stdout)"
    )
    parser.add_argument(
        "--config", metavar="FILE", help="JSON configuration file for code generation"
    )

    imports_group = parser.add_argument_group("import options")
    imports_group.add_argument(
        "--actions-module",
        metavar="PATH",
        help="Module the declarations are imported from (default: ./actions)",
    )
    imports_group.add_argument(
        "--redux-module",
        metavar="NAME",
        help="Module providing the redux Action type (default: redux)",
    )

    display_group = parser.add_argument_group("display options")
    display_group.add_argument(
        "--highlight",
        action="store_true",
        help="Print syntax-highlighted code instead of plain text",
    )
    display_group.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show debug logs and generation metadata",
    )
    display_group.add_argument(
        "--log-file", metavar="FILE", help="Also write logs to this file"
    )
    display_group.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from CLI arguments, overriding the config file."""
    overrides = {
        "feature": args.feature,
        "actions_module": args.actions_module,
        "redux_module": args.redux_module,
        "output_file": args.output,
    }
    config = load_config(custom_config=overrides, config_file=args.config)

    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠️  {warning}[/yellow]")
        logger.warning(warning)

    return config


def _write_output(result: GenerationResult, config: GeneratorConfig, highlight: bool) -> None:
    if config.output_file:
        output_path = Path(config.output_file)
        with output_path.open("w", encoding="utf-8") as f:
            writer = StreamWriter(f)
            for line in result.lines:
                writer.write(line)
        console.print(
            f"[green]✓[/green] Generated {len(result.lines)} lines to [cyan]{output_path}[/cyan]"
        )
    elif highlight:
        Console().print(Syntax(result.code, "typescript", theme="monokai"))
    else:
        writer = StreamWriter(sys.stdout)
        for line in result.lines:
            writer.write(line)


def _print_metadata(result: GenerationResult) -> None:
    metadata_table = Table(
        title="📊 Generation Metadata",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    metadata_table.add_column("Property", style="bold")
    metadata_table.add_column("Value", style="green")

    for key, value in result.metadata.items():
        metadata_table.add_row(key.replace("_", " ").title(), str(value))

    console.print()
    console.print(metadata_table)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the generator from command-line arguments.

    Returns:
        Exit code (0 for success, 1 for any generation error)
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(
        verbose=args.verbose, log_file=Path(args.log_file) if args.log_file else None
    )

    try:
        config = _build_config(args)
        # Render into memory first so a failure never leaves partial output
        result = run(args.file, ListWriter(), config)
        _write_output(result, config, args.highlight)
    except GeneratorError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        logger.error("Generation failed: %s", e)
        return 1
    except OSError as e:
        console.print(f"[red]✗ Failed to write output:[/red] {e}")
        logger.error("Failed to write output: %s", e)
        return 1

    if args.verbose and result.metadata:
        _print_metadata(result)

    if result.warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
