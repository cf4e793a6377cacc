"""
Command-line interface for struct rendering.

Reads JSON struct descriptions and prints their definitions in one or
more target languages.
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .core.config import ConfigError
from .core.schema import StructDescriptor, struct_from_dict
from .core.templates import TemplateError
from .core.types import DescriptorError
from .entry import render_struct_result
from .logging_config import get_logger, setup_logging
from .registry import (
    RegistryError,
    get_language_info,
    get_registry,
    list_all_language_info,
)

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()

# Pygments lexer per language id
LEXERS = {
    "rust": "rust",
    "go": "go",
    "python": "python",
    "typescript": "typescript",
    "java": "java",
    "csharp": "csharp",
}


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="struct-to-string",
        description="Render struct definitions in several target languages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  struct-to-string schema.json --language typescript
  struct-to-string schema.json -l rust -l go --output structs.txt
  struct-to-string --stdin --all --plain < schema.json
  struct-to-string --list-languages
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument(
        "file", nargs="?", help="JSON file with a struct or a list of structs"
    )
    input_group.add_argument(
        "--stdin", action="store_true", help="Read JSON from standard input"
    )

    parser.add_argument(
        "--language",
        "-l",
        action="append",
        metavar="LANGUAGE",
        help="Target language (repeatable)",
    )
    parser.add_argument(
        "--all", action="store_true", help="Render for every supported language"
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument("--output", "-o", metavar="FILE", help="Output file (default: stdout)")
    parser.add_argument(
        "--plain", action="store_true", help="Print raw text without highlighting"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Report fidelity warnings for each rendering"
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages",
        action="store_true",
        help="List supported languages and exit",
    )
    info_group.add_argument(
        "--language-info",
        metavar="LANGUAGE",
        help="Show detailed info about a language and exit",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    args = create_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.list_languages:
            return _list_languages()

        if args.language_info:
            return _show_language_info(args.language_info)

        languages = _target_languages(args)
        structs = _load_structs(args)
        return _render_and_output(structs, languages, args)

    except (CLIError, DescriptorError, RegistryError, ConfigError, TemplateError) as e:
        logger.debug("CLI failed", exc_info=True)
        console.print(f"[red]✗ Error:[/red] {escape(str(e))}")
        return 1


def _target_languages(args: argparse.Namespace) -> List[str]:
    registry = get_registry()

    if args.all:
        return registry.list_languages()

    if not args.language:
        raise CLIError("--language or --all is required (see --list-languages)")

    # Fail on unknown targets before reading any input
    return [registry.get_profile(language).language_id for language in args.language]


def _read_input(args: argparse.Namespace) -> Any:
    if args.stdin:
        try:
            text = sys.stdin.read()
        except UnicodeDecodeError as e:
            raise CLIError(f"Cannot read standard input: {e}") from e
        source = "<stdin>"
    elif args.file:
        path = Path(args.file)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise CLIError(f"Cannot read {path}: {e}") from e
        source = str(path)
    else:
        raise CLIError("Input source required (file or --stdin)")

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise CLIError(f"Invalid JSON in {source}: {e}") from e

    logger.info("Loaded struct description from %s", source)
    return data


def _load_structs(args: argparse.Namespace) -> List[StructDescriptor]:
    data = _read_input(args)
    items = data if isinstance(data, list) else [data]
    if not items:
        raise CLIError("No struct descriptions found in input")
    return [struct_from_dict(item) for item in items]


def _render_and_output(
    structs: List[StructDescriptor], languages: List[str], args: argparse.Namespace
) -> int:
    outputs = []

    for struct in structs:
        for language in languages:
            result = render_struct_result(struct, language, args.config)
            outputs.append((struct, language, result))

    if args.output:
        path = Path(args.output)
        text = "\n\n".join(result.code for _, _, result in outputs) + "\n"
        try:
            path.write_text(text, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Cannot write {path}: {e}") from e
        console.print(f"[green]✓[/green] Wrote {len(outputs)} definition(s) to {path}")
    else:
        for struct, language, result in outputs:
            _print_result(struct, language, result, args.plain)

    if args.verbose:
        for struct, language, result in outputs:
            _print_warnings(struct, language, result)

    return 0


def _print_result(struct: StructDescriptor, language: str, result, plain: bool):
    if plain:
        # Raw text for piping into docs
        print(result.code)
        print()
        return

    syntax = Syntax(result.code, LEXERS.get(language, "text"), theme="monokai")
    console.print(
        Panel(
            syntax,
            title=f"{struct.name} · {get_language_info(language)['display_name']}",
            border_style="blue",
            expand=False,
        )
    )


def _print_warnings(struct: StructDescriptor, language: str, result):
    if not result.warnings:
        console.print(f"[green]✓[/green] {struct.name} ({language}): exact rendering")
        return

    for warning in result.warnings:
        console.print(f"[yellow]⚠️  {language}:[/yellow] {escape(warning)}")


def _list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Name")
    table.add_column("Extension", style="cyan")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(lang_name, info["display_name"], info["file_extension"], aliases)

    console.print(table)
    return 0


def _show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    info = get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]Display Name:[/bold] {info['display_name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Indent:[/bold] {info['indent']!r}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print(
        Panel(info_text, title=f"🔧 {info['display_name']}", border_style="green")
    )

    type_table = Table(title="Scalar types", box=box.SIMPLE, header_style="bold cyan")
    type_table.add_column("Canonical", style="green")
    type_table.add_column(info["display_name"], style="cyan")
    for kind, fragment in info["scalar_types"].items():
        type_table.add_row(kind, fragment)
    console.print(type_table)

    return 0


if __name__ == "__main__":
    sys.exit(main())
