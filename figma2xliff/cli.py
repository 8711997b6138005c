"""Command-line interface for the Figma to XLIFF converter."""

import click
from pathlib import Path
from typing import Optional
from rich.console import Console
from rich.table import Table
from rich.panel import Panel

from . import __version__
from .config import config
from .extraction.variables_parser import VariablesParser
from .models.variables import LocaleCode, VariablesDocument
from .pipeline import ConversionResult, convert_document, write_documents

console = Console()


@click.group()
@click.version_option(version=__version__)
def cli():
    """Figma variables to XLIFF 2.0 converter."""
    pass


def _resolve_input(input_name: str) -> str:
    """Append the .json extension unless the name already ends with it."""
    path = Path(input_name)
    if path.suffix != config.input_extension:
        path = path.with_name(path.name + config.input_extension)
    return str(path)


def _check_config() -> None:
    errors = config.validate()
    if errors:
        console.print("[red]Configuration errors:[/red]")
        for error in errors:
            console.print(f"  - {error}")
        raise click.Abort()


def _load_document(input_path: str) -> VariablesDocument:
    """Parse the export or abort with the underlying cause."""
    try:
        document = VariablesParser().parse(input_path)
    except (OSError, ValueError) as e:
        console.print("[red]Error reading Figma file![/red]")
        console.print(f"  {e}")
        raise click.Abort()
    console.print("[green]Figma file opened.[/green]")
    return document


def _print_warnings(result: ConversionResult) -> None:
    for warning in result.warnings:
        console.print(f"[yellow]Warning:[/yellow] {warning}")


@cli.command()
@click.option(
    "--input", "-i",
    "input_name",
    default=lambda: config.input_name,
    show_default="Localization",
    help="Variables export base name or path (.json appended when missing)"
)
@click.option(
    "--output", "-o",
    "output_dir",
    default=lambda: config.output_dir,
    show_default="current directory",
    help="Directory that receives translations_<locale>.xlf files"
)
@click.option(
    "--source-locale", "-s",
    default=lambda: config.source_locale,
    show_default="en",
    help="Locale code used for <source> values"
)
@click.option(
    "--dry-run",
    is_flag=True,
    help="Preview the generated files without writing them"
)
def convert(input_name: str, output_dir: str, source_locale: str, dry_run: bool):
    """Convert a Figma variables export into one XLIFF file per locale."""
    _check_config()
    document = _load_document(_resolve_input(input_name))
    result = convert_document(document, source_locale)
    _print_warnings(result)

    if dry_run:
        _print_preview(result, output_dir)
        console.print("\n[yellow]Dry run - no files written[/yellow]")
        return

    try:
        write_documents(result, output_dir)
    except OSError as e:
        console.print("[red]Error writing translation files![/red]")
        console.print(f"  {e}")
        raise click.Abort()

    for path in result.written_files:
        console.print(f"[blue]Translation file created at:[/blue] {path}")

    if not result.written_files:
        console.print("[yellow]No target locales found - nothing written[/yellow]")


def _print_preview(result: ConversionResult, output_dir: str):
    """Print the files a conversion would write."""
    table = Table(title="Files to generate")
    table.add_column("Locale", style="cyan")
    table.add_column("File")
    table.add_column("Units", justify="right")
    table.add_column("Translated", justify="right")

    for locale in result.documents:
        path = Path(output_dir) / config.output_filename(locale)
        translated = len(result.translations) - len(result.translations.get_untranslated_ids(locale))
        table.add_row(locale, str(path), str(len(result.translations)), str(translated))

    console.print(table)


@cli.command()
@click.option(
    "--input", "-i",
    "input_name",
    default=lambda: config.input_name,
    show_default="Localization",
    help="Variables export base name or path"
)
@click.option(
    "--source-locale", "-s",
    default=lambda: config.source_locale,
    show_default="en",
    help="Locale code used for <source> values"
)
def stats(input_name: str, source_locale: str):
    """Show statistics for a Figma variables export."""
    input_path = _resolve_input(input_name)
    document = _load_document(input_path)
    result = convert_document(document, source_locale)
    translations = result.translations

    table = Table(title=f"Statistics for {Path(input_path).name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    table.add_row("Variables", str(len(document.variables)))
    table.add_row("Translation units", str(len(translations)))
    table.add_row("Plural units", str(translations.plural_count()))
    table.add_row("Source locale", f"{source_locale} ({result.index.source_mode_id or 'missing'})")
    table.add_row("Modes", ", ".join(f"{locale}={mode}" for locale, mode in document.modes.items()))
    table.add_row("Locales with values", ", ".join(translations.locales()) or "None")
    table.add_row("Output base name", config.output_name)

    for locale in result.index.target_locales():
        untranslated_count = len(translations.get_untranslated_ids(locale))
        translated = len(translations) - untranslated_count
        table.add_row(
            f"  {locale} coverage",
            f"{translated}/{len(translations)} ({translations.coverage(locale):.1f}%)",
        )

    console.print(table)

    warnings = result.warnings
    if warnings:
        console.print(Panel("\n".join(warnings), title="Warnings", border_style="yellow"))


@cli.command()
@click.option(
    "--input", "-i",
    "input_name",
    default=lambda: config.input_name,
    show_default="Localization",
    help="Variables export base name or path"
)
@click.option(
    "--locale", "-l",
    "locale",
    required=True,
    help="Locale code to show untranslated units for"
)
@click.option(
    "--source-locale", "-s",
    default=lambda: config.source_locale,
    show_default="en",
    help="Locale code used for <source> values"
)
@click.option(
    "--limit",
    type=int,
    default=20,
    help="Limit number of units to show"
)
def untranslated(input_name: str, locale: str, source_locale: str, limit: Optional[int]):
    """Show units with no value for a specific locale."""
    document = _load_document(_resolve_input(input_name))
    result = convert_document(document, source_locale)
    translations = result.translations

    untranslated_ids = translations.get_untranslated_ids(LocaleCode(locale))

    console.print(f"[cyan]Untranslated units for {locale}:[/cyan] {len(untranslated_ids)} total")

    if not untranslated_ids:
        console.print("[green]All units are translated![/green]")
        return

    table = Table(show_header=True)
    table.add_column("Id", style="dim", max_width=40)
    table.add_column("Source Value", max_width=60)

    for entry_id in untranslated_ids[:limit]:
        source = translations[entry_id].source
        table.add_row(entry_id[:40], "" if source is None else str(source)[:60])

    console.print(table)

    if len(untranslated_ids) > limit:
        console.print(f"\n[dim]... and {len(untranslated_ids) - limit} more[/dim]")


if __name__ == "__main__":
    cli()
