"""
configdoc CLI - Configuration Reference Generator

A command-line tool for documenting configuration keys by:
1. Scanning source files for configuration accessor calls
2. Tracking reload sections, strict mode and fail-fast statements
3. Writing a Markdown reference of every key found
"""

from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from configdoc import __version__
from configdoc.diagnostics import DiagnosticLog
from configdoc.exceptions import ConfigDocError
from configdoc.extractors import classify_accessor
from configdoc.generator import ConfigDocGenerator
from configdoc.schemas import ScanDiagnostic
from configdoc.settings import Settings
from configdoc.variants import BUILTIN_VARIANTS, DocVariant, get_variant, load_variant_file

app = typer.Typer(
    name="configdoc",
    help="Configuration Reference Generator",
    add_completion=False,
)

console = Console()


def _resolve_variants(
    settings: Settings,
    variant: Optional[str],
    variant_file: Optional[str],
    all_variants: bool
) -> List[DocVariant]:
    if variant_file:
        return [load_variant_file(Path(variant_file))]
    if all_variants:
        return list(BUILTIN_VARIANTS.values())
    return [get_variant(variant or settings.variant)]


def _schema_json_path(schema_json: Optional[str], doc_variant: DocVariant, per_variant: bool) -> Optional[Path]:
    """Schema dump path; with several variants each gets its own, e.g. schema.config.json."""
    if not schema_json:
        return None
    path = Path(schema_json)
    if per_variant:
        path = path.with_name(f"{path.stem}.{doc_variant.name}{path.suffix}")
    return path


def _print_diagnostics(diagnostics: List[ScanDiagnostic]):
    table = Table(show_header=True, header_style="bold yellow")
    table.add_column("Kind")
    table.add_column("Location")
    table.add_column("Message")
    for diagnostic in diagnostics:
        location = f"{diagnostic.source_file}:{diagnostic.line_number}" if diagnostic.source_file else "-"
        table.add_row(diagnostic.kind, location, diagnostic.message)
    console.print(table)


@app.command()
def generate(
    root: Optional[str] = typer.Option(
        None,
        "--root",
        "-r",
        help="Source root the variant's files are relative to (default: $CONFIGDOC_SOURCE_ROOT or .)",
    ),
    variant: Optional[str] = typer.Option(
        None,
        "--variant",
        "-t",
        help="Built-in variant: config or map (default: $CONFIGDOC_VARIANT or config)",
    ),
    variant_file: Optional[str] = typer.Option(
        None,
        "--variant-file",
        help="JSON file with a custom variant definition",
    ),
    all_variants: bool = typer.Option(
        False,
        "--all",
        "-a",
        help="Generate every built-in variant",
    ),
    output: Optional[str] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: the variant's path under the source root)",
    ),
    schema_json: Optional[str] = typer.Option(
        None,
        "--schema-json",
        help="Also write the extracted schema as JSON (with --all: one file per variant, e.g. schema.config.json)",
    ),
    diagnostics_log: Optional[str] = typer.Option(
        None,
        "--diagnostics-log",
        help="Append scan diagnostics to this JSONL file",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    """
    Generate Markdown configuration reference documents.

    Example:
        configdoc generate --root ../aura --variant config

    Example (both built-in documents):
        configdoc generate --root ../aura --all
    """
    try:
        settings = Settings.from_env()
        settings.configure_logging(verbose)
        variants = _resolve_variants(settings, variant, variant_file, all_variants)
        if output and len(variants) > 1:
            console.print("[red]Error: --output cannot be combined with --all[/red]")
            raise typer.Exit(1)

        source_root = Path(root) if root else settings.source_root
        diag_log = DiagnosticLog(Path(diagnostics_log)) if diagnostics_log else None

        for doc_variant in variants:
            console.print(Panel.fit(
                f"[bold cyan]{doc_variant.title} reference[/bold cyan]\n\n"
                f"Sources: [yellow]{source_root}[/yellow]\n"
                f"Files: [yellow]{len(doc_variant.source_files)}[/yellow]",
                border_style="cyan"
            ))

            generator = ConfigDocGenerator(
                source_root=source_root,
                variant=doc_variant,
                output_path=Path(output) if output else None,
            )
            result = generator.generate(
                schema_json_path=_schema_json_path(schema_json, doc_variant, len(variants) > 1)
            )

            summary_table = Table(show_header=True, header_style="bold cyan")
            summary_table.add_column("Metric")
            summary_table.add_column("Value", justify="right")
            summary_table.add_row("Files scanned", str(result.files_scanned))
            summary_table.add_row("Accessor calls", str(result.total_entries))
            summary_table.add_row("Distinct keys", str(result.unique_keys))
            summary_table.add_row("Documented entries", str(result.rendered_entries))
            summary_table.add_row("Diagnostics", str(len(result.diagnostics)))
            console.print(summary_table)

            if result.diagnostics:
                _print_diagnostics(result.diagnostics)
                if diag_log:
                    diag_log.log_all(result.diagnostics, doc_variant.name)

            console.print(f"\n📄 Written: [cyan]{result.output_path}[/cyan]")
            if result.schema_json_path:
                console.print(f"📁 Schema JSON: [cyan]{result.schema_json_path}[/cyan]")

    except ConfigDocError as e:
        console.print(f"\n[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def scan(
    root: Optional[str] = typer.Option(None, "--root", "-r", help="Source root"),
    variant: Optional[str] = typer.Option(None, "--variant", "-t", help="Built-in variant"),
    variant_file: Optional[str] = typer.Option(None, "--variant-file", help="Custom variant JSON"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable debug logging"),
):
    """
    Preview the extracted schema without writing any file.
    """
    try:
        settings = Settings.from_env()
        settings.configure_logging(verbose)
        doc_variant = _resolve_variants(settings, variant, variant_file, False)[0]
        source_root = Path(root) if root else settings.source_root
        schema = ConfigDocGenerator(source_root, doc_variant).extract()
    except ConfigDocError as e:
        console.print(f"\n[red]❌ Error: {e}[/red]")
        raise typer.Exit(1)

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Key")
    table.add_column("Type")
    table.add_column("Optional")
    table.add_column("Reload")
    table.add_column("Fail-fast")
    table.add_column("Location", style="dim")

    for entry in sorted(schema.entries, key=lambda e: e.key_name):
        key_type = classify_accessor(entry.accessor_name, doc_variant.string_index_as_enum)
        metadata = schema.metadata_for(entry.key_name)
        table.add_row(
            entry.key_name,
            key_type.semantic_type or "unknown",
            "yes" if key_type.optional else "",
            metadata.reload_mode.value,
            "yes" if metadata.fail_on_error else "",
            f"{entry.source_file}:{entry.line_number}",
        )

    console.print(table)
    console.print(f"\n[bold]{len(schema.entries)}[/bold] accessor calls in {len(schema.source_files)} files")

    if schema.diagnostics:
        _print_diagnostics(schema.diagnostics)


@app.command()
def variants():
    """List the built-in documentation variants."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Variant")
    table.add_column("Output")
    table.add_column("Receiver")
    table.add_column("Source files")

    for doc_variant in BUILTIN_VARIANTS.values():
        table.add_row(
            doc_variant.name,
            doc_variant.output_path,
            ", ".join(doc_variant.receiver_spellings()),
            "\n".join(doc_variant.source_files),
        )

    console.print(table)


@app.command()
def version():
    """Show the version of configdoc."""
    console.print(f"[bold cyan]configdoc[/bold cyan] v{__version__}")
    console.print("Configuration Reference Generator")


def main():
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
