"""configgen CLI — generate analysis configs from the command line."""

import logging
import os
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from configgen import __version__

console = Console()


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(verbose: bool):
    """configgen — analysis configuration generator.

    Scans a source tree, applies the exclude and test patterns declared in
    its .deepsource.toml, and writes the analysis_config.json that
    analyzers consume.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


# ── Generate ─────────────────────────────────────────────────────────


@main.command()
@click.option("--code", default="./", type=click.Path(exists=True, file_okay=False), help="Code path")
@click.option("--language", default="", help="Language whose analyzer metadata to emit")
@click.option("--defaults", "defaults_path", default=None, type=click.Path(dir_okay=False),
              help="YAML file of per-language default metadata")
@click.option("--output", "-o", default=None, help="Output file (default: <code>/analysis_config.json)")
def generate(code: str, language: str, defaults_path: str | None, output: str | None):
    """Generate analysis_config.json for a source tree."""
    from configgen.config import load_project_config
    from configgen.defaults import LanguageDefaults
    from configgen.errors import ConfigGenError
    from configgen.generator import RunOptions, generate_config
    from configgen.scanner import scan_files
    from configgen.writer import write_config

    root = os.path.abspath(code)
    options = RunOptions(language=language)

    console.print(f"\n[bold blue]configgen[/] — Generating config for: {root}\n")

    try:
        defaults = LanguageDefaults()
        if defaults_path:
            defaults.load_yaml(defaults_path)
        files = scan_files(root)
        project_config = load_project_config(root)
        config = generate_config(root, files, project_config, options, defaults)
        path = write_config(root, config, output)
    except (ConfigGenError, OSError) as e:
        console.print(f"[red]Error:[/] {e}")
        sys.exit(1)

    if project_config is None:
        console.print("  [yellow]![/] No .deepsource.toml found; all files are analyzable")

    table = Table(title="Analysis Config")
    table.add_column("Set", style="cyan")
    table.add_column("Count", justify="right", style="green")
    table.add_row("Files", str(len(config.files)))
    table.add_row("Excluded", str(len(config.exclude_files)))
    table.add_row("Tests", str(len(config.test_files)))
    table.add_row("Exclude patterns", str(len(config.exclude_patterns)))
    table.add_row("Test patterns", str(len(config.test_patterns)))
    console.print(table)

    console.print(f"\n[green]Config written to:[/] {path}")


# ── Check ────────────────────────────────────────────────────────────


@main.command()
@click.argument("patterns", nargs=-1, required=True)
@click.option("--code", default="./", type=click.Path(exists=True, file_okay=False), help="Code path")
def check(patterns: tuple, code: str):
    """Show which files PATTERNS would match.

    Patterns are written the same way as in .deepsource.toml, relative to
    the project root.
    """
    from configgen import DEFAULT_MOUNT_PREFIX
    from configgen.classifier import compile_patterns, first_match
    from configgen.paths import project
    from configgen.scanner import scan_files

    root = os.path.abspath(code)
    compiled = compile_patterns(DEFAULT_MOUNT_PREFIX, patterns)
    for c in compiled:
        if not c.valid:
            console.print(f"  [yellow]![/] Invalid pattern, matches nothing: {escape(c.pattern)}")

    hits = 0
    for path in project(root, scan_files(root)):
        match = first_match(path, compiled)
        if match is not None:
            hits += 1
            console.print(f"  [cyan]{escape(path)}[/] [dim]({escape(match.pattern)})[/]")

    if not hits:
        console.print("[yellow]No files matched.[/]")
    else:
        console.print(f"\n{hits} file(s) matched")


# ── Languages ────────────────────────────────────────────────────────


@main.command()
@click.option("--defaults", "defaults_path", default=None, type=click.Path(dir_okay=False),
              help="YAML file of per-language default metadata")
def languages(defaults_path: str | None):
    """List languages with default analyzer metadata."""
    import json

    from configgen.defaults import LanguageDefaults
    from configgen.errors import DefaultsLoadError

    defaults = LanguageDefaults()
    if defaults_path:
        try:
            defaults.load_yaml(defaults_path)
        except DefaultsLoadError as e:
            console.print(f"[red]Error:[/] {e}")
            sys.exit(1)

    table = Table(title=f"Language Defaults ({len(defaults.languages())})")
    table.add_column("Language", style="cyan")
    table.add_column("Analyzer meta")
    for language in defaults.languages():
        table.add_row(language, json.dumps(defaults.lookup(language)))
    console.print(table)


if __name__ == "__main__":
    main()
