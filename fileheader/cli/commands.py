"""CLI commands: check, add, delete."""

from __future__ import annotations

from pathlib import Path

import click
from rich.markup import escape
from rich.table import Table

from fileheader import config
from fileheader.batch import add_headers_recursively, delete_headers_recursively
from fileheader.cli import build_header, cli, console, fail, header_options, path_options
from fileheader.exceptions import FileHeaderError
from fileheader.predicates import build_predicate
from fileheader.scanner import check_headers_recursively


def _rel(path: Path, root: Path) -> str:
    try:
        return escape(str(path.relative_to(root)))
    except ValueError:
        return escape(str(path))


@cli.command("check")
@click.argument("root", type=click.Path(exists=True))
@header_options
@path_options
@click.option(
    "--workers", "-w", type=click.IntRange(min=1), default=None,
    help="Scanner threads (default: FILEHEADER_WORKERS or CPU count)",
)
def check(root, license_id, owner, year, text, text_file, pattern, max_lines,
          include, exclude, workers):
    """Report files under ROOT that lack the header."""
    root_path = Path(root)
    header = build_header(license_id, owner, year, text, text_file, pattern, max_lines)
    predicate = build_predicate(root_path, include, exclude)
    try:
        with console.status("[bold blue]Scanning...[/]"):
            results = check_headers_recursively(
                root_path, predicate, header, workers or config.WORKERS
            )
    except FileHeaderError as e:
        fail(e)

    if not results.has_failure():
        console.print("[green]✓[/] All files have the header")
        return

    table = Table(title=f"Header check — {root}")
    table.add_column("Path", style="bold")
    table.add_column("Problem", width=16)
    for p in sorted(results.no_header_files):
        table.add_row(_rel(p, root_path), "[yellow]missing header[/]")
    for p in sorted(results.binary_files):
        table.add_row(_rel(p, root_path), "[red]binary[/]")
    console.print(table)
    console.print(
        f"\n  Missing: [yellow]{len(results.no_header_files)}[/] | "
        f"Binary: [red]{len(results.binary_files)}[/]"
    )
    raise SystemExit(1)


def _report(changed: list[Path], root_path: Path, verb: str) -> None:
    for p in changed:
        console.print(f"  [green]✓[/] {verb}: {_rel(p, root_path)}")
    console.print(f"[bold]{len(changed)}[/] file(s) changed")


@cli.command("add")
@click.argument("root", type=click.Path(exists=True))
@header_options
@path_options
def add(root, license_id, owner, year, text, text_file, pattern, max_lines, include, exclude):
    """Add the header to files under ROOT that lack it."""
    root_path = Path(root)
    header = build_header(license_id, owner, year, text, text_file, pattern, max_lines)
    predicate = build_predicate(root_path, include, exclude)
    try:
        changed = add_headers_recursively(root_path, predicate, header)
    except FileHeaderError as e:
        fail(e)
    _report(changed, root_path, "Added")


@cli.command("delete")
@click.argument("root", type=click.Path(exists=True))
@header_options
@path_options
def delete(root, license_id, owner, year, text, text_file, pattern, max_lines, include, exclude):
    """Remove the header from files under ROOT that have it."""
    root_path = Path(root)
    header = build_header(license_id, owner, year, text, text_file, pattern, max_lines)
    predicate = build_predicate(root_path, include, exclude)
    try:
        changed = delete_headers_recursively(root_path, predicate, header)
    except FileHeaderError as e:
        fail(e)
    _report(changed, root_path, "Removed")
