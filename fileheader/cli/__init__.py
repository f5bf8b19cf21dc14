"""
file-header CLI — Package init.

Re-exports the main CLI group and shared utilities.
"""

from __future__ import annotations

import datetime
import logging
from typing import NoReturn, Optional

import click
from rich.console import Console
from rich.markup import escape

from fileheader import __version__, config
from fileheader.checker import SingleLineChecker
from fileheader.exceptions import FileHeaderError, UnknownLicense
from fileheader.license import LICENSES, get_license
from fileheader.types import Header

console = Console()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(name)s] %(levelname)s — %(message)s",
        datefmt="%H:%M:%S",
    )


def header_options(func):
    """Options describing the header to look for or write."""
    options = [
        click.option(
            "--license", "license_id", default=None,
            help=f"Built-in license ({', '.join(LICENSES)})",
        ),
        click.option("--owner", default=None, help="Copyright holder for --license"),
        click.option(
            "--year", type=int, default=None,
            help="Copyright year for --license (default: current year)",
        ),
        click.option("--text", default=None, help="Plain header text"),
        click.option(
            "--text-file", type=click.Path(exists=True, dir_okay=False), default=None,
            help="File holding the plain header text",
        ),
        click.option(
            "--pattern", default=None,
            help="Substring that marks the header as present (default: first line of text)",
        ),
        click.option(
            "--max-lines", type=click.IntRange(min=1), default=None,
            help="Lines searched for the pattern",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def path_options(func):
    """Options selecting which files are visited."""
    func = click.option(
        "--exclude", "-x", multiple=True, help="Glob of files to skip (repeatable)"
    )(func)
    func = click.option(
        "--include", "-i", multiple=True, help="Glob of files to visit (repeatable)"
    )(func)
    return func


def _require_utf8(value: str, param_hint: str) -> None:
    """Reject text that cannot be written to a UTF-8 file.

    Undecodable argv bytes reach us as lone surrogates.
    """
    try:
        value.encode("utf-8")
    except UnicodeEncodeError as e:
        raise click.BadParameter("header text is not valid UTF-8", param_hint=param_hint) from e


def build_header(
    license_id: Optional[str],
    owner: Optional[str],
    year: Optional[int],
    text: Optional[str],
    text_file: Optional[str],
    pattern: Optional[str],
    max_lines: Optional[int],
) -> Header:
    """Turn the header options into a ``Header``."""
    if license_id:
        if text or text_file:
            raise click.UsageError("--license cannot be combined with --text/--text-file")
        try:
            lic = get_license(license_id)
        except UnknownLicense as e:
            raise click.BadParameter(str(e), param_hint="--license") from e
        if lic.tokens and not owner:
            raise click.UsageError(f"{lic.spdx_id} needs --owner")
        header = lic.build_header(
            year=year or datetime.date.today().year,
            copyright_owner=owner,
        )
        _require_utf8(header.text, "--owner")
        if pattern is not None or max_lines is not None:
            checker = SingleLineChecker(
                lic.search_pattern if pattern is None else pattern,
                lic.lines_to_search if max_lines is None else max_lines,
            )
            header = Header(checker, header.text)
        return header

    if text_file:
        with open(text_file, encoding="utf-8") as f:
            text = f.read().rstrip("\n")
    if not text:
        raise click.UsageError("One of --license, --text or --text-file is required")
    if pattern is None:
        pattern = next((line.strip() for line in text.split("\n") if line.strip()), text)
    if max_lines is None:
        max_lines = config.MAX_LINES
    _require_utf8(text, "--text")
    return Header(SingleLineChecker(pattern, max_lines), text)


def fail(error: FileHeaderError) -> NoReturn:
    """Report an engine error and exit with status 2."""
    console.print(f"[bold red]✗ {escape(str(error))}[/]")
    raise SystemExit(2)


# ─── Main Group ──────────────────────────────────────────────────


@click.group()
@click.version_option(__version__, prog_name="file-header")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """file-header — check, add and remove license headers."""
    setup_logging(verbose)


# ─── Register all sub-modules ───────────────────────────────────
from fileheader.cli import commands  # noqa: E402, F401


if __name__ == "__main__":
    cli()
