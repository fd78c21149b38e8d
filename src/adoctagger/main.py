"""
main.py – Command-line entry point for adoc-tagger.

Usage:
    adoc-tagger tag add notes/alpha.adoc "Best Life Hacks"
    adoc-tagger tag add notes/alpha.adoc "Best Life Hacks" --template none
    adoc-tagger tag list notes/alpha.adoc
    adoc-tagger --log-level DEBUG tag add notes/alpha.adoc Methodic --root ~/notes
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from adoctagger.config import settings
from adoctagger.errors import TaggerError
from adoctagger.graph import tag_note
from adoctagger.services.templates import TemplateKind
from adoctagger.services.xref_sync import CrossReferenceSync

console = Console()


def _setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="adoc-tagger",
        description="Modifies tags on the specified file and updates the related index files.",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    tag = commands.add_parser("tag", help="Modify tags for a file")
    tag_commands = tag.add_subparsers(dest="action", required=True)

    add = tag_commands.add_parser("add", help="Add a tag to a file")
    add.add_argument("file", help="the file being tagged, e.g. my_interesting_note.adoc")
    add.add_argument("tag_name", metavar="tag name", help='the tag to apply, e.g. "Best Life Hacks"')
    add.add_argument(
        "-t",
        "--template",
        default=settings.default_template,
        choices=[k.value for k in TemplateKind],
        help="The template that controls how tags are displayed",
    )

    show = tag_commands.add_parser("list", help="List the tags on a file")
    show.add_argument("file", help="the tagged file, e.g. my_interesting_note.adoc")

    for sub in (add, show):
        sub.add_argument(
            "--root",
            type=Path,
            default=settings.working_root or Path.cwd(),
            metavar="DIR",
            help="Directory relative paths and the global tag index are resolved from "
                 "(default: current directory)",
        )
    return parser.parse_args(argv)


def run_add(sync: CrossReferenceSync, file: str, tag_name: str, template: str) -> None:
    final_state = tag_note(sync, file, tag_name, TemplateKind.parse(template))
    console.print(f"[bold green]✓[/] Tagged {escape(file)} with '{escape(tag_name)}'")
    for path in final_state.get("written", []):
        console.print(f"  [dim]• {escape(path)}[/dim]")


def run_list(sync: CrossReferenceSync, file: str) -> None:
    refs = sync.tags_of_note(file)
    if not refs:
        console.print(f"[yellow]{escape(file)} has no tags.[/yellow]")
        return

    table = Table(title=f"Tags on {escape(file)}")
    table.add_column("Tag", style="bold")
    table.add_column("Index file", style="cyan")
    for ref in refs:
        table.add_row(escape(ref.canonical_name), escape(ref.link_target))
    console.print(table)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    _setup_logging(args.log_level)

    sync = CrossReferenceSync.from_settings(settings, working_root=args.root.expanduser().resolve())

    try:
        if args.action == "add":
            run_add(sync, args.file, args.tag_name, args.template)
        else:
            run_list(sync, args.file)
    except (TaggerError, OSError) as exc:
        console.print(f"[bold red]✗[/] {escape(str(exc))}")
        sys.exit(1)


if __name__ == "__main__":
    main()
