"""m3u8-parser CLI using Typer.

Commands:
- info: Summarize a playlist
- groups: List group titles
- entries: List entries, optionally filtered by group
- filter: Write a playlist reduced to some groups
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer

from .config import get_settings
from .errors import PlaylistError, ValidationFailure
from .filters import GroupFilter
from .logging import configure_logging, get_logger
from .playlist import M3U8Parser
from .sources import source_for

app = typer.Typer(
    name="m3u8-parser",
    help="Parse, filter and rewrite extended M3U8 playlists.",
    add_completion=False,
)

SourceArg = Annotated[str, typer.Argument(help="Playlist path or http(s) URL")]
GroupOpt = Annotated[
    Optional[list[str]],
    typer.Option("--group", "-g", help="Group title prefix (case-insensitive, repeatable)"),
]
LogLevelOpt = Annotated[
    Optional[str], typer.Option("--log-level", help="Log level (DEBUG, INFO, WARNING, ERROR)")
]
LogFormatOpt = Annotated[Optional[str], typer.Option("--log-format", help="Log format (console, json)")]


def load(source: str, log_level: str | None, log_format: str | None) -> M3U8Parser:
    """Configure logging, then read and parse `source`.

    Exits with status 1 on any playlist error.
    """
    settings = get_settings()
    configure_logging(
        level=log_level or settings.log_level,
        format=log_format or settings.log_format,
    )
    logger = get_logger(__name__)

    reader = source_for(source)
    logger.debug("loading_playlist", source=source, reader=reader.name)
    parser = M3U8Parser()
    try:
        parser.parse(reader.read(source))
        return parser
    except (PlaylistError, ValidationFailure) as e:
        logger.debug("load_failed", source=source, error=str(e))
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    finally:
        close = getattr(reader, "close", None)
        if close:
            close()


@app.command()
def info(
    source: SourceArg,
    log_level: LogLevelOpt = None,
    log_format: LogFormatOpt = None,
) -> None:
    """Show the header attributes, entry count and groups of a playlist."""
    parser = load(source, log_level, log_format)

    typer.echo(f"Header: {parser.header.raw.strip()}")
    for name, value in parser.header.attrs.items():
        typer.echo(f"  {name}: {value}")
    typer.echo(f"Entries: {len(parser.items)}")
    typer.echo(f"Groups: {len(parser.playlist_groups)}")


@app.command()
def groups(
    source: SourceArg,
    log_level: LogLevelOpt = None,
    log_format: LogFormatOpt = None,
) -> None:
    """List group titles in the order they first appear."""
    parser = load(source, log_level, log_format)

    for title in parser.playlist_groups:
        typer.echo(title)


@app.command()
def entries(
    source: SourceArg,
    group: GroupOpt = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print entries as JSON")] = False,
    show_excluded: Annotated[
        bool, typer.Option("--show-excluded", help="Report entries left out by --group on stderr")
    ] = False,
    log_level: LogLevelOpt = None,
    log_format: LogFormatOpt = None,
) -> None:
    """List playlist entries, optionally limited to some groups."""
    parser = load(source, log_level, log_format)

    if group and show_excluded:
        result = GroupFilter(group).apply(list(parser.items.values()))
        items = result.included
        typer.echo(f"Excluded Items: {len(result.excluded)}", err=True)
        for excluded in result.excluded:
            typer.echo(f"  - {excluded.name}: {excluded.reason}", err=True)
    elif group:
        items = parser.get_playlists_by_groups(group).items
    else:
        items = list(parser.items.values())

    if as_json:
        typer.echo(json.dumps([item.model_dump(by_alias=True) for item in items], indent=2))
        return

    for item in items:
        typer.echo(f"{item.index}\t{item.group.title}\t{item.name}\t{item.url or ''}")


@app.command("filter")
def filter_command(
    source: SourceArg,
    group: Annotated[
        list[str],
        typer.Option("--group", "-g", help="Group title prefix to keep (case-insensitive, repeatable)"),
    ],
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write the playlist here")] = None,
    log_level: LogLevelOpt = None,
    log_format: LogFormatOpt = None,
) -> None:
    """Write the playlist keeping only entries from the given groups."""
    parser = load(source, log_level, log_format)
    parser.filter_playlist(group)
    text = parser.write()

    if output:
        output.write_text(text, encoding="utf-8", newline="")
        typer.echo(f"Wrote {len(parser.items)} entries to: {output}", err=True)
    else:
        typer.echo(text)


def main() -> None:
    """CLI entry point."""
    app()
