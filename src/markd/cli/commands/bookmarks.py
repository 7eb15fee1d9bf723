"""CLI commands for managing bookmarks.

Every command opens the store once, applies one operation and persists only
when the store changed.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok

from markd.bookmarks import (
    Bookmark,
    BookmarkDuplicateNameError,
    BookmarkError,
    BookmarkInvalidNameError,
    BookmarkInvalidPathError,
    BookmarkIOError,
    BookmarkMigrationError,
    BookmarkNotFoundError,
    BookmarkParseError,
    BookmarkStore,
    migrate_store,
)
from markd.datastore import FileDataStore

from ..context import CliContext, get_cli_context

NameArgument = Annotated[str, typer.Argument(help="Bookmark name (case-insensitive)")]


def add(
    ctx: typer.Context,
    path: Annotated[Path | None, typer.Argument(help="Directory to bookmark (defaults to the current directory)")] = None,
    alias: Annotated[
        str | None,
        typer.Option("--alias", "-a", help="Name to use instead of the directory name"),
    ] = None,
) -> None:
    """Bookmark a directory.

    Examples:

        # Bookmark the current directory under its own name
        markd add

        # Bookmark another directory under a different name
        markd add ~/src/project --alias proj
    """
    cli = get_cli_context(ctx)
    store = _open_store(cli)

    match store.add(path, alias=alias):
        case Ok(bookmark):
            _persist(store)
            typer.secho(f"✓ Bookmarked '{bookmark.name}' → {bookmark.path}", fg=typer.colors.GREEN)
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def remove(ctx: typer.Context, name: NameArgument) -> None:
    """Remove a bookmark."""
    cli = get_cli_context(ctx)
    store = _open_store(cli)

    match store.remove(name):
        case Ok(bookmark):
            _persist(store)
            typer.secho(f"✓ Removed '{bookmark.name}' from bookmarks", fg=typer.colors.GREEN)
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def get(
    ctx: typer.Context,
    name: Annotated[str, typer.Argument(help="Bookmark name; omit to use the clip")] = "",
    failsafe: Annotated[
        bool | None,
        typer.Option(
            "--failsafe/--no-failsafe",
            help="Print the current directory instead of failing when the bookmark is unusable",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Print a bookmark's path, and nothing else, for `cd "$(markd get NAME)"`."""
    cli = get_cli_context(ctx)
    store = _open_store(cli)
    use_failsafe = cli.config.bookmarks.failsafe if failsafe is None else failsafe

    match store.get(name, failsafe=use_failsafe):
        case Ok(path):
            typer.echo(str(path))
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def list_bookmarks(
    ctx: typer.Context,
    filter: Annotated[
        str | None,
        typer.Option("--filter", "-f", help="Only bookmarks whose name or path contains this text"),
    ] = None,
    start: Annotated[str | None, typer.Option("--start", "-s", help="First name in the range (inclusive)")] = None,
    end: Annotated[str | None, typer.Option("--end", "-e", help="Last name in the range (inclusive)")] = None,
    plain: Annotated[bool, typer.Option("--plain", "-p", help="Print name:path lines for piping")] = False,
) -> None:
    """List bookmarks in name order.

    Examples:

        # Everything under ~/src
        markd list --filter src

        # Jump with a fuzzy finder
        cd "$(markd list --plain | fzf | cut -d: -f2-)"
    """
    cli = get_cli_context(ctx)
    store = _open_store(cli)
    bookmarks = store.list(filter=filter, start=start, end=end)

    if plain:
        for bookmark in bookmarks:
            typer.echo(bookmark.to_plain())
        return

    _print_table(list(bookmarks), clip=store.clip)


def purge(ctx: typer.Context) -> None:
    """Remove bookmarks whose directories no longer exist."""
    cli = get_cli_context(ctx)
    store = _open_store(cli)

    report = store.purge()
    if not report.count:
        typer.echo("Nothing to purge.")
        return

    _persist(store)
    typer.secho("Purged entries:", fg=typer.colors.MAGENTA, bold=True)
    for index, bookmark in enumerate(report.removed, start=1):
        typer.echo(f"[{index}] {bookmark.name}: {bookmark.path}")
    if report.clip is not None:
        typer.echo(f"[clip] {report.clip}")


def clip(
    ctx: typer.Context,
    path: Annotated[Path | None, typer.Argument(help="Directory to clip (defaults to the current directory)")] = None,
    clear: Annotated[bool, typer.Option("--clear", help="Empty the clip instead of setting it")] = False,
) -> None:
    """Set the clip, the unnamed bookmark used by `markd get` with no name."""
    cli = get_cli_context(ctx)
    store = _open_store(cli)

    result = store.clear_clip() if clear else store.set_clip(path)
    match result:
        case Ok(clipped):
            _persist(store)
            action = "Cleared clip" if clear else "Clipped"
            typer.secho(f"✓ {action} {clipped}", fg=typer.colors.GREEN)
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def migrate(
    ctx: typer.Context,
    source: Annotated[
        Path | None,
        typer.Option("--from", help="Legacy JSON bookmarks file (defaults to ~/dirs.json)"),
    ] = None,
    force: Annotated[bool, typer.Option("--force", help="Replace existing bookmarks")] = False,
) -> None:
    """Convert bookmarks from the legacy JSON file to the current format."""
    cli = get_cli_context(ctx)
    legacy = FileDataStore(source.expanduser() if source else cli.legacy_file)
    target = cli.datastore()

    match migrate_store(legacy, target, force=force):
        case Ok(count):
            noun = "bookmark" if count == 1 else "bookmarks"
            typer.secho(f"✓ Migrated {count} {noun} from {legacy.path} to {target.path}", fg=typer.colors.GREEN)
        case Err(BookmarkParseError(message=message)):
            typer.secho(f"error: legacy bookmarks file is malformed ({legacy.path})", err=True, fg=typer.colors.RED)
            typer.secho(f"  {message}", err=True)
            typer.secho("hint: fix the JSON object, or point --from at another file", err=True, fg=typer.colors.CYAN)
            raise typer.Exit(code=1)
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def _open_store(cli: CliContext) -> BookmarkStore:
    match BookmarkStore.open(cli.datastore(), working_dir=cli.working_dir):
        case Ok(store):
            return store
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def _persist(store: BookmarkStore) -> None:
    if not store.dirty:
        return
    match store.persist():
        case Ok(_):
            return
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def _print_table(bookmarks: list[Bookmark], *, clip: Path | None) -> None:
    if not bookmarks and clip is None:
        typer.echo("No bookmarks.")
        return

    typer.secho("Bookmarked dirs:", fg=typer.colors.GREEN, bold=True)
    width = max((len(bookmark.name) for bookmark in bookmarks), default=0)
    for bookmark in bookmarks:
        name = typer.style(bookmark.name.ljust(width), fg=typer.colors.MAGENTA)
        line = f"  {name}  {bookmark.path}"
        if not bookmark.path.is_dir():
            line += typer.style("  (missing)", fg=typer.colors.RED)
        typer.echo(line)
    if clip is not None:
        typer.secho(f"clip: {clip}", fg=typer.colors.CYAN)


def _handle_error(error: BookmarkError) -> None:
    """Handle bookmark errors with user-friendly messages."""
    match error:
        case BookmarkNotFoundError(name=""):
            typer.secho(f"error: {error.message}", err=True, fg=typer.colors.RED)
            typer.secho("hint: use 'markd clip [PATH]' to set it", err=True, fg=typer.colors.CYAN)
        case BookmarkNotFoundError(message=message):
            typer.secho(f"error: {message}", err=True, fg=typer.colors.RED)
            typer.secho("hint: use 'markd list' to see available bookmarks", err=True, fg=typer.colors.CYAN)
        case BookmarkDuplicateNameError(name=name, existing_path=existing_path):
            typer.secho(f"error: '{name}' already exists ({existing_path})", err=True, fg=typer.colors.RED)
            hint = f"hint: pick another name with --alias, or run 'markd remove {name}' first"
            typer.secho(hint, err=True, fg=typer.colors.CYAN)
        case BookmarkInvalidPathError(message=message):
            typer.secho(f"error: invalid path: {message}", err=True, fg=typer.colors.RED)
        case BookmarkInvalidNameError(message=message):
            typer.secho(f"error: {message}", err=True, fg=typer.colors.RED)
            typer.secho("hint: names cannot be empty or contain '/', '\\' or ':'", err=True, fg=typer.colors.CYAN)
        case BookmarkParseError(path=path, message=message):
            location = f" ({path})" if path is not None else ""
            typer.secho(f"error: bookmarks file is corrupt{location}", err=True, fg=typer.colors.RED)
            typer.secho(f"  {message}", err=True)
            typer.secho(
                "hint: fix or remove the file; legacy JSON files are converted with 'markd migrate'",
                err=True,
                fg=typer.colors.CYAN,
            )
        case BookmarkMigrationError(message=message):
            typer.secho("error: cannot migrate bookmarks", err=True, fg=typer.colors.RED)
            typer.secho(f"  {message}", err=True)
            typer.secho("hint: use --from to pick the legacy file, or --force to replace", err=True, fg=typer.colors.CYAN)
        case BookmarkIOError(path=path, message=message):
            typer.secho(f"error: cannot access {path}", err=True, fg=typer.colors.RED)
            typer.secho(f"  {message}", err=True)
        case _:  # pragma: no cover - fallback for unexpected subclasses
            typer.secho(f"error: {error.message}", err=True, fg=typer.colors.RED)
