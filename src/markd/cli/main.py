from __future__ import annotations

import os
from pathlib import Path
from typing import Annotated

import typer
from result import Err, Ok

from markd.common import AppInfo, LoggingConfig, create_logger, setup_cli_logging
from markd.config import ConfigError, ConfigValidationError, ConfigYamlError, FileConfigStore, MarkdConfig
from markd.settings import Settings

from .commands import bookmarks as bookmark_commands
from .commands import shell as shell_commands
from .context import CliContext

logger = create_logger("cli")

app = typer.Typer(
    help="Bookmark directories for easy directory-hopping.",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.command("add")(bookmark_commands.add)
app.command("remove")(bookmark_commands.remove)
app.command("rm", hidden=True)(bookmark_commands.remove)
app.command("get")(bookmark_commands.get)
app.command("list")(bookmark_commands.list_bookmarks)
app.command("ls", hidden=True)(bookmark_commands.list_bookmarks)
app.command("purge")(bookmark_commands.purge)
app.command("clip")(bookmark_commands.clip)
app.command("migrate")(bookmark_commands.migrate)
app.command("shell")(shell_commands.shell)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"markd {AppInfo().version}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def _root_callback(
    ctx: typer.Context,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable colored output")] = False,
    working_dir: Annotated[
        Path | None,
        typer.Option(
            "--working-dir",
            hidden=True,
            help="Override the directory used for relative paths and the failsafe fallback.",
        ),
    ] = None,
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    # Respect NO_COLOR environment variable and --no-color flag
    if no_color or os.getenv("NO_COLOR"):
        ctx.color = False

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

    settings = Settings()
    config = _load_config(settings)
    _setup_logging(settings, config.logging)
    ctx.obj = CliContext(settings=settings, config=config, working_dir=working_dir)
    logger.debug("Running command", command=ctx.invoked_subcommand, bookmarks_file=str(ctx.obj.bookmarks_file))


def _load_config(settings: Settings) -> MarkdConfig:
    store = FileConfigStore(settings=settings.to_config_store_settings())
    match store.load():
        case Ok(config):
            return config
        case Err(error):
            _warn_config_error(store.path, error)
            return MarkdConfig()


def _setup_logging(settings: Settings, logging_config: LoggingConfig) -> None:
    if not logging_config.enabled:
        return
    try:
        setup_cli_logging(
            app_info=settings.app,
            config=logging_config,
            default_log_file=settings.default_log_file(),
        )
    except OSError as exc:
        # commands still work, they just go unlogged
        typer.secho(f"warning: logging disabled: {exc}", err=True, fg=typer.colors.YELLOW)


def _warn_config_error(path: Path, error: ConfigError) -> None:
    message = f"warning: ignoring config {path}: {error.message}"
    match error:
        case ConfigYamlError(line=int(line)):
            message = f"{message} (line {line})"
        case ConfigValidationError(field=str(field)):
            message = f"{message} (field {field})"

    typer.secho(message, err=True, fg=typer.colors.YELLOW)


def main() -> None:
    """Entrypoint for the markd CLI."""
    app(prog_name="markd")
