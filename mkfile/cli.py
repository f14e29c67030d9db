from __future__ import annotations

from typing import Optional

import typer

from mkfile.core.clipboard.clipboard import select_clipboard
from mkfile.core.create.create_files import BatchCreator
from mkfile.core.errors import NotificationError
from mkfile.core.expand.reconstruct import reconstruct_tokens
from mkfile.core.io.load_config import ConfigError, Settings, load_and_merge
from mkfile.core.model import CreationResult
from mkfile.core.notify.gntp_notifier import GntpNotifier, NotificationSink, NullNotifier, load_icon


NAME = "mkfile"
VERSION = "2.0.0"

EPILOG = """\b
Examples:
  mkfile file.txt                       # Create single file
  mkfile file1.txt file2.py file3       # Create multiple files
  mkfile dir/subdir/file.txt            # Create with directories
  mkfile dir/{a,b,c}.txt                # Brace expansion
  mkfile dotenv/{__init__.py,core.py}   # Create package structure
  mkfile -- -notes.txt                  # Names starting with a dash

Note: GNTP notifications require Growl for Windows or a compatible client.
"""

app = typer.Typer(
    add_completion=False,
    rich_markup_mode=None,
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{NAME} v{VERSION}")
        raise typer.Exit()


@app.command(epilog=EPILOG)
def create(
    ctx: typer.Context,
    files: Optional[list[str]] = typer.Argument(
        None, metavar="FILE...", help="Files to create; supports dir/{a,b,c}.txt"
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=_version_callback,
        is_eager=True,
        help="Show version information",
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Show detailed error messages"),
    no_gntp: bool = typer.Option(False, "--no-gntp", help="Disable GNTP/Growl notifications"),
    config: Optional[str] = typer.Option(None, "--config", help="Path to a YAML config file"),
) -> None:
    """Create blank files with notification support."""
    if not files:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=0)

    try:
        settings = load_and_merge(
            config,
            debug=True if debug else None,
            gntp_enabled=False if no_gntp else None,
        )
    except FileNotFoundError as e:
        typer.echo(f"config file not found: {e}", err=True)
        raise typer.Exit(code=1)
    except ConfigError as e:
        typer.echo(f"invalid config: {e}", err=True)
        raise typer.Exit(code=2)

    tokens = reconstruct_tokens(files)

    creator = BatchCreator(
        app_name=NAME,
        notifier=_build_notifier(settings),
        clipboard=select_clipboard(enabled=settings.clipboard),
        on_result=lambda r: _report(r, debug=settings.debug),
    )
    _, outcome = creator.create_all(tokens)

    typer.echo(f"\n{outcome.summary()}")
    raise typer.Exit(code=0 if outcome.ok else 1)


def _build_notifier(settings: Settings) -> NotificationSink:
    """Register with the GNTP server once; fall back to a silent notifier on failure."""
    if not settings.gntp_enabled:
        return NullNotifier()

    icon, icon_warning = load_icon(settings.gntp_icon)
    if icon_warning and settings.debug:
        typer.echo(f"Warning: {icon_warning}", err=True)

    try:
        return GntpNotifier.initialize(
            NAME,
            host=settings.gntp_host,
            port=settings.gntp_port,
            password=settings.gntp_password,
            icon=icon,
        )
    except NotificationError as e:
        if settings.debug:
            typer.echo(f"GNTP init error: {e}", err=True)
        return NullNotifier()


def _report(result: CreationResult, *, debug: bool) -> None:
    if result.succeeded:
        typer.echo(f'✓ File created: "{result.absolute_path or result.path}"')
        if debug:
            for w in result.warnings:
                typer.echo(f"   Warning: {w}", err=True)
        return

    assert result.error is not None
    typer.echo(f"✗ {result.error.message}", err=True)
    if debug and result.error.detail:
        typer.echo(f"   Debug: {result.error.detail}", err=True)


def main() -> None:
    app(prog_name=NAME)


cli = typer.main.get_command(app)

if __name__ == "__main__":
    main()
