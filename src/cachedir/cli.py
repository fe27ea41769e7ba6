"""Command-line interface for checking CACHEDIR.TAG tags."""

import logging
import sys

import typer

from cachedir import __version__, is_tagged

# Exit code click uses for bad usage
USAGE_ERROR_EXIT_CODE = 2

app = typer.Typer(
    help="Check directories for CACHEDIR.TAG cache tags.",
    epilog=f"Application version: {__version__}",
    add_completion=False,
    rich_markup_mode=None,
)


def _version_callback(ctx: typer.Context, value: bool) -> None:
    if value:
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        envvar="CACHEDIR_VERBOSE",
        help="Log debug messages",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Print the usage text with the version and exit",
    ),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help(), err=True)
        raise typer.Exit(code=1)


@app.command("is-tagged")
def is_tagged_command(
    ctx: typer.Context,
    directory: str = typer.Argument(..., metavar="DIRECTORY", help="Directory to check"),
) -> None:
    """Check if the directory is tagged or not."""
    # Exit code 2 past this point means the check failed, not bad usage
    ctx.ensure_object(dict)["checked"] = True
    try:
        tagged = is_tagged(directory)
    except OSError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

    if tagged:
        typer.echo(f"{directory} is tagged with CACHEDIR.TAG", err=True)
        raise typer.Exit(code=0)
    typer.echo(f"{directory} is not tagged with CACHEDIR.TAG", err=True)
    raise typer.Exit(code=1)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return its exit code instead of exiting."""
    command = typer.main.get_command(app)
    state: dict[str, bool] = {}
    try:
        command.main(args=argv, prog_name="cachedir", obj=state)
    except SystemExit as e:
        code = 0 if e.code is None else int(e.code)
        if code == USAGE_ERROR_EXIT_CODE and not state.get("checked"):
            return 1
        return code
    return 0


def run() -> None:
    sys.exit(main())
