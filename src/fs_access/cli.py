"""Command-line interface for fs-access.

Commands:
    - check: Check access to a path in one mode
    - is-executable: Report whether a path is an executable regular file

Exit codes for ``check``: 0 on success, 1 when access is denied and 2 when
the path does not exist.
"""

import asyncio
from typing import Annotated, Optional

import typer

from . import __version__
from .access import access_check, access_check_async, is_executable, is_executable_async
from .core.exceptions import AccessError, ErrorKind, ValidationError
from .modes import AccessMode, mode_name

app = typer.Typer(
    name="fs-access",
    help="POSIX-style access checks that behave the same on every platform.",
    no_args_is_help=True,
)

_EXIT_CODES = {
    ErrorKind.PERMISSION_DENIED: 1,
    ErrorKind.NOT_FOUND: 2,
}


def version_callback(value: bool) -> None:
    """Display version information."""
    if value:
        typer.echo(f"fs-access {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option("--version", callback=version_callback, help="Show version."),
    ] = None,
) -> None:
    """
    fs-access: check existence, read, write and execute access to paths.
    """
    pass


AsyncOption = Annotated[
    bool,
    typer.Option("--async", help="Use the non-blocking implementation."),
]


@app.command("check")
def check_cmd(
    path: Annotated[str, typer.Argument(help="File or directory to check")],
    mode: Annotated[
        str,
        typer.Option(
            "--mode",
            "-m",
            help=(
                "Access mode: F_OK, R_OK, W_OK, X_OK "
                "(or f, r, w, x, or 0, 1, 2, 4)"
            ),
        ),
    ] = "F_OK",
    use_async: AsyncOption = False,
) -> None:
    """
    Check whether the current process can access PATH.

    Examples:
        fs-access check ./README.md
        fs-access check ./build --mode w
        fs-access check ./run.sh --mode X_OK --async
    """
    try:
        access_mode = AccessMode.parse(mode)
    except ValidationError as e:
        raise typer.BadParameter(str(e), param_hint="--mode")

    try:
        if use_async:
            asyncio.run(access_check_async(path, access_mode))
        else:
            access_check(path, access_mode)
    except AccessError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(_EXIT_CODES[e.kind])

    typer.echo(f"OK {mode_name(access_mode)} {path}")


@app.command("is-executable")
def is_executable_cmd(
    path: Annotated[str, typer.Argument(help="File to check")],
    use_async: AsyncOption = False,
) -> None:
    """
    Print whether PATH is an executable regular file.

    Exits with status 1 when it is not.
    """
    if use_async:
        result = asyncio.run(is_executable_async(path))
    else:
        result = is_executable(path)

    typer.echo("true" if result else "false")
    if not result:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
