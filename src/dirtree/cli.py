"""Command-line interface for dirtree."""

import json
from pathlib import Path
from typing import Annotated

import typer

from dirtree import __version__
from dirtree.directory import Directory
from dirtree.directory import create_tree
from dirtree.exceptions import ChildNotFoundError
from dirtree.exceptions import DirtreeError
from dirtree.exceptions import InvalidArgumentError
from dirtree.output import print_directory_info
from dirtree.output import print_error
from dirtree.output import print_tree

app = typer.Typer(help="Directory path and glob pattern generator")

CwdOption = Annotated[
    str | None,
    typer.Option(
        "--cwd",
        envvar="DIRTREE_CWD",
        help="Working directory to resolve against (default: current directory)",
    ),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"dirtree {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """Directory path and glob pattern generator."""
    pass


@app.command()
def info(
    path: Annotated[str, typer.Argument(help="Directory path")],
    cwd: CwdOption = None,
) -> None:
    """Show the name, relative path and absolute path of a directory."""
    try:
        print_directory_info(Directory(path, cwd=cwd))
    except DirtreeError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1) from None


@app.command()
def pattern(
    path: Annotated[str, typer.Argument(help="Directory path")],
    ext: Annotated[
        str | None, typer.Option("--ext", "-e", help="Only match this file extension")
    ] = None,
    file: Annotated[
        str | None,
        typer.Option("--file", "-f", help="Print the path to this file instead"),
    ] = None,
    cwd: CwdOption = None,
) -> None:
    """Print a glob pattern covering every file below a directory."""
    try:
        directory = Directory(path, cwd=cwd)
    except DirtreeError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1) from None

    if file is not None:
        typer.echo(directory.get_file_path(file))
    else:
        typer.echo(directory.get_all_files_pattern(ext))


@app.command()
def tree(
    root: Annotated[str, typer.Argument(help="Root directory path")],
    description: Annotated[
        Path, typer.Argument(help="JSON file with nested directory names")
    ],
    ext: Annotated[
        str | None,
        typer.Option("--ext", "-e", help="Show glob patterns for this extension"),
    ] = None,
    select: Annotated[
        str | None,
        typer.Option("--select", "-s", help="Only print the subtree at this path"),
    ] = None,
    cwd: CwdOption = None,
) -> None:
    """Build a tree from a JSON description and print it."""
    try:
        data = json.loads(description.read_text())
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON in tree description: {e}")
        raise typer.Exit(1) from None
    except OSError as e:
        print_error(f"Cannot read tree description: {e}")
        raise typer.Exit(1) from None

    try:
        node = create_tree(root, data, cwd=cwd)
        if select is not None:
            node = node.get_child(select)
    except ChildNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(1) from None
    except InvalidArgumentError as e:
        print_error(f"Invalid tree description: {e}")
        raise typer.Exit(1) from None
    except DirtreeError as e:
        print_error(f"Error: {e}")
        raise typer.Exit(1) from None

    print_tree(node, extension=ext)


def main() -> None:
    """Main entry point for the dirtree CLI."""
    app()


if __name__ == "__main__":
    main()
