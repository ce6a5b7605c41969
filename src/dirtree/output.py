"""Output formatting for dirtree commands."""

import typer

from dirtree.directory import Directory
from dirtree.directory import iter_tree


def print_directory_info(directory: Directory) -> None:
    """Print name and paths of a directory to stdout.

    Args:
        directory: Directory to describe
    """
    # The root has an empty name
    name_display = directory.name or "(root)"
    typer.secho(f"name:          {name_display}")
    typer.secho(f"relative path: {directory.relative_path}")
    typer.secho(f"absolute path: {directory.absolute_path}")


def print_tree(root: Directory, extension: str | None = None) -> None:
    """Print an indented pre-order listing of a tree to stdout.

    Args:
        root: Root of the tree to print
        extension: If given, show each directory's glob pattern for files
            with this extension
    """
    count = 0
    for node, depth in iter_tree(root):
        count += 1
        line = "  " * depth + node.relative_path
        if extension is not None:
            pattern = node.get_all_files_pattern(extension)
            typer.secho(line, nl=False)
            typer.secho(f"  {pattern}", fg=typer.colors.BRIGHT_BLACK)
        else:
            typer.secho(line)

    typer.secho(
        f"✓ {count} director{'ies' if count != 1 else 'y'}",
        fg=typer.colors.GREEN,
        bold=True,
    )


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)
