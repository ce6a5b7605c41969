"""Path normalization utilities built on the host path conventions."""

import os


def current_working_directory() -> str:
    """Get the process working directory used when no cwd is given."""
    return os.getcwd()


def with_trailing_separator(path: str) -> str:
    """Append os.sep unless path already ends with it."""
    if path.endswith(os.sep):
        return path
    return path + os.sep


def normalize(path: str) -> str:
    """Normalize path, collapsing a leading "//" into "/".

    POSIX normpath keeps exactly two leading slashes. Windows UNC prefixes
    ("\\\\server") are left alone.
    """
    normalized = os.path.normpath(path)
    if os.sep == "/" and normalized.startswith("//"):
        return normalized[1:]
    return normalized


def join(*parts: str) -> str:
    """Join and normalize path segments.

    A trailing separator on the joined result is kept, so joining an empty
    segment onto a directory path returns the directory path itself.

    Args:
        parts: Path segments to join

    Returns:
        Normalized joined path
    """
    joined = os.path.join(*parts)
    normalized = normalize(joined)
    if joined.endswith(os.sep):
        return with_trailing_separator(normalized)
    return normalized


def resolve(path: str, cwd: str) -> str:
    """Resolve path to an absolute normalized path against cwd.

    Args:
        path: Relative or absolute path
        cwd: Absolute directory that relative paths are resolved against

    Returns:
        Absolute path without a trailing separator (except for the root)
    """
    return normalize(os.path.join(cwd, path))


def strip_cwd(path: str, cwd: str) -> str:
    """Remove a leading cwd prefix (and the separators after it) from path."""
    if cwd and path.startswith(cwd):
        return path[len(cwd) :].lstrip(os.sep)
    return path


def normalize_relative_path(path: str, cwd: str) -> str:
    """Normalize a directory path in the form it was given.

    Relative input stays relative and absolute input stays absolute. Inputs
    denoting the current directory ("", ".", "./") normalize to "./".

    Args:
        path: Directory path as supplied by the caller
        cwd: Working directory, stripped from relative input that embeds it

    Returns:
        Normalized path ending in exactly one separator
    """
    if not os.path.isabs(path):
        path = strip_cwd(path, cwd)
    # normpath("") is "."
    return with_trailing_separator(normalize(path))


def normalize_absolute_path(path: str, cwd: str) -> str:
    """Resolve a directory path to absolute form ending in one separator."""
    return with_trailing_separator(resolve(path, cwd))
