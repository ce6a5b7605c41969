"""In-memory directory tree with path and glob pattern generation."""

import os
from collections.abc import Callable
from collections.abc import Iterator
from collections.abc import Mapping
from typing import Any

from dirtree import paths
from dirtree.exceptions import ChildNotFoundError
from dirtree.exceptions import InvalidArgumentError
from dirtree.exceptions import InvalidChildNameError

CHILD_NAME_SEPARATORS = ("/", "\\", ":")
LOOKUP_SEPARATOR = "/"  # Fixed regardless of os.sep so lookup paths are portable


class Directory:
    """A directory in an in-memory tree.

    The directory does not have to exist on the file system. Paths are
    computed once at construction; only the child list changes afterwards.
    """

    def __init__(self, path: str, cwd: str | None = None):
        """Create a directory node.

        Args:
            path: Relative or absolute path to the directory
            cwd: Working directory to resolve relative paths against
                (default: the process working directory)

        Raises:
            InvalidArgumentError: If path is not a string or cwd is not an
                absolute path
        """
        if not isinstance(path, str):
            raise InvalidArgumentError("Invalid path specified (arg #1)")
        if cwd is None:
            cwd = paths.current_working_directory()
        elif not isinstance(cwd, str) or not os.path.isabs(cwd):
            raise InvalidArgumentError("Invalid cwd specified, must be an absolute path")

        self._cwd = cwd
        self._name = os.path.basename(paths.resolve(path, cwd))
        self._relative_path = paths.normalize_relative_path(path, cwd)
        self._absolute_path = paths.normalize_absolute_path(path, cwd)
        self._children: list[Directory] = []

    def __repr__(self) -> str:
        return f"Directory({self._relative_path!r})"

    def __iter__(self) -> Iterator["Directory"]:
        return iter(self.get_children())

    @property
    def name(self) -> str:
        """Last segment of the resolved path, empty for the root."""
        return self._name

    @property
    def relative_path(self) -> str:
        """Normalized path in the form given, ending in one separator."""
        return self._relative_path

    @property
    def path(self) -> str:
        """Alias for relative_path."""
        return self._relative_path

    @property
    def absolute_path(self) -> str:
        """Resolved absolute path, ending in one separator."""
        return self._absolute_path

    @property
    def cwd(self) -> str:
        """Working directory this node was resolved against."""
        return self._cwd

    def add_child(self, name: str) -> "Directory":
        """Create a child directory and append it to this directory.

        Args:
            name: Name of the child, a single path segment

        Returns:
            The new child, so further children can be added to it

        Raises:
            InvalidArgumentError: If name is not a non-empty string
            InvalidChildNameError: If name contains ":", "\\" or "/"
        """
        if not isinstance(name, str) or not name:
            raise InvalidArgumentError("Invalid directoryName specified (arg #1)")
        if any(sep in name for sep in CHILD_NAME_SEPARATORS):
            raise InvalidChildNameError(name)

        child = Directory(paths.join(self._relative_path, name), cwd=self._cwd)
        self._children.append(child)
        return child

    def get_child(self, relative_path: str) -> "Directory":
        """Find a descendant by its "/"-separated path of names.

        Each segment matches the first child with that name.

        Args:
            relative_path: Names separated by "/", e.g. "src/handlers"

        Returns:
            The directory at the end of the path

        Raises:
            InvalidArgumentError: If relative_path is not a non-empty string
            ChildNotFoundError: If any segment has no matching child
        """
        if not isinstance(relative_path, str) or not relative_path:
            raise InvalidArgumentError("Invalid child path specified (arg #1)")

        current = self
        for segment in relative_path.split(LOOKUP_SEPARATOR):
            match = next((c for c in current._children if c.name == segment), None)
            if match is None:
                raise ChildNotFoundError(relative_path)
            current = match
        return current

    def get_children(self) -> list["Directory"]:
        """Get a copy of the immediate children in insertion order."""
        return list(self._children)

    def get_file_path(self, file_name: str | None = None) -> str:
        """Get the path to a file in this directory.

        The file does not have to exist.

        Args:
            file_name: Name of the file. If not a string (e.g. None), returns
                the directory path.

        Returns:
            Path to the file, joined onto relative_path
        """
        if not isinstance(file_name, str):
            file_name = ""
        return paths.join(self._relative_path, file_name)

    def get_all_files_pattern(self, extension: str | None = None) -> str:
        """Get a glob matching all files in this directory and below.

        Args:
            extension: Only match files with this extension (without the dot).
                If not a string, all files are matched.

        Returns:
            Pattern such as "src/**/*" or "src/**/*.py"
        """
        wildcard = f"*.{extension}" if isinstance(extension, str) else "*"
        return paths.join(self._relative_path, "**", wildcard)

    @staticmethod
    def create_tree(
        root_path: str, tree: Mapping[str, Any], cwd: str | None = None
    ) -> "Directory":
        """Build a tree from a nested mapping. See create_tree()."""
        return create_tree(root_path, tree, cwd=cwd)

    @staticmethod
    def traverse_tree(
        root: "Directory", callback: Callable[["Directory", int], object]
    ) -> None:
        """Visit every node of a tree. See traverse_tree()."""
        traverse_tree(root, callback)


def create_tree(
    root_path: str, tree: Mapping[str, Any], cwd: str | None = None
) -> Directory:
    """Build a directory tree described by a nested mapping.

    Every key becomes a child directory, in the mapping's iteration order.
    A value that is itself a mapping describes that child's children; any
    other value (None, strings, lists, ...) makes the child a leaf.

    Args:
        root_path: Path to the root directory of the tree
        tree: Nested mapping of directory names
        cwd: Working directory to resolve relative paths against

    Returns:
        The root directory

    Raises:
        InvalidArgumentError: If root_path is not a string, tree is not a
            mapping, or a key is not a valid directory name

    Example:
        >>> root = create_tree(".", {"src": {"handlers": None}, "test": None})
        >>> [c.name for c in root.get_children()]
        ['src', 'test']
    """
    if not isinstance(root_path, str):
        raise InvalidArgumentError("Invalid rootPath specified (arg #1)")
    if not isinstance(tree, Mapping):
        raise InvalidArgumentError("Invalid tree specified (arg #2)")

    root = Directory(root_path, cwd=cwd)
    pending: list[tuple[Directory, Mapping[str, Any]]] = [(root, tree)]
    while pending:
        parent, description = pending.pop()
        for name, subtree in description.items():
            child = parent.add_child(name)
            if isinstance(subtree, Mapping):
                pending.append((child, subtree))
    return root


def iter_tree(root: Directory) -> Iterator[tuple[Directory, int]]:
    """Yield (node, depth) pairs in depth-first pre-order.

    The root has depth 0 and siblings are yielded in insertion order.

    Raises:
        InvalidArgumentError: If root is not a Directory (raised on call,
            not on first iteration)
    """
    if not isinstance(root, Directory):
        raise InvalidArgumentError("Invalid root directory specified (arg #1)")
    return _walk(root)


def _walk(root: Directory) -> Iterator[tuple[Directory, int]]:
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        # Reversed so the first child is popped first
        stack.extend((child, depth + 1) for child in reversed(node.get_children()))


def traverse_tree(
    root: Directory, callback: Callable[[Directory, int], object]
) -> None:
    """Call callback(node, depth) for every node in depth-first pre-order.

    Args:
        root: Root of the tree to traverse
        callback: Called with each node and its depth (root is 0)

    Raises:
        InvalidArgumentError: If root is not a Directory or callback is not
            callable
    """
    if not isinstance(root, Directory):
        raise InvalidArgumentError("Invalid root directory specified (arg #1)")
    if not callable(callback):
        raise InvalidArgumentError("Invalid callback function specified (arg #2)")

    for node, depth in iter_tree(root):
        callback(node, depth)
