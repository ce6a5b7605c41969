"""In-memory directory trees for computing build paths and glob patterns."""

from dirtree.directory import Directory
from dirtree.directory import create_tree
from dirtree.directory import iter_tree
from dirtree.directory import traverse_tree
from dirtree.exceptions import ChildNotFoundError
from dirtree.exceptions import DirtreeError
from dirtree.exceptions import InvalidArgumentError
from dirtree.exceptions import InvalidChildNameError
from dirtree.exceptions import NotFoundError

__version__ = "0.1.0"

__all__ = [
    "ChildNotFoundError",
    "Directory",
    "DirtreeError",
    "InvalidArgumentError",
    "InvalidChildNameError",
    "NotFoundError",
    "create_tree",
    "iter_tree",
    "traverse_tree",
]
