"""Custom exceptions for dirtree."""


class DirtreeError(Exception):
    """Base exception for dirtree."""


class InvalidArgumentError(DirtreeError, TypeError):
    """Argument failed a type, shape or non-emptiness check."""


class InvalidChildNameError(InvalidArgumentError, ValueError):
    """Child directory name is not a single path segment."""

    def __init__(self, name: str):
        self.name = name
        super().__init__("Directory name cannot include path separators (:, \\ or /)")


class NotFoundError(DirtreeError, LookupError):
    """Requested node does not exist in the tree."""


class ChildNotFoundError(NotFoundError):
    """No child exists at the requested relative path."""

    def __init__(self, path: str):
        self.path = path  # Full lookup path as requested, not the failing segment
        super().__init__(f"Child not found at path: [{path}]")
