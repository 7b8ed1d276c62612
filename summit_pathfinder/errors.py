"""Exceptions raised by summit_pathfinder."""


class PathfinderError(Exception):
    """Base exception class for summit_pathfinder."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MalformedInput(PathfinderError):
    """The elevation grid text or array is not a valid map."""

    def __init__(self, message: str, row: int = None, column: int = None, **kwargs):
        super().__init__(message, **kwargs)
        self.row = row
        self.column = column

    def __str__(self) -> str:
        base_msg = super().__str__()
        if self.row is not None and self.column is not None:
            return f"{base_msg} (row {self.row}, column {self.column})"
        if self.row is not None:
            return f"{base_msg} (row {self.row})"
        return base_msg


class IoFailure(PathfinderError):
    """The input file is missing or unreadable."""

    def __init__(self, message: str, path: str = None, **kwargs):
        super().__init__(message, **kwargs)
        self.path = path


class Unreachable(PathfinderError):
    """The destination cannot be reached from the requested start(s)."""

    def __init__(self, message: str, start=None, **kwargs):
        super().__init__(message, **kwargs)
        self.start = start


class SearchAborted(PathfinderError):
    """A search hit its expansion cap or deadline before settling the goal."""

    def __init__(self, message: str, expansions: int = 0, **kwargs):
        super().__init__(message, **kwargs)
        self.expansions = expansions
