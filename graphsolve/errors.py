"""Exceptions raised when a graph problem has no solution."""


class ImpossibleError(Exception):
    """The requested structure (route, tree, cycle, assignment...) does not exist."""

    def __init__(self, message: str = "IMPOSSIBLE") -> None:
        super().__init__(message)