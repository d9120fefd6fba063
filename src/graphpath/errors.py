"""Errors raised while building or querying a graph."""


class GraphError(Exception):
    """Base class for every error raised by graphpath."""


class DuplicateNodeError(GraphError, ValueError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Node '{name}' already exists.")


class UnknownNodeError(GraphError, LookupError):
    def __init__(self, name, message=None):
        self.name = name
        super().__init__(message or f"Node '{name}' does not exist.")


class UnknownSourceError(UnknownNodeError):
    def __init__(self, name):
        super().__init__(name, f"Starting node '{name}' must be in graph.")


class SelfLoopError(GraphError, ValueError):
    def __init__(self, name):
        self.name = name
        super().__init__(f"Node '{name}' may not connect to itself.")


class NonPositiveWeightError(GraphError, ValueError):
    def __init__(self, weight):
        self.weight = weight
        super().__init__(f"Weight must be a positive finite number, got {weight!r}.")


class UnreachableDestinationError(GraphError):
    def __init__(self, source, destination):
        self.source = source
        self.destination = destination
        super().__init__(f"Node '{destination}' is not reachable from '{source}'.")


class NoPathError(GraphError):
    """Predecessor links do not lead back to the source."""

    def __init__(self, source, destination, reason=""):
        self.source = source
        self.destination = destination
        message = f"No path from '{source}' to '{destination}'"
        if reason:
            message += f": {reason}"
        super().__init__(message + ".")
