"""Exceptions raised by the pathfinding module."""


class PathfindingError(Exception):
    """Base class for pathfinding errors."""


class InvalidEdgeError(PathfindingError, ValueError):
    """An edge record is missing one of its three fields."""

    def __init__(self, index: int, record, reason: str = "missing field"):
        self.index = index
        self.record = record
        super().__init__(f"Invalid edge #{index} {record!r}: {reason}")


class NoPathError(PathfindingError):
    """No route connects the departure to the destination."""

    def __init__(self, departure, destination):
        self.departure = departure
        self.destination = destination
        super().__init__(f"No path from {departure} to {destination}")
