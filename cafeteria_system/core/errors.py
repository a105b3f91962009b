"""Exceptions raised by the cafeteria core.

Every error here is recoverable: the drivers report it and go on with the
next command.
"""


class CafeteriaError(Exception):
    """Base class for recoverable cafeteria errors."""


class TraysExhausted(CafeteriaError):
    """Service was attempted while no tray is available."""

    def __init__(self, message: str = "No trays available right now. Restock first!"):
        super().__init__(message)


class NoTraysToReturn(CafeteriaError):
    """A tray return was attempted but no issued tray is outstanding."""

    def __init__(self, message: str = "No trays returned yet."):
        super().__init__(message)


class EmptyDispatch(CafeteriaError):
    """Dispatch was requested while nobody is waiting."""

    def __init__(self, message: str = "No customers waiting."):
        super().__init__(message)


class InvalidGraphEndpoint(CafeteriaError):
    """An edge referenced a node outside the facility graph.

    FacilityGraph.add_edge does not raise this; it ignores the edge and logs.
    The type is used to describe the rejected edge in diagnostics.
    """

    def __init__(self, u: int, v: int, num_nodes: int):
        self.u = u
        self.v = v
        self.num_nodes = num_nodes
        super().__init__(f"Edge {u}-{v} ignored: nodes must be in [0, {num_nodes})")
