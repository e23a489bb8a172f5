"""Error kinds raised by the graph containers and algorithms."""

import numbers
from typing import Any, Optional


class InvalidEdge(ValueError):
    """An edge references a vertex outside the graph, or is malformed."""

    def __init__(self, edge: Any, reason: str):
        self.edge = edge
        super().__init__(f"invalid edge {edge!r}: {reason}")


class VertexOutOfRange(IndexError):
    """A vertex index outside ``[0, bound)`` was used."""

    def __init__(self, vertex: Any, bound: int):
        self.vertex = vertex
        self.bound = bound
        super().__init__(f"vertex {vertex!r} out of range [0, {bound})")


class NegativeWeight(ValueError):
    """An edge weight is negative where the algorithm requires non-negative weights."""

    def __init__(self, edge: Any, message: Optional[str] = None):
        self.edge = edge
        super().__init__(message or f"negative edge weight in {edge!r}")


def is_index(value: Any) -> bool:
    # numpy integer scalars register as numbers.Integral, bools are excluded
    return isinstance(value, numbers.Integral) and not isinstance(value, bool)


def check_vertex(vertex: Any, bound: int) -> int:
    """Return ``vertex`` as an ``int`` if it lies in ``[0, bound)``, else raise
    :class:`VertexOutOfRange`."""
    if not is_index(vertex) or not 0 <= vertex < bound:
        raise VertexOutOfRange(vertex, bound)
    return int(vertex)
