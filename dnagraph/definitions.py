from dataclasses import dataclass, field
from typing import List, Tuple
from collections import namedtuple


class DNAGraphError(Exception):
    pass


class DecodeError(DNAGraphError, ValueError):
    """A symbol string could not be decoded into a graph."""


class InvalidSymbol(DecodeError):
    pass


class MalformedList(DecodeError):
    pass


class UndeclaredVertex(DNAGraphError, KeyError):
    """An edge references a vertex that is not part of the vertex set."""

    def __init__(self, label):
        super().__init__(label)
        self.label = label

    def __str__(self):
        return f'Edge references undeclared vertex {self.label!r}.'


class SearchSpaceExceeded(DNAGraphError, RuntimeError):
    """The isomorphism check gave up. This says nothing about (non-)isomorphism."""

    def __init__(self, num_assignments: int, limit: int):
        super().__init__(
            f'Graphs cannot be checked for isomorphism: {num_assignments} partial '
            f'vertex assignments exceed the limit of {limit}.'
        )
        self.num_assignments = num_assignments
        self.limit = limit


class IoFailure(DNAGraphError, OSError):
    pass


def render_graph(vertices, edge_list) -> str:
    """Renders the canonical form `G=({v0,v1,...},{(s0,t0),(s1,t1),...})`."""
    verts = ','.join(str(v) for v in vertices)
    edges = ','.join(f'({s},{t})' for s, t in edge_list)
    return f'G=({{{verts}}},{{{edges}}})'


@dataclass
class Graph:
    vertices: List[int] = field(default_factory=list)
    edge_list: List[Tuple[int, int]] = field(default_factory=list)

    def __post_init__(self):
        self.vertices = list(self.vertices)
        self.edge_list = [tuple(edge) for edge in self.edge_list]

    @property
    def num_nodes(self) -> int:
        return len(self.vertices)

    @property
    def num_edges(self) -> int:
        return len(self.edge_list)

    def validate(self):
        vertex_set = set(self.vertices)
        for edge in self.edge_list:
            for vertex in edge:
                if vertex not in vertex_set:
                    raise UndeclaredVertex(vertex)
        return self

    def __str__(self):
        return render_graph(self.vertices, self.edge_list)


Codec = namedtuple('Codec', ['serialize', 'deserialize'])
