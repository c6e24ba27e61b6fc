from .definitions import Graph
import fastremap
import numpy as np


def flatten(l):
    return [item for sublist in l for item in sublist]


def graph_to_vertex_list(graph):
    return flatten(graph.edge_list)


def relabel_vertices(edge_list: list, start: int = 0) -> list:
    '''Renumbers edge endpoints densely, in order of first appearance, starting at `start`.'''
    if not edge_list:
        return []
    vertex_array, _ = fastremap.renumber(
        np.array(flatten(edge_list), dtype=np.int64), start=start, preserve_zero=False
    )
    vertex_list = vertex_array.tolist()
    return list(zip(vertex_list[::2], vertex_list[1::2]))


def degree_frequencies(graph: Graph) -> np.ndarray:
    '''Counts the edge endpoints touching each vertex. Self-loops count twice.'''
    endpoints = np.array(graph_to_vertex_list(graph), dtype=np.int64)
    return np.bincount(endpoints, minlength=graph.num_nodes)
