import numpy as np
from typing import Optional
from .definitions import Graph
from .models import NaturalCodec

AVAILABLE_DATASETS = {
    # small hand-written graphs
    'triangle_loops': 'G=({a,b,c},{(a,b),(a,c),(b,b),(b,c),(c,b)})',
    'sparse7': 'G=({a,b,c,d,e,f,g},{(a,d),(b,f),(b,b),(d,a),(b,g)})',

    # same edges as sparse7, with additional isolated vertices
    'sparse12': 'G=({a,b,c,k,l,p,m,d,e,f,g,q},{(a,d),(b,f),(b,b),(d,a),(b,g)})',
}


def load_dataset(dataset_name: str) -> Graph:
    if dataset_name not in AVAILABLE_DATASETS:
        raise ValueError(f'Dataset {dataset_name} is not available.')
    return NaturalCodec().deserialize(AVAILABLE_DATASETS[dataset_name])


def _graph_from_endpoints(num_nodes: int, endpoints: np.ndarray) -> Graph:
    edge_list = [tuple(edge) for edge in endpoints.reshape(-1, 2).tolist()]
    return Graph(vertices=list(range(num_nodes)), edge_list=edge_list)


def sample_uniform_graph(num_nodes: int, num_edges: int, rng: Optional[np.random.Generator] = None) -> Graph:
    """Samples a graph whose edge endpoints are drawn uniformly from the vertices.

    Args:
        num_nodes: The number of vertices. Vertices are 0, 1, ..., num_nodes - 1.
        num_edges: The number of edges. Self-loops and parallel edges may occur.
        rng: The random generator to draw endpoints from.

    Returns:
        A random graph.
    """
    rng = rng if rng is not None else np.random.default_rng()
    if num_nodes == 0:
        num_edges = 0
    endpoints = rng.integers(0, max(num_nodes, 1), size=2 * num_edges)
    return _graph_from_endpoints(num_nodes, endpoints)


def sample_gaussian_graph(
    num_nodes: int,
    num_edges: int,
    mean: float,
    scale: float,
    rng: Optional[np.random.Generator] = None,
) -> Graph:
    """Samples a graph whose edge endpoints are drawn from a clamped normal distribution.

    Args:
        num_nodes: The number of vertices. Vertices are 0, 1, ..., num_nodes - 1.
        num_edges: The number of edges.
        mean: Mean of the endpoint distribution.
        scale: Standard deviation of the endpoint distribution.
        rng: The random generator to draw endpoints from.

    Returns:
        A random graph.
    """
    rng = rng if rng is not None else np.random.default_rng()
    if num_nodes == 0:
        num_edges = 0
    samples = rng.normal(mean, scale, size=2 * num_edges).astype(np.int64)
    endpoints = np.clip(samples, 0, max(num_nodes - 1, 0))
    return _graph_from_endpoints(num_nodes, endpoints)
