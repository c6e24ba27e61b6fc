"""
Bounded isomorphism check used as the correctness oracle for the codecs.

Vertices of the second graph may only be mapped onto vertices of the first
graph with the same degree frequency. All injective assignments consistent with
this are enumerated vertex by vertex; if more than SEARCH_SPACE_LIMIT partial
assignments are alive at once the check gives up with SearchSpaceExceeded.

Note that a candidate assignment is accepted only if it reproduces the edge
*sequence* of the first graph position for position. This is stricter than
graph isomorphism in the usual sense, which compares edge sets.
"""
from typing import List, Sequence

import numpy as np
from absl import logging

from .definitions import Graph, SearchSpaceExceeded, render_graph
from .utils import degree_frequencies

SEARCH_SPACE_LIMIT = 100_000


def candidate_translations(g1_frequencies: np.ndarray, g2_frequencies: np.ndarray) -> List[List[int]]:
    '''For every vertex of g2, the vertices of g1 with the same frequency.'''
    return [np.flatnonzero(g1_frequencies == f).tolist() for f in g2_frequencies]


def enumerate_assignments(candidates: Sequence[Sequence[int]], limit: int = SEARCH_SPACE_LIMIT) -> List[List[int]]:
    """Enumerates the injective assignments g2 vertex -> g1 vertex allowed by `candidates`.

    Args:
        candidates: For every vertex of g2 the vertices of g1 it may be mapped onto.
        limit: Maximum number of partial assignments alive after an extension step.

    Returns:
        All complete assignments, each a list indexed by g2 vertex.
    """
    assignments = [[]]
    for vertex, translations in enumerate(candidates):
        extended = []
        for assignment in assignments:
            taken = set(assignment)
            extended.extend(assignment + [t] for t in translations if t not in taken)

        if len(extended) > limit:
            logging.warning(
                'Isomorphism search exploded at vertex %d with %d partial assignments.',
                vertex, len(extended),
            )
            raise SearchSpaceExceeded(len(extended), limit)
        if not extended:
            return []
        assignments = extended
    return assignments


def is_isomorphic(g1: Graph, g2: Graph) -> bool:
    """Checks whether relabeling the vertices of `g2` reproduces the edge sequence of `g1`.

    Neither graph is modified.

    Args:
        g1: The reference graph.
        g2: The graph to relabel.

    Returns:
        True if some vertex bijection maps g2's edge sequence onto g1's, False otherwise.

    Raises:
        SearchSpaceExceeded: If the search space is too large to decide.
    """
    if g1.num_edges != g2.num_edges or g1.num_nodes != g2.num_nodes:
        return False

    g1_repr = str(g1)
    if g1_repr == str(g2):
        return True

    candidates = candidate_translations(degree_frequencies(g1), degree_frequencies(g2))
    for assignment in enumerate_assignments(candidates):
        translated_edges = [(assignment[s], assignment[t]) for s, t in g2.edge_list]
        if render_graph(g2.vertices, translated_edges) == g1_repr:
            return True
    return False
