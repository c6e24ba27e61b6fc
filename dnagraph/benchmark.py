"""
Round-trip checks and length reports for the codecs.

`check_isomorphism_preservation` serializes random graphs with a codec (both
with and without preserve_order), deserializes them again and checks the result
against the original with `is_isomorphic`.

`write_report` writes a `;`-separated table with one random graph per vertex
count and the output of every codec, so that representation lengths can be
compared.
"""
import csv
import math
import os
from datetime import datetime
from typing import Dict, Optional

import numpy as np
from absl import logging
from tqdm import tqdm

from .datasets import sample_gaussian_graph, sample_uniform_graph
from .definitions import Codec, Graph, IoFailure
from .isomorphism import is_isomorphic


def survives_round_trip(codec: Codec, graph: Graph) -> bool:
    for preserve_order in (True, False):
        decoded = codec.deserialize(codec.serialize(graph, preserve_order))
        if not is_isomorphic(graph, decoded):
            logging.warning(
                'Round trip (preserve_order=%s) changed %s into %s.', preserve_order, graph, decoded
            )
            return False
    return True


def check_isomorphism_preservation(
    codec: Codec,
    max_num_nodes: int = 10,
    graphs_per_size: int = 10,
    rng: Optional[np.random.Generator] = None,
) -> bool:
    """Checks that random graphs survive a round trip through `codec`.

    Args:
        codec: The codec to check.
        max_num_nodes: Graphs with 1 to max_num_nodes - 1 vertices are sampled.
        graphs_per_size: Number of uniform and of Gaussian graphs per vertex count.
        rng: The random generator used for sampling.

    Returns:
        True if every decoded graph is isomorphic to its original.

    Raises:
        SearchSpaceExceeded: If a sampled graph has a degree class too large for `is_isomorphic`.
    """
    rng = rng if rng is not None else np.random.default_rng()

    for num_nodes in range(1, max_num_nodes):
        for _ in range(graphs_per_size):
            num_edges = int(rng.integers(0, num_nodes * num_nodes + 1))
            if not survives_round_trip(codec, sample_uniform_graph(num_nodes, num_edges, rng)):
                return False

    for num_nodes in range(1, max_num_nodes):
        mean = num_nodes / 2
        scale = rng.uniform(0, num_nodes / 2)
        for _ in range(graphs_per_size):
            num_edges = int(rng.integers(0, num_nodes * num_nodes + 1))
            graph = sample_gaussian_graph(num_nodes, num_edges, mean, scale, rng)
            if not survives_round_trip(codec, graph):
                return False

    return True


def write_report(
    codecs: Dict[str, Codec],
    max_num_nodes: int,
    rng: Optional[np.random.Generator] = None,
    output_dir: str = 'benchmark',
) -> str:
    """Writes the representations of random graphs under every codec to a CSV file.

    Args:
        codecs: Codecs by display name. The name is used in the column headers.
        max_num_nodes: One graph is sampled for every vertex count 1..max_num_nodes.
        rng: The random generator used for sampling.
        output_dir: Directory the report is written to. Created if missing.

    Returns:
        The path of the written file.
    """
    rng = rng if rng is not None else np.random.default_rng()
    timestamp = datetime.now().strftime('%Y-%m-%d-%H-%M-%S')
    path = os.path.join(output_dir, f'{timestamp}-DNASequenceLength.csv')

    header = ['VerticesInGraph', 'EdgesInGraph', 'graphString']
    for name in codecs:
        header.extend((f'preserveOrder{name}', f'noOrder{name}'))

    try:
        os.makedirs(output_dir, exist_ok=True)
        try:
            with open(path, 'w', newline='') as f:
                writer = csv.writer(f, delimiter=';')
                writer.writerow(header)

                for num_nodes in tqdm(range(1, max_num_nodes + 1), desc='writing report'):
                    num_edges = math.ceil(num_nodes * num_nodes / 4)
                    graph = sample_gaussian_graph(num_nodes, num_edges, num_nodes / 2, num_nodes / 4, rng)

                    row = [num_nodes, num_edges, str(graph)]
                    for codec in codecs.values():
                        row.append(codec.serialize(graph, True))
                        row.append(codec.serialize(graph, False))
                    writer.writerow(row)
        except BaseException:
            # an aborted batch leaves no report behind
            if os.path.exists(path):
                os.remove(path)
            raise
    except OSError as e:
        raise IoFailure(f'Could not write report to {path}: {e}') from e

    logging.info('Wrote report for %d codecs to %s.', len(codecs), path)
    return path
