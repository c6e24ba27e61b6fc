"""
Canonical Huffman coding with branching factor 4.

The tree is kept as an arena: a list of `HuffmanNode`s in creation order,
where internal nodes refer to their children by index. Leaves come first, one
per vertex in ascending vertex order, so ties between equal frequencies are
broken by creation order.

A leaf at depth d (the root has depth 1) receives a codeword of d - 1 base-4
symbols. Codewords are assigned canonically: level by level, vertices in
ascending order, consecutive integers, with the counter multiplied by 4 when
moving one level deeper. Only the number of leaves per level is therefore
needed to rebuild the code.
"""
import heapq
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence

from absl import logging

from .dna import encode_fixed

BRANCHING_FACTOR = 4


@dataclass
class HuffmanNode:
    frequency: int
    vertex: Optional[int] = None
    children: List[int] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return not self.children


def initial_merge_count(num_leaves: int) -> int:
    '''Number of nodes to merge first so that all later merges take exactly 4.'''
    if num_leaves == 1:
        return 1
    return 2 + (num_leaves - 2) % (BRANCHING_FACTOR - 1)


def build_huffman_tree(frequencies: Sequence[int]) -> List[HuffmanNode]:
    """Builds a 4-ary Huffman tree over the vertices 0..len(frequencies)-1.

    Args:
        frequencies: The frequency of each vertex. Must not be empty.

    Returns:
        The node arena. The root is the last node.
    """
    if len(frequencies) == 0:
        raise ValueError('Cannot build a Huffman tree without leaves.')

    nodes = [HuffmanNode(int(f), vertex=v) for v, f in enumerate(frequencies)]
    queue = [(node.frequency, index) for index, node in enumerate(nodes)]
    heapq.heapify(queue)

    def merge(n):
        # pop the n least frequent nodes and push their parent
        children = [heapq.heappop(queue)[1] for _ in range(n)]
        parent = HuffmanNode(sum(nodes[c].frequency for c in children), children=children)
        nodes.append(parent)
        heapq.heappush(queue, (parent.frequency, len(nodes) - 1))

    merge(initial_merge_count(len(queue)))
    while len(queue) != 1:
        merge(BRANCHING_FACTOR)

    logging.debug('Built Huffman tree with %d leaves and %d nodes.', len(frequencies), len(nodes))
    return nodes


def group_leaves_by_length(nodes: List[HuffmanNode]) -> List[List[int]]:
    '''
    Groups the leaf vertices by codeword length (tree depth - 1).
    Index i of the result holds the sorted vertices whose codewords have length i.
    '''
    levels: List[List[int]] = []
    stack = [(len(nodes) - 1, 0)]
    while stack:
        index, length = stack.pop()
        node = nodes[index]
        if node.is_leaf:
            while len(levels) <= length:
                levels.append([])
            levels[length].append(node.vertex)
        else:
            stack.extend((child, length + 1) for child in node.children)

    return [sorted(level) for level in levels]


def canonical_codebook(levels: Sequence[Sequence[int]]) -> Dict[int, str]:
    """Generates the canonical codebook from the vertices grouped by codeword length.

    Args:
        levels: Index i holds the vertices with codewords of length i, in the order they are coded.

    Returns:
        A mapping vertex -> codeword.
    """
    codebook = {}
    code = 0
    for length, level in enumerate(levels):
        for vertex in level:
            codebook[vertex] = encode_fixed(code, BRANCHING_FACTOR, length)
            code += 1
        code *= BRANCHING_FACTOR
    return codebook
