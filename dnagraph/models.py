from .utils import (
    graph_to_vertex_list,
    relabel_vertices,
    degree_frequencies,
)
from .definitions import Codec, Graph, DecodeError, UndeclaredVertex, render_graph
from .dna import (
    SEPARATOR,
    encode_fixed,
    decode,
    write_list,
    read_list,
    sum_encode,
    sum_decode,
)
from .huffman import build_huffman_tree, group_leaves_by_length, canonical_codebook
from absl import logging
from typing import List, Tuple

AVAILABLE_CODECS = [
    'natural',
    'sum',
    'fixed_length',
    'huffman',
]


def load_codec(codec_name: str) -> Codec:
    if codec_name == 'natural':
        return NaturalCodec()
    elif codec_name == 'sum':
        return SumCodec()
    elif codec_name == 'fixed_length':
        return FixedLengthCodec()
    elif codec_name == 'huffman':
        return HuffmanCodec()
    else:
        raise ValueError(f'Codec {codec_name} is not available.')


def _brace_groups(text: str) -> Tuple[str, str]:
    groups = []
    position = 0
    for _ in range(2):
        start = text.find('{', position)
        end = text.find('}', start + 1) if start >= 0 else -1
        if end < 0:
            raise DecodeError(f'Expected two brace-delimited groups in {text!r}.')
        groups.append(text[start + 1:end])
        position = end + 1
    return groups[0], groups[1]


def _split_labels(group: str) -> List[str]:
    if not group.strip():
        return []
    labels = [label.strip() for label in group.split(',')]
    if not all(labels):
        raise DecodeError(f'Empty vertex label in {group!r}.')
    return labels


def NaturalCodec() -> Codec:
    """Reads/writes the natural form `G=({a,b,c},{(a,b),(a,c)})`.

    This is the only codec accepting arbitrary vertex labels: each distinct label is assigned
    a dense integer id in order of first appearance. Serializing ignores `preserve_order`.

    Returns:
        A natural-form codec.
    """

    def serialize(graph: Graph, preserve_order: bool = True) -> str:
        return render_graph(graph.vertices, graph.edge_list)

    def deserialize(text: str) -> Graph:
        vertex_group, edge_group = _brace_groups(text)

        vertex_ids = {}
        for label in _split_labels(vertex_group):
            vertex_ids.setdefault(label, len(vertex_ids))

        endpoints = _split_labels(edge_group.replace('(', '').replace(')', ''))
        if len(endpoints) % 2:
            raise DecodeError(f'Odd number of edge endpoints in {edge_group!r}.')
        try:
            ids = [vertex_ids[label] for label in endpoints]
        except KeyError as e:
            raise UndeclaredVertex(e.args[0]) from None

        return Graph(
            vertices=list(vertex_ids.values()),
            edge_list=list(zip(ids[::2], ids[1::2])),
        )

    return Codec(serialize, deserialize)


def SumCodec() -> Codec:
    """Encodes vertex references with the greedy sum numeral A=1, C=2, G=5.

    Layout: <vertex count> T, then <source> T <target> T for every edge. References are 1-based.
    Without `preserve_order`, the vertices touching an edge are renumbered by first appearance.

    Returns:
        A sum codec.
    """

    def serialize(graph: Graph, preserve_order: bool = True) -> str:
        if preserve_order:
            references = [(s + 1, t + 1) for s, t in graph.edge_list]
        else:
            references = relabel_vertices(graph.edge_list, start=1)

        fields = [sum_encode(graph.num_nodes), SEPARATOR]
        if not references:
            fields.append(SEPARATOR)
        for s, t in references:
            fields.extend((sum_encode(s), SEPARATOR, sum_encode(t), SEPARATOR))
        return ''.join(fields)

    def deserialize(text: str) -> Graph:
        count_field, separator, rest = text.partition(SEPARATOR)
        if not separator:
            raise DecodeError('Vertex count is not terminated.')
        num_nodes = sum_decode(count_field)

        # zero edges leave a lone separator
        if rest in ('', SEPARATOR):
            fields = []
        else:
            fields = rest.split(SEPARATOR)
            if fields.pop() != '':
                raise DecodeError('Last vertex reference is not terminated.')
            if len(fields) % 2:
                raise DecodeError(f'Odd number of vertex references ({len(fields)}).')

        endpoints = [sum_decode(f) - 1 for f in fields]
        if any(e < 0 for e in endpoints):
            raise DecodeError('Empty vertex reference.')

        graph = Graph(
            vertices=list(range(num_nodes)),
            edge_list=list(zip(endpoints[::2], endpoints[1::2])),
        )
        return graph.validate()

    return Codec(serialize, deserialize)


def FixedLengthCodec() -> Codec:
    """Encodes every vertex reference as a fixed-width base-4 field.

    Layout: <sentinel> C <source><target>... <sentinel> <trailing vertex count>, where the
    sentinel is the all-A field of the reference width. A graph without edges is written as
    C <vertex count>.

    Returns:
        A fixed-length codec.
    """

    def serialize(graph: Graph, preserve_order: bool = True) -> str:
        if not graph.edge_list:
            return 'C' + encode_fixed(graph.num_nodes, 4)

        used_vertices = set(graph_to_vertex_list(graph))
        references = {}
        last_used = 0
        for position, vertex in enumerate(graph.vertices):
            if vertex in used_vertices:
                references[vertex] = len(references) + 1
                last_used = position
            elif preserve_order:
                references[vertex] = len(references) + 1

        # the all-zero field must not be a valid reference
        width = len(encode_fixed(len(references), 4))
        sentinel = encode_fixed(0, 4, width)

        fields = [sentinel, 'C']
        for s, t in graph.edge_list:
            fields.append(encode_fixed(references[s], 4, width))
            fields.append(encode_fixed(references[t], 4, width))
        fields.append(sentinel)
        if preserve_order:
            fields.append(encode_fixed(graph.num_nodes - last_used - 1, 4))
        else:
            fields.append(encode_fixed(graph.num_nodes - len(used_vertices), 4))
        return ''.join(fields)

    def deserialize(text: str) -> Graph:
        header_end = text.find('C')
        if header_end < 0:
            raise DecodeError('Missing reference width header.')
        sentinel = text[:header_end]
        if sentinel.strip('A'):
            raise DecodeError(f'Reference width header {sentinel!r} is not all zero symbols.')
        width = len(sentinel)
        body = text[header_end + 1:]

        if width == 0:
            return Graph(vertices=list(range(decode(body, 4))))

        edge_list = []
        position = 0
        while True:
            source = body[position:position + width]
            if len(source) < width:
                raise DecodeError('Edge list is not terminated by a sentinel field.')
            position += width
            if source == sentinel:
                break
            target = body[position:position + width]
            if len(target) < width:
                raise DecodeError('Edge without target reference.')
            position += width
            edge = (decode(source, 4) - 1, decode(target, 4) - 1)
            if edge[1] < 0:
                raise DecodeError('Sentinel field used as edge target.')
            edge_list.append(edge)

        vertices = set(graph_to_vertex_list(Graph(edge_list=edge_list)))
        # vertices below the largest reference never touched an edge
        vertices.update(range(max(vertices, default=0)))
        num_trailing = decode(body[position:], 4)
        vertices.update(range(len(vertices), len(vertices) + num_trailing))

        return Graph(vertices=sorted(vertices), edge_list=edge_list)

    return Codec(serialize, deserialize)


def HuffmanCodec() -> Codec:
    """Encodes vertex references with a canonical 4-ary Huffman code over vertex degrees.

    With `preserve_order` the output is T, the list of codeword lengths per vertex, then the
    edge codewords. Otherwise it is the list of vertex counts per codeword length, then the
    edge codewords; vertices are renumbered in canonical code order.

    Returns:
        A Huffman codec.
    """

    def serialize(graph: Graph, preserve_order: bool = True) -> str:
        if graph.num_nodes == 0:
            return 'TTT' if preserve_order else 'TT'

        nodes = build_huffman_tree(degree_frequencies(graph))
        levels = group_leaves_by_length(nodes)
        codebook = canonical_codebook(levels)

        if preserve_order:
            header = SEPARATOR + write_list([len(codebook[v]) for v in graph.vertices])
        else:
            header = write_list([len(level) for level in levels])
        return header + ''.join(codebook[s] + codebook[t] for s, t in graph.edge_list)

    def deserialize(text: str) -> Graph:
        if text in ('TT', 'TTT'):
            return Graph()

        if text.startswith(SEPARATOR):
            logging.debug('Decoding order-preserving Huffman representation.')
            lengths, rest = read_list(text[1:])
            levels = [[] for _ in range(max(lengths, default=0) + 1)]
            for vertex, length in enumerate(lengths):
                levels[length].append(vertex)
            num_nodes = len(lengths)
        else:
            logging.debug('Decoding order-discarding Huffman representation.')
            counts, rest = read_list(text)
            levels = []
            num_nodes = 0
            for count in counts:
                levels.append(list(range(num_nodes, num_nodes + count)))
                num_nodes += count

        codebook = canonical_codebook(levels)
        for length, level in enumerate(levels):
            for vertex in level:
                if length == 0 or len(codebook[vertex]) != length:
                    raise DecodeError(f'Code lengths do not form a prefix code (length {length}).')
        lookup = {codeword: vertex for vertex, codeword in codebook.items()}
        max_length = len(levels) - 1

        edge_list = []
        source = None
        start = 0
        for end in range(1, len(rest) + 1):
            if end - start > max_length:
                raise DecodeError(f'No codeword matches {rest[start:end]!r}.')
            vertex = lookup.get(rest[start:end])
            if vertex is None:
                continue
            start = end
            if source is None:
                source = vertex
            else:
                edge_list.append((source, vertex))
                source = None

        if start != len(rest) or source is not None:
            raise DecodeError(f'Trailing symbols {rest[start:]!r} do not form an edge.')

        return Graph(vertices=list(range(num_nodes)), edge_list=edge_list)

    return Codec(serialize, deserialize)
