"""
Conversions between integers and strings over the DNA alphabet {A, C, G, T}.

Two independent radix mappings are used:

    radix 4: 0,1,2,3 <-> A,C,G,T   (vertex references, Huffman codewords)
    radix 3: 0,1,2   <-> A,C,G     (list headers and fields)

The radix-3 mapping never emits T, so T can act as an unambiguous field
separator in the list wire-format:

    <width L, radix 3> T <value_0>...<value_k-1, each radix 3 at width L> T

The greedy "sum" numeral used by the Sum codec also lives here.
"""
from typing import List, Sequence, Tuple

from .definitions import InvalidSymbol, MalformedList

SEPARATOR = 'T'

_SYMBOLS = {
    3: 'ACG',
    4: 'ACGT',
}

# Weights of the sum numeral, largest first.
SUM_WEIGHTS = (('G', 5), ('C', 2), ('A', 1))
_SUM_VALUES = {symbol: weight for symbol, weight in SUM_WEIGHTS}


def _symbols(radix: int) -> str:
    try:
        return _SYMBOLS[radix]
    except KeyError:
        raise InvalidSymbol(f'Radix {radix} is not supported.') from None


def encode_fixed(value: int, radix: int, min_width: int = 0) -> str:
    """Renders `value` in `radix`, left-padded with the zero symbol.

    Args:
        value: A non-negative integer.
        radix: 3 or 4.
        min_width: Lower bound of the output length. Longer representations are not truncated.

    Returns:
        The DNA representation of `value`.
    """
    symbols = _symbols(radix)
    if value < 0:
        raise ValueError(f'Cannot encode negative value {value}.')

    digits = []
    while True:
        value, digit = divmod(value, radix)
        digits.append(symbols[digit])
        if value == 0:
            break
    return ''.join(reversed(digits)).rjust(min_width, symbols[0])


def decode(text: str, radix: int) -> int:
    """Inverse of `encode_fixed`."""
    symbols = _symbols(radix)
    if not text:
        raise InvalidSymbol(f'Cannot decode an empty radix-{radix} field.')

    value = 0
    for char in text:
        digit = symbols.find(char)
        if digit < 0:
            raise InvalidSymbol(f'{char!r} is not a radix-{radix} symbol.')
        value = value * radix + digit
    return value


def write_list(values: Sequence[int]) -> str:
    '''Writes a non-empty list of non-negative integers. Can be read with `read_list`.'''
    if not values:
        raise ValueError('Cannot write an empty list.')

    width = len(encode_fixed(max(values), 3))
    fields = ''.join(encode_fixed(v, 3, width) for v in values)
    return f'{encode_fixed(width, 3)}{SEPARATOR}{fields}{SEPARATOR}'


def read_list(text: str) -> Tuple[List[int], str]:
    '''
    Reads a list written with `write_list` from the beginning of `text`.
    Returns the values and the unconsumed rest of `text`.
    '''
    header_end = text.find(SEPARATOR)
    if header_end < 0:
        raise MalformedList('List header is not terminated.')
    header = text[:header_end]

    body_start = header_end + 1
    body_end = text.find(SEPARATOR, body_start)
    if body_end < 0:
        raise MalformedList('List body is not terminated.')
    body = text[body_start:body_end]
    rest = text[body_end + 1:]

    # an empty header introduces the empty list
    if not header:
        if body:
            raise MalformedList('List without field width has a non-empty body.')
        return [], rest

    width = decode(header, 3)
    if width == 0 or len(body) % width:
        raise MalformedList(
            f'List body of length {len(body)} does not split into fields of width {width}.'
        )
    values = [decode(body[i:i + width], 3) for i in range(0, len(body), width)]
    return values, rest


def sum_encode(value: int) -> str:
    """Greedy sum numeral: G=5, C=2, A=1. Zero is the empty string."""
    if value < 0:
        raise ValueError(f'Cannot encode negative value {value}.')

    symbols = []
    for symbol, weight in SUM_WEIGHTS:
        count, value = divmod(value, weight)
        symbols.append(symbol * count)
    return ''.join(symbols)


def sum_decode(text: str) -> int:
    value = 0
    for char in text:
        try:
            value += _SUM_VALUES[char]
        except KeyError:
            raise InvalidSymbol(f'{char!r} is not a sum-numeral symbol.') from None
    return value
