from __future__ import annotations

import itertools
import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Generic, Hashable, Iterable, Iterator, List, Mapping, Sequence, Tuple, TypeVar, Union

from pqueue import StablePriorityQueue

S = TypeVar("S", bound=Hashable)

Bit = int # 0 -> left, 1 -> right
Encoding = Tuple[Bit, ...] # root-to-leaf path, root end first


class HuffmanError(ValueError):
    pass


class EmptyInputError(HuffmanError):
    def __init__(self, message: str = "cannot build a Huffman tree from empty input"):
        super().__init__(message)


class TruncatedEncodingError(HuffmanError):
    def __init__(self, bit_offset: int, decoded_count: int):
        self.bit_offset = bit_offset # number of bits consumed when the stream ran out
        self.decoded_count = decoded_count # symbols fully decoded before that point
        super().__init__(
            f"bit stream ended mid-symbol after {bit_offset} bits ({decoded_count} symbols decoded)"
        )


class InvalidBitError(HuffmanError):
    def __init__(self, bit, bit_offset: int):
        self.bit = bit
        self.bit_offset = bit_offset
        super().__init__(f"invalid bit {bit!r} at offset {bit_offset}, expected 0 or 1")


class TrailingBitsError(HuffmanError):
    def __init__(self):
        super().__init__("a single-leaf tree has an empty code, but the bit stream is not empty")


class UnknownSymbolError(HuffmanError):
    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"symbol {symbol!r} is not in the code table")


class SymbolCountError(HuffmanError):
    def __init__(self, count: int, expected: int):
        self.count = count
        self.expected = expected
        super().__init__(
            f"single-symbol code can only carry messages of {expected} symbols, got {count}"
        )


# Tree variants

@dataclass(frozen=True)
class Leaf(Generic[S]):
    weight: int # occurrence count of the symbol
    symbol: S


@dataclass(frozen=True, eq=False, repr=False)
class Node(Generic[S]):
    weight: int # always left.weight + right.weight
    left: "Tree[S]"
    right: "Tree[S]"

    # generated eq/hash/repr would recurse, so trees deeper than the
    # recursion limit are compared through their pre-order walk
    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return _preorder(self) == _preorder(other)

    def __hash__(self):
        return hash(tuple(_preorder(self)))

    def __repr__(self):
        return f"Node(weight={self.weight}, leaves={leaf_count(self)})"


Tree = Union[Leaf[S], Node[S]]
Table = Mapping[S, Encoding]


def _preorder(tree: Tree) -> List[tuple]:
    # pre-order with a variant tag determines the shape uniquely
    out = []
    stack = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            out.append(("leaf", node.weight, node.symbol))
        else:
            out.append(("node", node.weight))
            stack.append(node.right)
            stack.append(node.left)
    return out


def tree_weight(tree: Tree) -> int:
    return tree.weight


def iter_leaves(tree: Tree) -> Iterator[Leaf]:
    # left-to-right, without recursion
    stack = [tree]
    while stack:
        node = stack.pop()
        if isinstance(node, Leaf):
            yield node
        else:
            stack.append(node.right)
            stack.append(node.left)


def leaf_count(tree: Tree) -> int:
    return sum(1 for _ in iter_leaves(tree))


# Frequency counter

def count_frequencies(symbols: Iterable[S]) -> List[Tuple[S, int]]:
    """
    Count occurrences of every distinct symbol in one pass.
    Pairs come back in order of each symbol's first appearance
    """
    counts = {}
    for s in symbols:
        counts[s] = counts.get(s, 0) + 1
    return list(counts.items())


# Tree builder

def build_tree(frequencies: Iterable[Tuple[S, int]]) -> Tree:
    """
    Greedy Huffman merge over (symbol, weight) pairs.

    The two lowest-weight elements are merged until one remains; the first
    one out of the queue becomes the left child. Equal weights leave the
    queue in insertion order, so the tree shape is reproducible.
    Raises EmptyInputError when there is nothing to build from.
    """
    queue = StablePriorityQueue.empty(tree_weight)
    for symbol, weight in frequencies:
        queue.insert(Leaf(weight, symbol))

    while True:
        lowest = queue.take(2)
        if not lowest:
            raise EmptyInputError()
        if len(lowest) == 1:
            return lowest[0] # single survivor is the root
        left, right = lowest
        queue.drop(2).insert(Node(left.weight + right.weight, left, right))


# Table deriver

def derive_table(tree: Tree) -> Table:
    table = {}
    stack: List[Tuple[Tree, Encoding]] = [(tree, ())]
    while stack:
        node, path = stack.pop()
        if isinstance(node, Leaf):
            table[node.symbol] = path
            continue
        # right pushed first so the left subtree is visited first
        stack.append((node.right, path + (1,)))
        stack.append((node.left, path + (0,)))
    return MappingProxyType(table)


def is_prefix_free(table: Table) -> bool:
    codes = sorted(table.values())
    for shorter, longer in zip(codes, codes[1:]):
        if longer[:len(shorter)] == shorter:
            return False
    return True


def average_code_length(table: Table, frequencies: Sequence[Tuple[S, int]]) -> float:
    total = sum(count for _, count in frequencies)
    if total == 0:
        return 0.0
    return sum(len(table[s]) * count for s, count in frequencies) / total


def entropy(frequencies: Sequence[Tuple[S, int]]) -> float:
    # Shannon entropy in bits per symbol, the lower bound for average_code_length
    total = sum(count for _, count in frequencies)
    h = 0.0
    for _, count in frequencies:
        if count > 0:
            p = count / total
            h -= p * math.log2(p)
    return h


# Encoder / decoder

def encode_with_table(table: Table, symbols: Iterable[S]) -> Encoding:
    # concatenated codes, in input order, for a table that is already derived
    return tuple(itertools.chain.from_iterable(table[s] for s in symbols))


def encode(symbols: Iterable[S]) -> Tuple[Tree, Encoding]:
    symbols = list(symbols)
    tree = build_tree(count_frequencies(symbols))
    table = derive_table(tree)
    return tree, encode_with_table(table, symbols)


def decode(tree: Tree, bits: Iterable[Bit]) -> List[S]:
    """
    Walk the tree bit by bit, emitting a symbol at every leaf and restarting
    at the root.

    A tree that is a single leaf has an empty code for its symbol; it decodes
    to the symbol repeated leaf.weight times and accepts no bits.
    """
    if isinstance(tree, Leaf):
        if next(iter(bits), None) is not None:
            raise TrailingBitsError()
        return [tree.symbol] * tree.weight

    decoded = []
    node = tree
    offset = 0
    for bit in bits:
        if bit == 0:
            node = node.left
        elif bit == 1:
            node = node.right
        else:
            raise InvalidBitError(bit, offset)
        offset += 1
        if isinstance(node, Leaf):
            decoded.append(node.symbol)
            node = tree

    if node is not tree:
        raise TruncatedEncodingError(offset, len(decoded))
    return decoded


class HuffmanCode(Generic[S]): # tree + derived table, reusable across encode/decode calls
    def __init__(self, tree: Tree):
        self.tree = tree
        self.table = derive_table(tree)

    @classmethod
    def from_frequencies(cls, frequencies: Iterable[Tuple[S, int]]) -> "HuffmanCode[S]":
        return cls(build_tree(frequencies))

    @classmethod
    def from_symbols(cls, symbols: Iterable[S]) -> "HuffmanCode[S]":
        return cls.from_frequencies(count_frequencies(symbols))

    @property
    def weight(self) -> int:
        return self.tree.weight

    def code_for(self, symbol: S) -> Encoding:
        try:
            return self.table[symbol]
        except KeyError:
            raise UnknownSymbolError(symbol) from None

    def encode(self, symbols: Iterable[S]) -> Encoding:
        """
        Concatenate the cached codes of symbols.

        A single-leaf code encodes everything to (), and its decode always
        yields tree.weight symbols, so only messages of exactly that length
        are accepted
        """
        if isinstance(self.tree, Leaf):
            symbols = list(symbols)
            for s in symbols:
                self.code_for(s)
            if len(symbols) != self.tree.weight:
                raise SymbolCountError(len(symbols), self.tree.weight)
            return ()
        return tuple(itertools.chain.from_iterable(self.code_for(s) for s in symbols))

    def decode(self, bits: Iterable[Bit]) -> List[S]:
        return decode(self.tree, bits)

    def __contains__(self, symbol) -> bool:
        return symbol in self.table

    def __len__(self) -> int:
        return len(self.table)
