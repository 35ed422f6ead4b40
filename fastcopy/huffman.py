"""n-ary Huffman coding used to generate prefix-free labels."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


@dataclass
class _Node:
    index: int
    freq: int
    children: list[_Node] = field(default_factory=list)


class _NodeHeap:
    """Binary min-heap on node frequency.

    The sift order is fixed so that ties between equal frequencies are
    always broken the same way, which keeps generated labels stable.
    """

    def __init__(self, nodes: Iterable[_Node]) -> None:
        self._items = list(nodes)
        n = len(self._items)
        for i in reversed(range(n // 2)):
            self._down(i, n)

    def __len__(self) -> int:
        return len(self._items)

    def _less(self, i: int, j: int) -> bool:
        return self._items[i].freq < self._items[j].freq

    def _swap(self, i: int, j: int) -> None:
        items = self._items
        items[i], items[j] = items[j], items[i]

    def _up(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(parent, j)
            j = parent

    def _down(self, i: int, n: int) -> None:
        while True:
            left = 2 * i + 1
            if left >= n:
                break
            child = left
            right = left + 1
            if right < n and self._less(right, left):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child

    def push(self, node: _Node) -> None:
        self._items.append(node)
        self._up(len(self._items) - 1)

    def pop(self) -> _Node:
        last = len(self._items) - 1
        self._swap(0, last)
        self._down(0, last)
        return self._items.pop()


def label(alphabet_size: int, freqs: Iterable[int]) -> list[list[int]]:
    """Generate unique prefix-free labels for items with the given frequencies.

    Each label is a list of indexes into an alphabet of ``alphabet_size``
    symbols. Items with higher frequencies get shorter labels.
    """
    if alphabet_size < 2:
        raise ValueError("alphabet must have at least two elements")

    freqs = list(freqs)
    if not freqs:
        return []
    if len(freqs) == 1:
        return [[0]]

    heap = _NodeHeap(_Node(index=i, freq=f) for i, f in enumerate(freqs))
    while len(heap) > 1:
        children: list[_Node] = []
        while len(children) < alphabet_size and len(heap) > 0:
            children.append(heap.pop())
        heap.push(
            _Node(
                index=-1,
                freq=sum(child.freq for child in children),
                children=children,
            )
        )

    labels: list[list[int]] = [[] for _ in freqs]
    stack: list[tuple[_Node, tuple[int, ...]]] = [(heap.pop(), ())]
    while stack:
        node, prefix = stack.pop()
        if node.index >= 0:
            labels[node.index] = list(prefix)
            continue
        for i, child in enumerate(node.children):
            stack.append((child, prefix + (i,)))
    return labels