"""
store.py — Index-Addressed Doubly Linked List
==============================================
The list lives in flat, parallel arrays.  Positions are slots, and every
relationship is a plain integer index (or None):

    nodes[i]       – the Node in slot i
    next_links[i]  – slot of i's successor, None if i is the tail
    prev_links[i]  – slot of i's predecessor, None if i is the head
    head_index     – slot of the head, None for an empty list

Slot order is NOT list order.  New nodes are always appended to the end
of the arrays and then linked in, so the only ground truth for "what the
list looks like" is traverse_forward().

Removing a slot shifts every later slot down by one.  remove_at() rewrites
every index-valued field (both link arrays, the head and, when given, the
MarkerSet) through remap_index() in a single call, so no caller ever sees
a half-remapped structure.
"""

import random
from typing import Callable, Dict, Iterator, List, Optional

from dll.markers import MarkerSet
from dll.node import Node, NodeStatus

ValueGenerator = Callable[[], int]


def random_value() -> int:
    """Two-digit values keep boxes narrow and easy to tell apart."""
    return random.randint(10, 99)


def remap_index(index: Optional[int], removed: int) -> Optional[int]:
    if index is None or index == removed:
        return None
    return index - 1 if index > removed else index


class ListStore:
    """
    Attributes:
        nodes           : Node per slot.
        next_links      : Successor slot per slot (or None).
        prev_links      : Predecessor slot per slot (or None).
        head_index      : Head slot (or None).
        value_generator : Supplies values for nodes created without one.
    """

    def __init__(self, value_generator: Optional[ValueGenerator] = None):
        self.nodes:      List[Node]          = []
        self.next_links: List[Optional[int]] = []
        self.prev_links: List[Optional[int]] = []
        self.head_index: Optional[int]       = None
        self.value_generator: ValueGenerator = value_generator or random_value

    # ==================================================================
    # CONSTRUCTION
    # ==================================================================
    def initialize(self, size: int, value_generator: Optional[ValueGenerator] = None) -> None:
        """Replace the whole store with a fresh chain of `size` nodes."""
        gen = value_generator or self.value_generator
        self.nodes      = [Node(gen()) for _ in range(size)]
        self.next_links = [i + 1 if i < size - 1 else None for i in range(size)]
        self.prev_links = [i - 1 if i > 0 else None for i in range(size)]
        self.head_index = 0 if size > 0 else None

    @classmethod
    def from_values(cls, values: List[int], value_generator: Optional[ValueGenerator] = None) -> "ListStore":
        store = cls(value_generator=value_generator)
        values = list(values)
        store.initialize(len(values), value_generator=iter(values).__next__)
        return store

    def create_node(self, value: Optional[int] = None, status: NodeStatus = NodeStatus.NEW_NODE) -> Node:
        """Build a detached node; does not touch the arrays."""
        if value is None:
            value = self.value_generator()
        return Node(value, status=status)

    def append(self, node: Node) -> int:
        """Add a detached slot (both links None) and return its index."""
        self.nodes.append(node)
        self.next_links.append(None)
        self.prev_links.append(None)
        return len(self.nodes) - 1

    def clear(self) -> None:
        self.nodes      = []
        self.next_links = []
        self.prev_links = []
        self.head_index = None

    # ==================================================================
    # REMOVAL + REMAP
    # ==================================================================
    def remove_at(self, index: int, markers: Optional[MarkerSet] = None) -> Node:
        """
        Drop slot `index` and shift every later slot down by one.

        Links pointing at the removed slot become None; so does the head
        if it was the removed slot.  Remaining statuses go back to DEFAULT.
        """
        if not 0 <= index < len(self.nodes):
            raise IndexError(f"Slot {index} out of range (size {len(self.nodes)})")

        def remap(i: Optional[int]) -> Optional[int]:
            return remap_index(i, index)

        removed = self.nodes[index]
        self.nodes = [n for i, n in enumerate(self.nodes) if i != index]
        for n in self.nodes:
            n.reset()
        self.next_links = [remap(v) for i, v in enumerate(self.next_links) if i != index]
        self.prev_links = [remap(v) for i, v in enumerate(self.prev_links) if i != index]
        self.head_index = remap(self.head_index)
        if markers is not None:
            markers.remap(remap)
        return removed

    # ==================================================================
    # TRAVERSAL
    # ==================================================================
    def traverse_forward(self) -> Iterator[int]:
        """
        Yield slot indices in list order, starting at the head.

        Stops at None or on the first revisited slot, so a corrupted chain
        still terminates.  Call again to restart.
        """
        seen = set()
        cursor = self.head_index
        while cursor is not None and cursor not in seen:
            seen.add(cursor)
            yield cursor
            cursor = self.next_links[cursor]

    def __iter__(self) -> Iterator[int]:
        return self.traverse_forward()

    def order(self) -> List[int]:
        return list(self.traverse_forward())

    def values(self) -> List[int]:
        return [self.nodes[i].value for i in self.traverse_forward()]

    def tail_index(self) -> Optional[int]:
        tail = None
        for tail in self.traverse_forward():
            pass
        return tail

    def is_consistent(self) -> bool:
        """Forward and backward links agree along the chain from head."""
        if self.head_index is None:
            return not self.nodes
        if self.prev_links[self.head_index] is not None:
            return False
        for i in self.traverse_forward():
            j = self.next_links[i]
            if j is not None and self.prev_links[j] != i:
                return False
        return True

    # ==================================================================
    # STATUS HELPERS
    # ==================================================================
    def reset_statuses(self) -> None:
        for n in self.nodes:
            n.reset()

    def set_statuses(self, statuses: Dict[int, NodeStatus]) -> None:
        """Apply `statuses` by slot; every other node goes back to DEFAULT."""
        for i, n in enumerate(self.nodes):
            n.status = statuses.get(i, NodeStatus.DEFAULT)

    # ==================================================================
    # SERIALISATION
    # ==================================================================
    def to_dict(self) -> dict:
        return {
            "nodes":      [n.to_dict() for n in self.nodes],
            "next_links": list(self.next_links),
            "prev_links": list(self.prev_links),
            "head_index": self.head_index,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "ListStore":
        store = cls()
        store.nodes      = [Node.from_dict(n) for n in data.get("nodes", [])]
        store.next_links = list(data.get("next_links", []))
        store.prev_links = list(data.get("prev_links", []))
        store.head_index = data.get("head_index")
        return store

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self.nodes)

    def __repr__(self) -> str:
        chain = " <-> ".join(str(v) for v in self.values())
        return f"ListStore(null <-> {chain} <-> null, slots={len(self.nodes)})" if chain else "ListStore(empty)"
