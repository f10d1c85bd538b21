"""
Small helpers shared by the operation generators.
"""

from typing import Any, Optional

from dll import ListStore, MarkerSet
from algorithms.params import is_integer


def settle(store: ListStore, markers: MarkerSet) -> None:
    """Resting state after an operation: plain statuses, head/tail labels only."""
    store.reset_statuses()
    markers.assign(head=store.head_index, tail=store.tail_index())


def label(store: ListStore, index: Optional[int]) -> str:
    """Node value as shown in narration, or 'null' for a missing slot."""
    if index is None:
        return "null"
    return str(store.nodes[index].value)


def insert_value(store: ListStore, value: Any) -> Optional[int]:
    """
    Value for a new node: the given number, a generated one when no value
    was supplied, or None when the supplied value is not an integer.
    """
    if value is None:
        return store.value_generator()
    if not is_integer(value):
        return None
    return int(value)
