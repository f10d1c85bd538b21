"""
insert_head.py — Insert at Head
================================
Three steps, independent of list length:
  1. Create the new node (detached)      →  marked NEW
  2. new→next = head, head→prev = new    →  both directions linked
  3. head = new                          →  settle

Between steps 2 and 3 the new node already points at the list but the
head pointer still names the old head.  That half-done state is shown on
purpose.

Insert-at-position with position 0 reuses insert_front() below, so the
two paths cannot drift apart.
"""

from typing import Generator, List

from dll import ListStore, MarkerSet
from algorithms.common import insert_value, label, settle
from algorithms.params import OperationParams
from algorithms.step import HistoryEntry, OperationKind, Step


# ---------------------------------------------------------------------------
# Pseudocode — each string is one displayed line; index = pseudocode_line
# ---------------------------------------------------------------------------
PSEUDOCODE: List[str] = [
    "def insert_at_head(head, val):",           # 0
    "    new ← Node(val)",                      # 1
    "    new.next ← head",                      # 2
    "    if head: head.prev ← new",             # 3
    "    head ← new",                           # 4
    "    return head",                          # 5
]


# ---------------------------------------------------------------------------
# Generator
# ---------------------------------------------------------------------------
def insert_at_head(
    store: ListStore,
    markers: MarkerSet,
    params: OperationParams,
) -> Generator[Step, None, bool]:
    """
    Yields one Step per pointer update.

    Args:
        store   : The list to mutate.
        markers : Role labels to update alongside.
        params  : `value` is optional; a random one is drawn when missing.

    Returns:
        True on completion, False if `value` is not an integer.
    """
    value = insert_value(store, params.value)
    if value is None:
        yield Step(
            step_number=0,
            explanation=f"'{params.value}' is not an integer. Enter an integer value to insert.",
            is_final=True,
        )
        return False

    entry = HistoryEntry(OperationKind.INSERT_HEAD, value)
    return (yield from insert_front(store, markers, value, entry))


def insert_front(
    store: ListStore,
    markers: MarkerSet,
    value: int,
    entry: HistoryEntry,
) -> Generator[Step, None, bool]:
    old_head = store.head_index

    # -- 1. create --
    new_idx = store.append(store.create_node(value))
    markers.assign(head=old_head, new_node=new_idx)
    yield Step(
        step_number=1,
        explanation=f"Step 1: Create new node with value {value}.",
        pseudocode_line=1,
    )

    # -- 2. link both directions --
    store.next_links[new_idx] = old_head
    if old_head is not None:
        store.prev_links[old_head] = new_idx
    yield Step(
        step_number=2,
        explanation=(
            f"Step 2: new→next = old head ({label(store, old_head)}). "
            f"old head→prev = new."
        ),
        pseudocode_line=3 if old_head is not None else 2,
    )

    # -- 3. move head --
    store.head_index = new_idx
    settle(store, markers)
    yield Step(
        step_number=3,
        explanation=f"Step 3: Update head pointer to new node ({value}). new→prev = null. Done!",
        pseudocode_line=4,
        is_final=True,
        entry=entry,
    )
    return True
