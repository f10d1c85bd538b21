"""
insert_tail.py — Insert at Tail
================================
  1. Append the new node (detached)
  2. Walk a cursor from head until cursor→next is null  →  one step per hop
  3. tail→next = new, new→prev = tail
  4. Settle

An empty list short-circuits: the new node becomes head and tail at once.
"""

from typing import Generator, List

from dll import ListStore, MarkerSet, NodeStatus
from algorithms.common import insert_value, label, settle
from algorithms.params import OperationParams
from algorithms.step import HistoryEntry, OperationKind, Step


PSEUDOCODE: List[str] = [
    "def insert_at_tail(head, val):",           # 0
    "    new ← Node(val)",                      # 1
    "    if head is None: return new",          # 2
    "    curr ← head",                          # 3
    "    while curr.next:",                     # 4
    "        curr ← curr.next",                 # 5
    "    curr.next ← new",                      # 6
    "    new.prev ← curr",                      # 7
    "    return head",                          # 8
]


def insert_at_tail(
    store: ListStore,
    markers: MarkerSet,
    params: OperationParams,
) -> Generator[Step, None, bool]:
    value = insert_value(store, params.value)
    if value is None:
        yield Step(
            step_number=0,
            explanation=f"'{params.value}' is not an integer. Enter an integer value to insert.",
            is_final=True,
        )
        return False

    entry    = HistoryEntry(OperationKind.INSERT_TAIL, value)
    new_node = store.create_node(value)

    # --- empty list: sole node, no traversal ---
    if store.head_index is None:
        store.clear()
        store.head_index = store.append(new_node)
        settle(store, markers)
        yield Step(
            step_number=1,
            explanation=f"Empty list. {value} becomes the only node. Done!",
            pseudocode_line=2,
            is_final=True,
            entry=entry,
        )
        return True

    head    = store.head_index
    new_idx = store.append(new_node)
    step_no = 1

    # --- walk to the tail ---
    cursor = head
    seen   = {head}
    while store.next_links[cursor] is not None and store.next_links[cursor] not in seen:
        step_no += 1
        store.set_statuses({cursor: NodeStatus.CURRENT, new_idx: NodeStatus.NEW_NODE})
        markers.assign(head=head, current=cursor, new_node=new_idx)
        yield Step(
            step_number=step_no,
            explanation=f"Traversing: at node {label(store, cursor)}...",
            pseudocode_line=5,
        )
        cursor = store.next_links[cursor]
        seen.add(cursor)

    # --- link ---
    step_no += 1
    store.set_statuses({cursor: NodeStatus.HIGHLIGHT, new_idx: NodeStatus.NEW_NODE})
    markers.assign(head=head, current=cursor, new_node=new_idx)
    store.next_links[cursor]  = new_idx
    store.prev_links[new_idx] = cursor
    yield Step(
        step_number=step_no,
        explanation=(
            f"Found tail ({label(store, cursor)}). "
            f"Linking: tail→next = new, new→prev = tail."
        ),
        pseudocode_line=6,
    )

    settle(store, markers)
    yield Step(
        step_number=step_no,
        explanation=f"Inserted {value} at tail. Done!",
        pseudocode_line=8,
        is_final=True,
        entry=entry,
    )
    return True
