"""
insert_position.py — Insert at Position
========================================
Position 0 is a head insert and runs exactly the insert_front() steps.

Otherwise:
  1. Walk position-1 hops from head          →  one step per hop
  2. If the walk falls off the end           →  out of bounds, nothing changes
  3. Splice with all four pointer updates    →  one step
       prev→next = new, new→prev = prev, new→next = next, next→prev = new
  4. Settle

The new node is only created once the splice point is known, so a failed
walk leaves the store exactly as it found it.
"""

from typing import Generator, List

from dll import ListStore, MarkerSet, NodeStatus
from algorithms.common import insert_value, label, settle
from algorithms.insert_head import insert_front
from algorithms.params import OperationParams
from algorithms.step import HistoryEntry, OperationKind, Step


PSEUDOCODE: List[str] = [
    "def insert_at_position(head, val, pos):",  # 0
    "    if pos == 0: return insert_at_head(head, val)",  # 1
    "    curr ← head",                          # 2
    "    for _ in range(pos - 1):",             # 3
    "        if curr is None: return head",     # 4
    "        curr ← curr.next",                 # 5
    "    if curr is None: return head",         # 6
    "    new ← Node(val)",                      # 7
    "    new.prev ← curr; new.next ← curr.next",  # 8
    "    if curr.next: curr.next.prev ← new",   # 9
    "    curr.next ← new",                      # 10
    "    return head",                          # 11
]


def insert_at_position(
    store: ListStore,
    markers: MarkerSet,
    params: OperationParams,
) -> Generator[Step, None, bool]:
    """
    Returns:
        True on completion; False if the value is not an integer or the
        position lies beyond the end of the list.
    """
    value = insert_value(store, params.value)
    if value is None:
        yield Step(
            step_number=0,
            explanation=f"'{params.value}' is not an integer. Enter an integer value to insert.",
            is_final=True,
        )
        return False

    position = params.position or 0
    entry    = HistoryEntry(OperationKind.INSERT_POSITION, value, position)

    if position == 0:
        return (yield from insert_front(store, markers, value, entry))

    if position < 0:
        yield Step(
            step_number=0,
            explanation=f"Position {position} is out of bounds. Operation cancelled.",
            pseudocode_line=4,
            is_final=True,
        )
        return False

    head    = store.head_index
    cursor  = head
    step_no = 0

    # --- walk to pos - 1 ---
    for hop in range(position - 1):
        if cursor is None:
            break
        step_no += 1
        store.set_statuses({cursor: NodeStatus.CURRENT})
        markers.assign(head=head, current=cursor)
        yield Step(
            step_number=step_no,
            explanation=(
                f"Traversing to position {position - 1}: "
                f"at node {label(store, cursor)} (step {hop + 1})."
            ),
            pseudocode_line=5,
        )
        cursor = store.next_links[cursor]

    if cursor is None:
        settle(store, markers)
        yield Step(
            step_number=step_no,
            explanation=f"Position {position} is out of bounds. Operation cancelled.",
            pseudocode_line=6,
            is_final=True,
        )
        return False

    # --- splice: four pointer updates in one step ---
    successor = store.next_links[cursor]
    new_idx   = store.append(store.create_node(value))
    store.next_links[cursor]  = new_idx
    store.prev_links[new_idx] = cursor
    store.next_links[new_idx] = successor
    if successor is not None:
        store.prev_links[successor] = new_idx

    statuses = {cursor: NodeStatus.HIGHLIGHT, new_idx: NodeStatus.NEW_NODE}
    if successor is not None:
        statuses[successor] = NodeStatus.HIGHLIGHT
    store.set_statuses(statuses)
    markers.assign(head=head, prev=cursor, new_node=new_idx, next=successor)

    step_no += 1
    yield Step(
        step_number=step_no,
        explanation="Wiring 4 pointers: prev→next=new, new→prev=prev, new→next=next, next→prev=new.",
        pseudocode_line=8,
    )

    settle(store, markers)
    yield Step(
        step_number=step_no,
        explanation=f"Inserted {value} at position {position}. 4 pointer updates complete! Done!",
        pseudocode_line=11,
        is_final=True,
        entry=entry,
    )
    return True
