"""
delete_tail.py — Delete from Tail
==================================
  • empty list   →  no-op
  • single node  →  fade it, then empty the store
  • otherwise:
      1. Walk until cursor→next is the tail   →  one step per hop
      2. Mark tail TARGET, cursor HIGHLIGHT
      3. Fade the tail (shorter pause)
      4. Remove the slot; cursor→next becomes null through the remap
"""

from typing import Generator, List

from dll import ListStore, MarkerSet, NodeStatus
from algorithms.common import label, settle
from algorithms.params import OperationParams
from algorithms.step import HistoryEntry, OperationKind, Step

FADE_PACE = 0.6


PSEUDOCODE: List[str] = [
    "def delete_from_tail(head):",              # 0
    "    if head is None: return None",         # 1
    "    if head.next is None: return None",    # 2
    "    curr ← head",                          # 3
    "    while curr.next.next:",                # 4
    "        curr ← curr.next",                 # 5
    "    tail ← curr.next",                     # 6
    "    curr.next ← None",                     # 7
    "    return head",                          # 8
]


def delete_from_tail(
    store: ListStore,
    markers: MarkerSet,
    params: OperationParams,
) -> Generator[Step, None, bool]:
    head = store.head_index
    if head is None:
        yield Step(
            step_number=0,
            explanation="List is empty. Nothing to delete.",
            pseudocode_line=1,
            is_final=True,
        )
        return True

    # --- single node ---
    if store.next_links[head] is None:
        value = store.nodes[head].value
        store.set_statuses({head: NodeStatus.FADE_OUT})
        markers.assign(head=head, tail=head, target=head)
        yield Step(
            step_number=1,
            explanation=f"Only one node ({value}). Marking for deletion...",
            pseudocode_line=2,
        )
        store.clear()
        markers.clear()
        yield Step(
            step_number=1,
            explanation=f"Deleted tail ({value}). List is now empty. Done!",
            pseudocode_line=2,
            is_final=True,
            entry=HistoryEntry(OperationKind.DELETE_TAIL, value),
        )
        return True

    # --- walk to second-to-last ---
    cursor  = head
    step_no = 0
    seen    = {head, store.next_links[head]}
    after   = store.next_links[store.next_links[head]]
    while after is not None and after not in seen:
        step_no += 1
        store.set_statuses({cursor: NodeStatus.CURRENT})
        markers.assign(head=head, current=cursor)
        yield Step(
            step_number=step_no,
            explanation=f"Traversing: at {label(store, cursor)}. Looking for second-to-last.",
            pseudocode_line=5,
        )
        cursor = store.next_links[cursor]
        seen.add(after)
        after = store.next_links[after]

    tail       = store.next_links[cursor]
    tail_value = store.nodes[tail].value

    step_no += 1
    store.set_statuses({tail: NodeStatus.TARGET, cursor: NodeStatus.HIGHLIGHT})
    markers.assign(head=head, current=cursor, tail=tail, target=tail)
    yield Step(
        step_number=step_no,
        explanation=(
            f"Found second-to-last: {label(store, cursor)}. "
            f"Removing tail ({tail_value}) using prev pointer."
        ),
        pseudocode_line=6,
    )

    step_no += 1
    store.set_statuses({tail: NodeStatus.FADE_OUT})
    yield Step(
        step_number=step_no,
        explanation=f"Unlinking tail: {label(store, cursor)}→next = null.",
        pseudocode_line=7,
        pace=FADE_PACE,
    )

    store.remove_at(tail, markers)
    settle(store, markers)
    yield Step(
        step_number=step_no,
        explanation=f"Deleted tail ({tail_value}). Found the second-to-last without a trailing pointer. Done!",
        pseudocode_line=8,
        is_final=True,
        entry=HistoryEntry(OperationKind.DELETE_TAIL, tail_value),
    )
    return True
