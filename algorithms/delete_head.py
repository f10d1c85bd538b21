"""
delete_head.py — Delete from Head
==================================
  1. Mark the head as TARGET
  2. Fade it out, highlight head→next (the new head)
  3. Remove the slot, null the new head's prev, settle

No traversal, so the step count never depends on list length.
"""

from typing import Generator, List

from dll import ListStore, MarkerSet, NodeStatus
from algorithms.common import label, settle
from algorithms.params import OperationParams
from algorithms.step import HistoryEntry, OperationKind, Step


PSEUDOCODE: List[str] = [
    "def delete_from_head(head):",              # 0
    "    if head is None: return None",         # 1
    "    new_head ← head.next",                 # 2
    "    if new_head: new_head.prev ← None",    # 3
    "    return new_head",                      # 4
]


def delete_from_head(
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

    deleted = store.nodes[head].value

    # -- 1. target --
    store.set_statuses({head: NodeStatus.TARGET})
    markers.assign(head=head, target=head)
    yield Step(
        step_number=1,
        explanation=f"Step 1: Target head node ({deleted}) for deletion.",
        pseudocode_line=0,
    )

    # -- 2. fade + preview new head --
    new_head = store.next_links[head]
    statuses = {head: NodeStatus.FADE_OUT}
    if new_head is not None:
        statuses[new_head] = NodeStatus.HIGHLIGHT
    store.set_statuses(statuses)
    markers.assign(head=head, target=head, next=new_head)
    yield Step(
        step_number=2,
        explanation=(
            f"Step 2: Move head to next node ({label(store, new_head)}). "
            f"Clear new head's prev pointer."
        ),
        pseudocode_line=2,
    )

    # -- 3. remove + remap --
    store.head_index = new_head
    store.remove_at(head, markers)
    if store.head_index is not None:
        store.prev_links[store.head_index] = None
    settle(store, markers)
    yield Step(
        step_number=2,
        explanation=f"Deleted head ({deleted}). New head→prev = null. Done!",
        pseudocode_line=3,
        is_final=True,
        entry=HistoryEntry(OperationKind.DELETE_HEAD, deleted),
    )
    return True
