"""
delete_value.py — Delete by Value
==================================
Linear search from the head, one step per inspected node.

  • head matches   →  target, fade, remove, null the new head's prev
  • later match    →  target, then bypass (prev→next = curr→next,
                      next→prev = curr→prev) while the node fades,
                      then remove the orphaned slot
  • no match       →  "not found", which is still a completed run

A non-numeric target is refused before anything is touched.
"""

from typing import Generator, List

from dll import ListStore, MarkerSet, NodeStatus
from algorithms.common import label, settle
from algorithms.params import OperationParams, is_integer
from algorithms.step import HistoryEntry, OperationKind, Step


PSEUDOCODE: List[str] = [
    "def delete_by_value(head, target):",       # 0
    "    curr ← head",                          # 1
    "    while curr and curr.data != target:",  # 2
    "        curr ← curr.next",                 # 3
    "    if curr is None: return head",         # 4
    "    if curr.prev: curr.prev.next ← curr.next",  # 5
    "    else: head ← curr.next",               # 6
    "    if curr.next: curr.next.prev ← curr.prev",  # 7
    "    return head",                          # 8
]


def delete_by_value(
    store: ListStore,
    markers: MarkerSet,
    params: OperationParams,
) -> Generator[Step, None, bool]:
    target = params.value
    if target is None or not is_integer(target):
        yield Step(
            step_number=0,
            explanation="Please enter a value to delete.",
            is_final=True,
        )
        return False

    head = store.head_index
    if head is None:
        yield Step(
            step_number=0,
            explanation="List is empty. Nothing to delete.",
            pseudocode_line=4,
            is_final=True,
        )
        return True

    entry = HistoryEntry(OperationKind.DELETE_BY_VALUE, target)

    # --- head matches ---
    if store.nodes[head].value == target:
        store.set_statuses({head: NodeStatus.TARGET})
        markers.assign(head=head, target=head)
        yield Step(
            step_number=1,
            explanation=f"Head node matches target {target}! Removing head...",
            pseudocode_line=2,
        )

        store.set_statuses({head: NodeStatus.FADE_OUT})
        yield Step(
            step_number=1,
            explanation=f"Moving head to {label(store, store.next_links[head])}.",
            pseudocode_line=6,
        )

        store.head_index = store.next_links[head]
        store.remove_at(head, markers)
        if store.head_index is not None:
            store.prev_links[store.head_index] = None
        settle(store, markers)
        yield Step(
            step_number=1,
            explanation=f"Deleted {target} (was head). Done!",
            pseudocode_line=8,
            is_final=True,
            entry=entry,
        )
        return True

    # --- search ---
    step_no = 1
    store.set_statuses({head: NodeStatus.CURRENT})
    markers.assign(head=head, current=head)
    yield Step(
        step_number=step_no,
        explanation=f"Searching for {target}. Checking head ({label(store, head)})... not a match.",
        pseudocode_line=2,
    )

    seen   = {head}
    cursor = store.next_links[head]
    while cursor is not None and cursor not in seen:
        seen.add(cursor)
        step_no += 1

        if store.nodes[cursor].value == target:
            before = store.prev_links[cursor]
            after  = store.next_links[cursor]

            store.set_statuses({cursor: NodeStatus.TARGET})
            markers.assign(head=head, target=cursor, prev=before, next=after)
            yield Step(
                step_number=step_no,
                explanation=f"Found {target}! Using curr→prev, no second pointer needed.",
                pseudocode_line=4,
            )

            # bypass while the node fades; its own links are left dangling
            if before is not None:
                store.next_links[before] = after
            if after is not None:
                store.prev_links[after] = before
            store.set_statuses({cursor: NodeStatus.FADE_OUT})
            yield Step(
                step_number=step_no,
                explanation=(
                    f"Bypass: {label(store, before)}→next = {label(store, after)}, "
                    f"{label(store, after)}→prev = {label(store, before)}."
                ),
                pseudocode_line=7,
            )

            store.remove_at(cursor, markers)
            settle(store, markers)
            yield Step(
                step_number=step_no,
                explanation=f"Deleted {target}. Used curr→prev for O(1) bypass. Done!",
                pseudocode_line=8,
                is_final=True,
                entry=entry,
            )
            return True

        store.set_statuses({cursor: NodeStatus.CURRENT})
        markers.assign(head=head, current=cursor)
        yield Step(
            step_number=step_no,
            explanation=f"Checking node {label(store, cursor)}... not {target}. Moving forward.",
            pseudocode_line=3,
        )
        cursor = store.next_links[cursor]

    # --- exhausted ---
    settle(store, markers)
    yield Step(
        step_number=step_no,
        explanation=f"Value {target} not found in the list.",
        pseudocode_line=4,
        is_final=True,
    )
    return True
