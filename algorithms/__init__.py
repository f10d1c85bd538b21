"""
algorithms/__init__.py — Operation Registry
============================================
Single source of truth for every list operation the visualizer can run.

    from algorithms import REGISTRY, get_operation

REGISTRY is a dict:
    {
        "insert_head": OperationInfo(key, label, fn, pseudocode, type, …),
        …
    }

Every `fn` has the same shape:

    fn(store, markers, params) -> Generator[Step, None, bool]

so the engine never needs to know which operation it is driving.  Adding
an operation is: write the generator, add one entry here.
"""

from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

# ---------------------------------------------------------------------------
# Import all operation modules
# ---------------------------------------------------------------------------
from algorithms.insert_head     import insert_at_head     as _ins_head, PSEUDOCODE as _ins_head_pc
from algorithms.insert_tail     import insert_at_tail     as _ins_tail, PSEUDOCODE as _ins_tail_pc
from algorithms.insert_position import insert_at_position as _ins_pos,  PSEUDOCODE as _ins_pos_pc
from algorithms.delete_head     import delete_from_head   as _del_head, PSEUDOCODE as _del_head_pc
from algorithms.delete_tail     import delete_from_tail   as _del_tail, PSEUDOCODE as _del_tail_pc
from algorithms.delete_value    import delete_by_value    as _del_val,  PSEUDOCODE as _del_val_pc
from algorithms.params import OperationParams, parse_params
from algorithms.step   import HistoryEntry, OperationKind, Step

INSERTION = "insertion"
DELETION  = "deletion"


# ---------------------------------------------------------------------------
# OperationInfo — metadata card for each operation
# ---------------------------------------------------------------------------
@dataclass
class OperationInfo:
    key:              str                # registry key, e.g. "insert_head"
    label:            str                # human label, e.g. "Insert at Head"
    fn:               Callable           # the generator function
    pseudocode:       List[str]          # lines for the side-panel
    type:             str                # INSERTION or DELETION
    needs_value:      bool = False       # shows the value input
    needs_position:   bool = False       # shows the position input
    complexity_time:  str  = ""          # e.g. "O(n)"
    complexity_space: str  = ""          # e.g. "O(1)"
    description:      str  = ""          # one-liner for the UI card
    learner_tip:      str  = ""

    def to_dict(self) -> dict:
        return {
            "key":              self.key,
            "label":            self.label,
            "type":             self.type,
            "needs_value":      self.needs_value,
            "needs_position":   self.needs_position,
            "complexity_time":  self.complexity_time,
            "complexity_space": self.complexity_space,
            "description":      self.description,
            "learner_tip":      self.learner_tip,
            "pseudocode":       list(self.pseudocode),
        }


# ---------------------------------------------------------------------------
# THE REGISTRY
# ---------------------------------------------------------------------------
REGISTRY: Dict[str, OperationInfo] = {

    "insert_head": OperationInfo(
        key="insert_head", label="Insert at Head", fn=_ins_head, pseudocode=_ins_head_pc,
        type=INSERTION, needs_value=True,
        complexity_time="O(1)", complexity_space="O(1)",
        description="Create a new node. Set new→next = head, head→prev = new. Update head pointer.",
        learner_tip="Inserting at head is O(1): just two pointers, new→next and old head→prev.",
    ),

    "insert_tail": OperationInfo(
        key="insert_tail", label="Insert at Tail", fn=_ins_tail, pseudocode=_ins_tail_pc,
        type=INSERTION, needs_value=True,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Traverse to the last node. Set tail→next = new, new→prev = tail.",
        learner_tip="With a dedicated tail pointer this becomes O(1). Watch the 2 pointers get linked!",
    ),

    "insert_position": OperationInfo(
        key="insert_position", label="Insert at Position", fn=_ins_pos, pseudocode=_ins_pos_pc,
        type=INSERTION, needs_value=True, needs_position=True,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Traverse to pos−1. Wire prev→next, new→prev, new→next and next→prev.",
        learner_tip="A DLL insert needs 4 pointer updates (vs 2 in SLL) because of the extra prev link.",
    ),

    "delete_head": OperationInfo(
        key="delete_head", label="Delete from Head", fn=_del_head, pseudocode=_del_head_pc,
        type=DELETION,
        complexity_time="O(1)", complexity_space="O(1)",
        description="Move head to head→next. Set new head's prev = null. No traversal needed.",
        learner_tip="Remember to null out the new head's prev pointer to avoid a dangling reference!",
    ),

    "delete_tail": OperationInfo(
        key="delete_tail", label="Delete from Tail", fn=_del_tail, pseudocode=_del_tail_pc,
        type=DELETION,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Traverse to the tail. Use tail→prev to reach the second-to-last node, then set its next = null.",
        learner_tip="In SLL you need two traversal pointers. In DLL, tail→prev finds the second-to-last directly.",
    ),

    "delete_by_value": OperationInfo(
        key="delete_by_value", label="Delete by Value", fn=_del_val, pseudocode=_del_val_pc,
        type=DELETION, needs_value=True,
        complexity_time="O(n)", complexity_space="O(1)",
        description="Search for the target. Bypass: prev→next = curr→next, next→prev = curr→prev.",
        learner_tip="Only ONE traversal pointer is needed (vs two in SLL) since curr→prev is always at hand.",
    ),
}

DEFAULT_OPERATION = "insert_head"


# ---------------------------------------------------------------------------
# Lookup helpers
# ---------------------------------------------------------------------------
def get_operation(key: str) -> Optional[OperationInfo]:
    """Return OperationInfo by key, or None."""
    return REGISTRY.get(key)


def list_operations() -> List[OperationInfo]:
    """Return all registered operations in insertion order."""
    return list(REGISTRY.values())


def operations_by_type(op_type: str) -> List[OperationInfo]:
    """Filter registry by INSERTION / DELETION."""
    return [o for o in REGISTRY.values() if o.type == op_type]


__all__ = [
    "OperationInfo",
    "REGISTRY",
    "DEFAULT_OPERATION",
    "INSERTION",
    "DELETION",
    "get_operation",
    "list_operations",
    "operations_by_type",
    "OperationParams",
    "parse_params",
    "HistoryEntry",
    "OperationKind",
    "Step",
]
