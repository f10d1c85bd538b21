"""
step.py — Operation Step Snapshot
==================================
Every operation is a generator.  Between two yields it applies exactly
one synchronous mutation to the ListStore / MarkerSet, then yields a Step
describing what the viewer should now be looking at:

    • the step counter shown in the status bar
    • a plain-English narration of what just happened
    • which pseudocode line it corresponds to
    • how long to linger before the next step (pace, relative to speed)

The generator's *return* value is the completion flag: True when the
operation ran to the end, False when it refused to run (bad parameter,
position out of bounds).  A run that is cancelled never gets that far;
the Stepper simply stops pulling.

Design decisions:
  - Step is a frozen dataclass.  It narrates; it does NOT carry list
    state.  The store itself is the state, and the renderer reads it
    directly.
  - The last Step of a run is flagged `is_final`.  No wait follows it.
  - A successful operation attaches its HistoryEntry to the final Step so
    the controller can log it without knowing the operation's internals.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class OperationKind(Enum):
    INSERT_HEAD     = "insert_head"
    INSERT_TAIL     = "insert_tail"
    INSERT_POSITION = "insert_position"
    DELETE_HEAD     = "delete_head"
    DELETE_TAIL     = "delete_tail"
    DELETE_BY_VALUE = "delete_by_value"


@dataclass(frozen=True)
class HistoryEntry:
    type:     OperationKind
    value:    int
    position: Optional[int] = None

    def to_dict(self) -> dict:
        data = {"type": self.type.value, "value": self.value}
        if self.position is not None:
            data["position"] = self.position
        return data


@dataclass(frozen=True)
class Step:
    """
    Attributes:
        step_number     : Value for the run's step counter after this step.
        explanation     : Narration for the status line.
        pseudocode_line : 0-based index into the operation's PSEUDOCODE.
        pace            : Delay multiplier for the wait after this step.
        is_final        : True on the last step; nothing is awaited after it.
        entry           : History record, set only on a successful final step.
    """

    step_number:     int                    = 0
    explanation:     str                    = ""
    pseudocode_line: int                    = 0
    pace:            float                  = 1.0
    is_final:        bool                   = False
    entry:           Optional[HistoryEntry] = None

    def to_dict(self) -> dict:
        return {
            "step_number":     self.step_number,
            "explanation":     self.explanation,
            "pseudocode_line": self.pseudocode_line,
            "pace":            self.pace,
            "is_final":        self.is_final,
            "entry":           self.entry.to_dict() if self.entry else None,
        }
