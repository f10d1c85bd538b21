from enum import Enum
from typing import Optional
import uuid


# ---------------------------------------------------------------------------
# Node Status Enum — maps 1-to-1 with the visual encoding palette
# ---------------------------------------------------------------------------
class NodeStatus(Enum):
    DEFAULT   = "default"     # slate — resting state between operations
    CURRENT   = "current"     # blue — the traversal cursor
    HIGHLIGHT = "highlight"   # cyan — neighbour about to be re-linked
    NEW_NODE  = "newNode"     # emerald — freshly created, not yet linked in
    TARGET    = "target"      # rose — chosen for deletion
    FADE_OUT  = "fadeOut"     # faded rose — about to be removed
    DONE      = "done"        # soft green — finished
    PREV      = "prev"        # violet — trailing pointer


# ---------------------------------------------------------------------------
# Node
# ---------------------------------------------------------------------------
class Node:
    """
    One data slot of the list.

    Attributes:
        id     : Stable identifier (8-char uuid prefix by default). Survives
                 re-indexing, so the renderer can key on it.
        value  : Integer payload shown inside the box.
        status : Presentational NodeStatus, reset to DEFAULT between runs.
    """

    __slots__ = ("id", "value", "status")

    def __init__(
        self,
        value: int,
        status: NodeStatus = NodeStatus.DEFAULT,
        node_id: Optional[str] = None,
    ):
        self.id: str            = node_id or str(uuid.uuid4())[:8]
        self.value: int         = value
        self.status: NodeStatus = status

    def reset(self) -> None:
        self.status = NodeStatus.DEFAULT

    def copy(self) -> "Node":
        return Node(self.value, status=self.status, node_id=self.id)

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    def to_dict(self) -> dict:
        return {
            "id":     self.id,
            "value":  self.value,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Node":
        return cls(
            value=data["value"],
            status=NodeStatus(data.get("status", "default")),
            node_id=data["id"],
        )

    # ------------------------------------------------------------------
    # Dunder
    # ------------------------------------------------------------------
    def __repr__(self) -> str:
        return f"Node(id={self.id}, value={self.value}, status={self.status.value})"

    def __eq__(self, other) -> bool:
        return isinstance(other, Node) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
