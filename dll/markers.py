"""
markers.py — Role Annotations
==============================
A MarkerSet names a handful of roles (head, tail, current, …) and points
each one at a node index, or at None when the role is unassigned.
Markers never touch node data; the renderer draws them as labels under
the boxes.

Several roles may point at the same index at once (head and current
usually do at the start of a traversal).
"""

from typing import Dict, List, Optional

ROLES = ("head", "tail", "current", "prev", "next", "new_node", "target")


class MarkerSet:

    def __init__(self, **roles: Optional[int]):
        self._slots: Dict[str, Optional[int]] = dict.fromkeys(ROLES)
        self.update(**roles)

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def assign(self, **roles: Optional[int]) -> None:
        """Clear every role, then set the given ones."""
        self.clear()
        self.update(**roles)

    def update(self, **roles: Optional[int]) -> None:
        for role, index in roles.items():
            self.set(role, index)

    def set(self, role: str, index: Optional[int]) -> None:
        if role not in self._slots:
            raise KeyError(f"Unknown marker role: {role}")
        self._slots[role] = index

    def clear(self) -> None:
        for role in self._slots:
            self._slots[role] = None

    def remap(self, fn) -> None:
        """Translate every assigned index through fn (index → index | None)."""
        for role, index in self._slots.items():
            self._slots[role] = fn(index)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def get(self, role: str) -> Optional[int]:
        return self._slots[role]

    def roles_at(self, index: int) -> List[str]:
        return [role for role in ROLES if self._slots[role] == index]

    def as_dict(self) -> Dict[str, Optional[int]]:
        return dict(self._slots)

    def copy(self) -> "MarkerSet":
        return MarkerSet(**self._slots)

    def __getitem__(self, role: str) -> Optional[int]:
        return self._slots[role]

    def __eq__(self, other) -> bool:
        return isinstance(other, MarkerSet) and self._slots == other._slots

    def __repr__(self) -> str:
        assigned = {r: i for r, i in self._slots.items() if i is not None}
        return f"MarkerSet({assigned})"
