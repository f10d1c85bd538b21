"""
dll/
----
Core data layer.  Public API:

    from dll import ListStore, MarkerSet, Node, NodeStatus
    from dll import remap_index, random_value
"""

from dll.node    import Node, NodeStatus
from dll.markers import MarkerSet, ROLES
from dll.store   import ListStore, remap_index, random_value

__all__ = [
    "Node",      "NodeStatus",
    "MarkerSet", "ROLES",
    "ListStore", "remap_index", "random_value",
]
