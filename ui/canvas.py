"""
canvas.py — SVG List Renderer
==============================
Pure rendering function: controller snapshot → SVG string.

The renderer consumes:
  • snapshot – RunController.snapshot() (nodes, links, head, markers, order)
  • config   – visual config (canvas size, colors, fonts, …)

Layout:
  - Nodes reachable from head sit on one row, in list order, with
    "null" caps at both ends.
  - Slots that are not on the chain (a node created but not yet linked,
    a node frozen mid-unlink by a cancelled run) are drawn on a second
    row so the half-done state stays visible.
  - next links are drawn above the box centre line, prev links below it.
  - Marker labels (head, curr, new, …) are stacked under each box.

Design decisions:
  - NO mutation.  The caller passes a snapshot and gets back a string.
  - Status coloring is a dict lookup: NodeStatus value → fill / stroke.
"""

import math
from typing import Dict, List, Optional, Tuple

from dll import ROLES


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 320
    bg:     str = "#0d1117"

    # node colors (status → (fill, stroke))
    node_colors: Dict[str, Tuple[str, str]] = {
        "default":   ("#1c2128", "#30363d"),
        "current":   ("#1e3a8a", "#60a5fa"),
        "highlight": ("#164e63", "#22d3ee"),
        "newNode":   ("#065f46", "#34d399"),
        "target":    ("#881337", "#fb7185"),
        "fadeOut":   ("#1c2128", "#4c1d24"),
        "done":      ("#064e3b", "#10b981"),
        "prev":      ("#4c1d95", "#a78bfa"),
    }
    fade_opacity: float = 0.25

    # marker label colors
    marker_colors: Dict[str, str] = {
        "head":     "#0ea5e9",
        "tail":     "#f97316",
        "current":  "#60a5fa",
        "prev":     "#a78bfa",
        "next":     "#22d3ee",
        "new_node": "#34d399",
        "target":   "#fb7185",
    }
    marker_labels: Dict[str, str] = {
        "head": "head", "tail": "tail", "current": "curr", "prev": "prev",
        "next": "next", "new_node": "new", "target": "target",
    }

    # node box
    node_width:        int = 56
    node_height:       int = 40
    node_gap:          int = 34
    node_label_color:  str = "#e6edf3"
    node_label_size:   int = 15
    node_label_weight: str = "600"

    # rows
    margin_x:     int = 30
    chain_y:      int = 70
    detached_y:   int = 220

    # links
    next_color:      str = "#7d8590"
    prev_color:      str = "#484f58"
    link_offset:     int = 7
    link_width:      int = 2
    arrow_size:      int = 7
    null_color:      str = "#484f58"

    # markers
    marker_font_size: int = 11
    marker_line:      int = 13


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(snapshot: dict, config: CanvasConfig = CONFIG) -> str:
    """
    Returns an SVG string.

    Args:
        snapshot : RunController.snapshot() or anything with the same keys.
        config   : Visual config.
    """
    nodes      = snapshot.get("nodes", [])
    next_links = snapshot.get("next_links", [])
    prev_links = snapshot.get("prev_links", [])
    order      = snapshot.get("order", [])
    markers    = snapshot.get("markers", {})

    positions = layout(len(nodes), order, config)
    width     = max(config.width, _needed_width(positions, config))

    svg_parts = [
        f'<svg width="{width}" height="{config.height}" '
        f'viewBox="0 0 {width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if not nodes:
        svg_parts.append(
            f'<text x="{width / 2}" y="{config.height / 2}" text-anchor="middle" '
            f'font-size="16" font-family="\'DM Sans\', sans-serif" fill="{config.null_color}">'
            f'head → null (empty list)</text>'
        )
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    # -- null caps --
    if order:
        svg_parts.append(_render_null_caps(positions[order[0]], positions[order[-1]], config))

    # -- links (first so boxes sit on top) --
    for i, j in enumerate(next_links):
        if j is not None and j in positions:
            svg_parts.append(_render_link(positions[i], positions[j], -config.link_offset, config.next_color, "next", config))
    for i, j in enumerate(prev_links):
        if j is not None and j in positions:
            svg_parts.append(_render_link(positions[i], positions[j], config.link_offset, config.prev_color, "prev", config))

    # -- nodes + marker labels --
    for i, node in enumerate(nodes):
        svg_parts.append(_render_node(i, node, positions[i], config))
        roles = [r for r in ROLES if markers.get(r) == i]
        if roles:
            svg_parts.append(_render_markers(roles, positions[i], config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------
def layout(slot_count: int, order: List[int], config: CanvasConfig = CONFIG) -> Dict[int, Tuple[float, float]]:
    """Top-left corner of every slot's box: chain row first, detached row after."""
    step = config.node_width + config.node_gap
    left = config.margin_x + config.node_gap
    positions: Dict[int, Tuple[float, float]] = {}
    for col, slot in enumerate(order):
        positions[slot] = (left + col * step, config.chain_y)
    detached = [i for i in range(slot_count) if i not in positions]
    for col, slot in enumerate(detached):
        positions[slot] = (left + col * step, config.detached_y)
    return positions


def _needed_width(positions: Dict[int, Tuple[float, float]], config: CanvasConfig) -> int:
    if not positions:
        return 0
    right = max(x for x, _ in positions.values()) + config.node_width
    return int(right + config.node_gap + config.margin_x * 2)


# ---------------------------------------------------------------------------
# Node Rendering
# ---------------------------------------------------------------------------
def _render_node(slot: int, node: dict, pos: Tuple[float, float], config: CanvasConfig) -> str:
    status       = node.get("status", "default")
    fill, stroke = config.node_colors.get(status, config.node_colors["default"])
    opacity      = config.fade_opacity if status == "fadeOut" else 1.0
    x, y = pos
    w, h = config.node_width, config.node_height

    parts = [
        f'<g class="node status-{status}" data-id="{node.get("id", "")}" data-slot="{slot}" opacity="{opacity}">',
        f'  <rect x="{x}" y="{y}" width="{w}" height="{h}" rx="8" '
        f'fill="{fill}" stroke="{stroke}" stroke-width="2"/>',
        f'  <text x="{x + w / 2}" y="{y + h / 2 + 5}" text-anchor="middle" '
        f'font-size="{config.node_label_size}" font-family="\'DM Sans\', sans-serif" '
        f'fill="{config.node_label_color}" font-weight="{config.node_label_weight}">{node.get("value", "")}</text>',
        '</g>',
    ]
    return "\n".join(parts)


def _render_markers(roles: List[str], pos: Tuple[float, float], config: CanvasConfig) -> str:
    x, y = pos
    cx   = x + config.node_width / 2
    base = y + config.node_height + 16
    parts = ['<g class="markers">']
    for k, role in enumerate(roles):
        parts.append(
            f'  <text x="{cx}" y="{base + k * config.marker_line}" text-anchor="middle" '
            f'font-size="{config.marker_font_size}" font-family="\'JetBrains Mono\', monospace" '
            f'fill="{config.marker_colors[role]}" font-weight="700">{config.marker_labels[role]}</text>'
        )
    parts.append('</g>')
    return "\n".join(parts)


def _render_null_caps(first: Tuple[float, float], last: Tuple[float, float], config: CanvasConfig) -> str:
    mid_y = first[1] + config.node_height / 2 + 4
    left  = first[0] - config.node_gap / 2
    right = last[0] + config.node_width + config.node_gap / 2
    style = f'font-size="11" font-family="\'JetBrains Mono\', monospace" fill="{config.null_color}"'
    return (
        f'<text x="{left}" y="{mid_y}" text-anchor="end" {style}>null</text>\n'
        f'<text x="{right}" y="{mid_y}" text-anchor="start" {style}>null</text>'
    )


# ---------------------------------------------------------------------------
# Link Rendering
# ---------------------------------------------------------------------------
def _render_link(
    src: Tuple[float, float],
    dst: Tuple[float, float],
    offset: float,
    color: str,
    kind: str,
    config: CanvasConfig,
) -> str:
    """Arrow between two box centres, shifted by `offset` and clipped at the box edges."""
    half_w, half_h = config.node_width / 2, config.node_height / 2
    x1, y1 = src[0] + half_w, src[1] + half_h + offset
    x2, y2 = dst[0] + half_w, dst[1] + half_h + offset

    dx, dy = x2 - x1, y2 - y1
    dist = math.sqrt(dx * dx + dy * dy)
    if dist < 0.001:
        return ""  # self link

    ux, uy = dx / dist, dy / dist
    # clip to the rectangle boundary
    tx = half_w / abs(ux) if abs(ux) > 1e-6 else math.inf
    ty = half_h / abs(uy) if abs(uy) > 1e-6 else math.inf
    t  = min(tx, ty)

    x1_adj, y1_adj = x1 + ux * t, y1 + uy * t
    x2_adj, y2_adj = x2 - ux * t, y2 - uy * t

    return "\n".join([
        f'<g class="link link-{kind}">',
        f'  <line x1="{x1_adj:.1f}" y1="{y1_adj:.1f}" x2="{x2_adj:.1f}" y2="{y2_adj:.1f}" '
        f'stroke="{color}" stroke-width="{config.link_width}"/>',
        "  " + _render_arrow(x2_adj, y2_adj, ux, uy, color, config),
        '</g>',
    ])


def _render_arrow(x: float, y: float, ux: float, uy: float, color: str, config: CanvasConfig) -> str:
    """Draw an arrowhead at (x, y) pointing in direction (ux, uy)."""
    size = config.arrow_size
    px, py = -uy, ux
    p1_x = x - ux * size + px * (size * 0.5)
    p1_y = y - uy * size + py * (size * 0.5)
    p2_x = x - ux * size - px * (size * 0.5)
    p2_y = y - uy * size - py * (size * 0.5)
    return f'<polygon points="{x:.1f},{y:.1f} {p1_x:.1f},{p1_y:.1f} {p2_x:.1f},{p2_y:.1f}" fill="{color}"/>'
