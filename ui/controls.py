"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – start/pause/resume/reset + speed slider
  • operation_selector  – operation dropdown + metadata card + learner tip
  • params_input        – value / position inputs (shown as the operation needs)
  • list_generator      – list size + regenerate
  • status_panel        – run status badge, step counter, progress, narration
  • history_panel       – completed operations, newest first
  • pseudocode_viewer   – with live line highlighting

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs (usually straight from a snapshot).
  - Output is raw HTML strings; user-supplied text goes through escape().
  - main.py stitches them together.
"""

from typing import Any, Dict, List, Optional

from markupsafe import escape

from algorithms import OperationInfo
from engine.controller import (
    LIST_SIZE_MAX,
    LIST_SIZE_MIN,
    SPEED_MAX_MS,
    SPEED_MIN_MS,
)

STATUS_BADGES = {
    "Idle":      "badge-idle",
    "Running":   "badge-running",
    "Paused":    "badge-paused",
    "Completed": "badge-completed",
}

HISTORY_LABELS = {
    "insert_head":     "Insert Head",
    "insert_tail":     "Insert Tail",
    "insert_position": "Insert @",
    "delete_head":     "Delete Head",
    "delete_tail":     "Delete Tail",
    "delete_by_value": "Delete Value",
}


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_running: bool = False,
    is_paused: bool = False,
    speed_ms: int = 380,
) -> str:
    disabled_start = "disabled" if is_running else ""
    if is_paused:
        toggle = '<button id="btn-resume" title="Resume">▶ Resume</button>'
    else:
        toggle = f'<button id="btn-pause" title="Pause" {"" if is_running else "disabled"}>⏸ Pause</button>'

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-start" class="btn-primary" {disabled_start}>▶ Start</button>
        {toggle}
        <button id="btn-reset" title="Reset statuses">↺ Reset</button>
      </div>
      <div class="speed-control">
        <label>Delay: <span id="speed-val">{speed_ms}</span> ms</label>
        <input type="range" id="speed-slider" min="{SPEED_MIN_MS}" max="{SPEED_MAX_MS}"
               step="10" value="{speed_ms}">
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Operation Selector
# ---------------------------------------------------------------------------
def operation_selector(
    operations: List[OperationInfo],
    selected_key: str = "insert_head",
    disabled: bool = False,
) -> str:
    options = []
    active: Optional[OperationInfo] = None
    for op in operations:
        sel = 'selected' if op.key == selected_key else ''
        if op.key == selected_key:
            active = op
        options.append(
            f'<option value="{op.key}" {sel}>{op.label} — {op.complexity_time}</option>'
        )

    card = ""
    if active is not None:
        card = f"""
        <div class="op-card op-{active.type}">
          <p class="op-description">{escape(active.description)}</p>
          <p class="op-complexity">Time {active.complexity_time} · Space {active.complexity_space}</p>
          <p class="op-tip">💡 {escape(active.learner_tip)}</p>
        </div>
        """

    return f"""
    <div class="panel operation-selector">
      <h3>🧠 Operation</h3>
      <select id="op-selector" {"disabled" if disabled else ""}>
        {''.join(options)}
      </select>
      {card}
    </div>
    """


# ---------------------------------------------------------------------------
# Parameter Inputs
# ---------------------------------------------------------------------------
def params_input(info: OperationInfo, value_text: str = "", position_text: str = "") -> str:
    fields = []
    if info.needs_value:
        placeholder = "random if empty" if info.type == "insertion" else "value to delete"
        fields.append(
            f'<label>Value: <input type="text" id="input-value" value="{escape(value_text)}" '
            f'placeholder="{placeholder}"></label>'
        )
    if info.needs_position:
        fields.append(
            f'<label>Position: <input type="number" id="input-position" min="0" '
            f'value="{escape(position_text)}" placeholder="0"></label>'
        )
    if not fields:
        fields.append('<p class="hint">No input needed.</p>')

    return f"""
    <div class="panel params-input">
      <h3>✏️ Input</h3>
      {''.join(fields)}
    </div>
    """


# ---------------------------------------------------------------------------
# List Generator
# ---------------------------------------------------------------------------
def list_generator(list_size: int = 5) -> str:
    return f"""
    <div class="panel list-generator">
      <h3>🔀 List</h3>
      <label>Nodes: <input type="number" id="list-size" value="{list_size}"
             min="{LIST_SIZE_MIN}" max="{LIST_SIZE_MAX}"></label>
      <button id="btn-regenerate" class="btn-secondary">Generate New List</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Status Panel
# ---------------------------------------------------------------------------
def status_panel(
    run_status: str = "Idle",
    step_count: int = 0,
    progress: int = 0,
    message: str = "",
    node_count: int = 0,
) -> str:
    badge = STATUS_BADGES.get(run_status, "badge-idle")
    return f"""
    <div class="panel status-panel">
      <div class="status-row">
        <span class="badge {badge}">{run_status}</span>
        <span>Step <strong>{step_count}</strong></span>
        <span>Nodes <strong>{node_count}</strong></span>
      </div>
      <div class="progress"><div class="progress-bar" style="width: {progress}%;"></div></div>
      <div class="explanation-text">{escape(message)}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# History Panel
# ---------------------------------------------------------------------------
def history_panel(history: List[Dict[str, Any]]) -> str:
    if not history:
        return """
        <div class="panel history-panel">
          <h3>🕘 History</h3>
          <p class="placeholder">No operations yet.</p>
        </div>
        """

    rows = []
    for entry in history:
        kind  = entry.get("type", "")
        label = HISTORY_LABELS.get(kind, kind)
        text  = f"{label} {entry.get('value')}"
        if entry.get("position") is not None:
            text = f"{label}{entry['position']} → {entry.get('value')}"
        css = "insertion" if kind.startswith("insert") else "deletion"
        rows.append(f'<li class="history-{css}">{escape(text)}</li>')

    return f"""
    <div class="panel history-panel">
      <h3>🕘 History</h3>
      <ol class="history-list">
        {''.join(rows)}
      </ol>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: Optional[int] = None,
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an operation to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """
