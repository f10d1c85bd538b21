"""
main.py — Doubly Linked List Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – snapshot + rendered SVG and panels (polled)
  GET  /api/operations         – operation metadata cards
  POST /api/run                – start the selected operation
  POST /api/pause              – pause the active run
  POST /api/resume             – resume a paused run
  POST /api/reset              – cancel + restore default statuses
  POST /api/regenerate         – cancel + fresh list of N nodes
  POST /api/config/operation   – select operation (cancels any run)
  POST /api/config/speed       – set step delay in ms

State management:
  One RunController per process, living on the EngineThread's event loop.
  Route handlers never touch it directly; they go through engine.call()
  (synchronous, returns the result) or launch a run that proceeds on the
  loop while the page polls /api/state.

Configuration (environment, read once at import):
  DLLVIZ_LIST_SIZE   initial list size      (default 5)
  DLLVIZ_SPEED_MS    initial step delay     (default 380)
  DLLVIZ_OPERATION   initially selected op  (default insert_head)
"""

from flask import Flask, render_template_string, request, jsonify
import logging
import threading
import sys
import os
from typing import Optional

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import DEFAULT_OPERATION, get_operation, list_operations, parse_params
from engine import DEFAULT_LIST_SIZE, DEFAULT_SPEED_MS, EngineThread, RunController
from ui import (
    render_canvas,
    playback_controls,
    operation_selector,
    params_input,
    list_generator,
    status_panel,
    history_panel,
    pseudocode_viewer,
)

log = logging.getLogger(__name__)

app = Flask(__name__)
app.config.update(
    LIST_SIZE=DEFAULT_LIST_SIZE,
    SPEED_MS=DEFAULT_SPEED_MS,
    OPERATION=DEFAULT_OPERATION,
)
app.config.from_prefixed_env("DLLVIZ")


# ---------------------------------------------------------------------------
# Engine Helpers
# ---------------------------------------------------------------------------
_engine: Optional[EngineThread] = None
_engine_lock = threading.Lock()


def get_engine() -> EngineThread:
    """The process-wide engine, created on first use from app.config."""
    global _engine
    with _engine_lock:
        if _engine is None:
            controller = RunController(
                size=app.config["LIST_SIZE"],
                speed_ms=app.config["SPEED_MS"],
                operation=app.config["OPERATION"],
            )
            _engine = EngineThread(controller).start()
        return _engine


def shutdown_engine() -> None:
    global _engine
    with _engine_lock:
        if _engine is not None:
            _engine.stop()
            _engine = None


def get_state() -> dict:
    """Snapshot plus everything the page re-renders on each poll."""
    engine = get_engine()
    snap = engine.call(engine.controller.snapshot)
    info = get_operation(snap["operation"])
    snap["svg"] = render_canvas(snap)
    snap["panels"] = {
        "playback": playback_controls(
            is_running=snap["is_running"],
            is_paused=snap["is_paused"],
            speed_ms=snap["speed_ms"],
        ),
        "status": status_panel(
            run_status=snap["run_status"],
            step_count=snap["step_count"],
            progress=snap["progress"],
            message=snap["message"],
            node_count=len(snap["nodes"]),
        ),
        "history":    history_panel(snap["history"]),
        "pseudocode": pseudocode_viewer(info.pseudocode, snap["pseudocode_line"]),
    }
    return snap


def json_body() -> dict:
    return request.get_json(silent=True) or {}


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    state = get_state()
    info  = get_operation(state["operation"])

    html = render_template_string(INDEX_TEMPLATE,
        svg=state["svg"],
        playback=state["panels"]["playback"],
        op_selector=operation_selector(list_operations(), info.key, disabled=state["is_running"]),
        params=params_input(info),
        list_gen=list_generator(state["list_size"]),
        status=state["panels"]["status"],
        history=state["panels"]["history"],
        pseudocode=state["panels"]["pseudocode"],
        op_label=info.label,
    )
    return html


@app.route("/api/state")
def api_state():
    return jsonify(get_state())


@app.route("/api/operations")
def api_operations():
    return jsonify([op.to_dict() for op in list_operations()])


# ---------------------------------------------------------------------------
# API: Run control
# ---------------------------------------------------------------------------
@app.route("/api/run", methods=["POST"])
def api_run():
    data   = json_body()
    params = parse_params(data.get("value"), data.get("position"))
    engine = get_engine()

    if engine.call(engine.controller.launch, params) is None:
        return jsonify({"error": "An operation is already running"}), 409
    return jsonify({"started": True, "operation": engine.controller.operation})


@app.route("/api/pause", methods=["POST"])
def api_pause():
    engine = get_engine()
    ok = engine.call(engine.controller.pause)
    return jsonify({"ok": ok, **get_state()})


@app.route("/api/resume", methods=["POST"])
def api_resume():
    engine = get_engine()
    ok = engine.call(engine.controller.resume)
    return jsonify({"ok": ok, **get_state()})


@app.route("/api/reset", methods=["POST"])
def api_reset():
    engine = get_engine()
    engine.call(engine.controller.reset)
    return jsonify(get_state())


@app.route("/api/regenerate", methods=["POST"])
def api_regenerate():
    size   = json_body().get("size")
    engine = get_engine()
    try:
        engine.call(engine.controller.regenerate, size)
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400
    return jsonify(get_state())


# ---------------------------------------------------------------------------
# API: Configuration
# ---------------------------------------------------------------------------
@app.route("/api/config/operation", methods=["POST"])
def api_config_operation():
    key    = json_body().get("operation", DEFAULT_OPERATION)
    engine = get_engine()
    try:
        info = engine.call(engine.controller.select_operation, key)
    except ValueError as e:
        return jsonify({"error": str(e)}), 400

    state = get_state()
    state["panels"]["op_selector"] = operation_selector(list_operations(), info.key)
    state["panels"]["params"]      = params_input(info)
    return jsonify(state)


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    engine = get_engine()
    try:
        speed = engine.call(engine.controller.set_speed, json_body().get("speed_ms", DEFAULT_SPEED_MS))
    except (TypeError, ValueError) as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({"speed_ms": speed})


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>DLL – {{ op_label }}</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
      --accent-rose: #f43f5e;
      --glow-cyan: rgba(14, 165, 233, 0.4);
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: linear-gradient(180deg, var(--bg-dark) 0%, var(--bg-darker) 100%);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      overflow-x: auto;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      min-height: 260px;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 16px;
      margin-bottom: 16px;
    }
    .panel h3 {
      font-size: 13px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      color: var(--accent-cyan);
      margin-bottom: 12px;
    }
    .panel label { display: block; margin: 8px 0; color: var(--text-secondary); font-size: 13px; }
    .panel input, .panel select {
      width: 100%;
      background: var(--bg-darker);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 6px 8px;
      margin-top: 4px;
    }
    .button-row { display: flex; gap: 8px; }
    button {
      background: var(--bg-darker);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 8px 12px;
      cursor: pointer;
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; }
    .btn-primary { background: var(--accent-cyan); border-color: var(--accent-cyan); }
    .btn-secondary { width: 100%; margin-top: 8px; }

    .op-card p { font-size: 13px; color: var(--text-secondary); margin-top: 8px; }
    .op-tip { color: #c4b5fd !important; }

    .status-row { display: flex; gap: 16px; align-items: center; font-size: 13px; }
    .badge { padding: 2px 10px; border-radius: 999px; border: 1px solid var(--border); }
    .badge-running { color: #93c5fd; border-color: #3b82f6; }
    .badge-paused { color: #fcd34d; border-color: var(--accent-amber); }
    .badge-completed { color: #6ee7b7; border-color: var(--accent-emerald); }
    .progress { height: 6px; background: var(--bg-darker); border-radius: 3px; margin: 12px 0; }
    .progress-bar { height: 100%; background: var(--accent-cyan); border-radius: 3px; transition: width 0.2s; }
    .explanation-text { font-size: 14px; line-height: 1.6; }

    .history-list { padding-left: 20px; font-family: 'JetBrains Mono', monospace; font-size: 12px; }
    .history-insertion { color: #6ee7b7; }
    .history-deletion { color: #fda4af; }
    .placeholder, .hint { color: var(--text-secondary); font-size: 13px; }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 16px;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 13px;
      line-height: 1.6;
      white-space: pre;
    }
    .code-line { padding: 2px 12px; border-radius: 6px; }
    .code-line.highlight {
      background: linear-gradient(90deg, rgba(6, 182, 212, 0.15) 0%, transparent 100%);
      border-left: 3px solid var(--accent-cyan);
      box-shadow: 0 0 20px var(--glow-cyan);
    }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="op-selector-panel">{{ op_selector|safe }}</div>
    <div id="params">{{ params|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="list-gen">{{ list_gen|safe }}</div>
    <div id="history">{{ history|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>
    <div id="bottom-panel">
      <div id="pseudocode">{{ pseudocode|safe }}</div>
      <div id="status">{{ status|safe }}</div>
    </div>
  </div>

  <script>
    // API helpers
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data),
      });
      return await res.json();
    }

    function apply(data) {
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (!data.panels) return;
      for (const [key, html] of Object.entries(data.panels)) {
        const el = document.getElementById(key === 'op_selector' ? 'op-selector-panel' : key);
        if (el) el.innerHTML = html;
      }
      const sel = document.getElementById('op-selector');
      if (sel) sel.disabled = data.is_running;
      bind();
    }

    let polling = null;
    async function poll() {
      const data = await (await fetch('/api/state')).json();
      apply(data);
      if (!data.is_running && polling) {
        clearInterval(polling);
        polling = null;
      }
    }
    function startPolling() {
      if (!polling) polling = setInterval(poll, 120);
    }

    function value(id) {
      const el = document.getElementById(id);
      return el ? el.value : '';
    }

    // panels are re-rendered on every poll, so handlers are re-bound each time
    function bind() {
      const on = (id, ev, fn) => {
        const el = document.getElementById(id);
        if (el) el['on' + ev] = fn;
      };
      on('btn-start', 'click', async () => {
        const data = await post('/api/run', {value: value('input-value'), position: value('input-position')});
        if (data.error) alert(data.error);
        startPolling();
      });
      on('btn-pause', 'click', async () => apply(await post('/api/pause', {})));
      on('btn-resume', 'click', async () => { apply(await post('/api/resume', {})); startPolling(); });
      on('btn-reset', 'click', async () => apply(await post('/api/reset', {})));
      on('btn-regenerate', 'click', async () => {
        const data = await post('/api/regenerate', {size: +value('list-size')});
        if (data.error) alert(data.error); else apply(data);
      });
      on('op-selector', 'change', async (e) => {
        const data = await post('/api/config/operation', {operation: e.target.value});
        apply(data);
      });
      on('speed-slider', 'input', async (e) => {
        document.getElementById('speed-val').textContent = e.target.value;
        await post('/api/config/speed', {speed_ms: +e.target.value});
      });
    }
    bind();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )
    print("=" * 60)
    print("  Doubly Linked List Visualizer")
    print("  Starting Flask server...")
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=True, host="0.0.0.0", port=5000, use_reloader=False)
