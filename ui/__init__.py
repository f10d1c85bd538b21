"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import playback_controls, operation_selector, …
"""

from ui.canvas import render_canvas, CanvasConfig, layout

from ui.controls import (
    playback_controls,
    operation_selector,
    params_input,
    list_generator,
    status_panel,
    history_panel,
    pseudocode_viewer,
)

__all__ = [
    "render_canvas",
    "CanvasConfig",
    "layout",
    "playback_controls",
    "operation_selector",
    "params_input",
    "list_generator",
    "status_panel",
    "history_panel",
    "pseudocode_viewer",
]
