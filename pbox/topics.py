"""
Event Topics for pbox

All pub/sub topics are defined here for easy discovery and documentation.
Topic naming convention: <category>.<action>
"""

# Command events (imperative - tell components to do something)
CMD_RELAYOUT = "cmd.relayout"
"""Command: Recompute one layout line. Params: line, area"""

# Layout notifications
LAYOUT_COMPUTED = "layout.computed"
"""Published after a layout line was computed. Params: line, geometries"""

LAYOUT_CHANGED = "layout.changed"
"""Published when the active layout is replaced (e.g., box-horizontal → box-vertical). Params: layout"""
