"""Gradio UI for CineXpress.

- app: Blocks layout and event wiring
- components: Option and reference-image controls
- handlers: Event handlers (state in, state out)
- state: UIState transitions
- validation: Upload conversion and option parsing
"""
