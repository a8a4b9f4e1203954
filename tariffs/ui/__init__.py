"""UI components for the transport cost portal."""

from .upload import render_upload_panel
from .query_form import init_form_state, render_query_form, handle_compute_request, current_query
from .result_panel import render_result_panel

__all__ = [
    "render_upload_panel",
    "init_form_state",
    "render_query_form",
    "handle_compute_request",
    "current_query",
    "render_result_panel",
]
