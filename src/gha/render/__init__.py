"""Rendering of dispatch targets.

This package turns parsed workflow definitions into:
- Dispatch targets (choice expansion of the first input)
- A Makefile with one target per workflow/option, via a Jinja2 template
- JSON request bodies and command text for direct dispatches
"""

from gha.render.escape import (
    escape_literal,
    escape_make_argument,
    escape_single_quoted,
    json_string_content,
    normalize_whitespace,
    summarize_default,
)
from gha.render.expander import build_target, expand_targets, normalize_option
from gha.render.makefile import build_render_model, render_makefile
from gha.render.payload import (
    build_dispatch_payload,
    parse_dispatch_arg,
    render_curl_command,
    render_make_invocation,
)

__all__ = [
    # Expansion
    "expand_targets",
    "build_target",
    "normalize_option",
    # Makefile
    "build_render_model",
    "render_makefile",
    # Direct dispatch
    "build_dispatch_payload",
    "parse_dispatch_arg",
    "render_curl_command",
    "render_make_invocation",
    # Escape utilities
    "escape_literal",
    "escape_make_argument",
    "escape_single_quoted",
    "json_string_content",
    "normalize_whitespace",
    "summarize_default",
]
