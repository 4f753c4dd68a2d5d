"""Escaping for values embedded in generated Makefiles and shell commands."""

import json
import re

LONG_DEFAULT_BYTES = 256

# Single pass, so the references inserted here are not escaped again
_MAKE_ARGUMENT_ESCAPES = str.maketrans(
    {"$": "$$", ",": "$(comma)", "(": "$(lparen)", ")": "$(rparen)"}
)


def json_string_content(text: str) -> str:
    """Escape text for use between the quotes of a JSON string."""
    return json.dumps(text, ensure_ascii=False)[1:-1]


def escape_make_argument(text: str) -> str:
    """Escape text for use inside a $(call ...) argument.

    Handles:
    - `$` (doubled so make does not expand it)
    - `,` `(` `)` (replaced by the comma/lparen/rparen variables so they
      neither split arguments nor close the call)
    """
    return text.translate(_MAKE_ARGUMENT_ESCAPES)


def escape_single_quoted(text: str) -> str:
    """Escape text for use inside a single-quoted shell string."""
    return text.replace("'", "'\\''")


def escape_literal(text: str) -> str:
    """Escape a pinned value for the JSON body of the dispatch macro."""
    return escape_single_quoted(escape_make_argument(json_string_content(text)))


def normalize_whitespace(text: str) -> str:
    """Collapse whitespace runs (including newlines) to single spaces."""
    return re.sub(r"\s+", " ", text).strip()


def summarize_default(value: str) -> str:
    """Render a default for a comment line, summarizing long values."""
    size = len(value.encode("utf-8"))
    if size >= LONG_DEFAULT_BYTES:
        return f"(long default: {size} bytes)"
    return normalize_whitespace(value)


def comment_text(text: str) -> str:
    """Make text safe for a `#` comment line.

    A trailing backslash would continue the comment onto the next line and
    swallow the target that follows it.
    """
    return text.rstrip("\\")
