"""Request payloads and command text for direct dispatches."""

import json
import logging
import shlex
from pathlib import Path

from gha.core.schemas import FRAGMENT_DELIMITER, DispatchPayload
from gha.exceptions import PayloadArgumentError
from gha.github import dispatch_headers
from gha.render.escape import escape_literal

logger = logging.getLogger(__name__)


def parse_dispatch_arg(argument: str) -> tuple[str, str]:
    """Parse a `key=value` or `key=@path` argument.

    With `@path` the value is the file's full contents, verbatim.

    Raises:
        PayloadArgumentError: If the argument is malformed or the file is unreadable
    """
    key, sep, value = argument.partition("=")
    if not sep or not key:
        raise PayloadArgumentError(argument, "expected key=value or key=@path")

    if value.startswith("@"):
        path = Path(value[1:])
        try:
            value = path.read_bytes().decode("utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise PayloadArgumentError(argument, f"cannot read {path}: {e}") from e

    return key, value


def build_dispatch_payload(ref: str, arguments: list[str]) -> DispatchPayload:
    """Build the request body from command-line arguments, in order."""
    inputs: dict[str, str] = {}
    for argument in arguments:
        key, value = parse_dispatch_arg(argument)
        if key in inputs:
            logger.warning("Input '%s' given more than once, using the last value", key)
        inputs[key] = value
    return DispatchPayload(ref=ref, inputs=inputs)


def payload_json(payload: DispatchPayload) -> str:
    return json.dumps(payload.model_dump(), ensure_ascii=False, separators=(",", ":"))


def render_curl_command(url: str, token: str, payload: DispatchPayload) -> str:
    """Render a ready-to-run curl command for the dispatch."""
    parts = ["curl -L -X POST"]
    for name, value in dispatch_headers(token).items():
        parts.append(f"-H {shlex.quote(f'{name}: {value}')}")
    parts.append(shlex.quote(url))
    parts.append(f"-d {shlex.quote(payload_json(payload))}")
    return " \\\n  ".join(parts)


def render_make_invocation(workflow: str, payload: DispatchPayload) -> str:
    """Render the dispatch as a line for a generated Makefile."""
    entries = [
        f'"{escape_literal(key)}":"{escape_literal(value)}"'
        for key, value in payload.inputs.items()
    ]
    return f"$(call dispatch,{workflow},{FRAGMENT_DELIMITER.join(entries)})"
