"""Tests for direct-dispatch payloads and command text."""

import json
import shlex
from pathlib import Path

import pytest

from gha.core.schemas import DispatchPayload
from gha.exceptions import PayloadArgumentError
from gha.github import dispatch_url
from gha.render.payload import (
    build_dispatch_payload,
    parse_dispatch_arg,
    payload_json,
    render_curl_command,
    render_make_invocation,
)


class TestParseDispatchArg:
    """Tests for key=value / key=@path arguments."""

    def test_key_value(self) -> None:
        """Test a plain key=value pair."""
        assert parse_dispatch_arg("version=1.2.3") == ("version", "1.2.3")

    def test_value_with_equals(self) -> None:
        """Test only the first '=' separates key and value."""
        assert parse_dispatch_arg("query=a=b") == ("query", "a=b")

    def test_empty_value(self) -> None:
        """Test an empty value is allowed."""
        assert parse_dispatch_arg("notes=") == ("notes", "")

    @pytest.mark.parametrize("argument", ["version", "=1.2.3", ""])
    def test_malformed(self, argument: str) -> None:
        """Test arguments without a key=value shape are rejected."""
        with pytest.raises(PayloadArgumentError, match="expected key=value"):
            parse_dispatch_arg(argument)

    def test_file_contents(self, tmp_path: Path) -> None:
        """Test @path reads the raw file contents without parsing them."""
        payload_file = tmp_path / "payload.json"
        payload_file.write_text('{"a":1}')

        key, value = parse_dispatch_arg(f"name=@{payload_file}")

        assert key == "name"
        assert value == '{"a":1}'

    def test_file_contents_verbatim(self, tmp_path: Path) -> None:
        """Test trailing newlines in the file are kept."""
        notes = tmp_path / "notes.txt"
        notes.write_text("line one\nline two\n")
        assert parse_dispatch_arg(f"notes=@{notes}")[1] == "line one\nline two\n"

    def test_file_line_endings_kept(self, tmp_path: Path) -> None:
        """Test CRLF line endings reach the payload unchanged."""
        notes = tmp_path / "notes.txt"
        notes.write_bytes(b"a\r\nb\r\n")
        assert parse_dispatch_arg(f"notes=@{notes}")[1] == "a\r\nb\r\n"

    def test_unreadable_file(self, tmp_path: Path) -> None:
        """Test an unreadable @path fails naming the path."""
        missing = tmp_path / "missing.json"
        with pytest.raises(PayloadArgumentError) as exc_info:
            parse_dispatch_arg(f"name=@{missing}")
        assert str(missing) in str(exc_info.value)


class TestBuildDispatchPayload:
    """Tests for building request bodies."""

    def test_payload(self) -> None:
        """Test ref and inputs in argument order."""
        payload = build_dispatch_payload("main", ["b=2", "a=1"])
        assert payload.ref == "main"
        assert list(payload.inputs.items()) == [("b", "2"), ("a", "1")]

    def test_last_value_wins(self) -> None:
        """Test a repeated key keeps the last value."""
        payload = build_dispatch_payload("main", ["a=1", "a=2"])
        assert payload.inputs == {"a": "2"}

    def test_one_bad_argument_fails_all(self, tmp_path: Path) -> None:
        """Test any invalid argument fails the whole payload."""
        with pytest.raises(PayloadArgumentError):
            build_dispatch_payload("main", ["a=1", f"b=@{tmp_path / 'nope'}"])

    def test_payload_json(self) -> None:
        """Test the compact JSON body."""
        payload = DispatchPayload(ref="main", inputs={"env": "staging"})
        assert payload_json(payload) == '{"ref":"main","inputs":{"env":"staging"}}'


class TestRenderCommands:
    """Tests for curl and Makefile command text."""

    def test_curl_command(self) -> None:
        """Test the curl command carries headers, URL and body."""
        payload = DispatchPayload(ref="main", inputs={"msg": "it's done"})
        url = dispatch_url("acme/rockets", "deploy.yml")

        command = render_curl_command(url, "tok", payload)
        argv = shlex.split(command.replace("\\\n", " "))

        assert argv[:4] == ["curl", "-L", "-X", "POST"]
        assert "Accept: application/vnd.github+json" in argv
        assert "Authorization: Bearer tok" in argv
        assert "X-GitHub-Api-Version: 2022-11-28" in argv
        assert "https://api.github.com/repos/acme/rockets/actions/workflows/deploy.yml/dispatches" in argv
        body = argv[argv.index("-d") + 1]
        assert json.loads(body) == {"ref": "main", "inputs": {"msg": "it's done"}}

    def test_make_invocation(self) -> None:
        """Test the Makefile line uses literal, escaped values."""
        payload = DispatchPayload(ref="main", inputs={"env": "staging", "tags": "a,b"})
        assert render_make_invocation("deploy.yml", payload) == (
            '$(call dispatch,deploy.yml,"env":"staging"$(comma)"tags":"a$(comma)b")'
        )

    def test_make_invocation_without_inputs(self) -> None:
        """Test an empty inputs fragment."""
        payload = DispatchPayload(ref="main")
        assert render_make_invocation("build.yml", payload) == "$(call dispatch,build.yml,)"
