"""gha exception hierarchy.

Provides a unified exception hierarchy for the gha CLI and library.
This enables:
- User-friendly error messages in the CLI
- Programmatic error handling in library usage
- Distinct exit codes for usage problems and failed dispatches

Usage:
    from gha.exceptions import DispatchHTTPError, WorkflowParseError

    try:
        generate_makefile(workflows_dir, output)
    except WorkflowParseError as e:
        print(f"Broken workflow: {e.path}")
    except GhaError as e:
        print(f"gha error: {e}")
"""


class GhaError(Exception):
    """Base exception for all gha errors.

    All gha-specific exceptions inherit from this class, allowing
    callers to catch all gha errors with a single except clause.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


# Configuration Errors


class ConfigurationError(GhaError):
    """Error in the run configuration.

    Raised before any work is done, when the workflows directory,
    the workflow files or the CLI values cannot be used.
    """

    pass


class MissingDefaultError(ConfigurationError):
    """A required value was not given and could not be derived.

    Raised when --repo, --ref, --workflow or the token are absent and
    no default can be detected from git or the environment.
    """

    def __init__(self, value_name: str, hint: str | None = None) -> None:
        self.value_name = value_name
        message = f"Missing {value_name}"
        if hint:
            message += f": {hint}"
        super().__init__(message)


class WorkflowParseError(ConfigurationError):
    """A workflow file could not be parsed.

    Parsing is not best-effort: one broken file fails the whole run.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"failed to parse {path}: {reason}")


# Expansion Errors


class ExpansionInvariantError(GhaError):
    """Target expansion produced no targets for a workflow."""

    def __init__(self, file_identifier: str) -> None:
        self.file_identifier = file_identifier
        super().__init__(f"No dispatch targets computed for {file_identifier}")


# Payload Errors


class PayloadArgumentError(GhaError):
    """Invalid --arg value.

    Raised when an argument is not of the form key=value, or when a
    key=@path argument names a file that cannot be read.
    """

    def __init__(self, argument: str, reason: str) -> None:
        self.argument = argument
        self.reason = reason
        super().__init__(f"Invalid argument '{argument}': {reason}")


# Remote Dispatch Errors


class RemoteDispatchError(GhaError):
    """Base class for failures of the workflow dispatch API call."""

    pass


class DispatchHTTPError(RemoteDispatchError):
    """GitHub answered the dispatch request with a non-2xx status."""

    def __init__(self, status_code: int, body: str) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(f"Dispatch failed with HTTP {status_code}: {body}")


class DispatchTransportError(RemoteDispatchError):
    """The dispatch request did not complete (DNS, TLS, timeout...)."""

    def __init__(self, url: str, cause: Exception) -> None:
        self.url = url
        self.cause = cause
        super().__init__(f"Request to {url} failed: {cause}")
