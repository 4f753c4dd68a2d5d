"""gha - GitHub Actions workflow_dispatch helper.

Generates Makefile targets for dispatchable workflows and triggers them
directly through the GitHub REST API.
"""

from gha.exceptions import (
    ConfigurationError,
    DispatchHTTPError,
    DispatchTransportError,
    ExpansionInvariantError,
    GhaError,
    MissingDefaultError,
    PayloadArgumentError,
    RemoteDispatchError,
    WorkflowParseError,
)

__version__ = "0.1.0"

__all__ = [
    # Base exception
    "GhaError",
    # Configuration
    "ConfigurationError",
    "MissingDefaultError",
    "WorkflowParseError",
    # Expansion
    "ExpansionInvariantError",
    # Payload
    "PayloadArgumentError",
    # Remote dispatch
    "RemoteDispatchError",
    "DispatchHTTPError",
    "DispatchTransportError",
]
