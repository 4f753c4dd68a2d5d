"""Dispatch command - trigger a workflow_dispatch run directly."""

import logging
from pathlib import Path

import typer

from gha.config import GhaSettings
from gha.core.schemas import DispatchMode
from gha.discovery.display import print_success
from gha.discovery.git import DefaultResolver
from gha.discovery.workflow import default_workflow_from_dir
from gha.exceptions import ConfigurationError, MissingDefaultError
from gha.github import GitHubClient, dispatch_url
from gha.render.payload import (
    build_dispatch_payload,
    render_curl_command,
    render_make_invocation,
)

logger = logging.getLogger(__name__)


def _resolve_repo(repo: str | None, resolver: DefaultResolver) -> str:
    if not repo:
        detected = resolver.lookup_default_repo()
        if detected is None:
            raise MissingDefaultError(
                "repo", "pass --repo owner/repo or run inside a GitHub checkout"
            )
        repo = str(detected)
        logger.info("Using repository %s from git remote", repo)

    owner, sep, name = repo.partition("/")
    if not sep or not owner or not name or "/" in name:
        raise ConfigurationError(f"Invalid repository '{repo}': expected owner/repo")
    return repo


def _resolve_ref(ref: str | None, resolver: DefaultResolver) -> str:
    if ref:
        return ref
    detected = resolver.lookup_default_ref()
    if detected is None:
        raise MissingDefaultError("ref", "pass --ref or run inside a git checkout")
    logger.info("Using ref %s from git", detected)
    return detected


def _resolve_workflow(workflow: str | None, workflows_dir: Path) -> str:
    if workflow:
        return workflow
    detected = default_workflow_from_dir(workflows_dir)
    if detected is None:
        raise MissingDefaultError(
            "workflow",
            f"pass --workflow; auto-detection needs exactly one workflow in {workflows_dir}",
        )
    logger.info("Using workflow %s", detected)
    return detected


def dispatch_command(
    repo: str | None,
    workflow: str | None,
    ref: str | None,
    token: str | None,
    args: list[str],
    mode: DispatchMode,
    resolver: DefaultResolver,
    settings: GhaSettings,
    client: GitHubClient | None = None,
    workflows_dir: Path | None = None,
) -> None:
    """Dispatch a workflow, or print the command that would.

    Args:
        repo: owner/repo, detected from the git remote when omitted
        workflow: Workflow file name, detected when exactly one exists
        ref: Branch, tag or SHA, detected from git when omitted
        token: GitHub token, falls back to GITHUB_TOKEN / GH_TOKEN
        args: Inputs as key=value or key=@path
        mode: Print a curl command, print a Makefile line, or execute
        resolver: Source of repo/ref defaults
        settings: Environment configuration
        client: GitHub client (built from settings when omitted)
        workflows_dir: Where to look for a single workflow to default to
    """
    token = token or settings.github_token
    if not token:
        raise MissingDefaultError("token", "pass --token or set GITHUB_TOKEN")

    repo = _resolve_repo(repo, resolver)
    workflow = _resolve_workflow(workflow, workflows_dir or settings.workflows_dir)
    ref = _resolve_ref(ref, resolver)

    payload = build_dispatch_payload(ref, args)

    match mode:
        case DispatchMode.CURL:
            url = dispatch_url(repo, workflow, settings.api_url)
            typer.echo(render_curl_command(url, token, payload))
        case DispatchMode.MAKE:
            typer.echo(render_make_invocation(workflow, payload))
        case DispatchMode.EXECUTE:
            if client is None:
                client = GitHubClient(
                    token, api_url=settings.api_url, timeout=settings.http_timeout
                )
            client.dispatch_workflow(repo, workflow, payload)
            print_success(f"Dispatched {workflow} on {repo}@{ref}")
