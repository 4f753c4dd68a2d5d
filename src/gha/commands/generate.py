"""Gen-makefile command - write a Makefile with one target per dispatch target."""

import logging
import os
import tempfile
from pathlib import Path

import typer

from gha.config import DEFAULT_API_URL
from gha.discovery.git import DefaultResolver
from gha.discovery.workflow import load_workflows
from gha.exceptions import ConfigurationError
from gha.render.makefile import (
    DEFAULT_REF,
    DEFAULT_REPO_PLACEHOLDER,
    build_render_model,
    render_makefile,
)

logger = logging.getLogger(__name__)

STDOUT = "-"


def write_atomic(path: Path, content: str) -> None:
    """Write content to path so readers never see a partial file."""
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def generate_makefile(
    workflows_dir: Path,
    resolver: DefaultResolver,
    api_url: str = DEFAULT_API_URL,
) -> str:
    """Render the Makefile for every dispatchable workflow in workflows_dir.

    Raises:
        ConfigurationError: If workflows_dir is not a directory
        WorkflowParseError: If any workflow file cannot be parsed
    """
    if not workflows_dir.is_dir():
        raise ConfigurationError(f"{workflows_dir} is not a directory or does not exist")

    logger.info("Discovering workflows in %s", workflows_dir)
    workflows = load_workflows(workflows_dir)

    repo_info = resolver.lookup_default_repo()
    repo = str(repo_info) if repo_info else DEFAULT_REPO_PLACEHOLDER
    ref = resolver.lookup_default_ref() or DEFAULT_REF

    model = build_render_model(workflows, repo=repo, ref=ref, api_url=api_url)
    return render_makefile(model)


def gen_makefile_command(
    workflows_dir: Path,
    output: str,
    resolver: DefaultResolver,
    api_url: str = DEFAULT_API_URL,
) -> None:
    """Generate the Makefile and write it to output ("-" for stdout).

    Args:
        workflows_dir: Directory holding the workflow YAML files
        output: Destination path, or "-" for stdout
        resolver: Source of the default REPO and REF values
        api_url: GitHub API base URL used by the dispatch macro
    """
    content = generate_makefile(workflows_dir, resolver, api_url)

    if output == STDOUT:
        typer.echo(content, nl=False)
        return

    path = Path(output)
    try:
        write_atomic(path, content)
    except OSError as e:
        raise ConfigurationError(f"failed to write {path}: {e}") from e
    logger.info("Wrote %s", path)
