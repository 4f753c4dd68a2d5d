"""gha CLI - Main entry point.

Commands:
- gen-makefile: Generate a Makefile with one target per dispatch target
- dispatch: Trigger a workflow_dispatch run (or print the command)
- list: Show dispatchable workflows
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Annotated, Optional

import typer

from gha import __version__
from gha.commands import dispatch_command, gen_makefile_command, list_command
from gha.config import get_settings
from gha.core.schemas import DispatchMode
from gha.discovery.display import configure_logging, print_error
from gha.discovery.git import GitDefaultResolver
from gha.exceptions import ExpansionInvariantError, GhaError, RemoteDispatchError

# sysexits.h
EX_USAGE = 64
EX_SOFTWARE = 70

app = typer.Typer(
    help="gha - GitHub Actions tool.\n\nGenerate Makefile targets for workflow_dispatch "
    "workflows or dispatch them directly.",
    invoke_without_command=True,
)


@contextmanager
def _exit_on_error() -> Iterator[None]:
    """Report gha errors and exit with the matching sysexits code."""
    try:
        yield
    except (RemoteDispatchError, ExpansionInvariantError) as e:
        print_error(e.message)
        raise typer.Exit(EX_SOFTWARE) from e
    except GhaError as e:
        print_error(e.message)
        raise typer.Exit(EX_USAGE) from e


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"gha {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option("--verbose", "-v", count=True, help="Increase logging verbosity (-v, -vv)."),
    ] = 0,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = False,
) -> None:
    """gha - GitHub Actions tool."""
    configure_logging(verbose)
    if ctx.invoked_subcommand is None:
        print_error("Error: No command provided. Try --help.")
        raise typer.Exit(EX_USAGE)


@app.command("gen-makefile")
def gen_makefile(
    workflows_dir: Annotated[
        Optional[Path],
        typer.Option("--workflows-dir", "-d", help="Directory with workflow YAML files"),
    ] = None,
    output: Annotated[
        str,
        typer.Option("--output", "-o", help="Makefile to write, or - for stdout"),
    ] = "Makefile",
) -> None:
    """Generate a Makefile with a target per workflow_dispatch workflow.

    Workflows whose first input is a choice get one target per option.

    Examples:
        gha gen-makefile
        gha gen-makefile -o - > dispatch.mk
        gha gen-makefile -d ci/workflows -o ci.mk
    """
    settings = get_settings()
    directory = workflows_dir or settings.workflows_dir
    resolver = GitDefaultResolver(directory if directory.is_dir() else None)
    with _exit_on_error():
        gen_makefile_command(directory, output, resolver, api_url=settings.api_url)


@app.command()
def dispatch(
    repo: Annotated[
        Optional[str],
        typer.Option("--repo", "-r", help="owner/repo (default: from git remote origin)"),
    ] = None,
    workflow: Annotated[
        Optional[str],
        typer.Option("--workflow", "-w", help="Workflow file name (default: the only one)"),
    ] = None,
    ref: Annotated[
        Optional[str],
        typer.Option("--ref", help="Branch, tag or SHA (default: current branch)"),
    ] = None,
    token: Annotated[
        Optional[str],
        typer.Option("--token", help="GitHub token (default: GITHUB_TOKEN or GH_TOKEN)"),
    ] = None,
    arg: Annotated[
        Optional[list[str]],
        typer.Option("--arg", "-a", help="Workflow input as name=value or name=@file"),
    ] = None,
    mode: Annotated[
        DispatchMode,
        typer.Option("--mode", "-m", help="Print a curl command, a Makefile line, or execute"),
    ] = DispatchMode.EXECUTE,
    workflows_dir: Annotated[
        Optional[Path],
        typer.Option("--workflows-dir", "-d", help="Directory with workflow YAML files"),
    ] = None,
) -> None:
    """Trigger a workflow_dispatch run through the GitHub API.

    Examples:
        gha dispatch -w deploy.yml -a environment=staging -a version=1.2.3
        gha dispatch -a config=@payload.json --mode curl
        gha dispatch --ref v1.0 --mode make
    """
    settings = get_settings()
    with _exit_on_error():
        dispatch_command(
            repo,
            workflow,
            ref,
            token,
            arg or [],
            mode,
            GitDefaultResolver(),
            settings,
            workflows_dir=workflows_dir,
        )


@app.command("list")
def list_cmd(
    workflows_dir: Annotated[
        Optional[Path],
        typer.Option("--workflows-dir", "-d", help="Directory with workflow YAML files"),
    ] = None,
) -> None:
    """List workflow_dispatch workflows and the targets generated for them."""
    with _exit_on_error():
        list_command(workflows_dir or get_settings().workflows_dir)


if __name__ == "__main__":
    app()
