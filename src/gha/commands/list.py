"""List command - show dispatchable workflows and their targets."""

from pathlib import Path

from gha.discovery.display import print_workflow_list
from gha.discovery.workflow import load_workflows


def list_command(workflows_dir: Path) -> None:
    """Print a table of the workflow_dispatch workflows in workflows_dir."""
    print_workflow_list(load_workflows(workflows_dir))
