"""Rich display utilities for the gha CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from gha.core.schemas import WorkflowDefinition
from gha.render.expander import expand_targets

console = Console()
err_console = Console(stderr=True)

LOG_LEVELS = {0: logging.WARNING, 1: logging.INFO}


def configure_logging(verbosity: int) -> None:
    """Send log records to stderr; -v for INFO, -vv for DEBUG."""
    level = LOG_LEVELS.get(verbosity, logging.DEBUG)
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def print_success(message: str) -> None:
    """Print a success message."""
    err_console.print(f"[bold green]✓[/] {escape(message)}", soft_wrap=True)


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[bold red]✗[/] {escape(message)}", soft_wrap=True)


def print_workflow_list(workflows: list[WorkflowDefinition]) -> None:
    """Print a table of dispatchable workflows and their targets."""
    if not workflows:
        err_console.print("[bold blue]ℹ[/] No workflow_dispatch workflows found.")
        return

    table = Table(title="Dispatchable workflows")
    table.add_column("File", style="cyan")
    table.add_column("Name")
    table.add_column("Inputs")
    table.add_column("Targets", style="green")

    for wf in workflows:
        inputs = []
        for spec in wf.inputs:
            label = spec.name
            if spec.required_effective:
                label += "*"
            inputs.append(label)
        table.add_row(
            wf.file_identifier,
            wf.display_name,
            ", ".join(inputs) or "-",
            "\n".join(t.target_name for t in expand_targets(wf)),
        )

    console.print(table)
