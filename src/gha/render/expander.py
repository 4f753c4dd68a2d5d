"""Expansion of workflow definitions into dispatch targets."""

from gha.core.schemas import DispatchTarget, InputSpec, WorkflowDefinition
from gha.exceptions import ExpansionInvariantError
from gha.render.escape import escape_literal


def normalize_option(option: str) -> str:
    """Target name suffix for a choice option.

    Only lowercases and replaces ':' with '_'; other characters are kept.
    """
    return option.lower().replace(":", "_")


def payload_entry(spec: InputSpec, pinned: str | None = None) -> str:
    """Serialize one input as a `"name":"value"` fragment entry.

    Pinned inputs become escaped literals, the rest reference the Make
    variable named after the input.
    """
    key = escape_literal(spec.name)
    if pinned is not None:
        return f'"{key}":"{escape_literal(pinned)}"'
    return f'"{key}":"$({spec.variable_name})"'


def build_target(
    target_name: str,
    workflow: WorkflowDefinition,
    fixed_overrides: dict[str, str] | None = None,
) -> DispatchTarget:
    """Build a target, pinning the inputs named in fixed_overrides."""
    fixed = fixed_overrides or {}
    return DispatchTarget(
        target_name=target_name,
        fixed_overrides=dict(fixed),
        required_variable_names=tuple(
            spec.variable_name
            for spec in workflow.inputs
            if spec.required_effective and spec.name not in fixed
        ),
        payload_entries=tuple(
            payload_entry(spec, fixed.get(spec.name)) for spec in workflow.inputs
        ),
    )


def expand_targets(workflow: WorkflowDefinition) -> list[DispatchTarget]:
    """Compute the dispatch targets of a workflow.

    A workflow whose first declared input is a choice with options gets one
    target per option, in option order. Every other workflow, including one
    whose choice inputs are not first, gets a single target.
    """
    base = workflow.base_target
    first = workflow.inputs[0] if workflow.inputs else None

    if first is not None and first.is_choice:
        targets = [
            build_target(f"{base}-{normalize_option(option)}", workflow, {first.name: option})
            for option in first.options
        ]
    else:
        targets = [build_target(base, workflow)]

    if not targets:
        raise ExpansionInvariantError(workflow.file_identifier)
    return targets
