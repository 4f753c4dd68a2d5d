"""Workflow discovery and parsing utilities."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from gha.core.schemas import InputSpec, RawWorkflowInput, WorkflowDefinition
from gha.exceptions import WorkflowParseError

logger = logging.getLogger(__name__)

WORKFLOW_EXTENSIONS = (".yml", ".yaml")


def discover_workflow_files(workflows_dir: Path) -> list[Path]:
    """List workflow files directly inside workflows_dir, sorted by name.

    A missing or unreadable directory yields no files.
    """
    if not workflows_dir.is_dir():
        return []

    try:
        entries = list(workflows_dir.iterdir())
    except OSError as e:
        logger.warning("Cannot read %s: %s", workflows_dir, e)
        return []

    return sorted(
        (p for p in entries if p.is_file() and p.suffix in WORKFLOW_EXTENSIONS),
        key=lambda p: p.name,
    )


def default_workflow_from_dir(workflows_dir: Path) -> str | None:
    """Return the workflow file name if workflows_dir holds exactly one."""
    files = discover_workflow_files(workflows_dir)
    if len(files) == 1:
        return files[0].name
    if len(files) > 1:
        logger.warning(
            "Multiple workflows found in %s: %s",
            workflows_dir,
            ", ".join(p.name for p in files),
        )
    return None


def normalize_input(name: str, raw: RawWorkflowInput) -> InputSpec:
    """Convert a raw input declaration into an InputSpec."""
    return InputSpec(
        name=name,
        description=raw.description,
        required_effective=raw.required and raw.default is None,
        default=raw.default,
        ui_type=raw.ui_type,
        options=tuple(raw.options or ()),
    )


def _triggers(document: dict[Any, Any], path: Path) -> dict[str, Any]:
    """Return the `on:` section as a mapping of event name to config."""
    # YAML 1.1 reads a bare `on` key as boolean True
    on = document.get("on", document.get(True))
    if on is None:
        return {}
    if isinstance(on, str):
        return {on: None}
    if isinstance(on, list):
        if not all(isinstance(event, str) for event in on):
            raise WorkflowParseError(str(path), "`on` list must contain event names")
        return {event: None for event in on}
    if isinstance(on, dict):
        return on
    raise WorkflowParseError(str(path), f"unsupported `on` value: {on!r}")


def _ordered_inputs(dispatch: Any, path: Path) -> list[tuple[str, RawWorkflowInput]]:
    """Read workflow_dispatch.inputs as (name, declaration) pairs in file order."""
    if dispatch is None:
        return []
    if not isinstance(dispatch, dict):
        raise WorkflowParseError(str(path), "workflow_dispatch must be a mapping")

    inputs = dispatch.get("inputs")
    if inputs is None:
        return []
    if not isinstance(inputs, dict):
        raise WorkflowParseError(str(path), "workflow_dispatch.inputs must be a mapping")

    pairs = []
    for name, declaration in inputs.items():
        if declaration is not None and not isinstance(declaration, dict):
            raise WorkflowParseError(str(path), f"input '{name}' must be a mapping")
        try:
            raw = RawWorkflowInput.model_validate(declaration or {})
        except ValidationError as e:
            raise WorkflowParseError(str(path), f"input '{name}': {e}") from e
        pairs.append((str(name), raw))
    return pairs


def _repository_dispatch_types(config: Any) -> list[str]:
    if isinstance(config, dict):
        types = config.get("types") or []
        if isinstance(types, str):
            return [types]
        return [str(t) for t in types]
    return []


def parse_workflow(path: Path) -> WorkflowDefinition | None:
    """Parse one workflow file.

    Returns:
        The workflow definition, or None if it has no workflow_dispatch trigger

    Raises:
        WorkflowParseError: If the file is not valid YAML or not a workflow
    """
    try:
        document = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise WorkflowParseError(str(path), str(e)) from e
    except yaml.YAMLError as e:
        raise WorkflowParseError(str(path), str(e)) from e

    if document is None:
        logger.debug("Skipping empty workflow file %s", path)
        return None
    if not isinstance(document, dict):
        raise WorkflowParseError(str(path), "top level must be a mapping")

    triggers = _triggers(document, path)

    repository_types: list[str] = []
    if "repository_dispatch" in triggers:
        repository_types = _repository_dispatch_types(triggers["repository_dispatch"])
        logger.warning(
            "Ignoring repository_dispatch workflow: %s with types: %s",
            path,
            ",".join(repository_types),
        )

    if "workflow_dispatch" not in triggers:
        return None

    inputs = tuple(
        normalize_input(name, raw)
        for name, raw in _ordered_inputs(triggers["workflow_dispatch"], path)
    )

    file_identifier = path.name
    name = document.get("name")
    return WorkflowDefinition(
        file_identifier=file_identifier,
        display_name=str(name) if name is not None else file_identifier,
        inputs=inputs,
        repository_dispatch_types=tuple(repository_types),
    )


def load_workflows(workflows_dir: Path) -> list[WorkflowDefinition]:
    """Discover and parse every dispatchable workflow in workflows_dir."""
    workflows = []
    for path in discover_workflow_files(workflows_dir):
        workflow = parse_workflow(path)
        if workflow is not None:
            workflows.append(workflow)
    logger.info("Found %d dispatchable workflows in %s", len(workflows), workflows_dir)
    return workflows
