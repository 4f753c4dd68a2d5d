"""Makefile rendering for dispatchable workflows."""

import logging
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from gha.config import DEFAULT_API_URL
from gha.core.schemas import DispatchTarget, InputSpec, WorkflowDefinition
from gha.github import ACCEPT_HEADER, GITHUB_API_VERSION
from gha.render.escape import comment_text, normalize_whitespace, summarize_default
from gha.render.expander import expand_targets
from gha.render.models import MakefileModel, RenderTarget, RenderWorkflow

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"

DEFAULT_REPO_PLACEHOLDER = "<owner>/<repo>"
DEFAULT_REF = "main"


def get_jinja_env() -> Environment:
    """Get Jinja2 environment configured for Makefile templates."""
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(default=False),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def input_comment(spec: InputSpec) -> str:
    """Describe one input for the comment header of a target."""
    line = f"- {spec.variable_name}:{spec.ui_type or 'STRING'}\t "
    line += normalize_whitespace(spec.description or "")
    if spec.required_effective:
        line += " (required)"
    if spec.default is not None:
        line += f" [default: {summarize_default(spec.default)}]"
    return line


def comment_lines(workflow: WorkflowDefinition) -> list[str]:
    lines = [f"{normalize_whitespace(workflow.display_name)} ({workflow.file_identifier})"]
    lines.extend(input_comment(spec) for spec in workflow.inputs)
    return [comment_text(line) for line in lines]


def render_target(workflow: WorkflowDefinition, target: DispatchTarget) -> RenderTarget:
    return RenderTarget(
        target=target.target_name,
        comment_lines=comment_lines(workflow),
        required_vars=list(target.required_variable_names),
        inputs_fragment=target.payload_fragment,
    )


def build_render_model(
    workflows: list[WorkflowDefinition],
    repo: str = DEFAULT_REPO_PLACEHOLDER,
    ref: str = DEFAULT_REF,
    api_url: str = DEFAULT_API_URL,
) -> MakefileModel:
    """Build the template model, expanding every workflow into targets."""
    render_workflows = []
    for workflow in workflows:
        input_names = ", ".join(spec.name for spec in workflow.inputs)
        logger.info("workflow_dispatch: %s(%s)", workflow.file_identifier, input_names)

        targets = expand_targets(workflow)
        render_workflows.append(
            RenderWorkflow(
                file=workflow.file_identifier,
                targets=[render_target(workflow, t) for t in targets],
            )
        )

    return MakefileModel(
        repo=repo,
        ref=ref,
        api_url=api_url.rstrip("/"),
        api_version=GITHUB_API_VERSION,
        accept=ACCEPT_HEADER,
        workflows=render_workflows,
    )


def render_makefile(model: MakefileModel) -> str:
    """Render the Makefile text for a model."""
    env = get_jinja_env()
    template = env.get_template("Makefile.j2")
    return template.render(model=model)  # type: ignore[no-any-return]
