"""Pydantic models passed to the Makefile template."""

from pydantic import BaseModel, Field


class RenderTarget(BaseModel):
    """One Makefile target block."""

    target: str
    comment_lines: list[str] = Field(default_factory=list)
    required_vars: list[str] = Field(default_factory=list)
    inputs_fragment: str = ""


class RenderWorkflow(BaseModel):
    """All targets generated for one workflow file."""

    file: str
    targets: list[RenderTarget] = Field(default_factory=list)


class MakefileModel(BaseModel):
    """Everything the Makefile template needs."""

    repo: str
    ref: str
    api_url: str
    api_version: str
    accept: str
    workflows: list[RenderWorkflow] = Field(default_factory=list)

    @property
    def all_targets(self) -> list[str]:
        return [t.target for wf in self.workflows for t in wf.targets]
