"""Pydantic schemas for workflow definitions and dispatch targets."""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

# Joins payload entries inside a $(call ...) argument. GNU make splits call
# arguments on literal commas before expansion, so the fragment uses a
# reference to the `comma` variable defined by the generated Makefile.
FRAGMENT_DELIMITER = "$(comma)"

CHOICE_TYPE = "choice"


def _scalar_to_str(value: Any) -> Any:
    """Convert YAML scalars to the string form GitHub sends them as."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class DispatchMode(str, Enum):
    """How `gha dispatch` delivers the request."""

    CURL = "curl"
    MAKE = "make"
    EXECUTE = "execute"


class RawWorkflowInput(BaseModel):
    """One entry of `on.workflow_dispatch.inputs` as written in YAML."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    description: str | None = None
    required: bool = False
    default: str | None = None
    ui_type: str | None = Field(default=None, alias="type")
    options: list[str] | None = None

    @field_validator("required", mode="before")
    @classmethod
    def _null_required(cls, value: Any) -> Any:
        return False if value is None else value

    @field_validator("default", "description", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        return _scalar_to_str(value)

    @field_validator("options", mode="before")
    @classmethod
    def _stringify_options(cls, value: Any) -> Any:
        if isinstance(value, list):
            return [_scalar_to_str(item) for item in value]
        return value


class InputSpec(BaseModel):
    """Normalized workflow input.

    `required_effective` is only true when the input is declared required
    and has no default: a default satisfies the API call on its own.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    description: str | None = None
    required_effective: bool = False
    default: str | None = None
    ui_type: str | None = None
    options: tuple[str, ...] = ()

    @property
    def variable_name(self) -> str:
        """Make variable that supplies this input at invocation time."""
        return self.name.upper()

    @property
    def is_choice(self) -> bool:
        return self.ui_type == CHOICE_TYPE and bool(self.options)


class WorkflowDefinition(BaseModel):
    """A parsed workflow file that declares `workflow_dispatch`.

    Frozen because a definition is a snapshot of one file for one run.
    `inputs` keeps declaration order: only the first input may expand.
    """

    model_config = ConfigDict(frozen=True)

    file_identifier: str
    display_name: str
    inputs: tuple[InputSpec, ...] = ()
    repository_dispatch_types: tuple[str, ...] = ()

    @property
    def base_target(self) -> str:
        """File identifier without its .yml/.yaml extension."""
        name = self.file_identifier
        for suffix in (".yml", ".yaml"):
            if name.endswith(suffix):
                return name[: -len(suffix)]
        return name


class DispatchTarget(BaseModel):
    """One invokable unit: a Makefile target or a single API call."""

    model_config = ConfigDict(frozen=True)

    target_name: str
    fixed_overrides: dict[str, str] = Field(default_factory=dict)
    required_variable_names: tuple[str, ...] = ()
    payload_entries: tuple[str, ...] = ()

    @property
    def payload_fragment(self) -> str:
        """Entries joined for use as the inputs argument of the dispatch macro."""
        return FRAGMENT_DELIMITER.join(self.payload_entries)


class DispatchPayload(BaseModel):
    """Body of POST /repos/{owner}/{repo}/actions/workflows/{id}/dispatches."""

    model_config = ConfigDict(frozen=True)

    ref: str
    inputs: dict[str, str] = Field(default_factory=dict)


class RepoInfo(BaseModel):
    """GitHub repository coordinates."""

    model_config = ConfigDict(frozen=True)

    owner: str
    repo: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.repo}"
