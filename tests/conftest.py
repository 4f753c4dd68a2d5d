"""Shared pytest fixtures for gha tests.

Provides workflow directories, a stub default resolver and a clean
settings environment.
"""

from collections.abc import Callable, Iterator
from pathlib import Path
from textwrap import dedent

import pytest

from gha.config import clear_settings_cache
from gha.core.schemas import RepoInfo


class StubResolver:
    """DefaultResolver returning fixed values."""

    def __init__(self, repo: RepoInfo | None = None, ref: str | None = None) -> None:
        self.repo = repo
        self.ref = ref

    def lookup_default_repo(self) -> RepoInfo | None:
        return self.repo

    def lookup_default_ref(self) -> str | None:
        return self.ref


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Iterator[None]:
    """Isolate tests from the caller's environment, .env files and cwd."""
    monkeypatch.chdir(tmp_path)
    for name in ("GITHUB_TOKEN", "GH_TOKEN", "GHA_API_URL", "GHA_HTTP_TIMEOUT", "GHA_WORKFLOWS_DIR"):
        monkeypatch.delenv(name, raising=False)
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
def workflows_dir(tmp_path: Path) -> Path:
    """Create an empty .github/workflows directory.

    Returns:
        Path to the workflows directory
    """
    path = tmp_path / ".github" / "workflows"
    path.mkdir(parents=True)
    return path


@pytest.fixture
def write_workflow(workflows_dir: Path) -> Callable[[str, str], Path]:
    """Fixture returning a helper that writes a dedented workflow file."""

    def _write(filename: str, content: str) -> Path:
        path = workflows_dir / filename
        path.write_text(dedent(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def resolver() -> StubResolver:
    """Resolver with a known repo and ref."""
    return StubResolver(RepoInfo(owner="acme", repo="rockets"), "main")


@pytest.fixture
def deploy_workflow(write_workflow: Callable[[str, str], Path]) -> Path:
    """Write deploy.yml with a leading choice input and a required input."""
    return write_workflow(
        "deploy.yml",
        """\
name: "Deploy"
on:
  workflow_dispatch:
    inputs:
      environment:
        type: choice
        options: [staging, production]
        required: true
      version:
        required: true
jobs: {}
""",
    )


@pytest.fixture
def null_resolver() -> StubResolver:
    """Resolver that detects nothing, like a directory outside git."""
    return StubResolver()
