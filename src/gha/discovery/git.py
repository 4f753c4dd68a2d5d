"""Default repository and ref detection from the local git checkout."""

import logging
import subprocess
from pathlib import Path
from typing import Protocol, runtime_checkable

from gha.core.schemas import RepoInfo

logger = logging.getLogger(__name__)

GITHUB_HOST = "github.com"


@runtime_checkable
class DefaultResolver(Protocol):
    """Supplies defaults for values the user did not pass explicitly.

    Implementations must not raise: an undetectable value is None.
    """

    def lookup_default_repo(self) -> RepoInfo | None:
        """Return the owner/repo the checkout belongs to."""
        ...

    def lookup_default_ref(self) -> str | None:
        """Return the ref to dispatch against."""
        ...


def parse_github_remote(url: str) -> RepoInfo | None:
    """Extract owner/repo from a GitHub remote URL.

    Handles:
    - https://github.com/owner/repo.git
    - git@github.com:owner/repo.git
    - ssh://git@github.com/owner/repo
    """
    url = url.strip()
    pos = url.find(GITHUB_HOST)
    if pos < 0:
        return None

    path = url[pos + len(GITHUB_HOST) :]
    if path[:1] in (":", "/"):
        path = path[1:]
    path = path.rstrip("/")
    if path.endswith(".git"):
        path = path[:-4]

    owner, sep, repo = path.partition("/")
    if not sep or not owner or not repo:
        return None
    return RepoInfo(owner=owner, repo=repo)


class GitDefaultResolver:
    """Resolves defaults by running git in a working directory."""

    def __init__(self, cwd: Path | None = None) -> None:
        self._cwd = cwd

    def _git(self, *args: str) -> str | None:
        """Run a git command, returning stripped stdout or None on failure."""
        try:
            result = subprocess.run(
                ["git", *args],
                capture_output=True,
                text=True,
                cwd=self._cwd or Path.cwd(),
                timeout=5,
            )
        except (subprocess.TimeoutExpired, FileNotFoundError) as e:
            logger.debug("git %s failed: %s", " ".join(args), e)
            return None
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def lookup_default_repo(self) -> RepoInfo | None:
        url = self._git("config", "--get", "remote.origin.url")
        if url is None:
            return None
        repo = parse_github_remote(url)
        if repo is None:
            logger.debug("remote.origin.url is not a GitHub remote: %s", url)
        return repo

    def lookup_default_ref(self) -> str | None:
        branch = self._git("symbolic-ref", "--short", "HEAD")
        if branch:
            return branch
        # Detached HEAD
        return self._git("rev-parse", "HEAD")
