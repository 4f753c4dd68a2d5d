"""GitHub REST client for the workflow dispatch endpoint."""

import logging

import httpx

from gha.config import DEFAULT_API_URL
from gha.core.schemas import DispatchPayload
from gha.exceptions import DispatchHTTPError, DispatchTransportError

logger = logging.getLogger(__name__)

GITHUB_API_VERSION = "2022-11-28"
ACCEPT_HEADER = "application/vnd.github+json"


def dispatch_url(repo: str, workflow: str, api_url: str = DEFAULT_API_URL) -> str:
    """URL of POST /repos/{owner}/{repo}/actions/workflows/{workflow}/dispatches."""
    return f"{api_url.rstrip('/')}/repos/{repo}/actions/workflows/{workflow}/dispatches"


def dispatch_headers(token: str) -> dict[str, str]:
    return {
        "Accept": ACCEPT_HEADER,
        "Authorization": f"Bearer {token}",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }


class GitHubClient:
    """Sends workflow_dispatch events.

    A single request is made per dispatch; failures are not retried.
    """

    def __init__(
        self,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._token = token
        self._api_url = api_url
        self._timeout = timeout
        self._transport = transport

    def dispatch_workflow(self, repo: str, workflow: str, payload: DispatchPayload) -> None:
        """Trigger a workflow run.

        Raises:
            DispatchHTTPError: If GitHub answers with a non-2xx status
            DispatchTransportError: If the request could not be completed
        """
        url = dispatch_url(repo, workflow, self._api_url)
        logger.info("POST %s (ref=%s)", url, payload.ref)

        try:
            with httpx.Client(timeout=self._timeout, transport=self._transport) as client:
                response = client.post(
                    url,
                    headers=dispatch_headers(self._token),
                    json=payload.model_dump(),
                )
        except httpx.RequestError as e:
            raise DispatchTransportError(url, e) from e

        if not response.is_success:
            raise DispatchHTTPError(response.status_code, response.text)

        logger.debug("Dispatch accepted with HTTP %d", response.status_code)
