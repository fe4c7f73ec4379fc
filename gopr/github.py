from __future__ import annotations
from functools import partial
import logging
from typing import TypeVar
import ghreq
from pydantic import ValidationError
import requests
from .config import DEFAULT_API_URL
from .errors import MalformedResponseError, RequestError
from .models import PullRequest, PullRequestIssue, Record, SearchResults
from .util import gather

log = logging.getLogger(__name__)

R = TypeVar("R", bound=Record)


class Client(ghreq.Client):
    """
    Unauthenticated GitHub API client.  Every request carries the configured
    ``User-Agent`` header, and failed requests are not retried.
    """

    def __init__(self, user_agent: str, api_url: str = DEFAULT_API_URL) -> None:
        super().__init__(
            api_url=api_url,
            user_agent=user_agent,
            retry_config=ghreq.RetryConfig(retries=0),
        )

    def get_record(self, path: str, model: type[R], params: dict | None = None) -> R:
        """
        Perform a ``GET`` request for ``path`` (a path relative to the API URL
        or an absolute URL) and parse the response body as ``model``

        :raises RequestError: if the request fails
        :raises MalformedResponseError: if the body does not have the shape of
            ``model``
        """
        try:
            r = self.get(path, params=params, raw=True)
        except requests.RequestException as e:
            raise RequestError(str(e)) from e
        try:
            return model.model_validate_json(r.text)
        except ValidationError as e:
            raise MalformedResponseError(r.url, r.text, e) from e

    def get_pull_request_issues(self, username: str) -> list[PullRequestIssue]:
        """Return the issue records for all open PRs authored by ``username``"""
        query = f"state:open author:{username} type:pr"
        log.debug("Searching for pull requests: %s", query)
        results = self.get_record("/search/issues", SearchResults, params={"q": query})
        log.debug("Search returned %d pull request(s)", len(results.items))
        if results.incomplete_results:
            log.warning("GitHub reported incomplete search results")
        return results.items

    def get_pull_request(self, issue: PullRequestIssue) -> PullRequest:
        pr = self.get_record(issue.pull_request.url, PullRequest)
        log.debug("Fetched pull request %s", pr)
        return pr

    def get_pull_requests(self, username: str) -> list[PullRequest]:
        """
        Return the full records for all open PRs authored by ``username``, in
        search-result order.  The individual records are fetched concurrently;
        if any fetch fails, the whole lookup fails.
        """
        issues = self.get_pull_request_issues(username)
        return gather(partial(self.get_pull_request, issue) for issue in issues)
