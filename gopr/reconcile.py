from __future__ import annotations
from collections.abc import Iterable
from .models import PullRequest


def find_pull_request(
    branch: str, pull_requests: Iterable[PullRequest]
) -> PullRequest | None:
    """
    Return the first pull request whose head branch is exactly ``branch``, or
    `None` if there is none
    """
    return next((pr for pr in pull_requests if pr.head.ref == branch), None)
