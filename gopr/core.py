from __future__ import annotations
from functools import partial
import os
from .git import get_current_branch
from .github import Client
from .models import PullRequest
from .reconcile import find_pull_request
from .util import gather


def find_branch_pull_request(
    client: Client, username: str, dirpath: str | os.PathLike[str] | None = None
) -> tuple[str, PullRequest | None]:
    """
    Look up the current branch and the open pull requests by ``username``
    concurrently, and return the branch name along with the first pull request
    whose head is that branch (or `None`)
    """
    branch, prs = gather(
        [
            partial(get_current_branch, dirpath),
            partial(client.get_pull_requests, username),
        ]
    )
    return branch, find_pull_request(branch, prs)
