from __future__ import annotations
from dataclasses import dataclass
import json
from typing import Any
from gopr.models import PullRequest

API_URL = "https://api.github.com"


@dataclass
class FakeResponse:
    url: str
    text: str


def pr_url(number: int) -> str:
    return f"{API_URL}/repos/dgp1130/go-pr/pulls/{number}"


def issue_json(number: int) -> dict[str, Any]:
    return {
        "number": number,
        "title": f"PR {number}",
        "html_url": f"https://github.com/dgp1130/go-pr/pull/{number}",
        "pull_request": {"url": pr_url(number)},
    }


def pr_json(number: int, ref: str) -> dict[str, Any]:
    return {
        "number": number,
        "title": f"PR {number}",
        "html_url": f"https://github.com/dgp1130/go-pr/pull/{number}",
        "head": {"ref": ref, "sha": "0123456789abcdef"},
        "state": "open",
    }


def make_pr(number: int, ref: str) -> PullRequest:
    return PullRequest.model_validate(pr_json(number, ref))


class FakeAPI:
    """
    Stand-in for `gopr.github.Client.get` that serves canned bodies keyed by
    path or URL and records every requested path
    """

    def __init__(self, bodies: dict[str, Any]) -> None:
        self.bodies = bodies
        self.requested: list[str] = []

    @classmethod
    def for_branches(cls, *refs: str) -> FakeAPI:
        bodies: dict[str, Any] = {
            "/search/issues": {
                "total_count": len(refs),
                "incomplete_results": False,
                "items": [issue_json(i) for i in range(1, len(refs) + 1)],
            }
        }
        for i, ref in enumerate(refs, start=1):
            bodies[pr_url(i)] = pr_json(i, ref)
        return cls(bodies)

    def __call__(
        self, path: str, params: Any = None, raw: bool = False
    ) -> FakeResponse:
        assert raw
        self.requested.append(path)
        body = self.bodies[path]
        if isinstance(body, BaseException):
            raise body
        if not isinstance(body, str):
            body = json.dumps(body)
        url = path if path.startswith("http") else API_URL + path
        return FakeResponse(url=url, text=body)
