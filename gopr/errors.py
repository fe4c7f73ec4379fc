from __future__ import annotations
import subprocess
from pydantic import ValidationError


class GoPRError(Exception):
    """Base class for errors that abort a run"""


class SubprocessError(GoPRError, subprocess.SubprocessError):
    """Raised when Git could not report the current branch"""


class MalformedResponseError(GoPRError):
    """Raised when a GitHub response body does not have the expected shape"""

    def __init__(self, url: str, body: str, error: ValidationError) -> None:
        self.url = url
        self.body = body
        self.error = error
        super().__init__(url, body, error)

    def __str__(self) -> str:
        return f"Malformed response from {self.url}:\n{self.error}"


class RequestError(GoPRError):
    """Raised when an HTTP request to GitHub fails"""


class LaunchError(GoPRError):
    """Raised when a web browser could not be opened"""

    def __init__(self, url: str, reason: str) -> None:
        self.url = url
        self.reason = reason
        super().__init__(url, reason)

    def __str__(self) -> str:
        return f"Could not open {self.url} in a web browser: {self.reason}"


class ConfigError(GoPRError):
    """Raised when the environment configuration is invalid"""
