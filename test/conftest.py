from __future__ import annotations
import os
import pytest


@pytest.fixture(autouse=True)
def clean_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    for k in list(os.environ):
        if k.startswith("GO_PR_"):
            monkeypatch.delenv(k)
