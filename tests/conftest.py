"""
Pytest fixtures shared by the webhook archiver tests.

- a throwaway working copy under tmp_path
- a fake `git` that records invocations instead of spawning processes
- Settings pointed at those directories
"""

import sys
from pathlib import Path

import pytest

BASE_DIR = Path(__file__).parent.parent
sys.path.insert(0, str(BASE_DIR / "src"))

from webhook_archiver.settings import Settings  # noqa: E402

from git import Git  # noqa: E402


class FakeGit:
    """Stands in for Git.execute; returns (status, stdout, stderr)."""

    def __init__(self):
        self.calls = []
        self.kwargs = []
        self.result = (0, "Already up to date.", "")
        self.error = None

    def execute(self, _git, command, **kwargs):
        self.calls.append(list(command))
        self.kwargs.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def fake_git(monkeypatch):
    fake = FakeGit()
    monkeypatch.setattr(Git, "execute", lambda self, command, **kw: fake.execute(self, command, **kw))
    return fake


@pytest.fixture
def repo_root(tmp_path):
    root = tmp_path / "repo"
    (root / "docs").mkdir(parents=True)
    (root / "docs" / "readme.md").write_text("# readme\n", encoding="utf-8")
    (root / "docs" / "intro.md").write_text("intro\n", encoding="utf-8")
    return root


@pytest.fixture
def out_dir(tmp_path):
    return tmp_path / "out"


@pytest.fixture
def settings(repo_root, out_dir):
    return Settings(repo_path=str(repo_root), output_dir=str(out_dir))
