# File: src/webhook_archiver/tools/sync_repo.py
from __future__ import annotations

import os
from typing import Any, Optional

from git import Git  # GitPython
from git.exc import GitCommandNotFound

from ..models.results import SyncResult, SyncStatus
from ..utils.logging import get_logger


def sync_repository(
    repo_path: str,
    *,
    git_binary: str = "git",
    timeout: Optional[float] = None,
    logger: Any = None,
) -> SyncResult:
    """
    Pull the latest changes into the working copy at `repo_path`.

    Never raises: a missing path is reported as skipped, a nonzero exit or an
    unlaunchable git binary as failed. The working copy is left as git left it.
    """
    log = logger or get_logger(__name__)

    if not os.path.exists(repo_path):
        log.info("Repository path does not exist", repo_path=repo_path)
        return SyncResult(status=SyncStatus.skipped, repo_path=repo_path)

    log.info("Updating repository", repo_path=repo_path)
    command = [git_binary, "-C", repo_path, "pull"]
    try:
        status, stdout, stderr = Git().execute(
            command,
            with_extended_output=True,
            with_exceptions=False,
            kill_after_timeout=timeout,
        )
    except GitCommandNotFound as e:
        log.error("Failed to execute git pull", repo_path=repo_path, error=str(e))
        return SyncResult(status=SyncStatus.failed, repo_path=repo_path, output=str(e))

    if status == 0:
        log.info("Repository updated successfully", repo_path=repo_path, output=stdout)
        return SyncResult(
            status=SyncStatus.succeeded,
            repo_path=repo_path,
            output=stdout,
            returncode=status,
        )

    log.warning("Failed to update repository", repo_path=repo_path, returncode=status, output=stderr)
    return SyncResult(
        status=SyncStatus.failed,
        repo_path=repo_path,
        output=stderr,
        returncode=status,
    )
