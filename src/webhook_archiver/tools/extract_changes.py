# File: src/webhook_archiver/tools/extract_changes.py
from __future__ import annotations

import posixpath

from ..models.results import ChangeSet, DirectoryGroups, WebhookPayload


def extract_added_files(payload: WebhookPayload) -> ChangeSet:
    """
    Collect `commits[*].added[*]` strings in payload order.
    Any other shape (missing keys, non-lists, non-strings) contributes nothing.
    """
    added_files: ChangeSet = []
    if not isinstance(payload, dict):
        return added_files

    commits = payload.get("commits")
    if not isinstance(commits, list):
        return added_files

    for commit in commits:
        if not isinstance(commit, dict):
            continue
        added = commit.get("added")
        if not isinstance(added, list):
            continue
        added_files.extend(p for p in added if isinstance(p, str))

    return added_files


def _join_root(repo_root: str, rel: str) -> str:
    return f"{repo_root.rstrip('/')}/{rel}" if repo_root else rel


def group_by_directory(changes: ChangeSet, repo_root: str) -> DirectoryGroups:
    """
    Group `repo_root/<path>` entries under each path's parent directory.
    Top-level files land under the empty key "".
    """
    groups: DirectoryGroups = {}
    for rel in changes:
        key = posixpath.dirname(rel)
        groups.setdefault(key, []).append(_join_root(repo_root, rel))
    return groups
