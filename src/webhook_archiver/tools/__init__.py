# src/webhook_archiver/tools/__init__.py
from __future__ import annotations

from .build_archive import archive_name_for, build_archive
from .extract_changes import extract_added_files, group_by_directory
from .publish_ftp import publish_archive, remote_path_for
from .sync_repo import sync_repository

__all__ = [
    "archive_name_for",
    "build_archive",
    "extract_added_files",
    "group_by_directory",
    "publish_archive",
    "remote_path_for",
    "sync_repository",
]
