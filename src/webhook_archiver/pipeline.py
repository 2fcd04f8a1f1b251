# File: src/webhook_archiver/pipeline.py
from __future__ import annotations

import contextlib
import os
import threading
from typing import Any, Dict, Iterator, List, Optional

from pydantic import ValidationError

from .errors import PublishError
from .models.results import FtpCredentials, PipelineReport, PublishResult, WebhookPayload
from .settings import Settings
from .tools.build_archive import build_archive
from .tools.extract_changes import extract_added_files, group_by_directory
from .tools.publish_ftp import publish_archive, remote_path_for
from .tools.sync_repo import sync_repository
from .utils.logging import get_logger

_REPO_LOCKS: Dict[str, threading.Lock] = {}
_REPO_LOCKS_GUARD = threading.Lock()


def _repo_lock(repo_path: str) -> threading.Lock:
    key = os.path.abspath(repo_path)
    with _REPO_LOCKS_GUARD:
        lock = _REPO_LOCKS.get(key)
        if lock is None:
            lock = _REPO_LOCKS[key] = threading.Lock()
        return lock


class WebhookPipeline:
    """
    sync -> extract -> group -> archive -> (optional) publish, all in the calling thread.

    Sync and publish failures are logged and recorded in the report; archive
    I/O failures propagate as ArchiveError.
    """

    def __init__(self, settings: Settings, logger: Any = None):
        self.settings = settings
        self.log = logger or get_logger("webhook_archiver.pipeline")
        self.credentials = self._credentials()

    @contextlib.contextmanager
    def _exclusive(self) -> Iterator[None]:
        if not self.settings.serialize_per_repo:
            yield
            return
        with _repo_lock(self.settings.repo_path):
            yield

    def _credentials(self) -> Optional[FtpCredentials]:
        s = self.settings
        if not s.publish_enabled:
            return None
        try:
            return FtpCredentials(
                host=s.ftp_host,
                port=s.ftp_port,
                username=s.ftp_username,
                password=s.ftp_password,
                remote_dir=s.ftp_remote_dir,
                timeout=s.ftp_timeout_seconds,
            )
        except ValidationError as e:
            self.log.warning("Invalid FTP settings, publishing disabled", host=s.ftp_host, errors=str(e))
            return None

    def run(self, payload: WebhookPayload) -> PipelineReport:
        s = self.settings
        with self._exclusive():
            sync = sync_repository(
                s.repo_path,
                git_binary=s.git_binary,
                timeout=s.git_timeout_seconds,
                logger=self.log,
            )
            changes = extract_added_files(payload)
            groups = group_by_directory(changes, s.repo_path)
            self.log.info("Grouped added files", files=len(changes), directories=len(groups))

            jobs = [
                build_archive(
                    directory_key,
                    files,
                    s.repo_path,
                    output_dir=s.output_dir,
                    ext=s.archive_ext,
                    logger=self.log,
                )
                for directory_key, files in groups.items()
            ]

        published: List[PublishResult] = []
        credentials = self.credentials
        if credentials is not None:
            for job in jobs:
                remote_path = remote_path_for(job.directory_key, credentials.remote_dir, s.archive_ext)
                try:
                    published.append(publish_archive(job.archive_path, remote_path, credentials, logger=self.log))
                except PublishError as e:
                    self.log.warning("Failed to upload ZIP file to FTP server", error=e.message, **e.data)
                    published.append(
                        PublishResult(
                            archive_path=job.archive_path,
                            remote_path=remote_path,
                            ok=False,
                            error=e.message,
                        )
                    )

        return PipelineReport(sync=sync, changes=changes, jobs=jobs, published=published)
