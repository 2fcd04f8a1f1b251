# File: src/webhook_archiver/models/results.py
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

# Raw push-event document; any JSON value is accepted.
WebhookPayload = Any
ChangeSet = List[str]
DirectoryGroups = Dict[str, List[str]]


class SyncStatus(str, Enum):
    skipped = "skipped"
    succeeded = "succeeded"
    failed = "failed"


class SyncResult(BaseModel):
    """
    Outcome of `git -C <repo_path> pull`:
      - output: stdout on success, stderr (or the launch error) on failure
      - returncode: None when no process was spawned
    """
    status: SyncStatus
    repo_path: str
    output: str = ""
    returncode: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.status == SyncStatus.succeeded


class ArchiveJob(BaseModel):
    directory_key: str
    archive_path: str = Field(min_length=1)
    members: List[str] = Field(default_factory=list, description="Member names actually written")


class FtpCredentials(BaseModel):
    host: str = Field(min_length=1)
    port: int = Field(default=21, ge=1, le=65535)
    username: str = "anonymous"
    password: str = ""
    remote_dir: str = "/remote/path"
    timeout: float = Field(default=30.0, gt=0)


class PublishResult(BaseModel):
    archive_path: str
    remote_path: str
    ok: bool
    error: Optional[str] = None


class PipelineReport(BaseModel):
    sync: SyncResult
    changes: ChangeSet = Field(default_factory=list)
    jobs: List[ArchiveJob] = Field(default_factory=list)
    published: List[PublishResult] = Field(default_factory=list)
