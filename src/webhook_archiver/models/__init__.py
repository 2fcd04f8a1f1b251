from .results import (
    ArchiveJob,
    ChangeSet,
    DirectoryGroups,
    FtpCredentials,
    PipelineReport,
    PublishResult,
    SyncResult,
    SyncStatus,
    WebhookPayload,
)

__all__ = [
    "ArchiveJob",
    "ChangeSet",
    "DirectoryGroups",
    "FtpCredentials",
    "PipelineReport",
    "PublishResult",
    "SyncResult",
    "SyncStatus",
    "WebhookPayload",
]
