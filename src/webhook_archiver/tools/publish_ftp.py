# File: src/webhook_archiver/tools/publish_ftp.py
from __future__ import annotations

from ftplib import FTP, all_errors
from typing import Any

from ..errors import PublishError
from ..models.results import FtpCredentials, PublishResult
from ..utils.logging import get_logger
from .build_archive import archive_name_for


def remote_path_for(directory_key: str, remote_dir: str, ext: str = "zip") -> str:
    """
    Deterministic upload target, e.g. ('docs/api', '/remote/path') -> '/remote/path/docs_api.zip'.
    """
    return f"{remote_dir.rstrip('/')}/{archive_name_for(directory_key, ext)}"


def publish_archive(
    archive_path: str,
    remote_path: str,
    credentials: FtpCredentials,
    *,
    logger: Any = None,
) -> PublishResult:
    """
    Upload one archive: connect, login, binary mode, STOR, quit.
    Raises PublishError on any FTP or local I/O failure; there is no retry.
    """
    log = logger or get_logger(__name__)
    ftp = FTP()
    try:
        log.info(
            "ftp.upload.begin",
            host=credentials.host,
            port=credentials.port,
            archive_path=archive_path,
            remote_path=remote_path,
        )
        ftp.connect(credentials.host, credentials.port, timeout=credentials.timeout)
        ftp.login(credentials.username, credentials.password)
        ftp.voidcmd("TYPE I")
        with open(archive_path, "rb") as f:
            ftp.storbinary(f"STOR {remote_path}", f)
        ftp.quit()
    except all_errors as e:
        ftp.close()
        raise PublishError(
            f"Failed to upload {archive_path} to {credentials.host}:{remote_path}: {e}",
            data={"archive_path": archive_path, "remote_path": remote_path},
        ) from e

    log.info("ftp.upload.ok", remote_path=remote_path)
    return PublishResult(archive_path=archive_path, remote_path=remote_path, ok=True)
