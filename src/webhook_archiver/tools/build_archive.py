# File: src/webhook_archiver/tools/build_archive.py
from __future__ import annotations

import os
import zipfile
from typing import Any, List, Optional

from ..errors import ArchiveError
from ..models.results import ArchiveJob
from ..utils.logging import get_logger
from ..utils.os_paths import is_within_root, resolve_output_dir, strip_root


def archive_name_for(directory_key: str, ext: str = "zip") -> str:
    """'a/b' -> 'a_b.zip'; the root key '' -> '.zip'."""
    name = directory_key.replace("/", "_")
    if os.sep != "/":
        name = name.replace(os.sep, "_")
    return f"{name}.{ext}"


def build_archive(
    directory_key: str,
    member_paths: List[str],
    repo_root: str,
    *,
    output_dir: Optional[str] = None,
    ext: str = "zip",
    logger: Any = None,
) -> ArchiveJob:
    """
    Write one stored (uncompressed) ZIP for a directory group.

    Existing files are read whole and added under their repo-relative name;
    missing files are skipped. Any I/O error raises ArchiveError and leaves
    whatever was written on disk.
    """
    log = logger or get_logger(__name__)
    archive_path = os.path.join(resolve_output_dir(output_dir), archive_name_for(directory_key, ext))
    members: List[str] = []

    try:
        zf = zipfile.ZipFile(archive_path, mode="w", compression=zipfile.ZIP_STORED)
    except OSError as e:
        raise ArchiveError(
            f"Could not create ZIP file {archive_path}: {e}",
            data={"archive_path": archive_path},
        ) from e

    try:
        for file_path in member_paths:
            if not os.path.exists(file_path):
                log.debug("Skipping missing file", path=file_path, archive_path=archive_path)
                continue

            if not is_within_root(file_path, repo_root):
                log.warning("Skipping file outside repository root", path=file_path, archive_path=archive_path)
                continue

            name_in_zip = strip_root(file_path, repo_root)
            if name_in_zip in members:
                # same path added by more than one commit
                continue
            try:
                with open(file_path, "rb") as f:
                    data = f.read()
                zf.writestr(name_in_zip, data)
            except OSError as e:
                raise ArchiveError(
                    f"Could not add {file_path} to ZIP file {archive_path}: {e}",
                    data={"archive_path": archive_path, "member": file_path},
                ) from e
            members.append(name_in_zip)
    finally:
        try:
            zf.close()
        except OSError as e:
            raise ArchiveError(
                f"Could not finish ZIP file {archive_path}: {e}",
                data={"archive_path": archive_path},
            ) from e

    log.info("Created ZIP file", archive_path=archive_path, directory=directory_key, members=len(members))
    return ArchiveJob(directory_key=directory_key, archive_path=archive_path, members=members)
