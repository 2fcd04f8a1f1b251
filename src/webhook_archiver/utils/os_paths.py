"""OS and path helpers for archive output."""

import posixpath
from pathlib import Path, PurePosixPath
from typing import Optional

from ..errors import ArchiveError


def get_current_working_directory() -> str:
    """Get the current working directory safely.

    Returns:
        Current working directory path

    Raises:
        ArchiveError: If the directory cannot be determined
    """
    try:
        return str(Path.cwd().resolve())
    except OSError as e:
        raise ArchiveError(f"Cannot determine current working directory: {e}")


def resolve_output_dir(output_dir: Optional[str]) -> str:
    """Return the directory archives are written to, creating it if needed."""
    if not output_dir:
        return get_current_working_directory()

    path = Path(output_dir).expanduser()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArchiveError(
            f"Failed to create output directory {output_dir}: {e}",
            data={"output_dir": output_dir},
        )
    return str(path.resolve())


def is_within_root(path: str, repo_root: str) -> bool:
    """True if `path`, with symlinks and `..` resolved, lies under `repo_root`."""
    base = Path(repo_root).resolve()
    try:
        Path(path).resolve().relative_to(base)
    except ValueError:
        return False
    return True


def strip_root(path: str, repo_root: str) -> str:
    """Path of `path` relative to `repo_root`, POSIX style.

    Raises:
        ArchiveError: If the normalized path is not under the root
    """
    try:
        rel = PurePosixPath(posixpath.normpath(path)).relative_to(posixpath.normpath(repo_root))
    except ValueError:
        raise ArchiveError(
            f"{path} is outside repository root {repo_root}",
            data={"member": path, "repo_root": repo_root},
        )
    return rel.as_posix()
