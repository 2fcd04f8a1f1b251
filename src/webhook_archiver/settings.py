# src/webhook_archiver/settings.py
from __future__ import annotations
import os
from dataclasses import dataclass

def _truthy(v: str | None) -> bool:
    return str(v or "").strip().lower() in {"1", "true", "yes", "y", "on"}

def _float_env(name: str, default: float | None) -> float | None:
    raw = (os.getenv(name) or "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except Exception:
        return default

def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, str(default)))
    except Exception:
        return default

@dataclass
class Settings:
    # HTTP listener
    host: str = "0.0.0.0"
    port: int = 10080

    # Working copy + archive output
    repo_path: str = "./test/webhook-test"
    output_dir: str | None = None             # None -> current working directory at request time
    archive_ext: str = "zip"

    # git invocation
    git_binary: str = "git"
    git_timeout_seconds: float | None = None  # None -> wait for the pull to exit
    serialize_per_repo: bool = False

    # FTP publishing (off unless FTP_ENABLED and FTP_HOST are both set)
    ftp_enabled: bool = False
    ftp_host: str | None = None
    ftp_port: int = 21
    ftp_username: str = "anonymous"
    ftp_password: str = ""
    ftp_remote_dir: str = "/remote/path"
    ftp_timeout_seconds: float = 30.0

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    @property
    def publish_enabled(self) -> bool:
        return self.ftp_enabled and bool(self.ftp_host)

    @classmethod
    def from_env(cls) -> "Settings":
        host = os.getenv("WEBHOOK_HOST", "0.0.0.0").strip() or "0.0.0.0"
        port = _int_env("WEBHOOK_PORT", 10080)

        repo_path = os.getenv("WEBHOOK_REPO_PATH", "./test/webhook-test").strip() or "./test/webhook-test"
        output_dir = (os.getenv("WEBHOOK_OUTPUT_DIR") or "").strip() or None
        archive_ext = (os.getenv("WEBHOOK_ARCHIVE_EXT") or "zip").strip().lstrip(".") or "zip"

        git_binary = (os.getenv("WEBHOOK_GIT_BINARY") or "git").strip() or "git"
        git_timeout = _float_env("WEBHOOK_GIT_TIMEOUT", None)
        serialize = _truthy(os.getenv("WEBHOOK_SERIALIZE"))

        # FTP (accept FTP_USER as an alias for FTP_USERNAME)
        ftp_host = (os.getenv("FTP_HOST") or "").strip() or None
        ftp_username = (os.getenv("FTP_USERNAME") or os.getenv("FTP_USER") or "anonymous").strip()
        ftp_password = os.getenv("FTP_PASSWORD") or ""
        ftp_remote_dir = (os.getenv("FTP_REMOTE_DIR") or "/remote/path").strip() or "/remote/path"

        return cls(
            host=host,
            port=port,
            repo_path=repo_path,
            output_dir=output_dir,
            archive_ext=archive_ext,
            git_binary=git_binary,
            git_timeout_seconds=git_timeout,
            serialize_per_repo=serialize,
            ftp_enabled=_truthy(os.getenv("FTP_ENABLED")),
            ftp_host=ftp_host,
            ftp_port=_int_env("FTP_PORT", 21),
            ftp_username=ftp_username,
            ftp_password=ftp_password,
            ftp_remote_dir=ftp_remote_dir,
            ftp_timeout_seconds=_float_env("FTP_TIMEOUT_SECONDS", 30.0) or 30.0,
            log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
            log_json=_truthy(os.getenv("LOG_JSON", "true")),
        )
