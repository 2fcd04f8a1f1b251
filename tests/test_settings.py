from webhook_archiver.settings import Settings


def test_defaults(monkeypatch):
    for name in (
        "WEBHOOK_HOST", "WEBHOOK_PORT", "WEBHOOK_REPO_PATH", "WEBHOOK_OUTPUT_DIR",
        "WEBHOOK_GIT_TIMEOUT", "FTP_ENABLED", "FTP_HOST", "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    s = Settings.from_env()

    assert (s.host, s.port) == ("0.0.0.0", 10080)
    assert s.repo_path == "./test/webhook-test"
    assert s.output_dir is None
    assert s.archive_ext == "zip"
    assert s.git_timeout_seconds is None
    assert not s.serialize_per_repo
    assert not s.publish_enabled
    assert s.log_level == "INFO"


def test_from_env_overrides(monkeypatch):
    monkeypatch.setenv("WEBHOOK_HOST", "127.0.0.1")
    monkeypatch.setenv("WEBHOOK_PORT", "9000")
    monkeypatch.setenv("WEBHOOK_REPO_PATH", "/srv/mirror")
    monkeypatch.setenv("WEBHOOK_OUTPUT_DIR", "/srv/outbox")
    monkeypatch.setenv("WEBHOOK_ARCHIVE_EXT", ".zip")
    monkeypatch.setenv("WEBHOOK_GIT_TIMEOUT", "12.5")
    monkeypatch.setenv("WEBHOOK_SERIALIZE", "yes")
    monkeypatch.setenv("FTP_ENABLED", "true")
    monkeypatch.setenv("FTP_HOST", "ftp.example.com")
    monkeypatch.setenv("FTP_USER", "deploy")
    monkeypatch.setenv("FTP_REMOTE_DIR", "/incoming")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings.from_env()

    assert (s.host, s.port) == ("127.0.0.1", 9000)
    assert s.repo_path == "/srv/mirror"
    assert s.output_dir == "/srv/outbox"
    assert s.archive_ext == "zip"
    assert s.git_timeout_seconds == 12.5
    assert s.serialize_per_repo
    assert s.publish_enabled
    assert s.ftp_username == "deploy"
    assert s.ftp_remote_dir == "/incoming"
    assert s.log_level == "DEBUG"


def test_bad_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("WEBHOOK_PORT", "http")
    monkeypatch.setenv("WEBHOOK_GIT_TIMEOUT", "soon")

    s = Settings.from_env()

    assert s.port == 10080
    assert s.git_timeout_seconds is None


def test_ftp_requires_host(monkeypatch):
    monkeypatch.setenv("FTP_ENABLED", "1")
    monkeypatch.delenv("FTP_HOST", raising=False)

    assert not Settings.from_env().publish_enabled
