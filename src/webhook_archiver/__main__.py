# src/webhook_archiver/__main__.py
from __future__ import annotations
import sys

import uvicorn

from .settings import Settings
from .transports.app import create_app
from .utils.logging import configure_logging, get_logger

def main() -> None:
    """
    Run the webhook listener with uvicorn.

    Examples:
      # default: 0.0.0.0:10080, pulls ./test/webhook-test, writes ZIPs to the cwd
      python -m webhook_archiver

      # different working copy and output directory
      WEBHOOK_REPO_PATH=/srv/mirror WEBHOOK_OUTPUT_DIR=/srv/outbox webhook-archiver

      # enable FTP upload of each ZIP
      FTP_ENABLED=true FTP_HOST=ftp.example.com FTP_USERNAME=u FTP_PASSWORD=p webhook-archiver
    """
    if any(a in ("-h", "--help") for a in sys.argv[1:]):
        sys.stderr.write(
            "webhook-archiver: push-webhook listener (GET /health, POST /webhook); configured via WEBHOOK_*, FTP_*, LOG_* env.\n"
        )
        sys.stderr.flush()
        return

    settings = Settings.from_env()
    configure_logging(settings.log_level, service_name="webhook-archiver", structured=settings.log_json)
    log = get_logger("webhook_archiver.main")

    app = create_app(settings)
    log.info("server.start", host=settings.host, port=settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower(), log_config=None)

if __name__ == "__main__":
    main()
