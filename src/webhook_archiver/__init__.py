"""Push-webhook listener that pulls a working copy and zips newly added files per directory."""

import os

# GitPython looks for a git binary at import time; a missing binary is
# reported per request as a failed sync instead of an import error.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

__version__ = "0.1.0"
