"""Root conftest: shared test configuration."""

import os

# Human-readable logs when tests surface captured output
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("LOG_LEVEL", "DEBUG")
