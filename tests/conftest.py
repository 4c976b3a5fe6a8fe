"""Root conftest: shared test configuration."""

import os

# Tests never reach a real peer; point settings somewhere harmless
os.environ.setdefault("LEDGER_URL", "http://ledger.test:7050")
os.environ.setdefault("LOG_FORMAT", "text")
