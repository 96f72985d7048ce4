import os
import sys

import pytest

# Ensure repository root importable early
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

from mapgen import ArrayMap, SeededRng  # noqa: E402
from mapgen import logging_utils  # noqa: E402


@pytest.fixture
def grid():
    return ArrayMap(20, 20)


@pytest.fixture
def rng():
    return SeededRng(12345)


@pytest.fixture
def quiet_logs():
    """Silence info-level log lines for tests that parse stdout."""
    logging_utils.configure(level="error", json_mode=False)
    try:
        yield
    finally:
        logging_utils.configure()


@pytest.fixture
def clean_env(monkeypatch):
    """Private copy of os.environ without MAPGEN_* keys; .env loads land in the copy."""
    env = {k: v for k, v in os.environ.items() if not k.startswith("MAPGEN_")}
    monkeypatch.setattr(os, "environ", env)
    return env
