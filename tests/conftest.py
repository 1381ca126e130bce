import os
import sys
import pytest
from click.testing import CliRunner

# Add project root to sys.path for local imports
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from models.settings import HashingSettings
from services.hashing_service import HashingService

# ────────────────────────────────────────────────
# ENVIRONMENT FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture(autouse=True)
def clear_polysum_env(monkeypatch):
    """Keep POLYSUM_* variables from the developer's shell out of every test."""
    for name in list(os.environ):
        if name.startswith("POLYSUM_"):
            monkeypatch.delenv(name, raising=False)


# ────────────────────────────────────────────────
# FILE FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture
def sample_files(tmp_path):
    """Create a few small files with known contents and return their paths by name."""
    contents = {
        "a.txt": b"hello\n",
        "b.bin": bytes(range(256)) * 64,
        "empty.txt": b"",
    }
    paths = {}
    for name, data in contents.items():
        path = tmp_path / name
        path.write_bytes(data)
        paths[name] = path
    return paths


@pytest.fixture
def work_dir(tmp_path, monkeypatch):
    """Run the test from inside tmp_path so listings can use relative paths."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ────────────────────────────────────────────────
# SERVICE AND CLI FIXTURES
# ────────────────────────────────────────────────

@pytest.fixture
def hashing_service():
    """HashingService with a small chunk size so multi-chunk reads are exercised."""
    return HashingService(chunk_size=1024)


@pytest.fixture
def runner():
    """Fixture providing a Click CliRunner instance."""
    return CliRunner()


@pytest.fixture
def cli_obj(hashing_service):
    """Prepared Click context object as built by the polysum group callback."""
    return {
        "config": {},
        "settings": HashingSettings(),
        "hashing_service": hashing_service,
    }
