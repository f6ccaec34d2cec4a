"""Root test configuration: isolate each test from config.yaml and NBMD_ env vars"""

import pytest

from nbmd.config import Settings


@pytest.fixture(autouse=True)
def clean_env(tmp_path, monkeypatch):
    """Run from an empty tmp directory with no NBMD_* variables set."""
    monkeypatch.chdir(tmp_path)
    for name in Settings.model_fields:
        monkeypatch.delenv(f"NBMD_{name.upper()}", raising=False)
