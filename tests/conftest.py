"""Root test configuration: isolate config.yaml and MDPREP_* env vars from the developer's setup"""

import pytest

from mdprep.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Remove MDPREP_<FIELD> env vars so load_config sees only what each test sets."""
    for name in Settings.model_fields:
        monkeypatch.delenv(f"MDPREP_{name.upper()}", raising=False)
