from pathlib import Path
import sys

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

CREDENTIAL_VARS = (
    "GOOGLE_AI_STUDIO_API_KEY",
    "GOOGLE_AI_API_KEY",
    "OPENAI_API_KEY",
    "PROXY_TIMEOUT_S",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in CREDENTIAL_VARS:
        monkeypatch.delenv(name, raising=False)
