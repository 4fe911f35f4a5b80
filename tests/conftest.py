import os

import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    for key in list(os.environ):
        if key.startswith('COREBOX_'):
            monkeypatch.delenv(key)
    # keep a stray .env in the repo from leaking into settings
    monkeypatch.chdir(tmp_path)
