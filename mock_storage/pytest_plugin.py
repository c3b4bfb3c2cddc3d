"""
pytest fixtures handing out fresh storage areas.

Enable with `pytest_plugins = ["mock_storage.pytest_plugin"]` in a top-level
conftest.py.
"""
import builtins

import pytest

from .globals import StorageArea

@pytest.fixture
def local_storage():
    StorageArea.reset_instance(StorageArea.LOCAL)
    yield StorageArea.get_instance(StorageArea.LOCAL)
    StorageArea.reset_instance(StorageArea.LOCAL)

@pytest.fixture
def session_storage():
    StorageArea.reset_instance(StorageArea.SESSION)
    yield StorageArea.get_instance(StorageArea.SESSION)
    StorageArea.reset_instance(StorageArea.SESSION)

@pytest.fixture
def browser_storage(monkeypatch, local_storage, session_storage):
    """Installs the storage areas as the `localStorage` and `sessionStorage` builtins."""
    monkeypatch.setattr(builtins, StorageArea.LOCAL, local_storage, raising=False)
    monkeypatch.setattr(builtins, StorageArea.SESSION, session_storage, raising=False)
    return local_storage, session_storage
