import pytest

from mock_storage.core.proxy import create_storage
from mock_storage.core.storage import Storage

pytest_plugins = ["mock_storage.pytest_plugin"]

@pytest.fixture(params=['create_storage()', 'Storage()'])
def storage(request):
    if request.param == 'create_storage()':
        return create_storage()
    return Storage()
