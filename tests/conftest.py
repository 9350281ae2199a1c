import io

import pytest

from tea_util.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def json_body():
    return io.BytesIO(b'{"name": "tea", "count": 2}')
