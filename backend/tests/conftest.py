import pytest

from schemalab.samples import clear_cache


@pytest.fixture(autouse=True)
def fresh_sample_cache():
    clear_cache()
    yield
    clear_cache()
