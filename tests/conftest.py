import pytest

from graphlab.ids import DEFAULT_ALLOCATOR


@pytest.fixture(autouse=True)
def _fresh_ids():
    DEFAULT_ALLOCATOR.reset()
    yield
    DEFAULT_ALLOCATOR.reset()
