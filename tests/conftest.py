import pytest

from tagdi.store import WeakMetadataStore, set_default_store


@pytest.fixture()
def store():
    """Fresh default store, restored after the test."""
    store = WeakMetadataStore()
    previous = set_default_store(store)
    yield store
    set_default_store(previous)
