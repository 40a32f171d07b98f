import logging
import threading
import weakref
from abc import ABC, abstractmethod
from enum import Enum

from .metadata import Metadata, MetadataOrMetadataArray, ensure_no_duplicates


logger = logging.getLogger(__name__)


class MetadataBucket(Enum):
    PARAMETERS = 'tagged'
    PROPERTIES = 'tagged_props'


BucketMapping = dict[str, list[Metadata]]


class MetadataStore(ABC):

    def __init__(self):
        self._lock = threading.RLock()

    @abstractmethod
    def read_bucket(self, target: type, bucket: MetadataBucket) -> BucketMapping:
        raise NotImplementedError()

    @abstractmethod
    def write_bucket(self, target: type, bucket: MetadataBucket, mapping: BucketMapping) -> None:
        raise NotImplementedError()

    @abstractmethod
    def has_metadata(self, target: type, bucket: MetadataBucket) -> bool:
        raise NotImplementedError()

    def read_slot(self, target: type, bucket: MetadataBucket, slot: str) -> list[Metadata]:
        return self.read_bucket(target, bucket).get(slot, [])

    def append_entries(self, target: type, bucket: MetadataBucket, slot: str,
                       metadata: MetadataOrMetadataArray) -> tuple[Metadata, ...]:
        with self._lock:
            mapping = self.read_bucket(target, bucket)
            stored = mapping.get(slot)
            metadatas = ensure_no_duplicates(metadata, stored)
            mapping[slot] = (stored or []) + list(metadatas)
            self.write_bucket(target, bucket, mapping)
        logger.debug('Tagged %s.%s[%s] with %s', target.__qualname__, bucket.value, slot, metadatas)
        return metadatas


class WeakMetadataStore(MetadataStore):
    """Side table keyed weakly by class identity; metadata lives as long as the class does."""

    def __init__(self):
        self._tables: weakref.WeakKeyDictionary[type, dict[MetadataBucket, BucketMapping]] = \
            weakref.WeakKeyDictionary()
        super(WeakMetadataStore, self).__init__()

    def read_bucket(self, target: type, bucket: MetadataBucket) -> BucketMapping:
        with self._lock:
            mapping = self._tables.get(target, {}).get(bucket, {})
            return {slot: list(entries) for (slot, entries) in mapping.items()}

    def write_bucket(self, target: type, bucket: MetadataBucket, mapping: BucketMapping) -> None:
        with self._lock:
            buckets = self._tables.setdefault(target, dict())
            buckets[bucket] = {slot: list(entries) for (slot, entries) in mapping.items()}

    def has_metadata(self, target: type, bucket: MetadataBucket) -> bool:
        with self._lock:
            return bucket in self._tables.get(target, {})


_default_store: MetadataStore = WeakMetadataStore()


def get_default_store() -> MetadataStore:
    return _default_store


def set_default_store(store: MetadataStore) -> MetadataStore:
    """Replaces the process-wide store and returns the previous one."""
    global _default_store
    if not isinstance(store, MetadataStore):
        raise ValueError('store must be of type MetadataStore')
    previous = _default_store
    _default_store = store
    return previous
