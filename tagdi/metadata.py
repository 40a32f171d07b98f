from typing import Any, Hashable, Sequence, Union

from .core import DuplicatedMetadata


class Metadata(object):

    __slots__ = ('_key', '_value')

    def __init__(self, key: Hashable, value: Any = None):
        if key is None:
            raise ValueError('metadata key cannot be none')
        self._key = key
        self._value = value

    @property
    def key(self) -> Hashable:
        return self._key

    @property
    def value(self) -> Any:
        return self._value

    def __eq__(self, other):
        if self is other:
            return True
        if not isinstance(other, Metadata):
            return False
        return self.key == other.key and self.value == other.value

    __hash__ = None

    def __iter__(self):
        return iter((self._key, self._value))

    def __repr__(self):
        return f'Metadata({self._key!r}, {self._value!r})'

    def __str__(self):
        return f'{self._key}={self._value}'


MetadataOrMetadataArray = Union[Metadata, Sequence[Metadata]]


def normalize(metadata: MetadataOrMetadataArray) -> tuple[Metadata, ...]:
    if isinstance(metadata, Metadata):
        return (metadata,)
    if isinstance(metadata, (str, bytes)) or not isinstance(metadata, Sequence):
        raise TypeError(f'Expected Metadata or a sequence of Metadata, got {type(metadata).__name__}.')
    if len(metadata) == 0:
        raise ValueError('Cannot register an empty metadata sequence.')
    for m in metadata:
        if not isinstance(m, Metadata):
            raise TypeError(f'Expected Metadata, got {type(m).__name__}.')
    return tuple(metadata)


def first_duplicate(keys: Sequence[Hashable]) -> Hashable | None:
    seen = set()
    for key in keys:
        if key in seen:
            return key
        seen.add(key)
    return None


def ensure_no_duplicates(metadata: MetadataOrMetadataArray,
                         stored: Sequence[Metadata] | None = None,
                         ) -> tuple[Metadata, ...]:
    """Normalizes metadata and rejects keys repeated in it or already present in stored."""
    metadatas = normalize(metadata)
    duplicate = first_duplicate([m.key for m in metadatas])
    if duplicate is not None:
        raise DuplicatedMetadata(duplicate)
    if stored is not None:
        keys = set(m.key for m in metadatas)
        for m in stored:
            if m.key in keys:
                raise DuplicatedMetadata(m.key)
    return metadatas
