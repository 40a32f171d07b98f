from typing import Any, Callable

from .metadata import Metadata, MetadataOrMetadataArray, normalize
from .store import MetadataBucket, MetadataStore, get_default_store
from .targets import classify, ensure_parameter_target, ensure_property_target, ParameterSlot


TAGGED_DECORATOR_FLAG = '_tagged_metadata'


TaggedDecorator = Callable[..., Any]


def _store(store: MetadataStore | None) -> MetadataStore:
    return store if store is not None else get_default_store()


def tag_parameter(target: type,
                  parameter_name: str | None,
                  parameter_index: int,
                  metadata: MetadataOrMetadataArray,
                  *,
                  store: MetadataStore | None = None,
                  ) -> tuple[Metadata, ...]:
    owner = ensure_parameter_target(classify(target, parameter_name, parameter_index))
    return _store(store).append_entries(owner, MetadataBucket.PARAMETERS, str(parameter_index), metadata)


def tag_property(target: Any,
                 property_name: str,
                 metadata: MetadataOrMetadataArray,
                 *,
                 store: MetadataStore | None = None,
                 ) -> tuple[Metadata, ...]:
    owner = ensure_property_target(classify(target, property_name))
    return _store(store).append_entries(owner, MetadataBucket.PROPERTIES, property_name, metadata)


class _TaggedMember:
    """Holds a function or descriptor defined in a class body and tags it once its owner and name are known."""

    def __init__(self, decorator: TaggedDecorator, member: Any):
        self._decorator = decorator
        self._member = member

    def __set_name__(self, owner, name):
        setattr(owner, name, self._member)
        set_name = getattr(self._member, '__set_name__', None)
        if set_name is not None:
            set_name(owner, name)
        self._decorator(owner, name, self._member)

    def __call__(self, *args, **kwargs):
        return self._member(*args, **kwargs)

    def __getattr__(self, name):
        if name in ('_decorator', '_member'):
            raise AttributeError(name)
        attribute = getattr(self._member, name)
        if isinstance(self._member, (property, _TaggedMember)) and name in ('getter', 'setter', 'deleter'):
            # Keep the tag on the property rebuilt by @x.setter and friends.
            return lambda func: _TaggedMember(self._decorator, attribute(func))
        return attribute


def _member_qualname(obj: Any) -> str | None:
    for candidate in (obj, getattr(obj, 'fget', None), getattr(obj, '__func__', None)):
        qualname = getattr(candidate, '__qualname__', None)
        if isinstance(qualname, str):
            return qualname
    return None


def _is_member(obj: Any) -> bool:
    """Tells whether obj is a function or descriptor being defined directly in a class body."""
    if isinstance(obj, _TaggedMember):
        return True
    if isinstance(obj, type) or not (callable(obj) or hasattr(obj, '__get__')):
        return False
    scopes = (_member_qualname(obj) or '').split('.')
    return len(scopes) > 1 and scopes[-2] != '<locals>'


def create_tagged_decorator(metadata: MetadataOrMetadataArray, *, store: MetadataStore | None = None) -> TaggedDecorator:
    metadatas = normalize(metadata)

    def _tagged_decorator(target, key=None, index_or_descriptor=None):
        if key is None and index_or_descriptor is None and _is_member(target):
            return _TaggedMember(_tagged_decorator, target)
        slot = classify(target, key, index_or_descriptor)
        if isinstance(slot, ParameterSlot):
            tag_parameter(slot.target, slot.property_key, slot.index, metadatas, store=store)
        else:
            tag_property(slot.target, key, metadatas, store=store)
        return None

    setattr(_tagged_decorator, TAGGED_DECORATOR_FLAG, metadatas)
    return _tagged_decorator


def is_tagged_decorator(obj: Any) -> bool:
    return callable(obj) and isinstance(getattr(obj, TAGGED_DECORATOR_FLAG, None), tuple)


def tagged_metadata(decorator: TaggedDecorator) -> tuple[Metadata, ...]:
    if not is_tagged_decorator(decorator):
        raise ValueError(f'{decorator!r} is not a tagged decorator.')
    return getattr(decorator, TAGGED_DECORATOR_FLAG)


def get_parameter_metadata(target: type, *, store: MetadataStore | None = None) -> dict[str, list[Metadata]]:
    return _store(store).read_bucket(target, MetadataBucket.PARAMETERS)


def get_property_metadata(target: type, *, store: MetadataStore | None = None) -> dict[str, list[Metadata]]:
    return _store(store).read_bucket(target, MetadataBucket.PROPERTIES)
