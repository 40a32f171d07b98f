from .core import TaggingException, InvalidDecoratorOperation, DuplicatedMetadata
from .metadata import Metadata, MetadataOrMetadataArray
from .store import MetadataBucket, MetadataStore, WeakMetadataStore, get_default_store, set_default_store
from .decorators import (tag_parameter, tag_property, create_tagged_decorator, is_tagged_decorator, tagged_metadata,
                         get_parameter_metadata, get_property_metadata)
from .decorate import decorate
from .declarative import tagged_members
