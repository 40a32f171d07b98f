from numbers import Number
from typing import Any

from .core import InvalidDecoratorOperation


class Slot(object):

    def __init__(self, target: type):
        self._target = target

    @property
    def target(self) -> type:
        return self._target

    @property
    def key(self) -> str | None:
        return None


class ParameterSlot(Slot):

    def __init__(self, target: type, index: int, property_key: str | None = None):
        super(ParameterSlot, self).__init__(target)
        self._index = index
        self._property_key = property_key

    @property
    def index(self) -> int:
        return self._index

    @property
    def property_key(self) -> str | None:
        return self._property_key

    @property
    def key(self) -> str:
        return str(self._index)

    def __str__(self):
        return f'{self.target.__qualname__}.__init__[{self._index}]'


class PropertySlot(Slot):

    def __init__(self, target: Any, name: str):
        super(PropertySlot, self).__init__(target)
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    @property
    def key(self) -> str:
        return self._name

    def __str__(self):
        owner = self.target if isinstance(self.target, type) else type(self.target)
        return f'{owner.__qualname__}.{self._name}'


class ClassSlot(Slot):

    def __str__(self):
        return self.target.__qualname__


def _is_index(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def classify(target: Any, property_key: Any = None, index_or_descriptor: Any = None) -> Slot:
    """Classifies a decorator call shape as a parameter, property or class-level slot."""
    if property_key is not None and not isinstance(property_key, str):
        raise InvalidDecoratorOperation()
    if _is_index(index_or_descriptor):
        if index_or_descriptor < 0 or not isinstance(target, type):
            raise InvalidDecoratorOperation()
        return ParameterSlot(target, index_or_descriptor, property_key)
    if isinstance(index_or_descriptor, Number):
        raise InvalidDecoratorOperation()
    if property_key is not None:
        return PropertySlot(target, property_key)
    if index_or_descriptor is None and isinstance(target, type):
        return ClassSlot(target)
    raise InvalidDecoratorOperation()


def ensure_parameter_target(slot: Slot) -> type:
    """Returns the class owning the parameter; a parameter tag must not also name a property."""
    if not isinstance(slot, ParameterSlot) or slot.property_key is not None:
        raise InvalidDecoratorOperation()
    return slot.target


def ensure_property_target(slot: Slot) -> type:
    """Returns the class owning the property.

    The class itself is never a property target, but a class together with a member
    name is: Python declares instance members on the class, and __set_name__ only
    reports the owner class.
    """
    if not isinstance(slot, PropertySlot):
        raise InvalidDecoratorOperation()
    if isinstance(slot.target, type):
        return slot.target
    return type(slot.target)
