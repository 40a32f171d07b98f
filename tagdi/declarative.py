from inspect import signature, get_annotations, Parameter
from typing import Any, Iterator, TypeVar, get_args

from .decorators import is_tagged_decorator


C = TypeVar('C', bound=type)


def _markers(annotation: Any) -> Iterator[Any]:
    if not hasattr(annotation, '__metadata__'):
        return
    yield from (arg for arg in get_args(annotation)[1:] if is_tagged_decorator(arg))


def _positional_parameters(cls: type) -> list[Parameter]:
    init = cls.__dict__.get('__init__')
    if init is None:
        return []
    parameters = list(signature(init).parameters.values())[1:]  # Skip self.
    return [p for p in parameters if p.kind in {Parameter.POSITIONAL_ONLY, Parameter.POSITIONAL_OR_KEYWORD}]


def tagged_members(cls: C) -> C:
    """Registers the tagged decorators found in Annotated hints of cls.

    Positional parameters of cls.__init__ are tagged by their position and class
    level annotations by their attribute name:

        @tagged_members
        class Ninja:
            shuriken: Annotated[Shuriken, tagged]

            def __init__(self, katana: Annotated[Katana, named]):
                ...

    Hints given as strings (postponed evaluation) are not inspected.
    """
    if not isinstance(cls, type):
        raise ValueError('tagged_members can only decorate classes')
    for (index, parameter) in enumerate(_positional_parameters(cls)):
        for marker in _markers(parameter.annotation):
            marker(cls, None, index)
    for (name, annotation) in get_annotations(cls).items():
        for marker in _markers(annotation):
            marker(cls, name)
    return cls
