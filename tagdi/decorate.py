from typing import Any, Callable

from makefun import wraps


def _param(parameter_index: int, decorator: Callable[..., Any]) -> Callable[..., Any]:

    @wraps(decorator, new_sig='(target, key=None)')
    def _parameter_decorator(target, key=None):
        return decorator(target, key, parameter_index)

    return _parameter_decorator


def decorate(decorator: Callable[..., Any], target: Any, parameter_index_or_property: int | str | None = None) -> Any:
    """Applies a decorator without decorator syntax.

    decorate(tagged, Ninja, 0) tags the first constructor parameter of Ninja,
    decorate(tagged, Ninja, 'weapon') tags its weapon property and
    decorate(injectable, Ninja) applies a class decorator and returns its result.
    """
    if isinstance(parameter_index_or_property, int):
        return _param(parameter_index_or_property, decorator)(target)
    elif isinstance(parameter_index_or_property, str):
        return decorator(target, parameter_index_or_property)
    return decorator(target)
