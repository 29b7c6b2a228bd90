"""
Operator hook installation.

Python looks special methods up on the type, so each class definition gets
its own pair of subclasses: one of PrivateState carrying the raw hooks and
one of PublicFacade carrying forwarders. A forwarder calls the private
hook with the private state, so an operator behaves identically from
either view and always has private-level access.
"""

from typing import Callable, Tuple

from ..model.definition import ClassDefinition
from .state import PrivateState, PublicFacade


def _private_hook(name: str, func: Callable) -> Callable:
    def hook(state, *args, **kwargs):
        return func(state, *args, **kwargs)
    hook.__name__ = name
    hook.__qualname__ = name
    hook.__doc__ = getattr(func, "__doc__", None)
    return hook


def _public_hook(name: str) -> Callable:
    def hook(facade, *args, **kwargs):
        state = object.__getattribute__(facade, "_state")
        return getattr(type(state), name)(state, *args, **kwargs)
    hook.__name__ = name
    hook.__qualname__ = name
    return hook


def build_instance_types(definition: ClassDefinition) -> Tuple[type, type]:
    """Create the (private state type, public facade type) pair for `definition`."""
    private_ns = {"__slots__": ()}
    public_ns = {"__slots__": ()}
    for name, func in definition.operators.items():
        private_ns[name] = _private_hook(name, func)
        public_ns[name] = _public_hook(name)

    state_type = type(f"{definition.name}State", (PrivateState,), private_ns)
    facade_type = type(definition.name, (PublicFacade,), public_ns)
    return state_type, facade_type
