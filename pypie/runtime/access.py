"""
Access interception for private states and public facades.

Every non-special attribute touch on an instance ends up in one of the
functions below. The private side sees everything its class declares; the
public side only sees public methods and statics, plus public methods
inherited from ancestors.

Private read order:  private method, public method, static, stored field.
Public read order:   externally written key, public method or static,
                     (private method -> AccessError), inherited public
                     method, else UndefinedMemberError.
"""

import logging
from types import MethodType
from typing import Any, Iterator

from ..config import settings, warn
from ..errors import AccessError, UndefinedMemberError
from ..model.definition import SUPER_FIELD, ClassDefinition, MemberKind

logger = logging.getLogger(__name__)

EXTERNAL_WRITE_WARNING = (
    "Setting keys for classes from outside is not intended. "
    "Objects will not be able to use new keys."
)


def _slot(obj, name: str) -> Any:
    return object.__getattribute__(obj, name)


def definition_of(obj) -> ClassDefinition:
    """Class definition behind a private state or a public facade."""
    try:
        return _slot(obj, "_definition")
    except AttributeError:
        return _slot(_slot(obj, "_state"), "_definition")


# ----------------------------------------------------------------------------
# Private side
# ----------------------------------------------------------------------------

def read_private(state, key: str) -> Any:
    definition = _slot(state, "_definition")
    kind = definition.kind_of(key)
    if kind is MemberKind.PRIVATE or kind is MemberKind.PUBLIC:
        # Bound to the private state whichever table it came from.
        return MethodType(definition.method(key), state)
    if kind is MemberKind.STATIC:
        return definition.statics[key]
    fields = _slot(state, "_fields")
    try:
        return fields[key]
    except KeyError:
        raise UndefinedMemberError(
            f"{definition.name} has no member {key!r}"
        ) from None


def write_private(state, key: str, value: Any) -> None:
    definition = _slot(state, "_definition")
    if key == SUPER_FIELD:
        raise AccessError(
            f"{SUPER_FIELD!r} is the parent handle of {definition.name} and cannot be assigned"
        )
    if definition.is_static(key):
        definition.statics[key] = value
    else:
        _slot(state, "_fields")[key] = value


def delete_private(state, key: str) -> None:
    if key == SUPER_FIELD:
        raise AccessError(f"{SUPER_FIELD!r} is the parent handle and cannot be deleted")
    fields = _slot(state, "_fields")
    if key not in fields:
        raise UndefinedMemberError(
            f"{_slot(state, '_definition').name} has no field {key!r}"
        )
    del fields[key]


def layers(state) -> Iterator:
    """Yield `state` and then each parent private state up to the root."""
    while state is not None:
        yield state
        state = _slot(state, "_parent")


def base(state):
    """The parent private state of `state` (the explicit form of `self.super`)."""
    parent = _slot(state, "_parent")
    if parent is None:
        raise UndefinedMemberError(
            f"{_slot(state, '_definition').name} does not extend another class"
        )
    return parent


# ----------------------------------------------------------------------------
# Public side
# ----------------------------------------------------------------------------

def _inherits_public(facade, key: str) -> bool:
    """Whether `facade` or any facade above it declares `key` as public."""
    while facade is not None:
        if definition_of(facade).is_public(key):
            return True
        facade = _slot(facade, "_parent")
    return False


def read_public(facade, key: str) -> Any:
    external = _slot(facade, "_external")
    if key in external:
        return external[key]

    state = _slot(facade, "_state")
    definition = _slot(state, "_definition")
    if definition.is_private(key):
        raise AccessError(f"Trying to access private member {key}")
    if definition.is_public(key) or definition.is_static(key):
        return read_private(state, key)

    parent = _slot(facade, "_parent")
    if parent is not None and _inherits_public(parent, key):
        return getattr(parent, key)
    raise UndefinedMemberError(f"Trying to access non existing member {key}")


def write_public(facade, key: str, value: Any) -> None:
    external = _slot(facade, "_external")
    if key in external:
        external[key] = value
        return

    definition = definition_of(facade)
    if definition.is_static(key):
        definition.statics[key] = value
    elif settings.allow_writing:
        # Kept apart from the private state: outside readers see the value,
        # the object's own methods never do.
        external[key] = value
        warn(EXTERNAL_WRITE_WARNING)
    else:
        logger.debug(f"Dropped external write of {key!r} on {definition.name}")


def delete_public(facade, key: str) -> None:
    external = _slot(facade, "_external")
    if key not in external:
        raise AccessError(
            f"Cannot delete member {key} of {definition_of(facade).name} from outside"
        )
    del external[key]
