"""
Instance runtime: private states, public facades, access interception,
operator hooks and class objects.
"""

from .access import base, layers, definition_of
from .factory import ClassObject
from .state import PrivateState, PublicFacade

__all__ = [
    "base",
    "layers",
    "definition_of",
    "ClassObject",
    "PrivateState",
    "PublicFacade",
]
