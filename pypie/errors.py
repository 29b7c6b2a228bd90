"""
Exceptions raised by the pypie object model.

All of them signal programmer errors: they are raised where the problem is
detected and are never caught or retried inside the library.
"""


class PieError(Exception):
    """Base class for every error raised by pypie."""


class DefinitionError(PieError, TypeError):
    """A class body declared something the object model cannot accept."""


class AccessError(PieError, AttributeError):
    """A member exists but is not reachable from the caller's view."""


class UndefinedMemberError(PieError, AttributeError):
    """A member name is not declared anywhere the lookup is allowed to see."""


class UndefinedClassError(PieError, LookupError):
    """A class name was never registered in the catalog."""
